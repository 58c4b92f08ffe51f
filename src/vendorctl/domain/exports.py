"""Default-export detection and re-export file rendering.

Pure functions, no infrastructure dependencies. Consumed by the export
inspector (detection) and the file repository (rendering).
"""

from __future__ import annotations

import re

# Block comments first, then line comments not preceded by ':' (keeps URLs).
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_LINE_COMMENT = re.compile(r"(?<![:\\])//[^\n]*")

# export default function / class / expression
_EXPORT_DEFAULT = re.compile(r"(?m)^\s*export\s+default\b")
# export { foo as default } / export { default } from "..." / export { default as default }
_EXPORT_BRACES = re.compile(r"\bexport\s*(?:type\s*)?\{([^}]*)\}")
_DEFAULT_SPECIFIER = re.compile(r"(?:^|,)\s*(?:[\w$]+\s+as\s+)?default\s*(?:,|$)")


def strip_comments(source: str) -> str:
    """Remove ``/* */`` and ``//`` comments from JavaScript/TypeScript source."""
    source = _BLOCK_COMMENT.sub("", source)
    return _LINE_COMMENT.sub("", source)


def has_default_export(source: str) -> bool:
    """Return True if *source* exposes a ``default`` export.

    Recognizes ``export default ...``, ``export { x as default }`` and
    ``export { default } from "..."``. Type-only exports are ignored.
    """
    code = strip_comments(source)
    if _EXPORT_DEFAULT.search(code):
        return True
    for match in _EXPORT_BRACES.finditer(code):
        if match.group(0).split("{", 1)[0].rstrip().endswith("type"):
            continue
        if _DEFAULT_SPECIFIER.search(match.group(1)):
            return True
    return False


def render_reexport(target: str, *, has_default: bool) -> str:
    """Render a module that re-exports everything from *target*.

    ``export *`` never forwards the default binding, so it is re-exported
    explicitly when the target has one.
    """
    lines = [f'export * from "{target}";']
    if has_default:
        lines.append(f'export {{ default }} from "{target}";')
    return "\n".join(lines) + "\n"
