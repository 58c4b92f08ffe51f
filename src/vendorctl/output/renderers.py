"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from vendorctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from vendorctl.services.result import ServiceResult

    Renderer = Callable[[ServiceResult, Console], None]


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    # For listings, one module URL per line
    modules = result.data.get("modules")
    if isinstance(modules, list):
        return "\n".join(str(m.get("url", "")) for m in modules)

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="vendor.ok")
    op = Text(f"  {result.op}", style="vendor.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="vendor.key")
    style = "vendor.path" if key in ("manifest", "path") else ""
    if isinstance(value, (dict, list)):
        value = json.dumps(value, separators=(",", ":"))
    console.print(k, Text(str(value), style=style), end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="vendor.error")
    op = Text(f"  {result.op}", style="vendor.op")
    code = Text(f" [{err.code}]" if err else "", style="dim")
    console.print(label, op, code, Text(" — "), msg)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Operation renderers ───────────────────────────────────────────────


def _render_batch(result: ServiceResult, console: Console) -> None:
    """Render add/remove/link/unlink/alias/unalias/update results."""
    _status_line(console, result)
    d = result.data
    _field(console, "actions", len(d.get("actions", [])))
    _field(console, "modules", d.get("modules", 0))
    _field(console, "aliases", d.get("aliases", 0))


def _render_show(result: ServiceResult, console: Console) -> None:
    """Render the manifest as a module table plus an alias table."""
    modules: list[dict[str, Any]] = result.data.get("modules", [])
    aliases: dict[str, str] = result.data.get("aliases", {})

    if not modules:
        console.print(Text("No modules vendored.", style="dim"))
    else:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Module", style="vendor.url", no_wrap=True)
        table.add_column("Version", style="vendor.version")
        table.add_column("Files")
        for module in modules:
            files = module.get("files", [])
            table.add_row(
                f"{module['protocol']}://{module['path']}",
                module.get("version") or "-",
                "\n".join(files) if files else "-",
            )
        console.print(table)

    if aliases:
        console.print()
        alias_table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        alias_table.add_column("Alias", style="vendor.path", no_wrap=True)
        alias_table.add_column("Target")
        for alias_path, target in aliases.items():
            alias_table.add_row(alias_path, target)
        console.print(alias_table)


def _render_ensure(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    _field(console, "links", result.data.get("links", 0))
    _field(console, "aliases", result.data.get("aliases", 0))


def _render_generic(result: ServiceResult, console: Console) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Renderer] = {
    "add": _render_batch,
    "remove": _render_batch,
    "link": _render_batch,
    "unlink": _render_batch,
    "alias": _render_batch,
    "unalias": _render_batch,
    "update": _render_batch,
    "ensure": _render_ensure,
    "show": _render_show,
    "init": _render_generic,
}
