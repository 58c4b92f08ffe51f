"""Module records, URL construction/parsing, and ownership resolution.

Pure functions, no infrastructure dependencies.

A module is identified by ``protocol://path``. Link strings and alias
targets carry the versioned form ``protocol://path@version`` followed by
the linked file path, e.g. ``https://deno.land/std@v0.50.0/path/mod.ts``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from vendorctl.domain.errors import InvalidModuleURLError

_SCHEME_SEP = "://"


@dataclass
class Module:
    """One vendored remote dependency pinned to a version."""

    protocol: str
    path: str
    version: str = ""
    files: list[str] = field(default_factory=list)

    @property
    def identity(self) -> str:
        """``protocol://path``, version and files excluded."""
        return f"{self.protocol}{_SCHEME_SEP}{self.path}"

    @property
    def url(self) -> str:
        """Versioned module URL, the prefix of every link into this module."""
        if not self.version:
            return self.identity
        return f"{self.identity}@{self.version}"

    def __str__(self) -> str:
        return self.url

    def copy(self) -> Module:
        return Module(
            protocol=self.protocol,
            path=self.path,
            version=self.version,
            files=list(self.files),
        )


@dataclass(frozen=True)
class ModuleURL:
    """Components of a parsed module URL."""

    protocol: str
    path: str
    version: str = ""
    file_path: str = ""


def module_equals(a: Module, b: Module) -> bool:
    """Two modules are equal when protocol and path match (version ignored)."""
    return a.protocol == b.protocol and a.path == b.path


def module_sort_key(module: Module) -> tuple[str, str, str]:
    """Deterministic manifest order: protocol, then path, then version."""
    return (module.protocol, module.path, module.version)


def create_url(protocol: str, path: str, version: str, file_path: str) -> str:
    """Compose the canonical fetch URL for a file inside a module."""
    base = f"{protocol}{_SCHEME_SEP}{path}"
    if version:
        base = f"{base}@{version}"
    return f"{base}{file_path}"


def parse_module_url(url: str) -> ModuleURL:
    """Split ``protocol://path[@version][/file]`` into its components.

    Without an ``@`` the whole remainder is the module path.

    Examples:
        >>> parse_module_url("https://deno.land/std@v0.50.0/path/mod.ts")
        ModuleURL(protocol='https', path='deno.land/std', version='v0.50.0', file_path='/path/mod.ts')
    """
    protocol, sep, rest = url.partition(_SCHEME_SEP)
    if not sep or not protocol:
        msg = f"missing protocol in module URL: {url!r}"
        raise InvalidModuleURLError(msg)

    path, at, tail = rest.partition("@")
    path = path.rstrip("/")
    if not path:
        msg = f"missing module path in URL: {url!r}"
        raise InvalidModuleURLError(msg)
    if not at:
        return ModuleURL(protocol=protocol, path=path)

    version, slash, file_part = tail.partition("/")
    if not version:
        msg = f"empty version in module URL: {url!r}"
        raise InvalidModuleURLError(msg)
    file_path = f"/{file_part}" if slash else ""
    return ModuleURL(protocol=protocol, path=path, version=version, file_path=file_path)


def find_module(
    modules: Iterable[Module],
    probe: str,
    *,
    key: Callable[[Module], str] = str,
) -> tuple[Module, str] | None:
    """Find the first module, in list order, whose key is a prefix of *probe*.

    Returns ``(module, remainder)`` where *remainder* is *probe* with the
    module key stripped, or None when no module owns the probe. The key
    defaults to the versioned module URL; pass ``key=lambda m: m.identity``
    to match regardless of version.

    When several modules qualify (``p://a`` and ``p://a/b`` both prefix
    ``p://a/b/file.ts``) the earliest one in *modules* wins.
    """
    for module in modules:
        prefix = key(module)
        if probe.startswith(prefix):
            return module, probe[len(prefix) :]
    return None


def find_exact_module(modules: Iterable[Module], protocol: str, path: str) -> Module | None:
    """Find the module with exactly this protocol and path."""
    for module in modules:
        if module.protocol == protocol and module.path == path:
            return module
    return None
