"""Shared pytest fixtures and test helpers for vendorctl tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import httpx
import pytest
from click.testing import CliRunner

from vendorctl.config.settings import VendorSettings
from vendorctl.domain.manifest import Manifest
from vendorctl.domain.module import Module
from vendorctl.infrastructure.workspace import Workspace

STD = "https://deno.land/std@v0.50.0"

# Remote sources served by the mock transport, keyed by full URL.
REMOTE_SOURCES: dict[str, str] = {
    f"{STD}/path/mod.ts": "export * from './posix.ts';\nexport default { sep: '/' };\n",
    f"{STD}/fs/mod.ts": "export { exists } from './exists.ts';\n",
    "https://deno.land/std@v0.51.0/path/mod.ts": "export const sep = '/';\n",
    "https://deno.land/std@v0.51.0/fs/mod.ts": "const fs = {};\nexport { fs as default };\n",
}


def mock_transport(
    sources: dict[str, str] | None = None,
    requests: list[str] | None = None,
) -> httpx.MockTransport:
    """A transport answering from *sources* (404 otherwise), recording URLs."""
    table = REMOTE_SOURCES if sources is None else sources

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if requests is not None:
            requests.append(url)
        if url in table:
            return httpx.Response(200, text=table[url])
        return httpx.Response(404, text="not found")

    return httpx.MockTransport(handler)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workspace_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary workspace directory with an empty manifest."""
    monkeypatch.delenv("VENDORCTL_CONFIG", raising=False)
    (tmp_path / "vendorctl.json").write_text('{"modules": [], "aliases": {}}\n')
    return tmp_path


@pytest.fixture
def fetched() -> list[str]:
    """URLs requested through the mock transport."""
    return []


@pytest.fixture
def workspace(workspace_root: Path, fetched: list[str]) -> Workspace:
    """Workspace on a temp directory whose HTTP traffic hits the mock transport."""
    settings = VendorSettings.from_cli(workspace_root=workspace_root)
    return Workspace(settings, transport=mock_transport(requests=fetched))


@pytest.fixture
def _isolated_workspace(
    workspace_root: Path, fetched: list[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    """Change CWD to the temp workspace and route CLI HTTP to the mock transport.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes.
    """
    import vendorctl.infrastructure.workspace as workspace_module

    real_builder = workspace_module.build_async_client

    def fake_builder(network: Any, *, transport: Any = None) -> httpx.AsyncClient:
        return real_builder(network, transport=mock_transport(requests=fetched))

    monkeypatch.setattr(workspace_module, "build_async_client", fake_builder)
    monkeypatch.chdir(workspace_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_module(url: str, *files: str) -> Module:
    """Build a Module from ``protocol://path[@version]`` plus linked files."""
    from vendorctl.domain.module import parse_module_url

    parsed = parse_module_url(url)
    return Module(
        protocol=parsed.protocol,
        path=parsed.path,
        version=parsed.version,
        files=list(files),
    )


def make_manifest(*modules: Module, aliases: dict[str, str] | None = None) -> Manifest:
    return Manifest(modules=list(modules), aliases=dict(aliases or {}))


class RecordingRepository:
    """Repository fake that records every call in order."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    async def remove_module(self, protocol: str, path: str) -> None:
        self.calls.append(("remove_module", protocol, path))

    async def add_link(
        self, protocol: str, path: str, version: str, file_path: str, has_default: bool
    ) -> None:
        self.calls.append(("add_link", protocol, path, version, file_path, has_default))

    async def remove_link(self, protocol: str, path: str, file_path: str) -> None:
        self.calls.append(("remove_link", protocol, path, file_path))

    async def update_link(
        self, protocol: str, path: str, version: str, file_path: str, has_default: bool
    ) -> None:
        self.calls.append(("update_link", protocol, path, version, file_path, has_default))

    async def add_alias(
        self, protocol: str, path: str, file_path: str, alias_path: str, has_default: bool
    ) -> None:
        self.calls.append(("add_alias", protocol, path, file_path, alias_path, has_default))

    async def remove_alias(self, alias_path: str) -> None:
        self.calls.append(("remove_alias", alias_path))


class FakeInspector:
    """Export inspector fake with canned answers.

    Remote URLs missing from *remote* default to False. Local paths
    missing from *local* raise FileNotFoundError, like an unvendored file.
    """

    def __init__(
        self,
        remote: dict[str, bool] | None = None,
        local: dict[Path, bool | Exception] | None = None,
    ) -> None:
        self.remote = remote or {}
        self.local = local or {}
        self.remote_calls: list[str] = []
        self.local_calls: list[Path] = []

    async def has_default_export_remote(self, url: str) -> bool:
        self.remote_calls.append(url)
        return self.remote.get(url, False)

    async def has_default_export_local(self, path: Path) -> bool:
        self.local_calls.append(path)
        if path not in self.local:
            raise FileNotFoundError(path)
        answer = self.local[path]
        if isinstance(answer, Exception):
            raise answer
        return answer
