"""Collaborator protocols and typed payload contracts for the service layer.

The protocols describe the narrow interfaces the workspace sync depends
on; :class:`~vendorctl.infrastructure.repository.FileRepository` and
:class:`~vendorctl.infrastructure.exports.ExportInspector` satisfy them
structurally, and tests substitute recording fakes.

The payload models validate result shapes before they leave the service
layer so key regressions fail fast in tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, TypeVar

from pydantic import BaseModel, ConfigDict


class Repository(Protocol):
    """Physical persistence of links, aliases, and module vendor trees."""

    async def remove_module(self, protocol: str, path: str) -> None: ...

    async def add_link(
        self, protocol: str, path: str, version: str, file_path: str, has_default: bool
    ) -> None: ...

    async def remove_link(self, protocol: str, path: str, file_path: str) -> None: ...

    async def update_link(
        self, protocol: str, path: str, version: str, file_path: str, has_default: bool
    ) -> None: ...

    async def add_alias(
        self, protocol: str, path: str, file_path: str, alias_path: str, has_default: bool
    ) -> None: ...

    async def remove_alias(self, alias_path: str) -> None: ...


class ExportInspector(Protocol):
    """Answers whether a remote or local source file has a default export."""

    async def has_default_export_remote(self, url: str) -> bool: ...

    async def has_default_export_local(self, path: Path) -> bool:
        """Raises FileNotFoundError when *path* does not exist."""
        ...


T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ModuleItem(BaseModel):
    """One module row in a manifest listing."""

    model_config = ConfigDict(extra="forbid")

    url: str
    protocol: str
    path: str
    version: str
    files: list[str]


class ManifestData(BaseModel):
    """Payload contract for ``VendorService.show``."""

    count: int
    modules: list[ModuleItem]
    aliases: dict[str, str]


class BatchData(BaseModel):
    """Payload contract for every mutating ``VendorService`` operation."""

    model_config = ConfigDict(extra="allow")

    actions: list[str]
    modules: int
    aliases: int


class EnsureData(BaseModel):
    """Payload contract for ``VendorService.ensure``."""

    links: int
    aliases: int
