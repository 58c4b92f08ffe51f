"""Workspace — the single dependency injected into every service.

Owns the manifest location, the vendor tree (through
:class:`FileRepository`), and the HTTP client used for export inspection.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from vendorctl.infrastructure.exports import ExportInspector
from vendorctl.infrastructure.net import build_async_client
from vendorctl.infrastructure.repository import FileRepository
from vendorctl.infrastructure.store import load_manifest, save_manifest

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from pathlib import Path

    import httpx

    from vendorctl.config.settings import VendorSettings
    from vendorctl.domain.manifest import Manifest

logger = logging.getLogger(__name__)


class Workspace:
    """A project directory holding a manifest and its vendor tree."""

    def __init__(
        self,
        settings: VendorSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings
        self.root = settings.workspace_root
        self.repository = FileRepository(self.root, settings.vendor.dir)
        self._transport = transport

    @property
    def manifest_path(self) -> Path:
        return self.root / self.settings.vendor.manifest

    @property
    def vendor_root(self) -> Path:
        return self.repository.vendor_root

    def load(self) -> Manifest:
        return load_manifest(self.manifest_path)

    def save(self, manifest: Manifest) -> None:
        save_manifest(self.manifest_path, manifest)
        logger.debug("Saved manifest %s", self.manifest_path)

    @asynccontextmanager
    async def open_inspector(self) -> AsyncIterator[ExportInspector]:
        """Yield an inspector whose HTTP client lives for one batch."""
        async with build_async_client(
            self.settings.network, transport=self._transport
        ) as client:
            yield ExportInspector(client)
