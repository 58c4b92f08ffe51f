"""Export inspector backed by HTTP (remote) and the filesystem (local)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from vendorctl.domain.errors import ExportInspectionError
from vendorctl.domain.exports import has_default_export
from vendorctl.infrastructure.net import fetch_source

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class ExportInspector:
    """Detect default exports of module files.

    Remote failures are wrapped into :class:`ExportInspectionError`.
    A missing local file raises ``FileNotFoundError`` unchanged so the
    caller can decide whether that is tolerable.
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    async def has_default_export_remote(self, url: str) -> bool:
        try:
            source = await fetch_source(self._client, url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            msg = f"failed to inspect exports of {url}: {exc}"
            raise ExportInspectionError(msg) from exc
        result = has_default_export(source)
        logger.debug("Remote default export for %s: %s", url, result)
        return result

    async def has_default_export_local(self, path: Path) -> bool:
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"failed to inspect exports of {path}: {exc}"
            raise ExportInspectionError(msg) from exc
        return has_default_export(source)
