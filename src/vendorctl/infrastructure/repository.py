"""Filesystem repository — link files, alias files, and module vendor trees.

Layout under the workspace root::

    <vendor>/<protocol>/<module path>/<file path>   link file, re-exports the remote URL
    <alias path>                                    alias file, re-exports the link file

INVARIANT: every write stays inside the workspace root. Removing a file
that is already gone is a no-op, so replaying a batch is safe.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from vendorctl.domain.errors import WorkspacePathError
from vendorctl.domain.exports import render_reexport
from vendorctl.domain.module import create_url

logger = logging.getLogger(__name__)


class FileRepository:
    """Persist the workspace side of a manifest as plain re-export files."""

    def __init__(self, root: Path, vendor_dir: str = "vendor") -> None:
        self.root = root
        self.vendor_root = root / vendor_dir

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def module_dir(self, protocol: str, path: str) -> Path:
        return self._inside(self.vendor_root / protocol / path)

    def link_path(self, protocol: str, path: str, file_path: str) -> Path:
        return self._inside(self.module_dir(protocol, path) / file_path.lstrip("/"))

    def alias_file(self, alias_path: str) -> Path:
        return self._inside(self.root / alias_path)

    def _inside(self, path: Path) -> Path:
        # Guard against traversal via crafted module paths or alias paths
        if not path.resolve().is_relative_to(self.root.resolve()):
            msg = f"Path escapes workspace root: {path}"
            raise WorkspacePathError(msg)
        return path

    # ------------------------------------------------------------------
    # Modules
    # ------------------------------------------------------------------

    async def remove_module(self, protocol: str, path: str) -> None:
        target = self.module_dir(protocol, path)
        if target.exists():
            shutil.rmtree(target)
            logger.info("Removed module tree %s", target)
        self._prune_empty_parents(target)

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    async def add_link(
        self, protocol: str, path: str, version: str, file_path: str, has_default: bool
    ) -> None:
        self._write_link(protocol, path, version, file_path, has_default)

    async def update_link(
        self, protocol: str, path: str, version: str, file_path: str, has_default: bool
    ) -> None:
        self._write_link(protocol, path, version, file_path, has_default)

    async def remove_link(self, protocol: str, path: str, file_path: str) -> None:
        target = self.link_path(protocol, path, file_path)
        target.unlink(missing_ok=True)
        self._prune_empty_parents(target)

    def _write_link(
        self, protocol: str, path: str, version: str, file_path: str, has_default: bool
    ) -> None:
        target = self.link_path(protocol, path, file_path)
        url = create_url(protocol, path, version, file_path)
        _write(target, render_reexport(url, has_default=has_default))
        logger.info("Linked %s -> %s", target, url)

    # ------------------------------------------------------------------
    # Aliases
    # ------------------------------------------------------------------

    async def add_alias(
        self, protocol: str, path: str, file_path: str, alias_path: str, has_default: bool
    ) -> None:
        alias = self.alias_file(alias_path)
        link = self.link_path(protocol, path, file_path)
        relative = Path(os.path.relpath(link, alias.parent)).as_posix()
        if not relative.startswith("."):
            relative = f"./{relative}"
        _write(alias, render_reexport(relative, has_default=has_default))
        logger.info("Aliased %s -> %s", alias, relative)

    async def remove_alias(self, alias_path: str) -> None:
        self.alias_file(alias_path).unlink(missing_ok=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _prune_empty_parents(self, path: Path) -> None:
        """Remove empty directories from *path*'s parent up to the vendor root."""
        current = path.parent
        while current != self.vendor_root and current.is_relative_to(self.vendor_root):
            if not current.is_dir() or any(current.iterdir()):
                break
            current.rmdir()
            current = current.parent


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
