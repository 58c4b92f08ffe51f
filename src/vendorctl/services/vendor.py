"""VendorService — manifest batches, workspace sync, and listing.

Pipeline for every mutating operation:
LOAD → MUTATE → SYNCHRONIZE → SAVE → RESPOND

The manifest is saved only after the workspace sync succeeded. A failed
sync may leave some files written; ``ensure`` reconciles the workspace
with the saved manifest.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from vendorctl.domain.actions import (
    Action,
    AddAlias,
    AddLink,
    AddModule,
    RemoveAlias,
    RemoveLink,
    RemoveModule,
    UpdateModule,
)
from vendorctl.domain.errors import InvalidModuleURLError, VendorError
from vendorctl.domain.manifest import Manifest
from vendorctl.domain.module import Module, parse_module_url
from vendorctl.services.base import BaseService
from vendorctl.services.contracts import BatchData, EnsureData, ManifestData, dump_validated
from vendorctl.services.mutations import mutate_manifest, synchronize
from vendorctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class VendorService(BaseService):
    """Applies user requests to the manifest and the vendor tree."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def init(self) -> ServiceResult:
        """Create an empty manifest in the workspace root."""
        op = "init"
        path = self._workspace.manifest_path
        if path.exists():
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="ALREADY_INITIALIZED",
                    message=f"manifest already exists: {path}",
                ),
            )
        self._workspace.save(Manifest())
        return ServiceResult(ok=True, op=op, data={"manifest": str(path)})

    def add(self, urls: Sequence[str]) -> ServiceResult:
        """Register modules from ``protocol://path@version`` URLs."""
        warnings: list[str] = []
        actions: list[Action] = []
        try:
            for url in urls:
                parsed = parse_module_url(url)
                if parsed.file_path:
                    warnings.append(f"File path ignored, use 'link' to link it: {url}")
                module = Module(protocol=parsed.protocol, path=parsed.path, version=parsed.version)
                actions.append(AddModule(module=module))
        except InvalidModuleURLError as exc:
            return ServiceResult.failure("add", exc)
        return self._apply("add", actions, warnings=warnings)

    def remove(self, urls: Sequence[str]) -> ServiceResult:
        """Remove modules and their vendor trees. Aliases are kept."""
        actions: list[Action] = []
        try:
            for url in urls:
                parsed = parse_module_url(url)
                actions.append(RemoveModule(protocol=parsed.protocol, path=parsed.path))
        except InvalidModuleURLError as exc:
            return ServiceResult.failure("remove", exc)
        return self._apply("remove", actions)

    def link(self, links: Sequence[str]) -> ServiceResult:
        """Link files (``<module url>/<file>``) into the vendor tree."""
        return self._apply("link", [AddLink(link=link) for link in links])

    def unlink(self, links: Sequence[str]) -> ServiceResult:
        return self._apply("unlink", [RemoveLink(link=link) for link in links])

    def alias(self, target: str, alias_path: str) -> ServiceResult:
        """Create a local alias file re-exporting a module file."""
        action = AddAlias(alias_path=alias_path, alias_target_path=target)
        return self._apply("alias", [action])

    def unalias(self, alias_paths: Sequence[str]) -> ServiceResult:
        return self._apply("unalias", [RemoveAlias(alias_path=p) for p in alias_paths])

    def update(self, urls: Sequence[str]) -> ServiceResult:
        """Re-pin modules to the version given in each URL and relink their files."""
        op = "update"
        actions: list[Action] = []
        try:
            for url in urls:
                parsed = parse_module_url(url)
                if not parsed.version:
                    msg = f"update needs an explicit version: {url}"
                    raise InvalidModuleURLError(msg)
                actions.append(
                    UpdateModule(protocol=parsed.protocol, path=parsed.path, version=parsed.version)
                )
        except InvalidModuleURLError as exc:
            return ServiceResult.failure(op, exc)
        return self._apply(op, actions)

    def ensure(self) -> ServiceResult:
        """Rewrite every link and alias file from the saved manifest.

        Aliases are rebuilt against the current version of their module.
        Aliases whose target module is gone are skipped with a warning.
        """
        op = "ensure"
        warnings: list[str] = []
        try:
            manifest = self._workspace.load()
        except VendorError as exc:
            return ServiceResult.failure(op, exc)

        actions: list[Action] = [
            AddLink(link=f"{module}{file_path}")
            for module in manifest.modules
            for file_path in module.files
        ]
        link_count = len(actions)
        for alias_path, target in manifest.aliases.items():
            owned = _alias_owner(manifest.modules, target)
            if owned is None:
                warnings.append(f"Dangling alias skipped: {alias_path} -> {target}")
                continue
            module, file_path = owned
            # Rebuilt against the current version; the saved target is kept.
            rebuilt = AddAlias(alias_path=alias_path, alias_target_path=f"{module}{file_path}")
            actions.append(rebuilt)

        try:
            asyncio.run(self._synchronize(manifest, actions))
        except VendorError as exc:
            return ServiceResult.failure(op, exc)

        data = {"links": link_count, "aliases": len(actions) - link_count}
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(EnsureData, data),
            warnings=warnings,
        )

    def show(self) -> ServiceResult:
        """List modules, their linked files, and aliases."""
        op = "show"
        try:
            manifest = self._workspace.load()
        except VendorError as exc:
            return ServiceResult.failure(op, exc)

        warnings = [
            f"Dangling alias: {alias_path} -> {target}"
            for alias_path, target in manifest.aliases.items()
            if _alias_owner(manifest.modules, target) is None
        ]
        data: dict[str, Any] = {
            "count": len(manifest.modules),
            "modules": [
                {
                    "url": module.url,
                    "protocol": module.protocol,
                    "path": module.path,
                    "version": module.version,
                    "files": list(module.files),
                }
                for module in manifest.modules
            ],
            "aliases": dict(manifest.aliases),
        }
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(ManifestData, data),
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _apply(
        self,
        op: str,
        actions: Sequence[Action],
        *,
        warnings: list[str] | None = None,
    ) -> ServiceResult:
        """LOAD → MUTATE → SYNCHRONIZE → SAVE → RESPOND."""
        try:
            current = self._workspace.load()
            updated = mutate_manifest(current, actions)
            asyncio.run(self._synchronize(updated, actions))
        except VendorError as exc:
            logger.debug("%s failed: %s", op, exc)
            return ServiceResult.failure(op, exc)

        self._workspace.save(updated)
        data = {
            "actions": [str(action.type) for action in actions],
            "modules": len(updated.modules),
            "aliases": len(updated.aliases),
        }
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(BatchData, data),
            warnings=warnings or [],
        )

    async def _synchronize(self, manifest: Manifest, actions: Sequence[Action]) -> None:
        async with self._workspace.open_inspector() as inspector:
            await synchronize(
                self._workspace.repository,
                manifest,
                actions,
                inspector,
                vendor_root=self._workspace.vendor_root,
            )


def _alias_owner(modules: Sequence[Module], target: str) -> tuple[Module, str] | None:
    """Resolve an alias target to ``(module, file_path)`` by module identity.

    ``update`` re-pins a module without rewriting alias targets, so the
    version carried by *target* may be stale. The owner is the module whose
    ``protocol://path`` is followed by ``@<version>`` or a file path.
    """
    for module in modules:
        if not target.startswith(module.identity):
            continue
        rest = target[len(module.identity) :]
        if rest.startswith("@"):
            _version, slash, file_part = rest.partition("/")
            return module, f"{slash}{file_part}"
        if not rest or rest.startswith("/"):
            return module, rest
    return None
