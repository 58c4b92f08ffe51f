"""Manifest mutation and workspace synchronization for action batches.

Two phases run for every batch, in order:

1. :func:`mutate_manifest`: synchronous, memory only. Applies the actions
   to a copy of the manifest, enforcing uniqueness and ownership rules,
   then re-sorts everything so serialization is deterministic.
2. :func:`synchronize`: asynchronous. Replays the same actions in the
   caller's order against the export inspector and the repository,
   resolving module ownership from the *post-mutation* manifest.

INVARIANT: the first failing action aborts the batch. The mutator never
touches the caller's manifest; the sync phase performs no rollback of
side effects already applied.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, assert_never

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
from vendorctl.domain.errors import (
    AliasExistsError,
    AliasNotFoundError,
    DuplicateModuleError,
    LinkNotFoundError,
    MissingModuleError,
)
from vendorctl.domain.module import (
    Module,
    create_url,
    find_exact_module,
    find_module,
    module_equals,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from vendorctl.domain.manifest import Manifest
    from vendorctl.services.contracts import ExportInspector, Repository

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Ownership resolution (shared by both phases)
# ---------------------------------------------------------------------------


def _resolve_link(modules: Sequence[Module], link: str, op: str) -> tuple[Module, str]:
    """Return ``(owner, file_path)`` for a link string or alias target."""
    found = find_module(modules, link)
    if found is None:
        msg = f"{op}: module not found for: {link}"
        raise MissingModuleError(msg)
    return found


def _resolve_exact(modules: Sequence[Module], protocol: str, path: str, op: str) -> Module:
    module = find_exact_module(modules, protocol, path)
    if module is None:
        msg = f"{op}: module not found for: {protocol}://{path}"
        raise MissingModuleError(msg)
    return module


# ---------------------------------------------------------------------------
# Phase 1: in-memory mutation
# ---------------------------------------------------------------------------


def mutate_manifest(manifest: Manifest, actions: Sequence[Action]) -> Manifest:
    """Apply *actions* to a copy of *manifest* and return the copy.

    Raises a :class:`~vendorctl.domain.errors.VendorError` subclass on the
    first invalid action. The returned manifest has modules sorted, each
    module's files sorted, and aliases ordered by key.
    """
    result = manifest.duplicate()
    modules = result.modules
    aliases = result.aliases

    for action in actions:
        match action:
            case AddModule(module=module):
                for existing in modules:
                    if module_equals(existing, module):
                        msg = (
                            f"module already exists: {module}\n"
                            "to change its version, use 'vendorctl update'."
                        )
                        raise DuplicateModuleError(msg)
                modules.append(module.copy())

            case RemoveModule(protocol=protocol, path=path):
                probe = f"{protocol}://{path}"
                found = find_module(modules, probe, key=lambda m: m.identity)
                if found is None:
                    msg = f"remove module: module not found for: {probe}"
                    raise MissingModuleError(msg)
                # Aliases pointing into the module are left in place.
                modules.remove(found[0])

            case AddLink(link=link):
                module, file_path = _resolve_link(modules, link, "add link")
                if file_path not in module.files:
                    module.files.append(file_path)

            case RemoveLink(link=link):
                module, file_path = _resolve_link(modules, link, "remove link")
                if file_path not in module.files:
                    msg = f"file not linked: {link}"
                    raise LinkNotFoundError(msg)
                module.files.remove(file_path)

            case AddAlias(alias_path=alias_path, alias_target_path=target):
                if alias_path in aliases:
                    msg = (
                        f"alias already exists for: {alias_path}. "
                        "run 'vendorctl unalias' first."
                    )
                    raise AliasExistsError(msg)
                _resolve_link(modules, target, "add alias")
                aliases[alias_path] = target

            case RemoveAlias(alias_path=alias_path):
                if alias_path not in aliases:
                    msg = f"alias does not exist for: {alias_path}"
                    raise AliasNotFoundError(msg)
                del aliases[alias_path]

            case UpdateModule(protocol=protocol, path=path, version=version):
                module = _resolve_exact(modules, protocol, path, "update module")
                module.version = version

            case _:
                assert_never(action)

    result.normalize()
    return result


# ---------------------------------------------------------------------------
# Phase 2: workspace synchronization
# ---------------------------------------------------------------------------


async def _local_default_export(inspector: ExportInspector, path: Path) -> bool:
    """Local inspection; a file that is not vendored yet has no default export."""
    try:
        return await inspector.has_default_export_local(path)
    except FileNotFoundError:
        logger.debug("Local file not vendored yet, assuming no default export: %s", path)
        return False


async def synchronize(
    repository: Repository,
    manifest: Manifest,
    actions: Sequence[Action],
    inspector: ExportInspector,
    *,
    vendor_root: Path,
) -> None:
    """Replay *actions* against the repository, one at a time, in order.

    *manifest* must be the result of :func:`mutate_manifest` for the same
    actions. Any exception aborts the remaining actions and propagates.
    """
    modules = manifest.modules
    for action in actions:
        logger.debug("sync %s", action.type)
        match action:
            case AddModule():
                # Vendoring happens lazily through links.
                pass

            case RemoveModule(protocol=protocol, path=path):
                await repository.remove_module(protocol, path)

            case AddLink(link=link):
                module, file_path = _resolve_link(modules, link, "add link")
                url = create_url(module.protocol, module.path, module.version, file_path)
                has_default = await inspector.has_default_export_remote(url)
                await repository.add_link(
                    module.protocol, module.path, module.version, file_path, has_default
                )

            case RemoveLink(link=link):
                module, file_path = _resolve_link(modules, link, "remove link")
                await repository.remove_link(module.protocol, module.path, file_path)

            case AddAlias(alias_path=alias_path, alias_target_path=target):
                module, file_path = _resolve_link(modules, target, "add alias")
                local = vendor_root / module.protocol / module.path / file_path.lstrip("/")
                has_default = await _local_default_export(inspector, local)
                await repository.add_alias(
                    module.protocol, module.path, file_path, alias_path, has_default
                )

            case RemoveAlias(alias_path=alias_path):
                await repository.remove_alias(alias_path)

            case UpdateModule(protocol=protocol, path=path, version=version):
                module = _resolve_exact(modules, protocol, path, "update module")
                for file_path in module.files:
                    url = create_url(protocol, path, version, file_path)
                    has_default = await inspector.has_default_export_remote(url)
                    await repository.update_link(protocol, path, version, file_path, has_default)

            case _:
                assert_never(action)
