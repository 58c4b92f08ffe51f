"""BaseService — abstract foundation for vendorctl services.

Every service receives a :class:`Workspace` at construction time. The
workspace provides manifest I/O, the file repository, and the export
inspector.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from vendorctl.infrastructure.workspace import Workspace


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class VendorService(BaseService):
            def link(self, links: list[str]) -> ServiceResult:
                manifest = self._workspace.load()
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace
