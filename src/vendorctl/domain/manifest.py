"""Manifest — the in-memory source of truth for vendored modules and aliases.

INVARIANT: a manifest handed to the mutator is never modified. Mutation
always starts from :meth:`Manifest.duplicate`.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from vendorctl.domain.module import Module, module_sort_key


@dataclass
class Manifest:
    """Modules (each owning its linked files) plus alias path → link target."""

    modules: list[Module] = field(default_factory=list)
    aliases: dict[str, str] = field(default_factory=dict)

    def duplicate(self) -> Manifest:
        """Structural copy: new list, new dict, new Module records."""
        return Manifest(
            modules=[module.copy() for module in self.modules],
            aliases=dict(self.aliases),
        )

    def normalize(self) -> None:
        """Sort modules, each module's files, and aliases by key, in place."""
        self.modules.sort(key=module_sort_key)
        for module in self.modules:
            module.files.sort()
        self.aliases = dict(sorted(self.aliases.items()))
