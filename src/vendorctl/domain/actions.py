"""Action vocabulary shared by the manifest mutator and the workspace sync.

Each action is an immutable value object. :data:`Action` is the closed
union of all kinds; consumers dispatch with ``match`` and finish with
``assert_never`` so a new kind cannot be silently ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar

from vendorctl.domain.module import Module


class ActionType(StrEnum):
    """Discriminator for the action kinds."""

    ADD_MODULE = "add_module"
    REMOVE_MODULE = "remove_module"
    ADD_LINK = "add_link"
    REMOVE_LINK = "remove_link"
    ADD_ALIAS = "add_alias"
    REMOVE_ALIAS = "remove_alias"
    UPDATE_MODULE = "update_module"


@dataclass(frozen=True)
class AddModule:
    type: ClassVar[ActionType] = ActionType.ADD_MODULE

    module: Module


@dataclass(frozen=True)
class RemoveModule:
    type: ClassVar[ActionType] = ActionType.REMOVE_MODULE

    protocol: str
    path: str


@dataclass(frozen=True)
class AddLink:
    type: ClassVar[ActionType] = ActionType.ADD_LINK

    link: str  # versioned module URL + file path


@dataclass(frozen=True)
class RemoveLink:
    type: ClassVar[ActionType] = ActionType.REMOVE_LINK

    link: str


@dataclass(frozen=True)
class AddAlias:
    type: ClassVar[ActionType] = ActionType.ADD_ALIAS

    alias_path: str
    alias_target_path: str


@dataclass(frozen=True)
class RemoveAlias:
    type: ClassVar[ActionType] = ActionType.REMOVE_ALIAS

    alias_path: str


@dataclass(frozen=True)
class UpdateModule:
    type: ClassVar[ActionType] = ActionType.UPDATE_MODULE

    protocol: str
    path: str
    version: str


Action = (
    AddModule | RemoveModule | AddLink | RemoveLink | AddAlias | RemoveAlias | UpdateModule
)
