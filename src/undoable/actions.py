from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional


UNDO = "UNDOABLE_UNDO"
REDO = "UNDOABLE_REDO"


@dataclass(frozen=True)
class Action:
    """A plain action record: a `type` tag plus an optional payload."""
    type: str
    payload: Any = None


class ActionKind(Enum):
    INIT = auto()
    UNDO = auto()
    REDO = auto()
    DOMAIN = auto()


@dataclass(frozen=True)
class ControlTypes:
    """
    Reserved action types recognized by the undoable reducer.
    `init` comes from the init action handed to undoable_reducer();
    the undo/redo tags can be renamed by the embedding application.
    """
    init: str
    undo: str = UNDO
    redo: str = REDO

    def __post_init__(self):
        tags = (self.init, self.undo, self.redo)
        if len(set(tags)) != len(tags):
            raise ValueError(f"Control action types must be distinct, got: {tags}")


def action_type(action: Any) -> Optional[str]:
    """Type tag of an Action, a dict-shaped action, or any object with `.type`."""
    if isinstance(action, dict):
        return action.get("type")
    return getattr(action, "type", None)


def classify(action: Any, control: ControlTypes) -> ActionKind:
    """Map an incoming action to exactly one ActionKind. Untyped actions are DOMAIN."""
    t = action_type(action)
    if t is None:
        return ActionKind.DOMAIN
    if t == control.init:
        return ActionKind.INIT
    if t == control.undo:
        return ActionKind.UNDO
    if t == control.redo:
        return ActionKind.REDO
    return ActionKind.DOMAIN


def undo(control: Optional[ControlTypes] = None) -> Action:
    return Action(control.undo if control else UNDO)


def redo(control: Optional[ControlTypes] = None) -> Action:
    return Action(control.redo if control else REDO)
