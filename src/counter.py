"""Sample domain: an integer counter driven by INCREMENT / DECREMENT / INIT."""
from __future__ import annotations
from typing import Any, Optional

from undoable import Action
from undoable.actions import action_type

INCREMENT = "INCREMENT"
DECREMENT = "DECREMENT"
INIT = "INIT"


def increment() -> Action:
    return Action(INCREMENT)


def decrement() -> Action:
    return Action(DECREMENT)


def init() -> Action:
    return Action(INIT)


def reduce(state: Optional[int] = None, action: Any = None) -> int:
    t = action_type(action)
    if t == INIT:
        return 0
    if state is None:
        state = 0
    if t == INCREMENT:
        return state + 1
    if t == DECREMENT:
        return state - 1
    # unknown action → unchanged
    return state
