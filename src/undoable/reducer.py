from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union
import logging

from . import history as h
from .actions import ActionKind, ControlTypes, action_type, classify
from .model import Limits, Undoable
from .protocol import Comparator, Reducer, equal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UndoableReducer:
    """
    Composed reducer: (Undoable | None, action) -> Undoable.

    Built by undoable_reducer(); holds the base reducer and its configuration.
    Pure: never mutates the history it is given. Errors raised by the base
    reducer propagate unchanged.
    """
    base: Reducer
    init_action: Any
    limits: Limits = field(default_factory=Limits)
    comparator: Comparator = equal
    control: Optional[ControlTypes] = None

    def __post_init__(self):
        limits = self.limits
        object.__setattr__(self, "limits", Limits.coerce(dict(limits) if isinstance(limits, Mapping) else limits))
        if self.control is None:
            object.__setattr__(self, "control", ControlTypes(init=action_type(self.init_action)))
        elif self.control.init != action_type(self.init_action):
            raise ValueError(
                f"ControlTypes.init ({self.control.init!r}) does not match "
                f"the init action type ({action_type(self.init_action)!r})."
            )

    def __call__(self, history: Optional[Undoable], action: Any) -> Undoable:
        kind = classify(action, self.control)

        if history is None:
            history = self._init(None, self.init_action)
            if kind is ActionKind.INIT:
                return history

        if kind is ActionKind.INIT:
            return self._init(history.present, action)

        if kind is ActionKind.UNDO:
            logger.debug("undo (past=%d, future=%d)", len(history.past), len(history.future))
            return h.undo(history, self.limits.future)

        if kind is ActionKind.REDO:
            logger.debug("redo (past=%d, future=%d)", len(history.past), len(history.future))
            return h.redo(history, self.limits.past)

        # domain action
        candidate = self.base(history.present, action)
        if self.comparator(candidate, history.present):
            logger.debug("action %r left state unchanged; not recorded", action_type(action))
            return history
        return h.push_present(history, candidate, self.limits.past)

    def initial_state(self) -> Undoable:
        """The fresh history produced by dispatching the init action with no prior history."""
        return self(None, self.init_action)

    def _init(self, seed: Any, action: Any) -> Undoable:
        logger.debug("init: resetting history")
        return h.reset(self.base(seed, action))


def undoable_reducer(
    base: Reducer,
    init_action: Any,
    limits: Union[Limits, Mapping[str, Optional[int]], None] = None,
    comparator: Optional[Comparator] = None,
    control: Optional[ControlTypes] = None,
) -> UndoableReducer:
    """
    Wrap `base` so that it keeps past/present/future history.

        reducer = undoable_reducer(counter.reduce, counter.init(), limits={"past": 10})
        state = reducer(None, counter.init())
        state = reducer(state, counter.increment())
        state = reducer(state, undo())
    """
    if action_type(init_action) is None:
        raise ValueError("init_action must carry a 'type'.")
    return UndoableReducer(
        base=base,
        init_action=init_action,
        limits=limits,
        comparator=comparator or equal,
        control=control,
    )
