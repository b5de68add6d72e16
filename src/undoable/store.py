from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional
import threading

from . import history as h
from .actions import redo as redo_action, undo as undo_action
from .model import Undoable
from .reducer import UndoableReducer

Listener = Callable[[Undoable], None]


@dataclass
class Store:
    """
    Small runtime around the composed undoable reducer.

    Owns the current Undoable value and threads it through every dispatch.
    Dispatches are serialized with a lock; the reducer itself holds none.

    Usage:
        store = Store(undoable_reducer(counter.reduce, counter.init()))
        store.dispatch(counter.increment())
        store.undo(); store.redo()
    """
    reducer: UndoableReducer
    state: Optional[Undoable] = None
    _listeners: List[Listener] = field(default_factory=list, repr=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self):
        if self.state is None:
            self.state = self.reducer.initial_state()

    # ---- dispatch ----
    def dispatch(self, action: Any) -> Undoable:
        with self._lock:
            prev = self.state
            # a failing base reducer leaves self.state untouched
            new = self.reducer(prev, action)
            self.state = new
        if new is not prev:
            self._notify(new)
        return new

    def init(self) -> Undoable:
        return self.dispatch(self.reducer.init_action)

    def undo(self) -> Undoable:
        return self.dispatch(undo_action(self.reducer.control))

    def redo(self) -> Undoable:
        return self.dispatch(redo_action(self.reducer.control))

    def clear_history(self) -> Undoable:
        with self._lock:
            prev = self.state
            new = h.clear_history(prev)
            self.state = new
        if new is not prev:
            self._notify(new)
        return new

    # ---- read accessors ----
    @property
    def present(self) -> Any:
        return self.state.present

    @property
    def can_undo(self) -> bool:
        return self.state.can_undo

    @property
    def can_redo(self) -> bool:
        return self.state.can_redo

    # ---- subscriptions ----
    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call `listener(state)` after every dispatch that produced a new value."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, state: Undoable) -> None:
        for listener in list(self._listeners):
            listener(state)
