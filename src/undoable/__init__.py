"""
Public API for the undoable package.

Import from here everywhere else, so you can refactor internals freely:
    from undoable import (
        Undoable, Limits, Action, ActionKind, ControlTypes,
        undoable_reducer, UndoableReducer, Store,
        undo, redo, load_config, UndoConfig,
    )
"""
from .model import Undoable, Limits
from .actions import (
    Action, ActionKind, ControlTypes, classify,
    UNDO, REDO, undo, redo,
)
from .protocol import Reducer, Comparator, equal, identity, never_equal
from .history import push_present, reset, clear_history
from .reducer import undoable_reducer, UndoableReducer
from .store import Store
from .config import UndoConfig, load_config, config_from_dict, resolve_comparator

__all__ = [
    # model
    "Undoable", "Limits",
    # actions
    "Action", "ActionKind", "ControlTypes", "classify",
    "UNDO", "REDO", "undo", "redo",
    # protocol
    "Reducer", "Comparator", "equal", "identity", "never_equal",
    # history store
    "push_present", "reset", "clear_history",
    # reducer & store
    "undoable_reducer", "UndoableReducer", "Store",
    # config
    "UndoConfig", "load_config", "config_from_dict", "resolve_comparator",
]
