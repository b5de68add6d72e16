from __future__ import annotations
from typing import Any, Optional, Tuple
import logging

from .model import Undoable

logger = logging.getLogger(__name__)


def push_present(history: Undoable, new_state: Any, limit_past: Optional[int] = None) -> Undoable:
    """Record `new_state` as present; the old present goes to the end of past. Clears future."""
    past = _keep_newest(history.past + (history.present,), limit_past)
    return Undoable(past=past, present=new_state, future=())


def undo(history: Undoable, limit_future: Optional[int] = None) -> Undoable:
    if not history.past:
        logger.debug("undo: nothing to undo")
        return history
    future = (history.present,) + history.future
    if limit_future is not None:
        limit_future = max(0, limit_future)
    if limit_future is not None and len(future) > limit_future:
        logger.debug("undo: dropping %d oldest future snapshot(s)", len(future) - limit_future)
        future = future[:limit_future]
    return Undoable(past=history.past[:-1], present=history.past[-1], future=future)


def redo(history: Undoable, limit_past: Optional[int] = None) -> Undoable:
    if not history.future:
        logger.debug("redo: nothing to redo")
        return history
    past = _keep_newest(history.past + (history.present,), limit_past)
    return Undoable(past=past, present=history.future[0], future=history.future[1:])


def reset(initial_state: Any) -> Undoable:
    return Undoable(past=(), present=initial_state, future=())


def clear_history(history: Undoable) -> Undoable:
    """Drop past and future, keep present."""
    if not history.past and not history.future:
        return history
    return reset(history.present)


# ----- helpers -----

def _keep_newest(past: Tuple[Any, ...], limit: Optional[int]) -> Tuple[Any, ...]:
    """Evict from the front (oldest first) until `past` fits in `limit`."""
    if limit is None:
        return past
    limit = max(0, limit)
    if len(past) <= limit:
        return past
    logger.debug("dropping %d oldest past snapshot(s)", len(past) - limit)
    return past[len(past) - limit:]
