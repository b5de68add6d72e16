from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Tuple, TypeVar

S = TypeVar("S")


@dataclass(frozen=True)
class Undoable(Generic[S]):
    """
    The wrapped state value.

    past:    snapshots in the order (oldest, ..., latest)
    present: the current domain state
    future:  snapshots in the order (latest undone, ..., oldest undone)

    Instances are never mutated; the history functions return new ones.
    """
    present: Any = None
    past: Tuple[Any, ...] = field(default_factory=tuple)
    future: Tuple[Any, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # accept lists from callers but always store tuples
        object.__setattr__(self, "past", tuple(self.past))
        object.__setattr__(self, "future", tuple(self.future))

    @property
    def can_undo(self) -> bool:
        return len(self.past) > 0

    @property
    def can_redo(self) -> bool:
        return len(self.future) > 0


@dataclass(frozen=True)
class Limits:
    """
    Max retained length of past / future. None means unbounded.

        Limits(past=10, future=10)
        Limits(past=45)              # future unbounded

    When a limit is reached the oldest snapshot is dropped.
    Negative values are clamped to 0.
    """
    past: Optional[int] = None
    future: Optional[int] = None

    def __post_init__(self):
        object.__setattr__(self, "past", _clamp_limit("past", self.past))
        object.__setattr__(self, "future", _clamp_limit("future", self.future))

    @classmethod
    def coerce(cls, value: Any) -> "Limits":
        """Accept None, a Limits, or a mapping {'past': .., 'future': ..}."""
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            unknown = set(value) - {"past", "future"}
            if unknown:
                raise ValueError(f"Unknown limit key(s): {', '.join(sorted(unknown))}")
            return cls(past=value.get("past"), future=value.get("future"))
        raise ValueError(f"Invalid limits: {value!r}")


def _clamp_limit(name: str, value: Any) -> Optional[int]:
    if value is None:
        return None
    # bool is an int subclass; True is not a sensible limit
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Limit '{name}' must be an integer or None, got: {value!r}")
    return max(0, value)
