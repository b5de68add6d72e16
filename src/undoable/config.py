from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import copy
import logging

import yaml

from .actions import REDO, UNDO, ControlTypes, action_type
from .model import Limits
from .normalize import normalize_limit, normalize_type_tag
from .protocol import Comparator, equal, identity, never_equal
from .reducer import UndoableReducer, undoable_reducer

logger = logging.getLogger(__name__)

COMPARATORS: Dict[str, Comparator] = {
    "equal": equal,
    "identity": identity,
    "never": never_equal,
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "limits": {
        "past": None,
        "future": None,
    },
    "comparator": "equal",
    "actions": {
        "undo": UNDO,
        "redo": REDO,
    },
}


@dataclass(frozen=True)
class UndoConfig:
    limits: Limits = field(default_factory=Limits)
    comparator: str = "equal"
    undo_type: str = UNDO
    redo_type: str = REDO

    def control_types(self, init_action: Any) -> ControlTypes:
        return ControlTypes(init=action_type(init_action), undo=self.undo_type, redo=self.redo_type)

    def build(self, base, init_action: Any) -> UndoableReducer:
        """undoable_reducer() configured from this object."""
        return undoable_reducer(
            base,
            init_action,
            limits=self.limits,
            comparator=resolve_comparator(self.comparator),
            control=self.control_types(init_action),
        )


def resolve_comparator(name: str) -> Comparator:
    try:
        return COMPARATORS[str(name).strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown comparator: {name!r} (expected one of: {', '.join(COMPARATORS)})"
        ) from None


def config_from_dict(data: Dict[str, Any], source: str = "<config>") -> UndoConfig:
    """Merge `data` over DEFAULT_CONFIG and validate. Raises ValueError on bad values."""
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    # shallow merge of the known sections
    for k, v in (data or {}).items():
        if k not in cfg:
            raise ValueError(f"{source}: unknown config key {k!r}")
        if isinstance(cfg[k], dict):
            if not isinstance(v, dict):
                raise ValueError(f"{source}: {k!r} must be a mapping")
            unknown = set(v) - set(cfg[k])
            if unknown:
                raise ValueError(f"{source}: unknown key(s) under {k!r}: {', '.join(sorted(unknown))}")
            cfg[k].update(v)
        else:
            cfg[k] = v

    limits = {}
    for name in ("past", "future"):
        ok, val, err = normalize_limit(cfg["limits"][name])
        if not ok:
            raise ValueError(f"{source}: limits.{name}: {err}")
        limits[name] = val

    tags = {}
    for name in ("undo", "redo"):
        ok, val, err = normalize_type_tag(cfg["actions"][name])
        if not ok:
            raise ValueError(f"{source}: actions.{name}: {err}")
        tags[name] = val

    comparator = str(cfg["comparator"]).strip().lower()
    if comparator not in COMPARATORS:
        raise ValueError(f"{source}: unknown comparator {cfg['comparator']!r}")

    return UndoConfig(
        limits=Limits(**limits),
        comparator=comparator,
        undo_type=tags["undo"],
        redo_type=tags["redo"],
    )


def load_config(path: Optional[str | Path]) -> UndoConfig:
    """
    Load undo settings from a YAML file, e.g.:

        limits:
          past: 50
          future: 20
        comparator: equal        # equal | identity | never
        actions:
          undo: EDITOR_UNDO
          redo: EDITOR_REDO

    Missing file -> defaults (logged). Invalid content -> ValueError.
    """
    if not path:
        return UndoConfig()
    p = Path(path)
    if not p.exists():
        logger.warning("config not found: %s (using defaults)", p)
        return UndoConfig()
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"{p}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{p}: top level must be a mapping")
    return config_from_dict(data, source=str(p))
