# src/export.py
from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Dict, List

from undoable import Undoable


# ---------------------------
# Public Facade
# ---------------------------

class HistoryExporter:
    """
    Read-only JSON projection of an Undoable value (devtools, debugging, CLI).

    Typical usage:
        xp = HistoryExporter()
        data = xp.build(store.state)          # dict
        text = xp.dumps(data, pretty=True)
    """

    # ---- Build JSON (dict) ----
    def build(self, history: Undoable) -> Dict[str, Any]:
        return _build_export_dict(history)

    # ---- JSON text ----
    def dumps(self, data: Dict[str, Any], pretty: bool = True) -> str:
        return json.dumps(data, indent=2, ensure_ascii=False) if pretty else json.dumps(data, separators=(",", ":"))


# ---------------------------
# Export construction
# ---------------------------

def _build_export_dict(history: Undoable) -> Dict[str, Any]:
    """
    Projects Undoable → plain JSON-compatible dict:
        {
          "past": [...oldest..latest],
          "present": <state>,
          "future": [...latest undone..oldest],
          "can_undo": bool,
          "can_redo": bool
        }
    """
    return {
        "past": _to_plain_list(history.past),
        "present": _to_plain(history.present),
        "future": _to_plain_list(history.future),
        "can_undo": history.can_undo,
        "can_redo": history.can_redo,
    }


def _to_plain_list(items) -> List[Any]:
    return [_to_plain(x) for x in items]


def _to_plain(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return _to_plain(asdict(value))
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, dict):
        return {str(k): _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_plain(v) for v in value]
    return value
