from __future__ import annotations
from typing import Any, Optional, Tuple
import math

_UNBOUNDED = {"", "none", "null", "unbounded", "inf", "infinite"}


def _lc(x: Any) -> str:
    return str(x).strip().lower()


def normalize_limit(value: Any) -> Tuple[bool, Optional[int], Optional[str]]:
    """
    Limit value from config/CLI text.
      None / 'none' / 'unbounded' / 'inf' -> (True, None, None)
      '5' / 5                             -> (True, 5, None)
      '-3'                                -> (True, 0, None)   clamped
    """
    if value is None:
        return True, None, None
    if isinstance(value, bool):
        return False, None, f"Expected integer limit, got: {value}"
    if isinstance(value, str) and _lc(value) in _UNBOUNDED:
        return True, None, None
    # YAML `.inf` arrives as a float
    if isinstance(value, float) and math.isinf(value):
        if value > 0:
            return True, None, None
        return True, 0, None
    try:
        iv = int(value)
    except (TypeError, ValueError, OverflowError):
        return False, None, f"Expected integer limit, got: {value}"
    if isinstance(value, float) and value != iv:
        return False, None, f"Expected integer limit, got: {value}"
    return True, max(0, iv), None


def normalize_type_tag(value: Any) -> Tuple[bool, Optional[str], Optional[str]]:
    if value is None:
        return False, None, "Value is required."
    tag = str(value).strip()
    if not tag:
        return False, None, "Action type must not be empty."
    return True, tag, None
