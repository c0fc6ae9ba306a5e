# leadlookup/domain/parsing.py
from __future__ import annotations

import math
from typing import Any, Mapping


def is_empty(x: Any) -> bool:
    """
    Remote cells are loosely typed. Empty means: None, False, a blank/whitespace
    string or an empty container. Numbers (including 0) are values.
    """
    if x is None or x is False:
        return True
    if isinstance(x, str):
        return not x.strip()
    if isinstance(x, (int, float)):
        return False
    if isinstance(x, (list, tuple, dict, set)):
        return len(x) == 0
    return False


def to_float(x: Any) -> float | None:
    if x is None or x == "" or isinstance(x, bool):
        return None
    try:
        v = float(x)
    except Exception:
        return None
    if math.isnan(v):
        return None
    return v


def to_text(x: Any) -> str:
    """String form of a cell value; integral floats drop the trailing '.0'."""
    if isinstance(x, float) and x.is_integer():
        return str(int(x))
    return str(x)


def get_first(payload: Mapping[str, Any], *keys: str) -> Any:
    """Return first non-empty key from payload."""
    for k in keys:
        v = payload.get(k)
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v
    return None
