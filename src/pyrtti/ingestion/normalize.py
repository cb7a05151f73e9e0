"""Normalization helpers.

Centralizes defensive parsing of upstream values.
"""

from __future__ import annotations

import math
from typing import Any


def safe_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def safe_coordinate(value: Any, limit: float) -> float | None:
    """Return *value* as a finite float within ``[-limit, limit]``, else ``None``."""
    parsed = safe_float(value)
    if parsed is None or abs(parsed) > limit:
        return None
    return parsed


def safe_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
