"""Best-effort scalar coercion for loosely typed payload values.

Every helper returns None for absent or unusable input instead of raising,
so that ``0`` and "missing" stay distinguishable.
"""

from typing import Any, Optional


def to_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def to_float(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, str):
            return float(value.strip())
    except (ValueError, OverflowError):
        return None
    return None


def to_int(value: Any) -> Optional[int]:
    number = to_float(value)
    if number is None or number != number:  # NaN
        return None
    try:
        return int(number)
    except OverflowError:
        return None


def to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes")
    return False
