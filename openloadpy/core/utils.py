"""
Permissive field coercion for API payloads.

The API is loose about types: sizes arrive as numbers, numeric strings or
``false``, identifiers as numbers or strings, and missing values as
``false`` or ``null``. These helpers never raise; a value that cannot be
coerced becomes ``None`` (or the given default).
"""
from typing import Any, Optional


def to_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Coerces number or numeric string to int, anything else to default."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else default
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return default
    return default


def to_float(value: Any, default: Optional[float] = None) -> Optional[float]:
    """Coerces number or numeric string to float, anything else to default."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return default
    return default


def to_str(value: Any, default: Optional[str] = None) -> Optional[str]:
    """Coerces string or number to str; false, null and containers to default."""
    if isinstance(value, bool) or value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return default


def to_dict(value: Any) -> dict:
    """Returns value if it is a mapping, otherwise an empty dict."""
    return value if isinstance(value, dict) else {}


def to_list(value: Any) -> list:
    """Returns value if it is a list, otherwise an empty list."""
    return value if isinstance(value, list) else []
