# =============================================================================
# transmute/transformations/coercions.py - Type Coercions
# =============================================================================
# Convert scalar values between str, int, float, bool and dates.
# =============================================================================

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from transmute.registry import Registry


registry = Registry("coercions")

TRUE_VALUES = frozenset({"true", "t", "yes", "y", "on", "1"})
FALSE_VALUES = frozenset({"false", "f", "no", "n", "off", "0", ""})


@registry.register
def identity(value: Any) -> Any:
    return value


@registry.register
def to_string(value: Any) -> str:
    return str(value)


@registry.register
def to_integer(value: Any) -> int:
    """
    Coerce to int.

    Strings are stripped first; "12.0" is accepted, "12.5" is not.
    """
    if isinstance(value, str):
        value = value.strip()
        try:
            return int(value)
        except ValueError:
            number = float(value)
            if not number.is_integer():
                raise
            return int(number)
    return int(value)


@registry.register
def to_float(value: Any) -> float:
    return float(value)


@registry.register
def to_decimal(value: Any) -> Decimal:
    return Decimal(str(value))


@registry.register
def to_boolean(value: Any) -> bool:
    """
    Coerce to bool.

    Raises:
        ValueError: If a string is not one of the known true/false spellings
    """
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_VALUES:
            return True
        if text in FALSE_VALUES:
            return False
        raise ValueError(f"Cannot coerce {value!r} to boolean")
    return bool(value)


@registry.register
def to_date(value: Any, fmt: str | None = None) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if fmt:
        return datetime.strptime(value, fmt).date()
    return date.fromisoformat(value)


@registry.register
def to_datetime(value: Any, fmt: str | None = None) -> datetime:
    if isinstance(value, datetime):
        return value
    if fmt:
        return datetime.strptime(value, fmt)
    return datetime.fromisoformat(value)
