"""
Input validation helpers shared by the parameter records.

Every helper raises ``InvalidParameterError`` naming the offending field.
"""

import math
from enum import Enum
from typing import Dict, Optional, Type, TypeVar, Union

from fintool.utils.error_utils import InvalidParameterError

E = TypeVar("E", bound=Enum)


def _as_number(value, field: str) -> float:
    if isinstance(value, bool):
        raise InvalidParameterError(f"{field} must be a number, got {value!r}", field=field, value=value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidParameterError(f"{field} must be a number, got {value!r}", field=field, value=value)
    if math.isnan(number) or math.isinf(number):
        raise InvalidParameterError(f"{field} must be finite, got {value!r}", field=field, value=value)
    return number


def require_positive(value, field: str) -> float:
    number = _as_number(value, field)
    if number <= 0:
        raise InvalidParameterError(f"{field} must be greater than 0, got {value}", field=field, value=value)
    return number


def require_non_negative(value, field: str) -> float:
    number = _as_number(value, field)
    if number < 0:
        raise InvalidParameterError(f"{field} must not be negative, got {value}", field=field, value=value)
    return number


def require_finite(value, field: str) -> float:
    return _as_number(value, field)


def require_int_at_least(value, minimum: int, field: str) -> int:
    """Accept ints (or integral floats) no smaller than ``minimum``."""
    number = _as_number(value, field)
    if number != int(number):
        raise InvalidParameterError(f"{field} must be a whole number, got {value}", field=field, value=value)
    if number < minimum:
        raise InvalidParameterError(f"{field} must be at least {minimum}, got {value}", field=field, value=value)
    return int(number)


def coerce_enum(
    enum_cls: Type[E],
    value: Union[E, str],
    field: str,
    aliases: Optional[Dict[str, E]] = None,
) -> E:
    """
    Convert a raw value to a member of ``enum_cls``.

    Strings are matched case-insensitively after stripping whitespace,
    then looked up in ``aliases``.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        cleaned = value.strip().lower()
        for member in enum_cls:
            if member.value == cleaned:
                return member
        if aliases and cleaned in aliases:
            return aliases[cleaned]
    allowed = ", ".join(m.value for m in enum_cls)
    raise InvalidParameterError(
        f"{field} must be one of: {allowed}; got {value!r}",
        field=field,
        value=value,
    )
