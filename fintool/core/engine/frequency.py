"""
Frequency normalization for FinTool.

Converts amounts quoted at any supported cadence into monthly (or other
per-period) figures. The weekly and biweekly factors are the averages the
budget calculator has always used (4.33 weeks and 2.17 fortnights per
month), not calendar arithmetic, and must not be changed.
"""

import logging
from typing import Union

from fintool.core.constants import (
    BIWEEKS_PER_MONTH,
    Frequency,
    FREQUENCY_ALIASES,
    PERIODS_PER_YEAR,
    WEEKS_PER_MONTH,
)
from fintool.utils.error_utils import InvalidParameterError, error_handler
from fintool.utils.rate_utils import MONTHS_PER_YEAR
from fintool.utils.validation import coerce_enum, require_finite

logger = logging.getLogger(__name__)

# Occurrences per month for cadences shorter than a month
_PER_MONTH = {
    Frequency.WEEKLY: WEEKS_PER_MONTH,
    Frequency.BIWEEKLY: BIWEEKS_PER_MONTH,
}

# Months covered by one occurrence for the remaining cadences
_MONTHS_PER_OCCURRENCE = {
    Frequency.MONTHLY: 1,
    Frequency.QUARTERLY: 3,
    Frequency.SEMIANNUAL: 6,
    Frequency.ANNUAL: MONTHS_PER_YEAR,
}


def parse_frequency(value: Union[Frequency, str], strict: bool = True) -> Frequency:
    """
    Resolve a raw cadence to a ``Frequency``.

    Args:
        value: Enum member or string such as ``"weekly"`` or ``"yearly"``
        strict: Reject unknown values. When False, unknown values are
            treated as monthly and a warning is logged.

    Raises:
        InvalidParameterError: If ``value`` is unknown and ``strict`` is set
    """
    try:
        return coerce_enum(Frequency, value, "frequency", FREQUENCY_ALIASES)
    except InvalidParameterError:
        if strict:
            raise
        logger.warning(f"Unknown frequency {value!r}, treating amount as monthly")
        return Frequency.MONTHLY


@error_handler
def periods_per_year(frequency: Union[Frequency, str]) -> int:
    """
    Number of occurrences of ``frequency`` in a year.

    Examples:
        >>> periods_per_year("quarterly")
        4
        >>> periods_per_year(Frequency.BIWEEKLY)
        26
    """
    return PERIODS_PER_YEAR[parse_frequency(frequency)]


@error_handler
def to_monthly(amount: float, frequency: Union[Frequency, str], strict: bool = True) -> float:
    """
    Convert an amount paid at ``frequency`` to its monthly equivalent.

    Examples:
        >>> to_monthly(100, "weekly")
        433.0
        >>> to_monthly(1200, "annual")
        100.0
    """
    amount = require_finite(amount, "amount")
    frequency = parse_frequency(frequency, strict=strict)
    if frequency in _PER_MONTH:
        return amount * _PER_MONTH[frequency]
    return amount / _MONTHS_PER_OCCURRENCE[frequency]


@error_handler
def from_monthly(monthly_amount: float, frequency: Union[Frequency, str], strict: bool = True) -> float:
    """Inverse of ``to_monthly``: the per-occurrence amount at ``frequency``."""
    monthly_amount = require_finite(monthly_amount, "amount")
    frequency = parse_frequency(frequency, strict=strict)
    if frequency in _PER_MONTH:
        return monthly_amount / _PER_MONTH[frequency]
    return monthly_amount * _MONTHS_PER_OCCURRENCE[frequency]


@error_handler
def convert(
    amount: float,
    source: Union[Frequency, str],
    target: Union[Frequency, str] = Frequency.MONTHLY,
    strict: bool = True,
) -> float:
    """
    Convert an amount between cadences through its monthly equivalent.

    Examples:
        >>> convert(300, "quarterly", "monthly")
        100.0
        >>> convert(100, "monthly", "annual")
        1200.0
    """
    monthly = to_monthly(amount, source, strict=strict)
    if parse_frequency(target, strict=strict) == Frequency.MONTHLY:
        return monthly
    return from_monthly(monthly, target, strict=strict)
