"""
Rate and money conversion utilities for calculator inputs.

This module provides standardized functions for converting between the rate
formats used throughout the calculators.

Conventions:
- All user inputs are annual rates as percentages (e.g., 3.5 = 3.5%)
- All calculations use decimal rates (e.g., 0.035 = 3.5%)
- Periodic rates are derived from annual rates: annual_decimal / periods_per_year
- Variable naming: *_rate_pct, periodic_rate, etc.
"""

import math
from typing import Union

from fintool.utils.error_utils import InvalidParameterError, error_handler

# Convenience constants for common conversions
MONTHS_PER_YEAR = 12
PERCENTAGE_TO_DECIMAL = 100.0


@error_handler
def annual_pct_to_decimal(rate_pct: Union[float, str]) -> float:
    """
    Convert annual percentage rate to decimal format.

    Examples:
        >>> annual_pct_to_decimal(5.0)
        0.05
        >>> annual_pct_to_decimal("7.5")
        0.075
    """
    return float(rate_pct) / PERCENTAGE_TO_DECIMAL


@error_handler
def decimal_to_annual_pct(rate_decimal: float) -> float:
    """
    Convert decimal rate to annual percentage format.

    Examples:
        >>> decimal_to_annual_pct(0.05)
        5.0
    """
    return float(rate_decimal) * PERCENTAGE_TO_DECIMAL


@error_handler
def annual_pct_to_periodic_decimal(rate_pct: Union[float, str], periods_per_year: int) -> float:
    """
    Convert an annual percentage rate to the nominal rate of one period.

    Args:
        rate_pct: Annual rate as percentage (e.g., 3.5 for 3.5%)
        periods_per_year: Number of periods in a year (12 for monthly)

    Returns:
        Periodic rate as decimal

    Raises:
        InvalidParameterError: If ``periods_per_year`` is not positive

    Examples:
        >>> round(annual_pct_to_periodic_decimal(6.0, 12), 6)
        0.005
        >>> annual_pct_to_periodic_decimal(4.0, 4)
        0.01
    """
    if periods_per_year <= 0:
        raise InvalidParameterError(
            f"periods_per_year must be positive, got {periods_per_year}",
            field="periods_per_year",
            value=periods_per_year,
        )
    return annual_pct_to_decimal(rate_pct) / periods_per_year


@error_handler
def convert_duration_years_to_periods(years: Union[float, int], periods_per_year: int = MONTHS_PER_YEAR) -> int:
    """
    Convert a duration in years to a whole number of periods.

    Examples:
        >>> convert_duration_years_to_periods(25)
        300
        >>> convert_duration_years_to_periods(2.5, 4)
        10
    """
    return round(float(years) * periods_per_year)


@error_handler
def validate_rate_range(rate_pct: float, min_pct: float = 0.0, max_pct: float = 100.0) -> bool:
    """
    Validate that a percentage rate is within reasonable bounds.

    Examples:
        >>> validate_rate_range(3.5)
        True
        >>> validate_rate_range(-1.0)
        False
    """
    return min_pct <= rate_pct <= max_pct


@error_handler
def normalize_rate_input(rate_input: Union[str, float, int], min_pct: float = 0.0, max_pct: float = 100.0) -> float:
    """
    Normalize rate input from various formats to a standard float percentage.

    Handles string inputs, removes percentage signs, and validates ranges.

    Raises:
        InvalidParameterError: If rate cannot be converted or is out of range

    Examples:
        >>> normalize_rate_input("3.5%")
        3.5
        >>> normalize_rate_input(7.25)
        7.25
    """
    if isinstance(rate_input, str):
        cleaned = rate_input.strip().rstrip('%')
        try:
            rate_float = float(cleaned)
        except ValueError:
            raise InvalidParameterError(
                f"Cannot convert rate input '{rate_input}' to number",
                field="rate",
                value=rate_input,
            )
    else:
        rate_float = float(rate_input)

    if math.isnan(rate_float) or not validate_rate_range(rate_float, min_pct, max_pct):
        raise InvalidParameterError(
            f"Rate {rate_float}% is outside valid range ({min_pct}% to {max_pct}%)",
            field="rate",
            value=rate_float,
        )

    return rate_float


def round_to_cents(amount: float) -> float:
    """Round a monetary amount to cents, halves rounding up."""
    return math.floor(amount * 100.0 + 0.5) / 100.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


# Module metadata
__version__ = "1.0.0"
__author__ = "FinTool Development Team"
__description__ = "Rate conversion utilities for FinTool"
