"""
Utility modules for FinTool.

This package contains reusable helpers for rate conversions, input
validation and error handling throughout the application.
"""

from fintool.utils.rate_utils import (
    annual_pct_to_decimal,
    decimal_to_annual_pct,
    annual_pct_to_periodic_decimal,
    convert_duration_years_to_periods,
    validate_rate_range,
    normalize_rate_input,
    round_to_cents,
    round_half_up,
    MONTHS_PER_YEAR,
    PERCENTAGE_TO_DECIMAL,
)

from fintool.utils.error_utils import (
    FinToolError,
    InvalidParameterError,
    error_handler,
    logger,
)

__all__ = [
    # Rate utilities
    "annual_pct_to_decimal",
    "decimal_to_annual_pct",
    "annual_pct_to_periodic_decimal",
    "convert_duration_years_to_periods",
    "validate_rate_range",
    "normalize_rate_input",
    "round_to_cents",
    "round_half_up",
    "MONTHS_PER_YEAR",
    "PERCENTAGE_TO_DECIMAL",
    # Error handling
    "FinToolError",
    "InvalidParameterError",
    "error_handler",
    "logger",
]

__version__ = "1.0.0"
