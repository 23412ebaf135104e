"""
Core modules for FinTool.

This package contains the constants, immutable parameter records and
calculation engines.
"""

from fintool.core.constants import (
    Frequency,
    AmortizationMethod,
    ContributionTiming,
    BudgetBucket,
    LtvBand,
    ExpenseCategory,
    PERIODS_PER_YEAR,
    GOAL_SEEK_MAX_ITERATIONS,
    DEFAULT_BUDGET_SPLIT,
    CATEGORY_TO_BUCKET,
)

__all__ = [
    "Frequency",
    "AmortizationMethod",
    "ContributionTiming",
    "BudgetBucket",
    "LtvBand",
    "ExpenseCategory",
    "PERIODS_PER_YEAR",
    "GOAL_SEEK_MAX_ITERATIONS",
    "DEFAULT_BUDGET_SPLIT",
    "CATEGORY_TO_BUCKET",
]

__version__ = "1.0.0"
