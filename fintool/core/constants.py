"""
Core constants and enumerations for FinTool.

This module defines all constant values, enumerations, and configuration
parameters used throughout the calculator engine.
"""

from enum import Enum


class Frequency(str, Enum):
    """Cadence of an amount, payment, contribution or compounding step."""

    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMIANNUAL = "semiannual"
    ANNUAL = "annual"


class AmortizationMethod(str, Enum):
    """Loan repayment conventions."""

    EQUAL_INSTALLMENT = "equal-installment"  # French
    EQUAL_PRINCIPAL = "equal-principal"  # Italian
    INTEREST_ONLY = "interest-only"  # bullet


class ContributionTiming(str, Enum):
    """When a periodic contribution lands relative to growth."""

    BEGINNING = "beginning"
    END = "end"


class BudgetBucket(str, Enum):
    """The three linked shares of the 50/30/20 budget."""

    NECESSITIES = "necessities"
    WANTS = "wants"
    SAVINGS = "savings"


class LtvBand(str, Enum):
    """Loan-to-value risk bands."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ExpenseCategory:
    """Expense categories offered by the budget calculator"""
    HOUSING = "housing"
    TRANSPORTATION = "transportation"
    FOOD = "food"
    HEALTH = "health"
    ENTERTAINMENT = "entertainment"
    SAVINGS = "savings"
    DEBTS = "debts"
    OTHER = "other"


# Frequency tables
PERIODS_PER_YEAR = {
    Frequency.WEEKLY: 52,
    Frequency.BIWEEKLY: 26,
    Frequency.MONTHLY: 12,
    Frequency.QUARTERLY: 4,
    Frequency.SEMIANNUAL: 2,
    Frequency.ANNUAL: 1,
}

# Average occurrences per month, not calendar exact
WEEKS_PER_MONTH = 4.33
BIWEEKS_PER_MONTH = 2.17

# Cadences a loan can be repaid at
LOAN_FREQUENCIES = (
    Frequency.MONTHLY,
    Frequency.QUARTERLY,
    Frequency.SEMIANNUAL,
    Frequency.ANNUAL,
)

FREQUENCY_ALIASES = {
    "yearly": Frequency.ANNUAL,
    "semi-annual": Frequency.SEMIANNUAL,
    "semi_annual": Frequency.SEMIANNUAL,
    "bi-weekly": Frequency.BIWEEKLY,
}

# Goal seeking
GOAL_SEEK_MAX_ITERATIONS = 100

# Loan-to-value band upper bounds (percent, inclusive)
LTV_LOW_MAX_PCT = 50.0
LTV_MEDIUM_MAX_PCT = 80.0

# Budget
BUDGET_TOTAL_PCT = 100
# Savings rate below this is flagged; a balance above this share of income is a healthy surplus
RECOMMENDED_SAVINGS_RATE_PCT = 20.0
SURPLUS_INCOME_SHARE = 0.3
DEFAULT_BUDGET_SPLIT = {
    BudgetBucket.NECESSITIES: 50,
    BudgetBucket.WANTS: 30,
    BudgetBucket.SAVINGS: 20,
}

CATEGORY_TO_BUCKET = {
    ExpenseCategory.HOUSING: BudgetBucket.NECESSITIES,
    ExpenseCategory.TRANSPORTATION: BudgetBucket.NECESSITIES,
    ExpenseCategory.FOOD: BudgetBucket.NECESSITIES,
    ExpenseCategory.HEALTH: BudgetBucket.NECESSITIES,
    ExpenseCategory.ENTERTAINMENT: BudgetBucket.WANTS,
    ExpenseCategory.SAVINGS: BudgetBucket.SAVINGS,
    ExpenseCategory.DEBTS: BudgetBucket.NECESSITIES,
    ExpenseCategory.OTHER: BudgetBucket.WANTS,
}


# Module metadata
__version__ = "1.0.0"
__author__ = "FinTool Development Team"
__description__ = "Core constants and enumerations for FinTool"
