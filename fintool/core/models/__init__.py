"""
FinTool Core Models Package.

This package contains the immutable parameter and result records consumed
and produced by the calculator engines. Records validate themselves on
construction and raise InvalidParameterError on bad input.

Modules:
    loan: LoanParameters, AmortizationEntry, MortgageSummary
    growth: GrowthParameters, ProjectionResult and its snapshots
    goal: GoalSeekResult and FIRE plans
    budget: BudgetAllocation, CashItem, BudgetSummary
"""

from fintool.core.models.loan import (
    LoanParameters,
    AmortizationEntry,
    YearlyAmortizationPoint,
    SchedulePage,
    MortgageSummary,
)

from fintool.core.models.growth import (
    GrowthParameters,
    PeriodSnapshot,
    YearlyProjectionPoint,
    ProjectionResult,
)

from fintool.core.models.goal import (
    GoalSeekResult,
    FirePlan,
    FireProjectionPoint,
    AdvancedFirePlan,
)

from fintool.core.models.budget import (
    BudgetAllocation,
    CashItem,
    BudgetSummary,
)

__all__ = [
    # Loan records
    "LoanParameters",
    "AmortizationEntry",
    "YearlyAmortizationPoint",
    "SchedulePage",
    "MortgageSummary",
    # Growth records
    "GrowthParameters",
    "PeriodSnapshot",
    "YearlyProjectionPoint",
    "ProjectionResult",
    # Goal records
    "GoalSeekResult",
    "FirePlan",
    "FireProjectionPoint",
    "AdvancedFirePlan",
    # Budget records
    "BudgetAllocation",
    "CashItem",
    "BudgetSummary",
]

__version__ = "1.0.0"
__author__ = "FinTool Development Team"
