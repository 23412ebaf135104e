"""
Budget models for FinTool.

Classes:
    BudgetAllocation: Linked percentage shares that always sum to 100
    CashItem: An income or expense line at any cadence
    BudgetSummary: Monthly totals, bucket budgets and advice flags
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from fintool.core.constants import (
    BUDGET_TOTAL_PCT,
    BudgetBucket,
    DEFAULT_BUDGET_SPLIT,
    Frequency,
)
from fintool.utils.error_utils import InvalidParameterError
from fintool.utils.validation import require_int_at_least, require_non_negative


@dataclass(frozen=True)
class BudgetAllocation:
    """
    Integer percentage shares of income per bucket.

    Each share lies in [0, 100] and the three always sum to 100.
    """

    necessities: int = DEFAULT_BUDGET_SPLIT[BudgetBucket.NECESSITIES]
    wants: int = DEFAULT_BUDGET_SPLIT[BudgetBucket.WANTS]
    savings: int = DEFAULT_BUDGET_SPLIT[BudgetBucket.SAVINGS]

    def __post_init__(self):
        for bucket in BudgetBucket:
            share = require_int_at_least(getattr(self, bucket.value), 0, bucket.value)
            if share > BUDGET_TOTAL_PCT:
                raise InvalidParameterError(
                    f"{bucket.value} must be at most {BUDGET_TOTAL_PCT}, got {share}",
                    field=bucket.value,
                    value=share,
                )
            object.__setattr__(self, bucket.value, share)
        total = self.necessities + self.wants + self.savings
        if total != BUDGET_TOTAL_PCT:
            raise InvalidParameterError(
                f"Budget shares must sum to {BUDGET_TOTAL_PCT}, got {total}",
                field="allocation",
                value=total,
            )

    def share(self, bucket: BudgetBucket) -> int:
        return getattr(self, BudgetBucket(bucket).value)

    def as_dict(self) -> Dict[str, int]:
        return {bucket.value: self.share(bucket) for bucket in BudgetBucket}


@dataclass(frozen=True)
class CashItem:
    """An income or expense amount at a given cadence.

    ``frequency`` is kept raw here; the normalizer decides how to treat
    values it does not recognize.
    """

    amount: float
    frequency: object = Frequency.MONTHLY
    category: Optional[str] = None
    description: str = ""

    def __post_init__(self):
        object.__setattr__(self, "amount", require_non_negative(self.amount, "amount"))


@dataclass(frozen=True)
class BudgetSummary:
    total_monthly_income: float
    total_monthly_expenses: float
    balance: float
    savings_rate_pct: float
    category_totals: Dict[str, float]
    allocated: Dict[str, float]
    spent: Dict[str, float]
    category_status: Dict[str, str]
    advice: Dict[str, bool] = field(default_factory=dict)
