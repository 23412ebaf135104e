"""
Budget allocation for FinTool.

Implements the linked 50/30/20 split (changing one share rebalances the
other two so the total stays at 100) and the monthly budget summary:
income and expense lines are normalized to monthly amounts, grouped by
category and compared with the budget of the bucket each category
belongs to.
"""

import logging
import math
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Union

from fintool.core.constants import (
    BUDGET_TOTAL_PCT,
    BudgetBucket,
    CATEGORY_TO_BUCKET,
    ExpenseCategory,
    RECOMMENDED_SAVINGS_RATE_PCT,
    SURPLUS_INCOME_SHARE,
)
from fintool.core.engine.frequency import to_monthly
from fintool.core.models.budget import BudgetAllocation, BudgetSummary, CashItem
from fintool.utils.error_utils import InvalidParameterError, error_handler
from fintool.utils.rate_utils import round_half_up
from fintool.utils.validation import coerce_enum, require_int_at_least, require_non_negative

logger = logging.getLogger(__name__)

STATUS_OVER = "over"
STATUS_UNDER = "under"


@error_handler
def redistribute(
    allocation: BudgetAllocation,
    bucket: Union[BudgetBucket, str],
    new_value: int,
) -> BudgetAllocation:
    """
    Set one bucket's share and rebalance the other two.

    The two remaining buckets split ``100 - new_value`` in proportion to
    their previous shares: the first (in necessities, wants, savings order)
    gets its proportional part rounded half up, the second gets the rest.
    If both were 0 the remainder is split evenly.

    Examples:
        >>> redistribute(BudgetAllocation(), "necessities", 60).as_dict()
        {'necessities': 60, 'wants': 24, 'savings': 16}
    """
    bucket = coerce_enum(BudgetBucket, bucket, "bucket")
    new_value = require_int_at_least(new_value, 0, bucket.value)
    if new_value > BUDGET_TOTAL_PCT:
        raise InvalidParameterError(
            f"{bucket.value} must be at most {BUDGET_TOTAL_PCT}, got {new_value}",
            field=bucket.value,
            value=new_value,
        )

    first, second = [other for other in BudgetBucket if other != bucket]
    remaining = BUDGET_TOTAL_PCT - new_value
    prior = allocation.share(first) + allocation.share(second)

    if prior == 0:
        first_share = round_half_up(remaining / 2)
    else:
        first_share = round_half_up(remaining * allocation.share(first) / prior)

    shares = {
        bucket.value: new_value,
        first.value: first_share,
        second.value: remaining - first_share,
    }
    logger.debug(f"Redistributed budget after {bucket.value}={new_value}: {shares}")
    return BudgetAllocation(**shares)


@error_handler
def allocate(total_income: float, allocation: BudgetAllocation) -> Dict[str, float]:
    """
    Currency amount budgeted for each bucket.

    Returns:
        Mapping bucket name -> ``share / 100 * total_income``
    """
    income = require_non_negative(total_income, "total_income")
    return {
        bucket.value: income * allocation.share(bucket) / BUDGET_TOTAL_PCT
        for bucket in BudgetBucket
    }


def categories_in(bucket: BudgetBucket) -> List[str]:
    """Expense categories mapped to ``bucket``."""
    return [category for category, owner in CATEGORY_TO_BUCKET.items() if owner == bucket]


def _category_of(item: CashItem) -> str:
    if item.category is None or not str(item.category).strip():
        return ExpenseCategory.OTHER
    category = str(item.category).strip().lower()
    if category not in CATEGORY_TO_BUCKET:
        raise InvalidParameterError(
            f"Unknown expense category {item.category!r}",
            field="category",
            value=item.category,
        )
    return category


@error_handler
def summarize_budget(
    incomes: Iterable[CashItem],
    expenses: Iterable[CashItem],
    allocation: Optional[BudgetAllocation] = None,
    strict: bool = True,
) -> BudgetSummary:
    """
    Build the monthly budget overview.

    Args:
        incomes: Income lines at any cadence
        expenses: Expense lines at any cadence; items without a category
            count as "other"
        allocation: Bucket shares, defaults to 50/30/20
        strict: Reject unknown cadences instead of treating them as monthly

    Returns:
        BudgetSummary with monthly totals, per-category totals and status,
        bucket budgets, spending per bucket and advice flags
    """
    allocation = allocation or BudgetAllocation()

    total_income = math.fsum(to_monthly(item.amount, item.frequency, strict=strict) for item in incomes)

    category_totals: Dict[str, float] = defaultdict(float)
    for item in expenses:
        category_totals[_category_of(item)] += to_monthly(item.amount, item.frequency, strict=strict)
    category_totals = dict(category_totals)

    total_expenses = math.fsum(category_totals.values())
    balance = total_income - total_expenses
    savings_rate = balance / total_income * 100.0 if total_income > 0 else 0.0

    allocated = allocate(total_income, allocation)
    spent = {
        bucket.value: math.fsum(category_totals.get(c, 0.0) for c in categories_in(bucket))
        for bucket in BudgetBucket
    }

    category_status = {}
    for category, bucket in CATEGORY_TO_BUCKET.items():
        budget = allocated[bucket.value]
        fair_share = budget / len(categories_in(bucket))
        over = spent[bucket.value] > budget and category_totals.get(category, 0.0) > fair_share
        category_status[category] = STATUS_OVER if over else STATUS_UNDER

    advice = {
        "necessities_over": spent[BudgetBucket.NECESSITIES.value] > allocated[BudgetBucket.NECESSITIES.value],
        "wants_over": spent[BudgetBucket.WANTS.value] > allocated[BudgetBucket.WANTS.value],
        "savings_under": spent[BudgetBucket.SAVINGS.value] < allocated[BudgetBucket.SAVINGS.value],
        "negative_balance": balance < 0,
        "low_savings_rate": savings_rate < RECOMMENDED_SAVINGS_RATE_PCT,
        "healthy_surplus": balance > 0 and balance > total_income * SURPLUS_INCOME_SHARE,
    }

    logger.debug(
        f"Budget summary: income={total_income:.2f}, expenses={total_expenses:.2f}, balance={balance:.2f}"
    )
    return BudgetSummary(
        total_monthly_income=total_income,
        total_monthly_expenses=total_expenses,
        balance=balance,
        savings_rate_pct=savings_rate,
        category_totals=category_totals,
        allocated=allocated,
        spent=spent,
        category_status=category_status,
        advice=advice,
    )
