"""
Budget calculator endpoints.

Provides the linked 50/30/20 sliders, the monthly budget summary and the
cadence normalization used by the income and expense lists.
"""

import logging
import math

from fastapi import APIRouter, Depends

from fintool.api.schemas import (
    BudgetAllocationSchema,
    BudgetSummaryRequest,
    BudgetSummaryResponse,
    NormalizedItemSchema,
    NormalizeRequest,
    NormalizeResponse,
    RedistributeRequest,
)
from fintool.config import Settings, get_settings
from fintool.core.engine.budget import redistribute, summarize_budget
from fintool.core.engine.frequency import convert, parse_frequency
from fintool.core.models.budget import BudgetAllocation, CashItem
from fintool.utils.rate_utils import round_to_cents

logger = logging.getLogger("fintool")

router = APIRouter()


def _allocation(schema: BudgetAllocationSchema) -> BudgetAllocation:
    return BudgetAllocation(**schema.model_dump())


def _cash_item(schema) -> CashItem:
    return CashItem(**schema.model_dump())


@router.post("/allocation/redistribute", response_model=BudgetAllocationSchema)
def budget_redistribute(request: RedistributeRequest):
    """Set one bucket and rebalance the other two so the total stays 100."""
    allocation = redistribute(_allocation(request.allocation), request.bucket, request.value)
    return BudgetAllocationSchema(**allocation.as_dict())


@router.post("/summary", response_model=BudgetSummaryResponse)
def budget_summary(request: BudgetSummaryRequest, settings: Settings = Depends(get_settings)):
    """Monthly totals, per-bucket budgets and spending, category status and advice."""
    summary = summarize_budget(
        [_cash_item(item) for item in request.incomes],
        [_cash_item(item) for item in request.expenses],
        _allocation(request.allocation),
        strict=settings.strict_frequency,
    )
    return BudgetSummaryResponse(
        total_monthly_income=round_to_cents(summary.total_monthly_income),
        total_monthly_expenses=round_to_cents(summary.total_monthly_expenses),
        balance=round_to_cents(summary.balance),
        savings_rate_pct=summary.savings_rate_pct,
        category_totals={k: round_to_cents(v) for k, v in summary.category_totals.items()},
        allocated={k: round_to_cents(v) for k, v in summary.allocated.items()},
        spent={k: round_to_cents(v) for k, v in summary.spent.items()},
        category_status=summary.category_status,
        advice=summary.advice,
    )


@router.post("/normalize", response_model=NormalizeResponse)
def budget_normalize(request: NormalizeRequest, settings: Settings = Depends(get_settings)):
    """Convert every item to a per-period amount at ``target_frequency``."""
    strict = settings.strict_frequency
    target = parse_frequency(request.target_frequency, strict=strict)
    converted = [
        (item, convert(item.amount, item.frequency, target, strict=strict)) for item in request.items
    ]
    return NormalizeResponse(
        target_frequency=target.value,
        items=[
            NormalizedItemSchema(
                description=item.description,
                amount=item.amount,
                frequency=item.frequency,
                converted=round_to_cents(value),
            )
            for item, value in converted
        ],
        total=round_to_cents(math.fsum(value for _, value in converted)),
    )
