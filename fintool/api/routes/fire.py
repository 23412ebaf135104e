"""
FIRE (financial independence, retire early) calculator endpoints.
"""

import logging

from fastapi import APIRouter

from fintool.api.schemas import (
    FireAdvancedRequest,
    FireAdvancedResponse,
    FireProjectionPointSchema,
    FireSimpleRequest,
    FireSimpleResponse,
    YearsToTargetRequest,
    YearsToTargetResponse,
)
from fintool.core.engine.goal_seek import advanced_fire_plan, fire_plan, years_to_target
from fintool.utils.rate_utils import round_to_cents

logger = logging.getLogger("fintool")

router = APIRouter()


@router.post("/simple", response_model=FireSimpleResponse)
def fire_simple(request: FireSimpleRequest):
    """Years until savings cover expenses at the safe withdrawal rate."""
    plan = fire_plan(
        current_age=request.current_age,
        current_savings=request.current_savings,
        annual_income=request.annual_income,
        annual_expenses=request.annual_expenses,
        annual_return_pct=request.annual_return_pct,
        safe_withdrawal_rate_pct=request.safe_withdrawal_rate_pct,
    )
    return FireSimpleResponse(
        target_amount=round_to_cents(plan.target_amount),
        annual_savings=round_to_cents(plan.annual_savings),
        savings_rate_pct=plan.savings_rate_pct,
        years_to_fire=plan.years_to_fire,
        fire_age=plan.fire_age,
        progress_pct=plan.progress_pct,
        reached=plan.reached,
    )


@router.post("/advanced", response_model=FireAdvancedResponse)
def fire_advanced(request: FireAdvancedRequest):
    """FIRE plan bounded by a target age, with the age-indexed trajectory."""
    plan = advanced_fire_plan(**request.model_dump())
    logger.info(f"Advanced FIRE plan: reached={plan.reached}, fire_age={plan.fire_age}")
    return FireAdvancedResponse(
        required_assets=round_to_cents(plan.required_assets),
        annual_savings=round_to_cents(plan.annual_savings),
        years=plan.years,
        fire_age=plan.fire_age,
        final_assets=round_to_cents(plan.final_assets),
        reached=plan.reached,
        years_in_retirement=plan.years_in_retirement,
        projection=[
            FireProjectionPointSchema(
                age=point.age,
                assets=round_to_cents(point.assets),
                target=round_to_cents(point.target),
            )
            for point in plan.projection
        ],
    )


@router.post("/years-to-target", response_model=YearsToTargetResponse)
def fire_years_to_target(request: YearsToTargetRequest):
    """Generic goal seek: years of yearly contributions until a target is met."""
    result = years_to_target(
        request.initial_assets,
        request.annual_contribution,
        request.annual_rate_pct,
        request.target_amount,
    )
    return YearsToTargetResponse(
        reached=result.reached,
        years=result.periods,
        iterations=result.iterations,
        final_balance=round_to_cents(result.final_balance),
        progress_pct=result.progress_pct,
        trajectory=[round_to_cents(balance) for balance in result.trajectory],
    )
