"""
Compound interest calculator endpoint.
"""

import logging

from fastapi import APIRouter

from fintool.api.schemas import (
    CompoundInterestRequest,
    CompoundInterestResponse,
    YearlyProjectionSchema,
)
from fintool.core.engine.compound import extend_projection, project
from fintool.core.models.growth import GrowthParameters

logger = logging.getLogger("fintool")

router = APIRouter()


@router.post("/projection", response_model=CompoundInterestResponse)
def compound_projection(request: CompoundInterestRequest):
    """
    Year-by-year growth of a balance with periodic contributions.

    With ``continuation_years`` the projection continues after the horizon
    without further contributions, at ``continuation_rate_pct`` when given.
    """
    params = GrowthParameters(
        initial=request.initial,
        contribution=request.contribution,
        annual_rate_pct=request.annual_rate_pct,
        horizon_years=request.horizon_years,
        compounding=request.compounding,
        contribution_frequency=request.contribution_frequency,
        timing=request.timing,
    )
    result = project(params)

    if request.continuation_years:
        rate = request.continuation_rate_pct
        if rate is None:
            rate = params.annual_rate_pct
        result = extend_projection(result, rate, request.continuation_years)

    logger.info(f"Compound projection over {len(result.years)} years: final {result.final_amount}")
    return CompoundInterestResponse(
        final_amount=result.final_amount,
        total_contributions=result.total_contributions,
        interest_earned=result.interest_earned,
        years=[YearlyProjectionSchema.model_validate(point) for point in result.years],
    )
