"""
Mortgage calculator endpoints.

Computes a loan summary with a paginated schedule and the schedule
aggregated per loan year for charts. A comparison endpoint runs the same
loan under every amortization method.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from fintool.api.schemas import (
    AmortizationEntrySchema,
    MethodComparisonSchema,
    MortgageComparisonResponse,
    MortgageRequest,
    MortgageScheduleResponse,
    MortgageYearlyResponse,
    YearlyAmortizationSchema,
)
from fintool.config import Settings, get_settings
from fintool.core.engine.amortization import amortize, compare_methods, paginate, yearly_breakdown
from fintool.core.models.loan import LoanParameters
from fintool.utils.error_utils import InvalidParameterError
from fintool.utils.rate_utils import round_to_cents

logger = logging.getLogger("fintool")

router = APIRouter()


def _loan_parameters(request: MortgageRequest) -> LoanParameters:
    return LoanParameters(
        principal=request.principal,
        annual_rate_pct=request.annual_rate_pct,
        term_years=request.term_years,
        method=request.method,
        frequency=request.frequency,
        property_price=request.property_price,
    )


def _entry_schema(entry) -> AmortizationEntrySchema:
    return AmortizationEntrySchema(
        period=entry.period,
        payment=round_to_cents(entry.payment),
        principal=round_to_cents(entry.principal),
        interest=round_to_cents(entry.interest),
        balance=round_to_cents(entry.balance),
    )


@router.post("/schedule", response_model=MortgageScheduleResponse)
def mortgage_schedule(
    request: MortgageRequest,
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, ge=1),
    settings: Settings = Depends(get_settings),
):
    """Loan summary plus one page of the amortization schedule."""
    page_size = page_size or settings.schedule_page_size
    if page_size > settings.max_page_size:
        raise InvalidParameterError(
            f"page_size must be at most {settings.max_page_size}, got {page_size}",
            field="page_size",
            value=page_size,
        )

    summary = amortize(_loan_parameters(request))
    schedule_page = paginate(summary.schedule, page=page, page_size=page_size)
    logger.info(
        f"Mortgage schedule: {summary.total_periods} periods, page {page}/{schedule_page.total_pages}"
    )

    return MortgageScheduleResponse(
        principal=round_to_cents(summary.principal),
        payment=round_to_cents(summary.payment),
        total_periods=summary.total_periods,
        total_interest=round_to_cents(summary.total_interest),
        total_paid=round_to_cents(summary.total_paid),
        interest_to_principal=summary.interest_to_principal,
        ltv_pct=summary.ltv_pct,
        ltv_band=summary.ltv_band.value if summary.ltv_band else None,
        page=schedule_page.page,
        page_size=schedule_page.page_size,
        total_pages=schedule_page.total_pages,
        total_items=schedule_page.total_items,
        schedule=[_entry_schema(entry) for entry in schedule_page.items],
    )


@router.post("/yearly", response_model=MortgageYearlyResponse)
def mortgage_yearly(request: MortgageRequest):
    """Principal and interest paid per loan year, with the year-end balance."""
    params = _loan_parameters(request)
    summary = amortize(params)
    years = yearly_breakdown(summary.schedule, params.periods_per_year)

    return MortgageYearlyResponse(
        payment=round_to_cents(summary.payment),
        total_interest=round_to_cents(summary.total_interest),
        years=[
            YearlyAmortizationSchema(
                year=point.year,
                balance=round_to_cents(point.balance),
                principal=round_to_cents(point.principal),
                interest=round_to_cents(point.interest),
            )
            for point in years
        ],
    )


@router.post("/compare", response_model=MortgageComparisonResponse)
def mortgage_compare(request: MortgageRequest):
    """First payment, last payment and total interest of every method."""
    summaries = compare_methods(_loan_parameters(request))
    any_summary = next(iter(summaries.values()))

    return MortgageComparisonResponse(
        principal=round_to_cents(any_summary.principal),
        total_periods=any_summary.total_periods,
        methods=[
            MethodComparisonSchema(
                method=method.value,
                first_payment=round_to_cents(summary.schedule[0].payment),
                last_payment=round_to_cents(summary.schedule[-1].payment),
                total_interest=round_to_cents(summary.total_interest),
                total_paid=round_to_cents(summary.total_paid),
            )
            for method, summary in summaries.items()
        ],
    )
