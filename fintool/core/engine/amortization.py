"""
Amortization schedule generation for FinTool.

Builds repayment schedules under three conventions:

    equal-installment (French): constant payment, interest share shrinks
    equal-principal (Italian): constant principal share, payment shrinks
    interest-only (bullet): interest every period, principal at term end

Schedules are produced eagerly since callers page through them and sum
them. The last period of every method settles whatever balance is left, so
schedules always close at exactly zero and principal components add up to
the borrowed amount.
"""

import logging
import math
from dataclasses import replace
from typing import Callable, Dict, List, Sequence, Union

import numpy_financial as npf
import pandas as pd

from fintool.core.constants import (
    AmortizationMethod,
    LTV_LOW_MAX_PCT,
    LTV_MEDIUM_MAX_PCT,
    LtvBand,
)
from fintool.core.models.loan import (
    AmortizationEntry,
    LoanParameters,
    MortgageSummary,
    SchedulePage,
    YearlyAmortizationPoint,
)
from fintool.utils.error_utils import InvalidParameterError, error_handler
from fintool.utils.validation import (
    coerce_enum,
    require_int_at_least,
    require_non_negative,
    require_positive,
)

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ["period", "payment", "principal", "interest", "balance"]


def installment_payment(principal: float, periodic_rate: float, total_periods: int) -> float:
    """
    Constant payment of an equal-installment loan.

    ``A = P * r(1+r)^n / ((1+r)^n - 1)``; with a zero rate the formula
    divides by zero and the payment is simply ``P / n``.
    """
    if periodic_rate == 0:
        return principal / total_periods
    return float(npf.pmt(periodic_rate, total_periods, -principal))


def _equal_installment(principal: float, periodic_rate: float, total_periods: int) -> List[AmortizationEntry]:
    payment = installment_payment(principal, periodic_rate, total_periods)
    schedule = []
    balance = principal
    for period in range(1, total_periods + 1):
        interest = balance * periodic_rate
        if period == total_periods:
            principal_part = balance
            period_payment = principal_part + interest
        else:
            principal_part = payment - interest
            period_payment = payment
        balance = max(balance - principal_part, 0.0)
        schedule.append(AmortizationEntry(period, period_payment, principal_part, interest, balance))
    return schedule


def _equal_principal(principal: float, periodic_rate: float, total_periods: int) -> List[AmortizationEntry]:
    principal_share = principal / total_periods
    schedule = []
    balance = principal
    for period in range(1, total_periods + 1):
        interest = balance * periodic_rate
        principal_part = balance if period == total_periods else principal_share
        balance = max(balance - principal_part, 0.0)
        schedule.append(
            AmortizationEntry(period, principal_part + interest, principal_part, interest, balance)
        )
    return schedule


def _interest_only(principal: float, periodic_rate: float, total_periods: int) -> List[AmortizationEntry]:
    schedule = []
    balance = principal
    for period in range(1, total_periods + 1):
        interest = balance * periodic_rate
        # balloon: the whole principal is repaid with the last interest payment
        principal_part = balance if period == total_periods else 0.0
        balance -= principal_part
        schedule.append(
            AmortizationEntry(period, interest + principal_part, principal_part, interest, balance)
        )
    return schedule


SCHEDULE_GENERATORS: Dict[AmortizationMethod, Callable[[float, float, int], List[AmortizationEntry]]] = {
    AmortizationMethod.EQUAL_INSTALLMENT: _equal_installment,
    AmortizationMethod.EQUAL_PRINCIPAL: _equal_principal,
    AmortizationMethod.INTEREST_ONLY: _interest_only,
}


@error_handler
def generate_schedule(
    principal: float,
    annual_rate_pct: float,
    total_periods: int,
    periodic_rate: float,
    method: Union[AmortizationMethod, str] = AmortizationMethod.EQUAL_INSTALLMENT,
) -> List[AmortizationEntry]:
    """
    Generate a full amortization schedule.

    Args:
        principal: Borrowed amount (> 0)
        annual_rate_pct: Nominal annual rate as percentage (>= 0)
        total_periods: Number of payments (>= 1)
        periodic_rate: Rate applied each period, as decimal (>= 0)
        method: Amortization convention

    Returns:
        ``total_periods`` entries in ascending period order

    Raises:
        InvalidParameterError: On any violated precondition
    """
    principal = require_positive(principal, "principal")
    require_non_negative(annual_rate_pct, "annual_rate_pct")
    total_periods = require_int_at_least(total_periods, 1, "total_periods")
    periodic_rate = require_non_negative(periodic_rate, "periodic_rate")
    method = coerce_enum(AmortizationMethod, method, "method")

    logger.debug(
        f"Generating {method.value} schedule: principal={principal}, "
        f"rate={annual_rate_pct}%, periods={total_periods}"
    )
    return SCHEDULE_GENERATORS[method](principal, periodic_rate, total_periods)


def ltv_band(ltv_pct: float) -> LtvBand:
    if ltv_pct <= LTV_LOW_MAX_PCT:
        return LtvBand.LOW
    if ltv_pct <= LTV_MEDIUM_MAX_PCT:
        return LtvBand.MEDIUM
    return LtvBand.HIGH


@error_handler
def amortize(params: LoanParameters) -> MortgageSummary:
    """
    Compute the schedule and aggregate metrics of a loan.

    Args:
        params: Validated loan parameters

    Returns:
        MortgageSummary with the reference payment, totals, LTV and schedule
    """
    schedule = generate_schedule(
        params.principal,
        params.annual_rate_pct,
        params.total_periods,
        params.periodic_rate,
        params.method,
    )

    if params.method == AmortizationMethod.EQUAL_INSTALLMENT:
        payment = installment_payment(params.principal, params.periodic_rate, params.total_periods)
    elif params.method == AmortizationMethod.EQUAL_PRINCIPAL:
        payment = schedule[0].payment
    else:
        payment = params.principal * params.periodic_rate

    total_interest = math.fsum(entry.interest for entry in schedule)

    ltv_pct = None
    band = None
    if params.property_price:
        ltv_pct = params.principal / params.property_price * 100.0
        band = ltv_band(ltv_pct)

    return MortgageSummary(
        principal=params.principal,
        payment=payment,
        total_periods=params.total_periods,
        total_interest=total_interest,
        total_paid=params.principal + total_interest,
        interest_to_principal=total_interest / params.principal,
        ltv_pct=ltv_pct,
        ltv_band=band,
        schedule=tuple(schedule),
    )


@error_handler
def compare_methods(params: LoanParameters) -> Dict[AmortizationMethod, MortgageSummary]:
    """
    Amortize the same loan under every method.

    Only ``method`` varies; principal, rate, term and cadence are those of
    ``params``. Used to show first payment, last payment and total interest
    of the three conventions side by side.
    """
    return {method: amortize(replace(params, method=method)) for method in AmortizationMethod}


def schedule_to_frame(schedule: Sequence[AmortizationEntry]) -> pd.DataFrame:
    """
    Convert a schedule to a DataFrame.

    Returns:
        DataFrame with columns: period, payment, principal, interest, balance
    """
    return pd.DataFrame([entry.to_dict() for entry in schedule], columns=SCHEDULE_COLUMNS)


@error_handler
def yearly_breakdown(schedule: Sequence[AmortizationEntry], periods_per_year: int) -> List[YearlyAmortizationPoint]:
    """
    Aggregate a schedule into one row per loan year.

    Args:
        schedule: Entries in ascending period order
        periods_per_year: Payment cadence of the schedule

    Returns:
        One point per year with principal and interest paid that year and
        the balance left at its end
    """
    periods_per_year = require_int_at_least(periods_per_year, 1, "periods_per_year")
    if not schedule:
        return []

    df = schedule_to_frame(schedule)
    df["year"] = (df["period"] - 1) // periods_per_year + 1
    grouped = df.groupby("year", sort=True).agg(
        balance=("balance", "last"),
        principal=("principal", "sum"),
        interest=("interest", "sum"),
    )
    return [
        YearlyAmortizationPoint(
            year=int(row.Index),
            balance=float(row.balance),
            principal=float(row.principal),
            interest=float(row.interest),
        )
        for row in grouped.itertuples()
    ]


@error_handler
def paginate(schedule: Sequence[AmortizationEntry], page: int = 1, page_size: int = 10) -> SchedulePage:
    """
    Slice one page out of a schedule.

    Raises:
        InvalidParameterError: If ``page`` or ``page_size`` is below 1 or the
            page lies past the end of the schedule
    """
    page = require_int_at_least(page, 1, "page")
    page_size = require_int_at_least(page_size, 1, "page_size")
    total_items = len(schedule)
    total_pages = max(1, math.ceil(total_items / page_size))
    if page > total_pages:
        raise InvalidParameterError(
            f"Page {page} is out of range (1-{total_pages})",
            field="page",
            value=page,
        )
    start = (page - 1) * page_size
    return SchedulePage(
        items=tuple(schedule[start:start + page_size]),
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        total_items=total_items,
    )
