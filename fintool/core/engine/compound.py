"""
Compound growth projection for FinTool.

Simulates a balance period by period: contributions land at the start or
end of their period, growth is applied once per compounding period, and a
snapshot is taken at the end of every full year. Monetary values are
rounded to cents only when yearly snapshots are recorded; the running
balance keeps full precision.
"""

import logging
from typing import List, Tuple

import pandas as pd

from fintool.core.constants import ContributionTiming, PERIODS_PER_YEAR
from fintool.core.models.growth import (
    GrowthParameters,
    PeriodSnapshot,
    ProjectionResult,
    YearlyProjectionPoint,
)
from fintool.utils.error_utils import InvalidParameterError, error_handler
from fintool.utils.rate_utils import annual_pct_to_decimal, annual_pct_to_periodic_decimal, round_to_cents
from fintool.utils.validation import require_finite, require_int_at_least, require_non_negative

logger = logging.getLogger(__name__)


def contribution_cadence(params: GrowthParameters) -> Tuple[int, float]:
    """
    Map the contribution cadence onto compounding periods.

    Returns:
        ``(every, amount)``: ``amount`` is added on every ``every``-th
        compounding period. Contributions more frequent than compounding
        are pooled into one deposit per compounding period.
    """
    compounding_ppy = PERIODS_PER_YEAR[params.compounding]
    contribution_ppy = PERIODS_PER_YEAR[params.contribution_frequency]
    if contribution_ppy <= compounding_ppy:
        if compounding_ppy % contribution_ppy:
            raise InvalidParameterError(
                f"{params.contribution_frequency.value} contributions do not align with "
                f"{params.compounding.value} compounding",
                field="contribution_frequency",
                value=params.contribution_frequency.value,
            )
        return compounding_ppy // contribution_ppy, params.contribution
    if contribution_ppy % compounding_ppy:
        raise InvalidParameterError(
            f"{params.contribution_frequency.value} contributions do not align with "
            f"{params.compounding.value} compounding",
            field="contribution_frequency",
            value=params.contribution_frequency.value,
        )
    return 1, params.contribution * (contribution_ppy // compounding_ppy)


@error_handler
def project(params: GrowthParameters) -> ProjectionResult:
    """
    Project a balance over ``params.horizon_years``.

    Args:
        params: Validated growth parameters

    Returns:
        ProjectionResult with one snapshot per compounding period, one
        rounded point per year and the final totals. Cumulative
        contributions include the initial capital.
    """
    periods_per_year = params.periods_per_year
    periodic_rate = annual_pct_to_periodic_decimal(params.annual_rate_pct, periods_per_year)
    every, amount = contribution_cadence(params)
    at_beginning = params.timing == ContributionTiming.BEGINNING

    balance = params.initial
    contributions = params.initial
    periods = []
    years = []

    for period in range(1, params.total_periods + 1):
        due = amount if period % every == 0 else 0.0

        if at_beginning:
            balance += due
            contributions += due

        balance *= 1 + periodic_rate

        if not at_beginning:
            balance += due
            contributions += due

        periods.append(PeriodSnapshot(period=period, balance=balance, contributions=contributions))

        if period % periods_per_year == 0:
            years.append(
                YearlyProjectionPoint(
                    year=period // periods_per_year,
                    balance=round_to_cents(balance),
                    contributions=round_to_cents(contributions),
                    interest=round_to_cents(balance - contributions),
                )
            )

    logger.debug(
        f"Projected {params.total_periods} periods at {params.annual_rate_pct}%: final balance {balance:.2f}"
    )
    return ProjectionResult(
        periods=tuple(periods),
        years=tuple(years),
        final_amount=round_to_cents(balance),
        total_contributions=round_to_cents(contributions),
        interest_earned=round_to_cents(balance - contributions),
    )


@error_handler
def continue_projection(start_balance: float, annual_rate_pct: float, years: int) -> List[float]:
    """
    Grow a balance yearly with no further contributions.

    This is the post-goal phase of a plan: the rate is usually the nominal
    return minus assumed inflation and may therefore be negative.

    Returns:
        Balance at the end of each of the ``years`` years, full precision
    """
    balance = require_non_negative(start_balance, "start_balance")
    rate_pct = require_finite(annual_rate_pct, "annual_rate_pct")
    if rate_pct <= -100:
        raise InvalidParameterError(
            f"annual_rate_pct must be above -100, got {rate_pct}",
            field="annual_rate_pct",
            value=rate_pct,
        )
    years = require_int_at_least(years, 0, "years")

    growth = 1 + annual_pct_to_decimal(rate_pct)
    balances = []
    for _ in range(years):
        balance *= growth
        balances.append(balance)
    return balances


@error_handler
def extend_projection(result: ProjectionResult, annual_rate_pct: float, years: int) -> ProjectionResult:
    """
    Append a continuation phase to a projection.

    Contributions stay frozen at their last value; the extra yearly points
    continue the year numbering of ``result``.
    """
    last_year = result.years[-1].year if result.years else 0
    start_balance = result.periods[-1].balance if result.periods else result.final_amount
    contributions = result.periods[-1].contributions if result.periods else result.total_contributions

    balances = continue_projection(start_balance, annual_rate_pct, years)
    extra = [
        YearlyProjectionPoint(
            year=last_year + offset,
            balance=round_to_cents(balance),
            contributions=round_to_cents(contributions),
            interest=round_to_cents(balance - contributions),
        )
        for offset, balance in enumerate(balances, start=1)
    ]
    final_balance = balances[-1] if balances else start_balance

    return ProjectionResult(
        periods=result.periods,
        years=result.years + tuple(extra),
        final_amount=round_to_cents(final_balance),
        total_contributions=round_to_cents(contributions),
        interest_earned=round_to_cents(final_balance - contributions),
    )


def projection_to_frame(result: ProjectionResult) -> pd.DataFrame:
    """
    Convert the yearly points of a projection to a DataFrame.

    Returns:
        DataFrame with columns: year, balance, contributions, interest
    """
    return pd.DataFrame(
        [point.to_dict() for point in result.years],
        columns=["year", "balance", "contributions", "interest"],
    )
