"""
Growth projection models for FinTool.

Classes:
    GrowthParameters: Inputs of a compound-interest projection
    PeriodSnapshot: Balance after one compounding period (full precision)
    YearlyProjectionPoint: Year-end snapshot rounded to cents
    ProjectionResult: Both trajectories plus final totals
"""

from dataclasses import dataclass
from typing import Tuple

from fintool.core.constants import (
    ContributionTiming,
    Frequency,
    FREQUENCY_ALIASES,
    LOAN_FREQUENCIES,
    PERIODS_PER_YEAR,
)
from fintool.utils.error_utils import InvalidParameterError
from fintool.utils.validation import coerce_enum, require_int_at_least, require_non_negative

# Compounding and contributions share the loan cadences: all of them divide a year into whole months
GROWTH_FREQUENCIES = LOAN_FREQUENCIES


def _growth_frequency(value, field: str) -> Frequency:
    frequency = coerce_enum(Frequency, value, field, FREQUENCY_ALIASES)
    if frequency not in GROWTH_FREQUENCIES:
        raise InvalidParameterError(
            f"{field} must be one of: {', '.join(f.value for f in GROWTH_FREQUENCIES)}; got {frequency.value}",
            field=field,
            value=frequency.value,
        )
    return frequency


@dataclass(frozen=True)
class GrowthParameters:
    """
    Inputs of a compound growth projection.

    Attributes:
        initial: Starting capital (>= 0)
        contribution: Amount added at each contribution date (>= 0)
        annual_rate_pct: Nominal annual rate as percentage (>= 0)
        horizon_years: Projection length in whole years (>= 1)
        compounding: How often growth is applied
        contribution_frequency: How often ``contribution`` is paid in
        timing: Whether contributions land before or after that period's growth
    """

    initial: float
    contribution: float
    annual_rate_pct: float
    horizon_years: int
    compounding: Frequency = Frequency.MONTHLY
    contribution_frequency: Frequency = Frequency.MONTHLY
    timing: ContributionTiming = ContributionTiming.END

    def __post_init__(self):
        object.__setattr__(self, "initial", require_non_negative(self.initial, "initial"))
        object.__setattr__(self, "contribution", require_non_negative(self.contribution, "contribution"))
        object.__setattr__(
            self, "annual_rate_pct", require_non_negative(self.annual_rate_pct, "annual_rate_pct")
        )
        object.__setattr__(
            self, "horizon_years", require_int_at_least(self.horizon_years, 1, "horizon_years")
        )
        object.__setattr__(self, "compounding", _growth_frequency(self.compounding, "compounding"))
        object.__setattr__(
            self,
            "contribution_frequency",
            _growth_frequency(self.contribution_frequency, "contribution_frequency"),
        )
        object.__setattr__(self, "timing", coerce_enum(ContributionTiming, self.timing, "timing"))

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR[self.compounding]

    @property
    def total_periods(self) -> int:
        return self.horizon_years * self.periods_per_year


@dataclass(frozen=True)
class PeriodSnapshot:
    period: int
    balance: float
    contributions: float


@dataclass(frozen=True)
class YearlyProjectionPoint:
    """Year-end state; ``interest`` is balance minus cumulative contributions."""

    year: int
    balance: float
    contributions: float
    interest: float

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "balance": self.balance,
            "contributions": self.contributions,
            "interest": self.interest,
        }


@dataclass(frozen=True)
class ProjectionResult:
    periods: Tuple[PeriodSnapshot, ...]
    years: Tuple[YearlyProjectionPoint, ...]
    final_amount: float
    total_contributions: float
    interest_earned: float
