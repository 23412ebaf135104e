"""
Loan models for FinTool.

Immutable records describing a loan request and the amortization schedule
computed from it. Parameters are validated on construction so the engine
never runs on inputs that would produce misleading zeros or NaNs.

Classes:
    LoanParameters: Principal, rate, term, method and payment cadence
    AmortizationEntry: One period of a repayment schedule
    YearlyAmortizationPoint: Schedule aggregated to one row per year
    SchedulePage: One page of a schedule for table display
    MortgageSummary: Aggregate metrics plus the full schedule
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from fintool.core.constants import (
    AmortizationMethod,
    Frequency,
    FREQUENCY_ALIASES,
    LOAN_FREQUENCIES,
    LtvBand,
    PERIODS_PER_YEAR,
)
from fintool.utils.error_utils import InvalidParameterError
from fintool.utils.rate_utils import annual_pct_to_periodic_decimal, convert_duration_years_to_periods
from fintool.utils.validation import (
    coerce_enum,
    require_int_at_least,
    require_non_negative,
    require_positive,
)


@dataclass(frozen=True)
class LoanParameters:
    """
    Inputs of a loan computation.

    Attributes:
        principal: Financed amount (must be positive)
        annual_rate_pct: Nominal annual interest rate as percentage (>= 0)
        term_years: Loan duration in whole years (>= 1)
        method: Amortization convention
        frequency: Payment cadence (monthly, quarterly, semiannual or annual)
        property_price: Optional price of the financed property, for LTV
    """

    principal: float
    annual_rate_pct: float
    term_years: int
    method: AmortizationMethod = AmortizationMethod.EQUAL_INSTALLMENT
    frequency: Frequency = Frequency.MONTHLY
    property_price: Optional[float] = None

    def __post_init__(self):
        # frozen dataclass: normalized values are written through object.__setattr__
        object.__setattr__(self, "principal", require_positive(self.principal, "principal"))
        object.__setattr__(
            self, "annual_rate_pct", require_non_negative(self.annual_rate_pct, "annual_rate_pct")
        )
        object.__setattr__(self, "term_years", require_int_at_least(self.term_years, 1, "term_years"))
        object.__setattr__(self, "method", coerce_enum(AmortizationMethod, self.method, "method"))
        frequency = coerce_enum(Frequency, self.frequency, "frequency", FREQUENCY_ALIASES)
        if frequency not in LOAN_FREQUENCIES:
            raise InvalidParameterError(
                f"Loans cannot be repaid {frequency.value}",
                field="frequency",
                value=frequency.value,
            )
        object.__setattr__(self, "frequency", frequency)
        if self.property_price is not None:
            object.__setattr__(
                self, "property_price", require_non_negative(self.property_price, "property_price")
            )

    @property
    def periods_per_year(self) -> int:
        return PERIODS_PER_YEAR[self.frequency]

    @property
    def total_periods(self) -> int:
        return convert_duration_years_to_periods(self.term_years, self.periods_per_year)

    @property
    def periodic_rate(self) -> float:
        return annual_pct_to_periodic_decimal(self.annual_rate_pct, self.periods_per_year)


@dataclass(frozen=True)
class AmortizationEntry:
    """One period of a repayment schedule.

    ``balance`` is the outstanding principal after this period's payment.
    """

    period: int
    payment: float
    principal: float
    interest: float
    balance: float

    def to_dict(self) -> dict:
        return {
            "period": self.period,
            "payment": self.payment,
            "principal": self.principal,
            "interest": self.interest,
            "balance": self.balance,
        }


@dataclass(frozen=True)
class YearlyAmortizationPoint:
    """Principal and interest paid during one loan year (1-based).

    ``balance`` is the outstanding balance after the last payment of the year.
    """

    year: int
    balance: float
    principal: float
    interest: float


@dataclass(frozen=True)
class SchedulePage:
    items: Tuple[AmortizationEntry, ...]
    page: int
    page_size: int
    total_pages: int
    total_items: int


@dataclass(frozen=True)
class MortgageSummary:
    """
    Aggregate metrics of a loan.

    Attributes:
        payment: Reference installment. Constant payment for equal-installment,
            first (highest) payment for equal-principal, periodic interest for
            interest-only.
        total_periods: Number of payments
        total_interest: Sum of interest components
        total_paid: Principal plus total interest
        interest_to_principal: total_interest / principal
        ltv_pct: Loan-to-value ratio as percentage, if a property price was given
        ltv_band: Risk band of ``ltv_pct``
        schedule: Full schedule, ascending period order
    """

    principal: float
    payment: float
    total_periods: int
    total_interest: float
    total_paid: float
    interest_to_principal: float
    ltv_pct: Optional[float] = None
    ltv_band: Optional[LtvBand] = None
    schedule: Tuple[AmortizationEntry, ...] = field(default_factory=tuple)
