"""
Pydantic schemas for API request/response validation.

These schemas provide:
- Input validation for calculator requests
- Response serialization
- OpenAPI documentation generation

Cadence, method and category fields are plain strings: the engine resolves
them (aliases, case) and rejects unknown values with InvalidParameterError,
which the API reports as 422.
"""

from typing import Optional, Dict, List, Union

from pydantic import BaseModel, Field, ConfigDict, field_validator

from fintool.core.constants import BudgetBucket, DEFAULT_BUDGET_SPLIT
from fintool.utils.rate_utils import normalize_rate_input


# ======================
# Base Schemas
# ======================


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(
        from_attributes=True,  # Build responses straight from engine dataclasses
        validate_assignment=True,
        use_enum_values=True,
    )


class RateInputMixin(BaseSchema):
    """Accepts ``annual_rate_pct`` as a number or a string such as ``"3.5%"``."""

    annual_rate_pct: Union[float, str] = Field(..., description="Annual rate as percentage")

    @field_validator("annual_rate_pct")
    @classmethod
    def parse_rate(cls, v):
        return normalize_rate_input(v)


# ======================
# Mortgage Schemas
# ======================


class MortgageRequest(RateInputMixin):
    """Loan inputs of the mortgage calculator."""

    principal: float = Field(..., gt=0, description="Financed amount")
    term_years: int = Field(..., gt=0, le=100)
    method: str = Field(default="equal-installment", description="equal-installment, equal-principal or interest-only")
    frequency: str = Field(default="monthly", description="monthly, quarterly, semiannual or annual")
    property_price: Optional[float] = Field(None, ge=0, description="Property price, enables LTV")


class AmortizationEntrySchema(BaseSchema):
    period: int
    payment: float
    principal: float
    interest: float
    balance: float


class MortgageScheduleResponse(BaseSchema):
    """Mortgage summary plus one page of the schedule."""

    principal: float
    payment: float
    total_periods: int
    total_interest: float
    total_paid: float
    interest_to_principal: float
    ltv_pct: Optional[float] = None
    ltv_band: Optional[str] = None
    page: int
    page_size: int
    total_pages: int
    total_items: int
    schedule: List[AmortizationEntrySchema]


class YearlyAmortizationSchema(BaseSchema):
    year: int
    balance: float
    principal: float
    interest: float


class MortgageYearlyResponse(BaseSchema):
    payment: float
    total_interest: float
    years: List[YearlyAmortizationSchema]


class MethodComparisonSchema(BaseSchema):
    method: str
    first_payment: float
    last_payment: float
    total_interest: float
    total_paid: float


class MortgageComparisonResponse(BaseSchema):
    """The same loan under each amortization method."""

    principal: float
    total_periods: int
    methods: List[MethodComparisonSchema]


# ======================
# Compound Interest Schemas
# ======================


class CompoundInterestRequest(RateInputMixin):
    """Inputs of the compound interest calculator."""

    initial: float = Field(..., ge=0, description="Starting capital")
    contribution: float = Field(default=0, ge=0, description="Amount paid in at each contribution date")
    horizon_years: int = Field(..., gt=0, le=100)
    compounding: str = Field(default="monthly")
    contribution_frequency: str = Field(default="monthly")
    timing: str = Field(default="end", description="beginning or end of period")
    continuation_years: int = Field(default=0, ge=0, le=100, description="Extra years without contributions")
    continuation_rate_pct: Optional[float] = Field(
        None, gt=-100, le=100, description="Rate of the extra years (defaults to annual_rate_pct)"
    )


class YearlyProjectionSchema(BaseSchema):
    year: int
    balance: float
    contributions: float
    interest: float


class CompoundInterestResponse(BaseSchema):
    final_amount: float
    total_contributions: float
    interest_earned: float
    years: List[YearlyProjectionSchema]


# ======================
# FIRE Schemas
# ======================


class FireSimpleRequest(BaseSchema):
    current_age: int = Field(..., ge=0, le=120)
    current_savings: float = Field(default=0, ge=0)
    annual_income: float = Field(..., ge=0)
    annual_expenses: float = Field(..., gt=0)
    annual_return_pct: float = Field(default=7.0, gt=-100, le=100)
    safe_withdrawal_rate_pct: float = Field(default=4.0, gt=0, le=100)


class FireSimpleResponse(BaseSchema):
    target_amount: float
    annual_savings: float
    savings_rate_pct: float
    years_to_fire: Optional[int] = None
    fire_age: Optional[int] = None
    progress_pct: float
    reached: bool


class FireAdvancedRequest(BaseSchema):
    current_age: int = Field(..., ge=0, le=120)
    target_age: int = Field(..., gt=0, le=120)
    life_expectancy: int = Field(default=90, ge=0, le=130)
    current_assets: float = Field(default=0, ge=0)
    annual_income: float = Field(..., ge=0)
    savings_rate_pct: float = Field(..., ge=0, le=100)
    annual_expenses: float = Field(..., gt=0)
    annual_return_pct: float = Field(default=7.0, gt=-100, le=100)
    inflation_pct: float = Field(default=2.0, ge=-50, le=100)
    withdrawal_rate_pct: float = Field(default=4.0, gt=0, le=100)


class FireProjectionPointSchema(BaseSchema):
    age: int
    assets: float
    target: float


class FireAdvancedResponse(BaseSchema):
    required_assets: float
    annual_savings: float
    years: int
    fire_age: int
    final_assets: float
    reached: bool
    years_in_retirement: int
    projection: List[FireProjectionPointSchema]


class YearsToTargetRequest(BaseSchema):
    initial_assets: float = Field(default=0)
    annual_contribution: float = Field(default=0)
    annual_rate_pct: float = Field(default=0, gt=-100, le=100)
    target_amount: float = Field(..., gt=0)


class YearsToTargetResponse(BaseSchema):
    reached: bool
    years: Optional[int] = None
    iterations: int
    final_balance: float
    progress_pct: float
    trajectory: List[float]


# ======================
# Budget Schemas
# ======================


class BudgetAllocationSchema(BaseSchema):
    necessities: int = Field(default=DEFAULT_BUDGET_SPLIT[BudgetBucket.NECESSITIES], ge=0, le=100)
    wants: int = Field(default=DEFAULT_BUDGET_SPLIT[BudgetBucket.WANTS], ge=0, le=100)
    savings: int = Field(default=DEFAULT_BUDGET_SPLIT[BudgetBucket.SAVINGS], ge=0, le=100)


class RedistributeRequest(BaseSchema):
    allocation: BudgetAllocationSchema = Field(default_factory=BudgetAllocationSchema)
    bucket: str = Field(..., description="necessities, wants or savings")
    value: int = Field(..., ge=0, le=100)


class CashItemSchema(BaseSchema):
    amount: float = Field(..., ge=0)
    frequency: str = Field(default="monthly")
    category: Optional[str] = None
    description: str = Field(default="", max_length=255)


class BudgetSummaryRequest(BaseSchema):
    incomes: List[CashItemSchema] = Field(default_factory=list)
    expenses: List[CashItemSchema] = Field(default_factory=list)
    allocation: BudgetAllocationSchema = Field(default_factory=BudgetAllocationSchema)


class BudgetSummaryResponse(BaseSchema):
    total_monthly_income: float
    total_monthly_expenses: float
    balance: float
    savings_rate_pct: float
    category_totals: Dict[str, float]
    allocated: Dict[str, float]
    spent: Dict[str, float]
    category_status: Dict[str, str]
    advice: Dict[str, bool]


class NormalizeRequest(BaseSchema):
    items: List[CashItemSchema]
    target_frequency: str = Field(default="monthly")


class NormalizedItemSchema(BaseSchema):
    description: str
    amount: float
    frequency: str
    converted: float


class NormalizeResponse(BaseSchema):
    target_frequency: str
    items: List[NormalizedItemSchema]
    total: float


# ======================
# Error Schemas
# ======================


class ErrorResponse(BaseSchema):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Detailed error information")
    type: Optional[str] = Field(None, description="Error type/class")
