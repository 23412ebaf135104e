"""
Test suite for amortization schedules in FinTool.

Covers the three repayment methods, the mortgage summary, and the pandas
helpers used for yearly aggregation and table display.
"""

import math

import pytest

from fintool.core.constants import AmortizationMethod, Frequency, LtvBand
from fintool.core.engine.amortization import (
    SCHEDULE_COLUMNS,
    SCHEDULE_GENERATORS,
    amortize,
    compare_methods,
    generate_schedule,
    installment_payment,
    paginate,
    schedule_to_frame,
    yearly_breakdown,
)
from fintool.core.models.loan import LoanParameters
from fintool.utils.error_utils import InvalidParameterError


ALL_METHODS = list(AmortizationMethod)
LOAN_CADENCES = [Frequency.MONTHLY, Frequency.QUARTERLY, Frequency.SEMIANNUAL, Frequency.ANNUAL]


@pytest.fixture
def reference_loan():
    """200,000 at 3.5% over 25 years, monthly equal installments."""
    return LoanParameters(principal=200000, annual_rate_pct=3.5, term_years=25)


class TestReferenceScenario:
    """Test the well-known 25-year mortgage."""

    def test_payment(self, reference_loan):
        """The closed-form payment is about 1001.2."""
        summary = amortize(reference_loan)
        assert summary.payment == pytest.approx(1001.2, abs=0.1)

    def test_totals(self, reference_loan):
        """Total interest is payments minus principal."""
        summary = amortize(reference_loan)

        assert summary.total_periods == 300
        assert summary.total_interest == pytest.approx(summary.payment * 300 - 200000, abs=0.01)
        assert summary.total_paid == pytest.approx(200000 + summary.total_interest)
        assert summary.interest_to_principal == pytest.approx(summary.total_interest / 200000)

    def test_constant_installment(self, reference_loan):
        """Every payment equals the reference installment."""
        summary = amortize(reference_loan)
        for entry in summary.schedule:
            assert entry.payment == pytest.approx(summary.payment, abs=1e-6)

    def test_first_period_split(self, reference_loan):
        """First interest is principal times the monthly rate."""
        first = amortize(reference_loan).schedule[0]
        assert first.interest == pytest.approx(200000 * 0.035 / 12)
        assert first.principal == pytest.approx(first.payment - first.interest)

    def test_idempotent(self, reference_loan):
        """Identical inputs give identical outputs."""
        assert amortize(reference_loan) == amortize(reference_loan)


class TestScheduleProperties:
    """Test invariants shared by all methods and cadences."""

    @pytest.mark.parametrize("method", ALL_METHODS)
    @pytest.mark.parametrize("frequency", LOAN_CADENCES)
    def test_principal_conservation(self, method, frequency):
        """Principal components sum to the borrowed amount."""
        params = LoanParameters(150000, 4.2, 20, method=method, frequency=frequency)
        summary = amortize(params)

        assert len(summary.schedule) == params.total_periods
        assert math.fsum(e.principal for e in summary.schedule) == pytest.approx(150000, abs=0.01)

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_balance_non_increasing_and_closes_at_zero(self, method):
        """Balances never grow and the last one is exactly zero."""
        summary = amortize(LoanParameters(80000, 6.0, 10, method=method))
        balances = [e.balance for e in summary.schedule]

        assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))
        assert all(balance >= 0 for balance in balances)
        assert balances[-1] == 0.0

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_period_numbers(self, method):
        """Periods are 1-based and consecutive."""
        summary = amortize(LoanParameters(10000, 5.0, 2, method=method))
        assert [e.period for e in summary.schedule] == list(range(1, 25))

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_payment_is_principal_plus_interest(self, method):
        """Each payment splits into its principal and interest parts."""
        summary = amortize(LoanParameters(50000, 3.0, 5, method=method, frequency="quarterly"))
        for entry in summary.schedule:
            assert entry.payment == pytest.approx(entry.principal + entry.interest)

    def test_dispatch_table_covers_every_method(self):
        """Every AmortizationMethod has a schedule generator."""
        assert set(SCHEDULE_GENERATORS) == set(AmortizationMethod)


class TestZeroRate:
    """Test the degenerate zero-rate case."""

    @pytest.mark.parametrize("method", [AmortizationMethod.EQUAL_INSTALLMENT, AmortizationMethod.EQUAL_PRINCIPAL])
    def test_constant_payment_no_interest(self, method):
        """Payments are P/n and interest is zero."""
        summary = amortize(LoanParameters(120000, 0, 10, method=method))

        assert summary.payment == pytest.approx(1000.0)
        assert summary.total_interest == 0.0
        for entry in summary.schedule:
            assert entry.payment == pytest.approx(1000.0)
            assert entry.interest == 0.0

    def test_installment_payment_zero_rate(self):
        """The annuity formula is bypassed when r == 0."""
        assert installment_payment(1200, 0.0, 12) == 100.0


class TestMethods:
    """Test method-specific behavior."""

    def test_equal_principal_decreasing_payments(self):
        """Constant principal share, shrinking payment."""
        summary = amortize(LoanParameters(120000, 6.0, 10, method="equal-principal"))
        schedule = summary.schedule

        assert schedule[0].principal == pytest.approx(1000.0)
        assert schedule[0].payment == pytest.approx(1000.0 + 120000 * 0.005)
        assert summary.payment == schedule[0].payment
        payments = [e.payment for e in schedule]
        assert all(later < earlier for earlier, later in zip(payments, payments[1:]))

    def test_interest_only_balloon(self):
        """Interest every period, principal repaid at the end."""
        summary = amortize(LoanParameters(100000, 6.0, 5, method="interest-only"))
        schedule = summary.schedule

        assert schedule[-2].balance == 100000
        assert all(e.principal == 0.0 for e in schedule[:-1])
        assert all(e.payment == pytest.approx(500.0) for e in schedule[:-1])
        assert schedule[-1].principal == 100000
        assert schedule[-1].payment == pytest.approx(100500.0)
        assert summary.payment == pytest.approx(500.0)
        assert summary.total_interest == pytest.approx(500.0 * 60)

    def test_equal_installment_costs_more_interest_than_equal_principal(self):
        """Paying principal down faster costs less interest."""
        installment = amortize(LoanParameters(200000, 5.0, 20))
        principal = amortize(LoanParameters(200000, 5.0, 20, method="equal-principal"))
        bullet = amortize(LoanParameters(200000, 5.0, 20, method="interest-only"))

        assert principal.total_interest < installment.total_interest < bullet.total_interest

    def test_compare_methods(self, reference_loan):
        """The same loan under every method, ranked by interest cost."""
        summaries = compare_methods(reference_loan)
        r = 0.035 / 12

        assert set(summaries) == set(AmortizationMethod)
        installment = summaries[AmortizationMethod.EQUAL_INSTALLMENT]
        principal = summaries[AmortizationMethod.EQUAL_PRINCIPAL]
        bullet = summaries[AmortizationMethod.INTEREST_ONLY]

        assert principal.total_interest < installment.total_interest < bullet.total_interest
        assert installment.schedule[0].payment == pytest.approx(installment.payment)
        assert installment.schedule[-1].payment == pytest.approx(installment.payment, abs=1e-6)
        assert principal.schedule[0].payment == pytest.approx(200000 / 300 + 200000 * r)
        assert principal.schedule[-1].payment == pytest.approx(200000 / 300 * (1 + r))
        assert bullet.schedule[0].payment == pytest.approx(200000 * r)
        assert bullet.schedule[-1].payment == pytest.approx(200000 * (1 + r))

    def test_compare_methods_keeps_other_parameters(self):
        """Only the method varies between the compared loans."""
        params = LoanParameters(90000, 4.0, 15, method="interest-only", frequency="quarterly")
        for method, summary in compare_methods(params).items():
            assert summary.total_periods == 60
            assert summary.principal == 90000
            assert summary == amortize(LoanParameters(90000, 4.0, 15, method=method, frequency="quarterly"))


class TestGenerateScheduleValidation:
    """Test generate_schedule preconditions."""

    @pytest.mark.parametrize(
        "args",
        [
            (0, 5.0, 12, 0.005),
            (-100, 5.0, 12, 0.005),
            (1000, 5.0, 0, 0.005),
            (1000, -5.0, 12, 0.005),
            (1000, 5.0, 12, -0.005),
        ],
    )
    def test_invalid_inputs(self, args):
        """Violated preconditions raise InvalidParameterError."""
        with pytest.raises(InvalidParameterError):
            generate_schedule(*args)

    def test_unknown_method(self):
        """Unknown methods are rejected."""
        with pytest.raises(InvalidParameterError):
            generate_schedule(1000, 5.0, 12, 0.05 / 12, method="balloon")

    def test_single_period(self):
        """A one-period loan repays everything at once."""
        schedule = generate_schedule(1000, 12.0, 1, 0.12)
        assert len(schedule) == 1
        assert schedule[0].principal == 1000
        assert schedule[0].interest == pytest.approx(120.0)
        assert schedule[0].balance == 0.0


class TestLoanToValue:
    """Test LTV and its risk band."""

    @pytest.mark.parametrize(
        "price,expected_pct,band",
        [
            (400000, 50.0, LtvBand.LOW),
            (250000, 80.0, LtvBand.MEDIUM),
            (210000, 200000 / 210000 * 100, LtvBand.HIGH),
        ],
    )
    def test_bands(self, price, expected_pct, band):
        """Band bounds are inclusive."""
        summary = amortize(LoanParameters(200000, 3.5, 25, property_price=price))
        assert summary.ltv_pct == pytest.approx(expected_pct)
        assert summary.ltv_band == band

    def test_no_price_no_ltv(self, reference_loan):
        """Without a property price there is no LTV."""
        summary = amortize(reference_loan)
        assert summary.ltv_pct is None
        assert summary.ltv_band is None


class TestYearlyBreakdown:
    """Test yearly aggregation of a schedule."""

    def test_monthly_loan(self, reference_loan):
        """One row per year, closing at zero."""
        summary = amortize(reference_loan)
        years = yearly_breakdown(summary.schedule, 12)

        assert [point.year for point in years] == list(range(1, 26))
        assert years[-1].balance == pytest.approx(0.0)
        assert years[0].balance == pytest.approx(summary.schedule[11].balance)
        assert years[0].principal + years[0].interest == pytest.approx(12 * summary.payment)
        assert math.fsum(point.principal for point in years) == pytest.approx(200000, abs=0.01)
        assert math.fsum(point.interest for point in years) == pytest.approx(summary.total_interest)

    def test_quarterly_loan(self):
        """Quarterly schedules group four periods per year."""
        params = LoanParameters(40000, 4.0, 5, frequency="quarterly")
        years = yearly_breakdown(amortize(params).schedule, params.periods_per_year)
        assert len(years) == 5

    def test_empty_schedule(self):
        """Nothing to aggregate."""
        assert yearly_breakdown([], 12) == []


class TestFrameAndPagination:
    """Test the DataFrame and paging helpers."""

    def test_schedule_to_frame(self, reference_loan):
        """The frame has one row per period."""
        df = schedule_to_frame(amortize(reference_loan).schedule)
        assert list(df.columns) == SCHEDULE_COLUMNS
        assert len(df) == 300
        assert df["principal"].sum() == pytest.approx(200000, abs=0.01)

    def test_first_page(self, reference_loan):
        """Pages hold page_size consecutive entries."""
        page = paginate(amortize(reference_loan).schedule, page=1, page_size=10)

        assert [e.period for e in page.items] == list(range(1, 11))
        assert page.total_pages == 30
        assert page.total_items == 300

    def test_last_page_partial(self):
        """The last page may be shorter."""
        schedule = amortize(LoanParameters(10000, 5.0, 2)).schedule
        page = paginate(schedule, page=3, page_size=10)

        assert page.total_pages == 3
        assert [e.period for e in page.items] == [21, 22, 23, 24]

    def test_out_of_range(self, reference_loan):
        """Pages past the end or sizes below 1 are rejected."""
        schedule = amortize(reference_loan).schedule
        with pytest.raises(InvalidParameterError):
            paginate(schedule, page=31, page_size=10)
        with pytest.raises(InvalidParameterError):
            paginate(schedule, page=0)
        with pytest.raises(InvalidParameterError):
            paginate(schedule, page=1, page_size=0)
