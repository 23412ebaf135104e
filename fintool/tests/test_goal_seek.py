"""
Test suite for goal seeking and FIRE planning in FinTool.
"""

import pytest

from fintool.core.constants import GOAL_SEEK_MAX_ITERATIONS
from fintool.core.engine.goal_seek import (
    advanced_fire_plan,
    fire_plan,
    fire_target,
    progress_pct,
    years_to_target,
)
from fintool.utils.error_utils import InvalidParameterError


class TestYearsToTarget:
    """Test the bounded goal-seeking loop."""

    def test_already_reached(self):
        """Initial assets at or above the target need no years."""
        result = years_to_target(500000, 0, 5, 400000)

        assert result.reached is True
        assert result.periods == 0
        assert result.iterations == 0
        assert result.trajectory == (500000,)

    def test_linear_accumulation(self):
        """Zero rate: target / contribution years."""
        result = years_to_target(0, 100, 0, 1000)

        assert result.reached is True
        assert result.periods == 10
        assert result.final_balance == pytest.approx(1000)
        assert len(result.trajectory) == 11

    def test_non_convergence_reported_not_raised(self):
        """No growth and no savings stops at the iteration bound."""
        result = years_to_target(1000, 0, 0, 1000000)

        assert result.reached is False
        assert result.periods is None
        assert result.iterations == GOAL_SEEK_MAX_ITERATIONS

    def test_negative_contribution_never_converges(self):
        """Withdrawing every year moves away from the target."""
        result = years_to_target(1000, -100, 0, 5000)
        assert result.reached is False
        assert result.iterations == 100

    def test_years_decrease_as_rate_rises(self):
        """Higher returns never take longer."""
        years = [years_to_target(0, 10000, rate, 500000).periods for rate in (0, 2, 5, 8, 12)]

        assert None not in years
        assert all(later <= earlier for earlier, later in zip(years, years[1:]))
        assert years[-1] < years[0]

    def test_custom_bound(self):
        """The bound can be lowered."""
        result = years_to_target(0, 100, 0, 1000, max_iterations=5)
        assert result.reached is False
        assert result.iterations == 5

    def test_progress_reported_with_result(self):
        """The initial balance is measured against the target."""
        assert years_to_target(50000, 10000, 5, 200000).progress_pct == 25.0

    def test_progress_clamped(self):
        """Progress caps at 100 and a negative start counts as nothing saved."""
        assert years_to_target(300000, 0, 5, 200000).progress_pct == 100.0
        assert years_to_target(-5000, 1000, 0, 10000).progress_pct == 0.0

    @pytest.mark.parametrize(
        "args",
        [
            (0, 100, 5, 0),
            (0, 100, 5, -10),
            (0, 100, -100, 1000),
            (float("nan"), 100, 5, 1000),
        ],
    )
    def test_invalid(self, args):
        """Target must be positive and the rate above -100%."""
        with pytest.raises(InvalidParameterError):
            years_to_target(*args)


class TestProgress:
    """Test progress_pct."""

    def test_partial(self):
        assert progress_pct(50000, 200000) == 25.0

    def test_capped_at_100(self):
        assert progress_pct(300000, 200000) == 100.0

    def test_zero_target_rejected(self):
        with pytest.raises(InvalidParameterError):
            progress_pct(100, 0)


class TestFirePlan:
    """Test the basic FIRE calculator."""

    def test_target_from_withdrawal_rate(self):
        """4% rule: 25 times yearly expenses."""
        assert fire_target(40000, 4) == pytest.approx(1000000)

    def test_plan(self):
        """Savings of 20k a year at zero return reach 1M in 50 years."""
        plan = fire_plan(
            current_age=30,
            current_savings=0,
            annual_income=60000,
            annual_expenses=40000,
            annual_return_pct=0,
            safe_withdrawal_rate_pct=4,
        )

        assert plan.target_amount == pytest.approx(1000000)
        assert plan.annual_savings == 20000
        assert plan.savings_rate_pct == pytest.approx(100 / 3)
        assert plan.years_to_fire == 50
        assert plan.fire_age == 80
        assert plan.progress_pct == 0.0
        assert plan.reached is True

    def test_unreachable(self):
        """Spending more than earning never reaches FIRE."""
        plan = fire_plan(30, 10000, 30000, 40000, 0, 4)

        assert plan.reached is False
        assert plan.years_to_fire is None
        assert plan.fire_age is None
        assert plan.savings_rate_pct < 0

    def test_zero_income(self):
        """Savings rate is zero without income."""
        plan = fire_plan(40, 100000, 0, 20000, 5, 4)
        assert plan.savings_rate_pct == 0.0

    def test_invalid(self):
        """Withdrawal rate and expenses must be positive."""
        with pytest.raises(InvalidParameterError):
            fire_plan(30, 0, 60000, 40000, 5, 0)
        with pytest.raises(InvalidParameterError):
            fire_plan(30, 0, 60000, 0, 5, 4)


class TestAdvancedFirePlan:
    """Test the age-bounded FIRE plan."""

    def _plan(self, **overrides):
        values = {
            "current_age": 30,
            "target_age": 60,
            "life_expectancy": 90,
            "current_assets": 0,
            "annual_income": 100000,
            "savings_rate_pct": 50,
            "annual_expenses": 40000,
            "annual_return_pct": 0,
            "inflation_pct": 0,
            "withdrawal_rate_pct": 4,
        }
        values.update(overrides)
        return advanced_fire_plan(**values)

    def test_reached_before_target_age(self):
        """50k a year reaches 1M at 50; the trajectory runs on to 60."""
        plan = self._plan()

        assert plan.required_assets == pytest.approx(1000000)
        assert plan.annual_savings == 50000
        assert plan.reached is True
        assert plan.years == 20
        assert plan.fire_age == 50
        assert plan.years_in_retirement == 40
        assert [point.age for point in plan.projection] == list(range(30, 61))
        assert plan.projection[-1].assets == pytest.approx(1000000)

    def test_post_goal_growth_uses_real_return(self):
        """After FIRE assets grow at return minus inflation, no savings."""
        plan = self._plan(annual_return_pct=7, inflation_pct=2)
        after = [point for point in plan.projection if point.age >= plan.fire_age]

        assert plan.reached is True
        for earlier, later in zip(after, after[1:]):
            assert later.assets == pytest.approx(earlier.assets * 1.05)

    def test_not_reached_by_target_age(self):
        """Accumulation stops at the target age."""
        plan = self._plan(annual_income=10000, savings_rate_pct=10)

        assert plan.reached is False
        assert plan.years == 30
        assert plan.fire_age == 60
        assert plan.final_assets == pytest.approx(30000)
        assert plan.projection[-1].age == 60
        assert len(plan.projection) == 31

    def test_years_in_retirement_not_negative(self):
        """FIRE after life expectancy leaves zero retirement years."""
        plan = self._plan(life_expectancy=45, annual_income=10000, savings_rate_pct=10)
        assert plan.years_in_retirement == 0

    def test_target_age_must_be_later(self):
        """Target age must exceed the current age."""
        with pytest.raises(InvalidParameterError):
            self._plan(target_age=30)

    def test_real_return_of_minus_100_wipes_out_assets(self):
        """Inflation eating the whole return leaves zero after the goal."""
        plan = self._plan(current_assets=2000000, target_age=40, inflation_pct=100)

        assert plan.reached is True
        assert plan.fire_age == 30
        assert plan.final_assets == 2000000
        assert [point.age for point in plan.projection] == list(range(30, 41))
        assert all(point.assets == 0.0 for point in plan.projection[1:])
