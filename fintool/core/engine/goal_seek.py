"""
Goal seeking and FIRE planning for FinTool.

A balance is compounded once per simulated year and topped up with the
yearly savings until it reaches a target. The loop is bounded: after
GOAL_SEEK_MAX_ITERATIONS years the target is reported as not reached
instead of iterating forever (zero or negative savings and returns never
converge).
"""

import logging

from fintool.core.constants import GOAL_SEEK_MAX_ITERATIONS
from fintool.core.engine.compound import continue_projection
from fintool.core.models.goal import AdvancedFirePlan, FirePlan, FireProjectionPoint, GoalSeekResult
from fintool.utils.error_utils import InvalidParameterError, error_handler
from fintool.utils.rate_utils import annual_pct_to_decimal
from fintool.utils.validation import (
    require_finite,
    require_int_at_least,
    require_non_negative,
    require_positive,
)

logger = logging.getLogger(__name__)


@error_handler
def years_to_target(
    initial_assets: float,
    periodic_contribution: float,
    annual_rate_pct: float,
    target_amount: float,
    max_iterations: int = GOAL_SEEK_MAX_ITERATIONS,
) -> GoalSeekResult:
    """
    Count the years needed for a balance to reach ``target_amount``.

    Each simulated year applies ``balance * (1 + rate) + contribution``.

    Args:
        initial_assets: Starting balance
        periodic_contribution: Amount added at the end of every year (may be negative)
        annual_rate_pct: Annual return as percentage (may be negative, above -100)
        target_amount: Balance to reach (> 0)
        max_iterations: Safety bound on simulated years

    Returns:
        GoalSeekResult; ``periods`` is None when the bound was hit first.
        ``progress_pct`` measures the initial balance (floored at 0)
        against the target.
    """
    balance = require_finite(initial_assets, "initial_assets")
    contribution = require_finite(periodic_contribution, "periodic_contribution")
    rate_pct = require_finite(annual_rate_pct, "annual_rate_pct")
    if rate_pct <= -100:
        raise InvalidParameterError(
            f"annual_rate_pct must be above -100, got {rate_pct}",
            field="annual_rate_pct",
            value=rate_pct,
        )
    target = require_positive(target_amount, "target_amount")
    max_iterations = require_int_at_least(max_iterations, 1, "max_iterations")

    progress = progress_pct(max(balance, 0.0), target)
    growth = 1 + annual_pct_to_decimal(rate_pct)
    trajectory = [balance]
    iterations = 0
    while balance < target and iterations < max_iterations:
        balance = balance * growth + contribution
        iterations += 1
        trajectory.append(balance)

    reached = balance >= target
    if not reached:
        logger.info(f"Target {target:.2f} not reached within {max_iterations} years")

    return GoalSeekResult(
        reached=reached,
        periods=iterations if reached else None,
        iterations=iterations,
        final_balance=balance,
        progress_pct=progress,
        trajectory=tuple(trajectory),
    )


@error_handler
def progress_pct(current_assets: float, target_amount: float) -> float:
    """
    Share of the target already saved, as a percentage capped at 100.

    Examples:
        >>> progress_pct(50000, 200000)
        25.0
        >>> progress_pct(300000, 200000)
        100.0
    """
    current = require_non_negative(current_assets, "current_assets")
    target = require_positive(target_amount, "target_amount")
    return min(current / target, 1.0) * 100.0


def fire_target(annual_expenses: float, withdrawal_rate_pct: float) -> float:
    """Portfolio whose safe withdrawal covers ``annual_expenses``."""
    expenses = require_positive(annual_expenses, "annual_expenses")
    rate = require_positive(withdrawal_rate_pct, "withdrawal_rate_pct")
    return expenses * 100.0 / rate


@error_handler
def fire_plan(
    current_age: int,
    current_savings: float,
    annual_income: float,
    annual_expenses: float,
    annual_return_pct: float,
    safe_withdrawal_rate_pct: float,
) -> FirePlan:
    """
    Basic FIRE estimate: yearly savings are income minus expenses.

    Returns:
        FirePlan; ``years_to_fire`` and ``fire_age`` are None when the
        target is not reached within the iteration bound
    """
    current_age = require_int_at_least(current_age, 0, "current_age")
    income = require_non_negative(annual_income, "annual_income")
    target = fire_target(annual_expenses, safe_withdrawal_rate_pct)
    annual_savings = income - annual_expenses
    savings_rate = annual_savings / income * 100.0 if income > 0 else 0.0

    result = years_to_target(current_savings, annual_savings, annual_return_pct, target)

    return FirePlan(
        target_amount=target,
        annual_savings=annual_savings,
        savings_rate_pct=savings_rate,
        years_to_fire=result.periods,
        fire_age=current_age + result.periods if result.reached else None,
        progress_pct=progress_pct(current_savings, target),
        reached=result.reached,
    )


@error_handler
def advanced_fire_plan(
    current_age: int,
    target_age: int,
    life_expectancy: int,
    current_assets: float,
    annual_income: float,
    savings_rate_pct: float,
    annual_expenses: float,
    annual_return_pct: float,
    inflation_pct: float,
    withdrawal_rate_pct: float,
) -> AdvancedFirePlan:
    """
    FIRE plan bounded by a target age, with a post-goal growth phase.

    Assets accumulate until they cover the required portfolio or the target
    age comes. If the goal is met earlier, assets keep growing at the real
    return (``annual_return_pct - inflation_pct``) with no new savings up
    to the target age. A real return of -100% or worse leaves nothing.
    """
    current_age = require_int_at_least(current_age, 0, "current_age")
    target_age = require_int_at_least(target_age, current_age + 1, "target_age")
    life_expectancy = require_int_at_least(life_expectancy, 0, "life_expectancy")
    income = require_non_negative(annual_income, "annual_income")
    savings_rate = require_non_negative(savings_rate_pct, "savings_rate_pct")
    inflation = require_finite(inflation_pct, "inflation_pct")

    annual_savings = income * savings_rate / 100.0
    required = fire_target(annual_expenses, withdrawal_rate_pct)

    accumulation = years_to_target(
        current_assets,
        annual_savings,
        annual_return_pct,
        required,
        max_iterations=target_age - current_age,
    )
    projection = [
        FireProjectionPoint(age=current_age + offset, assets=assets, target=required)
        for offset, assets in enumerate(accumulation.trajectory)
    ]

    fire_age = current_age + accumulation.iterations
    if fire_age < target_age:
        real_return = annual_return_pct - inflation
        if real_return <= -100:
            # inflation wipes the portfolio out in the first post-goal year
            post_goal = [0.0] * (target_age - fire_age)
        else:
            post_goal = continue_projection(accumulation.final_balance, real_return, target_age - fire_age)
        projection.extend(
            FireProjectionPoint(age=fire_age + offset, assets=assets, target=required)
            for offset, assets in enumerate(post_goal, start=1)
        )

    return AdvancedFirePlan(
        required_assets=required,
        annual_savings=annual_savings,
        years=accumulation.iterations,
        fire_age=fire_age,
        final_assets=accumulation.final_balance,
        reached=accumulation.reached,
        years_in_retirement=max(life_expectancy - fire_age, 0),
        projection=tuple(projection),
    )
