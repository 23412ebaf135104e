"""
Goal-seeking and FIRE planning models for FinTool.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class GoalSeekResult:
    """
    Outcome of iterating a balance towards a target.

    Attributes:
        reached: Whether the target was met within the iteration bound
        periods: Years needed to reach the target, None when not reached
        iterations: Simulated years actually run
        final_balance: Balance after the last simulated year
        progress_pct: Initial balance as a share of the target, capped at 100
        trajectory: Balance after each simulated year, starting with the initial one
    """

    reached: bool
    periods: Optional[int]
    iterations: int
    final_balance: float
    progress_pct: float
    trajectory: Tuple[float, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class FirePlan:
    target_amount: float
    annual_savings: float
    savings_rate_pct: float
    years_to_fire: Optional[int]
    fire_age: Optional[int]
    progress_pct: float
    reached: bool


@dataclass(frozen=True)
class FireProjectionPoint:
    age: int
    assets: float
    target: float


@dataclass(frozen=True)
class AdvancedFirePlan:
    """
    FIRE plan with a target age and a post-goal growth phase.

    After the target is reached assets keep growing at the real return
    (return minus inflation) with no further savings until ``target_age``.
    """

    required_assets: float
    annual_savings: float
    years: int
    fire_age: int
    final_assets: float
    reached: bool
    years_in_retirement: int
    projection: Tuple[FireProjectionPoint, ...]
