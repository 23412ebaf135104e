"""
FinTool Core Engine Package.

Pure calculation functions over the records in ``fintool.core.models``.

Modules:
    frequency: Cadence normalization (weekly/biweekly/... to monthly)
    amortization: Loan schedules, mortgage summary, yearly breakdown, method comparison
    compound: Compound growth projection and continuation phase
    goal_seek: Years-to-target iteration and FIRE plans
    budget: Linked 50/30/20 allocation and budget summary
"""

from fintool.core.engine.frequency import (
    parse_frequency,
    periods_per_year,
    to_monthly,
    from_monthly,
    convert,
)
from fintool.core.engine.amortization import (
    SCHEDULE_GENERATORS,
    generate_schedule,
    amortize,
    compare_methods,
    yearly_breakdown,
    schedule_to_frame,
    paginate,
)
from fintool.core.engine.compound import (
    project,
    continue_projection,
    extend_projection,
    projection_to_frame,
)
from fintool.core.engine.goal_seek import (
    years_to_target,
    progress_pct,
    fire_plan,
    advanced_fire_plan,
)
from fintool.core.engine.budget import (
    redistribute,
    allocate,
    summarize_budget,
)

__all__ = [
    "parse_frequency",
    "periods_per_year",
    "to_monthly",
    "from_monthly",
    "convert",
    "SCHEDULE_GENERATORS",
    "generate_schedule",
    "amortize",
    "compare_methods",
    "yearly_breakdown",
    "schedule_to_frame",
    "paginate",
    "project",
    "continue_projection",
    "extend_projection",
    "projection_to_frame",
    "years_to_target",
    "progress_pct",
    "fire_plan",
    "advanced_fire_plan",
    "redistribute",
    "allocate",
    "summarize_budget",
]

__version__ = "1.0.0"
__author__ = "FinTool Development Team"
