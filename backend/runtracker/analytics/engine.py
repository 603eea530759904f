"""Assemble the full analytics snapshot from a run list, goals and a clock.

`build_snapshot` is a pure function: it reads the runs, never reorders or
mutates them, and returns equal snapshots for equal inputs.
"""

import logging
from datetime import date, datetime
from typing import Sequence

from runtracker.analytics.aggregate import (
    runs_between,
    runs_in_month,
    runs_in_year,
    total_miles,
)
from runtracker.analytics.calendar_context import resolve_calendar
from runtracker.analytics.goals import goal_progress, sunday_of, weeks_left
from runtracker.analytics.histogram import distance_histogram
from runtracker.analytics.monthly import monthly_buckets
from runtracker.analytics.pace import (
    predicted_minutes,
    recent_pace,
    recent_run_rows,
    year_average_pace,
)
from runtracker.analytics.rolling import rolling_series, window_total
from runtracker.core.constants import RECENT_PACE_RUNS
from runtracker.schemas.analytics import AnalyticsSnapshot
from runtracker.schemas.run import GoalParameters, RunRecord

logger = logging.getLogger(__name__)


def build_snapshot(
    runs: Sequence[RunRecord],
    goals: GoalParameters,
    now: datetime | date,
    recent_count: int = RECENT_PACE_RUNS,
) -> AnalyticsSnapshot:
    cal = resolve_calendar(now)

    year_runs = runs_in_year(runs, cal.year)
    month_runs = runs_in_month(year_runs, cal.month)

    annual_mileage = total_miles(year_runs)
    monthly_mileage = total_miles(month_runs)
    # Future-dated runs this year count toward the annual total but not to-date
    cumulative_mileage = total_miles([r for r in year_runs if r.date <= cal.today])
    this_week_mileage = total_miles(runs_between(year_runs, sunday_of(cal.today), cal.today))
    rolling_7d = window_total(year_runs, cal.today)

    pace = recent_pace(year_runs, recent_count)
    remaining_weeks = weeks_left(cal)

    def progress(rate: float):
        return goal_progress(
            rate,
            cal,
            monthly_mileage=monthly_mileage,
            annual_mileage=annual_mileage,
            cumulative_mileage=cumulative_mileage,
            this_week_mileage=this_week_mileage,
            weeks_remaining=remaining_weeks,
        )

    snapshot = AnalyticsSnapshot(
        calendar=cal,
        monthly_mileage=monthly_mileage,
        annual_mileage=annual_mileage,
        rolling_7d_mileage=rolling_7d,
        this_week_mileage=this_week_mileage,
        cumulative_mileage=cumulative_mileage,
        recent_pace=pace,
        predicted_minutes=predicted_minutes(pace, goals.predictor_distance_mi),
        year_average_pace=year_average_pace(runs),
        weeks_left=remaining_weeks,
        goal_a=progress(goals.target_rate_a),
        goal_b=progress(goals.target_rate_b),
        monthly_buckets=monthly_buckets(year_runs),
        rolling_series=rolling_series(year_runs, cal),
        histogram=distance_histogram(year_runs),
        recent_runs=recent_run_rows(runs),
    )

    logger.debug(
        "Snapshot for %s: %d runs loaded, %d in %d, %.1f mi this year",
        cal.today.isoformat(),
        len(runs),
        len(year_runs),
        cal.year,
        annual_mileage,
    )
    return snapshot
