from collections import defaultdict
from datetime import date, timedelta
from typing import Sequence

from runtracker.analytics.aggregate import runs_between, total_miles
from runtracker.core.constants import ROLLING_WINDOW_DAYS
from runtracker.schemas.analytics import CalendarContext, RollingPoint
from runtracker.schemas.run import RunRecord


def daily_totals(runs: Sequence[RunRecord]) -> dict[date, float]:
    """Miles per calendar day (days without runs are absent)."""
    totals: dict[date, float] = defaultdict(float)
    for r in runs:
        totals[r.date] += r.distance_mi
    return dict(totals)


def window_total(
    runs: Sequence[RunRecord], end: date, days: int = ROLLING_WINDOW_DAYS
) -> float:
    """Miles run in the `days` calendar days ending on `end` (inclusive)."""
    start = end - timedelta(days=days - 1)
    return total_miles(runs_between(runs, start, end))


def rolling_series(
    year_runs: Sequence[RunRecord],
    cal: CalendarContext,
    days: int = ROLLING_WINDOW_DAYS,
) -> list[RollingPoint]:
    """
    Trailing `days`-day mileage for every day from Jan 1 through today.

    Runs are bucketed per day once, so each point is a fixed number of
    lookups instead of a rescan of every run. Only `year_runs` contribute:
    early-January windows do not reach into December of the prior year.
    """
    daily = daily_totals(year_runs)

    points: list[RollingPoint] = []
    day = date(cal.year, 1, 1)
    while day <= cal.today:
        miles = sum(
            (daily.get(day - timedelta(days=offset), 0.0) for offset in range(days)),
            0.0,
        )
        points.append(RollingPoint(date=day, miles=miles))
        day += timedelta(days=1)
    return points
