import math
from typing import Optional, Sequence

from runtracker.analytics.aggregate import average_pace
from runtracker.core.constants import RECENT_PACE_RUNS, RECENT_RUNS_LISTED
from runtracker.schemas.analytics import RecentRun
from runtracker.schemas.run import RunRecord


def most_recent(runs: Sequence[RunRecord], count: int) -> list[RunRecord]:
    """Latest `count` runs, newest first.

    Works on a sorted copy; same-day runs keep their input order.
    """
    return sorted(runs, key=lambda r: r.date, reverse=True)[:count]


def recent_pace(year_runs: Sequence[RunRecord], count: int = RECENT_PACE_RUNS) -> Optional[float]:
    """Average pace (min/mi) over the latest `count` active-year runs."""
    return average_pace(most_recent(year_runs, count))


def predicted_minutes(pace: Optional[float], distance_mi: float) -> Optional[float]:
    """Finish time at `pace` for `distance_mi`, or None if either is unusable."""
    if pace is None or not math.isfinite(pace):
        return None
    if distance_mi is None or not math.isfinite(distance_mi) or distance_mi <= 0:
        return None
    return pace * distance_mi


def year_average_pace(all_runs: Sequence[RunRecord]) -> Optional[float]:
    # Deliberately spans every loaded record, not just the active year
    return average_pace(all_runs)


def recent_run_rows(all_runs: Sequence[RunRecord], count: int = RECENT_RUNS_LISTED) -> list[RecentRun]:
    rows: list[RecentRun] = []
    for r in most_recent(all_runs, count):
        pace = r.moving_time_sec / 60 / r.distance_mi if r.moving_time_sec > 0 else None
        rows.append(RecentRun(date=r.date, name=r.name, distance_mi=r.distance_mi, pace=pace))
    return rows
