"""Filtering and summing helpers shared by the analytics pipeline.

All filters go by calendar date only and return new lists; the input
sequence is never modified.
"""

from datetime import date
from typing import Iterable, Optional, Sequence

from runtracker.schemas.run import RunRecord


def runs_in_year(runs: Iterable[RunRecord], year: int) -> list[RunRecord]:
    return [r for r in runs if r.date.year == year]


def runs_in_month(runs: Iterable[RunRecord], month: int) -> list[RunRecord]:
    """Runs whose date falls in `month` (0-11). Pass an already year-filtered list."""
    return [r for r in runs if r.date.month == month + 1]


def runs_between(runs: Iterable[RunRecord], start: date, end: date) -> list[RunRecord]:
    """Runs dated within [start, end], both ends inclusive."""
    return [r for r in runs if start <= r.date <= end]


def total_miles(runs: Sequence[RunRecord]) -> float:
    return sum((r.distance_mi for r in runs), 0.0)


def total_moving_minutes(runs: Sequence[RunRecord]) -> float:
    return sum(r.moving_time_sec for r in runs) / 60


def pace_or_none(minutes: float, miles: float) -> Optional[float]:
    # Zero mileage means there is no pace to report
    if miles <= 0:
        return None
    return minutes / miles


def average_pace(runs: Sequence[RunRecord]) -> Optional[float]:
    """Total moving minutes over total miles, or None with no mileage."""
    return pace_or_none(total_moving_minutes(runs), total_miles(runs))
