"""Response shapes for the analytics snapshot.

Every ``Optional[float]`` metric uses ``None`` for "no data" (a ratio whose
denominator was zero). Renderers index into these names directly, so treat
them as a stable contract.
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from runtracker.schemas.run import GoalParameters, RunRecord


class CalendarContext(BaseModel):
    now: datetime
    today: date
    year: int
    month: int  # 0-11
    day_of_year: int  # Jan 1 -> 1
    is_leap_year: bool
    days_in_year: int
    days_in_month: int


class MonthlyBucket(BaseModel):
    month: int  # 0-11
    miles: float
    pace: Optional[float] = None  # min/mi
    change_from_prior: float


class RollingPoint(BaseModel):
    date: date
    miles: float


class HistogramBin(BaseModel):
    label: str
    min_mi: float
    max_mi: float
    count: int


class RecentRun(BaseModel):
    date: date
    name: Optional[str] = None
    distance_mi: float
    pace: Optional[float] = None


class GoalProgress(BaseModel):
    daily_rate: float
    monthly_target: float
    annual_target: float
    over_under: float  # positive = ahead of the linear pace line
    month_remaining: float
    annual_remaining: float
    required_weekly_mileage: float
    this_week_target: float
    this_week_remaining: float
    percent_complete: float


class AnalyticsSnapshot(BaseModel):
    calendar: CalendarContext

    monthly_mileage: float
    annual_mileage: float
    rolling_7d_mileage: float
    this_week_mileage: float
    cumulative_mileage: float
    recent_pace: Optional[float] = None
    predicted_minutes: Optional[float] = None
    year_average_pace: Optional[float] = None
    weeks_left: int

    goal_a: GoalProgress
    goal_b: GoalProgress

    monthly_buckets: list[MonthlyBucket]
    rolling_series: list[RollingPoint]
    histogram: list[HistogramBin]
    recent_runs: list[RecentRun]


class AnalyticsRequest(BaseModel):
    runs: list[RunRecord] = []
    goals: GoalParameters = GoalParameters()
