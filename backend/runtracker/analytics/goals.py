import math
from datetime import date, datetime, timedelta

from runtracker.schemas.analytics import CalendarContext, GoalProgress


def sunday_of(d: date) -> date:
    # weekday(): Monday = 0 ... Sunday = 6
    return d - timedelta(days=(d.weekday() + 1) % 7)


def weeks_left(cal: CalendarContext) -> int:
    """Whole weeks from now until Dec 31 (midnight) of the active year, at least 1."""
    remaining = datetime(cal.year, 12, 31) - cal.now
    return max(1, math.ceil(remaining / timedelta(days=7)))


def goal_progress(
    rate: float,
    cal: CalendarContext,
    *,
    monthly_mileage: float,
    annual_mileage: float,
    cumulative_mileage: float,
    this_week_mileage: float,
    weeks_remaining: int,
) -> GoalProgress:
    """
    Targets and remaining mileage for one target daily rate (miles/day).

    A rate of 0 (or a non-finite one) is "no goal": every target and
    remaining figure is 0 and over/under equals the cumulative mileage.
    """
    if rate is None or not math.isfinite(rate):
        rate = 0.0

    monthly_target = rate * cal.days_in_month
    annual_target = rate * cal.days_in_year
    annual_remaining = max(0.0, annual_target - annual_mileage)
    this_week_target = rate * 7

    return GoalProgress(
        daily_rate=rate,
        monthly_target=monthly_target,
        annual_target=annual_target,
        over_under=cumulative_mileage - rate * cal.day_of_year,
        month_remaining=max(0.0, monthly_target - monthly_mileage),
        annual_remaining=annual_remaining,
        required_weekly_mileage=annual_remaining / weeks_remaining,
        this_week_target=this_week_target,
        this_week_remaining=max(0.0, this_week_target - this_week_mileage),
        percent_complete=(annual_mileage / annual_target * 100) if annual_target else 0.0,
    )
