import calendar
from datetime import date, datetime, time

from runtracker.schemas.analytics import CalendarContext


def resolve_calendar(now: datetime | date) -> CalendarContext:
    """Pin down the active year/month and day counts for `now`.

    A bare date is taken as midnight. Any tzinfo is dropped: the caller is
    expected to pass local wall-clock time.
    """
    if not isinstance(now, datetime):
        now = datetime.combine(now, time.min)
    now = now.replace(tzinfo=None)

    today = now.date()
    year = today.year
    is_leap = calendar.isleap(year)

    return CalendarContext(
        now=now,
        today=today,
        year=year,
        month=today.month - 1,
        day_of_year=today.timetuple().tm_yday,
        is_leap_year=is_leap,
        days_in_year=366 if is_leap else 365,
        days_in_month=calendar.monthrange(year, today.month)[1],
    )
