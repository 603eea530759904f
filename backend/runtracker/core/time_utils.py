from datetime import datetime, timezone
from typing import Optional


def format_pace(min_per_mi: Optional[float]) -> str:
    """
    Format a pace in minutes per mile as 'M:SS/mi'.
    Example: 8.2418 -> '8:15/mi'

    Undefined (None) or non-positive paces render as '--'.
    """
    if min_per_mi is None or min_per_mi <= 0:
        return "--"

    mins = int(min_per_mi)
    secs = round((min_per_mi - mins) * 60)
    if secs == 60:
        mins += 1
        secs = 0
    return f"{mins}:{secs:02d}/mi"


def format_minutes(minutes: Optional[float]) -> str:
    """Format a duration in minutes as '107m 58s', or '--' when undefined."""
    if minutes is None:
        return "--"
    whole = int(minutes)
    secs = round((minutes - whole) * 60)
    if secs == 60:
        whole += 1
        secs = 0
    return f"{whole}m {secs}s"


def format_miles(miles: float) -> str:
    return f"{miles:.1f} mi"


def local_now(tz_name: str | None = None) -> datetime:
    """Current wall-clock time as a naive datetime.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is IANA tz name (e.g., 'America/New_York'): use that.

    Analytics treat run dates as local calendar days, so the offset is
    dropped after conversion.
    """
    now = datetime.now(timezone.utc)
    if tz_name and tz_name != "local":
        from zoneinfo import ZoneInfo
        return now.astimezone(ZoneInfo(tz_name)).replace(tzinfo=None)
    return now.astimezone().replace(tzinfo=None)
