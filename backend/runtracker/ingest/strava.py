import logging
import math
from datetime import date
from typing import Any, Iterable

from runtracker.core.constants import MILE_M, STRAVA_RUN_TYPES
from runtracker.schemas.run import RunRecord

logger = logging.getLogger(__name__)


def _is_run(activity: dict[str, Any]) -> bool:
    return activity.get("sport_type") == "Run" or activity.get("type") in STRAVA_RUN_TYPES


def run_from_strava_activity(activity: dict[str, Any]) -> RunRecord | None:
    """Map one Strava activity (as returned by /athlete/activities) to a run.

    Uses the activity's local start date so a late-evening run stays on the
    day the athlete ran it. Returns None for non-runs and activities
    without a positive, finite distance.
    """
    if not _is_run(activity):
        return None

    meters = float(activity.get("distance") or 0.0)
    if not math.isfinite(meters) or meters <= 0:
        return None

    started = activity.get("start_date_local") or activity.get("start_date") or ""
    return RunRecord(
        date=date.fromisoformat(started[:10]),
        distance_mi=meters / MILE_M,
        moving_time_sec=max(0, int(activity.get("moving_time") or 0)),
        name=activity.get("name") or "Run",
    )


def runs_from_strava_activities(activities: Iterable[dict[str, Any]]) -> list[RunRecord]:
    runs: list[RunRecord] = []
    for activity in activities:
        run = run_from_strava_activity(activity)
        if run is not None:
            runs.append(run)
    logger.info("Kept %d runs from Strava activities", len(runs))
    return runs
