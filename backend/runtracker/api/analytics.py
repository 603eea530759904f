from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from runtracker.analytics.engine import build_snapshot
from runtracker.api.imports import read_csv_upload
from runtracker.clock import get_now
from runtracker.core.config import settings
from runtracker.schemas.analytics import AnalyticsRequest, AnalyticsSnapshot
from runtracker.schemas.run import GoalParameters

router = APIRouter(prefix="/analytics", tags=["analytics"])


@router.post("/", response_model=AnalyticsSnapshot)
def compute_analytics(payload: AnalyticsRequest, now: datetime = Depends(get_now)):
    """
    Recompute every metric for the posted run list.

    The snapshot is rebuilt from scratch on each call; callers resend the
    full list whenever a data source is reloaded or a goal changes.
    """
    return build_snapshot(
        payload.runs, payload.goals, now, recent_count=settings.recent_run_count
    )


@router.post("/csv", response_model=AnalyticsSnapshot)
def compute_analytics_from_csv(
    file: UploadFile = File(...),
    target_rate_a: Optional[str] = Form(None),
    target_rate_b: Optional[str] = Form(None),
    predictor_distance_mi: Optional[str] = Form(None),
    now: datetime = Depends(get_now),
):
    runs = read_csv_upload(file)

    # Omitted (or empty) form fields fall back to the configured defaults
    goals = GoalParameters(
        target_rate_a=settings.default_target_rate_a if target_rate_a is None else target_rate_a,
        target_rate_b=settings.default_target_rate_b if target_rate_b is None else target_rate_b,
        predictor_distance_mi=(
            settings.default_predictor_distance_mi
            if predictor_distance_mi is None
            else predictor_distance_mi
        ),
    )
    return build_snapshot(runs, goals, now, recent_count=settings.recent_run_count)
