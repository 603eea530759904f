import math
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RunRecord(BaseModel):
    """One normalized run, as produced by any of the import paths."""

    model_config = ConfigDict(frozen=True)

    date: date
    distance_mi: float = Field(gt=0, allow_inf_nan=False)  # e.g. 5.2
    moving_time_sec: int = Field(default=0, ge=0)  # 0 = pace unknown
    name: Optional[str] = None  # display only


class GoalParameters(BaseModel):
    """Per-request goal inputs.

    Each field comes from a user-editable box, so blanks and NaN/inf are
    read as 0, which means "no goal" (or no prediction distance).
    """

    target_rate_a: float = 0.0  # miles per day
    target_rate_b: float = 0.0
    predictor_distance_mi: float = 0.0

    @field_validator(
        "target_rate_a", "target_rate_b", "predictor_distance_mi", mode="before"
    )
    @classmethod
    def _blank_or_non_finite_to_zero(cls, v):
        if v in ("", None, "null", "None"):
            return 0.0
        try:
            v = float(v)
        except (TypeError, ValueError):
            return 0.0
        if not math.isfinite(v):
            return 0.0
        return v
