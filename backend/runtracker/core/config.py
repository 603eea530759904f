from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator

from runtracker.core.constants import RECENT_PACE_RUNS


class Settings(BaseSettings):
    # Timezone used to decide what "today" is for analytics.
    # Examples: "America/New_York", "Europe/London", or "local" to use system tz.
    timezone: str = "local"

    # Goal defaults used when a request leaves a field blank (miles per day)
    default_target_rate_a: float = 0.0
    default_target_rate_b: float = 0.0
    # Race distance for the finish-time prediction (miles)
    default_predictor_distance_mi: float = 13.1

    # How many of the latest runs feed the recent pace
    recent_run_count: int = RECENT_PACE_RUNS

    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Allow empty env strings for the numeric goal fields
    @field_validator(
        "default_target_rate_a",
        "default_target_rate_b",
        "default_predictor_distance_mi",
        mode="before",
    )
    @classmethod
    def _empty_to_zero(cls, v):
        if v in ("", None, "null", "None"):
            return 0.0
        return v

    model_config = SettingsConfigDict(env_file=".env", env_prefix="RUNTRACKER_")


settings = Settings()
