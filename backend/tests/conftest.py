from datetime import date

import pytest

from runtracker.schemas.run import RunRecord


def run(day: str, miles: float, seconds: int = 0, name: str | None = None) -> RunRecord:
    return RunRecord(date=date.fromisoformat(day), distance_mi=miles, moving_time_sec=seconds, name=name)


@pytest.fixture
def january_runs() -> list[RunRecord]:
    """The three early-January runs from the sample CSV."""
    return [
        run("2026-01-02", 5.2, 2610),
        run("2026-01-04", 3.1, 1560),
        run("2026-01-06", 7.0, 3540),
    ]
