from typing import Sequence

from runtracker.analytics.aggregate import average_pace, runs_in_month, total_miles
from runtracker.schemas.analytics import MonthlyBucket
from runtracker.schemas.run import RunRecord


def monthly_buckets(year_runs: Sequence[RunRecord]) -> list[MonthlyBucket]:
    """
    Mileage and average pace for each month of the active year.

    - Always 12 buckets, January (0) through December (11).
    - Months with no mileage report pace as None.
    - `change_from_prior` compares with the previous bucket; January
      compares with 0.
    """
    buckets: list[MonthlyBucket] = []
    prior = 0.0
    for month in range(12):
        bucket = runs_in_month(year_runs, month)
        miles = total_miles(bucket)
        buckets.append(
            MonthlyBucket(
                month=month,
                miles=miles,
                pace=average_pace(bucket),
                change_from_prior=miles - prior,
            )
        )
        prior = miles
    return buckets
