from typing import Sequence

from runtracker.core.constants import HISTOGRAM_BOUNDS
from runtracker.schemas.analytics import HistogramBin
from runtracker.schemas.run import RunRecord


def distance_histogram(
    runs: Sequence[RunRecord], bounds: Sequence[float] = HISTOGRAM_BOUNDS
) -> list[HistogramBin]:
    """Count runs per half-open distance bin [min, max).

    Runs at or beyond the last edge land in no bin.
    """
    bins: list[HistogramBin] = []
    for lo, hi in zip(bounds, bounds[1:]):
        count = sum(1 for r in runs if lo <= r.distance_mi < hi)
        bins.append(HistogramBin(label=f"{lo}-{hi} mi", min_mi=lo, max_mi=hi, count=count))
    return bins
