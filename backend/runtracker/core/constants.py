"""Shared application constants.

Centralizes repeat values used across import/analytics logic so we can
document and adjust them in one place.
"""

# Distance of one statute mile in meters
MILE_M = 1609.344

# Miles per kilometer
KM_TO_MI = 0.621371

# Histogram bin edges (miles). Bins are half-open [min, max); a run at or
# above the last edge is not counted in any bin.
HISTOGRAM_BOUNDS = [0, 2, 4, 6, 8, 10, 13, 16, 20, 30]

# Trailing window length for the rolling mileage series (days)
ROLLING_WINDOW_DAYS = 7

# Latest active-year runs that feed the recent pace
RECENT_PACE_RUNS = 10

# Latest runs (any year) listed in the pace breakdown
RECENT_RUNS_LISTED = 8

# Strava activity types counted as runs
STRAVA_RUN_TYPES = {"Run", "VirtualRun"}
