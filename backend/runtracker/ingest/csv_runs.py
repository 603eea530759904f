"""Parse run logs exported as CSV into RunRecords.

Expected header (case-insensitive, any column order):

    date,distance_mi,moving_time_sec
    2026-01-02,5.2,2610

`distance_km` or `distance_m` may stand in for `distance_mi`. Rows that
cannot produce a dated, positive distance are skipped.
"""

import csv
import io
import logging
import math
from datetime import date
from typing import Optional

from runtracker.core.constants import KM_TO_MI, MILE_M
from runtracker.schemas.run import RunRecord

logger = logging.getLogger(__name__)

DISTANCE_COLUMNS = ("distance_mi", "distance_km", "distance_m")


def _to_float(raw: Optional[str]) -> float:
    try:
        return float((raw or "").strip())
    except ValueError:
        return math.nan


def _cell(row: list[str], idx: int) -> Optional[str]:
    if idx == -1 or idx >= len(row):
        return None
    return row[idx]


def _row_distance_mi(row: list[str], mi_idx: int, km_idx: int, m_idx: int) -> float:
    """First finite distance in the row, preferring miles, then km, then meters."""
    miles = _to_float(_cell(row, mi_idx))
    if math.isfinite(miles):
        return miles
    km = _to_float(_cell(row, km_idx))
    if math.isfinite(km):
        return km * KM_TO_MI
    return _to_float(_cell(row, m_idx)) / MILE_M


def parse_csv_runs(text: str) -> list[RunRecord]:
    """Parse CSV text into runs sorted by date (oldest first).

    Raises ValueError if the header lacks a date or any distance column.
    """
    reader = csv.reader(io.StringIO(text.strip()))
    try:
        header = next(reader)
    except StopIteration:
        raise ValueError("CSV is empty")

    headers = [h.strip().lower() for h in header]

    def idx(name: str) -> int:
        return headers.index(name) if name in headers else -1

    date_idx = idx("date")
    mi_idx, km_idx, m_idx = (idx(c) for c in DISTANCE_COLUMNS)
    sec_idx = idx("moving_time_sec")
    if date_idx == -1 or (mi_idx == -1 and km_idx == -1 and m_idx == -1):
        raise ValueError("CSV needs date and distance_mi (or distance_km/distance_m)")

    runs: list[RunRecord] = []
    skipped = 0
    for row in reader:
        if not any(cell.strip() for cell in row):
            continue

        raw_date = (_cell(row, date_idx) or "").strip()
        distance = _row_distance_mi(row, mi_idx, km_idx, m_idx)
        if not raw_date or not math.isfinite(distance) or distance <= 0:
            skipped += 1
            continue
        try:
            run_date = date.fromisoformat(raw_date)
        except ValueError:
            skipped += 1
            continue

        seconds = _to_float(_cell(row, sec_idx))
        moving = int(seconds) if math.isfinite(seconds) and seconds > 0 else 0

        runs.append(
            RunRecord(date=run_date, distance_mi=distance, moving_time_sec=moving, name="Imported")
        )

    if skipped:
        logger.info("Skipped %d CSV rows without a valid date and distance", skipped)

    runs.sort(key=lambda r: r.date)
    return runs
