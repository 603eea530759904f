from typing import Any

from fastapi import APIRouter, File, HTTPException, Query, UploadFile

from runtracker.ingest.csv_runs import parse_csv_runs
from runtracker.ingest.google_sheet import sheet_url_to_csv_url
from runtracker.ingest.strava import runs_from_strava_activities
from runtracker.schemas.run import RunRecord

router = APIRouter(prefix="/imports", tags=["imports"])


def read_csv_upload(file: UploadFile) -> list[RunRecord]:
    """Decode and parse an uploaded CSV, mapping failures to HTTP errors."""
    data = file.file.read()
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="CSV must be UTF-8 text")

    try:
        return parse_csv_runs(text)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/csv", response_model=list[RunRecord])
def import_csv(file: UploadFile = File(...)):
    """
    Normalize an uploaded run log.

    Columns: date plus distance_mi (or distance_km / distance_m), and
    optionally moving_time_sec. Result is oldest first.
    """
    return read_csv_upload(file)


@router.get("/sheet")
def sheet_csv_url(url: str = Query(...)):
    """Resolve a shared Google Sheet link to the CSV export the client should fetch."""
    try:
        return {"csv_url": sheet_url_to_csv_url(url)}
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/strava", response_model=list[RunRecord])
def import_strava(activities: list[dict[str, Any]]):
    try:
        runs = runs_from_strava_activities(activities)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid activity: {e}")
    return sorted(runs, key=lambda r: r.date)
