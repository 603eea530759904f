from datetime import date

import pytest

from runtracker.ingest.csv_runs import parse_csv_runs
from runtracker.ingest.google_sheet import sheet_url_to_csv_url
from runtracker.ingest.strava import runs_from_strava_activities
from runtracker.schemas.run import RunRecord

SAMPLE_CSV = """date,distance_mi,moving_time_sec
2026-01-02,5.2,2610
2026-01-04,3.1,1560
2026-01-06,7.0,3540
2026-01-11,10.0,5280
2026-01-17,6.4,3210
2026-01-24,12.3,6510
2026-02-01,8.0,4080
2026-02-09,4.0,1980
"""


def test_parse_sample_csv():
    runs = parse_csv_runs(SAMPLE_CSV)
    assert len(runs) == 8
    assert runs[0].date == date(2026, 1, 2)
    assert runs[0].distance_mi == 5.2
    assert runs[0].moving_time_sec == 2610
    assert runs[0].name == "Imported"
    assert runs[-1].date == date(2026, 2, 9)


def test_parse_csv_sorts_by_date_and_normalizes_headers():
    text = " Date , Distance_MI \n2026-03-05,4\n2026-03-01,6\n"
    runs = parse_csv_runs(text)
    assert [r.date for r in runs] == [date(2026, 3, 1), date(2026, 3, 5)]
    assert all(r.moving_time_sec == 0 for r in runs)


def test_parse_csv_converts_km_and_meters():
    km = parse_csv_runs("date,distance_km\n2026-01-02,10\n")
    assert km[0].distance_mi == pytest.approx(6.21371)
    meters = parse_csv_runs("date,distance_m\n2026-01-02,1609.344\n")
    assert meters[0].distance_mi == pytest.approx(1.0)


def test_parse_csv_prefers_miles_then_falls_back():
    text = "date,distance_mi,distance_km\n2026-01-02,3,10\n2026-01-03,,10\n"
    runs = parse_csv_runs(text)
    assert runs[0].distance_mi == 3.0
    assert runs[1].distance_mi == pytest.approx(6.21371)


def test_parse_csv_drops_invalid_rows():
    text = (
        "date,distance_mi,moving_time_sec\n"
        ",5,1500\n"
        "2026-01-02,0,1500\n"
        "2026-01-03,-2,1500\n"
        "not-a-date,4,1500\n"
        "2026-01-04,abc,1500\n"
        "\n"
        "2026-01-05,4,oops\n"
    )
    runs = parse_csv_runs(text)
    assert len(runs) == 1
    assert runs[0].date == date(2026, 1, 5)
    assert runs[0].moving_time_sec == 0


def test_parse_csv_requires_date_and_distance():
    with pytest.raises(ValueError, match="CSV needs date and distance_mi"):
        parse_csv_runs("date,moving_time_sec\n2026-01-02,1500\n")
    with pytest.raises(ValueError, match="CSV needs date"):
        parse_csv_runs("day,distance_mi\n2026-01-02,5\n")
    with pytest.raises(ValueError):
        parse_csv_runs("")


def test_sheet_url_gid_from_hash():
    url = "https://docs.google.com/spreadsheets/d/abc-123_X/edit#gid=42"
    assert sheet_url_to_csv_url(url) == (
        "https://docs.google.com/spreadsheets/d/abc-123_X/export?format=csv&gid=42"
    )


def test_sheet_url_gid_from_query_wins():
    url = "https://www.docs.google.com/spreadsheets/d/abc/edit?gid=7#gid=42"
    assert sheet_url_to_csv_url(url).endswith("/d/abc/export?format=csv&gid=7")


def test_sheet_url_defaults_to_first_tab():
    url = "  https://docs.google.com/spreadsheets/d/abc/edit?usp=sharing  "
    assert sheet_url_to_csv_url(url).endswith("gid=0")


def test_sheet_url_rejects_other_hosts_and_missing_id():
    with pytest.raises(ValueError, match="docs.google.com"):
        sheet_url_to_csv_url("https://example.com/spreadsheets/d/abc")
    with pytest.raises(ValueError, match="Sheet ID"):
        sheet_url_to_csv_url("https://docs.google.com/document/d/abc/edit")


def test_strava_activities_keep_runs_only():
    activities = [
        {
            "type": "Run",
            "sport_type": "Run",
            "name": "Morning Run",
            "distance": 1609.344,
            "moving_time": 480,
            "start_date": "2026-01-03T02:30:00Z",
            "start_date_local": "2026-01-02T18:30:00Z",
        },
        {"type": "Ride", "sport_type": "Ride", "distance": 20000, "start_date": "2026-01-02T10:00:00Z"},
        {"type": "VirtualRun", "distance": 5000, "start_date": "2026-01-04T10:00:00Z"},
        {"type": "Run", "distance": 0, "start_date": "2026-01-05T10:00:00Z"},
    ]
    runs = runs_from_strava_activities(activities)
    assert len(runs) == 2
    first, second = runs
    assert first.date == date(2026, 1, 2)
    assert first.distance_mi == pytest.approx(1.0)
    assert first.moving_time_sec == 480
    assert first.name == "Morning Run"
    assert second.date == date(2026, 1, 4)
    assert second.moving_time_sec == 0
    assert second.name == "Run"


def test_strava_activities_skip_non_finite_distance_and_clamp_moving_time():
    activities = [
        {"type": "Run", "distance": "inf", "moving_time": 1200, "start_date_local": "2026-01-05T07:00:00Z"},
        {"type": "Run", "distance": float("nan"), "moving_time": 1200, "start_date_local": "2026-01-06T07:00:00Z"},
        {"type": "Run", "distance": 3218.688, "moving_time": -30, "start_date_local": "2026-01-07T07:00:00Z"},
    ]
    runs = runs_from_strava_activities(activities)
    assert len(runs) == 1
    assert runs[0].date == date(2026, 1, 7)
    assert runs[0].distance_mi == pytest.approx(2.0)
    assert runs[0].moving_time_sec == 0


@pytest.mark.parametrize("miles", [float("inf"), float("nan"), 0.0, -1.0])
def test_run_record_rejects_non_positive_or_non_finite_distance(miles):
    with pytest.raises(ValueError):
        RunRecord(date=date(2026, 1, 5), distance_mi=miles)
