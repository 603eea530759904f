from datetime import date, datetime, timezone

import pytest

from runtracker.analytics.calendar_context import resolve_calendar
from runtracker.analytics.goals import goal_progress, sunday_of, weeks_left
from runtracker.core.config import Settings
from runtracker.core.constants import RECENT_PACE_RUNS
from runtracker.schemas.run import GoalParameters


def test_calendar_for_plain_date():
    cal = resolve_calendar(date(2026, 1, 6))
    assert cal.now == datetime(2026, 1, 6)
    assert cal.year == 2026
    assert cal.month == 0
    assert cal.day_of_year == 6
    assert not cal.is_leap_year
    assert cal.days_in_year == 365
    assert cal.days_in_month == 31


def test_calendar_leap_years():
    feb = resolve_calendar(date(2024, 2, 15))
    assert feb.is_leap_year
    assert feb.days_in_year == 366
    assert feb.days_in_month == 29
    assert resolve_calendar(date(2024, 12, 31)).day_of_year == 366
    assert resolve_calendar(date(2026, 12, 31)).day_of_year == 365
    assert not resolve_calendar(date(1900, 3, 1)).is_leap_year
    assert resolve_calendar(date(2000, 3, 1)).is_leap_year


def test_calendar_drops_timezone():
    cal = resolve_calendar(datetime(2026, 3, 1, 23, 30, tzinfo=timezone.utc))
    assert cal.now.tzinfo is None
    assert cal.today == date(2026, 3, 1)
    assert cal.month == 2


def test_sunday_of():
    assert sunday_of(date(2026, 1, 4)) == date(2026, 1, 4)  # Sunday
    assert sunday_of(date(2026, 1, 10)) == date(2026, 1, 4)  # Saturday
    assert sunday_of(date(2026, 1, 2)) == date(2025, 12, 28)


def test_weeks_left_is_at_least_one():
    assert weeks_left(resolve_calendar(datetime(2026, 12, 31, 18, 0))) == 1
    assert weeks_left(resolve_calendar(datetime(2026, 12, 24))) == 1
    assert weeks_left(resolve_calendar(datetime(2026, 12, 23))) == 2


def test_goal_progress_ahead_of_pace_has_nothing_remaining():
    cal = resolve_calendar(date(2026, 1, 31))
    g = goal_progress(
        1.0,
        cal,
        monthly_mileage=40.0,
        annual_mileage=400.0,
        cumulative_mileage=40.0,
        this_week_mileage=10.0,
        weeks_remaining=weeks_left(cal),
    )
    assert g.month_remaining == 0.0
    assert g.annual_remaining == 0.0
    assert g.required_weekly_mileage == 0.0
    assert g.this_week_remaining == 0.0
    assert g.over_under == pytest.approx(9.0)
    assert g.percent_complete == pytest.approx(400 / 365 * 100)


def test_goal_progress_tolerates_non_finite_rate():
    cal = resolve_calendar(date(2026, 6, 1))
    g = goal_progress(
        float("inf"),
        cal,
        monthly_mileage=0.0,
        annual_mileage=0.0,
        cumulative_mileage=5.0,
        this_week_mileage=0.0,
        weeks_remaining=30,
    )
    assert g.annual_target == 0.0
    assert g.over_under == 5.0


@pytest.mark.parametrize("raw", ["", None, "abc", float("nan"), float("inf"), float("-inf")])
def test_goal_parameters_blank_or_non_finite_become_zero(raw):
    goals = GoalParameters(target_rate_a=raw, target_rate_b=raw, predictor_distance_mi=raw)
    assert goals.target_rate_a == 0.0
    assert goals.target_rate_b == 0.0
    assert goals.predictor_distance_mi == 0.0


def test_goal_parameters_accept_numeric_strings():
    goals = GoalParameters(target_rate_a="2.5", predictor_distance_mi=" 13.1 ")
    assert goals.target_rate_a == 2.5
    assert goals.predictor_distance_mi == 13.1


def test_recent_run_count_defaults_to_shared_constant():
    assert Settings().recent_run_count == RECENT_PACE_RUNS
