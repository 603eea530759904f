#!/usr/bin/env python3
"""
Print the mileage dashboard for a CSV run log.

CSV columns: date, distance_mi (or distance_km / distance_m), moving_time_sec.

Usage examples:
  - Today's numbers against two goals (3.0 and 2.5 mi/day):
      python backend/scripts/analyze_csv.py --csv runs.csv --rate-a 3.0 --rate-b 2.5
  - Replay a past day, half-marathon prediction:
      python backend/scripts/analyze_csv.py --csv runs.csv --today 2026-01-06 --predict-distance 13.1
  - Full snapshot as JSON:
      python backend/scripts/analyze_csv.py --csv runs.csv --json
"""

from __future__ import annotations

import argparse
import datetime as dt
import logging
import sys
from pathlib import Path

from runtracker.analytics.engine import build_snapshot
from runtracker.clock import get_now
from runtracker.core.config import settings
from runtracker.core.log_config import configure_logging
from runtracker.core.time_utils import format_miles, format_minutes, format_pace
from runtracker.ingest.csv_runs import parse_csv_runs
from runtracker.schemas.analytics import AnalyticsSnapshot, GoalProgress
from runtracker.schemas.run import GoalParameters

logger = logging.getLogger("analyze_csv")

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Summarize a CSV run log")
    p.add_argument("--csv", required=True, help="Path to the CSV file")
    p.add_argument("--rate-a", type=float, default=settings.default_target_rate_a, help="Goal A, miles per day")
    p.add_argument("--rate-b", type=float, default=settings.default_target_rate_b, help="Goal B, miles per day")
    p.add_argument(
        "--predict-distance",
        type=float,
        default=settings.default_predictor_distance_mi,
        help="Race distance (mi) for the finish-time prediction",
    )
    p.add_argument("--today", type=dt.date.fromisoformat, default=None, help="Pretend today is YYYY-MM-DD")
    p.add_argument("--json", action="store_true", help="Print the full snapshot as JSON")
    return p.parse_args(argv)


def metric_cards(snap: AnalyticsSnapshot) -> list[tuple[str, str]]:
    a, b = snap.goal_a, snap.goal_b
    return [
        ("Monthly mileage", format_miles(snap.monthly_mileage)),
        ("Month remaining (A)", format_miles(a.month_remaining)),
        ("Month remaining (B)", format_miles(b.month_remaining)),
        ("Annual mileage", format_miles(snap.annual_mileage)),
        ("Annual remaining (A)", format_miles(a.annual_remaining)),
        ("Annual remaining (B)", format_miles(b.annual_remaining)),
        ("7-day rolling total", format_miles(snap.rolling_7d_mileage)),
        ("Over/Under pace A", format_miles(a.over_under)),
        ("Over/Under pace B", format_miles(b.over_under)),
        ("Year complete (A)", f"{a.percent_complete:.1f}%"),
        ("Year complete (B)", f"{b.percent_complete:.1f}%"),
        ("Recent pace", format_pace(snap.recent_pace)),
        ("Year pace", format_pace(snap.year_average_pace)),
        ("Predicted time", format_minutes(snap.predicted_minutes)),
    ]


def weekly_row(name: str, goal: GoalProgress, weeks_left: int) -> str:
    return (
        f"  {name}: {format_miles(goal.this_week_remaining)} left this week, "
        f"{format_miles(goal.required_weekly_mileage)}/wk needed over {weeks_left} weeks"
    )


def print_report(snap: AnalyticsSnapshot) -> None:
    width = max(len(label) for label, _ in metric_cards(snap))
    for label, value in metric_cards(snap):
        print(f"{label:<{width}}  {value}")

    print("\nWeekly breakdown")
    print(weekly_row("Pace A", snap.goal_a, snap.weeks_left))
    print(weekly_row("Pace B", snap.goal_b, snap.weeks_left))

    print("\nMonth  Mileage   vs prior  Avg pace")
    for bucket in snap.monthly_buckets:
        print(
            f"{MONTH_NAMES[bucket.month]:<5}  {format_miles(bucket.miles):>8}  "
            f"{bucket.change_from_prior:+8.1f}  {format_pace(bucket.pace)}"
        )

    print("\nDistance histogram")
    for b in snap.histogram:
        print(f"  {b.label:<10} {'#' * b.count} {b.count}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging()

    path = Path(args.csv)
    if not path.exists():
        print(f"CSV not found: {path}", file=sys.stderr)
        return 1

    try:
        runs = parse_csv_runs(path.read_text(encoding="utf-8-sig"))
    except ValueError as exc:
        print(f"Could not read {path}: {exc}", file=sys.stderr)
        return 1
    logger.info("Loaded %d runs from %s", len(runs), path)

    goals = GoalParameters(
        target_rate_a=args.rate_a,
        target_rate_b=args.rate_b,
        predictor_distance_mi=args.predict_distance,
    )
    now = args.today if args.today is not None else get_now()
    snap = build_snapshot(runs, goals, now, recent_count=settings.recent_run_count)

    if args.json:
        print(snap.model_dump_json(indent=2))
    else:
        print_report(snap)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
