"""Command line entry point for opening statistics."""

from __future__ import annotations

import argparse
import sys

from openingstats.config import get_settings
from openingstats.format_output import render_json
from openingstats.run_opening_stats__pipeline import run_opening_stats
from openingstats.utils.logger import get_logger, set_level

PIECES_CHOICES = ("white", "black")
TIME_CLASS_CHOICES = ("bullet", "blitz", "rapid", "daily")


def _lowercase(value: str) -> str:
    return value.lower()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="opening-stats",
        description="Per-opening game counts, results and accuracy for a chess.com player.",
    )
    parser.add_argument("pieces", type=_lowercase, choices=PIECES_CHOICES)
    parser.add_argument("time_class", type=_lowercase, choices=TIME_CLASS_CHOICES)
    parser.add_argument("username")
    parser.add_argument("year", type=int)
    parser.add_argument(
        "--months",
        type=int,
        nargs="+",
        metavar="MONTH",
        help="Only fetch these months (1-12).",
    )
    parser.add_argument(
        "--include-current-month",
        action="store_true",
        default=None,
        help="Also fetch the month in progress.",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation; use a negative value for compact output.",
    )
    parser.add_argument("--max-workers", type=int, help="Concurrent archive requests.")
    parser.add_argument("--log-level", help="Logging level for stderr output.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings(
        username=args.username,
        pieces=args.pieces,
        time_class=args.time_class,
        year=args.year,
        months=args.months,
        include_current_month=args.include_current_month,
        max_workers=args.max_workers,
        log_level=args.log_level,
    )
    get_logger()
    try:
        set_level(settings.log_level)
    except ValueError as exc:
        print(f"opening-stats: {exc}", file=sys.stderr)
        return 2
    try:
        report = run_opening_stats(settings)
    except ValueError as exc:
        print(f"opening-stats: {exc}", file=sys.stderr)
        return 2
    indent = args.indent if args.indent >= 0 else None
    print(render_json(report.entries, indent=indent))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
