"""Resolve the (year, month) archive periods to fetch."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date

MONTHS_PER_YEAR = 12


def resolve_periods(
    year: int,
    today: date,
    months: Iterable[int] | None = None,
    include_current_month: bool = False,
) -> list[tuple[int, int]]:
    """Return the archive periods for ``year`` that are complete as of ``today``.

    Args:
        year: Calendar year to cover.
        today: Reference date bounding the window.
        months: Optional subset of months to keep.
        include_current_month: Also return the month ``today`` falls in.

    Returns:
        Sorted list of ``(year, month)`` tuples.

    Raises:
        ValueError: When ``months`` contains a value outside 1-12.
    """

    wanted = _validate_months(months)
    last_month = _last_month(year, today, include_current_month)
    return [(year, month) for month in range(1, last_month + 1) if wanted is None or month in wanted]


def _validate_months(months: Iterable[int] | None) -> set[int] | None:
    if months is None:
        return None
    wanted = set(months)
    invalid = sorted(month for month in wanted if not 1 <= month <= MONTHS_PER_YEAR)
    if invalid:
        raise ValueError(f"Months must be between 1 and 12, got {invalid}")
    return wanted


def _last_month(year: int, today: date, include_current_month: bool) -> int:
    if year < today.year:
        return MONTHS_PER_YEAR
    if year > today.year:
        return 0
    return today.month if include_current_month else today.month - 1
