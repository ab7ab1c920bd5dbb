"""Read the Retry-After header Chess.com sends with 429 answers."""

from __future__ import annotations

import math
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime


def retry_after_seconds(value: str | None, now: datetime | None = None) -> float | None:
    """Return how long Chess.com asks us to wait before the next archive request.

    The header holds either delta-seconds or an HTTP date. Both are clamped at zero,
    and a missing or unreadable header yields ``None``.

    Args:
        value: Raw ``Retry-After`` header value.
        now: Reference time for HTTP dates; defaults to the current UTC time.
    """

    if not value:
        return None
    try:
        seconds = float(value)
    except ValueError:
        return _seconds_until(value, now or datetime.now(UTC))
    if not math.isfinite(seconds):
        return None
    return max(seconds, 0.0)


def _seconds_until(http_date: str, now: datetime) -> float | None:
    try:
        retry_at = parsedate_to_datetime(http_date)
    except (TypeError, ValueError):
        return None
    if retry_at.tzinfo is None:
        retry_at = retry_at.replace(tzinfo=UTC)
    return max((retry_at - now).total_seconds(), 0.0)
