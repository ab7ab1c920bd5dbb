"""Run one end-to-end opening statistics collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from openingstats.chesscom_client import ChesscomClient, ChesscomClientContext
from openingstats.config import Settings
from openingstats.models.opening_entry import OpeningEntry
from openingstats.opening_aggregator import AggregationStats, OpeningAggregator
from openingstats.resolve_periods__date_range import resolve_periods
from openingstats.utils.logger import get_logger
from openingstats.utils.now import Now

logger = get_logger(__name__)


@dataclass(slots=True)
class OpeningReport:
    """Result of a run.

    Attributes:
        entries: Opening name to accumulated statistics.
        stats: Per-game bookkeeping for the run.
        periods: The ``(year, month)`` periods that were requested.
    """

    entries: dict[str, OpeningEntry] = field(default_factory=dict)
    stats: AggregationStats = field(default_factory=AggregationStats)
    periods: list[tuple[int, int]] = field(default_factory=list)


def run_opening_stats(
    settings: Settings,
    *,
    client: ChesscomClient | None = None,
    today: date | None = None,
) -> OpeningReport:
    """Fetch the configured window and aggregate it per opening.

    All periods are fetched before any game is aggregated, so the opening map is only
    ever touched from the calling thread.
    """
    periods = resolve_periods(
        settings.year,
        today or Now.as_date(),
        months=settings.months,
        include_current_month=settings.include_current_month,
    )
    if not periods:
        logger.warning("No complete months to fetch for %s", settings.year)
        return OpeningReport(periods=periods)

    client = client or ChesscomClient(ChesscomClientContext(settings=settings))
    batches = client.fetch_periods(periods)

    aggregator = OpeningAggregator(
        username=settings.username,
        pieces=settings.pieces,
        time_class=settings.time_class,
    )
    for batch in batches:
        aggregator.add_batch(batch)

    _log_summary(settings, periods, aggregator)
    return OpeningReport(entries=aggregator.entries, stats=aggregator.stats, periods=periods)


def _log_summary(
    settings: Settings,
    periods: list[tuple[int, int]],
    aggregator: OpeningAggregator,
) -> None:
    stats = aggregator.stats
    logger.info(
        "Processed %s games for %s over %s months: %s used in %s openings",
        stats.games_seen,
        settings.username,
        len(periods),
        stats.games_used,
        len(aggregator.entries),
    )
    logger.info(
        "Skipped: %s not played by user, %s filtered, %s without opening, %s invalid",
        stats.skipped_player_not_found,
        stats.skipped_filtered,
        stats.skipped_no_opening,
        stats.games_invalid,
    )
