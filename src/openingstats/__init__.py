"""Per-opening statistics for chess.com game archives."""

from openingstats.merge_entries__aggregator import merge_entries
from openingstats.models import OpeningEntry, RawGame
from openingstats.opening_aggregator import AggregationStats, OpeningAggregator
from openingstats.parse_pgn_tags import parse_pgn_tags
from openingstats.player_side import PlayerSide
from openingstats.run_opening_stats__pipeline import OpeningReport, run_opening_stats

__version__ = "0.1.0"

__all__ = [
    "AggregationStats",
    "OpeningAggregator",
    "OpeningEntry",
    "OpeningReport",
    "PlayerSide",
    "RawGame",
    "merge_entries",
    "parse_pgn_tags",
    "run_opening_stats",
]
