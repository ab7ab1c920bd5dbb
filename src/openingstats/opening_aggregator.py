"""Fold retrieved games into per-opening statistics."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass, field

from pydantic import ValidationError

from openingstats.game_accuracy__result import game_accuracy
from openingstats.game_outcome__result import game_outcome
from openingstats.identify_player_side__classifier import identify_player_side
from openingstats.matches_filters__classifier import matches_filters
from openingstats.merge_entries__aggregator import merge_entries
from openingstats.models.opening_entry import OpeningEntry
from openingstats.models.raw_game import RawGame
from openingstats.parse_pgn_tags import parse_pgn_tags
from openingstats.resolve_opening_name__opening import (
    ECO_TAG,
    ECO_URL_TAG,
    resolve_opening_name,
)
from openingstats.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class AggregationStats:
    """Counters describing what happened to each game of a run.

    Attributes:
        games_seen: Records handed to the aggregator.
        games_invalid: Records that could not be read as a game.
        skipped_player_not_found: Games the user did not play (or without player tags).
        skipped_filtered: Games with the wrong side or time class.
        skipped_no_opening: Games without an ECOUrl tag.
        games_used: Games folded into an opening entry.
    """

    games_seen: int = 0
    games_invalid: int = 0
    skipped_player_not_found: int = 0
    skipped_filtered: int = 0
    skipped_no_opening: int = 0
    games_used: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(slots=True)
class OpeningAggregator:
    """Own the opening map for one run and fold games into it in arrival order.

    Example:
        >>> aggregator = OpeningAggregator(username="hikaru", pieces="black", time_class="blitz")
        >>> aggregator.add_batch(games)
    """

    username: str
    pieces: str
    time_class: str
    entries: dict[str, OpeningEntry] = field(default_factory=dict)
    stats: AggregationStats = field(default_factory=AggregationStats)

    def add_batch(self, games: Iterable[RawGame | Mapping[str, object]]) -> int:
        """Fold every game of a batch and return how many were used."""
        used_before = self.stats.games_used
        for game in games:
            self.add_game(game)
        return self.stats.games_used - used_before

    def add_game(self, game: RawGame | Mapping[str, object]) -> str | None:
        """Fold a single game and return its opening name, or None when skipped."""
        self.stats.games_seen += 1
        raw_game = self._coerce_game(game)
        if raw_game is None:
            self.stats.games_invalid += 1
            return None

        tags = parse_pgn_tags(raw_game.pgn)
        side = identify_player_side(tags, self.username)
        if side is None:
            self.stats.skipped_player_not_found += 1
            return None
        if not matches_filters(side, self.pieces, raw_game.time_class, self.time_class):
            self.stats.skipped_filtered += 1
            return None
        opening = resolve_opening_name(tags)
        if opening is None:
            self.stats.skipped_no_opening += 1
            return None

        incoming = OpeningEntry(
            count=1,
            eco_code=tags.get(ECO_TAG) or None,
            eco_url=tags.get(ECO_URL_TAG) or None,
            results={game_outcome(side, raw_game): 1},
            average_accuracy=game_accuracy(side, raw_game),
        )
        self.entries[opening] = merge_entries(self.entries.get(opening), incoming)
        self.stats.games_used += 1
        return opening

    @staticmethod
    def _coerce_game(game: RawGame | Mapping[str, object]) -> RawGame | None:
        if isinstance(game, RawGame):
            return game
        try:
            return RawGame.model_validate(game)
        except ValidationError as exc:
            logger.warning("Skipping unreadable game record: %s", exc.errors()[:1])
            return None
