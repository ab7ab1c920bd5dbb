"""Check a classified game against the requested color and time class."""

from __future__ import annotations

from openingstats.player_side import PlayerSide
from openingstats.utils.logger import funclogger
from openingstats.utils.normalize_string import normalize_string


@funclogger
def matches_filters(
    side: PlayerSide,
    requested_color: str,
    game_time_class: str,
    requested_time_class: str,
) -> bool:
    """Return True when both the side and the time class match, ignoring case."""
    try:
        requested_side = PlayerSide.from_str(requested_color)
    except ValueError:
        return False
    if side != requested_side:
        return False
    return normalize_string(game_time_class) == normalize_string(requested_time_class)
