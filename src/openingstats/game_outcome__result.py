from __future__ import annotations

from openingstats.models.raw_game import RawGame
from openingstats.player_side import PlayerSide


def game_outcome(side: PlayerSide, game: RawGame) -> str:
    """Return the outcome token recorded for ``side``, unmodified."""
    return game.player(side).result
