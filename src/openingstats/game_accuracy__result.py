from __future__ import annotations

from openingstats.models.raw_game import RawGame
from openingstats.player_side import PlayerSide


def game_accuracy(side: PlayerSide, game: RawGame) -> float | None:
    """Return the accuracy for ``side``, or None when the game has no accuracies."""
    if game.accuracies is None:
        return None
    if side.is_white():
        return game.accuracies.white
    return game.accuracies.black
