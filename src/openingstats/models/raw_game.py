"""Models for chess.com monthly archive game records."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from openingstats.player_side import PlayerSide


class PlayerRecord(BaseModel):
    """One side of a chess.com game record.

    Attributes:
        username: Account name of the player on this side.
        result: Upstream outcome token for this side ("win", "resigned", ...).
    """

    model_config = ConfigDict(frozen=True)

    username: str = ""
    result: str = ""


class Accuracies(BaseModel):
    """Engine accuracy scores for both sides, when chess.com computed them."""

    model_config = ConfigDict(frozen=True)

    black: float | None = None
    white: float | None = None


class RawGame(BaseModel):
    """A single game as returned by the monthly archive endpoint.

    Unknown fields in the payload (``url``, ``rules``, ratings, ...) are ignored.

    Example:
        >>> RawGame.model_validate({"pgn": "", "time_class": "blitz"})
    """

    model_config = ConfigDict(frozen=True)

    pgn: str = ""
    time_class: str = ""
    black: PlayerRecord = Field(default_factory=PlayerRecord)
    white: PlayerRecord = Field(default_factory=PlayerRecord)
    accuracies: Accuracies | None = None

    def player(self, side: PlayerSide) -> PlayerRecord:
        return self.white if side.is_white() else self.black
