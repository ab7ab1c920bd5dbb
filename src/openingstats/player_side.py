from __future__ import annotations

from enum import Enum

import chess


class PlayerSide(Enum):
    """The side a player had in a game.

    Attributes:
        WHITE: The white pieces (corresponds to chess.WHITE).
        BLACK: The black pieces (corresponds to chess.BLACK).

    Methods:
        from_str(side_str: str) -> PlayerSide:
            Converts "white"/"w"/"black"/"b" (any case) to a PlayerSide.
            Raises ValueError for anything else.

        tag_name -> str:
            The PGN header tag holding this side's player name ("White"/"Black").
    """

    WHITE = chess.WHITE
    BLACK = chess.BLACK

    @classmethod
    def from_str(cls, side_str: str) -> PlayerSide:
        side_str = side_str.strip().lower()
        if side_str in ["white", "w"]:
            return cls.WHITE
        if side_str in ["black", "b"]:
            return cls.BLACK
        raise ValueError(f"Invalid side string: {side_str}")

    def is_white(self) -> bool:
        return self == PlayerSide.WHITE

    @property
    def tag_name(self) -> str:
        return "White" if self.is_white() else "Black"
