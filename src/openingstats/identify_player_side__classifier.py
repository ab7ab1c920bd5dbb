"""Resolve which side a user played from PGN tags."""

from __future__ import annotations

from collections.abc import Mapping

from openingstats.player_side import PlayerSide
from openingstats.utils.logger import funclogger
from openingstats.utils.normalize_string import normalize_string


@funclogger
def identify_player_side(tags: Mapping[str, str], username: str) -> PlayerSide | None:
    """Return the side ``username`` played, checking Black before White.

    Returns None when the user is in neither tag or the tags are missing.
    """
    target = normalize_string(username)
    if not target:
        return None
    for side in (PlayerSide.BLACK, PlayerSide.WHITE):
        name = tags.get(side.tag_name)
        if name is not None and normalize_string(name) == target:
            return side
    return None
