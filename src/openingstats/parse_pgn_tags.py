"""Extract header tags from PGN text."""

from __future__ import annotations

import re
from io import StringIO

import chess.pgn

_ESCAPED_CHAR = re.compile(r'\\(["\\])')


def parse_pgn_tags(pgn: str) -> dict[str, str]:
    """Return the header tags of a PGN text as a flat mapping.

    Headers are read with ``chess.pgn.read_headers``: movetext and blank lines are
    skipped, malformed tag lines are dropped individually and a repeated tag keeps
    its last value. Escaped quotes and backslashes in values are unescaped.
    """
    headers = chess.pgn.read_headers(StringIO(pgn))
    return {name: _unescape_tag_value(value) for name, value in (headers or {}).items()}


def _unescape_tag_value(value: str) -> str:
    return _ESCAPED_CHAR.sub(r"\1", value)
