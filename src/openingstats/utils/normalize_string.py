from __future__ import annotations


def normalize_string(value: str | None) -> str:
    """
    Normalize a string for case-insensitive comparison.

    Strips surrounding whitespace and lowercases the value. ``None`` becomes an
    empty string, so missing PGN tags and missing filters compare equal to ``""``
    rather than raising.

    Parameters
    ----------
    value : str or None
        The input string to normalize.

    Returns
    -------
    str
        The normalized string.

    Examples
    --------
    >>> normalize_string("  Hikaru  ")
    'hikaru'
    >>> normalize_string(None)
    ''
    >>> normalize_string("BLITZ")
    'blitz'
    """
    return (value or "").strip().lower()
