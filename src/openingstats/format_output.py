"""Render opening entries as the JSON report."""

from __future__ import annotations

import json
from collections.abc import Mapping

from openingstats.models.opening_entry import OpeningEntry


def format_openings(entries: Mapping[str, OpeningEntry]) -> dict[str, dict[str, object]]:
    """Return the report payload, most played openings first.

    Ties keep the order in which the openings were first seen.
    """
    ordered = sorted(entries.items(), key=lambda item: item[1].count, reverse=True)
    return {name: entry.to_payload() for name, entry in ordered}


def render_json(entries: Mapping[str, OpeningEntry], indent: int | None = 2) -> str:
    return json.dumps(format_openings(entries), indent=indent)
