"""Derive an opening name from the ECOUrl tag."""

from __future__ import annotations

from collections.abc import Mapping

from openingstats.utils.logger import funclogger

ECO_URL_TAG = "ECOUrl"
ECO_TAG = "ECO"


@funclogger
def resolve_opening_name(tags: Mapping[str, str]) -> str | None:
    """Return the last path segment of ``ECOUrl``, or None when it is missing or empty."""
    eco_url = tags.get(ECO_URL_TAG)
    if eco_url is None:
        return None
    name = eco_url.rsplit("/", 1)[-1]
    return name or None
