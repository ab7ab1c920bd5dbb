"""Merge per-opening accumulators."""

from __future__ import annotations

from collections.abc import Mapping

from openingstats.models.opening_entry import OpeningEntry


def merge_entries(existing: OpeningEntry | None, incoming: OpeningEntry) -> OpeningEntry:
    """Fold ``incoming`` into ``existing`` and return the merged entry.

    Counts and result histograms are summed, so they do not depend on merge order.
    ECO fields keep the first non-empty value seen.

    The accuracy is the midpoint of the current average and the incoming value, not a
    count-weighted mean. Every new sample carries half the weight of the whole history,
    so the result drifts towards recent games and depends on the order of merges.
    """
    if existing is None:
        return incoming
    return OpeningEntry(
        count=existing.count + incoming.count,
        eco_code=_sticky(existing.eco_code, incoming.eco_code),
        eco_url=_sticky(existing.eco_url, incoming.eco_url),
        results=_merge_results(existing.results, incoming.results),
        average_accuracy=_merge_accuracy(existing.average_accuracy, incoming.average_accuracy),
    )


def _sticky(current: str | None, candidate: str | None) -> str | None:
    if current:
        return current
    return candidate or current


def _merge_results(left: Mapping[str, int], right: Mapping[str, int]) -> dict[str, int]:
    merged = dict(left)
    for outcome, count in right.items():
        merged[outcome] = merged.get(outcome, 0) + count
    return merged


def _merge_accuracy(current: float | None, sample: float | None) -> float | None:
    if current is None:
        return sample
    if sample is None:
        return current
    return (current + sample) / 2
