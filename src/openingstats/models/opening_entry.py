from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class OpeningEntry:
    """Per-opening accumulator.

    Attributes:
        count: Number of games folded into this entry.
        eco_code: ECO classification code, when any game carried one.
        eco_url: ECO reference URL, when any game carried one.
        results: Outcome token to number of games with that outcome.
        average_accuracy: Pairwise running average of the player's accuracy.
    """

    count: int = 1
    eco_code: str | None = None
    eco_url: str | None = None
    results: dict[str, int] = field(default_factory=dict)
    average_accuracy: float | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the JSON-ready representation of the entry."""
        return {
            "count": self.count,
            "eco": self.eco_code or "",
            "eco_url": self.eco_url or "",
            "results": dict(self.results),
            "average_accuracy": self.average_accuracy,
        }
