from __future__ import annotations

import json
import unittest

from openingstats.format_output import format_openings, render_json
from openingstats.models.opening_entry import OpeningEntry


class FormatOutputTests(unittest.TestCase):
    def setUp(self) -> None:
        self.entries = {
            "Italian-Game": OpeningEntry(
                count=1,
                eco_code="C50",
                eco_url="https://x/y/Italian-Game",
                results={"win": 1},
                average_accuracy=85.0,
            ),
            "Sicilian-Defense": OpeningEntry(count=3, results={"win": 2, "agreed": 1}),
            "French-Defense": OpeningEntry(count=1, results={"checkmated": 1}),
        }

    def test_payload_shape(self) -> None:
        payload = format_openings(self.entries)

        self.assertEqual(
            payload["Italian-Game"],
            {
                "count": 1,
                "eco": "C50",
                "eco_url": "https://x/y/Italian-Game",
                "results": {"win": 1},
                "average_accuracy": 85.0,
            },
        )
        self.assertEqual(payload["Sicilian-Defense"]["eco"], "")
        self.assertEqual(payload["Sicilian-Defense"]["eco_url"], "")
        self.assertIsNone(payload["Sicilian-Defense"]["average_accuracy"])

    def test_sorted_by_count_then_first_seen(self) -> None:
        payload = format_openings(self.entries)

        self.assertEqual(list(payload), ["Sicilian-Defense", "Italian-Game", "French-Defense"])

    def test_render_json_round_trips(self) -> None:
        rendered = render_json(self.entries)

        self.assertIn('\n  "Sicilian-Defense": {', rendered)
        decoded = json.loads(rendered)
        self.assertIsNone(decoded["French-Defense"]["average_accuracy"])
        self.assertEqual(decoded["Sicilian-Defense"]["results"], {"win": 2, "agreed": 1})

    def test_render_json_compact(self) -> None:
        self.assertEqual(render_json({}, indent=None), "{}")
