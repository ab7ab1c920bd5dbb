from datetime import UTC, datetime, timedelta
from email.utils import format_datetime
import unittest
from unittest.mock import patch

import requests

from openingstats.chesscom_client import (
    MONTHLY_ARCHIVE_URL,
    ChesscomClient,
    ChesscomClientContext,
)
from openingstats.config import Settings
from openingstats.errors import RateLimitError
from openingstats.retry_after_seconds__rate_limit import retry_after_seconds
from tests.fixture_helpers import game_payload
from tests.http_fakes import FakeResponse, make_fake_get, make_fake_get_by_url


def _client(**overrides: object) -> ChesscomClient:
    values: dict[str, object] = {
        "username": "hikaru",
        "max_workers": 2,
        "chesscom_max_retries": 2,
        "chesscom_retry_backoff_ms": 100,
        "chesscom_user_agent": "openingstats-tests",
    }
    values.update(overrides)
    return ChesscomClient(ChesscomClientContext(settings=Settings(**values)))


class ChesscomClientTests(unittest.TestCase):
    def test_fetch_month_requests_monthly_archive(self) -> None:
        urls: list[str] = []
        headers: list[dict] = []
        games = [game_payload("hikaru", "opponent")]
        fake_get = make_fake_get(
            [FakeResponse(200, json_data={"games": games})],
            captured_urls=urls,
            captured_headers=headers,
        )

        with patch("openingstats.chesscom_client.requests.get", side_effect=fake_get):
            result = _client().fetch_month(2024, 3)

        self.assertEqual(result, games)
        self.assertEqual(urls, ["https://api.chess.com/pub/player/hikaru/games/2024/03"])
        self.assertEqual(headers, [{"User-Agent": "openingstats-tests"}])

    def test_rate_limit_retries_with_backoff(self) -> None:
        fake_get = make_fake_get(
            [
                FakeResponse(429, headers={"Retry-After": "0.5"}),
                FakeResponse(429),
                FakeResponse(200, json_data={"games": []}),
            ]
        )

        with (
            patch("openingstats.chesscom_client.requests.get", side_effect=fake_get),
            patch("openingstats.chesscom_client.time.sleep") as sleep_mock,
            self.assertLogs("openingstats", level="WARNING") as logs,
        ):
            result = _client().fetch_month(2024, 1)

        self.assertEqual(result, [])
        waits = [call.args[0] for call in sleep_mock.call_args_list]
        self.assertEqual(waits, [0.5, 0.2])
        self.assertIn("retry 1 of 2", logs.output[0])
        self.assertIn("/games/2024/01", logs.output[0])

    def test_rate_limit_exhausted_raises(self) -> None:
        fake_get = make_fake_get([FakeResponse(429)] * 3)

        with (
            patch("openingstats.chesscom_client.requests.get", side_effect=fake_get),
            patch("openingstats.chesscom_client.time.sleep"),
            self.assertRaises(RateLimitError) as raised,
        ):
            _client().fetch_month(2024, 1)

        self.assertIn("after 2 retries", str(raised.exception))
        self.assertEqual(raised.exception.response.status_code, 429)

    def test_connection_errors_are_retried(self) -> None:
        fake_get = make_fake_get(
            [
                requests.ConnectionError("reset"),
                FakeResponse(200, json_data={"games": [{"pgn": ""}]}),
            ]
        )

        with (
            patch("openingstats.chesscom_client.requests.get", side_effect=fake_get),
            patch("time.sleep"),
        ):
            result = _client().fetch_month(2024, 1)

        self.assertEqual(result, [{"pgn": ""}])

    def test_unusable_payloads_yield_no_games(self) -> None:
        cases = [
            FakeResponse(200, invalid_json=True),
            FakeResponse(200, json_data={"archives": []}),
            FakeResponse(200, json_data={"games": "nope"}),
            FakeResponse(200, json_data=["games"]),
        ]
        for response in cases:
            with self.subTest(response=response):
                fake_get = make_fake_get([response])
                with patch("openingstats.chesscom_client.requests.get", side_effect=fake_get):
                    self.assertEqual(_client().fetch_month(2024, 1), [])

    def test_fetch_periods_keeps_period_order_and_absorbs_failures(self) -> None:
        def url(month: int) -> str:
            return MONTHLY_ARCHIVE_URL.format(username="hikaru", year=2024, month=month)

        fake_get = make_fake_get_by_url(
            {
                url(1): FakeResponse(200, json_data={"games": [{"pgn": "jan"}]}),
                url(2): FakeResponse(500),
                url(3): FakeResponse(200, json_data={"games": [{"pgn": "mar"}]}),
            }
        )

        with (
            patch("openingstats.chesscom_client.requests.get", side_effect=fake_get),
            self.assertLogs("openingstats", level="WARNING") as logs,
        ):
            batches = _client().fetch_periods([(2024, 1), (2024, 2), (2024, 3)])

        self.assertEqual(batches, [[{"pgn": "jan"}], [], [{"pgn": "mar"}]])
        self.assertTrue(any("2024-02" in line for line in logs.output))

    def test_fetch_periods_without_periods(self) -> None:
        self.assertEqual(_client().fetch_periods([]), [])


def test_retry_after_delta_seconds() -> None:
    assert retry_after_seconds("3") == 3.0
    assert retry_after_seconds("-4") == 0.0


def test_retry_after_http_date() -> None:
    now = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)

    later = format_datetime(now + timedelta(seconds=30), usegmt=True)
    earlier = format_datetime(now - timedelta(seconds=30), usegmt=True)

    assert retry_after_seconds(later, now) == 30.0
    assert retry_after_seconds(earlier, now) == 0.0


def test_retry_after_http_date_defaults_to_current_time() -> None:
    future = datetime.now(UTC) + timedelta(seconds=30)

    seconds = retry_after_seconds(format_datetime(future, usegmt=True))

    assert seconds is not None
    assert 0 < seconds <= 30


def test_retry_after_unreadable_values() -> None:
    for value in (None, "", "soon", "nan", "inf"):
        assert retry_after_seconds(value) is None
