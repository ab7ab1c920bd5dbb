from __future__ import annotations

import logging
import time
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field

import requests
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from openingstats.config import Settings
from openingstats.errors import RateLimitError
from openingstats.retry_after_seconds__rate_limit import retry_after_seconds
from openingstats.utils.logger import get_logger

log = get_logger(__name__)

MONTHLY_ARCHIVE_URL = "https://api.chess.com/pub/player/{username}/games/{year}/{month:02d}"
HTTP_STATUS_TOO_MANY_REQUESTS = 429

__all__ = [
    "MONTHLY_ARCHIVE_URL",
    "ChesscomClient",
    "ChesscomClientContext",
]


@dataclass(slots=True)
class ChesscomClientContext:
    """Settings and logger shared by archive requests.

    Attributes:
        settings: Application settings used for API calls.
        logger: Logger for client-specific messages.
    """

    settings: Settings
    logger: logging.Logger = field(default_factory=lambda: log)


class ChesscomClient:
    """Client for the Chess.com monthly game archives."""

    def __init__(self, context: ChesscomClientContext) -> None:
        """Initialize the client.

        Args:
            context: Client context containing settings and logger.
        """

        self._context = context

    @property
    def settings(self) -> Settings:
        return self._context.settings

    @property
    def logger(self) -> logging.Logger:
        return self._context.logger

    def fetch_periods(self, periods: Iterable[tuple[int, int]]) -> list[list[dict]]:
        """Fetch several monthly archives concurrently.

        Args:
            periods: ``(year, month)`` tuples to fetch.

        Returns:
            One batch of raw games per period, in the order of ``periods``.
            A period that could not be fetched yields an empty batch.

        Example:
            >>> client.fetch_periods([(2024, 1), (2024, 2)])
        """

        periods = list(periods)
        if not periods:
            return []
        workers = max(1, min(self.settings.max_workers, len(periods)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(self._safe_fetch_month, year, month) for year, month in periods
            ]
            return [future.result() for future in futures]

    def fetch_month(self, year: int, month: int) -> list[dict]:
        """Fetch the games of one monthly archive.

        Args:
            year: Archive year.
            month: Archive month (1-12).

        Returns:
            Raw game dictionaries as returned by the API.
        """

        url = MONTHLY_ARCHIVE_URL.format(username=self.settings.username, year=year, month=month)
        response = self._get_with_retry(url)
        try:
            payload = response.json()
        except ValueError as exc:
            self.logger.warning("Unparsable archive payload for %s: %s", url, exc)
            return []
        games = payload.get("games") if isinstance(payload, dict) else None
        if not isinstance(games, list):
            self.logger.warning("Archive payload for %s has no games list", url)
            return []
        self.logger.info("Fetched %s games for %04d-%02d", len(games), year, month)
        return games

    def _safe_fetch_month(self, year: int, month: int) -> list[dict]:
        """Fetch one month, logging failures instead of raising."""

        try:
            return self.fetch_month(year, month)
        except requests.RequestException as exc:
            self.logger.warning("Failed to fetch archive %04d-%02d: %s", year, month, exc)
            return []

    @retry(
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
        before_sleep=before_sleep_log(log, logging.WARNING),
    )
    def _get_with_retry(self, url: str) -> requests.Response:
        """GET an archive URL, retrying dropped connections and timeouts."""

        return self._get_archive(url)

    def _get_archive(self, url: str) -> requests.Response:
        """GET one monthly archive, waiting out Chess.com throttling.

        A 429 answer is retried up to ``chesscom_max_retries`` times. Each wait is the
        longer of the doubling archive backoff and the server's ``Retry-After``.

        Raises:
            RateLimitError: When the archive is still throttled after the last retry.
            requests.HTTPError: For any other error status.
        """

        max_retries = max(self.settings.chesscom_max_retries, 0)
        for attempt in range(max_retries + 1):
            response = requests.get(
                url,
                headers={"User-Agent": self.settings.chesscom_user_agent},
                timeout=self.settings.chesscom_timeout_s,
            )
            if response.status_code != HTTP_STATUS_TOO_MANY_REQUESTS:
                response.raise_for_status()
                return response
            if attempt < max_retries:
                wait_seconds = self._archive_backoff_seconds(response, attempt)
                self.logger.warning(
                    "Archive %s throttled; next request in %.2fs (retry %s of %s)",
                    url,
                    wait_seconds,
                    attempt + 1,
                    max_retries,
                )
                if wait_seconds:
                    time.sleep(wait_seconds)
        message = f"Archive {url} still rate limited after {max_retries} retries"
        raise RateLimitError(message, response=response)

    def _archive_backoff_seconds(self, response: requests.Response, attempt: int) -> float:
        base_seconds = max(self.settings.chesscom_retry_backoff_ms, 0) / 1000.0
        retry_after = retry_after_seconds(response.headers.get("Retry-After"))
        return max(base_seconds * (2**attempt), retry_after or 0.0)
