"""Custom error types used in openingstats."""

import requests


class RateLimitError(requests.HTTPError):
    """Chess.com kept answering 429 after every allowed retry."""
