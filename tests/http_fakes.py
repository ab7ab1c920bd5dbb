from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

import requests


@dataclass(slots=True)
class FakeResponse:
    status_code: int = 200
    json_data: object = None
    headers: dict = field(default_factory=dict)
    invalid_json: bool = False

    def json(self) -> object:
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return {} if self.json_data is None else self.json_data

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def make_fake_get(
    responses: Iterable[FakeResponse | Exception],
    *,
    captured_urls: list[str] | None = None,
    captured_headers: list[dict] | None = None,
) -> Callable[..., FakeResponse]:
    queue = list(responses)

    def _fake_get(url: str, *_args, **kwargs) -> FakeResponse:
        if captured_urls is not None:
            captured_urls.append(url)
        if captured_headers is not None:
            captured_headers.append(dict(kwargs.get("headers") or {}))
        response = queue.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    return _fake_get


def make_fake_get_by_url(
    responses: dict[str, FakeResponse | Exception],
) -> Callable[..., FakeResponse]:
    """Answer by URL, for calls made from several threads in any order."""

    def _fake_get(url: str, *_args, **_kwargs) -> FakeResponse:
        response = responses.get(url, FakeResponse(404))
        if isinstance(response, Exception):
            raise response
        return response

    return _fake_get
