import json
from collections.abc import Callable

import httpx
import pytest


class RecordingObserver:
    """Collects (level, event, fields) tuples emitted by the fetch layer."""

    def __init__(self) -> None:
        self.events: list[tuple[int, str, dict]] = []

    def __call__(self, level: int, event: str, **fields) -> None:
        self.events.append((level, event, fields))

    def names(self) -> list[str]:
        return [event for _, event, _ in self.events]

    def at_level(self, level: int) -> list[str]:
        return [event for lvl, event, _ in self.events if lvl == level]


class FakeProvider:
    """MockTransport handler serving canned responses per URL.

    ``routes`` maps a full URL to either an ``httpx.Response``, an exception
    instance to raise, or any JSON-serializable value (served with 200).
    Unlisted URLs get a 503.
    """

    def __init__(self, routes: dict | None = None) -> None:
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    @property
    def urls(self) -> list[str]:
        return [str(request.url) for request in self.requests]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        answer = self.routes.get(str(request.url))
        if answer is None:
            return httpx.Response(503, text="Service Unavailable")
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, httpx.Response):
            return answer
        return httpx.Response(200, text=json.dumps(answer))


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


def mock_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
