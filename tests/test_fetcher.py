import asyncio
import logging

import httpx
import pytest

from conftest import FakeProvider, mock_client
from septa_mcp.engine.core.errors import DecodeError, HttpStatusError, TransportError
from septa_mcp.engine.core.fetcher import ResilientFetcher

URL = "https://www3.septa.org/api/TransitView/index.php?route=23"


def _fetch(handler, url: str = URL, **kwargs):
    async def main():
        async with mock_client(handler) as client:
            fetcher = ResilientFetcher(client=client, **kwargs)
            return await fetcher.fetch(url)

    return asyncio.run(main())


def test_returns_decoded_json_on_200():
    provider = FakeProvider({URL: {"bus": [{"VehicleID": "8412"}]}})
    assert _fetch(provider) == {"bus": [{"VehicleID": "8412"}]}
    assert provider.urls == [URL]


def test_sends_json_accept_and_user_agent_headers():
    provider = FakeProvider({URL: []})
    _fetch(provider, user_agent="test-agent/1.0")
    request = provider.requests[0]
    assert request.headers["accept"] == "application/json"
    assert request.headers["user-agent"] == "test-agent/1.0"


def test_non_200_raises_http_status_error_with_body():
    provider = FakeProvider({URL: httpx.Response(404, text="no such route")})
    with pytest.raises(HttpStatusError) as exc_info:
        _fetch(provider)
    assert exc_info.value.status_code == 404
    assert exc_info.value.body == "no such route"
    assert exc_info.value.url == URL
    assert "HTTP 404" in str(exc_info.value)


def test_redirect_is_not_followed():
    redirect = httpx.Response(301, headers={"Location": "https://example.com/"}, text="")
    provider = FakeProvider({URL: redirect})
    with pytest.raises(HttpStatusError) as exc_info:
        _fetch(provider)
    assert exc_info.value.status_code == 301
    assert len(provider.requests) == 1


def test_other_2xx_is_still_a_failure():
    provider = FakeProvider({URL: httpx.Response(204)})
    with pytest.raises(HttpStatusError):
        _fetch(provider)


def test_invalid_json_raises_decode_error_with_preview():
    body = "<html>" + "x" * 500 + "</html>"
    provider = FakeProvider({URL: httpx.Response(200, text=body)})
    with pytest.raises(DecodeError) as exc_info:
        _fetch(provider)
    assert exc_info.value.preview == body[:200]
    assert "Failed to parse JSON" in str(exc_info.value)


def test_empty_body_is_a_decode_error():
    provider = FakeProvider({URL: httpx.Response(200, text="")})
    with pytest.raises(DecodeError):
        _fetch(provider)


def test_connect_error_raises_transport_error():
    def handler(request):
        raise httpx.ConnectError("Name or service not known", request=request)

    with pytest.raises(TransportError) as exc_info:
        _fetch(handler)
    assert "Name or service not known" in str(exc_info.value)


def test_timeout_raises_transport_error():
    def handler(request):
        raise httpx.ReadTimeout("read timed out", request=request)

    with pytest.raises(TransportError) as exc_info:
        _fetch(handler, timeout=2.5)
    assert "timed out after 2.5s" in str(exc_info.value)


def test_does_not_retry(observer):
    provider = FakeProvider()
    with pytest.raises(HttpStatusError):
        _fetch(provider, observer=observer)
    assert len(provider.requests) == 1


def test_reports_events_to_observer(observer):
    provider = FakeProvider({URL: {"ok": True}})
    _fetch(provider, observer=observer)
    assert observer.names() == ["fetch.request", "fetch.response"]
    _, _, fields = observer.events[1]
    assert fields["status"] == 200


def test_failure_is_reported_at_warning(observer):
    provider = FakeProvider({URL: httpx.Response(500, text="boom")})
    with pytest.raises(HttpStatusError):
        _fetch(provider, observer=observer)
    assert observer.at_level(logging.WARNING) == ["fetch.failure"]


def test_owned_client_is_created_lazily_and_closed():
    async def main():
        fetcher = ResilientFetcher()
        client = fetcher._ensure_client()
        assert fetcher._ensure_client() is client
        await fetcher.aclose()
        assert client.is_closed
        assert fetcher._client is None

    asyncio.run(main())


def test_shared_client_is_not_closed():
    async def main():
        async with mock_client(FakeProvider()) as client:
            fetcher = ResilientFetcher(client=client)
            await fetcher.aclose()
            assert not client.is_closed

    asyncio.run(main())
