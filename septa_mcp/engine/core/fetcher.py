"""Resilient fetcher: one HTTP GET, decoded as JSON, failures classified.

The fetcher performs exactly one attempt per call. Fallback across
endpoints and transports belongs to the resolver.
"""

import logging
from typing import Any

import httpx

from .errors import BODY_PREVIEW_CHARS, DecodeError, HttpStatusError, TransportError
from .observer import ObserverFunc, logging_observer

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "septa-transit-mcp/2.0"


class ResilientFetcher:
    """Fetch a URL and return its decoded JSON body.

    A response counts as success only when the status is exactly 200 and
    the full body parses as JSON. Everything else raises one of
    ``TransportError``, ``HttpStatusError`` or ``DecodeError``.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        observer: ObserverFunc | None = None,
    ) -> None:
        self._client = client
        self._owns_client = client is None
        self._timeout = timeout
        self._headers = {"Accept": "application/json", "User-Agent": user_agent}
        self._observe = observer or logging_observer(logger)

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, follow_redirects=False)
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> Any:
        """GET ``url`` and decode the JSON body.

        Args:
            url: Fully built URL, including scheme

        Returns:
            The decoded JSON document

        Raises:
            TransportError: connection, DNS or timeout failure
            HttpStatusError: status other than 200
            DecodeError: body is not valid JSON
        """
        client = self._ensure_client()
        self._observe(logging.DEBUG, "fetch.request", url=url)

        try:
            response = await client.get(url, headers=self._headers, timeout=self._timeout)
        except httpx.TimeoutException as e:
            error = TransportError(url, f"Request timed out after {self._timeout}s: {e!r}")
            self._observe(logging.WARNING, "fetch.failure", url=url, error=str(error))
            raise error from e
        except httpx.RequestError as e:
            error = TransportError(url, f"Request failed: {e}")
            self._observe(logging.WARNING, "fetch.failure", url=url, error=str(error))
            raise error from e

        body = response.text
        self._observe(
            logging.DEBUG,
            "fetch.response",
            url=url,
            status=response.status_code,
            length=len(body),
            preview=body[:BODY_PREVIEW_CHARS],
        )

        if response.status_code != 200:
            error = HttpStatusError(url, response.status_code, body)
            self._observe(logging.WARNING, "fetch.failure", url=url, error=str(error))
            raise error

        try:
            return response.json()
        except ValueError as e:
            error = DecodeError(url, str(e), body[:BODY_PREVIEW_CHARS])
            self._observe(logging.WARNING, "fetch.failure", url=url, error=str(error))
            raise error from e
