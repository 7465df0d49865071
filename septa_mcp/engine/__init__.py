"""Transit engine: maps MCP tool calls onto the fetch layer."""

import logging
from typing import Any

import httpx

from ..models.enums import ToolName
from .core.endpoints import DEFAULT_PROVIDER_HOST, build_candidate_table
from .core.errors import UnknownToolError
from .core.fetcher import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT, ResilientFetcher
from .core.observer import ObserverFunc
from .core.resolver import EndpointResolver
from .handlers import (
    HandlerContext,
    HandlerFunc,
    handle_bus_detours,
    handle_bus_locations,
    handle_transit_alerts,
)

logger = logging.getLogger(__name__)

HANDLERS: dict[ToolName, HandlerFunc] = {
    ToolName.GET_BUS_LOCATIONS: handle_bus_locations,
    ToolName.GET_BUS_DETOURS: handle_bus_detours,
    ToolName.GET_TRANSIT_ALERTS: handle_transit_alerts,
}


class TransitEngine:
    """Execute transit tools against the SEPTA API."""

    def __init__(self, resolver: EndpointResolver) -> None:
        self._resolver = resolver
        self._ctx = HandlerContext(resolver=resolver)

    @classmethod
    def create(
        cls,
        provider_host: str = DEFAULT_PROVIDER_HOST,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        client: httpx.AsyncClient | None = None,
        observer: ObserverFunc | None = None,
    ) -> "TransitEngine":
        """Build an engine with its fetcher and candidate table."""
        fetcher = ResilientFetcher(
            client=client, timeout=timeout, user_agent=user_agent, observer=observer
        )
        resolver = EndpointResolver(
            fetcher, candidates=build_candidate_table(provider_host), observer=observer
        )
        return cls(resolver)

    @property
    def resolver(self) -> EndpointResolver:
        return self._resolver

    async def invoke(self, tool_name: str, args: dict[str, Any] | None = None) -> Any:
        """Execute a tool and return its JSON document.

        Raises:
            UnknownToolError: tool name is not supported
            ValidationError: required argument missing
            AllEndpointsFailedError: every upstream candidate failed
        """
        try:
            tool = ToolName(tool_name)
        except ValueError:
            raise UnknownToolError(tool_name) from None

        return await HANDLERS[tool](args or {}, self._ctx)

    async def aclose(self) -> None:
        await self._resolver.fetcher.aclose()


__all__ = ["HANDLERS", "TransitEngine"]
