"""Tool handlers for the transit engine.

Each handler is a standalone async function that takes:
- params: dict[str, Any] - Tool arguments from the MCP call
- ctx: HandlerContext - Shared engine context (resolver)

And returns the JSON document for the tool result.
"""

from .base import HandlerContext, HandlerFunc, get_route_param
from .transit import (
    handle_bus_detours,
    handle_bus_locations,
    handle_transit_alerts,
)

__all__ = [
    # Base
    "HandlerContext",
    "HandlerFunc",
    "get_route_param",
    # Transit handlers
    "handle_bus_locations",
    "handle_bus_detours",
    "handle_transit_alerts",
]
