"""Enumeration types for the SEPTA Transit MCP server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available MCP tools."""

    GET_BUS_LOCATIONS = "get_bus_locations"
    GET_BUS_DETOURS = "get_bus_detours"
    GET_TRANSIT_ALERTS = "get_transit_alerts"


class RequestKind(StrEnum):
    """Logical upstream data requests."""

    LOCATIONS = "locations"
    DETOURS = "detours"
    ALERTS = "alerts"


class ResponseShape(StrEnum):
    """Shape of the document an endpoint candidate returns."""

    PER_ROUTE = "per_route"  # Already scoped to the requested route
    AGGREGATE = "aggregate"  # All routes at once, needs filtering
