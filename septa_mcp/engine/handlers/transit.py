"""Transit tool handlers.

Handles:
- get_bus_locations: Real-time vehicle positions for a route
- get_bus_detours: Active detours for a route
- get_transit_alerts: System-wide alerts and advisories
"""

import logging
from typing import Any

from ...models.enums import RequestKind
from ..core.resolver import RequestDescriptor
from .base import HandlerContext, get_route_param

logger = logging.getLogger(__name__)


async def handle_bus_locations(params: dict[str, Any], ctx: HandlerContext) -> Any:
    """Get vehicle locations for a route.

    Args:
        params: Dict containing:
            - route: Route identifier (e.g. "23", "G")

    Returns:
        TransitView document for the route
    """
    route = get_route_param(params)
    logger.info(f"Getting bus locations for route: {route}")
    return await ctx.resolver.resolve(RequestDescriptor(RequestKind.LOCATIONS, route))


async def handle_bus_detours(params: dict[str, Any], ctx: HandlerContext) -> Any:
    """Get active detours for a route."""
    route = get_route_param(params)
    logger.info(f"Getting bus detours for route: {route}")
    return await ctx.resolver.resolve(RequestDescriptor(RequestKind.DETOURS, route))


async def handle_transit_alerts(params: dict[str, Any], ctx: HandlerContext) -> Any:
    """Get system alerts. Arguments are ignored."""
    logger.info("Getting transit alerts")
    return await ctx.resolver.resolve(RequestDescriptor(RequestKind.ALERTS))
