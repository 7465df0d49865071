"""Narrow aggregate ("all routes") responses to a single route.

Two provider shapes are recognized:

- mapping: ``{"routes": {"23": {...}, "45": {...}}}``, or the list form
  SEPTA's TransitViewAll actually returns, ``{"routes": [{"23": [...]}, ...]}``.
  The payload for the requested route is returned as-is.
- flat: ``[{"route": "23", ...}, {"route": "45", ...}]``. Matching records
  are returned as ``{"results": [...]}``.

Anything else raises ``UnrecognizedResponseError``. Unfiltered aggregate
data is never returned for a per-route request.

Both shapes are provisional and should be checked against live samples
when the provider changes its API.
"""

from typing import Any

from .errors import UnrecognizedResponseError

ROUTES_KEY = "routes"
RESULTS_KEY = "results"
ROUTE_ID_FIELDS = ("route", "route_id")


def _route_id(record: dict) -> str | None:
    for field in ROUTE_ID_FIELDS:
        value = record.get(field)
        if value is not None:
            return str(value)
    return None


def _merge_route_maps(routes: Any) -> dict | None:
    """Return the route -> payload map, or None if ``routes`` isn't one."""
    if isinstance(routes, dict):
        return routes
    if isinstance(routes, list) and routes and all(isinstance(item, dict) for item in routes):
        merged: dict = {}
        for item in routes:
            merged.update(item)
        return merged
    return None


def filter_aggregate(document: Any, route: str, url: str = "") -> Any:
    """Extract the requested route from an aggregate document.

    Args:
        document: Decoded aggregate response
        route: Requested route identifier (unencoded)
        url: Source URL, recorded on failure

    Returns:
        The per-route payload (mapping shape) or ``{"results": [...]}`` (flat shape)

    Raises:
        UnrecognizedResponseError: shape unknown or route not present
    """
    if isinstance(document, dict) and ROUTES_KEY in document:
        route_map = _merge_route_maps(document[ROUTES_KEY])
        if route_map is None:
            raise UnrecognizedResponseError(url, "Aggregate 'routes' field is not a route mapping")
        if route not in route_map:
            raise UnrecognizedResponseError(url, f"Route {route} not present in aggregate response")
        return route_map[route]

    if isinstance(document, list) and document:
        if not all(isinstance(record, dict) and _route_id(record) is not None for record in document):
            raise UnrecognizedResponseError(url, "Aggregate records do not all carry a route identifier")
        matches = [record for record in document if _route_id(record) == route]
        if not matches:
            raise UnrecognizedResponseError(url, f"Route {route} not present in aggregate response")
        return {RESULTS_KEY: matches}

    raise UnrecognizedResponseError(url, f"Unrecognized aggregate response shape ({type(document).__name__})")
