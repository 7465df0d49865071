"""Base infrastructure for tool handlers.

Each handler receives the tool arguments and a HandlerContext with the
shared resolver, and returns the JSON document for the tool result.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Coroutine

from ..core.errors import ValidationError

if TYPE_CHECKING:
    from ..core.resolver import EndpointResolver


@dataclass
class HandlerContext:
    """Context object passed to all handlers."""

    resolver: "EndpointResolver"


# Type alias for handler functions
HandlerFunc = Callable[
    [dict[str, Any], HandlerContext],
    Coroutine[Any, Any, Any],
]


def get_route_param(params: dict[str, Any]) -> str:
    """Read the ``route`` argument as a string.

    Integers are accepted since JSON clients often send ``23`` rather
    than ``"23"``.

    Raises:
        ValidationError: missing, empty, not encodable as UTF-8 or of an
            unsupported type
    """
    route = params.get("route")
    if isinstance(route, int) and not isinstance(route, bool):
        route = str(route)
    if not isinstance(route, str) or not route.strip():
        raise ValidationError("route parameter is required and must be a string")
    try:
        route.encode("utf-8")
    except UnicodeEncodeError:
        raise ValidationError("route parameter must be valid UTF-8 text") from None
    return route.strip()
