"""Error taxonomy for the transit fetch layer.

Per-candidate failures (``FetchError`` subclasses) are recorded by the
resolver and never surfaced directly. Callers only ever see a
``ValidationError`` or the terminal ``AllEndpointsFailedError``.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .endpoints import EndpointCandidate

BODY_PREVIEW_CHARS = 200


class TransitError(Exception):
    """Base class for all transit lookup errors."""


class ValidationError(TransitError):
    """Bad caller input. Never retried."""


class UnknownToolError(ValidationError):
    """Tool name does not map to any request kind."""

    def __init__(self, tool_name: str):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class FetchError(TransitError):
    """A single candidate attempt failed."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(message)


class TransportError(FetchError):
    """Connection, DNS or timeout failure."""


class HttpStatusError(FetchError):
    """Upstream answered with something other than 200."""

    def __init__(self, url: str, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(url, f"HTTP {status_code}: {body[:BODY_PREVIEW_CHARS]}")


class DecodeError(FetchError):
    """Response body is not valid JSON."""

    def __init__(self, url: str, reason: str, preview: str):
        self.preview = preview
        super().__init__(url, f"Failed to parse JSON: {reason}. Response: {preview}")


class UnrecognizedResponseError(FetchError):
    """An aggregate response could not be narrowed to the requested route."""


@dataclass(frozen=True)
class CandidateFailure:
    """One recorded failure in a fallback chain."""

    candidate: "EndpointCandidate"
    url: str
    error: FetchError

    def to_dict(self) -> dict:
        return {
            "candidate": self.candidate.label,
            "url": self.url,
            "error_type": type(self.error).__name__,
            "error": str(self.error),
        }


class AllEndpointsFailedError(TransitError):
    """Every candidate for a request was exhausted."""

    def __init__(self, kind: str, route: str | None, failures: list[CandidateFailure]):
        self.kind = kind
        self.route = route
        self.failures = list(failures)
        target = f"{kind} for route {route}" if route else str(kind)
        details = "; ".join(f"{f.candidate.label}: {f.error}" for f in self.failures)
        super().__init__(
            f"All {len(self.failures)} endpoints failed for {target}. {details}".rstrip()
        )
