"""Endpoint candidate tables for the SEPTA API.

Each request kind maps to an ordered tuple of candidates. Order is
priority: the resolver tries them first to last and the first usable
response wins.
"""

from dataclasses import dataclass
from urllib.parse import quote

from ...models.enums import RequestKind, ResponseShape

DEFAULT_PROVIDER_HOST = "www3.septa.org"

ROUTE_PLACEHOLDER = "{route}"


@dataclass(frozen=True)
class EndpointCandidate:
    """One concrete upstream URL + transport to attempt."""

    label: str
    url_template: str
    shape: ResponseShape = ResponseShape.PER_ROUTE

    @property
    def scheme(self) -> str:
        return self.url_template.split("://", 1)[0]

    @property
    def needs_route(self) -> bool:
        return ROUTE_PLACEHOLDER in self.url_template

    def build_url(self, route: str | None = None) -> str:
        """Substitute the percent-encoded route into the template."""
        if not self.needs_route:
            return self.url_template
        if not route:
            raise ValueError(f"Candidate {self.label} requires a route")
        return self.url_template.replace(ROUTE_PLACEHOLDER, quote(route, safe=""))


CandidateTable = dict[RequestKind, tuple[EndpointCandidate, ...]]


def build_candidate_table(host: str = DEFAULT_PROVIDER_HOST) -> CandidateTable:
    """Build the ordered candidate lists for every request kind."""
    return {
        RequestKind.LOCATIONS: (
            EndpointCandidate(
                "transitview-https",
                f"https://{host}/api/TransitView/index.php?route={ROUTE_PLACEHOLDER}",
            ),
            EndpointCandidate(
                "transitview-http",
                f"http://{host}/api/TransitView/index.php?route={ROUTE_PLACEHOLDER}",
            ),
            EndpointCandidate(
                "transitview-legacy",
                f"https://{host}/TransitView/index.php?route={ROUTE_PLACEHOLDER}",
            ),
            EndpointCandidate(
                "transitview-all",
                f"https://{host}/api/TransitViewAll/index.php",
                ResponseShape.AGGREGATE,
            ),
        ),
        RequestKind.DETOURS: (
            EndpointCandidate(
                "busdetours-https",
                f"https://{host}/api/BusDetours/index.php?route={ROUTE_PLACEHOLDER}",
            ),
            EndpointCandidate(
                "busdetours-http",
                f"http://{host}/api/BusDetours/index.php?route={ROUTE_PLACEHOLDER}",
            ),
        ),
        RequestKind.ALERTS: (
            EndpointCandidate("alerts-https", f"https://{host}/api/Alerts/index.php"),
            EndpointCandidate("alerts-http", f"http://{host}/api/Alerts/index.php"),
        ),
    }


DEFAULT_CANDIDATES: CandidateTable = build_candidate_table()
