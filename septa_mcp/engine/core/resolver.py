"""Endpoint resolver: ordered fallback across candidate endpoints.

For a request descriptor the resolver walks the candidate list for its
kind strictly in order. The first usable response wins. Every failure is
recorded, and if the list is exhausted the caller gets a single
``AllEndpointsFailedError`` holding all of them in attempt order.
"""

import logging
from dataclasses import dataclass
from typing import Any

from ...models.enums import RequestKind, ResponseShape
from .endpoints import DEFAULT_CANDIDATES, CandidateTable
from .errors import AllEndpointsFailedError, CandidateFailure, FetchError, ValidationError
from .fetcher import ResilientFetcher
from .normalize import filter_aggregate
from .observer import ObserverFunc, logging_observer

logger = logging.getLogger(__name__)

ROUTE_KINDS = frozenset({RequestKind.LOCATIONS, RequestKind.DETOURS})


@dataclass(frozen=True)
class RequestDescriptor:
    """A logical data request."""

    kind: RequestKind
    route: str | None = None


def validate_descriptor(request: RequestDescriptor) -> str | None:
    """Return the normalized route for ``request``.

    Raises:
        ValidationError: route missing for a kind that needs one
    """
    if request.kind not in ROUTE_KINDS:
        return None
    route = request.route.strip() if isinstance(request.route, str) else ""
    if not route:
        raise ValidationError("route parameter is required")
    return route


class EndpointResolver:
    """Resolve request descriptors against the provider's endpoints."""

    def __init__(
        self,
        fetcher: ResilientFetcher,
        candidates: CandidateTable | None = None,
        observer: ObserverFunc | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._candidates = candidates if candidates is not None else DEFAULT_CANDIDATES
        self._observe = observer or logging_observer(logger)

    @property
    def fetcher(self) -> ResilientFetcher:
        return self._fetcher

    def candidates_for(self, kind: RequestKind) -> tuple:
        return self._candidates[kind]

    async def resolve(self, request: RequestDescriptor) -> Any:
        """Fetch the document for ``request`` from the first usable candidate.

        Raises:
            ValidationError: route missing (no network call is made)
            AllEndpointsFailedError: every candidate failed
        """
        kind = RequestKind(request.kind)
        route = validate_descriptor(request)
        candidates = self._candidates[kind]
        failures: list[CandidateFailure] = []

        self._observe(logging.INFO, "resolve.start", kind=kind.value, route=route)

        for index, candidate in enumerate(candidates):
            url = candidate.build_url(route)
            try:
                document = await self._fetcher.fetch(url)
                if candidate.shape is ResponseShape.AGGREGATE:
                    document = filter_aggregate(document, route, url)
            except FetchError as e:
                failures.append(CandidateFailure(candidate, url, e))
                self._observe(
                    logging.WARNING,
                    "resolve.candidate_failed",
                    kind=kind.value,
                    route=route,
                    candidate=candidate.label,
                    attempt=index + 1,
                    error=str(e),
                )
                continue

            self._observe(
                logging.INFO,
                "resolve.succeeded",
                kind=kind.value,
                route=route,
                candidate=candidate.label,
                attempt=index + 1,
            )
            return document

        self._observe(
            logging.ERROR,
            "resolve.exhausted",
            kind=kind.value,
            route=route,
            attempts=len(failures),
        )
        raise AllEndpointsFailedError(kind.value, route, failures)
