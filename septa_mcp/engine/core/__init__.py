"""Engine core module.

This module contains the endpoint-resilience fetch layer:
- Error taxonomy for candidate and terminal failures
- Endpoint candidate tables
- Resilient fetcher (single GET + JSON decode)
- Aggregate response normalization
- Endpoint resolver (ordered fallback chain)
- Observability hook
"""

from .endpoints import (
    DEFAULT_CANDIDATES,
    DEFAULT_PROVIDER_HOST,
    CandidateTable,
    EndpointCandidate,
    build_candidate_table,
)
from .errors import (
    AllEndpointsFailedError,
    CandidateFailure,
    DecodeError,
    FetchError,
    HttpStatusError,
    TransitError,
    TransportError,
    UnknownToolError,
    UnrecognizedResponseError,
    ValidationError,
)
from .fetcher import ResilientFetcher
from .normalize import filter_aggregate
from .observer import ObserverFunc, logging_observer
from .resolver import EndpointResolver, RequestDescriptor, validate_descriptor

__all__ = [
    # Endpoints
    "CandidateTable",
    "EndpointCandidate",
    "build_candidate_table",
    "DEFAULT_CANDIDATES",
    "DEFAULT_PROVIDER_HOST",
    # Errors
    "TransitError",
    "ValidationError",
    "UnknownToolError",
    "FetchError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "UnrecognizedResponseError",
    "CandidateFailure",
    "AllEndpointsFailedError",
    # Fetch layer
    "ResilientFetcher",
    "EndpointResolver",
    "RequestDescriptor",
    "validate_descriptor",
    "filter_aggregate",
    # Observability
    "ObserverFunc",
    "logging_observer",
]
