import pytest

from septa_mcp.engine.core.endpoints import (
    DEFAULT_CANDIDATES,
    EndpointCandidate,
    build_candidate_table,
)
from septa_mcp.models.enums import RequestKind, ResponseShape


def test_locations_priority_order():
    candidates = DEFAULT_CANDIDATES[RequestKind.LOCATIONS]
    assert [c.label for c in candidates] == [
        "transitview-https",
        "transitview-http",
        "transitview-legacy",
        "transitview-all",
    ]
    assert [c.scheme for c in candidates[:2]] == ["https", "http"]
    assert [c.shape for c in candidates] == [ResponseShape.PER_ROUTE] * 3 + [ResponseShape.AGGREGATE]


@pytest.mark.parametrize("kind", [RequestKind.DETOURS, RequestKind.ALERTS])
def test_detours_and_alerts_try_https_then_http(kind):
    assert [c.scheme for c in DEFAULT_CANDIDATES[kind]] == ["https", "http"]


def test_alerts_take_no_route():
    for candidate in DEFAULT_CANDIDATES[RequestKind.ALERTS]:
        assert not candidate.needs_route
        assert candidate.build_url("23") == candidate.url_template


def test_route_is_percent_encoded():
    candidate = DEFAULT_CANDIDATES[RequestKind.DETOURS][0]
    assert (
        candidate.build_url("BSL/MFL &1")
        == "https://www3.septa.org/api/BusDetours/index.php?route=BSL%2FMFL%20%261"
    )


def test_route_required_for_route_templates():
    candidate = EndpointCandidate("x", "https://h/p?route={route}")
    with pytest.raises(ValueError):
        candidate.build_url(None)


def test_table_uses_configured_host():
    table = build_candidate_table("septa.test")
    urls = [c.url_template for candidates in table.values() for c in candidates]
    assert all("://septa.test/" in url for url in urls)
