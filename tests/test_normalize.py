import pytest

from septa_mcp.engine.core.errors import UnrecognizedResponseError
from septa_mcp.engine.core.normalize import filter_aggregate


def test_route_mapping_yields_only_the_requested_payload():
    document = {"routes": {"23": {"bus": [{"VehicleID": "1"}]}, "45": {"bus": []}}}
    assert filter_aggregate(document, "23") == {"bus": [{"VehicleID": "1"}]}


def test_list_of_route_mappings_is_merged():
    document = {"routes": [{"23": [{"VehicleID": "1"}], "45": []}, {"G": [{"VehicleID": "9"}]}]}
    assert filter_aggregate(document, "G") == [{"VehicleID": "9"}]


def test_flat_records_are_filtered_and_wrapped():
    document = [
        {"route": "23", "VehicleID": "1"},
        {"route": "45", "VehicleID": "2"},
        {"route": "23", "VehicleID": "3"},
    ]
    assert filter_aggregate(document, "23") == {
        "results": [
            {"route": "23", "VehicleID": "1"},
            {"route": "23", "VehicleID": "3"},
        ]
    }


def test_flat_records_match_numeric_route_ids():
    document = [{"route_id": 23, "VehicleID": "1"}, {"route_id": 45, "VehicleID": "2"}]
    assert filter_aggregate(document, "23") == {"results": [{"route_id": 23, "VehicleID": "1"}]}


def test_missing_route_in_mapping_is_unusable():
    with pytest.raises(UnrecognizedResponseError, match="Route 99 not present"):
        filter_aggregate({"routes": {"23": {}}}, "99", "https://x/all")


def test_missing_route_in_flat_records_is_unusable():
    with pytest.raises(UnrecognizedResponseError, match="Route 99 not present"):
        filter_aggregate([{"route": "23"}], "99")


def test_records_without_route_ids_are_unusable():
    with pytest.raises(UnrecognizedResponseError):
        filter_aggregate([{"route": "23"}, {"VehicleID": "2"}], "23")


@pytest.mark.parametrize(
    "document",
    [
        {"bus": [{"route": "23"}]},
        {"routes": "23,45"},
        {"routes": []},
        [],
        "all routes",
        None,
    ],
)
def test_unknown_shapes_are_never_passed_through(document):
    with pytest.raises(UnrecognizedResponseError):
        filter_aggregate(document, "23")


def test_error_records_source_url():
    with pytest.raises(UnrecognizedResponseError) as exc_info:
        filter_aggregate({}, "23", "https://www3.septa.org/api/TransitViewAll/index.php")
    assert exc_info.value.url == "https://www3.septa.org/api/TransitViewAll/index.php"
