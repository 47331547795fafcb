import pytest

from hkbus_stops.dataset import Dataset
from hkbus_stops.route import Route
from hkbus_stops.stop import Stop


def test_parses_stops_and_routes(dataset):
    stop = dataset.stops["A"]
    assert (stop.lat, stop.lng) == (22.3001, 114.1)
    route = dataset.routes["1+1+STAR FERRY+CHUK YUEN"]
    assert route.stops["kmb"] == ("A", "C", "D", "E", "F")
    assert route.service_type == "1"
    assert route.extra == {"fares": ["6.4"]}


def test_stop_without_location(dataset):
    assert not dataset.stops["F"].has_location


def test_malformed_location_is_treated_as_missing():
    stop = Stop.from_record("X", {"location": {"lat": "nan", "lng": 114.1}})
    assert not stop.has_location
    stop = Stop.from_record("Y", {"location": {"lat": None}})
    assert not stop.has_location


@pytest.mark.parametrize("payload", [[], {"stopList": {}}, {"stopList": [], "routeList": {}}])
def test_rejects_non_dataset_payloads(payload):
    with pytest.raises(ValueError):
        Dataset.from_payload(payload)


def test_from_json_rejects_invalid_text():
    with pytest.raises(ValueError):
        Dataset.from_json("{oops")


def test_payload_survives_reserialization(dataset, sample_payload):
    again = Dataset.from_payload(dataset.to_payload())
    assert again.stops == dataset.stops
    assert again.routes.keys() == dataset.routes.keys()
    assert again.extra == {"holidays": ["20250101"]}
    assert "location" not in again.to_payload()["stopList"]["F"]


@pytest.mark.parametrize("co", [5, "kmb", {"kmb": 1}])
def test_malformed_company_list_is_dropped(co):
    route = Route.from_record("R", {"route": "1", "co": co, "stops": {"kmb": ["A"]}})
    assert route.companies == ()
    assert route.stops == {"kmb": ("A",)}
