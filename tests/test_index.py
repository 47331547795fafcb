import pytest

from hkbus_stops.dataset import Dataset
from hkbus_stops.index import build_index

from conftest import R1, R2, R3, R4, R5, ids


def test_flattened_stops_keep_payload_order(index):
    assert ids(index.stops) == ["A", "B", "C", "D", "E", "F"]


def test_stops_shared_with_dataset(index, dataset):
    assert index.stops[0] is dataset.stops["A"]


def test_stop_to_routes_order_and_dedup(index):
    assert index.stop_to_routes["A"] == (R1, R4)
    assert index.stop_to_routes["E"] == (R1, R2, R4)
    assert index.stop_to_routes["D"] == (R1, R3)


def test_dangling_stop_ids_are_indexed(index):
    assert index.stop_to_routes["Z"] == (R2,)


def test_stop_to_operators(index):
    assert index.stop_to_operators["A"] == frozenset({"kmb", "ctb"})
    assert index.stop_to_operators["B"] == frozenset({"ctb"})
    assert index.stop_to_operators["D"] == frozenset({"kmb", "nlb"})


def test_routes_without_stops_are_skipped(index):
    assert all(R5 not in route_ids for route_ids in index.stop_to_routes.values())


def test_index_is_read_only(index):
    with pytest.raises(TypeError):
        index.stop_to_routes["A"] = ()
    with pytest.raises(AttributeError):
        index.stop_to_operators["A"].add("nlb")


def test_rebuild_is_idempotent(sample_payload):
    first = build_index(Dataset.from_payload(sample_payload))
    second = build_index(Dataset.from_payload(sample_payload))
    assert dict(first.stop_to_routes) == dict(second.stop_to_routes)
    assert dict(first.stop_to_operators) == dict(second.stop_to_operators)
    assert first.stops == second.stops
