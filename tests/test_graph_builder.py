"""Mini README: Tests for graph construction from flat records.

Structure:
    * symmetry and parallel edges - every route yields two directed entries.
    * missing airports - routes with unknown endpoints are dropped and reported.
    * lookups - unknown identifiers behave as airports without edges.
"""

from __future__ import annotations

import pytest

from skyroutes.routing import Route, build_graph

from conftest import make_airport


def test_every_route_is_symmetric(sample_graph, sample_routes) -> None:
    for route in sample_routes:
        assert (route.destination_id, route.distance) in sample_graph.neighbours(route.origin_id)
        assert (route.origin_id, route.distance) in sample_graph.neighbours(route.destination_id)


def test_adjacency_keeps_route_order(sample_graph) -> None:
    assert sample_graph.neighbours("A") == [("B", 100.0), ("C", 200.0)]
    assert sample_graph.neighbours("C") == [("B", 50.0), ("A", 200.0), ("D", 30.0)]
    assert sample_graph.route_count == 4


def test_parallel_routes_are_preserved() -> None:
    graph = build_graph(
        [make_airport("A"), make_airport("B")],
        [Route("A", "B", 120.0), Route("B", "A", 90.0)],
    )
    assert graph.neighbours("A") == [("B", 120.0), ("B", 90.0)]
    assert graph.neighbours("B") == [("A", 120.0), ("A", 90.0)]
    assert graph.edge_weight("A", "B") == 90.0


def test_route_with_unknown_airport_is_dropped(caplog) -> None:
    airports = [make_airport("A"), make_airport("B")]
    routes = [Route("A", "B", 10.0), Route("A", "ZZZ", 5.0), Route("YYY", "XXX", 7.0)]

    with caplog.at_level("WARNING"):
        graph = build_graph(airports, routes)

    assert graph.route_count == 1
    assert graph.neighbours("A") == [("B", 10.0)]
    assert [report.route_position for report in graph.missing_airports] == [1, 2]
    assert graph.missing_airports[0].missing_ids == ("ZZZ",)
    assert graph.missing_airports[1].missing_ids == ("YYY", "XXX")
    assert "ZZZ" in caplog.text


def test_airport_without_routes_has_no_edges() -> None:
    graph = build_graph([make_airport("A"), make_airport("LONELY")], [])
    assert "LONELY" in graph
    assert graph.neighbours("LONELY") == []


def test_unknown_identifier_lookups() -> None:
    graph = build_graph([make_airport("A")], [])
    assert "NOPE" not in graph
    assert graph.neighbours("NOPE") == []
    assert graph.edge_weight("A", "NOPE") is None
    with pytest.raises(KeyError):
        graph.airport("NOPE")


def test_duplicate_airport_keeps_first_record() -> None:
    graph = build_graph(
        [make_airport("A", 1.0, 1.0), make_airport("A", 50.0, 50.0), make_airport("B")],
        [Route("A", "B", 1.0)],
    )
    assert len(graph) == 2
    assert graph.coordinates("A") == (1.0, 1.0)


def test_dense_indices_follow_input_order(sample_graph) -> None:
    assert [sample_graph.identifier_at(index) for index in range(len(sample_graph))] == ["A", "B", "C", "D"]
    assert sample_graph.index_of("C") == 2
    assert sample_graph.index_of("missing") is None
