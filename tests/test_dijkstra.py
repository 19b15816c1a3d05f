"""Tests for the shortest-path engine."""

from __future__ import annotations

import logging

import pytest

from weighted_graph import Graph, NoPathError, PathFound, Unreachable
from weighted_graph.adapters.routing import DijkstraRouteSolver, reachable_from
from weighted_graph.config import GraphConfig


def test_prefers_cheaper_indirect_route(triangle):
    result = triangle.dijkstra("A", "C")

    assert result == PathFound(cost=3, path=("A", "B", "C"))
    assert result.as_legacy() == (3, ["A", "B", "C"])


def test_longer_network(road_map):
    result = road_map.dijkstra("A", "E")

    assert result.is_found
    assert result.cost == 10
    assert result.path == ("A", "C", "B", "D", "E")
    assert (result.start, result.end, result.num_vertices) == ("A", "E", 5)


def test_same_vertex_short_circuits(triangle):
    assert triangle.dijkstra("B", "B") == PathFound(cost=0, path=("B",))
    assert triangle.dijkstra("B", "B").as_legacy() == (0, ["B"])


def test_disconnected_pair_is_unreachable():
    graph = Graph()
    graph.add_vertex("A", 1)
    graph.add_vertex("B", 2)
    graph.add_directed_edge("A", "A2", 1)

    result = graph.dijkstra("A", "B")

    assert result == Unreachable(start="A", end="B")
    assert not result.is_found
    assert result.as_legacy() == (-1, ["None"])


def test_edges_are_directed(triangle):
    assert isinstance(triangle.dijkstra("C", "A"), Unreachable)


def test_unknown_start_is_unreachable(triangle):
    assert isinstance(triangle.dijkstra("nowhere", "A"), Unreachable)


def test_ties_settle_in_name_order():
    graph = Graph()
    for name in "ABCD":
        graph.add_vertex(name, None)
    graph.add_directed_edge("A", "C", 1)
    graph.add_directed_edge("A", "B", 1)
    graph.add_directed_edge("C", "D", 1)
    graph.add_directed_edge("B", "D", 1)

    assert graph.dijkstra("A", "D") == PathFound(cost=2, path=("A", "B", "D"))


def test_edges_through_unregistered_names_are_not_routed():
    graph = Graph(config=GraphConfig(edge_validation="permissive"))
    graph.add_vertex("A", 0)
    graph.add_vertex("B", 0)
    graph.add_directed_edge("A", "hub", 1)
    graph.add_directed_edge("hub", "B", 1)
    graph.add_directed_edge("A", "B", 5)

    assert graph.dijkstra("A", "B").as_legacy() == (5, ["A", "B"])


def test_unregistered_end_is_unreachable(caplog):
    graph = Graph()
    graph.add_vertex("A", 0)
    graph.add_directed_edge("A", "ghost", 4)

    with caplog.at_level(logging.WARNING, logger="weighted_graph"):
        result = graph.dijkstra("A", "ghost")

    assert result == Unreachable(start="A", end="ghost")
    assert result.as_legacy() == (-1, ["None"])
    assert "End vertex has no predecessor" in [r.getMessage() for r in caplog.records]
    with pytest.raises(NoPathError):
        graph.shortest_path("A", "ghost")


def test_shortest_path_raises_when_unreachable(triangle):
    assert triangle.shortest_path("A", "C").cost == 3

    with pytest.raises(NoPathError) as excinfo:
        triangle.shortest_path("C", "A")

    assert (excinfo.value.start, excinfo.value.end) == ("C", "A")


def test_reachable_vertices(road_map):
    road_map.add_vertex("island", 99)

    assert road_map.reachable_vertices("C") == frozenset("BCDE")
    assert road_map.reachable_vertices("island") == frozenset({"island"})
    assert reachable_from(road_map, "A") == frozenset("ABCDE")


def test_unreachable_logs_warning(triangle, caplog):
    with caplog.at_level(logging.WARNING, logger="weighted_graph"):
        triangle.dijkstra("C", "A")

    [record] = [r for r in caplog.records if r.getMessage() == "No route found"]
    assert (record.start, record.end) == ("C", "A")


def test_graph_delegates_to_injected_solver(triangle):
    class FixedSolver:
        def __init__(self):
            self.calls = []

        def solve(self, graph, start, end):
            self.calls.append((start, end))
            return Unreachable(start=start, end=end)

    solver = FixedSolver()
    graph = Graph(route_solver=solver)
    graph.add_vertex("A", 0)

    assert graph.dijkstra("A", "B") == Unreachable("A", "B")
    assert solver.calls == [("A", "B")]


class TestPathRebuild:
    """Predecessor walk guards."""

    def test_missing_predecessor_yields_empty_path(self):
        assert DijkstraRouteSolver._rebuild_path({}, "A", "B") == []

    def test_predecessor_loop_yields_empty_path(self):
        previous = {"B": "C", "C": "B"}
        assert DijkstraRouteSolver._rebuild_path(previous, "A", "B") == []

    def test_chain_is_reversed(self):
        previous = {"C": "B", "B": "A"}
        assert DijkstraRouteSolver._rebuild_path(previous, "A", "C") == ["A", "B", "C"]
