"""Shared fixtures for the weighted graph tests."""

from __future__ import annotations

import pytest

from weighted_graph import Graph
from weighted_graph.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Make every test load configuration from its own environment."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def triangle() -> Graph[str]:
    """A -> B (1), B -> C (2), A -> C (5)."""
    graph: Graph[str] = Graph()
    for name in ("A", "B", "C"):
        graph.add_vertex(name, f"data-{name}")
    graph.add_directed_edge("A", "B", 1)
    graph.add_directed_edge("B", "C", 2)
    graph.add_directed_edge("A", "C", 5)
    return graph


@pytest.fixture
def road_map() -> Graph[int]:
    """Five-vertex network where the cheapest A -> E route has four hops."""
    graph: Graph[int] = Graph()
    for index, name in enumerate("ABCDE"):
        graph.add_vertex(name, index)
    graph.add_directed_edge("A", "B", 4)
    graph.add_directed_edge("A", "C", 2)
    graph.add_directed_edge("C", "B", 1)
    graph.add_directed_edge("B", "D", 5)
    graph.add_directed_edge("C", "D", 8)
    graph.add_directed_edge("C", "E", 10)
    graph.add_directed_edge("D", "E", 2)
    return graph
