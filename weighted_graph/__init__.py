"""Directed weighted graph library.

A graph stores a payload per vertex name and integer-cost directed
edges. It supports breadth-first and depth-first traversal with a visit
callback, and single-pair shortest paths via Dijkstra's algorithm.

Example:
    >>> from weighted_graph import Graph
    >>> graph = Graph()
    >>> graph.add_vertex("A", "data1")
    >>> graph.add_vertex("B", "data2")
    >>> graph.add_directed_edge("A", "B", 4)
    >>> graph.dijkstra("A", "B").as_legacy()
    (4, ['A', 'B'])
"""

__version__ = "0.1.0"

from .adapters.traversal import VisitRecorder
from .domain.errors import (
    DuplicateVertexError,
    EdgeNotFoundError,
    GraphError,
    InvalidVertexError,
    NoPathError,
    VertexNotFoundError,
)
from .domain.models import Edge, PathFound, SearchOrder, ShortestPathResult, Unreachable
from .graph import Graph

__all__ = [
    "Graph",
    "VisitRecorder",
    # Results
    "Edge",
    "PathFound",
    "Unreachable",
    "ShortestPathResult",
    "SearchOrder",
    # Errors
    "GraphError",
    "DuplicateVertexError",
    "InvalidVertexError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "NoPathError",
]
