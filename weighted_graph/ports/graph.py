"""Graph ports - Abstractions the algorithms run against.

GraphView is the read-only surface of the storage model. The engines
only ever see this view, never the backing maps.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AbstractSet, Any, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from ..domain.models import ShortestPathResult


class GraphView(Protocol):
    """Read-only view of a directed weighted graph.

    Implementation: graph/digraph.py (Graph)
    """

    def has_adjacency(self, name: str) -> bool:
        """Return True if ``name`` owns an adjacency bucket."""
        ...

    def get_adjacent_vertices(self, name: str) -> Mapping[str, int]:
        """Return the destination -> cost mapping for ``name``.

        Returns an empty mapping when ``name`` has no outgoing edges.
        """
        ...

    def get_payload(self, name: str) -> Optional[Any]:
        """Return the payload of ``name``, or None if it has none."""
        ...

    def get_vertices(self) -> AbstractSet[str]:
        """Return the names of all vertices with a payload entry."""
        ...


class RouteSolverPort(Protocol):
    """Port for single-pair shortest path computation.

    Implementation: adapters/routing/dijkstra_solver.py
    """

    def solve(self, graph: GraphView, start: str, end: str) -> ShortestPathResult:
        """Find the cheapest path from ``start`` to ``end``.

        Args:
            graph: The graph to search.
            start: Start vertex name.
            end: End vertex name.

        Returns:
            PathFound with cost and path, or Unreachable.
        """
        ...
