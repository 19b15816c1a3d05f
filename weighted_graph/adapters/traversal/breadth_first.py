"""Breadth-first traversal with a lexicographically ordered frontier.

The frontier is a min-heap of vertex names rather than a FIFO queue:
each step pops the alphabetically smallest pending name. Neighbors
discovered at the same time are therefore visited in name order, and
a name pushed more than once is skipped once it has been visited.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import List, Set

from ...domain.errors import VertexNotFoundError
from ...ports.graph import GraphView
from ...ports.traversal import VisitCallback


@dataclass
class BreadthFirstTraversal:
    """Traversal engine implementing TraversalPort for BFS."""

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def traverse(self, graph: GraphView, start: str, visit: VisitCallback) -> None:
        """Visit every vertex reachable from ``start``.

        Args:
            graph: The graph to walk.
            start: Start vertex name; must own an adjacency bucket.
            visit: Called as ``visit(name, payload)`` once per vertex.

        Raises:
            VertexNotFoundError: If ``start`` has no adjacency bucket.
        """
        if not graph.has_adjacency(start):
            raise VertexNotFoundError(
                f"Vertex does not exist: {start}",
                vertex=start,
            )

        self._logger.debug("Breadth-first search", extra={"start": start})

        frontier: List[str] = [start]
        visited: Set[str] = set()

        while frontier:
            current = heapq.heappop(frontier)
            if current in visited:
                continue

            visited.add(current)
            visit(current, graph.get_payload(current))

            for neighbor in graph.get_adjacent_vertices(current):
                if neighbor not in visited:
                    heapq.heappush(frontier, neighbor)

        self._logger.debug(
            "Breadth-first search done",
            extra={"start": start, "visited": len(visited)},
        )
