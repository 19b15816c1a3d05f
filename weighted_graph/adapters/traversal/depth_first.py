"""Depth-first traversal with a LIFO frontier."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Literal, Set

from ...config import SearchConfig, get_config
from ...domain.errors import VertexNotFoundError
from ...ports.graph import GraphView
from ...ports.traversal import VisitCallback


@dataclass
class DepthFirstTraversal:
    """Traversal engine implementing TraversalPort for DFS.

    Neighbors of a popped vertex are pushed in adjacency insertion order,
    or in name order when ``dfs_neighbor_order`` is "lexicographic". The
    last pushed neighbor is explored first.

    Attributes:
        config: Search configuration (neighbor push order)
    """

    config: SearchConfig = field(default_factory=lambda: get_config().search)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def neighbor_order(self) -> Literal["insertion", "lexicographic"]:
        return self.config.dfs_neighbor_order

    def traverse(self, graph: GraphView, start: str, visit: VisitCallback) -> None:
        """Visit every vertex reachable from ``start``.

        Raises:
            VertexNotFoundError: If ``start`` has no adjacency bucket.
        """
        if not graph.has_adjacency(start):
            raise VertexNotFoundError(
                f"Vertex does not exist: {start}",
                vertex=start,
            )

        self._logger.debug(
            "Depth-first search",
            extra={"start": start, "neighbor_order": self.neighbor_order},
        )

        stack: List[str] = [start]
        visited: Set[str] = set()

        while stack:
            current = stack.pop()
            if current in visited:
                continue

            visited.add(current)
            visit(current, graph.get_payload(current))

            for neighbor in self._ordered(graph.get_adjacent_vertices(current)):
                if neighbor not in visited:
                    stack.append(neighbor)

        self._logger.debug(
            "Depth-first search done",
            extra={"start": start, "visited": len(visited)},
        )

    def _ordered(self, neighbors: Iterable[str]) -> Iterable[str]:
        if self.neighbor_order == "lexicographic":
            return sorted(neighbors)
        return neighbors
