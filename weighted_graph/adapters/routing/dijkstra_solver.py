"""Dijkstra Route Solver adapter.

The search runs in two phases. A breadth-style sweep first collects the
vertices reachable from the start; if the end is not among them the
request is answered as Unreachable without relaxing anything. Otherwise
a heap-ordered relaxation computes distances and predecessors, and the
path is rebuilt by walking predecessors back from the end.

Heap entries are ``(distance, name)`` tuples, so equal distances are
settled in name order. Names that appear only as edge destinations have
no payload entry and are not vertices: they can make an end look
reachable, but never receive a predecessor, so such a request ends up
Unreachable.
"""

from __future__ import annotations

import heapq
import logging
import math
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Dict, FrozenSet, List, Set, Tuple, Union

from ...domain.models import PathFound, ShortestPathResult, Unreachable
from ...ports.graph import GraphView

# Integer path cost, or math.inf while a vertex is still unreached.
Distance = Union[int, float]


def reachable_from(graph: GraphView, start: str) -> FrozenSet[str]:
    """Collect ``start`` and every vertex reachable from it."""
    seen: Set[str] = {start}
    queue: Deque[str] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in graph.get_adjacent_vertices(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    return frozenset(seen)


@dataclass
class DijkstraRouteSolver:
    """Route solver using Dijkstra's shortest path algorithm.

    This adapter implements RouteSolverPort.
    """

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def solve(self, graph: GraphView, start: str, end: str) -> ShortestPathResult:
        """Find the shortest path between two vertices.

        Args:
            graph: The graph to search.
            start: Start vertex name.
            end: End vertex name.

        Returns:
            PathFound with total cost and path, or Unreachable.
        """
        if start == end:
            return PathFound(cost=0, path=(start,))

        self._logger.debug("Solving route", extra={"start": start, "end": end})

        reachable = reachable_from(graph, start)
        if start not in reachable or end not in reachable:
            self._logger.warning(
                "No route found",
                extra={"start": start, "end": end},
            )
            return Unreachable(start=start, end=end)

        distances, previous = self._relax(graph, start, end)
        path = self._rebuild_path(previous, start, end)

        if not path:
            self._logger.warning(
                "End vertex has no predecessor",
                extra={"start": start, "end": end},
            )
            return Unreachable(start=start, end=end)

        cost = int(distances[end])
        self._logger.info(
            "Route found",
            extra={"start": start, "end": end, "stops": len(path), "cost": cost},
        )
        return PathFound(cost=cost, path=tuple(path))

    def _relax(
        self, graph: GraphView, start: str, end: str
    ) -> Tuple[Dict[str, Distance], Dict[str, str]]:
        """Settle vertices cheapest-first until ``end`` is settled.

        Only registered vertices (plus ``start``) carry a distance; an edge
        into a name without a payload entry is never relaxed.
        """
        distances: Dict[str, Distance] = dict.fromkeys(graph.get_vertices(), math.inf)
        distances[start] = 0
        previous: Dict[str, str] = {}

        frontier: List[Tuple[Distance, str]] = [(0, start)]
        settled: Set[str] = set()

        while frontier:
            distance, current = heapq.heappop(frontier)
            if current in settled or distance > distances[current]:
                continue
            settled.add(current)
            if current == end:
                break

            for neighbor, cost in graph.get_adjacent_vertices(current).items():
                if neighbor not in distances or neighbor in settled:
                    continue
                candidate = distance + cost
                if candidate < distances[neighbor]:
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    heapq.heappush(frontier, (candidate, neighbor))

        return distances, previous

    @staticmethod
    def _rebuild_path(previous: Dict[str, str], start: str, end: str) -> List[str]:
        """Walk predecessors from ``end`` back to ``start``.

        Returns an empty list when the chain is broken or loops before
        reaching ``start``.
        """
        path: List[str] = [end]
        seen: Set[str] = {end}
        current = end
        while current != start:
            if current not in previous:
                return []
            current = previous[current]
            if current in seen:
                return []
            seen.add(current)
            path.append(current)

        path.reverse()
        return path
