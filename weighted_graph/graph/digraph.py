"""Directed weighted graph with per-vertex payloads.

Two maps back the graph: an adjacency map (source -> {destination: cost})
and a payload map (name -> data). The payload map alone decides whether
a vertex exists; an edge may name a destination that has no payload.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Generic, Iterator, Optional, Set, Tuple, TypeVar

from ..adapters.routing import DijkstraRouteSolver, reachable_from
from ..adapters.traversal import BreadthFirstTraversal, DepthFirstTraversal
from ..config import GraphConfig, SearchConfig, get_config
from ..domain.errors import (
    DuplicateVertexError,
    EdgeNotFoundError,
    InvalidVertexError,
    NoPathError,
    VertexNotFoundError,
)
from ..domain.models import Edge, PathFound, SearchOrder, ShortestPathResult, Unreachable
from ..ports.graph import RouteSolverPort
from ..ports.traversal import TraversalPort, VisitCallback
from .render import render_graph

E = TypeVar("E")


@dataclass(eq=False)
class Graph(Generic[E]):
    """Directed weighted graph keyed by vertex name.

    The graph owns its maps; every getter hands out copies. It is not
    synchronized, so callers sharing one across threads must serialize
    access themselves.

    Attributes:
        config: Storage configuration (edge validation policy)
        search: Traversal configuration (DFS neighbor order)
        route_solver: Engine used by dijkstra() and shortest_path()

    Example:
        graph = Graph[str]()
        graph.add_vertex("A", "data1")
        graph.add_vertex("B", "data2")
        graph.add_directed_edge("A", "B", 4)
        print(graph.dijkstra("A", "B"))
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    search: SearchConfig = field(default_factory=lambda: get_config().search)
    route_solver: RouteSolverPort = field(default_factory=DijkstraRouteSolver)

    _adjacency: Dict[str, Dict[str, int]] = field(default_factory=dict, init=False, repr=False)
    _data: Dict[str, E] = field(default_factory=dict, init=False, repr=False)
    _traversals: Dict[SearchOrder, TraversalPort] = field(init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)
        self._traversals = {
            SearchOrder.BREADTH_FIRST: BreadthFirstTraversal(),
            SearchOrder.DEPTH_FIRST: DepthFirstTraversal(config=self.search),
        }

    # ---------- mutation ----------

    def add_vertex(self, name: str, data: E) -> None:
        """Register ``name`` with its payload.

        Raises:
            DuplicateVertexError: If ``name`` already has a payload entry.
        """
        if name in self._data:
            raise DuplicateVertexError(
                f"Vertex already exists: {name}",
                vertex=name,
            )
        self._data[name] = data
        self._logger.debug("Vertex added", extra={"vertex": name})

    def add_directed_edge(self, source: str, destination: str, cost: int) -> None:
        """Add or overwrite the edge ``source -> destination``.

        Which edges are accepted depends on ``config.edge_validation``.
        Under the default "legacy" policy only an unregistered source
        pointing at a registered destination is rejected.

        Raises:
            InvalidVertexError: If the validation policy rejects the edge.
        """
        self._check_edge(source, destination)

        bucket = self._adjacency.setdefault(source, {})
        previous = bucket.get(destination)
        bucket[destination] = cost

        self._logger.debug(
            "Edge overwritten" if previous is not None else "Edge added",
            extra={"source": source, "destination": destination, "cost": cost},
        )

    def _check_edge(self, source: str, destination: str) -> None:
        policy = self.config.edge_validation
        has_source = source in self._data
        has_destination = destination in self._data

        if policy == "legacy":
            rejected = not has_source and has_destination
        elif policy == "strict":
            rejected = not (has_source and has_destination)
        else:
            rejected = False

        if rejected:
            raise InvalidVertexError(
                f"Cannot add edge {source} -> {destination}: "
                f"vertex not registered ({policy} validation)",
                source=source,
                destination=destination,
            )

    # ---------- queries ----------

    def get_data(self, name: str) -> E:
        """Return the payload stored for ``name``.

        Raises:
            VertexNotFoundError: If ``name`` has no payload entry.
        """
        if name not in self._data:
            raise VertexNotFoundError(
                f"Vertex does not exist: {name}",
                vertex=name,
            )
        return self._data[name]

    def get_adjacent_vertices(self, name: str) -> Dict[str, int]:
        """Return a copy of the destination -> cost mapping of ``name``.

        A vertex without outgoing edges yields an empty dict.
        """
        return dict(self._adjacency.get(name, {}))

    def get_cost(self, source: str, destination: str) -> int:
        """Return the cost of the edge ``source -> destination``.

        Raises:
            EdgeNotFoundError: If no such edge is stored.
        """
        bucket = self._adjacency.get(source)
        if bucket is None or destination not in bucket:
            raise EdgeNotFoundError(
                f"Edge does not exist: {source} -> {destination}",
                source=source,
                destination=destination,
            )
        return bucket[destination]

    def get_vertices(self) -> Set[str]:
        """Return the names of all vertices with a payload entry."""
        return set(self._data)

    def has_vertex(self, name: str) -> bool:
        return name in self._data

    def has_edge(self, source: str, destination: str) -> bool:
        return destination in self._adjacency.get(source, {})

    def edges(self) -> Tuple[Edge, ...]:
        """Return every stored edge, sorted by source then destination."""
        return tuple(
            Edge(source=source, destination=destination, cost=bucket[destination])
            for source, bucket in sorted(self._adjacency.items())
            for destination in sorted(bucket)
        )

    # ---------- GraphView ----------

    def has_adjacency(self, name: str) -> bool:
        return name in self._adjacency

    def get_payload(self, name: str) -> Optional[E]:
        return self._data.get(name)

    # ---------- algorithms ----------

    def traverse(
        self,
        start: str,
        visit: VisitCallback,
        order: SearchOrder = SearchOrder.BREADTH_FIRST,
    ) -> None:
        """Walk the graph from ``start``, calling ``visit(name, payload)``.

        Raises:
            VertexNotFoundError: If ``start`` has no adjacency bucket.
        """
        self._traversals[order].traverse(self, start, visit)

    def breadth_first_search(self, start: str, visit: VisitCallback) -> None:
        """Breadth-first walk popping the smallest pending name first."""
        self.traverse(start, visit, SearchOrder.BREADTH_FIRST)

    def depth_first_search(self, start: str, visit: VisitCallback) -> None:
        self.traverse(start, visit, SearchOrder.DEPTH_FIRST)

    def dijkstra(self, start: str, end: str) -> ShortestPathResult:
        """Compute the cheapest path from ``start`` to ``end``.

        Returns:
            PathFound, or Unreachable when no path exists. Use
            ``result.as_legacy()`` for the ``(cost, path)`` pair.
        """
        return self.route_solver.solve(self, start, end)

    def shortest_path(self, start: str, end: str) -> PathFound:
        """Like dijkstra(), but raises instead of returning Unreachable.

        Raises:
            NoPathError: If no path exists.
        """
        result = self.dijkstra(start, end)
        if isinstance(result, Unreachable):
            raise NoPathError(
                f"No path from {start} to {end}",
                start=start,
                end=end,
            )
        return result

    def reachable_vertices(self, start: str) -> FrozenSet[str]:
        """Return ``start`` plus every vertex reachable from it."""
        return reachable_from(self, start)

    # ---------- rendering ----------

    def render(self) -> str:
        return render_graph(self._data.keys(), self.get_adjacent_vertices)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, name: object) -> bool:
        return name in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._data))
