"""Immutable domain models for the weighted graph.

All models are frozen dataclasses with slots. Shortest-path results are
a tagged pair of types: PathFound when a route exists, Unreachable when
it does not.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple, Union

# Legacy sentinel pair returned for an unreachable request.
NO_PATH_COST = -1
NO_PATH_MARKER = "None"


class SearchOrder(Enum):
    """Traversal strategy used by Graph.traverse."""

    BREADTH_FIRST = auto()
    DEPTH_FIRST = auto()


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed weighted edge.

    Attributes:
        source: Name of the vertex the edge leaves
        destination: Name of the vertex the edge enters
        cost: Integer weight of the edge
    """

    source: str
    destination: str
    cost: int


@dataclass(frozen=True, slots=True)
class PathFound:
    """Shortest path between two vertices.

    Attributes:
        cost: Sum of edge costs along the path
        path: Vertex names from start to end, both inclusive
    """

    cost: int
    path: Tuple[str, ...]

    @property
    def is_found(self) -> bool:
        return True

    @property
    def start(self) -> str:
        return self.path[0]

    @property
    def end(self) -> str:
        return self.path[-1]

    @property
    def num_vertices(self) -> int:
        """Return the number of vertices on the path."""
        return len(self.path)

    def as_legacy(self) -> Tuple[int, List[str]]:
        """Return the ``(cost, path)`` pair used by older callers."""
        return self.cost, list(self.path)


@dataclass(frozen=True, slots=True)
class Unreachable:
    """No path connects ``start`` to ``end``."""

    start: str
    end: str

    @property
    def is_found(self) -> bool:
        return False

    def as_legacy(self) -> Tuple[int, List[str]]:
        """Return the ``(-1, ["None"])`` sentinel used by older callers."""
        return NO_PATH_COST, [NO_PATH_MARKER]


ShortestPathResult = Union[PathFound, Unreachable]
