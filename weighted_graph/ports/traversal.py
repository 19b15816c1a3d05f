"""Traversal port - visitor-driven graph walks."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from .graph import GraphView

# Called once per newly visited vertex with its name and payload.
VisitCallback = Callable[[str, Optional[Any]], None]


class TraversalPort(Protocol):
    """Port for walking the graph from a start vertex.

    Implementations:
    - adapters/traversal/breadth_first.py (BreadthFirstTraversal)
    - adapters/traversal/depth_first.py (DepthFirstTraversal)
    """

    def traverse(self, graph: GraphView, start: str, visit: VisitCallback) -> None:
        """Visit every vertex reachable from ``start`` exactly once.

        Raises:
            VertexNotFoundError: If ``start`` has no adjacency bucket.
        """
        ...
