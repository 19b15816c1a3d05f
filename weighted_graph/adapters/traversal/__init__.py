"""Traversal adapters - Implementations of TraversalPort.

Available implementations:
- BreadthFirstTraversal: lexicographically ordered frontier
- DepthFirstTraversal: LIFO frontier
- VisitRecorder: callback that records visits in order
"""

from .breadth_first import BreadthFirstTraversal
from .depth_first import DepthFirstTraversal
from .recorder import VisitRecorder

__all__ = ["BreadthFirstTraversal", "DepthFirstTraversal", "VisitRecorder"]
