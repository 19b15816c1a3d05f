"""Ports layer - Abstract interfaces (Protocols) for the graph engines.

Ports define the contracts between the storage model and the algorithm
adapters, so engines can be swapped or faked in tests.
"""

from .graph import GraphView, RouteSolverPort
from .traversal import TraversalPort, VisitCallback

__all__ = [
    "GraphView",
    "RouteSolverPort",
    "TraversalPort",
    "VisitCallback",
]
