"""Routing adapters - Implementations of RouteSolverPort.

Available implementations:
- DijkstraRouteSolver: single-pair shortest path with non-negative costs
"""

from .dijkstra_solver import DijkstraRouteSolver, reachable_from

__all__ = ["DijkstraRouteSolver", "reachable_from"]
