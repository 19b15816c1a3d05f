"""Adapters layer - Concrete implementations of ports.

- Traversal engines (breadth-first, depth-first) and a recording callback
- Route solvers (Dijkstra)
"""
