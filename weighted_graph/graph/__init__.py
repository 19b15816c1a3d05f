"""Storage model for the directed weighted graph.

This subpackage holds the dual-map Graph and its textual rendering.
"""

from .digraph import Graph
from .render import render_graph

__all__ = ["Graph", "render_graph"]
