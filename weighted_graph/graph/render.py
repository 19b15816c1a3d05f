"""Textual rendering of a graph.

The output is compared verbatim by callers, so the layout is fixed:

    Vertices: [A, B]
    Edges:
    Vertex(A)--->{B=4}
    Vertex(B)--->{}

Vertices and destinations appear in name order. Only vertices with a
payload entry are listed. A graph without vertices renders as
``Vertices: []`` followed by ``Edges:``; the bracket is kept rather than
trimmed along with the missing separator.
"""

from __future__ import annotations

from typing import AbstractSet, Callable, Mapping


def render_graph(
    vertices: AbstractSet[str],
    adjacency: Callable[[str], Mapping[str, int]],
) -> str:
    """Render vertex names and their outgoing edges.

    Args:
        vertices: Names of the vertices to list.
        adjacency: Returns the destination -> cost mapping for a name.

    Returns:
        The rendered text, ending with a newline.
    """
    names = sorted(vertices)
    lines = [f"Vertices: [{', '.join(names)}]", "Edges:"]

    for name in names:
        neighbors = adjacency(name)
        edges = ", ".join(f"{dest}={neighbors[dest]}" for dest in sorted(neighbors))
        lines.append(f"Vertex({name})--->{{{edges}}}")

    return "\n".join(lines) + "\n"
