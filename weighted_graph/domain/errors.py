"""Typed domain errors for the weighted graph.

All errors inherit from GraphError and can optionally wrap a root
cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GraphError(Exception):
    """Base error for the graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class DuplicateVertexError(GraphError):
    """A vertex with this name already carries a payload.

    Attributes:
        vertex: The name that was added twice
    """

    vertex: str = ""


@dataclass
class InvalidVertexError(GraphError):
    """Edge insertion rejected by the configured validation policy.

    Attributes:
        source: Source vertex of the rejected edge
        destination: Destination vertex of the rejected edge
    """

    source: str = ""
    destination: str = ""


@dataclass
class VertexNotFoundError(GraphError):
    """Vertex name not known to the graph.

    Attributes:
        vertex: The name that was looked up
    """

    vertex: str = ""


@dataclass
class EdgeNotFoundError(GraphError):
    """No edge stored between the two vertices."""

    source: str = ""
    destination: str = ""


@dataclass
class NoPathError(GraphError):
    """No path exists between the requested vertices.

    Attributes:
        start: Start vertex of the request
        end: End vertex of the request
    """

    start: str = ""
    end: str = ""
