"""Visit callback that records what a traversal saw."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar

E = TypeVar("E")


@dataclass
class VisitRecorder(Generic[E]):
    """Callable visit callback collecting ``(name, payload)`` pairs.

    Example:
        recorder = VisitRecorder()
        graph.breadth_first_search("A", recorder)
        print(recorder.names)
    """

    visits: List[Tuple[str, Optional[E]]] = field(default_factory=list)

    def __call__(self, name: str, payload: Optional[E]) -> None:
        self.visits.append((name, payload))

    @property
    def names(self) -> List[str]:
        """Visited vertex names in visitation order."""
        return [name for name, _ in self.visits]

    def clear(self) -> None:
        self.visits.clear()
