"""Vertex and forward-edge model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class Edge:
    """Directed forward edge.

    ``capacity`` is the remaining residual capacity and is decremented as flow
    is pushed through the edge. ``original_capacity`` keeps the value the edge
    was created with.
    """

    source: int
    target: int
    capacity: int
    original_capacity: int = field(init=False)

    def __post_init__(self) -> None:
        self.original_capacity = self.capacity

    @property
    def flow(self) -> int:
        return self.original_capacity - self.capacity

    @property
    def saturated(self) -> bool:
        return self.capacity <= 0

    def __str__(self) -> str:
        return (
            f"{self.source}->{self.target} "
            f"({self.capacity}/{self.original_capacity})"
        )


@dataclass
class Vertex:
    """A vertex and its outgoing edges in insertion order."""

    index: int
    edges: List[Edge] = field(default_factory=list)

    def add_edge(self, source: int, target: int, capacity: int) -> Edge:
        """Append a forward edge; capacity, duplicates and self-loops are unchecked."""
        edge = Edge(source, target, capacity)
        self.edges.append(edge)
        return edge

    def __str__(self) -> str:
        if not self.edges:
            return f"Vertex {self.index}: -\n"
        return f"Vertex {self.index}: " + " ".join(str(e) for e in self.edges) + "\n"
