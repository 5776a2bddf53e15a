"""Enums and result containers for flow computations.

Results are immutable and expose ``to_dict()`` returning JSON-safe primitives
so callers can serialize or render them without touching the graph.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, FrozenSet, Tuple


class CutRule(IntEnum):
    """Traversal rule used to find the source side of a minimum cut."""

    #: Forward edge with spare capacity, or cancellation arc with a positive amount.
    RESIDUAL = 1
    #: Forward edge that has carried flow AND still has spare capacity.
    LEGACY = 2


class ReportScan(IntEnum):
    """Which vertices contribute to the final edge-flow listing."""

    ALL_VERTICES = 1
    #: Vertices ``0..sink`` inclusive.
    THROUGH_SINK = 2


@dataclass(frozen=True)
class AugmentingPath:
    """One augmentation: the amount pushed and the vertices it traversed.

    Attributes:
        bottleneck: Flow pushed along the path.
        vertices: Vertex indices from source to sink.
    """

    bottleneck: int
    vertices: Tuple[int, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {"bottleneck": self.bottleneck, "vertices": list(self.vertices)}


@dataclass(frozen=True)
class EdgeFlow:
    """Flow carried by one forward edge after a max-flow run."""

    source: int
    target: int
    flow: int

    def to_dict(self) -> Dict[str, Any]:
        return {"source": self.source, "target": self.target, "flow": self.flow}


@dataclass(frozen=True)
class MaxFlowReport:
    """Trace of a max-flow run.

    Attributes:
        name: Graph label.
        source: Source vertex.
        sink: Sink vertex.
        total_flow: Flow pushed during this run.
        paths: Augmenting paths in the order they were used.
        edge_flows: Forward edges carrying flow after the run, in scan order.
    """

    name: str
    source: int
    sink: int
    total_flow: int
    paths: Tuple[AugmentingPath, ...]
    edge_flows: Tuple[EdgeFlow, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "source": self.source,
            "sink": self.sink,
            "total_flow": self.total_flow,
            "paths": [p.to_dict() for p in self.paths],
            "edge_flows": [e.to_dict() for e in self.edge_flows],
        }


@dataclass(frozen=True)
class CutEdge:
    """Forward edge crossing from the source side to the sink side."""

    source: int
    target: int
    capacity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "capacity": self.capacity,
        }


@dataclass(frozen=True)
class MinCutResult:
    """Source-side partition and the edges leaving it.

    Attributes:
        name: Graph label.
        source: Vertex the reachability search started from.
        sink: Vertex the graph was saturated towards.
        rule: Reachability rule used to build ``reachable``.
        reachable: Source-side vertex set.
        cut_edges: Forward edges ``u -> v`` with ``u`` in ``reachable`` and
            ``v`` outside it, in vertex/insertion order.
    """

    name: str
    source: int
    sink: int
    rule: CutRule
    reachable: FrozenSet[int]
    cut_edges: Tuple[CutEdge, ...]

    @property
    def capacity(self) -> int:
        """Sum of the original capacities of the cut edges."""
        return sum(edge.capacity for edge in self.cut_edges)

    @property
    def label(self) -> str:
        return f"Min Cut: {self.name}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "source": self.source,
            "sink": self.sink,
            "rule": self.rule.name,
            "reachable": sorted(self.reachable),
            "cut_edges": [e.to_dict() for e in self.cut_edges],
            "capacity": self.capacity,
        }
