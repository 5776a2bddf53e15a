"""Flow network with Edmonds-Karp maximum flow and minimum-cut extraction.

A ``FlowGraph`` holds a fixed number of vertices, their forward edges and the
cancellation arcs of the residual graph. Flow computations mutate edge
capacities in place:

    >>> g = FlowGraph("demo", 3)
    >>> g.add_edge(0, 1, 10)
    True
    >>> g.add_edge(1, 2, 5)
    True
    >>> g.find_max_flow(0, 2)
    5
    >>> [(e.source, e.target) for e in g.find_min_cut(0, 2).cut_edges]
    [(1, 2)]

Edges must all be added before the first flow computation.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, List, Literal, Optional, Set, Tuple, Union, overload

from ekflow.bfs import SearchTree, find_augmenting_path
from ekflow.config import FLOW_CONFIG, FlowConfig
from ekflow.logging import get_logger
from ekflow.model import Edge, Vertex
from ekflow.residual import CancellationEdges
from ekflow.types import (
    AugmentingPath,
    CutEdge,
    CutRule,
    EdgeFlow,
    MaxFlowReport,
    MinCutResult,
    ReportScan,
)

logger = get_logger(__name__)


class FlowGraph:
    """Directed capacitated network for max-flow / min-cut computation.

    Args:
        name: Label used in reports.
        vertex_count: Number of vertices; vertex ids are ``0..vertex_count-1``.
        config: Defaults for cut rule, report scan and min-cut sink.
            Uses the global ``FLOW_CONFIG`` when omitted.

    Raises:
        ValueError: If ``vertex_count`` is not a positive integer.
    """

    def __init__(
        self, name: str, vertex_count: int, config: Optional[FlowConfig] = None
    ) -> None:
        if not isinstance(vertex_count, int) or vertex_count < 1:
            logger.error(
                "FlowGraph vertex_count must be a positive int: %r", vertex_count
            )
            raise ValueError(
                f"vertex_count must be a positive integer, got {vertex_count!r}"
            )
        self.name = name
        self.config = config if config is not None else FLOW_CONFIG
        self._vertices: List[Vertex] = [Vertex(i) for i in range(vertex_count)]
        self._cancellation = CancellationEdges(vertex_count)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return sum(len(v.edges) for v in self._vertices)

    @property
    def vertices(self) -> Tuple[Vertex, ...]:
        return tuple(self._vertices)

    @property
    def cancellation(self) -> CancellationEdges:
        return self._cancellation

    def edges(self) -> Iterator[Edge]:
        """Iterate forward edges in vertex order, then insertion order."""
        for vertex in self._vertices:
            yield from vertex.edges

    #
    # Construction
    #
    def add_edge(self, source: int, destination: int, capacity: int) -> bool:
        """Add a forward edge ``source -> destination``.

        Capacity is not validated; duplicates and self-loops are accepted.

        Returns:
            False, without touching the graph, if either vertex is not an int
            index in range.
            True otherwise.
        """
        if self._out_of_bounds(source) or self._out_of_bounds(destination):
            logger.debug(
                "Rejected edge %r->%r on graph '%s' with %d vertices",
                source,
                destination,
                self.name,
                self.vertex_count,
            )
            return False

        self._cancellation.register(source, destination)
        self._vertices[source].add_edge(source, destination, capacity)
        return True

    #
    # Augmenting paths
    #
    def has_augmenting_path(self, source: int, destination: int) -> bool:
        """Return True if the residual graph has a path from source to destination."""
        self._check_vertex(source, "source")
        self._check_vertex(destination, "destination")
        if source == destination:
            return False
        tree = find_augmenting_path(
            self._vertices, self._cancellation, source, destination
        )
        return tree is not None

    def _push(self, tree: SearchTree, sink: int) -> Tuple[int, Tuple[int, ...]]:
        """Push the bottleneck amount along the tree path to ``sink``."""
        steps = tree.path_steps(sink)

        bottleneck = min(
            self._cancellation.amount(tail, head) if edge is None else edge.capacity
            for tail, head, edge in steps
        )

        for tail, head, edge in steps:
            if edge is not None:
                edge.capacity -= bottleneck
                self._cancellation.add(head, tail, bottleneck)
            else:
                self._cancellation.cancel(tail, head, bottleneck)
                self._return_capacity(head, tail, bottleneck)

        vertices = (tree.source,) + tuple(head for _, head, _ in steps)
        return bottleneck, vertices

    def _return_capacity(self, source: int, target: int, amount: int) -> None:
        """Return ``amount`` of capacity to the loaded edges ``source -> target``."""
        remaining = amount
        for edge in self._vertices[source].edges:
            if remaining == 0:
                break
            if edge.target == target and edge.flow > 0:
                returned = min(edge.flow, remaining)
                edge.capacity += returned
                remaining -= returned
        assert remaining == 0, (
            f"cancelled {amount} on {source}->{target} but only "
            f"{amount - remaining} was carried"
        )

    def _augment(
        self, source: int, sink: int, trace: Optional[List[AugmentingPath]] = None
    ) -> int:
        """Augment until no path remains; return the flow pushed."""
        total_flow = 0
        while True:
            tree = find_augmenting_path(
                self._vertices, self._cancellation, source, sink
            )
            if tree is None:
                break
            bottleneck, vertices = self._push(tree, sink)
            total_flow += bottleneck
            logger.debug(
                "Graph '%s': pushed %d along %s", self.name, bottleneck, vertices
            )
            if trace is not None:
                trace.append(AugmentingPath(bottleneck, vertices))
        return total_flow

    #
    # Max flow
    #
    @overload
    def find_max_flow(
        self, source: int, destination: int, report: Literal[False] = False
    ) -> int: ...

    @overload
    def find_max_flow(
        self, source: int, destination: int, report: Literal[True]
    ) -> Tuple[int, MaxFlowReport]: ...

    def find_max_flow(
        self, source: int, destination: int, report: bool = False
    ) -> Union[int, Tuple[int, MaxFlowReport]]:
        """Compute the maximum flow from ``source`` to ``destination``.

        Repeatedly finds a fewest-hop augmenting path and pushes its bottleneck
        until the sink is unreachable. Capacities are mutated in place, so a
        second call on a saturated graph returns 0.

        Args:
            source: Source vertex.
            destination: Sink vertex.
            report: If True, also return a ``MaxFlowReport`` with every
                augmenting path and the per-edge flow listing.

        Returns:
            The flow pushed by this call, or ``(flow, report)`` when
            ``report`` is True.

        Raises:
            ValueError: If either vertex is out of range.
        """
        self._check_vertex(source, "source")
        self._check_vertex(destination, "destination")

        trace: Optional[List[AugmentingPath]] = [] if report else None
        # source == destination: conservation forces the flow value to zero
        total_flow = 0
        if source != destination:
            total_flow = self._augment(source, destination, trace)
        logger.debug(
            "Graph '%s': max flow %d -> %d is %d",
            self.name,
            source,
            destination,
            total_flow,
        )

        if not report:
            return total_flow

        summary = MaxFlowReport(
            name=self.name,
            source=source,
            sink=destination,
            total_flow=total_flow,
            paths=tuple(trace or ()),
            edge_flows=tuple(self._scan_edge_flows(destination)),
        )
        return total_flow, summary

    def _scan_edge_flows(self, sink: int) -> Iterator[EdgeFlow]:
        if self.config.report_scan == ReportScan.THROUGH_SINK:
            scanned = self._vertices[: sink + 1]
        else:
            scanned = self._vertices
        for vertex in scanned:
            for edge in vertex.edges:
                if edge.flow > 0:
                    yield EdgeFlow(edge.source, edge.target, edge.flow)

    def edge_flows(self) -> List[EdgeFlow]:
        """Return every forward edge currently carrying flow."""
        return [
            EdgeFlow(e.source, e.target, e.flow) for e in self.edges() if e.flow > 0
        ]

    def saturated_edges(self) -> List[Edge]:
        """Return forward edges with no residual capacity left."""
        return [e for e in self.edges() if e.saturated]

    def reset(self) -> None:
        """Remove all flow: restore edge capacities and zero the cancellation arcs."""
        for edge in self.edges():
            edge.capacity = edge.original_capacity
        self._cancellation.clear()

    #
    # Min cut
    #
    def find_min_cut(
        self,
        source: int,
        sink: Optional[int] = None,
        rule: Optional[CutRule] = None,
    ) -> MinCutResult:
        """Saturate the graph and return the minimum cut on the source side.

        Args:
            source: Source vertex; saturation and reachability both start here.
            sink: Sink the graph is saturated towards. Defaults to
                ``config.resolve_sink(vertex_count)``, the last vertex unless
                configured otherwise.
            rule: Reachability rule for the source side. Defaults to
                ``config.cut_rule``.

        Returns:
            MinCutResult with the source-side set and every forward edge
            leaving it.

        Raises:
            ValueError: If ``source`` or ``sink`` is out of range.
        """
        if sink is None:
            sink = self.config.resolve_sink(self.vertex_count)
        if rule is None:
            rule = self.config.cut_rule
        self._check_vertex(source, "source")
        self._check_vertex(sink, "sink")

        if source != sink:
            self._augment(source, sink)

        reachable = self._source_side(source, rule)
        cut_edges = tuple(
            CutEdge(e.source, e.target, e.original_capacity)
            for e in self.edges()
            if e.source in reachable and e.target not in reachable
        )
        result = MinCutResult(
            name=self.name,
            source=source,
            sink=sink,
            rule=rule,
            reachable=frozenset(reachable),
            cut_edges=cut_edges,
        )
        logger.debug(
            "Graph '%s': %s cut from %d has %d edges, capacity %d",
            self.name,
            rule.name,
            source,
            len(cut_edges),
            result.capacity,
        )
        return result

    def _source_side(self, source: int, rule: CutRule) -> Set[int]:
        reachable = {source}
        queue = deque([source])
        while queue:
            node = queue.popleft()
            for head in self._cut_successors(node, rule):
                if head not in reachable:
                    reachable.add(head)
                    queue.append(head)
        return reachable

    def _cut_successors(self, node: int, rule: CutRule) -> Iterator[int]:
        if rule == CutRule.LEGACY:
            for edge in self._vertices[node].edges:
                carried = self._cancellation.amount(edge.target, edge.source) > 0
                if carried and edge.capacity > 0:
                    yield edge.target
            return

        for edge in self._vertices[node].edges:
            if edge.capacity > 0:
                yield edge.target
        for head, _ in self._cancellation.successors(node):
            yield head

    #
    # Helpers
    #
    def _out_of_bounds(self, vertex: int) -> bool:
        if not isinstance(vertex, int):
            return True
        return vertex < 0 or vertex >= len(self._vertices)

    def _check_vertex(self, vertex: int, role: str) -> None:
        if self._out_of_bounds(vertex):
            logger.error(
                "Graph '%s': %s %r out of range [0, %d)",
                self.name,
                role,
                vertex,
                self.vertex_count,
            )
            raise ValueError(
                f"{role} {vertex!r} out of range for graph with "
                f"{self.vertex_count} vertices"
            )

    def __str__(self) -> str:
        parts = [f"The Graph {self.name} \n"]
        parts.extend(str(vertex) for vertex in self._vertices)
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"FlowGraph(name={self.name!r}, vertices={self.vertex_count}, "
            f"edges={self.edge_count})"
        )
