"""Breadth-first search for augmenting paths in the residual graph."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ekflow.model import Edge, Vertex
from ekflow.residual import CancellationEdges

#: One arc of an augmenting path: (tail, head, forward edge).
#: The edge is None when the arc is a cancellation arc.
PathStep = Tuple[int, int, Optional[Edge]]


@dataclass
class SearchTree:
    """Scratch state of a single BFS run.

    Attributes:
        source: Vertex the search started from.
        parent: Predecessor of each vertex in the BFS tree, ``-1`` when unset.
        visited: Reachability mark per vertex.
        via: Forward edge used to reach each vertex; ``None`` when the vertex
            was reached over a cancellation arc or not reached at all.
    """

    source: int
    parent: List[int]
    visited: List[bool]
    via: List[Optional[Edge]]

    @classmethod
    def fresh(cls, vertex_count: int, source: int) -> SearchTree:
        tree = cls(
            source=source,
            parent=[-1] * vertex_count,
            visited=[False] * vertex_count,
            via=[None] * vertex_count,
        )
        tree.visited[source] = True
        return tree

    def reaches(self, vertex: int) -> bool:
        return self.parent[vertex] != -1

    def path_steps(self, sink: int) -> List[PathStep]:
        """Return the arcs from source to ``sink`` by walking parent pointers.

        Raises:
            AssertionError: If the walk does not reach the source within the
                vertex count, i.e. the parent pointers are inconsistent.
        """
        steps: List[PathStep] = []
        node = sink
        limit = len(self.parent)
        while node != self.source:
            assert len(steps) < limit, f"parent pointers from {sink} form a cycle"
            prev = self.parent[node]
            assert prev != -1, f"vertex {node} has no parent on the path to {sink}"
            steps.append((prev, node, self.via[node]))
            node = prev
        steps.reverse()
        return steps


def find_augmenting_path(
    vertices: Sequence[Vertex],
    cancellation: CancellationEdges,
    source: int,
    sink: int,
) -> Optional[SearchTree]:
    """Search the residual graph for a fewest-hop path from ``source`` to ``sink``.

    Forward edges with spare capacity are explored in insertion order, then
    cancellation arcs in ascending head order. Each vertex keeps the parent it
    was first discovered from. The search stops once ``sink`` is discovered.

    Args:
        vertices: All vertices of the graph, indexed by vertex id.
        cancellation: Cancellation arcs of the residual graph.
        source: Start vertex.
        sink: Target vertex.

    Returns:
        The search tree if ``sink`` is reachable, otherwise None.
    """
    tree = SearchTree.fresh(len(vertices), source)
    queue = deque([source])

    while queue and not tree.reaches(sink):
        node = queue.popleft()
        for edge in vertices[node].edges:
            if edge.capacity > 0 and not tree.visited[edge.target]:
                tree.parent[edge.target] = node
                tree.visited[edge.target] = True
                tree.via[edge.target] = edge
                queue.append(edge.target)
        for head, _ in cancellation.successors(node):
            if not tree.visited[head]:
                tree.parent[head] = node
                tree.visited[head] = True
                queue.append(head)

    return tree if tree.reaches(sink) else None
