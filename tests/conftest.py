"""Global pytest configuration and sample flow networks.

Each fixture returns a fresh, unsolved ``FlowGraph``. Diagrams show
``capacity`` on every edge.
"""

from __future__ import annotations

import random
from typing import List, Tuple

import pytest

from ekflow.graph import FlowGraph

EdgeSpec = Tuple[int, int, int]


def build_graph(name: str, vertex_count: int, edges: List[EdgeSpec]) -> FlowGraph:
    g = FlowGraph(name, vertex_count)
    for source, target, capacity in edges:
        assert g.add_edge(source, target, capacity)
    return g


def random_edges(seed: int) -> Tuple[int, List[EdgeSpec]]:
    """Deterministic random network without self-loops; parallel edges allowed."""
    rng = random.Random(seed)
    vertex_count = rng.randint(2, 8)
    edges = []
    for _ in range(rng.randint(0, vertex_count * 3)):
        source = rng.randrange(vertex_count)
        target = rng.randrange(vertex_count)
        if source != target:
            edges.append((source, target, rng.randint(0, 10)))
    return vertex_count, edges


GOLDEN_EDGES: List[EdgeSpec] = [(0, 1, 3), (0, 2, 2), (1, 3, 2), (2, 3, 3), (1, 2, 1)]


@pytest.fixture
def golden():
    #       [3]       [2]
    #   0 ──────► 1 ──────► 3
    #   │         │         ▲
    #   │[2]      │[1]      │[3]
    #   │         ▼         │
    #   └───────► 2 ────────┘
    #
    # Max flow 0 -> 3 is 5; min cut {0} | {1, 2, 3}.
    return build_graph("golden", 4, GOLDEN_EDGES)


@pytest.fixture
def cancel_graph():
    # The first shortest path 0-1-2-3 uses 1->2; the second augmentation has
    # to cancel it: 0-4-2-1-5-3.
    #
    # Edges, all with capacity 1:
    #   0->1, 1->2, 2->3   first path
    #   0->4, 4->2         into 2 from a second branch
    #   1->5, 5->3         out of 1 around 2
    #
    # Max flow 0 -> 3 is 2.
    return build_graph(
        "cancel",
        6,
        [(0, 1, 1), (1, 2, 1), (2, 3, 1), (0, 4, 1), (4, 2, 1), (1, 5, 1), (5, 3, 1)],
    )


@pytest.fixture
def clrs():
    # Classic 6-vertex textbook network; max flow 0 -> 5 is 23 and the
    # minimal source side is {0, 1, 2, 4}.
    return build_graph(
        "clrs",
        6,
        [
            (0, 1, 16),
            (0, 2, 13),
            (1, 3, 12),
            (2, 1, 4),
            (2, 4, 14),
            (3, 2, 9),
            (3, 5, 20),
            (4, 3, 7),
            (4, 5, 4),
        ],
    )


@pytest.fixture
def legacy_divergent():
    #   [1]     [1]
    # 0 ───► 1 ───► 2      sink is 2
    # │
    # │[4]
    # ▼
    # 3   (dead end, never carries flow)
    return build_graph("divergent", 4, [(0, 1, 1), (1, 2, 1), (0, 3, 4)])


@pytest.fixture
def with_unreachable():
    # Vertex 2 is isolated and vertex 3 has no incoming edge.
    #   [3]     [2]
    # 0 ───► 1 ───► 4 ◄─── 3
    #                  [5]
    return build_graph("unreachable", 5, [(0, 1, 3), (1, 4, 2), (3, 4, 5)])


@pytest.fixture
def parallel():
    # Two parallel edges 0 -> 1 with capacities 2 and 3, then 1 -> 2 with 10.
    return build_graph("parallel", 3, [(0, 1, 2), (0, 1, 3), (1, 2, 10)])
