"""ekflow: Edmonds-Karp maximum flow and minimum cut.

Primary API:
    FlowGraph - Fixed-size directed network with validated edge insertion
    FlowGraph.find_max_flow() - Breadth-first augmenting-path max flow
    FlowGraph.find_min_cut() - Source-side partition and cut edges
    format_max_flow(), format_min_cut() - Text rendering of results
    from_networkx() - Build a FlowGraph from a NetworkX graph

Example:
    from ekflow import FlowGraph, format_max_flow

    g = FlowGraph("example", 4)
    g.add_edge(0, 1, 3)
    g.add_edge(0, 2, 2)
    g.add_edge(1, 3, 2)
    g.add_edge(2, 3, 3)
    g.add_edge(1, 2, 1)

    flow, report = g.find_max_flow(0, 3, report=True)
    print(format_max_flow(report))
    cut = g.find_min_cut(0, 3)
    assert cut.capacity == flow
"""

from __future__ import annotations

from ekflow import logging
from ekflow._version import __version__
from ekflow.config import FLOW_CONFIG, FlowConfig
from ekflow.graph import FlowGraph
from ekflow.model import Edge, Vertex
from ekflow.nx import NodeMap, from_networkx, to_networkx
from ekflow.report import format_max_flow, format_min_cut
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

__all__ = [
    # Version
    "__version__",
    # Model
    "FlowGraph",
    "Vertex",
    "Edge",
    "CancellationEdges",
    # Types
    "CutRule",
    "ReportScan",
    # Results
    "AugmentingPath",
    "EdgeFlow",
    "MaxFlowReport",
    "CutEdge",
    "MinCutResult",
    # Configuration
    "FlowConfig",
    "FLOW_CONFIG",
    # Rendering
    "format_max_flow",
    "format_min_cut",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
