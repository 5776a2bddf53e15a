"""Text rendering of flow results.

Renderers take the structured results returned by ``FlowGraph`` and produce
plain text. They never print; callers decide where the text goes.
"""

from __future__ import annotations

from typing import List

from ekflow.types import AugmentingPath, EdgeFlow, MaxFlowReport, MinCutResult


def format_path(path: AugmentingPath) -> str:
    """Render one augmentation as ``Flow  n: v0 v1 ...``."""
    vertices = " ".join(str(v) for v in path.vertices)
    return f"Flow {path.bottleneck:2d}: {vertices}"


def format_edge_flow(edge_flow: EdgeFlow) -> str:
    return (
        f"Edge({edge_flow.source}, {edge_flow.target}) "
        f"transports {edge_flow.flow} items"
    )


def format_max_flow(report: MaxFlowReport) -> str:
    """Render a max-flow trace.

    Layout: a header line, one line per augmenting path, a blank line, then
    one line per edge carrying flow.
    """
    lines: List[str] = [f"-- Max Flow: {report.name} --"]
    lines.extend(format_path(p) for p in report.paths)
    lines.append("")
    lines.extend(format_edge_flow(e) for e in report.edge_flows)
    return "\n".join(lines)


def format_min_cut(result: MinCutResult) -> str:
    """Render a minimum cut as a header and one line per cut edge."""
    lines: List[str] = [f"-- {result.label} --"]
    lines.extend(
        f"Min Cut Edge: ({edge.source}, {edge.target})" for edge in result.cut_edges
    )
    return "\n".join(lines)
