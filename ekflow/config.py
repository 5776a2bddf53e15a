"""Configuration classes for ekflow components."""

from dataclasses import dataclass
from typing import Optional

from ekflow.types import CutRule, ReportScan


@dataclass
class FlowConfig:
    """Defaults applied by ``FlowGraph`` when a call does not override them."""

    # Reachability rule for the source side of a minimum cut
    cut_rule: CutRule = CutRule.RESIDUAL

    # Vertex range contributing to the final edge-flow listing
    report_scan: ReportScan = ReportScan.ALL_VERTICES

    # Sink used by find_min_cut when none is given; None means the last vertex
    default_sink: Optional[int] = None

    def resolve_sink(self, vertex_count: int) -> int:
        """Return the default sink for a graph of ``vertex_count`` vertices."""
        if self.default_sink is None:
            return vertex_count - 1
        return self.default_sink


# Global configuration instance
FLOW_CONFIG = FlowConfig()
