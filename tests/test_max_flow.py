import pytest

from conftest import GOLDEN_EDGES, build_graph, random_edges
from ekflow.config import FlowConfig
from ekflow.graph import FlowGraph
from ekflow.types import AugmentingPath, EdgeFlow, MaxFlowReport, ReportScan


class TestMaxFlowBasic:
    """
    Known flow values on small graphs.
    """

    def test_golden_instance(self, golden):
        assert golden.find_max_flow(0, 3) == 5

    def test_clrs(self, clrs):
        assert clrs.find_max_flow(0, 5) == 23

    def test_parallel_edges(self, parallel):
        assert parallel.find_max_flow(0, 2) == 5
        flows = [e.flow for e in parallel.vertices[0].edges]
        assert flows == [2, 3]

    def test_requires_flow_cancellation(self, cancel_graph):
        flow, report = cancel_graph.find_max_flow(0, 3, report=True)
        assert flow == 2
        assert report.paths == (
            AugmentingPath(1, (0, 1, 2, 3)),
            AugmentingPath(1, (0, 4, 2, 1, 5, 3)),
        )
        # The cancelled edge carries nothing in the final flow
        middle = cancel_graph.vertices[1].edges[0]
        assert (middle.source, middle.target, middle.flow) == (1, 2, 0)
        assert cancel_graph.cancellation.amount(2, 1) == 0

    def test_zero_capacity_edges_carry_nothing(self):
        g = build_graph("zero", 3, [(0, 1, 0), (1, 2, 5), (0, 2, 0)])
        assert g.find_max_flow(0, 2) == 0


class TestMaxFlowEdgeCases:
    def test_no_edges(self):
        g = FlowGraph("empty", 4)
        for source in range(4):
            for sink in range(4):
                if source != sink:
                    assert g.find_max_flow(source, sink) == 0

    def test_sink_unreachable(self, with_unreachable):
        assert with_unreachable.find_max_flow(0, 3) == 0
        assert with_unreachable.find_max_flow(0, 2) == 0

    def test_source_equals_sink(self, golden):
        assert golden.find_max_flow(1, 1) == 0
        flow, report = golden.find_max_flow(2, 2, report=True)
        assert flow == 0
        assert report.paths == ()

    @pytest.mark.parametrize("source, sink", [(-1, 3), (0, 4), (9, 9)])
    def test_out_of_range_terminals(self, golden, source, sink):
        with pytest.raises(ValueError, match="out of range"):
            golden.find_max_flow(source, sink)
        assert golden.edge_flows() == []

    def test_reverse_direction_has_no_flow(self, golden):
        assert golden.find_max_flow(3, 0) == 0


class TestMaxFlowRepeatedCalls:
    def test_idempotent_at_fixpoint(self, golden):
        assert golden.find_max_flow(0, 3) == 5
        capacities = [e.capacity for e in golden.edges()]

        flow, report = golden.find_max_flow(0, 3, report=True)
        assert flow == 0
        assert report.paths == ()
        assert [e.capacity for e in golden.edges()] == capacities
        # The listing still describes the flow already on the graph
        assert sum(e.flow for e in report.edge_flows if e.target == 3) == 5

    def test_deterministic_across_fresh_graphs(self):
        reports = []
        for _ in range(3):
            g = build_graph("golden", 4, GOLDEN_EDGES)
            reports.append(g.find_max_flow(0, 3, report=True))
        assert reports[0] == reports[1] == reports[2]


class TestMaxFlowReport:
    def test_golden_trace(self, golden):
        flow, report = golden.find_max_flow(0, 3, report=True)
        assert flow == 5
        assert isinstance(report, MaxFlowReport)
        assert (report.name, report.source, report.sink) == ("golden", 0, 3)
        assert report.total_flow == 5
        assert report.paths == (
            AugmentingPath(2, (0, 1, 3)),
            AugmentingPath(2, (0, 2, 3)),
            AugmentingPath(1, (0, 1, 2, 3)),
        )
        assert report.edge_flows == (
            EdgeFlow(0, 1, 3),
            EdgeFlow(0, 2, 2),
            EdgeFlow(1, 3, 2),
            EdgeFlow(1, 2, 1),
            EdgeFlow(2, 3, 3),
        )

    def test_bottlenecks_sum_to_total(self, clrs):
        flow, report = clrs.find_max_flow(0, 5, report=True)
        assert sum(p.bottleneck for p in report.paths) == flow
        for path in report.paths:
            assert path.vertices[0] == 0
            assert path.vertices[-1] == 5

    def test_path_lengths_never_decrease(self, clrs):
        _, report = clrs.find_max_flow(0, 5, report=True)
        lengths = [len(p.vertices) for p in report.paths]
        assert lengths == sorted(lengths)

    def test_scan_all_vertices_by_default(self):
        g = build_graph("scan", 4, [(0, 3, 2), (3, 1, 2)])
        _, report = g.find_max_flow(0, 1, report=True)
        assert report.edge_flows == (EdgeFlow(0, 3, 2), EdgeFlow(3, 1, 2))

    def test_scan_through_sink(self):
        config = FlowConfig(report_scan=ReportScan.THROUGH_SINK)
        g = FlowGraph("scan", 4, config=config)
        g.add_edge(0, 3, 2)
        g.add_edge(3, 1, 2)
        flow, report = g.find_max_flow(0, 1, report=True)
        assert flow == 2
        # Vertex 3 lies above the sink index and is left out of the listing
        assert report.edge_flows == (EdgeFlow(0, 3, 2),)


class TestResidualInvariants:
    @pytest.mark.parametrize("seed", range(40))
    def test_capacities_and_conservation(self, seed):
        vertex_count, edges = random_edges(seed)
        g = build_graph(f"random-{seed}", vertex_count, edges)
        source, sink = 0, vertex_count - 1
        flow = g.find_max_flow(source, sink)

        assert all(e.capacity >= 0 for e in g.edges())
        assert all(e.flow <= e.original_capacity for e in g.edges())

        balance = [0] * vertex_count
        for e in g.edges():
            balance[e.source] -= e.flow
            balance[e.target] += e.flow
        for v in range(vertex_count):
            if v == source:
                assert balance[v] == -flow
            elif v == sink:
                assert balance[v] == flow
            else:
                assert balance[v] == 0

    @pytest.mark.parametrize("seed", range(40))
    def test_cancellation_amount_matches_edge_flow(self, seed):
        vertex_count, edges = random_edges(seed)
        g = build_graph(f"random-{seed}", vertex_count, edges)
        g.find_max_flow(0, vertex_count - 1)

        carried = {}
        for e in g.edges():
            key = (e.target, e.source)
            carried[key] = carried.get(key, 0) + e.flow
        for (tail, head), amount in carried.items():
            assert g.cancellation.amount(tail, head) == amount
