"""NetworkX graph conversion utilities.

Builds a ``FlowGraph`` from any NetworkX graph and exports a solved graph
back to NetworkX with per-edge flow attributes.

Example:
    >>> import networkx as nx
    >>> from ekflow.nx import from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=4)
    >>> G.add_edge("a", "t", capacity=3)
    >>> graph, node_map = from_networkx(G, name="demo")
    >>> graph.find_max_flow(node_map.to_index["s"], node_map.to_index["t"])
    3
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from ekflow.config import FlowConfig
from ekflow.graph import FlowGraph
from ekflow.logging import get_logger

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any

logger = get_logger(__name__)


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    name: str = "networkx",
    capacity_attr: str = "capacity",
    default_capacity: int = 1,
    config: Optional[FlowConfig] = None,
) -> Tuple[FlowGraph, NodeMap]:
    """Convert a NetworkX graph into a ``FlowGraph``.

    Node names are sorted by their string form and mapped to contiguous
    vertex indices. Edges are added in NetworkX iteration order. Undirected
    graphs contribute one forward edge in each direction per edge.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        name: Label of the resulting graph.
        capacity_attr: Edge attribute holding the capacity.
        default_capacity: Capacity used when the attribute is missing.
        config: Optional ``FlowConfig`` for the resulting graph.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If G has no nodes or an edge capacity is not integral.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )
    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    graph = FlowGraph(name, len(node_map), config=config)

    for u, v, data in G.edges(data=True):
        src = node_map.to_index[u]
        dst = node_map.to_index[v]
        value = data.get(capacity_attr, default_capacity)
        capacity = int(value)
        if capacity != value:
            raise ValueError(
                f"Edge {u!r}->{v!r} has non-integral {capacity_attr} {value!r}"
            )
        graph.add_edge(src, dst, capacity)
        if not G.is_directed():
            graph.add_edge(dst, src, capacity)

    logger.debug(
        "Converted %s with %d nodes into graph '%s' with %d edges",
        type(G).__name__,
        len(node_map),
        name,
        graph.edge_count,
    )
    return graph, node_map


def to_networkx(
    graph: FlowGraph,
    node_map: Optional[NodeMap] = None,
    *,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> "nx.MultiDiGraph":
    """Export a ``FlowGraph`` with its current per-edge flow.

    Args:
        graph: Graph to export.
        node_map: Optional mapping used to restore node names. Vertex indices
            are used as node names when omitted.
        capacity_attr: Attribute receiving each edge's original capacity.
        flow_attr: Attribute receiving each edge's current flow.

    Returns:
        MultiDiGraph keyed by the edge's position in its vertex's edge list.
    """
    import networkx as nx

    def node_name(index: int) -> Hashable:
        return node_map.to_name[index] if node_map is not None else index

    G = nx.MultiDiGraph(name=graph.name)
    for vertex in graph.vertices:
        G.add_node(node_name(vertex.index))
    for vertex in graph.vertices:
        for key, edge in enumerate(vertex.edges):
            G.add_edge(
                node_name(edge.source),
                node_name(edge.target),
                key=key,
                **{capacity_attr: edge.original_capacity, flow_attr: edge.flow},
            )
    return G
