from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install cayleynet[networkx]"
    ) from e

from ..builders.breadth_first import BreadthFirstGraphBuilder
from ..core._ColorGraph import ColorGraph
from ..core._Neighbors import IndexedNeighborGraph
from ..core._Shells import ShellIndexedGraph


def to_nx(graph):
    """Convert a cayleynet graph to NetworkX.

    Color graphs become a ``nx.DiGraph`` with a ``color`` attribute on every
    directed edge; other graphs become a ``nx.Graph``. Node attributes
    ``index`` and ``shell`` are set when the graph has them.

    Args:
        graph: Any cayleynet graph.

    Returns:
        nx.Graph or nx.DiGraph

    """
    colored = isinstance(graph, ColorGraph)
    G = nx.DiGraph() if colored else nx.Graph()
    indexed = isinstance(graph, IndexedNeighborGraph)
    shelled = isinstance(graph, ShellIndexedGraph)

    for v in graph.vertices():
        attrs = {}
        if indexed:
            attrs["index"] = graph.index_of(v)
        if shelled:
            attrs["shell"] = graph.distance_from_root(v)
        G.add_node(v, **attrs)

    if shelled:
        G.graph["root"] = graph.root
    if colored:
        for u in graph.vertices():
            for c, v in graph.colored_neighbors(u).items():
                G.add_edge(u, v, color=c)
    else:
        for u in graph.vertices():
            for v in graph.neighbors_of(u):
                G.add_edge(u, v)
    return G


def from_nx(G, root, degree: int | None = None) -> ShellIndexedGraph:
    """Build a finished ``ShellIndexedGraph`` from a NetworkX graph.

    Vertices are indexed layer by layer as reported by ``nx.bfs_layers``
    (within a layer, in that order); nodes unreachable from ``root`` are left
    out. Directed graphs are read as undirected.

    Raises:
        ValueError: If ``root`` is not a node of ``G``.

    """
    if root not in G:
        raise ValueError(f"root {root!r} is not a node of the graph")
    U = G.to_undirected(as_view=True) if G.is_directed() else G
    builder = BreadthFirstGraphBuilder(root, degree=degree, num_vertices=U.number_of_nodes())
    graph = builder.graph
    for layer in nx.bfs_layers(U, root):
        for u in layer:
            for v in U.neighbors(u):
                if not graph.has_edge(u, v):
                    builder.join(u, v)
    return builder.finish()
