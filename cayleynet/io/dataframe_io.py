from __future__ import annotations

import warnings
from collections.abc import Callable, Mapping

import narwhals as nw
import polars as pl
from narwhals.typing import IntoDataFrame

from ..builders.breadth_first import BreadthFirstGraphBuilder, ColorGraphBuilder
from ..core._ColorGraph import ColorGraph
from ..core._Neighbors import IndexedNeighborGraph
from ..core._Shells import ShellIndexedGraph


def to_edge_frame(graph, *, vertex_to: Callable | None = str) -> pl.DataFrame:
    """Export the edges of a graph as a Polars DataFrame.

    Columns depend on what the graph knows:

    - always ``source``, ``target``;
    - indexed graphs add ``source_index``, ``target_index``;
    - shell-indexed graphs add ``source_shell``, ``target_shell``;
    - color graphs add ``color`` and list every directed adjacency (both
      directions carry their own color). Other graphs list each undirected
      edge once, from the lower to the higher index.

    Args:
        graph: Any cayleynet graph.
        vertex_to: Converter applied to vertices and colors (default ``str``).
            ``None`` keeps the Python objects in an ``Object`` column.

    Returns:
        Polars DataFrame, one row per edge.

    """
    indexed = isinstance(graph, IndexedNeighborGraph)
    shelled = isinstance(graph, ShellIndexedGraph)
    colored = isinstance(graph, ColorGraph)
    conv = vertex_to if vertex_to is not None else (lambda v: v)
    label_dtype = pl.Utf8 if vertex_to is str else (pl.Object if vertex_to is None else None)

    cols: dict[str, list] = {"source": [], "target": []}
    if indexed:
        cols["source_index"] = []
        cols["target_index"] = []
    if shelled:
        cols["source_shell"] = []
        cols["target_shell"] = []
    if colored:
        cols["color"] = []

    seen = set()
    for src in graph.vertices():
        if colored:
            pairs = [(tgt, c) for c, tgt in graph.colored_neighbors(src).items()]
        else:
            pairs = [(tgt, None) for tgt in graph.neighbors_of(src)]
        for tgt, color in pairs:
            if not colored:
                if indexed:
                    if graph.index_of(tgt) < graph.index_of(src):
                        continue
                else:
                    key = frozenset((src, tgt))
                    if key in seen:
                        continue
                    seen.add(key)
            cols["source"].append(conv(src))
            cols["target"].append(conv(tgt))
            if indexed:
                cols["source_index"].append(graph.index_of(src))
                cols["target_index"].append(graph.index_of(tgt))
            if shelled:
                cols["source_shell"].append(graph.distance_from_root(src))
                cols["target_shell"].append(graph.distance_from_root(tgt))
            if colored:
                cols["color"].append(conv(color))

    if label_dtype is None:
        return pl.DataFrame(cols)
    schema = {
        name: label_dtype if name in ("source", "target", "color") else pl.Int64
        for name in cols
    }
    return pl.DataFrame(cols, schema=schema)


def from_edge_frame(
    df: IntoDataFrame,
    root,
    *,
    source: str = "source",
    target: str = "target",
    color: str | None = None,
    involution: Mapping | None = None,
):
    """Build a finished breadth-first graph from an edge table.

    Accepts any eager DataFrame narwhals understands (Polars, pandas, PyArrow).
    Edges are treated as undirected. The graph is grown from ``root`` one
    shell at a time, visiting neighbors in the order their rows appear.

    Args:
        df: Edge table.
        root: Root vertex; must appear in the table.
        source, target: Endpoint column names.
        color: Optional color column. When given, ``involution`` is required and
            a ``ColorGraph`` is returned; a row ``(s, t, c)`` colors ``s -> t``
            with ``c`` and, unless the reverse row exists, ``t -> s`` with
            ``involution[c]``.
        involution: Color involution table.

    Returns:
        ShellIndexedGraph or ColorGraph.

    Raises:
        ValueError: If ``color`` is given without ``involution``, a color is
            missing from ``involution``, or ``root`` does not occur in the table.

    """
    if color is not None and involution is None:
        raise ValueError("a color column requires a color involution")
    ndf = nw.from_native(df, eager_only=True)
    columns = [source, target] + ([color] if color is not None else [])
    rows = ndf.select(columns).rows()

    # vertex -> {neighbor: color}, insertion ordered
    adjacency: dict = {}
    for row in rows:
        s, t = row[0], row[1]
        c = row[2] if color is not None else None
        if color is not None and c not in involution:
            raise ValueError(f"color {c!r} not in the involution table")
        adjacency.setdefault(s, {})[t] = c
        back = adjacency.setdefault(t, {})
        if s not in back:
            back[s] = involution[c] if color is not None else None

    if root not in adjacency:
        raise ValueError(f"root {root!r} does not occur in the edge table")

    if color is None:
        builder = BreadthFirstGraphBuilder(root, num_vertices=len(adjacency))

        def join(u, v, _c):
            return builder.join(u, v)
    else:
        builder = ColorGraphBuilder(root, involution, num_vertices=len(adjacency))
        join = builder.join

    graph = builder.graph
    shell = [root]
    while shell:
        nxt = []
        for u in shell:
            for v, c in adjacency[u].items():
                new = not graph.contains_vertex(v)
                if join(u, v, c) and new:
                    nxt.append(v)
        shell = nxt

    unreached = len(adjacency) - graph.vertex_count()
    if unreached:
        warnings.warn(
            f"{unreached} vertices are not connected to root {root!r} and were dropped",
            stacklevel=2,
        )
    return builder.finish()
