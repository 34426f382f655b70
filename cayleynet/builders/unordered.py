from __future__ import annotations

from ..core._Neighbors import IndexedNeighborGraph, NeighborGraph


class NeighborGraphBuilder:
    """Builds a ``NeighborGraph`` (set-valued neighbor collections) in any order.

    Parameters
    --
    degree : int, optional
        Declared valency of every vertex.
    num_vertices : int, optional
        Expected number of vertices; accepted for API parity, not used.

    Notes
    -
    - ``join`` creates missing endpoints.
    - After ``finish()`` every mutation returns False and changes nothing.

    """

    _graph_type = NeighborGraph

    def __init__(self, degree: int | None = None, num_vertices: int = 0):
        self._graph = self._graph_type(degree=degree, num_vertices=num_vertices)

    @property
    def graph(self):
        """The graph under construction (read-only API)."""
        return self._graph

    def add_vertex(self, vertex) -> bool:
        """Add an isolated vertex. Returns False if present or already finished."""
        if self._graph.is_finished:
            return False
        return self._graph._attach(vertex)

    def join(self, src, tgt) -> bool:
        """Add the undirected edge ``src``-``tgt``, creating endpoints as needed.

        Returns
        ---
        bool
            False if the edge already exists or the graph is finished.

        """
        if self._graph.is_finished:
            return False
        self._graph._attach(src)
        self._graph._attach(tgt)
        return self._graph._link(src, tgt)

    def finish(self):
        """Freeze the graph and return it. Later calls return the same graph."""
        if not self._graph.is_finished:
            self._graph._freeze()
        return self._graph


class IndexedNeighborGraphBuilder(NeighborGraphBuilder):
    """Builds an ``IndexedNeighborGraph``: vertices are indexed as they first appear.

    ``finish()`` sorts every neighbor list by index.
    """

    _graph_type = IndexedNeighborGraph
