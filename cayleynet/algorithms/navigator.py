from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core._ColorGraph import ColorGraph


class Navigator:
    """Shortest color words between the root and the vertices of a color graph.

    Paths are derived by descending one shell at a time: from a vertex in
    shell ``d`` step to its lowest-index neighbor in shell ``d - 1`` until the
    root is reached. The breadth-first construction guarantees such a neighbor
    exists for every non-root vertex, and picking the lowest index makes the
    resulting word canonical.

    The graph should be finished; on a graph still being built the shell
    queries fall back to on-demand sorting.
    """

    def __init__(self, graph: ColorGraph):
        self.graph = graph

    def _closer_neighbor(self, vertex):
        closer = self.graph.neighbors_in_previous_shell(vertex)
        if not closer:
            raise ValueError(f"vertex {vertex!r} has no neighbor in the previous shell")
        return closer[0]

    def shortest_path_to(self, vertex) -> list:
        """Color word leading from the root to ``vertex`` (empty for the root)."""
        g = self.graph
        word = []
        cur = vertex
        for _ in range(g.distance_from_root(vertex)):
            prev = self._closer_neighbor(cur)
            word.append(g.edge_color(prev, cur))
            cur = prev
        word.reverse()
        return word

    def shortest_path_from(self, vertex) -> list:
        """Color word leading from ``vertex`` to the root."""
        g = self.graph
        word = []
        cur = vertex
        for _ in range(g.distance_from_root(vertex)):
            prev = self._closer_neighbor(cur)
            word.append(g.edge_color(cur, prev))
            cur = prev
        return word

    def endpoint_of_path(self, path, start=None):
        """Follow the colors of ``path`` starting at ``start`` (default: the root).

        Raises
        --
        ValueError
            If some color of the path is not used at the vertex reached so far.

        """
        g = self.graph
        cur = g.root if start is None else start
        for color in path:
            nxt = g.neighbor(cur, color)
            if nxt is None:
                raise ValueError(f"color {color!r} is not used at vertex {cur!r}")
            cur = nxt
        return cur

    def inverse_word(self, path) -> list:
        """The word that undoes ``path``: inverse colors in reverse order."""
        inv = self.graph.inverse_color
        return [inv(c) for c in reversed(path)]

    def left_product(self, x, h):
        """``h * x``: the shortest path to ``x`` walked from ``h``."""
        return self.endpoint_of_path(self.shortest_path_to(x), start=h)

    def right_product(self, x, h, cache=None):
        """``x * h``: the shortest path to ``h`` walked from ``x``.

        Parameters
        --
        cache : ShortestPathCache, optional
            Consulted (and filled) for the path to ``h``.

        """
        if cache is None:
            path = self.shortest_path_to(h)
        else:
            path = cache.get(h)
            if path is None:
                path = cache.put(h, self.shortest_path_to(h))
        return self.endpoint_of_path(path, start=x)
