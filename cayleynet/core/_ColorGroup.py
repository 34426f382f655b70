from __future__ import annotations

from collections.abc import Iterable, Mapping

from ..algorithms.navigator import Navigator
from ._ColorGraph import ColorGraph
from ._PathCache import ShortestPathCache


class GraphElement:
    """A vertex of a ``ColorGroupGraph``, acting as the group element it represents.

    Multiplication is realized by walking colored edges: ``x.right_product_by(h)``
    starts at ``x`` and follows the shortest color word from the identity to
    ``h``.
    """

    __slots__ = ("_graph", "_index")

    def __init__(self, graph: ColorGroupGraph, index: int):
        self._graph = graph
        self._index = index

    @property
    def index(self) -> int:
        return self._index

    @property
    def graph(self) -> ColorGroupGraph:
        return self._graph

    def left_product_by(self, h: GraphElement) -> GraphElement:
        """``h * self``: walk the shortest path to ``self`` starting from ``h``."""
        nav = self._graph.navigator
        return nav.endpoint_of_path(nav.shortest_path_to(self), start=h)

    def right_product_by(self, h: GraphElement) -> GraphElement:
        """``self * h``: walk the shortest path to ``h`` starting from ``self``.

        The path to ``h`` is memoized in the owning graph's ``path_cache``.
        """
        return self._graph.navigator.right_product(self, h, cache=self._graph.path_cache)

    def inverse(self) -> GraphElement:
        nav = self._graph.navigator
        return nav.endpoint_of_path(nav.shortest_path_from(self))

    def identity(self) -> GraphElement:
        return self._graph.root

    def __mul__(self, other):
        if not isinstance(other, GraphElement):
            return NotImplemented
        return self.right_product_by(other)

    def __eq__(self, other):
        if not isinstance(other, GraphElement):
            return NotImplemented
        return self._index == other._index and self._graph is other._graph

    def __hash__(self):
        return hash(self._index)

    def __repr__(self):
        return f"GraphElement({self._index})"

    def __str__(self):
        return str(self._index)


class ColorGroupGraph(ColorGraph):
    """Finished color graph on ``GraphElement`` vertices ``1..order`` with integer colors.

    This is the compact form of a Cayley color graph: the group elements are
    replaced by their breadth-first indices, colors by the labels ``1..k``, and
    group operations are recovered from the edge structure through the
    ``Navigator``. It owns a ``ShortestPathCache`` used by
    ``GraphElement.right_product_by``.

    Instances come from ``from_color_graph`` or
    ``cayleynet.io.read_color_group_graph``.
    """

    def __init__(
        self,
        order: int,
        color_involution: Mapping,
        shell_starts: Iterable[int] = (1,),
        degree: int | None = None,
    ):
        elements = [GraphElement(self, i) for i in range(1, order + 1)]
        super().__init__(
            elements[0] if elements else None,
            color_involution,
            degree=degree,
            num_vertices=order,
        )
        for e in elements[1:]:
            self._attach(e)
        self._shell_starts = list(shell_starts) if order else []
        self._path_cache = ShortestPathCache()
        self._navigator = Navigator(self)

    @classmethod
    def from_color_graph(cls, graph: ColorGraph) -> ColorGroupGraph:
        """Re-express a color graph on index vertices with integer color labels."""
        labels = graph.color_labels()
        involution = {labels[c]: labels[graph.inverse_color(c)] for c in labels}
        group = cls(
            graph.vertex_count(),
            involution,
            graph.shell_start_indices(),
            degree=graph.degree if graph.is_regular else None,
        )
        index_of = graph.index_of
        for src in graph.vertices():
            s = group.element(index_of(src))
            for color, tgt in graph.colored_neighbors(src).items():
                group._set_colored(s, labels[color], group.element(index_of(tgt)))
        group._freeze()
        return group

    @property
    def navigator(self) -> Navigator:
        return self._navigator

    @property
    def path_cache(self) -> ShortestPathCache:
        return self._path_cache

    @property
    def order(self) -> int:
        return self.vertex_count()

    def element(self, index: int) -> GraphElement:
        return self._index.element_at(index)

    def create_shortest_path_store(self, vertices: Iterable[GraphElement]) -> None:
        """Precompute and cache the shortest color word to each of ``vertices``."""
        self._path_cache.build(vertices, self._navigator.shortest_path_to)

    def clear(self) -> None:
        """Drop every cached shortest path."""
        self._path_cache.clear()

    def _set_colored(self, src: GraphElement, color, tgt: GraphElement) -> None:
        """INTERNAL: one direction ``src -(color)-> tgt``; the reverse is set separately."""
        nbrs = self._neighbors[src]
        if tgt not in nbrs:
            nbrs.append(tgt)
        self._colored[src].set(color, tgt)
        self._version += 1
