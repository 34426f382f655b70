from __future__ import annotations

from collections.abc import Hashable, Mapping
from types import MappingProxyType

from ._helpers import _missing
from ._Shells import ShellIndexedGraph


class ColorCorrespondence:
    """Two-way map between the colors at a vertex and the neighbors they lead to."""

    __slots__ = ("_by_color", "_by_neighbor")

    def __init__(self):
        self._by_color: dict[Hashable, Hashable] = {}
        self._by_neighbor: dict[Hashable, Hashable] = {}

    def set(self, color, neighbor) -> None:
        self._by_color[color] = neighbor
        self._by_neighbor[neighbor] = color

    def target(self, color):
        """Neighbor reached along ``color`` (None if the color is unused here)."""
        return self._by_color.get(color)

    def color_of(self, neighbor):
        """Color of the edge to ``neighbor`` (None if not adjacent)."""
        return self._by_neighbor.get(neighbor)

    def colors(self):
        return self._by_color.keys()

    def neighbors(self):
        return self._by_neighbor.keys()

    def contains_color(self, color) -> bool:
        return color in self._by_color

    def contains_neighbor(self, neighbor) -> bool:
        return neighbor in self._by_neighbor

    def as_mapping(self) -> Mapping:
        """Read-only ``color -> neighbor`` view."""
        return MappingProxyType(self._by_color)

    def __len__(self) -> int:
        return len(self._by_color)

    def __repr__(self):
        return f"ColorCorrespondence({self._by_color!r})"


class ColorGraph(ShellIndexedGraph):
    """Shell-indexed graph whose directed edges carry colors.

    An edge ``u -> v`` colored ``c`` always comes with ``v -> u`` colored
    ``inverse_color(c)``. The color involution is supplied by the caller and is
    trusted: it is not checked to be self-inverse.

    In a Cayley graph the colors are the generators, and walking an edge of
    color ``s`` from ``g`` reaches ``g * s``.

    Parameters
    --
    root : hashable
        Root vertex (index 1).
    color_involution : Mapping
        Total map ``color -> inverse color``.
    degree : int, optional
        Declared valency (regular graph).
    num_vertices : int, optional
        Expected number of vertices; accepted for API parity, not used.

    """

    def __init__(
        self,
        root,
        color_involution: Mapping,
        degree: int | None = None,
        num_vertices: int = 0,
    ):
        self._involution = dict(color_involution)
        self._colored: dict[Hashable, ColorCorrespondence] = {}
        super().__init__(root, degree=degree, num_vertices=num_vertices)

    # Colors

    def color_set(self):
        """Read-only view of all colors of the involution table."""
        return self._involution.keys()

    def color_involution(self) -> Mapping:
        return MappingProxyType(self._involution)

    def inverse_color(self, color):
        try:
            return self._involution[color]
        except KeyError:
            raise KeyError(f"color {color!r} not in the involution table") from None

    def neighbor(self, vertex, color):
        """Vertex reached from ``vertex`` along ``color`` (None if that color is unused there)."""
        try:
            return self._colored[vertex].target(color)
        except KeyError:
            raise _missing(vertex) from None

    def edge_color(self, src, tgt):
        """Color of the edge ``src -> tgt`` (None if they are not adjacent)."""
        try:
            return self._colored[src].color_of(tgt)
        except KeyError:
            raise _missing(src) from None

    def colored_neighbors(self, vertex) -> Mapping:
        """Read-only ``color -> neighbor`` mapping at ``vertex``."""
        try:
            return self._colored[vertex].as_mapping()
        except KeyError:
            raise _missing(vertex) from None

    def color_labels(self) -> dict:
        """Number the colors ``1..k``.

        Colors are ordered by the index of the root's neighbor along each color,
        which makes the labels of a Cayley graph match the indices of the
        generators in shell 1. Colors unused at the root follow, in involution
        table order.
        """
        if self._root is None:
            return {c: i for i, c in enumerate(self._involution, start=1)}
        at_root = self._colored[self._root]
        present = sorted(
            (c for c in self._involution if at_root.contains_color(c)),
            key=lambda c: self._index.index_of(at_root.target(c)),
        )
        absent = [c for c in self._involution if not at_root.contains_color(c)]
        return {c: i for i, c in enumerate(present + absent, start=1)}

    # Mutation (builders only)

    def _attach(self, vertex) -> bool:
        if not super()._attach(vertex):
            return False
        self._colored[vertex] = ColorCorrespondence()
        return True

    def _link_colored(self, src, tgt, color) -> bool:
        """INTERNAL: add ``src -(color)-> tgt`` and ``tgt -(inv color)-> src``."""
        inv = self._involution[color]
        src_map = self._colored[src]
        tgt_map = self._colored[tgt]
        if src_map.contains_neighbor(tgt) or src_map.contains_color(color):
            return False
        if tgt_map.contains_color(inv) and tgt_map.target(inv) != src:
            return False
        self._link(src, tgt)
        src_map.set(color, tgt)
        tgt_map.set(inv, src)
        return True
