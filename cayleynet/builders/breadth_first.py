from __future__ import annotations

from collections.abc import Mapping

from ..core._ColorGraph import ColorGraph
from ..core._Shells import ShellIndexedGraph

# where an accepted edge puts its target
_EXISTING = 0
_CURRENT_SHELL = 1
_NEW_SHELL = 2


class _BreadthFirstDiscipline:
    """Shared admission rule of the breadth-first builders.

    With ``D`` the current diameter (the largest shell number so far), an edge
    ``src -> tgt`` is admitted only if

    - ``src`` is already in the graph at distance ``D - 1`` or ``D``;
    - a new ``tgt`` reached from shell ``D - 1`` joins shell ``D``;
    - a new ``tgt`` reached from shell ``D`` opens shell ``D + 1``;
    - an existing ``tgt`` lies at most one shell away from ``src`` and the
      edge is not already present.

    Anything else is rejected with ``False``; the graph is left unchanged.
    """

    _graph: ShellIndexedGraph

    def _init_discipline(self) -> None:
        self._diameter = 0
        self._rejected = 0

    @property
    def graph(self):
        """The graph under construction (read-only API)."""
        return self._graph

    @property
    def diameter(self) -> int:
        """Largest shell number opened so far."""
        return self._diameter

    @property
    def rejected(self) -> int:
        """Number of ``join`` calls refused so far."""
        return self._rejected

    def _reject(self) -> bool:
        self._rejected += 1
        return False

    def _placement(self, src, tgt):
        g = self._graph
        if g.is_finished or not g.contains_vertex(src):
            return None
        d_src = g.distance_from_root(src)
        if d_src < self._diameter - 1:
            return None
        if g.contains_vertex(tgt):
            if abs(g.distance_from_root(tgt) - d_src) > 1 or g.has_edge(src, tgt):
                return None
            return _EXISTING
        if d_src == self._diameter - 1:
            return _CURRENT_SHELL
        return _NEW_SHELL

    def _place(self, tgt, placement) -> None:
        if placement == _EXISTING:
            return
        self._graph._attach(tgt)
        if placement == _NEW_SHELL:
            self._diameter += 1
            self._graph._open_shell(self._graph.index_of(tgt))

    def finish(self):
        """Freeze the graph (sorting neighbor lists) and return it."""
        if not self._graph.is_finished:
            self._graph._freeze()
        return self._graph


class BreadthFirstGraphBuilder(_BreadthFirstDiscipline):
    """Grows a ``ShellIndexedGraph`` outward from ``root`` one shell at a time.

    Vertices enter only as the target of an accepted ``join``, so indices are
    assigned in breadth-first order and every shell is an index interval.

    Parameters
    --
    root : hashable
        Root vertex; index 1, shell 0.
    degree : int, optional
        Declared valency (regular graph).
    num_vertices : int, optional
        Expected number of vertices; accepted for API parity, not used.

    Examples
    --
    >>> b = BreadthFirstGraphBuilder("r")
    >>> b.join("r", "a"), b.join("a", "b"), b.join("r", "c")
    (True, True, False)

    """

    def __init__(self, root, degree: int | None = None, num_vertices: int = 0):
        self._graph = ShellIndexedGraph(root, degree=degree, num_vertices=num_vertices)
        self._init_discipline()

    def join(self, src, tgt) -> bool:
        """Add the edge ``src``-``tgt`` if the breadth-first order allows it."""
        placement = self._placement(src, tgt)
        if placement is None:
            return self._reject()
        self._place(tgt, placement)
        self._graph._link(src, tgt)
        return True


class ColorGraphBuilder(_BreadthFirstDiscipline):
    """Breadth-first builder of a ``ColorGraph``.

    ``join(src, tgt, color)`` adds ``src -(color)-> tgt`` together with
    ``tgt -(inverse color)-> src``. On top of the breadth-first rule it
    refuses colors missing from the involution table, a color already used at
    ``src``, and an inverse color already leading elsewhere from ``tgt``.

    Parameters
    --
    root : hashable
        Root vertex (usually the group identity).
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
        self._graph = ColorGraph(
            root, color_involution, degree=degree, num_vertices=num_vertices
        )
        self._init_discipline()

    def _color_conflict(self, src, tgt, color) -> bool:
        g = self._graph
        if color not in g.color_set():
            return True
        if g.neighbor(src, color) is not None:
            return True
        if g.contains_vertex(tgt):
            back = g.neighbor(tgt, g.inverse_color(color))
            return back is not None and back != src
        return False

    def join(self, src, tgt, color) -> bool:
        """Add the colored edge if both the breadth-first and color rules allow it."""
        placement = self._placement(src, tgt)
        if placement is None or self._color_conflict(src, tgt, color):
            return self._reject()
        self._place(tgt, placement)
        return self._graph._link_colored(src, tgt, color)
