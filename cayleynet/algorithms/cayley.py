"""Breadth-first construction of Cayley graphs and Cayley color graphs.

Group elements are anything implementing ``GroupElement``: hashable values with
``right_product_by``, ``left_product_by``, ``inverse`` and ``identity``.
Starting from the identity, the graph is grown one shell at a time: every
element ``g`` of the current shell is joined to ``g * s`` for each generator
``s``. Products already in the graph become edges, new ones become the next
shell.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol, runtime_checkable

from ..builders.breadth_first import BreadthFirstGraphBuilder, ColorGraphBuilder
from ..builders.unordered import IndexedNeighborGraphBuilder, NeighborGraphBuilder

PROGRESS_EVERY = 100

_BUILDERS = {
    "breadth_first": BreadthFirstGraphBuilder,
    "indexed": IndexedNeighborGraphBuilder,
    "unordered": NeighborGraphBuilder,
}


@runtime_checkable
class GroupElement(Protocol):
    def right_product_by(self, other): ...

    def left_product_by(self, other): ...

    def inverse(self): ...

    def identity(self): ...

    def __hash__(self) -> int: ...


ProgressCallback = Callable[[str, int], None]


def _unique(generators: Iterable) -> list:
    gens = list(dict.fromkeys(generators))
    if not gens:
        raise ValueError("at least one generator is required")
    return gens


def _expand(root, gens, join, contains, on_progress: ProgressCallback | None):
    """Grow shell by shell from ``root``; ``join(g, h, s)`` adds one edge."""
    shell = [root]
    seen = 1
    d = 0
    while shell:
        nxt = []
        for g in shell:
            for s in gens:
                h = g.right_product_by(s)
                new = not contains(h)
                if join(g, h, s) and new:
                    nxt.append(h)
                    seen += 1
                    if on_progress is not None and seen % PROGRESS_EVERY == 0:
                        on_progress("vertex_progress", seen)
        if on_progress is not None:
            on_progress("shell_complete", d)
        shell = nxt
        d += 1


def cayley_graph(
    generators: Iterable,
    root=None,
    kind: str = "breadth_first",
    degree: int | None = None,
    on_progress: ProgressCallback | None = None,
):
    """Undirected Cayley graph of the group generated by ``generators``.

    Parameters
    --
    generators : iterable of GroupElement
        Generating set; duplicates are ignored. Missing inverses are added,
        as the graph is undirected.
    root : GroupElement, optional
        Vertex to grow from; defaults to the identity of the first generator.
    kind : {"breadth_first", "indexed", "unordered"}
        Builder to use. ``"breadth_first"`` yields a ``ShellIndexedGraph``;
        ``"indexed"`` an ``IndexedNeighborGraph`` in breadth-first insertion
        order; ``"unordered"`` a set-based ``NeighborGraph``.
    degree : int, optional
        Declared valency, passed to the builder.
    on_progress : callable, optional
        Called as ``on_progress("vertex_progress", n)`` every 100 vertices and
        ``on_progress("shell_complete", d)`` after each shell.

    Returns
    ---
    NeighborGraph
        The finished graph.

    Raises
    --
    ValueError
        If ``kind`` is unknown or no generator is given.

    """
    try:
        builder_type = _BUILDERS[kind]
    except KeyError:
        raise ValueError(
            f"unknown builder kind {kind!r}; expected one of {sorted(_BUILDERS)}"
        ) from None
    gens = _unique(generators)
    gens = _unique(gens + [s.inverse() for s in gens])
    if root is None:
        root = gens[0].identity()
    if builder_type is BreadthFirstGraphBuilder:
        builder = builder_type(root, degree=degree)
    else:
        builder = builder_type(degree=degree)
        builder.add_vertex(root)
    graph = builder.graph
    _expand(
        root,
        gens,
        lambda g, h, s: builder.join(g, h),
        graph.contains_vertex,
        on_progress,
    )
    return builder.finish()


def cayley_color_graph(
    generators: Iterable,
    root=None,
    on_progress: ProgressCallback | None = None,
):
    """Cayley color graph: the edge ``g -> g * s`` is colored by the generator ``s``.

    The generating set must be closed under inverses; the color involution is
    ``s -> s.inverse()``.

    Returns
    ---
    ColorGraph
        The finished color graph, regular of degree ``len(generators)``.

    Raises
    --
    ValueError
        If the inverse of some generator is not a generator.

    """
    gens = _unique(generators)
    involution = {}
    for s in gens:
        inv = s.inverse()
        if inv not in gens:
            raise ValueError(f"inverse of generator {s!r} is not among the generators")
        involution[s] = inv
    if root is None:
        root = gens[0].identity()
    builder = ColorGraphBuilder(root, involution, degree=len(gens))
    _expand(root, gens, builder.join, builder.graph.contains_vertex, on_progress)
    return builder.finish()
