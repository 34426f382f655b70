"""Plain-text sparse adjacency format.

One line per directed adjacency::

    <fromIndex> <toIndex> <label>

whitespace separated, grouped by ascending ``fromIndex``. Indices are the
1-based vertex indices of the graph. Unlabeled graphs use the label ``1`` on
every line; color graphs use color labels ``1..k``.

Reading recovers everything else from the lines alone:

- the order is the largest index mentioned;
- a vertex opens a new shell when none of its neighbors lies below the start
  of the current shell (breadth-first indexing makes this exact);
- the inverse of label ``c`` is the label on the reverse edge.

A line that is not exactly three positive integers makes the whole read come
back empty with a ``MalformedSparseFileWarning``; pass ``strict=True`` to get a
``ValueError`` instead.
Color files are held to the same rule when a vertex uses a label twice or an
edge has no reverse edge.

The companion vertex-collection file lists a subset of indices::

    ORIGIN: <source>
    ORDER: <group order>
    <index>
    ...
"""

from __future__ import annotations

import warnings
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import NamedTuple

from ..core._ColorGroup import ColorGroupGraph, GraphElement
from ..core._helpers import MalformedSparseFileWarning
from ..core._Shells import ShellIndexedGraph

UNLABELED = 1


class VertexCollection(NamedTuple):
    source: str
    order: int
    indices: list[int]


# ---------------------------
# Writing
# ---------------------------


def write_sparse_graph(graph, path) -> None:
    """Write an indexed graph; every line carries the label 1."""
    index_of = graph.index_of
    with open(path, "w", encoding="utf-8") as f:
        for src in graph.vertices():
            i = index_of(src)
            for j in sorted(index_of(t) for t in graph.neighbors_of(src)):
                f.write(f"{i} {j} {UNLABELED}\n")


def write_sparse_color_graph(graph, path) -> None:
    """Write a color graph with its colors relabeled ``1..k``.

    Labels follow ``graph.color_labels()``: colors are numbered by the index of
    the root's neighbor along them. Lines of a vertex are sorted by label.
    """
    labels = graph.color_labels()
    index_of = graph.index_of
    with open(path, "w", encoding="utf-8") as f:
        for src in graph.vertices():
            i = index_of(src)
            rows = sorted(
                (labels[color], index_of(tgt))
                for color, tgt in graph.colored_neighbors(src).items()
            )
            for label, j in rows:
                f.write(f"{i} {j} {label}\n")


def write_indexed_elements(
    graph,
    path,
    header: str | None = None,
    to_str: Callable[[object], str] = str,
) -> None:
    """Write the vertex at index 1, 2, ... one per line, after an optional header."""
    with open(path, "w", encoding="utf-8") as f:
        if header is not None:
            f.write(f"{header}\n")
        for v in graph.vertices():
            f.write(f"{to_str(v)}\n")


def write_vertex_collection(path, vertices: Iterable, order: int, source: str = "") -> None:
    """Write ``ORIGIN``/``ORDER`` headers and one vertex index per line.

    ``vertices`` may hold plain indices or ``GraphElement`` objects.
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write(f"ORIGIN: {source}\n")
        f.write(f"ORDER: {order}\n")
        for v in vertices:
            idx = v.index if isinstance(v, GraphElement) else int(v)
            f.write(f"{idx}\n")


def read_vertex_collection(path) -> VertexCollection:
    """Parse a file written by ``write_vertex_collection``.

    Raises
    --
    ValueError
        If a header is missing or an index line is not an integer.

    """
    with open(path, encoding="utf-8") as f:
        lines = [ln.strip() for ln in f if ln.strip()]
    if len(lines) < 2 or not lines[0].startswith("ORIGIN:") or not lines[1].startswith("ORDER:"):
        raise ValueError(f"{path}: expected 'ORIGIN:' and 'ORDER:' header lines")
    source = lines[0][len("ORIGIN:") :].strip()
    try:
        order = int(lines[1][len("ORDER:") :])
        indices = [int(ln) for ln in lines[2:]]
    except ValueError as e:
        raise ValueError(f"{path}: {e}") from None
    return VertexCollection(source, order, indices)


# ---------------------------
# Reading
# ---------------------------


def _reject(msg: str, strict: bool) -> None:
    if strict:
        raise ValueError(msg)
    warnings.warn(
        f"{msg}; returning an empty graph",
        MalformedSparseFileWarning,
        stacklevel=4,
    )


def _parse_triples(path, strict: bool):
    """Return the list of ``(from, to, label)`` triples, or None if malformed."""
    triples = []
    with open(path, encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            parts = line.split()
            if not parts:
                continue
            triple = None
            if len(parts) == 3:
                try:
                    triple = tuple(int(p) for p in parts)
                except ValueError:
                    triple = None
            if triple is None or triple[0] < 1 or triple[1] < 1:
                _reject(
                    f"{Path(path).name}, line {lineno}: expected three integers, "
                    f"got {line.rstrip()!r}",
                    strict,
                )
                return None
            triples.append(triple)
    return triples


def _group_rows(triples) -> tuple[int, dict[int, list[tuple[int, int]]]]:
    order = 0
    rows: dict[int, list[tuple[int, int]]] = {}
    for i, j, label in triples:
        rows.setdefault(i, []).append((j, label))
        order = max(order, i, j)
    return order, rows


def _detect_shell_starts(order: int, rows) -> list[int]:
    if order == 0:
        return []
    starts = [1]
    for v in range(2, order + 1):
        current = starts[-1]
        if all(j >= current for j, _ in rows.get(v, ())):
            starts.append(v)
    return starts


def read_sparse_graph(path, strict: bool = False) -> ShellIndexedGraph:
    """Read a sparse-adjacency file into a finished ``ShellIndexedGraph`` on ``1..N``.

    Labels are ignored.
    """
    triples = _parse_triples(path, strict)
    if triples is None:
        return ShellIndexedGraph._from_adjacency(0, {}, [])
    order, rows = _group_rows(triples)
    adjacency = {i: [j for j, _ in nbrs] for i, nbrs in rows.items()}
    return ShellIndexedGraph._from_adjacency(order, adjacency, _detect_shell_starts(order, rows))


def _label_involution(rows, path, strict: bool):
    labels_at = {i: {j: label for j, label in nbrs} for i, nbrs in rows.items()}
    involution = {}
    for i, nbrs in rows.items():
        seen = set()
        for j, label in nbrs:
            if label in seen:
                _reject(f"{Path(path).name}: vertex {i} uses label {label} twice", strict)
                return None
            seen.add(label)
            back = labels_at.get(j, {}).get(i)
            if back is None:
                _reject(f"{Path(path).name}: edge {i} -> {j} has no reverse edge", strict)
                return None
            involution.setdefault(label, back)
    return involution


def read_color_group_graph(path, strict: bool = False) -> ColorGroupGraph:
    """Read a color sparse-adjacency file into a finished ``ColorGroupGraph``.

    The color involution is recovered from reverse edges, and vertices become
    ``GraphElement`` objects addressable by index.
    """
    triples = _parse_triples(path, strict)
    if triples is None:
        return _empty_group()
    order, rows = _group_rows(triples)
    involution = _label_involution(rows, path, strict)
    if involution is None:
        return _empty_group()
    k = len(involution)
    regular = order > 0 and all(len(rows.get(i, ())) == k for i in range(1, order + 1))
    group = ColorGroupGraph(
        order,
        involution,
        _detect_shell_starts(order, rows),
        degree=k if regular else None,
    )
    element = group.element
    for i, nbrs in rows.items():
        src = element(i)
        for j, label in nbrs:
            group._set_colored(src, label, element(j))
    group._freeze()
    return group


def _empty_group() -> ColorGroupGraph:
    group = ColorGroupGraph(0, {}, ())
    group._freeze()
    return group
