from __future__ import annotations

from collections.abc import Hashable, Iterator

from ._helpers import IndexOutOfRangeError, _missing


class VertexIndex:
    """Insertion-ordered bijection between vertices and the integers ``1..N``.

    Indices are permanent: there is no removal. The first vertex added gets
    index 1.
    """

    __slots__ = ("_vertex_to_idx", "_idx_to_vertex")

    def __init__(self):
        self._vertex_to_idx: dict[Hashable, int] = {}
        self._idx_to_vertex: list[Hashable] = []

    def add(self, vertex: Hashable) -> bool:
        """Assign the next index to ``vertex`` if it is new.

        Returns
        ---
        bool
            True if the vertex was newly indexed.

        """
        if vertex in self._vertex_to_idx:
            return False
        self._idx_to_vertex.append(vertex)
        self._vertex_to_idx[vertex] = len(self._idx_to_vertex)
        return True

    def index_of(self, vertex: Hashable) -> int:
        """Map a vertex to its index."""
        try:
            return self._vertex_to_idx[vertex]
        except KeyError:
            raise _missing(vertex) from None

    def element_at(self, index: int):
        """Map an index in ``[1, size]`` to its vertex."""
        if not 1 <= index <= len(self._idx_to_vertex):
            raise IndexOutOfRangeError(
                f"index {index} outside [1, {len(self._idx_to_vertex)}]"
            )
        return self._idx_to_vertex[index - 1]

    def elements_in_range(self, lo: int, hi: int) -> list:
        """Vertices with index in ``[lo, hi]`` (both inclusive), in index order."""
        if lo > hi:
            return []
        size = len(self._idx_to_vertex)
        if lo < 1 or hi > size:
            raise IndexOutOfRangeError(f"range [{lo}, {hi}] outside [1, {size}]")
        return self._idx_to_vertex[lo - 1 : hi]

    def indices_of(self, vertices) -> list[int]:
        """Batch convert vertices to indices."""
        return [self.index_of(v) for v in vertices]

    def elements_at(self, indices) -> list:
        """Batch convert indices to vertices."""
        return [self.element_at(i) for i in indices]

    def __contains__(self, vertex) -> bool:
        return vertex in self._vertex_to_idx

    def __len__(self) -> int:
        return len(self._idx_to_vertex)

    def __iter__(self) -> Iterator:
        return iter(self._idx_to_vertex)

    def __repr__(self):
        return f"VertexIndex(size={len(self)})"
