from __future__ import annotations

import warnings
from bisect import bisect_left, bisect_right

import numpy as np

from ._helpers import IndexOutOfRangeError, UnfinishedGraphWarning
from ._Neighbors import IndexedNeighborGraph


class ShellIndexedGraph(IndexedNeighborGraph):
    """Rooted indexed graph whose vertices are grouped into breadth-first shells.

    Shell ``d`` is the set of vertices at distance ``d`` from the root. Because
    vertices are indexed in breadth-first order, every shell is a contiguous
    index interval; ``_shell_starts[d]`` is the first index of shell ``d`` (the
    root is index 1, shell 0).

    Every neighbor of a shell-``d`` vertex lies in shell ``d - 1``, ``d`` or
    ``d + 1``, so a neighbor list sorted by index splits into three contiguous
    runs. The ``neighbors_in_*_shell`` queries locate the split points by
    binary search for the start indices of shells ``d`` and ``d + 1``.

    Parameters
    --
    root : hashable
        The root vertex; it receives index 1. ``None`` gives an empty graph
        with no shells.
    degree : int, optional
        Declared valency (regular graph).
    num_vertices : int, optional
        Expected number of vertices; accepted for API parity, not used.

    """

    def __init__(self, root, degree: int | None = None, num_vertices: int = 0):
        super().__init__(degree=degree, num_vertices=num_vertices)
        self._root = root
        self._shell_starts: list[int] = []
        if root is not None:
            self._shell_starts.append(1)
            self._attach(root)

    @property
    def root(self):
        return self._root

    # Shells

    def distance_from_root(self, vertex) -> int:
        """Shell number of ``vertex``.

        Raises
        --
        VertexNotFoundError
            If the vertex is not in the graph.

        """
        idx = self._index.index_of(vertex)
        return bisect_right(self._shell_starts, idx) - 1

    def max_distance_from_root(self) -> int:
        return len(self._shell_starts) - 1

    def shell_start_index(self, d: int) -> int:
        """Index of the first vertex of shell ``d``."""
        if not 0 <= d < len(self._shell_starts):
            raise IndexOutOfRangeError(
                f"shell {d} outside [0, {self.max_distance_from_root()}]"
            )
        return self._shell_starts[d]

    def _shell_end_index(self, d: int) -> int:
        if d + 1 < len(self._shell_starts):
            return self._shell_starts[d + 1] - 1
        return len(self._index)

    def shell(self, d: int) -> list:
        """Vertices of shell ``d`` in index order (empty if ``d`` is out of range)."""
        if not 0 <= d < len(self._shell_starts):
            return []
        return self._index.elements_in_range(self._shell_starts[d], self._shell_end_index(d))

    def shell_sizes(self) -> np.ndarray:
        """Sizes of shells ``0..max_distance_from_root()``."""
        bounds = np.asarray(self._shell_starts + [len(self._index) + 1], dtype=np.int64)
        return np.diff(bounds)

    def shell_start_indices(self) -> tuple[int, ...]:
        return tuple(self._shell_starts)

    # Shell partition of neighbor lists

    def _sorted_neighbors(self, vertex) -> list:
        if self.is_finished:
            return self._neighbors[vertex]
        warnings.warn(
            "shell partition queried before finish(); sorting this neighbor list on demand",
            UnfinishedGraphWarning,
            stacklevel=4,
        )
        return self._sort_neighbors(vertex)

    def _partition(self, vertex):
        d = self.distance_from_root(vertex)
        nbrs = self._sorted_neighbors(vertex)
        key = self._index.index_of
        lo = bisect_left(nbrs, self._shell_starts[d], key=key)
        if d == self.max_distance_from_root():
            hi = len(nbrs)
        else:
            hi = bisect_left(nbrs, self._shell_starts[d + 1], lo=lo, key=key)
        return nbrs, lo, hi

    def neighbors_in_previous_shell(self, vertex) -> tuple:
        nbrs, lo, _ = self._partition(vertex)
        return tuple(nbrs[:lo])

    def neighbors_in_same_shell(self, vertex) -> tuple:
        nbrs, lo, hi = self._partition(vertex)
        return tuple(nbrs[lo:hi])

    def neighbors_in_next_shell(self, vertex) -> tuple:
        nbrs, _, hi = self._partition(vertex)
        return tuple(nbrs[hi:])

    # Mutation (builders only)

    def _open_shell(self, start_index: int) -> None:
        self._shell_starts.append(start_index)
        self._version += 1

    @classmethod
    def _from_adjacency(cls, order: int, adjacency, shell_starts):
        """INTERNAL: finished graph on vertices ``1..order`` from index adjacency.

        ``adjacency`` maps each index to an iterable of neighbor indices and
        ``shell_starts`` lists the first index of every shell (starting with 1).
        """
        graph = cls(1 if order else None, num_vertices=order)
        for i in range(2, order + 1):
            graph._attach(i)
        for i, nbrs in adjacency.items():
            for j in nbrs:
                graph._link(i, j)
        graph._shell_starts = list(shell_starts)
        graph._freeze()
        return graph
