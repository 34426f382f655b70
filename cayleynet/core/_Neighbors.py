from __future__ import annotations

from collections.abc import Hashable

from ._CacheManager import CacheManager
from ._helpers import BuildState, _missing
from ._Index import VertexIndex


class NeighborGraph:
    """Undirected adjacency store: each vertex maps to its collection of neighbors.

    The graph starts in ``BuildState.BUILDING`` and is moved to
    ``BuildState.FINISHED`` exactly once by its builder. The public API here is
    read-only; mutation goes through the builders in ``cayleynet.builders``.

    Parameters
    --
    degree : int, optional
        Declared valency of every vertex. When given the graph is *regular* and,
        once finished, ``edge_count()`` is computed as ``vertex_count() * degree``
        instead of being summed.
    num_vertices : int, optional
        Expected number of vertices. Accepted for API parity with the
        builders; storage grows on demand and the value is not used.

    """

    _collection = set

    def __init__(self, degree: int | None = None, num_vertices: int = 0):
        self._neighbors: dict[Hashable, set | list] = {}
        self._degree = degree
        self._state = BuildState.BUILDING
        # bumped on every mutation; caches compare against it
        self._version = 0

    # State

    @property
    def state(self) -> BuildState:
        return self._state

    @property
    def is_finished(self) -> bool:
        return self._state is BuildState.FINISHED

    @property
    def is_regular(self) -> bool:
        """True if a fixed degree was declared at construction."""
        return self._degree is not None

    @property
    def degree(self) -> int:
        """Declared degree, or -1 when none was declared."""
        return self._degree if self._degree is not None else -1

    # Queries

    def contains_vertex(self, vertex) -> bool:
        return vertex in self._neighbors

    def has_edge(self, src, tgt) -> bool:
        """True if ``tgt`` is in the neighbor collection of ``src``."""
        nbrs = self._neighbors.get(src)
        return nbrs is not None and tgt in nbrs

    def vertex_count(self) -> int:
        return len(self._neighbors)

    def edge_count(self) -> int:
        """Number of directed adjacencies (each undirected edge counts twice)."""
        if self.is_regular and self.is_finished:
            return len(self._neighbors) * self._degree
        return sum(len(nbrs) for nbrs in self._neighbors.values())

    def vertices(self):
        """Read-only view of the vertex set."""
        return self._neighbors.keys()

    def neighbors_of(self, vertex):
        """Read-only snapshot of the neighbors of ``vertex``.

        Raises
        --
        VertexNotFoundError
            If the vertex is not in the graph.

        """
        try:
            return frozenset(self._neighbors[vertex])
        except KeyError:
            raise _missing(vertex) from None

    def __contains__(self, vertex) -> bool:
        return vertex in self._neighbors

    def __len__(self) -> int:
        return len(self._neighbors)

    def __repr__(self):
        return (
            f"{type(self).__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count() // 2}, state={self._state.value})"
        )

    # Mutation (builders only)

    def _attach(self, vertex) -> bool:
        """INTERNAL: add an isolated vertex; False if already present."""
        if vertex in self._neighbors:
            return False
        self._neighbors[vertex] = self._collection()
        self._version += 1
        return True

    def _link(self, src, tgt) -> bool:
        """INTERNAL: add the undirected edge ``src``-``tgt`` between existing vertices.

        Returns False (and changes nothing) if the edge is already present.
        """
        src_nbrs = self._neighbors[src]
        if tgt in src_nbrs:
            return False
        if isinstance(src_nbrs, set):
            src_nbrs.add(tgt)
            self._neighbors[tgt].add(src)
        else:
            src_nbrs.append(tgt)
            if src != tgt:
                self._neighbors[tgt].append(src)
        self._version += 1
        return True

    def _freeze(self) -> None:
        """INTERNAL: one-way transition to FINISHED."""
        self._state = BuildState.FINISHED
        self._version += 1


class IndexedNeighborGraph(NeighborGraph):
    """Neighbor graph whose vertices are indexed ``1..N`` in insertion order.

    Neighbor collections are lists; finishing sorts every list by index, which
    is what the shell-partition queries of ``ShellIndexedGraph`` rely on.
    """

    _collection = list

    def __init__(self, degree: int | None = None, num_vertices: int = 0):
        super().__init__(degree=degree, num_vertices=num_vertices)
        self._index = VertexIndex()
        self._cache = CacheManager(self)

    @property
    def index(self) -> VertexIndex:
        """The vertex↔index table (read it, don't mutate it)."""
        return self._index

    @property
    def cache(self) -> CacheManager:
        """Materialized numeric views (CSR adjacency, degree vector)."""
        return self._cache

    def index_of(self, vertex) -> int:
        return self._index.index_of(vertex)

    def element_at(self, index: int):
        return self._index.element_at(index)

    def elements_in_range(self, lo: int, hi: int) -> list:
        return self._index.elements_in_range(lo, hi)

    def vertices(self):
        """Vertices in index order."""
        return self._neighbors.keys()

    def neighbors_of(self, vertex) -> tuple:
        """Neighbors of ``vertex``; sorted by index once the graph is finished."""
        try:
            return tuple(self._neighbors[vertex])
        except KeyError:
            raise _missing(vertex) from None

    def adjacency_matrix(self):
        """SciPy CSR adjacency matrix; row/column ``i - 1`` is the vertex with index ``i``."""
        return self._cache.adjacency

    def _attach(self, vertex) -> bool:
        if not super()._attach(vertex):
            return False
        self._index.add(vertex)
        return True

    def _sort_neighbors(self, vertex) -> list:
        nbrs = self._neighbors[vertex]
        nbrs.sort(key=self._index.index_of)
        return nbrs

    def _freeze(self) -> None:
        key = self._index.index_of
        for nbrs in self._neighbors.values():
            nbrs.sort(key=key)
        super()._freeze()
