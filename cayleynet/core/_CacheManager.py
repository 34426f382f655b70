from __future__ import annotations

import numpy as np
import scipy.sparse as sp


class CacheManager:
    """Cache manager for materialized numeric views of an indexed graph."""

    def __init__(self, graph):
        self._G = graph
        self._adjacency = None
        self._degrees = None
        self._adjacency_version = None
        self._degrees_version = None

    # ==================== Materialized views ====================

    @property
    def adjacency(self):
        """Get the CSR (Compressed Sparse Row) adjacency matrix.
        Builds and caches on first access.
        """
        if self._adjacency is None or self._adjacency_version != self._G._version:
            self._adjacency = self._build_adjacency()
            self._adjacency_version = self._G._version
        return self._adjacency

    @property
    def degrees(self):
        """Get the degree vector (entry ``i - 1`` is the degree of index ``i``)."""
        if self._degrees is None or self._degrees_version != self._G._version:
            self._degrees = np.fromiter(
                (len(nbrs) for nbrs in self._G._neighbors.values()),
                dtype=np.int64,
                count=len(self._G._neighbors),
            )
            self._degrees_version = self._G._version
        return self._degrees

    def _build_adjacency(self):
        G = self._G
        n = len(G._neighbors)
        index_of = G._index.index_of
        indptr = np.zeros(n + 1, dtype=np.int64)
        cols = []
        # _neighbors is in index order, so rows come out in order
        for row, nbrs in enumerate(G._neighbors.values()):
            row_cols = sorted(index_of(t) - 1 for t in nbrs)
            cols.extend(row_cols)
            indptr[row + 1] = indptr[row] + len(row_cols)
        indices = np.asarray(cols, dtype=np.int64)
        data = np.ones(len(indices), dtype=np.int8)
        return sp.csr_matrix((data, indices, indptr), shape=(n, n))

    def has_adjacency(self) -> bool:
        """True if adjacency cache exists and matches current graph version."""
        return self._adjacency is not None and self._adjacency_version == self._G._version

    def has_degrees(self) -> bool:
        """True if degree cache exists and matches current graph version."""
        return self._degrees is not None and self._degrees_version == self._G._version

    # ==================== Cache Management ====================

    def invalidate(self, formats=None):
        """Invalidate cached formats.

        Parameters
        --
        formats : list[str], optional
            Formats to invalidate ('adjacency', 'degrees').
            If None, invalidate all.

        """
        if formats is None:
            formats = ["adjacency", "degrees"]

        for fmt in formats:
            if fmt == "adjacency":
                self._adjacency = None
                self._adjacency_version = None
            elif fmt == "degrees":
                self._degrees = None
                self._degrees_version = None

    def build(self, formats=None):
        """Pre-build specified formats (eager caching)."""
        if formats is None:
            formats = ["adjacency", "degrees"]

        for fmt in formats:
            if fmt == "adjacency":
                _ = self.adjacency
            elif fmt == "degrees":
                _ = self.degrees

    def clear(self):
        """Clear all caches."""
        self.invalidate()

    def info(self):
        """Get cache status and memory usage.

        Returns
        ---
        dict
            Status of each cached format

        """
        adj = self._adjacency
        if adj is None:
            adj_info = {"cached": False}
        else:
            size_bytes = adj.data.nbytes + adj.indices.nbytes + adj.indptr.nbytes
            adj_info = {
                "cached": True,
                "version": self._adjacency_version,
                "size_mb": size_bytes / (1024**2),
                "nnz": adj.nnz,
                "shape": adj.shape,
            }
        deg = self._degrees
        deg_info = (
            {"cached": False}
            if deg is None
            else {"cached": True, "version": self._degrees_version, "size_mb": deg.nbytes / (1024**2)}
        )
        return {"adjacency": adj_info, "degrees": deg_info}
