from __future__ import annotations

import numpy as np
import polars as pl

from ..core._Shells import ShellIndexedGraph


class ShellExpansionAnalyzer:
    """Radial statistics of a finished ``ShellIndexedGraph``.

    ``generate_data()`` computes, shell by shell:

    - ``s_n[i]``: number of vertices at distance ``i``;
    - ``e_n[i]``: number of edges joining shells ``i - 1`` and ``i``
      (``e_n[0] == 0``);
    - ``t_n[i]``: number of edges with both endpoints in shell ``i``.

    and from those the diameter (largest shell number), average distance from
    the root, bipartiteness and girth. For vertex-transitive graphs such as
    Cayley graphs these do not depend on the root, and the girth found at the
    root is the girth of the graph. Girth 0 means no cycle was found.

    Parameters
    --
    graph : ShellIndexedGraph
        Finished graph to analyze.

    """

    def __init__(self, graph: ShellIndexedGraph):
        self.graph = graph
        self._generated = False

    def generate_data(self) -> None:
        """Walk the shells once and compute every statistic."""
        g = self.graph
        diameter = g.max_distance_from_root()
        n_shells = diameter + 1
        s_n = np.zeros(n_shells, dtype=np.int64)
        e_n = np.zeros(n_shells, dtype=np.int64)
        t_n = np.zeros(n_shells, dtype=np.int64)

        for i in range(n_shells):
            shell = g.shell(i)
            s_n[i] = len(shell)
            out_edges = 0
            tangential = 0
            for v in shell:
                out_edges += len(g.neighbors_in_next_shell(v))
                tangential += len(g.neighbors_in_same_shell(v))
            if i + 1 < n_shells:
                e_n[i + 1] = out_edges
            t_n[i] = tangential // 2

        girth = 0
        for i in range(n_shells):
            if t_n[i] > 0:
                girth = 2 * i + 1
                break
            if i > 0 and e_n[i] != s_n[i]:
                girth = 2 * i
                break

        self.num_vertices = g.vertex_count()
        self.num_edges = g.edge_count() // 2
        self.diameter = diameter if g.vertex_count() else 0
        self.s_n = s_n
        self.e_n = e_n
        self.t_n = t_n
        self.bipartite = bool((t_n == 0).all())
        self.girth = girth
        total = int(s_n.sum())
        self.avg_dist = float(np.dot(np.arange(n_shells), s_n) / total) if total else 0.0
        self._generated = True

    def _require_data(self):
        if not self._generated:
            raise RuntimeError("call generate_data() first")

    @property
    def root_degree(self) -> int:
        """Number of neighbors of the root (the degree of a vertex-transitive graph)."""
        self._require_data()
        if self.num_vertices == 0:
            return 0
        if self.diameter > 0:
            return int(self.s_n[1])
        return int(self.t_n[0])

    # ==================== Tables ====================

    def basic_table(self) -> pl.DataFrame:
        """Single-row summary: vertices, edges, bipartite, avg_dist, diameter, girth."""
        self._require_data()
        return pl.DataFrame(
            {
                "vertices": [self.num_vertices],
                "edges": [self.num_edges],
                "bipartite": [self.bipartite],
                "avg_dist": [self.avg_dist],
                "diameter": [self.diameter],
                "girth": [self.girth],
            }
        )

    def vertex_shell_table(self) -> pl.DataFrame:
        """One row per shell ``n``: its size and the growth ratio ``|S(n)| / |S(n-1)|``."""
        self._require_data()
        sizes = self.s_n.tolist()
        growth = [None] + [sizes[i] / sizes[i - 1] for i in range(1, len(sizes))]
        return pl.DataFrame(
            {"n": list(range(len(sizes))), "size": sizes, "growth": growth},
            schema={"n": pl.Int64, "size": pl.Int64, "growth": pl.Float64},
        )

    def edge_table(self) -> pl.DataFrame:
        """One row per shell ``n >= 1``.

        Columns: ``edges`` (joining shells ``n - 1`` and ``n``), ``growth``
        (``edges`` over the previous row's, null for ``n = 1``),
        ``tangential`` and ``edges_per_vertex`` (``edges / |S(n)|``).
        """
        self._require_data()
        e = self.e_n.tolist()
        s = self.s_n.tolist()
        t = self.t_n.tolist()
        rows = range(1, self.diameter + 1)
        return pl.DataFrame(
            {
                "n": list(rows),
                "edges": [e[i] for i in rows],
                "growth": [None if i == 1 else e[i] / e[i - 1] for i in rows],
                "tangential": [t[i] for i in rows],
                "edges_per_vertex": [e[i] / s[i] for i in rows],
            },
            schema={
                "n": pl.Int64,
                "edges": pl.Int64,
                "growth": pl.Float64,
                "tangential": pl.Int64,
                "edges_per_vertex": pl.Float64,
            },
        )

    # ==================== Files ====================

    def write_basic_data(self, path) -> None:
        """Write ``N deg diam girth bip`` on a single line (``bip`` is 0 or 1)."""
        self._require_data()
        with open(path, "w", encoding="utf-8") as f:
            f.write(
                f"{self.num_vertices} {self.root_degree} {self.diameter} "
                f"{self.girth} {int(self.bipartite)}"
            )

    def write_radial_data(self, path) -> None:
        """Write ``s_n e_n t_n`` for each shell, one line per shell."""
        self._require_data()
        with open(path, "w", encoding="utf-8") as f:
            for s, e, t in zip(self.s_n, self.e_n, self.t_n):
                f.write(f"{s} {e} {t}\n")
