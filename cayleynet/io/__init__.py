"""cayleynet.io: file and DataFrame I/O with lazy symbol loading."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_lazy_symbols: dict[str, tuple[str, str]] = {
    # Sparse adjacency text format
    "write_sparse_graph": ("cayleynet.io.sparse_io", "write_sparse_graph"),
    "write_sparse_color_graph": ("cayleynet.io.sparse_io", "write_sparse_color_graph"),
    "write_indexed_elements": ("cayleynet.io.sparse_io", "write_indexed_elements"),
    "read_sparse_graph": ("cayleynet.io.sparse_io", "read_sparse_graph"),
    "read_color_group_graph": ("cayleynet.io.sparse_io", "read_color_group_graph"),
    # Vertex collections (ORIGIN/ORDER files)
    "write_vertex_collection": ("cayleynet.io.sparse_io", "write_vertex_collection"),
    "read_vertex_collection": ("cayleynet.io.sparse_io", "read_vertex_collection"),
    "VertexCollection": ("cayleynet.io.sparse_io", "VertexCollection"),
    # DataFrame
    "to_edge_frame": ("cayleynet.io.dataframe_io", "to_edge_frame"),
    "from_edge_frame": ("cayleynet.io.dataframe_io", "from_edge_frame"),
}

__all__ = sorted(_lazy_symbols)


def __getattr__(name: str) -> Any:  # PEP 562
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))
