# cayleynet/__init__.py
"""cayleynet: breadth-first shell-indexed graphs for Cayley graphs of finite groups."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "io": "cayleynet.io",
    "sparse": "cayleynet.io.sparse_io",
    "dataframe": "cayleynet.io.dataframe_io",
    "networkx": "cayleynet.adapters.networkx_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Graph types
    "VertexIndex": ("cayleynet.core._Index", "VertexIndex"),
    "NeighborGraph": ("cayleynet.core._Neighbors", "NeighborGraph"),
    "IndexedNeighborGraph": ("cayleynet.core._Neighbors", "IndexedNeighborGraph"),
    "ShellIndexedGraph": ("cayleynet.core._Shells", "ShellIndexedGraph"),
    "ColorGraph": ("cayleynet.core._ColorGraph", "ColorGraph"),
    "ColorCorrespondence": ("cayleynet.core._ColorGraph", "ColorCorrespondence"),
    "ColorGroupGraph": ("cayleynet.core._ColorGroup", "ColorGroupGraph"),
    "GraphElement": ("cayleynet.core._ColorGroup", "GraphElement"),
    "ShortestPathCache": ("cayleynet.core._PathCache", "ShortestPathCache"),
    "BuildState": ("cayleynet.core._helpers", "BuildState"),
    # Errors / warnings
    "VertexNotFoundError": ("cayleynet.core._helpers", "VertexNotFoundError"),
    "IndexOutOfRangeError": ("cayleynet.core._helpers", "IndexOutOfRangeError"),
    "UnfinishedGraphWarning": ("cayleynet.core._helpers", "UnfinishedGraphWarning"),
    "MalformedSparseFileWarning": ("cayleynet.core._helpers", "MalformedSparseFileWarning"),
    # Builders
    "NeighborGraphBuilder": ("cayleynet.builders.unordered", "NeighborGraphBuilder"),
    "IndexedNeighborGraphBuilder": ("cayleynet.builders.unordered", "IndexedNeighborGraphBuilder"),
    "BreadthFirstGraphBuilder": ("cayleynet.builders.breadth_first", "BreadthFirstGraphBuilder"),
    "ColorGraphBuilder": ("cayleynet.builders.breadth_first", "ColorGraphBuilder"),
    "JoinableGraph": ("cayleynet.builders._protocols", "JoinableGraph"),
    "VertexAddable": ("cayleynet.builders._protocols", "VertexAddable"),
    "ColorJoinable": ("cayleynet.builders._protocols", "ColorJoinable"),
    # Algorithms
    "Navigator": ("cayleynet.algorithms.navigator", "Navigator"),
    "cayley_graph": ("cayleynet.algorithms.cayley", "cayley_graph"),
    "cayley_color_graph": ("cayleynet.algorithms.cayley", "cayley_color_graph"),
    "GroupElement": ("cayleynet.algorithms.cayley", "GroupElement"),
    "ShellExpansionAnalyzer": ("cayleynet.algorithms.shell_analysis", "ShellExpansionAnalyzer"),
    # Groups
    "Permutation": ("cayleynet.groups.permutation", "Permutation"),
    # Sparse file I/O
    "write_sparse_graph": ("cayleynet.io.sparse_io", "write_sparse_graph"),
    "write_sparse_color_graph": ("cayleynet.io.sparse_io", "write_sparse_color_graph"),
    "read_sparse_graph": ("cayleynet.io.sparse_io", "read_sparse_graph"),
    "read_color_group_graph": ("cayleynet.io.sparse_io", "read_color_group_graph"),
    # DataFrame
    "to_edge_frame": ("cayleynet.io.dataframe_io", "to_edge_frame"),
    "from_edge_frame": ("cayleynet.io.dataframe_io", "from_edge_frame"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("cayleynet.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("cayleynet.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("cayleynet")
except PackageNotFoundError:
    __version__ = "0.0.0"
