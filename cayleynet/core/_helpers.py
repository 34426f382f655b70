from enum import Enum


class BuildState(Enum):
    BUILDING = "BUILDING"
    FINISHED = "FINISHED"


class VertexNotFoundError(KeyError):
    """Raised when a query names a vertex that was never added."""


class IndexOutOfRangeError(IndexError):
    """Raised when an index lies outside ``[1, size]``."""


class UnfinishedGraphWarning(UserWarning):
    """Shell partitioning was requested before ``finish()``.

    The neighbor list is sorted on demand, which costs O(k log k) per query
    instead of one sort at finish time.
    """


class MalformedSparseFileWarning(UserWarning):
    """A sparse-adjacency file had a line that is not three integers."""


def _missing(vertex):
    return VertexNotFoundError(f"vertex {vertex!r} not found")
