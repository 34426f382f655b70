class ShortestPathCache:
    """Memo of canonical root-to-vertex color words, keyed by target vertex.

    There is no invalidation hook: entries are only valid for the finished,
    never-again-mutated graph that owns the cache. ``clear()`` is the only way
    to drop them.
    """

    def __init__(self):
        self._paths = {}
        self._hits = 0
        self._misses = 0

    def get(self, vertex):
        """Cached word for ``vertex`` as a tuple, or None."""
        path = self._paths.get(vertex)
        if path is None:
            self._misses += 1
        else:
            self._hits += 1
        return path

    def put(self, vertex, path) -> tuple:
        path = tuple(path)
        self._paths[vertex] = path
        return path

    def build(self, vertices, compute):
        """Eagerly store ``compute(v)`` for every vertex in ``vertices``."""
        for v in vertices:
            self._paths[v] = tuple(compute(v))

    def has(self, vertex) -> bool:
        return vertex in self._paths

    def clear(self):
        self._paths.clear()
        self._hits = 0
        self._misses = 0

    def info(self):
        """Get cache status.

        Returns
        ---
        dict
            Entry count, hit/miss counters and the longest cached word.

        """
        return {
            "entries": len(self._paths),
            "hits": self._hits,
            "misses": self._misses,
            "max_length": max((len(p) for p in self._paths.values()), default=0),
        }

    def __contains__(self, vertex) -> bool:
        return vertex in self._paths

    def __len__(self) -> int:
        return len(self._paths)
