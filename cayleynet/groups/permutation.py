from __future__ import annotations

from collections.abc import Iterable, Sequence

import numpy as np


class Permutation:
    """Permutation of ``{0, ..., n-1}`` stored as its image list.

    ``p[i]`` is the image of ``i``. Products compose left to right:
    ``(p * q)[i] == q[p[i]]``, so walking ``g -> g * s`` in a Cayley graph
    applies ``g`` first and then the generator ``s``.

    Parameters
    --
    images : sequence of int
        Image of every point; must be a permutation of ``range(len(images))``.

    Raises
    --
    ValueError
        If ``images`` is not a permutation.

    """

    __slots__ = ("_images", "_hash")

    def __init__(self, images: Sequence[int]):
        images = tuple(int(i) for i in images)
        if not self.is_permutation(images):
            raise ValueError(f"{list(images)!r} is not a permutation of 0..{len(images) - 1}")
        self._images = images
        self._hash = hash(images)

    @staticmethod
    def is_permutation(images: Sequence[int]) -> bool:
        n = len(images)
        return sorted(images) == list(range(n))

    @classmethod
    def identity_of(cls, n: int) -> Permutation:
        return cls(range(n))

    @classmethod
    def cycle(cls, n: int, *points: int) -> Permutation:
        """The cycle ``points[0] -> points[1] -> ... -> points[0]`` on ``n`` points."""
        images = list(range(n))
        for a, b in zip(points, points[1:] + points[:1]):
            images[a] = b
        return cls(images)

    @classmethod
    def from_cycles(cls, n: int, cycles: Iterable[Sequence[int]]) -> Permutation:
        """Product of disjoint cycles on ``n`` points."""
        images = list(range(n))
        for cyc in cycles:
            cyc = tuple(cyc)
            for a, b in zip(cyc, cyc[1:] + cyc[:1]):
                images[a] = b
        return cls(images)

    @classmethod
    def random(cls, n: int, rng: np.random.Generator | int | None = None) -> Permutation:
        rng = np.random.default_rng(rng)
        return cls(rng.permutation(n).tolist())

    @property
    def size(self) -> int:
        return len(self._images)

    @property
    def images(self) -> tuple[int, ...]:
        return self._images

    def right_product_by(self, other: Permutation) -> Permutation:
        """``self * other``: apply ``self``, then ``other``."""
        oi = other._images
        return Permutation([oi[i] for i in self._images])

    def left_product_by(self, other: Permutation) -> Permutation:
        """``other * self``: apply ``other``, then ``self``."""
        si = self._images
        return Permutation([si[i] for i in other._images])

    def inverse(self) -> Permutation:
        inv = [0] * len(self._images)
        for i, img in enumerate(self._images):
            inv[img] = i
        return Permutation(inv)

    def identity(self) -> Permutation:
        return Permutation.identity_of(len(self._images))

    def order(self) -> int:
        """Smallest ``k > 0`` with ``self ** k`` the identity."""
        k = 1
        cur = self
        ident = self.identity()
        while cur != ident:
            cur = cur.right_product_by(self)
            k += 1
        return k

    def __mul__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        return self.right_product_by(other)

    def __getitem__(self, i: int) -> int:
        return self._images[i]

    def __len__(self) -> int:
        return len(self._images)

    def __eq__(self, other):
        if not isinstance(other, Permutation):
            return NotImplemented
        return self._images == other._images

    def __hash__(self):
        return self._hash

    def __repr__(self):
        return f"Permutation({list(self._images)!r})"
