"""Random permutations of range(n)."""
from __future__ import annotations

from typing import List

from .bitsource import BitSource
from .errors import InvalidSizeError
from .shuffling import shuffle_in_place
from .uniform import as_int


def permutation(src: BitSource, n: int) -> List[int]:
    """Return a uniformly random ordering of ``0..n-1``."""
    n = as_int("permutation size", n)
    if n < 0:
        raise InvalidSizeError(f"permutation size must be >= 0, got {n!r}")
    perm = list(range(n))
    shuffle_in_place(src, perm)
    return perm


__all__ = ["permutation"]
