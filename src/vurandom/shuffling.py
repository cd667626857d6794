"""Fisher–Yates shuffles.

Walks from the last index down, swapping index i with a uniform index in
[0, i]. numpy arrays are shuffled along their first axis.
"""
from __future__ import annotations

from collections.abc import MutableSequence
from typing import Iterable, TypeVar

import numpy as np

from .bitsource import BitSource
from .uniform import below

T = TypeVar("T")


def _fisher_yates(src: BitSource, seq) -> None:
    if isinstance(seq, np.ndarray):
        for i in range(len(seq) - 1, 0, -1):
            j = below(src, i + 1)
            if i != j:
                seq[[i, j]] = seq[[j, i]]
        return
    for i in range(len(seq) - 1, 0, -1):
        j = below(src, i + 1)
        seq[i], seq[j] = seq[j], seq[i]


def shuffle_in_place(src: BitSource, seq: MutableSequence[T]) -> None:
    """Shuffle a mutable sequence in place. Length 0 or 1 is a no-op."""
    if not isinstance(seq, (MutableSequence, np.ndarray)):
        raise TypeError(f"cannot shuffle {type(seq).__name__} in place; use shuffled()")
    if isinstance(seq, np.ndarray) and seq.ndim == 0:
        raise TypeError("cannot shuffle a 0-d array")
    _fisher_yates(src, seq)


def shuffled_copy(src: BitSource, seq: Iterable[T]):
    """Return a shuffled copy of ``seq``; the input is left untouched.

    list, tuple, str, bytes, bytearray and numpy arrays come back as the same
    type, anything else as a list.
    """
    if isinstance(seq, np.ndarray):
        out = seq.copy()
        if out.ndim:
            _fisher_yates(src, out)
        return out
    items = list(seq)
    _fisher_yates(src, items)
    if isinstance(seq, str):
        return "".join(items)
    if isinstance(seq, (bytes, bytearray)):
        return type(seq)(items)
    if type(seq) is tuple:
        return tuple(items)
    return items


__all__ = ["shuffle_in_place", "shuffled_copy"]
