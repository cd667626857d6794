"""Weighted and uniform selection from a candidate sequence.

A :class:`WeightedTable` holds the prefix sums of the weights. A draw u in
[0, total) selects the first index whose cumulative weight is strictly
greater than u, so candidate i owns the half-open interval
[cum[i-1], cum[i]) and zero-weight candidates own nothing.
"""
from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

import numpy as np

from .bitsource import BitSource
from .errors import EmptyInputError, InvalidWeightError, LengthMismatchError
from .uniform import below

T = TypeVar("T")


class WeightedTable:
    """Prefix-sum table over non-negative weights.

    Building is O(n); each :meth:`index_for` / :meth:`draw` is a binary
    search, O(log n).
    """

    def __init__(self, weights: Sequence[float]) -> None:
        try:
            w = np.asarray(weights, dtype=np.float64)
        except (TypeError, ValueError):
            raise InvalidWeightError(f"weights must be real numbers, got {weights!r}") from None
        if w.ndim != 1:
            raise InvalidWeightError(f"weights must be one-dimensional, got shape {w.shape}")
        if not np.all(np.isfinite(w)):
            raise InvalidWeightError("weights must be finite")
        if np.any(w < 0):
            bad = int(np.flatnonzero(w < 0)[0])
            raise InvalidWeightError(f"weight at index {bad} is negative: {float(w[bad])!r}")
        cumulative = np.cumsum(w)
        total = float(cumulative[-1]) if len(cumulative) else 0.0
        if not total > 0.0:
            raise InvalidWeightError("total weight must be > 0")
        if not np.isfinite(total):
            raise InvalidWeightError("total weight overflows")
        self.cumulative = cumulative
        self.total = total
        self._last_positive = int(np.flatnonzero(w > 0)[-1])

    def __len__(self) -> int:
        return len(self.cumulative)

    def index_for(self, u: float) -> int:
        """Map a point u in [0, total) to the owning index."""
        idx = int(np.searchsorted(self.cumulative, u, side="right"))
        if idx > self._last_positive:
            # u rounded up onto the total
            idx = self._last_positive
        return idx

    def draw(self, src: BitSource) -> int:
        return self.index_for(src.next_float() * self.total)


def _check_indexable(candidates) -> None:
    if not isinstance(candidates, (Sequence, np.ndarray)):
        raise TypeError(
            f"candidates must be an indexable sequence, got {type(candidates).__name__}"
        )


def pick(src: BitSource, candidates: Sequence[T]) -> T:
    """Uniformly pick one element."""
    _check_indexable(candidates)
    n = len(candidates)
    if n == 0:
        raise EmptyInputError("cannot pick from an empty sequence")
    return candidates[below(src, n)]


def _check_lengths(candidates: Sequence[T], weights: Sequence[float]) -> None:
    if len(candidates) != len(weights):
        raise LengthMismatchError(
            f"candidates and weights must be of the same length: "
            f"{len(candidates)} != {len(weights)}"
        )


def weighted_pick(src: BitSource, candidates: Sequence[T], weights: Sequence[float]) -> T:
    """Pick one element with probability proportional to its weight."""
    _check_indexable(candidates)
    _check_lengths(candidates, weights)
    table = WeightedTable(weights)
    return candidates[table.draw(src)]


def weighted_sampler(
    src: BitSource, candidates: Sequence[T], weights: Sequence[float]
) -> Callable[[], T]:
    """Build the table once and return a callable drawing from it."""
    _check_indexable(candidates)
    _check_lengths(candidates, weights)
    table = WeightedTable(weights)
    items = list(candidates)

    def sample() -> T:
        return items[table.draw(src)]

    return sample


__all__ = ["WeightedTable", "pick", "weighted_pick", "weighted_sampler"]
