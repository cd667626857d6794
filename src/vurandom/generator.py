# -*- coding: utf-8 -*-
"""The Random facade: one bit source plus every sampling operation.

A ``Random`` owns its generator state exclusively. Two instances built with
the same seed and algorithm return identical results for identical call
sequences. Instances are not thread-safe; give each worker its own, for
example through :meth:`Random.spawn`.
"""
from __future__ import annotations

from typing import Callable, Iterable, List, MutableSequence, Optional, Sequence, TypeVar

from . import distributions as _dist
from . import normal as _normal
from . import permutations as _perm
from . import shuffling as _shuffle
from . import uniform as _uniform
from . import weighted as _weighted
from .bitsource import BitSource, PRNG_ALGO, Seed
from .config import resolve_algo
from .logger import get_random_logger

T = TypeVar("T")

logger = get_random_logger("generator")

_INT63 = 1 << 63


class Random:
    """Seedable random generator.

    ``seed`` may be an int (reduced modulo 2**64) or bytes; when omitted the
    seed comes from OS entropy and is still readable through :attr:`seed`, so
    any run can be replayed. ``algo`` defaults to the configured bit source.
    """

    __slots__ = ("_src",)

    def __init__(self, seed: Optional[Seed] = None, algo: Optional[PRNG_ALGO] = None) -> None:
        if algo is None:
            algo = resolve_algo()
        self._src = BitSource(algo, seed)
        logger.debug("Random created algo=%s seed=%d", algo.name, self._src.current_seed)

    def __repr__(self) -> str:
        return f"Random(seed={self.seed}, algo={self.algo.name})"

    # -- state ---------------------------------------------------------------------

    @property
    def seed(self) -> int:
        return self._src.current_seed

    @property
    def algo(self) -> PRNG_ALGO:
        return self._src.algo

    @property
    def source(self) -> BitSource:
        return self._src

    def reseed(self, seed: Optional[Seed] = None) -> int:
        """Reset the generator state; returns the new normalised seed."""
        new_seed = self._src.seed(seed)
        logger.debug("Random reseeded algo=%s seed=%d", self.algo.name, new_seed)
        return new_seed

    def spawn(self) -> "Random":
        """Return an independent generator seeded from this one."""
        child = Random(self._src.next_u64(), self.algo)
        logger.debug("Random seed=%d spawned child seed=%d", self.seed, child.seed)
        return child

    # -- uniform -------------------------------------------------------------------

    def int(self, low: Optional[int] = None, high: Optional[int] = None) -> int:
        """Uniform integer.

        ``int()`` -> [0, 2**63), ``int(stop)`` -> [0, stop),
        ``int(low, high)`` -> [low, high).
        """
        if low is None and high is None:
            return _uniform.uniform_int(self._src, 0, _INT63)
        if high is None:
            return _uniform.uniform_int(self._src, 0, low)
        if low is None:
            return _uniform.uniform_int(self._src, 0, high)
        return _uniform.uniform_int(self._src, low, high)

    def int_between(self, low: int, high: int) -> int:
        return _uniform.uniform_int(self._src, low, high)

    def float(self) -> float:
        """Uniform float in [0, 1) with 53 bits of precision."""
        return _uniform.uniform_float(self._src)

    def float_between(self, low: float, high: float) -> float:
        return _uniform.uniform_float_between(self._src, low, high)

    def boolean(self, p: float = 0.5) -> bool:
        return _uniform.bernoulli(self._src, p)

    def bernoulli(self, p: float) -> bool:
        return _uniform.bernoulli(self._src, p)

    # -- continuous ----------------------------------------------------------------

    def normal(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        return _normal.normal(self._src, mean, stddev)

    def log_normal(self, mean: float = 0.0, stddev: float = 1.0) -> float:
        return _normal.log_normal(self._src, mean, stddev)

    def exponential(self, rate: float = 1.0) -> float:
        return _dist.exponential(self._src, rate)

    # -- discrete ------------------------------------------------------------------

    def binomial(self, trials: int, p: float) -> int:
        return _dist.binomial(self._src, trials, p)

    def geometric(self, p: float) -> int:
        return _dist.geometric(self._src, p)

    # -- selection -----------------------------------------------------------------

    def pick(self, candidates: Sequence[T]) -> T:
        return _weighted.pick(self._src, candidates)

    def weighted_pick(self, candidates: Sequence[T], weights: Sequence[float]) -> T:
        return _weighted.weighted_pick(self._src, candidates, weights)

    def weighted_sampler(
        self, candidates: Sequence[T], weights: Sequence[float]
    ) -> Callable[[], T]:
        return _weighted.weighted_sampler(self._src, candidates, weights)

    # -- orderings -----------------------------------------------------------------

    def shuffle(self, seq: MutableSequence[T]) -> None:
        _shuffle.shuffle_in_place(self._src, seq)

    def shuffled(self, seq: Iterable[T]):
        return _shuffle.shuffled_copy(self._src, seq)

    def permutation(self, n: int) -> List[int]:
        return _perm.permutation(self._src, n)


__all__ = ["Random"]
