# bitsource.py
"""Seedable 64-bit pseudo-random word generators.

Every sampler in the package draws from a :class:`BitSource`. The generators
here are small non-cryptographic PRNGs with long periods; multi-word states
are expanded from a 64-bit seed through SplitMix64 so that nearby seeds give
unrelated streams and no generator starts from an all-zero state.

Two sources built with the same algorithm and seed produce bit-identical
streams. A BitSource is not safe to share between threads.
"""
from __future__ import annotations

import hashlib
import operator
import os
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, Union

from .errors import InvalidSeedError

Seed = Union[int, bytes, bytearray]

# ======================================================================================
# Bit helpers
# ======================================================================================

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1

def u32(x: int) -> int: return x & MASK32
def u64(x: int) -> int: return x & MASK64
def rolu64(x: int, r: int) -> int: return u64((x << r) | (x >> (64 - r)))


class PRNG_ALGO(Enum):  # fast, non-crypto
    SPLITMIX64          = auto()   # period 2^64, also the seeder for the others
    XORSHIFT64STAR      = auto()   # period 2^64 - 1
    XOROSHIRO128SS      = auto()   # period 2^128 - 1
    XOSHIRO256SS        = auto()   # period 2^256 - 1

DEFAULT_ALGO = PRNG_ALGO.XOSHIRO256SS


# ======================================================================================
# Seed mixers
# ======================================================================================

class SplitMix64:
    def __init__(self, seed: int):
        self.state = u64(seed)

    def next_u64(self) -> int:
        self.state = u64(self.state + 0x9E3779B97F4A7C15)
        z = self.state
        z = u64((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9)
        z = u64((z ^ (z >> 27)) * 0x94D049BB133111EB)
        return u64(z ^ (z >> 31))

def seed_from_bytes(b: bytes) -> int:
    h = hashlib.sha256(b).digest()
    return int.from_bytes(h[:8], "little")

def entropy_seed() -> int:
    return int.from_bytes(os.urandom(8), "little")

def ensure_seed64(seed: Optional[Seed] = None) -> int:
    """Normalise ``seed`` to an unsigned 64-bit integer.

    ``None`` draws fresh OS entropy, byte strings are hashed, integers
    (negative ones included) are reduced modulo 2**64.
    """
    if seed is None:
        return entropy_seed()
    if isinstance(seed, (bytes, bytearray)):
        return seed_from_bytes(bytes(seed))
    if isinstance(seed, bool):
        raise InvalidSeedError("seed must be an int or bytes, got bool")
    try:
        return u64(operator.index(seed))
    except TypeError:
        raise InvalidSeedError(f"seed must be an int or bytes, got {type(seed).__name__}") from None


# ======================================================================================
# Generators: each factory returns a zero-argument next_u64 closure
# ======================================================================================

def make_splitmix64(seed: int) -> Callable[[], int]:
    return SplitMix64(seed).next_u64

def make_xorshift64star(seed: int) -> Callable[[], int]:
    state = SplitMix64(seed).next_u64() or 1
    def next_u64():
        nonlocal state
        x = state
        x ^= x >> 12
        x ^= (x << 25) & MASK64
        x ^= x >> 27
        state = x
        return u64(x * 0x2545F4914F6CDD1D)
    return next_u64

def make_xoroshiro128ss(seed: int) -> Callable[[], int]:
    sm = SplitMix64(seed)
    s0 = sm.next_u64()
    s1 = sm.next_u64()
    if s0 == 0 and s1 == 0:
        s0 = 1
    def next_u64():
        nonlocal s0, s1
        result = u64(rolu64(u64(s0 * 5), 7) * 9)
        t = s1 ^ s0
        s0 = rolu64(s0, 24) ^ t ^ ((t << 16) & MASK64)
        s1 = rolu64(t, 37)
        return result
    return next_u64

def make_xoshiro256ss(seed: int) -> Callable[[], int]:
    sm = SplitMix64(seed)
    s = [sm.next_u64(), sm.next_u64(), sm.next_u64(), sm.next_u64()]
    if not any(s):
        s[0] = 1
    def next_u64():
        result = u64(rolu64(u64(s[1] * 5), 7) * 9)
        t = (s[1] << 17) & MASK64
        s[2] ^= s[0]; s[3] ^= s[1]; s[1] ^= s[2]; s[0] ^= s[3]
        s[2] ^= t
        s[3] = rolu64(s[3], 45)
        return result
    return next_u64

def make_next_u64(algo: PRNG_ALGO, seed: int) -> Callable[[], int]:
    match algo:
        case PRNG_ALGO.SPLITMIX64:         return make_splitmix64(seed)
        case PRNG_ALGO.XORSHIFT64STAR:     return make_xorshift64star(seed)
        case PRNG_ALGO.XOROSHIRO128SS:     return make_xoroshiro128ss(seed)
        case PRNG_ALGO.XOSHIRO256SS:       return make_xoshiro256ss(seed)
        case _:
            raise ValueError(f"unknown PRNG algorithm: {algo!r}")


# ======================================================================================
# Unified adapter
# ======================================================================================

@dataclass(eq=False)
class BitSource:
    """Exposes next_u64/next_u32/next_bits/next_float over one generator state."""
    algo: PRNG_ALGO = DEFAULT_ALGO
    initial_seed: Optional[Seed] = None
    _seed: int = field(init=False, repr=False)
    _next_u64: Callable[[], int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.algo, PRNG_ALGO):
            raise ValueError(f"unknown PRNG algorithm: {self.algo!r}")
        self.seed(self.initial_seed)

    @property
    def current_seed(self) -> int:
        return self._seed

    def seed(self, value: Optional[Seed] = None) -> int:
        """Reset the state from ``value`` and return the normalised seed."""
        self._seed = ensure_seed64(value)
        self._next_u64 = make_next_u64(self.algo, self._seed)
        return self._seed

    def next_u64(self) -> int:
        return self._next_u64()

    def next_u32(self) -> int:
        return self._next_u64() >> 32

    def next_bits(self, k: int) -> int:
        """Return ``k`` uniformly random bits as a non-negative int."""
        if k < 0:
            raise ValueError(f"bit count must be non-negative, got {k!r}")
        if k == 0:
            return 0
        words = (k + 63) // 64
        x = 0
        for _ in range(words):
            x = (x << 64) | self._next_u64()
        return x >> (words * 64 - k)

    def next_float(self) -> float:
        # 53-bit precision uniform in [0,1)
        return (self._next_u64() >> 11) / float(1 << 53)


def make_bit_source(algo: Optional[PRNG_ALGO] = None, seed: Optional[Seed] = None) -> BitSource:
    """Build a BitSource; without ``algo`` the VURANDOM_ALGO setting applies, as for Random."""
    if algo is None:
        from .config import resolve_algo
        algo = resolve_algo()
    return BitSource(algo, seed)


__all__ = [
    "PRNG_ALGO",
    "DEFAULT_ALGO",
    "BitSource",
    "SplitMix64",
    "ensure_seed64",
    "seed_from_bytes",
    "entropy_seed",
    "make_bit_source",
    "make_next_u64",
]
