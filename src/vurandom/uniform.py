"""Uniform integers, floats and booleans drawn from a BitSource.

Integer draws are unbiased for any span: spans that fit in 64 bits use a
128-bit wide multiply with Lemire's rejection threshold, wider spans fall
back to rejection over exactly enough random bits.
"""
from __future__ import annotations

import math
import operator

from .bitsource import BitSource, MASK64
from .errors import InvalidProbabilityError, InvalidRangeError

_TWO64 = 1 << 64


def as_int(name: str, value) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{name} must be an int, got {type(value).__name__}") from None


def below(src: BitSource, n: int) -> int:
    """Return an int uniformly distributed in [0, n) for n >= 1."""
    if n <= _TWO64:
        m = src.next_u64() * n
        low = m & MASK64
        if low < n:
            threshold = (_TWO64 - n) % n
            while low < threshold:
                m = src.next_u64() * n
                low = m & MASK64
        return m >> 64
    k = n.bit_length()
    r = src.next_bits(k)
    while r >= n:
        r = src.next_bits(k)
    return r


def uniform_int(src: BitSource, low: int, high: int) -> int:
    """Return an int uniformly distributed in [low, high)."""
    low = as_int("low", low)
    high = as_int("high", high)
    if low >= high:
        raise InvalidRangeError(f"empty range [{low!r}, {high!r})")
    return low + below(src, high - low)


def uniform_float(src: BitSource) -> float:
    return src.next_float()


def uniform_float_between(src: BitSource, low: float, high: float) -> float:
    """Return a float uniformly distributed in [low, high)."""
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidRangeError(f"bounds must be finite, got [{low!r}, {high!r})")
    if low >= high:
        raise InvalidRangeError(f"empty range [{low!r}, {high!r})")
    x = low + (high - low) * src.next_float()
    # rounding can land exactly on high for wide ranges
    return x if x < high else math.nextafter(high, low)


def check_probability(p: float) -> float:
    try:
        p = float(p)
    except (TypeError, ValueError):
        raise InvalidProbabilityError(f"probability must be a real number, got {p!r}") from None
    if not 0.0 <= p <= 1.0:
        raise InvalidProbabilityError(f"probability must be in [0, 1], got {p!r}")
    return p


def bernoulli(src: BitSource, p: float = 0.5) -> bool:
    """Return True with probability ``p``."""
    p = check_probability(p)
    return src.next_float() < p


__all__ = [
    "as_int",
    "below",
    "uniform_int",
    "uniform_float",
    "uniform_float_between",
    "check_probability",
    "bernoulli",
]
