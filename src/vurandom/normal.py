"""Normal and log-normal sampling via Box–Muller."""
from __future__ import annotations

import math

from .bitsource import BitSource
from .errors import InvalidParameterError


def _check_params(mean: float, stddev: float) -> None:
    if not math.isfinite(mean):
        raise InvalidParameterError(f"mean must be finite, got {mean!r}")
    if not math.isfinite(stddev) or stddev < 0:
        raise InvalidParameterError(f"stddev must be finite and >= 0, got {stddev!r}")


def standard_normal(src: BitSource) -> float:
    """Gaussian (normal) variate with mean 0 and stddev 1.

    Consumes exactly two uniform draws. u1 is taken from (0, 1] so the
    logarithm stays finite; u2 from [0, 1).
    """
    u1 = 1.0 - src.next_float()
    u2 = src.next_float()
    return math.sqrt(-2.0 * math.log(u1)) * math.cos(2.0 * math.pi * u2)


def normal(src: BitSource, mean: float = 0.0, stddev: float = 1.0) -> float:
    _check_params(mean, stddev)
    return mean + stddev * standard_normal(src)


def log_normal(src: BitSource, mean: float = 0.0, stddev: float = 1.0) -> float:
    """exp(X) for X ~ N(mean, stddev**2)."""
    return math.exp(normal(src, mean, stddev))


__all__ = ["standard_normal", "normal", "log_normal"]
