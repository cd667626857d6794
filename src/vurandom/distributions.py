"""Discrete and exponential variates built on uniform draws."""
from __future__ import annotations

import math

from .bitsource import BitSource
from .errors import InvalidParameterError, InvalidProbabilityError
from .uniform import check_probability


def exponential(src: BitSource, rate: float = 1.0) -> float:
    """Exponential variate with the given rate (mean 1/rate)."""
    if not math.isfinite(rate) or rate <= 0:
        raise InvalidParameterError(f"rate must be finite and > 0, got {rate!r}")
    return -math.log(1.0 - src.next_float()) / rate


def binomial(src: BitSource, trials: int, p: float) -> int:
    """Number of successes in ``trials`` independent Bernoulli(p) trials."""
    if isinstance(trials, bool) or not isinstance(trials, int) or trials < 0:
        raise InvalidParameterError(f"trials must be an int >= 0, got {trials!r}")
    p = check_probability(p)
    count = 0
    for _ in range(trials):
        if src.next_float() < p:
            count += 1
    return count


def geometric(src: BitSource, p: float) -> int:
    """Number of failures before the first success, success probability ``p``."""
    p = check_probability(p)
    if p == 0.0:
        raise InvalidProbabilityError("geometric distribution needs p > 0")
    result = 0
    while src.next_float() >= p:
        result += 1
    return result


__all__ = ["exponential", "binomial", "geometric"]
