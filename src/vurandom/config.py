# -*- coding: utf-8 -*-
"""Environment-driven configuration.

- VURANDOM_ALGO: bit source used when a Random is built without ``algo``
- VURANDOM_SEED: seed for the process-wide default Random (entropy if unset)
- VURANDOM_LOG_LEVEL: level of the ``vurandom`` logger (default WARNING)
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .bitsource import PRNG_ALGO

ALGO_ENV = "VURANDOM_ALGO"
SEED_ENV = "VURANDOM_SEED"
LOG_LEVEL_ENV = "VURANDOM_LOG_LEVEL"


@dataclass(frozen=True)
class RandomConfig:
    algo: PRNG_ALGO
    default_seed: Optional[int] = None
    log_level: str = "WARNING"


def _parse_algo(raw: Optional[str]):
    from .bitsource import DEFAULT_ALGO, PRNG_ALGO

    if raw is None or not raw.strip():
        return DEFAULT_ALGO
    try:
        return PRNG_ALGO[raw.strip().upper()]
    except KeyError:
        names = ", ".join(a.name for a in PRNG_ALGO)
        raise ValueError(f"{ALGO_ENV}={raw!r} is not one of: {names}") from None


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{SEED_ENV}={raw!r} is not an integer") from None


def resolve_algo():
    """Return the bit source algorithm named by VURANDOM_ALGO, or the default."""
    return _parse_algo(os.getenv(ALGO_ENV))


def load_config() -> RandomConfig:
    """Read the current environment into a RandomConfig."""
    return RandomConfig(
        algo=_parse_algo(os.getenv(ALGO_ENV)),
        default_seed=_parse_seed(os.getenv(SEED_ENV)),
        log_level=os.getenv(LOG_LEVEL_ENV, "WARNING").upper(),
    )


__all__ = [
    "RandomConfig",
    "load_config",
    "resolve_algo",
    "ALGO_ENV",
    "SEED_ENV",
    "LOG_LEVEL_ENV",
]
