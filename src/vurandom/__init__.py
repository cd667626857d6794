# -*- coding: utf-8 -*-
"""Deterministic random sampling for scripted load tests.

Build one :class:`Random` per virtual user (optionally seeded) and sample
from it; ``shuffle``, ``shuffled`` and ``permutation`` are also available as
free functions bound to a lazily created process-wide default.
"""

from .bitsource import BitSource, PRNG_ALGO, DEFAULT_ALGO, make_bit_source
from .config import RandomConfig, load_config
from .default import (
    get_default,
    permutation,
    reset_default,
    set_default,
    shuffle,
    shuffled,
)
from .errors import (
    EmptyInputError,
    InvalidParameterError,
    InvalidProbabilityError,
    InvalidRangeError,
    InvalidSeedError,
    InvalidSizeError,
    InvalidWeightError,
    LengthMismatchError,
    RandomError,
)
from .generator import Random
from .weighted import WeightedTable

__version__ = "0.1.0"

__all__ = [
    # Facade
    "Random",
    # Default instance and free functions
    "get_default",
    "set_default",
    "reset_default",
    "shuffle",
    "shuffled",
    "permutation",
    # Bit source
    "BitSource",
    "PRNG_ALGO",
    "DEFAULT_ALGO",
    "make_bit_source",
    "WeightedTable",
    # Configuration
    "RandomConfig",
    "load_config",
    # Errors
    "RandomError",
    "InvalidRangeError",
    "InvalidProbabilityError",
    "InvalidParameterError",
    "LengthMismatchError",
    "InvalidWeightError",
    "EmptyInputError",
    "InvalidSizeError",
    "InvalidSeedError",
]
