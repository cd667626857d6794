"""Error taxonomy for the sampling engine.

Every error is raised before any randomness is consumed, so a rejected call
leaves the generator state untouched.
"""
from __future__ import annotations


class RandomError(ValueError):
    """Base class for invalid sampling requests."""


class InvalidRangeError(RandomError):
    """Raised when a lower bound is not strictly below its upper bound."""


class InvalidProbabilityError(RandomError):
    """Raised when a probability lies outside its admissible interval."""


class InvalidParameterError(RandomError):
    """Raised for distribution parameters such as a negative stddev."""


class LengthMismatchError(RandomError):
    """Raised when candidates and weights differ in length."""


class InvalidWeightError(RandomError):
    """Raised for negative or non-finite weights, or a zero total."""


class EmptyInputError(RandomError, IndexError):
    """Raised when picking from an empty sequence."""


class InvalidSizeError(RandomError):
    """Raised for a negative permutation size."""


class InvalidSeedError(RandomError):
    """Raised when a seed is neither an integer nor a byte string."""


__all__ = [
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
