"""Process-wide default Random and the free functions that use it.

The default instance is created lazily on first use, seeded from
``VURANDOM_SEED`` when set. Only its creation is locked: callers that reach
the default from several threads must serialise their sampling calls, or
better, hold their own :class:`~vurandom.generator.Random`.
"""
from __future__ import annotations

import threading
from typing import Iterable, List, MutableSequence, Optional, TypeVar

from .bitsource import Seed
from .config import load_config
from .generator import Random
from .logger import get_random_logger

T = TypeVar("T")

logger = get_random_logger("default")

_DEFAULT: Optional[Random] = None
_LOCK = threading.Lock()


def get_default() -> Random:
    """Return the shared Random, creating it on first use."""
    global _DEFAULT
    rng = _DEFAULT
    if rng is not None:
        return rng
    with _LOCK:
        if _DEFAULT is None:
            cfg = load_config()
            _DEFAULT = Random(cfg.default_seed, cfg.algo)
            logger.debug("default Random created seed=%d", _DEFAULT.seed)
        return _DEFAULT


def set_default(rng: Random) -> None:
    """Install ``rng`` as the shared Random."""
    global _DEFAULT
    if not isinstance(rng, Random):
        raise TypeError(f"expected a Random, got {type(rng).__name__}")
    with _LOCK:
        _DEFAULT = rng
    logger.debug("default Random replaced seed=%d", rng.seed)


def reset_default(seed: Optional[Seed] = None) -> Random:
    """Replace the shared Random with a fresh one and return it."""
    rng = Random(seed)
    set_default(rng)
    return rng


def shuffle(seq: MutableSequence[T]) -> None:
    """Shuffle ``seq`` in place using the default Random."""
    get_default().shuffle(seq)


def shuffled(seq: Iterable[T]):
    """Return a shuffled copy of ``seq`` using the default Random."""
    return get_default().shuffled(seq)


def permutation(n: int) -> List[int]:
    """Return a random permutation of ``range(n)`` using the default Random."""
    return get_default().permutation(n)


__all__ = [
    "get_default",
    "set_default",
    "reset_default",
    "shuffle",
    "shuffled",
    "permutation",
]
