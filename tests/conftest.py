import os
import sys

import pytest

# Ensure src is importable without an install
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from vurandom import Random, PRNG_ALGO
import vurandom.default as default_module


SEED = 12345


@pytest.fixture
def rng():
    """A Random with a fixed seed and the default algorithm."""
    return Random(SEED)


@pytest.fixture(params=list(PRNG_ALGO), ids=lambda a: a.name)
def algo(request):
    return request.param


@pytest.fixture
def fresh_default():
    """Isolate tests that touch the process-wide default Random."""
    saved = default_module._DEFAULT
    default_module._DEFAULT = None
    yield
    default_module._DEFAULT = saved


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("VURANDOM_ALGO", "VURANDOM_SEED", "VURANDOM_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
