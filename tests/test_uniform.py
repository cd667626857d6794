import math

import numpy as np
import pytest

from vurandom import InvalidProbabilityError, InvalidRangeError, Random
from vurandom.uniform import below


class ScriptedSource:
    """Feeds fixed 64-bit words so rejection paths can be checked exactly."""

    def __init__(self, words):
        self.words = list(words)
        self.used = 0

    def next_u64(self):
        word = self.words[self.used]
        self.used += 1
        return word


def test_below_rejects_biased_low_word():
    # 2**64 % 3 == 1, so a product whose low word is 0 must be redrawn
    src = ScriptedSource([0, 1 << 63])
    assert below(src, 3) == 1
    assert src.used == 2


def test_below_accepts_without_redraw():
    src = ScriptedSource([(1 << 64) - 1])
    assert below(src, 10) == 9
    assert src.used == 1


def test_int_range_correctness(rng):
    for _ in range(5000):
        x = rng.int(-3, 4)
        assert -3 <= x < 4


def test_int_covers_every_value(rng):
    seen = {rng.int(0, 6) for _ in range(2000)}
    assert seen == set(range(6))


def test_int_is_roughly_uniform(rng):
    n = 60000
    counts = np.bincount([rng.int(0, 6) for _ in range(n)], minlength=6)
    expected = n / 6
    assert np.all(np.abs(counts - expected) < 5 * math.sqrt(expected))


def test_int_defaults(rng):
    for _ in range(200):
        assert 0 <= rng.int() < (1 << 63)
        assert 0 <= rng.int(10) < 10


def test_int_single_value_range(rng):
    assert rng.int(5, 6) == 5


def test_int_huge_span(rng):
    low, high = -(1 << 100), 1 << 100
    values = [rng.int(low, high) for _ in range(500)]
    assert all(low <= v < high for v in values)
    assert any(v < 0 for v in values) and any(v > 0 for v in values)


def test_int_between_matches_int():
    assert Random(3).int_between(10, 20) == Random(3).int(10, 20)


@pytest.mark.parametrize("low,high", [(5, 5), (6, 5), (0, 0)])
def test_int_invalid_range(rng, low, high):
    with pytest.raises(InvalidRangeError):
        rng.int(low, high)


def test_int_zero_stop_is_invalid(rng):
    with pytest.raises(InvalidRangeError):
        rng.int(0)


def test_int_rejects_non_integers(rng):
    with pytest.raises(TypeError):
        rng.int(0.5, 3)
    with pytest.raises(TypeError):
        rng.int(False, True)


def test_int_accepts_numpy_integers(rng):
    assert 0 <= rng.int(np.int64(0), np.int64(4)) < 4


def test_failed_call_does_not_consume():
    a, b = Random(17), Random(17)
    with pytest.raises(InvalidRangeError):
        a.int(3, 1)
    with pytest.raises(InvalidProbabilityError):
        a.boolean(1.5)
    assert a.int(0, 1000) == b.int(0, 1000)


def test_float_range(rng):
    values = np.array([rng.float() for _ in range(20000)])
    assert values.min() >= 0.0
    assert values.max() < 1.0
    assert abs(values.mean() - 0.5) < 0.01


def test_float_uses_full_mantissa(rng):
    # a 32-bit cast would leave the low bits of the mantissa at zero
    values = [rng.float() for _ in range(100)]
    assert any((v * (1 << 53)) % (1 << 21) for v in values)


def test_float_between(rng):
    for _ in range(1000):
        x = rng.float_between(-2.5, 7.5)
        assert -2.5 <= x < 7.5


@pytest.mark.parametrize("low,high", [(1.0, 1.0), (2.0, 1.0), (0.0, math.inf), (math.nan, 1.0)])
def test_float_between_invalid(rng, low, high):
    with pytest.raises(InvalidRangeError):
        rng.float_between(low, high)


def test_boolean_extremes(rng):
    assert not any(rng.boolean(0.0) for _ in range(500))
    assert all(rng.boolean(1.0) for _ in range(500))


def test_boolean_frequency(rng):
    n = 20000
    hits = sum(rng.boolean(0.3) for _ in range(n))
    assert abs(hits / n - 0.3) < 0.015
    fair = sum(rng.boolean() for _ in range(n))
    assert abs(fair / n - 0.5) < 0.015


@pytest.mark.parametrize("p", [-0.1, 1.01, math.nan, "half", None])
def test_boolean_invalid_probability(rng, p):
    with pytest.raises(InvalidProbabilityError):
        rng.boolean(p)


def test_bernoulli_alias():
    assert [Random(4).bernoulli(0.4) for _ in range(3)] == [Random(4).boolean(0.4) for _ in range(3)]
