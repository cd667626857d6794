import math

import numpy as np
import pytest

from vurandom import (
    EmptyInputError,
    InvalidWeightError,
    LengthMismatchError,
    Random,
    WeightedTable,
)


def test_weighted_pick_frequency(rng):
    n = 20000
    picks = [rng.weighted_pick(["a", "b", "c"], [0.1, 0.8, 0.1]) for _ in range(n)]
    freq = picks.count("b") / n
    assert abs(freq - 0.8) < 0.015
    assert abs(picks.count("a") / n - 0.1) < 0.015


def test_weighted_pick_unnormalised_weights(rng):
    n = 20000
    picks = [rng.weighted_pick([1, 2], [3, 1]) for _ in range(n)]
    assert abs(picks.count(1) / n - 0.75) < 0.015


def test_zero_weight_never_selected(rng):
    for _ in range(3000):
        assert rng.weighted_pick(["x", "never", "y"], [1.0, 0.0, 2.0]) != "never"


def test_single_positive_weight(rng):
    for _ in range(100):
        assert rng.weighted_pick(["a", "b", "c"], [0, 5, 0]) == "b"


def test_length_mismatch(rng):
    with pytest.raises(LengthMismatchError):
        rng.weighted_pick(["a", "b"], [1])


@pytest.mark.parametrize(
    "weights",
    [[1, -1], [0, 0], [math.nan, 1], [math.inf, 1], ["heavy", 1]],
)
def test_invalid_weights(rng, weights):
    with pytest.raises(InvalidWeightError):
        rng.weighted_pick(["a", "b"], weights)


def test_empty_weighted_pick(rng):
    with pytest.raises(InvalidWeightError):
        rng.weighted_pick([], [])


def test_failed_weighted_pick_does_not_consume():
    a, b = Random(2), Random(2)
    with pytest.raises(InvalidWeightError):
        a.weighted_pick(["a", "b"], [-1, 2])
    with pytest.raises(EmptyInputError):
        a.pick([])
    assert a.float() == b.float()


def test_table_half_open_boundaries():
    table = WeightedTable([1, 1, 1])
    assert table.total == 3.0
    assert table.index_for(0.0) == 0
    assert table.index_for(0.999) == 0
    # exact boundary belongs to the next candidate
    assert table.index_for(1.0) == 1
    assert table.index_for(2.0) == 2
    assert table.index_for(2.999) == 2


def test_table_skips_zero_weight_at_boundary():
    table = WeightedTable([1, 0, 1])
    assert table.index_for(1.0) == 2


def test_table_clamps_to_last_positive():
    table = WeightedTable([1, 1, 0])
    assert table.index_for(2.0) == 1
    assert len(table) == 3


def test_table_accepts_numpy_weights():
    table = WeightedTable(np.array([0.25, 0.75]))
    assert table.index_for(0.3) == 1


def test_weighted_sampler_matches_weighted_pick():
    items, weights = ["a", "b", "c"], [2.0, 1.0, 7.0]
    sample = Random(8).weighted_sampler(items, weights)
    rng = Random(8)
    assert [sample() for _ in range(50)] == [rng.weighted_pick(items, weights) for _ in range(50)]


def test_weighted_sampler_validates_up_front(rng):
    with pytest.raises(LengthMismatchError):
        rng.weighted_sampler([1, 2, 3], [1, 1])


def test_pick_uniform(rng):
    colors = ["red", "green", "blue"]
    n = 30000
    counts = np.array([0, 0, 0])
    for _ in range(n):
        counts[colors.index(rng.pick(colors))] += 1
    assert np.all(np.abs(counts / n - 1 / 3) < 0.015)


def test_pick_empty(rng):
    with pytest.raises(EmptyInputError):
        rng.pick([])
    with pytest.raises(IndexError):
        rng.pick(())


def test_pick_heterogeneous(rng):
    items = [1, "two", None, 3.0]
    for _ in range(100):
        assert rng.pick(items) in items


@pytest.mark.parametrize("candidates", [{1, 2, 3}, {"a": 1, "b": 2}.keys(), iter([1, 2])])
def test_pick_rejects_unindexable_without_consuming(candidates):
    a, b = Random(3), Random(3)
    with pytest.raises(TypeError):
        a.pick(candidates)
    assert a.int(0, 1 << 40) == b.int(0, 1 << 40)


def test_weighted_pick_rejects_unindexable_without_consuming():
    a, b = Random(3), Random(3)
    with pytest.raises(TypeError):
        a.weighted_pick({"x", "y"}, [1, 1])
    with pytest.raises(TypeError):
        a.weighted_sampler({"x", "y"}, [1, 1])
    assert a.float() == b.float()


def test_pick_from_numpy_array(rng):
    arr = np.array([10, 20, 30])
    for _ in range(50):
        assert rng.pick(arr) in (10, 20, 30)
