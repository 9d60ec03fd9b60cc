import random

import pytest

from algonotes.selection import randomized_select, select


@pytest.mark.parametrize("seed", range(5))
def test_select_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-30, 30) for _ in range(25)]
    ordered = sorted(values)
    for order in range(1, len(values) + 1):
        assert select(values, order) == ordered[order - 1]


@pytest.mark.parametrize("seed", range(5))
def test_randomized_matches_select(seed):
    rng = random.Random(seed)
    values = [rng.randint(0, 8) for _ in range(40)]
    for order in range(1, len(values) + 1):
        assert randomized_select(values, order, random.Random(seed * 31 + order)) == select(
            values, order
        )


def test_min_and_max():
    values = [9, 4, 7, 1, 8]
    assert randomized_select(values, 1) == min(values)
    assert randomized_select(values, len(values)) == max(values)


def test_single_element():
    assert randomized_select([5], 1) == 5
    assert select([5], 1) == 5


@pytest.mark.parametrize("order", [0, 4, -1])
def test_invalid_order_raises(order):
    with pytest.raises(ValueError):
        select([1, 2, 3], order)
    with pytest.raises(ValueError):
        randomized_select([1, 2, 3], order)


def test_empty_raises():
    with pytest.raises(ValueError):
        randomized_select([], 1)


def test_inputs_not_modified():
    values = [3, 1, 2]
    select(values, 2)
    randomized_select(values, 2, random.Random(0))
    assert values == [3, 1, 2]