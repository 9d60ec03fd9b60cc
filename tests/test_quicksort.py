import random

import pytest

from algonotes.quicksort import quick_sort


@pytest.mark.parametrize("seed", range(10))
def test_matches_builtin_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 100))]
    assert quick_sort(values, random.Random(seed + 100)) == sorted(values)


def test_empty_and_single():
    assert quick_sort([]) == []
    assert quick_sort([9]) == [9]


def test_many_duplicates():
    values = [3] * 500 + [1] * 500
    assert quick_sort(values, random.Random(0)) == sorted(values)


def test_result_independent_of_rng():
    values = [5, 2, 8, 2, 9, 1, 0, 7]
    results = {tuple(quick_sort(values, random.Random(seed))) for seed in range(20)}
    assert results == {tuple(sorted(values))}


def test_strings_without_rng():
    words = ["kiwi", "apple", "mango", "apple"]
    assert quick_sort(words) == sorted(words)


def test_input_is_not_modified():
    values = [4, 3, 2, 1]
    quick_sort(values, random.Random(1))
    assert values == [4, 3, 2, 1]