"""Counting inversions in a sequence.

An inversion is a pair of positions ``i < j`` with ``values[i] > values[j]``.
A sorted sequence has none; a strictly descending sequence of length ``n``
has the maximum, ``n * (n - 1) / 2``.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations
from typing import Any


def count_inversions_brute_force(values: Iterable[Any]) -> int:
    """Count inversions by checking every pair, in quadratic time."""
    return sum(1 for earlier, later in combinations(values, 2) if earlier > later)


def _sort_and_count(items: Sequence[Any]) -> tuple[list[Any], int]:
    if len(items) <= 1:
        return list(items), 0

    mid = (len(items) + 1) // 2
    left, left_count = _sort_and_count(items[:mid])
    right, right_count = _sort_and_count(items[mid:])

    merged: list[Any] = []
    split_count = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] > right[j]:
            merged.append(right[j])
            j += 1
            # Every element still waiting on the left forms an inversion.
            split_count += len(left) - i
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])

    return merged, left_count + right_count + split_count


def count_inversions(values: Iterable[Any]) -> int:
    """Count inversions with a merge-sort based divide and conquer."""
    _, count = _sort_and_count(list(values))
    return count