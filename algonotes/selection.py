"""Order statistics: the ``order``-th smallest element of a sequence (1-indexed)."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any


def _check_order(items: list[Any], order: int) -> None:
    if not 1 <= order <= len(items):
        raise ValueError(f"order {order} out of range for {len(items)} elements")


def select(values: Iterable[Any], order: int) -> Any:
    """Find the ``order``-th smallest element by sorting."""
    items = sorted(values)
    _check_order(items, order)
    return items[order - 1]


def _partition(items: list[Any], lo: int, hi: int, rng: random.Random) -> int:
    idx = rng.randint(lo, hi)
    items[lo], items[idx] = items[idx], items[lo]
    pivot = items[lo]
    boundary = lo + 1
    for j in range(lo + 1, hi + 1):
        if items[j] < pivot:
            items[j], items[boundary] = items[boundary], items[j]
            boundary += 1
    items[boundary - 1], items[lo] = items[lo], items[boundary - 1]
    return boundary - 1


def randomized_select(
    values: Iterable[Any], order: int, rng: random.Random | None = None
) -> Any:
    """Find the ``order``-th smallest element in expected linear time."""
    rng = rng if rng is not None else random.Random()
    items = list(values)
    _check_order(items, order)

    lo, hi = 0, len(items) - 1
    while lo < hi:
        p = _partition(items, lo, hi, rng)
        rank = p - lo + 1
        if rank == order:
            return items[p]
        if rank > order:
            hi = p - 1
        else:
            order -= rank
            lo = p + 1
    return items[lo]