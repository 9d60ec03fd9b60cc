"""Randomized quicksort."""

from __future__ import annotations

import random
from collections.abc import Iterable
from typing import Any


def _partition(items: list[Any], lo: int, hi: int, rng: random.Random) -> int:
    """Partition ``items[lo:hi + 1]`` around a random pivot; return its index."""
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


def quick_sort(values: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Return a new sorted list, using random pivots drawn from ``rng``."""
    rng = rng if rng is not None else random.Random()
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        p = _partition(items, lo, hi, rng)
        pending.append((lo, p - 1))
        pending.append((p + 1, hi))
    return items