"""Stable top-down merge sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def _merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _sort(items: Sequence[Any]) -> list[Any]:
    if len(items) <= 1:
        return list(items)
    mid = (len(items) + 1) // 2
    return _merge(_sort(items[:mid]), _sort(items[mid:]))


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a new sorted list; equal elements keep their original order."""
    return _sort(list(values))