"""A growable array of integers that doubles its capacity when full."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

INIT_SIZE = 8
GROWTH_FACTOR = 2


class DynamicArray:
    """An append-only array that tracks its capacity as it grows."""

    def __init__(self, items: Iterable[int] = ()) -> None:
        self._items: list[int] = []
        self._capacity = INIT_SIZE
        for item in items:
            self.append(item)

    def append(self, item: int) -> None:
        """Add ``item`` at the end, growing the capacity when full."""
        if len(self._items) >= self._capacity:
            self._capacity *= GROWTH_FACTOR
        self._items.append(item)

    def __getitem__(self, index: int) -> int:
        if not 0 <= index < len(self._items):
            raise IndexError("Index out of bounds")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    @property
    def capacity(self) -> int:
        """The number of items the array can hold before it grows."""
        return self._capacity

    def format(self) -> str:
        """Describe the size, capacity and items of the array."""
        items = "".join(f"{item} " for item in self._items)
        return (
            f"Size of Vector: {len(self)}\n"
            f"Max Capacity: {self._capacity}\n"
            "Items in the Vector are:\n"
            f"{items}\n"
        )