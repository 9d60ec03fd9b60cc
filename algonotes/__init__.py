"""Divide-and-conquer algorithms, Karger's min cut, graph traversals and a dynamic array."""

__version__ = "0.1.0"

__all__ = [
    "graph",
    "inversions",
    "karger",
    "mergesort",
    "quicksort",
    "selection",
    "strassen",
    "vector",
]