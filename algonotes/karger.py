"""Karger's randomized contraction algorithm for the minimum cut of a graph."""

from __future__ import annotations

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


@dataclass
class EdgeGraph:
    """A graph held as a plain list of edges."""

    vertex_count: int
    edge_count: int = 0
    edges: list[tuple[int, int]] = field(default_factory=list)

    def add_edge(self, src: int, dest: int) -> None:
        """Add an edge between ``src`` and ``dest``."""
        self.edges.append((src, dest))


class UnionFind:
    """Disjoint sets with path halving and union by size."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._size = [1] * n

    def find(self, i: int) -> int:
        """Return the representative of the set holding ``i``."""
        parent = self._parent
        while i != parent[i]:
            parent[i] = parent[parent[i]]
            i = parent[i]
        return i

    def union(self, p: int, q: int) -> None:
        """Merge the sets holding ``p`` and ``q``."""
        i = self.find(p)
        j = self.find(q)
        if i == j:
            return
        if self._size[i] < self._size[j]:
            self._parent[i] = j
            self._size[j] += self._size[i]
        else:
            self._parent[j] = i
            self._size[i] += self._size[j]

    def size(self, i: int) -> int:
        """Return the number of elements in the set holding ``i``."""
        return self._size[self.find(i)]


def karger_min_cut(
    vertex_count: int,
    edges: Iterable[Sequence[int]],
    rng: random.Random | None = None,
) -> int:
    """Contract random edges until two super-vertices remain; return the cut size.

    The result is always a cut of the graph, so it is never below the true
    minimum cut; repeated runs find the minimum with high probability.
    """
    rng = rng if rng is not None else random.Random()
    edge_list = [(int(a), int(b)) for a, b in edges]
    uf = UnionFind(vertex_count)

    remaining = vertex_count
    if remaining > 2 and not edge_list:
        raise ValueError("graph has no edges to contract")

    while remaining > 2:
        a, b = rng.choice(edge_list)
        root_a, root_b = uf.find(a), uf.find(b)
        if root_a == root_b:
            if all(uf.find(u) == uf.find(v) for u, v in edge_list):
                raise ValueError("graph is disconnected into more than two parts")
            continue
        uf.union(root_a, root_b)
        remaining -= 1

    return sum(1 for u, v in edge_list if uf.find(u) != uf.find(v))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the algorithm on a small sample graph and print the cut."""
    graph = EdgeGraph(4, 5)
    graph.add_edge(0, 1)
    graph.add_edge(0, 2)
    graph.add_edge(0, 3)
    graph.add_edge(1, 3)
    graph.add_edge(2, 3)

    min_cut = karger_min_cut(graph.vertex_count, graph.edges)
    print(f"Minimum cut: {min_cut}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())