"""Adjacency-list graphs with breadth-first and depth-first traversals."""

from __future__ import annotations

from collections import deque


class Graph:
    """A graph on vertices ``0 .. vertex_count - 1`` stored as adjacency lists."""

    def __init__(self, vertex_count: int, directed: bool = False) -> None:
        if vertex_count < 0:
            raise ValueError("vertex count must not be negative")
        self.vertex_count = vertex_count
        self.directed = directed
        self.adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} out of bounds")

    def join(self, a: int, b: int) -> None:
        """Add an edge from ``a`` to ``b`` (and back, unless directed)."""
        self._check_vertex(a)
        self._check_vertex(b)
        self.adjacency[a].append(b)
        if not self.directed:
            self.adjacency[b].append(a)

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check_vertex(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for neighbour in self.adjacency[vertex]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order

    def dfs_recursive(self, start: int) -> list[int]:
        """Return depth-first preorder from ``start``, descending into each
        neighbour as soon as it is seen."""
        self._check_vertex(start)
        visited = {start}
        order = [start]
        # A stack of neighbour iterators mirrors the recursion without its depth limit.
        stack = [iter(self.adjacency[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(self.adjacency[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def dfs_iterative(self, start: int) -> list[int]:
        """Return depth-first order from ``start`` using an explicit stack."""
        self._check_vertex(start)
        visited: set[int] = set()
        order: list[int] = []
        stack = [start]
        while stack:
            vertex = stack.pop()
            if vertex in visited:
                continue
            visited.add(vertex)
            order.append(vertex)
            stack.extend(n for n in reversed(self.adjacency[vertex]) if n not in visited)
        return order

    def shortest_path(self, source: int) -> list[int | None]:
        """Return edge-count distances from ``source``; None for unreachable vertices."""
        self._check_vertex(source)
        dist: list[int | None] = [None] * self.vertex_count
        dist[source] = 0
        queue = deque([source])
        while queue:
            vertex = queue.popleft()
            for neighbour in self.adjacency[vertex]:
                if dist[neighbour] is None:
                    dist[neighbour] = dist[vertex] + 1
                    queue.append(neighbour)
        return dist

    def count_clusters(self) -> int:
        """Return the number of connected groups found by repeated BFS."""
        visited: set[int] = set()
        count = 0
        for vertex in range(self.vertex_count):
            if vertex not in visited:
                visited.update(self.bfs(vertex))
                count += 1
        return count

    def format(self) -> str:
        """Render one line per vertex: ``vertex: neighbour neighbour ...``."""
        return "".join(
            f"{vertex}: " + "".join(f"{n} " for n in neighbours) + "\n"
            for vertex, neighbours in enumerate(self.adjacency)
        )