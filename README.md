# algonotes

A small collection of classic algorithms and data structures in plain Python,
with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `algonotes.inversions` | `count_inversions_brute_force` (checks every pair), `count_inversions` (merge-sort based, O(n log n)) |
| `algonotes.mergesort` | `merge_sort`, a stable merge sort returning a new list |
| `algonotes.quicksort` | `quick_sort(values, rng=None)` with random pivots, returning a new list |
| `algonotes.selection` | `select` (by sorting) and `randomized_select` (expected linear time); orders are 1-based |
| `algonotes.strassen` | `matrix_order`, `naive_multiply`, `add_matrices`, `strassen_multiply`, `format_matrix` |
| `algonotes.karger` | `EdgeGraph`, `UnionFind`, `karger_min_cut`, and the `main` behind the `algonotes-karger` command |
| `algonotes.graph` | `Graph` with BFS, recursive and iterative DFS, unweighted shortest paths, cluster counting and `format` |
| `algonotes.vector` | `DynamicArray`, an append-only integer array whose capacity starts at 8 and doubles when full |

Functions that take an `rng` accept a `random.Random` instance, so results can
be made reproducible; without one a fresh generator is used.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Counting inversions:

```python
from algonotes.inversions import count_inversions

count_inversions([3, 1, 2])  # 2
```

Order statistics (orders are 1-based; an order outside `1..len(values)`
raises `ValueError`):

```python
import random
from algonotes.selection import randomized_select

randomized_select([7, 2, 9, 4], 2, random.Random(0))  # 4
```

Graph traversal:

```python
from algonotes.graph import Graph

g = Graph(6, directed=False)
for a, b in [(0, 1), (0, 3), (1, 2), (3, 4), (2, 5), (4, 5)]:
    g.join(a, b)

g.bfs(0)             # [0, 1, 3, 2, 4, 5]
g.shortest_path(1)   # edge-count distances from vertex 1, None where unreachable
g.count_clusters()   # 1
```

`Graph.join` raises `IndexError` for a vertex outside the graph.

Matrix multiplication with Strassen's method:

```python
from algonotes.strassen import strassen_multiply

strassen_multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]])  # [[19, 22], [43, 50]]
```

Matrices larger than 2×2 must be square and have a power-of-two size;
`naive_multiply` raises `ValueError` ("Multiplication is not defined") when the
shapes do not fit.

A dynamic array:

```python
from algonotes.vector import DynamicArray

arr = DynamicArray(range(9))
len(arr)        # 9
arr.capacity    # 16
print(arr.format())
```

## Command line

Karger's randomized minimum cut on a small sample graph of four vertices and
five edges:

```
algonotes-karger
```

It prints the size of the cut it found, for example `Minimum cut: 2`. Because
the algorithm is randomized, a single run may in general report a larger cut
than the true minimum. `karger_min_cut` raises `ValueError` when the graph
falls apart into more than two pieces that no edge can join.