import pytest

from algonotes.graph import Graph


def _sample() -> Graph:
    g = Graph(6)
    for a, b in [(0, 1), (0, 3), (1, 2), (3, 4), (2, 5), (4, 5)]:
        g.join(a, b)
    return g


def _clusters_sample() -> Graph:
    g = Graph(10)
    for a, b in [(0, 2), (0, 4), (2, 4), (4, 6), (4, 8), (1, 3), (5, 7), (5, 9)]:
        g.join(a, b)
    return g


def test_bfs_sample_order():
    assert _sample().bfs(0) == [0, 1, 3, 2, 4, 5]


def test_bfs_visits_each_reachable_vertex_once():
    order = _sample().bfs(2)
    assert order[0] == 2
    assert sorted(order) == list(range(6))


def test_dfs_variants_agree_on_sample():
    g = _sample()
    for start in range(6):
        assert g.dfs_recursive(start) == g.dfs_iterative(start)


def test_dfs_visits_each_reachable_vertex_once():
    g = _sample()
    order = g.dfs_recursive(0)
    assert order[0] == 0
    assert sorted(order) == list(range(6))


def test_dfs_goes_deep_before_wide():
    g = _sample()
    order = g.dfs_iterative(0)
    # Vertex 3 is a direct neighbour of 0 but is reached last going deep through 1.
    assert order[-1] == 3
    assert g.bfs(0).index(3) < order.index(3)


def test_dfs_on_long_path_does_not_hit_recursion_limit():
    n = 5000
    g = Graph(n)
    for i in range(n - 1):
        g.join(i, i + 1)
    assert g.dfs_recursive(0) == list(range(n))


def test_shortest_path_sample():
    assert _sample().shortest_path(1) == [1, 0, 1, 2, 3, 2]


def test_shortest_path_unreachable_is_none():
    g = Graph(3)
    g.join(0, 1)
    dist = g.shortest_path(0)
    assert dist[0] == 0
    assert dist[2] is None


def test_shortest_path_neighbours_differ_by_at_most_one():
    g = _sample()
    dist = g.shortest_path(4)
    for v, neighbours in enumerate(g.adjacency):
        for n in neighbours:
            assert abs(dist[v] - dist[n]) <= 1


def test_count_clusters_sample():
    assert _clusters_sample().count_clusters() == 3


def test_count_clusters_no_edges():
    assert Graph(4).count_clusters() == 4


def test_directed_join_is_one_way():
    g = Graph(3, directed=True)
    g.join(0, 1)
    assert g.adjacency[0] == [1]
    assert g.adjacency[1] == []
    assert g.bfs(1) == [1]


def test_join_out_of_bounds_raises():
    g = Graph(2)
    with pytest.raises(IndexError):
        g.join(0, 2)
    with pytest.raises(IndexError):
        g.join(-1, 0)


def test_traversal_bad_start_raises():
    with pytest.raises(IndexError):
        Graph(2).bfs(5)


def test_format_lists_each_vertex():
    g = _sample()
    lines = g.format().splitlines()
    assert len(lines) == 6
    for vertex, line in enumerate(lines):
        head, _, rest = line.partition(": ")
        assert int(head) == vertex
        assert [int(x) for x in rest.split()] == g.adjacency[vertex]