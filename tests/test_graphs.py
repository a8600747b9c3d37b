import pytest

from dsakit.graphs import Graph


def _graph(count, edges):
    graph = Graph(count)
    for source, destination, weight in edges:
        graph.add_edge(source, destination, weight)
    return graph


def test_triangle_mst():
    graph = _graph(3, [(0, 1, 1), (1, 2, 2), (0, 2, 3)])
    tree = graph.minimum_spanning_tree()
    assert tree.total_weight == 3
    assert tree.edges == ((0, 1, 1), (1, 2, 2))


def test_heavy_edge_excluded_from_cycle():
    graph = _graph(4, [(0, 1, 1), (1, 2, 1), (2, 3, 1), (3, 0, 10)])
    tree = graph.minimum_spanning_tree()
    pairs = {frozenset((p, c)) for p, c, _ in tree.edges}
    assert frozenset((3, 0)) not in pairs


def test_mst_invariants():
    edges = [
        (0, 1, 4), (0, 7, 8), (1, 2, 8), (1, 7, 11), (2, 3, 7),
        (2, 8, 2), (2, 5, 4), (3, 4, 9), (3, 5, 14), (4, 5, 10),
        (5, 6, 2), (6, 7, 1), (6, 8, 6), (7, 8, 7),
    ]
    graph = _graph(9, edges)
    tree = graph.minimum_spanning_tree()
    assert len(tree.edges) == graph.vertex_count - 1
    assert [child for _, child, _ in tree.edges] == list(range(1, 9))
    assert tree.total_weight == sum(w for _, _, w in tree.edges)
    for parent, child, weight in tree.edges:
        assert graph.has_edge(parent, child)
        assert dict(graph.neighbors(parent))[child] == weight


def test_single_vertex():
    tree = Graph(1).minimum_spanning_tree()
    assert tree.total_weight == 0
    assert tree.edges == ()


def test_disconnected_graph_raises():
    graph = _graph(3, [(0, 1, 1)])
    with pytest.raises(ValueError):
        graph.minimum_spanning_tree()


def test_duplicate_edge_ignored():
    graph = Graph(2)
    assert graph.add_edge(0, 1, 5) is True
    assert graph.add_edge(1, 0, 1) is False
    assert graph.neighbors(0) == [(1, 5)]
    assert graph.neighbors(1) == [(0, 5)]


def test_edges_are_symmetric():
    graph = _graph(3, [(0, 2, 7)])
    assert graph.has_edge(2, 0)
    assert not graph.has_edge(0, 1)


def test_out_of_range_vertex():
    graph = Graph(2)
    with pytest.raises(IndexError):
        graph.add_edge(0, 2, 1)
    with pytest.raises(IndexError):
        graph.neighbors(-1)


def test_negative_vertex_count():
    with pytest.raises(ValueError):
        Graph(-1)