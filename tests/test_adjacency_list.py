import pytest

from dsalgo.adjacency_list import Graph, Vertex

EDGES = [(0, 1, 5), (0, 5, 2), (1, 2, 4), (2, 3, 9), (3, 4, 7), (3, 5, 3), (4, 0, 1)]


def _entry_total(graph):
    return sum(len(graph.get_vertex(k).neighbors()) for k in graph.vertex_keys())


@pytest.fixture
def graph():
    g = Graph()
    for i in range(6):
        g.add_vertex(i)
    for source, target, weight in EDGES:
        g.add_edge(source, target, weight)
    return g


def test_empty_graph():
    g = Graph()
    assert len(g) == 0
    assert g.edge_count() == 0
    assert g.get_vertex(1) is None


def test_vertices(graph):
    assert graph.vertex_count() == 6
    assert sorted(graph.vertex_keys()) == list(range(6))
    assert 0 in graph
    assert graph.add_vertex(0) is False
    assert graph.vertex_count() == 6


def test_edge_count_matches_entries(graph):
    assert graph.edge_count() == 2 * len(EDGES)
    assert graph.edge_count() == _entry_total(graph)


def test_self_loop_counts_once(graph):
    before = graph.edge_count()
    graph.add_edge(4, 4, 8)
    assert graph.edge_count() == before + 1
    assert graph.is_adjacent(4, 4)
    assert graph.edge_count() == _entry_total(graph)


def test_vertex_details(graph):
    vertex = graph.get_vertex(0)
    assert vertex.key == 0
    assert vertex.weight_to(1) == 5
    assert vertex.weight_to(3) == 0
    assert vertex.neighbors() == [1, 5, 4]


def test_adjacency_is_symmetric(graph):
    for source, target, _ in EDGES:
        assert graph.is_adjacent(source, target)
        assert graph.is_adjacent(target, source)
    assert not graph.is_adjacent(0, 3)
    assert not graph.is_adjacent(99, 0)


def test_readding_edge_keeps_weight(graph):
    before = graph.edge_count()
    graph.add_edge(0, 1, 77)
    assert graph.edge_count() == before
    assert graph.get_vertex(0).weight_to(1) == 5


def test_add_edge_creates_vertices():
    g = Graph()
    g.add_edge("a", "b", 3)
    assert "a" in g and "b" in g
    assert g.get_vertex("b").weight_to("a") == 3


def test_remove_vertex(graph):
    graph.add_edge(4, 4, 8)
    removed = graph.remove_vertex(0)
    assert removed.key == 0
    assert 0 not in graph
    assert graph.vertex_count() == 5
    assert graph.edge_count() == _entry_total(graph)
    assert all(not graph.is_adjacent(k, 0) for k in graph.vertex_keys())


def test_remove_vertex_with_self_loop(graph):
    graph.add_edge(4, 4, 8)
    graph.remove_vertex(4)
    assert graph.edge_count() == _entry_total(graph)


def test_remove_missing_vertex(graph):
    with pytest.raises(KeyError):
        graph.remove_vertex(42)


def test_remove_edge(graph):
    before = graph.edge_count()
    graph.remove_edge(3, 5)
    assert graph.edge_count() == before - 2
    assert not graph.is_adjacent(3, 5)
    assert not graph.is_adjacent(5, 3)


def test_remove_edge_with_missing_vertex(graph):
    before = graph.edge_count()
    graph.remove_edge(3, 42)
    assert graph.edge_count() == before


def test_vertex_remove_neighbor():
    vertex = Vertex("x")
    vertex.add_neighbor("y", 2)
    vertex.add_neighbor("z", 4)
    vertex.remove_neighbor("y")
    assert vertex.neighbors() == ["z"]
    assert not vertex.is_adjacent("y")