"""
AlgoLab Graph Tests
===================
Tests for edge parsing, Bellman-Ford, disjoint-set union and Kruskal MST.
"""

import io

import pytest

from common.errors import InvalidParameterError, NegativeCycleError
from graphs.disjoint_set import DisjointSet
from graphs.edges import Edge, make_edges, read_graph
from graphs.shortest_paths import bellman_ford
from graphs.spanning_tree import kruskal_mst


SP_EDGES = make_edges([
    (0, 1, -1), (0, 2, 4), (1, 2, 3), (1, 3, 2),
    (1, 4, 2), (3, 2, 5), (3, 1, 1), (4, 3, -3),
])

MST_EDGES = make_edges([
    (0, 1, 10), (0, 2, 5), (2, 3, 9), (0, 3, 3), (1, 2, 6),
])


# ═══════════════════════════════════════════════════════════════════
# Edges
# ═══════════════════════════════════════════════════════════════════

class TestEdges:

    def test_ordering_by_weight_then_endpoints(self):
        edges = [Edge(2, 3, 5), Edge(0, 1, 5), Edge(4, 0, 1)]
        assert sorted(edges) == [Edge(4, 0, 1), Edge(0, 1, 5), Edge(2, 3, 5)]

    def test_read_graph(self):
        text = "3 2\n0 1 4\n1 2 -2\n0\n"
        num_vertices, edges, source = read_graph(io.StringIO(text))
        assert num_vertices == 3
        assert edges == [Edge(0, 1, 4), Edge(1, 2, -2)]
        assert source == 0

    def test_read_graph_wrong_token_count(self):
        with pytest.raises(InvalidParameterError):
            read_graph(io.StringIO("3 2\n0 1 4\n0\n"))

    def test_read_graph_non_integer(self):
        with pytest.raises(InvalidParameterError, match="integers"):
            read_graph(io.StringIO("3 1\n0 x 4\n0\n"))

    def test_read_graph_bad_source(self):
        with pytest.raises(InvalidParameterError, match="source"):
            read_graph(io.StringIO("2 1\n0 1 4\n5\n"))


# ═══════════════════════════════════════════════════════════════════
# Bellman-Ford
# ═══════════════════════════════════════════════════════════════════

class TestBellmanFord:

    def test_negative_weights(self):
        paths = bellman_ford(5, SP_EDGES, 0)
        assert paths.distances == [0, -1, 2, -2, 1]
        assert paths.distance_to(3) == -2

    def test_unreachable_vertex(self):
        edges = make_edges([(0, 1, 7)])
        paths = bellman_ford(3, edges, 0)
        assert paths.as_dict() == {0: 0, 1: 7, 2: None}

    def test_single_vertex(self):
        assert bellman_ford(1, [], 0).distances == [0]

    def test_negative_cycle(self):
        edges = make_edges([(0, 1, 1), (1, 2, -2), (2, 1, 1)])
        with pytest.raises(NegativeCycleError):
            bellman_ford(3, edges, 0)

    def test_unreachable_negative_cycle_ignored(self):
        edges = make_edges([(0, 1, 2), (2, 3, -5), (3, 2, 1)])
        paths = bellman_ford(4, edges, 0)
        assert paths.distances == [0, 2, None, None]

    def test_invalid_source(self):
        with pytest.raises(InvalidParameterError):
            bellman_ford(3, [], 3)

    def test_invalid_edge_endpoint(self):
        with pytest.raises(InvalidParameterError):
            bellman_ford(2, make_edges([(0, 2, 1)]), 0)


# ═══════════════════════════════════════════════════════════════════
# Disjoint Set / Kruskal
# ═══════════════════════════════════════════════════════════════════

class TestDisjointSet:

    def test_union_and_find(self):
        dsu = DisjointSet(5)
        assert dsu.count == 5
        assert dsu.union(0, 1)
        assert dsu.union(3, 4)
        assert not dsu.union(1, 0)
        assert dsu.connected(0, 1)
        assert not dsu.connected(1, 3)
        assert dsu.count == 3

    def test_long_chain(self):
        dsu = DisjointSet(100)
        for i in range(99):
            dsu.union(i, i + 1)
        assert dsu.count == 1
        assert len({dsu.find(i) for i in range(100)}) == 1


class TestKruskal:

    def test_sample_graph(self):
        mst = kruskal_mst(4, MST_EDGES)
        assert mst.edges == [Edge(0, 3, 3), Edge(0, 2, 5), Edge(1, 2, 6)]
        assert mst.total_weight == 14
        assert mst.is_spanning(4)

    def test_input_not_mutated(self):
        edges = list(MST_EDGES)
        kruskal_mst(4, edges)
        assert edges == MST_EDGES

    def test_disconnected_graph_gives_forest(self):
        edges = make_edges([(0, 1, 1), (2, 3, 2)])
        mst = kruskal_mst(4, edges)
        assert mst.total_weight == 3
        assert not mst.is_spanning(4)

    def test_invalid_vertex_count(self):
        with pytest.raises(InvalidParameterError):
            kruskal_mst(0, [])
