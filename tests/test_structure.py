"""Tests for graphs/structure.py"""

import random

import pytest

from graphs import (
    Graph,
    find_directed_cycle,
    find_undirected_cycle,
    has_directed_cycle,
    has_undirected_cycle,
    has_undirected_cycle_union_find,
    is_bipartite,
    topological_sort,
    topological_sort_kahn,
    two_coloring,
)

TOPOLOGICAL_SORTS = [topological_sort, topological_sort_kahn]


def directed(vertices, *edges: tuple[int, int]) -> Graph:
    graph = Graph(vertices)
    for source, destination in edges:
        graph.add_edge(source, destination)
    return graph


def undirected(vertices, *edges: tuple[int, int]) -> Graph:
    graph = Graph(vertices)
    for u, v in edges:
        graph.add_undirected_edge(u, v)
    return graph


def assert_closed_cycle(graph: Graph, cycle: tuple[int, ...]) -> None:
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 2
    for source, destination in zip(cycle, cycle[1:]):
        assert any(e.destination == destination for e in graph.edges_from(source))


class TestDirectedCycle:
    def test_triangle(self):
        graph = directed(range(3), (0, 1), (1, 2), (2, 0))
        assert has_directed_cycle(graph)
        assert find_directed_cycle(graph) == (0, 1, 2, 0)

    def test_chain(self):
        graph = directed(range(3), (0, 1), (1, 2))
        assert not has_directed_cycle(graph)
        assert find_directed_cycle(graph) is None

    def test_self_loop(self):
        graph = directed([0], (0, 1), (1, 1))
        assert find_directed_cycle(graph) == (1, 1)

    def test_diamond_is_not_a_cycle(self):
        """Two paths to the same vertex give a forward/cross edge, not a back edge."""
        graph = directed(range(4), (0, 1), (0, 2), (1, 3), (2, 3))
        assert not has_directed_cycle(graph)

    def test_cycle_in_second_tree(self):
        graph = directed(range(5), (0, 1), (2, 3), (3, 4), (4, 3))
        cycle = find_directed_cycle(graph)
        assert cycle == (3, 4, 3)

    def test_antiparallel_pair_is_a_directed_cycle(self):
        graph = undirected(range(2), (0, 1))
        assert has_directed_cycle(graph)
        assert not has_undirected_cycle(graph)

    def test_union_find_shortcut_would_be_wrong(self):
        """A DAG whose undirected shadow has a cycle."""
        graph = directed(range(3), (0, 1), (0, 2), (1, 2))
        assert not has_directed_cycle(graph)
        assert has_undirected_cycle_union_find(graph)


class TestUndirectedCycle:
    def test_tree(self):
        graph = undirected(range(4), (0, 1), (1, 2), (1, 3))
        assert not has_undirected_cycle(graph)
        assert not has_undirected_cycle_union_find(graph)

    def test_triangle(self):
        graph = undirected(range(3), (0, 1), (1, 2), (2, 0))
        assert has_undirected_cycle(graph)
        assert has_undirected_cycle_union_find(graph)
        cycle = find_undirected_cycle(graph)
        assert_closed_cycle(graph, cycle)
        assert set(cycle) == {0, 1, 2}

    def test_self_loop(self):
        graph = undirected(range(2), (0, 1))
        graph.add_edge(1, 1)
        assert find_undirected_cycle(graph) == (1, 1)
        assert has_undirected_cycle_union_find(graph)

    def test_forest(self):
        graph = undirected(range(6), (0, 1), (2, 3), (3, 4))
        assert not has_undirected_cycle(graph)
        assert not has_undirected_cycle_union_find(graph)

    @pytest.mark.parametrize("seed", range(10))
    def test_methods_agree(self, seed):
        rng = random.Random(seed)
        graph = Graph(range(12))
        for _ in range(rng.randint(5, 14)):
            u, v = rng.sample(range(12), 2)
            if v not in {e.destination for e in graph.edges_from(u)}:
                graph.add_undirected_edge(u, v)
        cycle = find_undirected_cycle(graph)
        assert (cycle is not None) == has_undirected_cycle_union_find(graph)
        if cycle is not None:
            assert_closed_cycle(graph, cycle)
            assert len(cycle) >= 4


class TestTopologicalSort:
    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_linear_chain(self, sort):
        """0 -> 1 -> 2 should give [0, 1, 2]"""
        graph = directed(range(3), (0, 1), (1, 2))
        assert sort(graph) == (0, 1, 2)

    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_diamond(self, sort):
        """
        Diamond: 0 -> 1, 0 -> 2, 1 -> 3, 2 -> 3
        Valid orders: [0, 1, 2, 3] or [0, 2, 1, 3]
        """
        graph = directed(range(4), (0, 1), (0, 2), (1, 3), (2, 3))
        result = list(sort(graph))
        assert result.index(0) < result.index(1)
        assert result.index(0) < result.index(2)
        assert result.index(1) < result.index(3)
        assert result.index(2) < result.index(3)

    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_disconnected_nodes(self, sort):
        """Nodes with no edges should still be included."""
        assert set(sort(Graph([0, 1, 2]))) == {0, 1, 2}

    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_empty_graph(self, sort):
        assert sort(Graph()) == ()

    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_single_vertex(self, sort):
        assert sort(Graph([4])) == (4,)

    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_layered_dag(self, sort):
        """
        1 -> 2, 3
        2 -> 4
        3 -> 4, 5
        4 -> 6
        5 -> 6
        """
        graph = directed([], (1, 2), (1, 3), (2, 4), (3, 4), (3, 5), (4, 6), (5, 6))
        order = sort(graph)
        assert order[0] == 1 and order[-1] == 6
        assert order.index(3) < order.index(5)
        assert order.index(2) < order.index(4)

    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_cycle_gives_empty_order(self, sort):
        graph = directed(range(3), (0, 1), (1, 2), (2, 0))
        assert sort(graph) == ()

    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_self_loop_gives_empty_order(self, sort):
        assert sort(directed([0], (0, 0))) == ()

    def test_kahn_breaks_ties_on_vertex_id(self):
        graph = directed([5, 3, 9, 1], (9, 1), (5, 1))
        assert topological_sort_kahn(graph) == (3, 5, 9, 1)

    @pytest.mark.parametrize("seed", range(10))
    @pytest.mark.parametrize("sort", TOPOLOGICAL_SORTS)
    def test_random_dag(self, sort, seed):
        """Edges only go from a lower to a higher rank, so the graph is a DAG."""
        rng = random.Random(seed)
        ranks = list(range(20))
        rng.shuffle(ranks)
        graph = Graph(range(20))
        for _ in range(40):
            a, b = rng.sample(range(20), 2)
            if ranks[a] > ranks[b]:
                a, b = b, a
            graph.add_edge(a, b)

        order = sort(graph)
        assert sorted(order) == list(range(20))
        position = {vertex: i for i, vertex in enumerate(order)}
        for edge in graph.edges():
            assert position[edge.source] < position[edge.destination]


class TestBipartite:
    def test_triangle(self):
        graph = undirected(range(3), (0, 1), (1, 2), (2, 0))
        assert not is_bipartite(graph)
        assert two_coloring(graph) is None

    def test_square(self):
        graph = undirected(range(4), (0, 1), (1, 2), (2, 3), (3, 0))
        assert is_bipartite(graph)
        assert two_coloring(graph) == {0: 0, 1: 1, 3: 1, 2: 0}

    def test_empty_and_isolated(self):
        assert is_bipartite(Graph())
        assert is_bipartite(Graph([0, 1]))

    def test_every_component_checked(self):
        """A bipartite component first, then an odd cycle."""
        graph = undirected(range(5), (0, 1), (2, 3), (3, 4), (4, 2))
        assert not is_bipartite(graph)

    def test_self_loop(self):
        assert not is_bipartite(directed([0], (0, 0)))

    @pytest.mark.parametrize("length", [3, 4, 5, 6, 7, 8])
    def test_cycles(self, length):
        graph = undirected(range(length), *((i, (i + 1) % length) for i in range(length)))
        assert is_bipartite(graph) == (length % 2 == 0)

    def test_coloring_is_proper(self):
        graph = undirected(range(6), (0, 3), (0, 4), (1, 4), (1, 5), (2, 5))
        coloring = two_coloring(graph)
        assert coloring is not None
        for edge in graph.edges():
            assert coloring[edge.source] != coloring[edge.destination]
