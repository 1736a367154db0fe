"""Tests for the bounded dual traversal and the exact connectivity check."""

import pytest

from degswap.graph import (
    BoundedSearch,
    Graph,
    GraphPreconditionError,
    bounded_dual_traversal,
    count_components,
    is_connected,
)


def path_graph(n: int) -> Graph:
    return Graph.from_edges(n, [(k, k + 1) for k in range(n - 1)])


def cycle_graph(n: int) -> Graph:
    return Graph.from_edges(n, [(k, (k + 1) % n) for k in range(n)])


class TestBoundedSearch:
    """One settled node per advance."""

    def test_finishes_after_component_size_steps(self):
        g = path_graph(4)
        search = BoundedSearch(g, 0)
        for _ in range(3):
            search.advance()
            assert not search.finished
        search.advance()
        assert search.finished
        assert search.reached == 4

    def test_advance_after_finish_is_noop(self):
        g = Graph.from_edges(3, [(0, 1)])
        search = BoundedSearch(g, 0)
        search.advance()
        search.advance()
        assert search.finished
        search.advance()
        assert search.reached == 2


class TestBoundedDualTraversal:
    """Lock-step exploration from two start nodes."""

    def test_small_component_detected(self):
        # Component {0, 1} split from path 2-3-4-5-6.
        g = Graph.from_edges(7, [(0, 1), (2, 3), (3, 4), (4, 5), (5, 6)])
        result = bounded_dual_traversal(g, 0, 3, limit=7)
        assert result.first_finished
        assert not result.second_finished
        assert result.first_reached == 2
        assert result.steps == 2
        assert result.isolates_component(7)

    def test_budget_exhausted_without_finishing(self):
        g = cycle_graph(10)
        result = bounded_dual_traversal(g, 0, 5, limit=3)
        assert not result.first_finished
        assert not result.second_finished
        assert result.steps == 3
        assert not result.isolates_component(10)

    def test_full_budget_on_connected_graph_is_not_flagged(self):
        """With limit = N a side may finish, but it covers the whole graph."""
        g = cycle_graph(4)
        result = bounded_dual_traversal(g, 0, 2, limit=4)
        assert result.first_finished and result.second_finished
        assert result.first_reached == 4
        assert not result.isolates_component(4)

    def test_small_budget_misses_larger_split(self):
        """Two triangles: limit 2 cannot see that each side is closed."""
        g = Graph.from_edges(6, [(0, 1), (1, 2), (2, 0), (3, 4), (4, 5), (5, 3)])
        assert not bounded_dual_traversal(g, 0, 3, limit=2).isolates_component(6)
        assert bounded_dual_traversal(g, 0, 3, limit=3).isolates_component(6)

    @pytest.mark.parametrize("limit", [0, 6])
    def test_limit_out_of_range(self, limit):
        with pytest.raises(GraphPreconditionError, match="limit"):
            bounded_dual_traversal(cycle_graph(5), 0, 1, limit)

    def test_graph_not_modified(self):
        g = cycle_graph(6)
        snapshot = g.copy()
        bounded_dual_traversal(g, 0, 3, limit=6)
        assert g == snapshot


class TestConnectivity:
    """Exact component counting via scipy."""

    def test_path_is_connected(self):
        assert is_connected(path_graph(6))
        assert count_components(path_graph(6)) == 1

    def test_two_components(self):
        g = Graph.from_edges(4, [(0, 1), (2, 3)])
        assert not is_connected(g)
        assert count_components(g) == 2

    def test_isolated_node_counts_as_component(self):
        g = Graph.from_edges(4, [(0, 1), (1, 2)])
        assert count_components(g) == 2
        assert not is_connected(g)

    def test_trivial_graphs(self):
        assert is_connected(Graph(0))
        assert is_connected(Graph(1))
        assert count_components(Graph(0)) == 0
