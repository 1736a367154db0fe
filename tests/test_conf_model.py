"""Tests for the configuration-model sampler."""

from collections import Counter

import numpy as np
import pytest

from degswap.graph import Graph, GraphPreconditionError, degree_sequence, is_simple
from degswap.randomize import EdgeListCache, sample_configuration_model


def random_graph(n: int = 40, m: int = 90, seed: int = 0) -> Graph:
    rng = np.random.default_rng(seed)
    g = Graph(n)
    while g.number_of_edges() < m:
        a, b = (int(x) for x in rng.integers(n, size=2))
        if a != b and not g.has_edge(a, b):
            g.set_edge(a, b, float(g.number_of_edges()))
    return g


def edge_pairs(g: Graph) -> set[frozenset[int]]:
    return {frozenset((a, b)) for a, b, _ in g.edges()}


class TestDegenerateInputs:
    """Graphs with fewer than two edges cannot be rewired."""

    def test_single_edge_reports_zero(self) -> None:
        g = Graph.from_edges(4, [(0, 1)])
        before = g.copy()
        assert sample_configuration_model(g, np.random.default_rng(0), 100) == 0
        assert g == before

    def test_empty_graph_reports_zero(self) -> None:
        assert sample_configuration_model(Graph(5), np.random.default_rng(0), 10) == 0

    def test_negative_attempts_rejected(self) -> None:
        with pytest.raises(GraphPreconditionError, match="attempts"):
            sample_configuration_model(random_graph(), np.random.default_rng(0), -1)

    def test_star_never_swaps(self) -> None:
        """All star edges share the center."""
        g = Graph.from_edges(6, [(0, k) for k in range(1, 6)])
        assert sample_configuration_model(g, np.random.default_rng(1), 200) == 0


class TestInvariants:
    """Degrees, simplicity, edge count and weights are preserved."""

    def test_degree_sequence_preserved(self) -> None:
        g = random_graph()
        degrees = [g.degree(a) for a in range(g.size())]
        swaps = sample_configuration_model(g, np.random.default_rng(3), 2000)
        assert swaps > 0
        assert [g.degree(a) for a in range(g.size())] == degrees
        assert g.number_of_edges() == 90
        assert is_simple(g)

    def test_weights_preserved_as_multiset(self) -> None:
        g = random_graph()
        weights = sorted(w for _, _, w in g.edges())
        sample_configuration_model(g, np.random.default_rng(4), 1000)
        assert sorted(w for _, _, w in g.edges()) == weights

    def test_rewires_edges(self) -> None:
        g = random_graph()
        before = edge_pairs(g)
        sample_configuration_model(g, np.random.default_rng(5), 2000)
        assert edge_pairs(g) != before

    def test_swap_count_bounded_by_attempts(self) -> None:
        g = random_graph()
        assert 0 <= sample_configuration_model(g, np.random.default_rng(6), 50) <= 50


class TestEdgeListCache:
    """The cache holds each live edge exactly once after every run."""

    def test_cache_built_canonical(self) -> None:
        g = random_graph()
        cache = EdgeListCache.from_graph(g)
        assert len(cache) == g.number_of_edges()
        assert all(a < b for a, b in cache)

    def test_cache_tracks_graph(self) -> None:
        g = random_graph()
        cache = EdgeListCache.from_graph(g)
        rng = np.random.default_rng(8)
        for _ in range(10):
            sample_configuration_model(g, rng, 200, edge_cache=cache)
            assert len(cache) == g.number_of_edges()
            assert cache.edge_set() == edge_pairs(g)
            assert len(cache.edge_set()) == len(cache)


class TestDeterminism:
    """Fixed seed and input give identical output."""

    def test_same_seed_same_output(self) -> None:
        g1, g2 = random_graph(), random_graph()
        s1 = sample_configuration_model(g1, np.random.default_rng(21), 500)
        s2 = sample_configuration_model(g2, np.random.default_rng(21), 500)
        assert s1 == s2
        assert g1 == g2


class TestStationaryDistribution:
    """Two disjoint edges on four nodes: the three matchings are equally likely."""

    def test_perfect_matchings_uniform(self) -> None:
        counts: Counter = Counter()
        for seed in range(3000):
            g = Graph.from_edges(4, [(0, 1), (2, 3)])
            sample_configuration_model(g, np.random.default_rng(seed), 10)
            assert degree_sequence(g) == [1, 1, 1, 1]
            partner_of_zero = next(iter(g.neighbors(0)))
            counts[partner_of_zero] += 1
        assert set(counts) == {1, 2, 3}
        for partner in (1, 2, 3):
            assert 850 < counts[partner] < 1150, counts
