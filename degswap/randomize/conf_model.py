"""Configuration-model sampler for simple graphs via uncoordinated edge swaps.

Instead of stub matching, this is a Markov chain over graphs with the input's
degree sequence. Each step picks two edges uniformly at random (independently,
so a pair is drawn with probability 1/L**2 for L edges) and, if the two edges
are disjoint and the rewired pair would not duplicate an existing edge,
replaces AB, CD by AD, CB. Every move is reversible with the same
probability, so the chain is symmetric and its stationary distribution is
uniform over the simple graphs reachable by swaps.

Like any MCMC sampler the output is only asymptotically uniform. On average
L * (1 - 2/L) ** s edges remain untouched after s successful swaps; make
sure every edge has moved a few times. No connectivity guarantee is given.
"""

import logging
from collections.abc import Iterator

import numpy as np

from degswap.graph.store import Graph
from degswap.graph.types import NO_EDGE, GraphPreconditionError

log = logging.getLogger(__name__)


class EdgeListCache:
    """Positional list of the graph's edges used for uniform edge selection.

    Built once with canonical (a < b) pairs. A successful swap overwrites the
    two affected positions in place, so the cache always holds each current
    edge exactly once, but entries are no longer kept in canonical order.
    """

    __slots__ = ("_edges",)

    def __init__(self, edges: list[tuple[int, int]]) -> None:
        self._edges = edges

    @classmethod
    def from_graph(cls, graph: Graph) -> "EdgeListCache":
        return cls([(a, b) for a, b, _ in graph.edges()])

    def __len__(self) -> int:
        return len(self._edges)

    def __getitem__(self, idx: int) -> tuple[int, int]:
        return self._edges[idx]

    def __setitem__(self, idx: int, edge: tuple[int, int]) -> None:
        self._edges[idx] = edge

    def __iter__(self) -> Iterator[tuple[int, int]]:
        return iter(self._edges)

    def edge_set(self) -> set[frozenset[int]]:
        return {frozenset(e) for e in self._edges}


def sample_configuration_model(
    graph: Graph,
    rng: np.random.Generator,
    attempts: int,
    edge_cache: EdgeListCache | None = None,
) -> int:
    """Run ``attempts`` double-edge swap attempts on ``graph`` in place.

    Args:
        graph: Graph to rewire. Degree sequence and simplicity are kept.
        rng: Random stream.
        attempts: Number of swap attempts (not successes).
        edge_cache: Optional cache already in sync with ``graph``; built from
            the graph when omitted.

    Returns:
        Number of successful swaps.
    """
    if attempts < 0:
        raise GraphPreconditionError(f"attempts must be >= 0, got {attempts}")
    if edge_cache is None:
        edge_cache = EdgeListCache.from_graph(graph)

    num_edges = len(edge_cache)
    if num_edges < 2:
        log.debug("Fewer than 2 edges (%d); nothing to swap", num_edges)
        return 0

    successes = 0
    for _ in range(attempts):
        idx1 = int(rng.integers(num_edges))
        idx2 = int(rng.integers(num_edges))
        if idx1 == idx2:
            continue

        a, b = edge_cache[idx1]
        c, d = edge_cache[idx2]
        if a == c or a == d or b == c or b == d:
            continue

        # Orient the first edge at random so both rewirings are reachable.
        if rng.integers(2) == 0:
            a, b = b, a

        if graph.has_edge(a, d) or graph.has_edge(b, c):
            continue

        edge_cache[idx1] = (a, d)
        edge_cache[idx2] = (c, b)

        w_ab = graph.edge_value(a, b)
        w_cd = graph.edge_value(c, d)
        if rng.integers(2) == 0:
            graph.set_edge(a, d, w_ab)
            graph.set_edge(b, c, w_cd)
        else:
            graph.set_edge(a, d, w_cd)
            graph.set_edge(b, c, w_ab)
        graph.set_edge(a, b, NO_EDGE)
        graph.set_edge(c, d, NO_EDGE)
        successes += 1

    log.debug(
        "Configuration model: %d/%d successful swaps over %d edges",
        successes, attempts, num_edges,
    )
    return successes
