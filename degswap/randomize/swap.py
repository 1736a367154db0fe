"""Single degree-preserving moves on a live graph.

``switch_link_pair_ends`` is the connectivity-aware double-edge swap used by
the round orchestrator: edges i-m and j-n become i-n and j-m, and the move is
undone on the spot if a bounded search suggests it cut off a small piece of
the graph. ``switch_connections`` exchanges the whole neighborhoods of two
nodes.
"""

import logging

import numpy as np

from degswap.graph.store import Graph
from degswap.graph.traversal import bounded_dual_traversal
from degswap.graph.types import NO_EDGE, GraphPreconditionError
from degswap.randomize.types import SwapExhaustedError

log = logging.getLogger(__name__)


def switch_link_pair_ends(
    graph: Graph,
    rng: np.random.Generator,
    limit: int,
    max_proposals: int | None = None,
) -> int:
    """Perform one accepted connectivity-preserving double-edge swap.

    Proposals are drawn until one passes every check:

    1. Nodes i != j uniformly, then m uniformly among i's neighbors and n
       among j's neighbors.
    2. Reject if m == n, m == j, n == i, or edge i-n or j-m already exists.
    3. Reject without touching the graph if the swap would certainly leave
       an isolated edge (i and n both leaves, or j and m both leaves).
    4. Apply the swap and run the bounded dual traversal from i and j. If
       either side closes off a component smaller than the graph within
       ``limit`` steps, revert and keep drawing.

    Args:
        graph: Graph to mutate. On return exactly two edges were replaced.
        rng: Random stream, consumed in a fixed order.
        limit: Traversal step budget, 1 <= limit <= graph.size().
        max_proposals: Optional cap on the number of draws (step 1) before
            giving up. None means draw until a swap is accepted.

    Returns:
        Number of proposals that survived step 2 up to and including the
        accepted one (>= 1).

    Raises:
        GraphPreconditionError: If ``limit`` is out of range, the graph has
            fewer than two edges, or a drawn node has degree 0.
        SwapExhaustedError: If ``max_proposals`` draws produced no accepted
            swap. The graph is unchanged.
    """
    net_size = graph.size()
    if not 1 <= limit <= net_size:
        raise GraphPreconditionError(f"limit must be in [1, {net_size}], got {limit}")
    if graph.number_of_edges() < 2:
        raise GraphPreconditionError(
            f"need at least 2 edges to swap, graph has {graph.number_of_edges()}"
        )

    tries = 0
    draws = 0
    while True:
        if max_proposals is not None and draws >= max_proposals:
            raise SwapExhaustedError(
                f"no swap accepted after {draws} proposals "
                f"({tries} passed the structural checks)"
            )
        draws += 1

        i = int(rng.integers(net_size))
        j = int(rng.integers(net_size))
        if i == j:
            continue
        m = graph.random_neighbor(i, rng)
        n = graph.random_neighbor(j, rng)
        if m == n or m == j or n == i or graph.has_edge(i, n) or graph.has_edge(j, m):
            continue

        tries += 1
        if (graph.degree(i) == 1 and graph.degree(n) == 1) or (
            graph.degree(j) == 1 and graph.degree(m) == 1
        ):
            continue

        graph.swap_endpoints(i, m, j, n)
        outcome = bounded_dual_traversal(graph, i, j, limit)
        if outcome.isolates_component(net_size):
            graph.swap_endpoints(i, n, j, m)
            log.debug(
                "Swap (%d-%d, %d-%d) reverted: component cut off after %d steps",
                i, m, j, n, outcome.steps,
            )
            continue

        return tries


def switch_connections(graph: Graph, rng: np.random.Generator) -> tuple[int, int]:
    """Exchange the neighborhoods of two distinct random nodes.

    Node i takes over j's edges and weights and vice versa. An edge between
    i and j, if present, is kept. The degree multiset is unchanged; the two
    degrees trade places.

    Returns:
        The pair (i, j) that was switched.
    """
    net_size = graph.size()
    if net_size < 2:
        raise GraphPreconditionError(f"need at least 2 nodes, graph has {net_size}")

    i = int(rng.integers(net_size))
    j = int(rng.integers(net_size))
    while i == j:
        i = int(rng.integers(net_size))
        j = int(rng.integers(net_size))

    edges_i = {k: graph.edge_value(i, k) for k in graph.neighbors(i) if k != j}
    edges_j = {k: graph.edge_value(j, k) for k in graph.neighbors(j) if k != i}

    for k in edges_i:
        graph.set_edge(i, k, NO_EDGE)
    for k in edges_j:
        graph.set_edge(j, k, NO_EDGE)
    for k, w in edges_j.items():
        graph.set_edge(i, k, w)
    for k, w in edges_i.items():
        graph.set_edge(j, k, w)
    return i, j
