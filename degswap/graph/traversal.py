"""Connectivity checks: a cheap bounded lock-step search and an exact scan.

The bounded search answers "did a small piece just break off near these two
nodes?" in at most ``limit`` steps per side. It can miss a disconnection
that splits the graph into two large parts, so callers pair it with the
exact ``is_connected`` check at a coarser interval.
"""

import logging
from collections import deque

from scipy.sparse.csgraph import connected_components

from degswap.graph.store import Graph
from degswap.graph.types import DualTraversalResult, GraphPreconditionError

log = logging.getLogger(__name__)


class BoundedSearch:
    """Breadth-first search that settles one node per ``advance()`` call."""

    __slots__ = ("_graph", "_queue", "_seen")

    def __init__(self, graph: Graph, start: int) -> None:
        self._graph = graph
        self._queue: deque[int] = deque([start])
        self._seen: set[int] = {start}

    @property
    def finished(self) -> bool:
        """True once every node reachable from the start has been settled."""
        return not self._queue

    @property
    def reached(self) -> int:
        return len(self._seen)

    def advance(self) -> None:
        if not self._queue:
            return
        node = self._queue.popleft()
        seen = self._seen
        for nbr in self._graph.neighbors(node):
            if nbr not in seen:
                seen.add(nbr)
                self._queue.append(nbr)


def bounded_dual_traversal(
    graph: Graph, first: int, second: int, limit: int
) -> DualTraversalResult:
    """Advance two searches in lock-step until one finishes or ``limit`` steps pass.

    Args:
        graph: Graph to explore (not modified).
        first: Start node of the first search.
        second: Start node of the second search.
        limit: Step budget, 1 <= limit <= graph.size().

    Returns:
        DualTraversalResult with per-side finished flags and reached counts.

    Raises:
        GraphPreconditionError: If ``limit`` is outside [1, graph.size()].
    """
    if not 1 <= limit <= graph.size():
        raise GraphPreconditionError(
            f"limit must be in [1, {graph.size()}], got {limit}"
        )

    a = BoundedSearch(graph, first)
    b = BoundedSearch(graph, second)
    steps = 0
    while not a.finished and not b.finished and steps < limit:
        a.advance()
        b.advance()
        steps += 1

    return DualTraversalResult(
        first_finished=a.finished,
        second_finished=b.finished,
        first_reached=a.reached,
        second_reached=b.reached,
        steps=steps,
    )


def count_components(graph: Graph) -> int:
    """Number of connected components, isolated nodes included."""
    if graph.size() == 0:
        return 0
    n_components, _ = connected_components(
        graph.to_sparse(weighted=False), directed=False
    )
    return int(n_components)


def is_connected(graph: Graph) -> bool:
    """Exact check that all nodes lie in a single component."""
    n_components = count_components(graph)
    log.debug("Connectivity scan: %d component(s)", n_components)
    return n_components <= 1
