"""Mutable undirected simple graph over integer node ids [0, n).

Each node keeps its neighbors in a dense list plus a neighbor -> slot index,
so edge lookup, insertion, removal and uniform neighbor sampling are all
O(1) amortized. Edge weights are opaque and passed through unchanged.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

import numpy as np
import scipy.sparse

from degswap.graph.types import NO_EDGE, GraphPreconditionError

log = logging.getLogger(__name__)

DEFAULT_WEIGHT = 1.0


class NeighborView:
    """Live, restartable view of one node's neighbors in slot order.

    Iteration follows the node's neighbor slots, so a swap followed by its
    inverse yields the same order as before. Membership is O(1).
    """

    __slots__ = ("_nbrs", "_slot")

    def __init__(self, nbrs: list[int], slot: dict[int, int]) -> None:
        self._nbrs = nbrs
        self._slot = slot

    def __iter__(self) -> Iterator[int]:
        return iter(self._nbrs)

    def __len__(self) -> int:
        return len(self._nbrs)

    def __contains__(self, b: object) -> bool:
        return b in self._slot

    def __repr__(self) -> str:
        return f"NeighborView({self._nbrs!r})"


class Graph:
    """Undirected, simple, integer-indexed adjacency structure.

    The node count is fixed at construction. Self-loops are a caller
    precondition: the store does not check for them on the hot path.
    """

    __slots__ = ("_n", "_nbrs", "_vals", "_slot", "_num_edges")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise GraphPreconditionError(f"node count must be >= 0, got {n}")
        self._n = n
        self._nbrs: list[list[int]] = [[] for _ in range(n)]
        self._vals: list[list[Any]] = [[] for _ in range(n)]
        self._slot: list[dict[int, int]] = [{} for _ in range(n)]
        self._num_edges = 0

    # ── Construction ───────────────────────────────────────────────

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[tuple]) -> "Graph":
        """Build a graph from ``(a, b)`` or ``(a, b, weight)`` tuples.

        Repeated pairs keep the first weight seen.

        Raises:
            GraphPreconditionError: On a self-loop or an id outside [0, n).
        """
        graph = cls(n)
        for edge in edges:
            a, b = int(edge[0]), int(edge[1])
            weight = edge[2] if len(edge) > 2 else DEFAULT_WEIGHT
            if a == b:
                raise GraphPreconditionError(f"self-loop on node {a}")
            if not (0 <= a < n and 0 <= b < n):
                raise GraphPreconditionError(
                    f"edge ({a}, {b}) outside node range [0, {n})"
                )
            if graph.edge_value(a, b) is NO_EDGE:
                graph.set_edge(a, b, weight)
        return graph

    @classmethod
    def from_sparse(cls, adj: scipy.sparse.spmatrix) -> "Graph":
        """Build a graph from a symmetric sparse adjacency matrix.

        Stored values become edge weights.

        Raises:
            GraphPreconditionError: If the matrix is not square and symmetric,
                or has a nonzero diagonal.
        """
        adj = scipy.sparse.csr_matrix(adj)
        if adj.shape[0] != adj.shape[1]:
            raise GraphPreconditionError(f"adjacency must be square, got {adj.shape}")
        if (adj != adj.T).nnz != 0:
            raise GraphPreconditionError("adjacency must be symmetric (undirected)")
        if adj.diagonal().any():
            raise GraphPreconditionError("adjacency has self-loops on the diagonal")

        upper = scipy.sparse.triu(adj, k=1).tocoo()
        graph = cls.from_edges(
            adj.shape[0],
            zip(upper.row.tolist(), upper.col.tolist(), upper.data.tolist()),
        )
        log.debug(
            "Graph built from sparse adjacency (n=%d, edges=%d)",
            graph.size(),
            graph.number_of_edges(),
        )
        return graph

    def to_sparse(self, weighted: bool = True) -> scipy.sparse.csr_matrix:
        """Export as a symmetric CSR matrix.

        Args:
            weighted: Use edge weights as values (must be numeric); when False
                every edge is stored as 1.0.
        """
        rows: list[int] = []
        cols: list[int] = []
        data: list[float] = []
        for a, b, weight in self.edges():
            value = float(weight) if weighted else 1.0
            rows.extend((a, b))
            cols.extend((b, a))
            data.extend((value, value))
        return scipy.sparse.csr_matrix(
            (np.asarray(data, dtype=np.float64), (rows, cols)),
            shape=(self._n, self._n),
        )

    def copy(self) -> "Graph":
        """Full independent copy of the edge relation."""
        other = Graph.__new__(Graph)
        other._n = self._n
        other._nbrs = [list(nbrs) for nbrs in self._nbrs]
        other._vals = [list(vals) for vals in self._vals]
        other._slot = [dict(slot) for slot in self._slot]
        other._num_edges = self._num_edges
        return other

    def restore_from(self, other: "Graph") -> None:
        """Overwrite this graph's edge relation with a copy of ``other``'s.

        Per-node containers are refilled in place, so existing neighbor views
        stay live.
        """
        if other._n != self._n:
            raise GraphPreconditionError(
                f"cannot restore a graph of size {self._n} from one of size {other._n}"
            )
        for a in range(self._n):
            self._nbrs[a][:] = other._nbrs[a]
            self._vals[a][:] = other._vals[a]
            slot = self._slot[a]
            slot.clear()
            slot.update(other._slot[a])
        self._num_edges = other._num_edges

    # ── Queries ────────────────────────────────────────────────────

    def size(self) -> int:
        return self._n

    def __len__(self) -> int:
        return self._n

    def number_of_edges(self) -> int:
        return self._num_edges

    def degree(self, a: int) -> int:
        return len(self._nbrs[a])

    def neighbors(self, a: int) -> NeighborView:
        """Live, restartable view of ``a``'s current neighbors."""
        return NeighborView(self._nbrs[a], self._slot[a])

    def edge_value(self, a: int, b: int) -> Any:
        """Weight of edge (a, b), or ``NO_EDGE`` if absent."""
        idx = self._slot[a].get(b)
        if idx is None:
            return NO_EDGE
        return self._vals[a][idx]

    def has_edge(self, a: int, b: int) -> bool:
        return b in self._slot[a]

    def edges(self) -> Iterator[tuple[int, int, Any]]:
        """Yield every edge once as ``(a, b, weight)`` with ``a < b``."""
        for a in range(self._n):
            vals = self._vals[a]
            for idx, b in enumerate(self._nbrs[a]):
                if a < b:
                    yield a, b, vals[idx]

    def random_neighbor(self, a: int, rng: np.random.Generator) -> int:
        """Uniformly random neighbor of ``a``.

        Raises:
            GraphPreconditionError: If ``a`` has no neighbors.
        """
        nbrs = self._nbrs[a]
        if not nbrs:
            raise GraphPreconditionError(f"node {a} has degree 0")
        return nbrs[int(rng.integers(len(nbrs)))]

    # ── Mutation ───────────────────────────────────────────────────

    def set_edge(self, a: int, b: int, value: Any) -> None:
        """Create, update, or (with ``value=NO_EDGE``) remove edge (a, b)."""
        if value is NO_EDGE:
            if b in self._slot[a]:
                self._remove_half(a, b)
                self._remove_half(b, a)
                self._num_edges -= 1
            return

        idx = self._slot[a].get(b)
        if idx is not None:
            self._vals[a][idx] = value
            self._vals[b][self._slot[b][a]] = value
            return

        self._add_half(a, b, value)
        self._add_half(b, a, value)
        self._num_edges += 1

    def swap_endpoints(self, i: int, m: int, j: int, n: int) -> None:
        """Replace edges (i, m) and (j, n) with (i, n) and (j, m).

        Weights travel with the swap: (i, n) takes the weight of (i, m) and
        (j, m) that of (j, n). Every endpoint keeps its neighbor slot, so
        ``swap_endpoints(i, n, j, m)`` restores the exact previous state,
        neighbor iteration order included.
        The caller guarantees (i, n) and (j, m) are absent and the four
        nodes make a valid swap.
        """
        w_im = self._vals[i][self._slot[i][m]]
        w_jn = self._vals[j][self._slot[j][n]]
        self._replace_half(i, m, n, w_im)
        self._replace_half(n, j, i, w_im)
        self._replace_half(j, n, m, w_jn)
        self._replace_half(m, i, j, w_jn)

    def _add_half(self, a: int, b: int, value: Any) -> None:
        self._slot[a][b] = len(self._nbrs[a])
        self._nbrs[a].append(b)
        self._vals[a].append(value)

    def _remove_half(self, a: int, b: int) -> None:
        nbrs, vals, slot = self._nbrs[a], self._vals[a], self._slot[a]
        idx = slot.pop(b)
        last_nbr = nbrs.pop()
        last_val = vals.pop()
        if idx < len(nbrs):
            nbrs[idx] = last_nbr
            vals[idx] = last_val
            slot[last_nbr] = idx

    def _replace_half(self, a: int, old: int, new: int, value: Any) -> None:
        idx = self._slot[a].pop(old)
        self._slot[a][new] = idx
        self._nbrs[a][idx] = new
        self._vals[a][idx] = value

    # ── Comparison ─────────────────────────────────────────────────

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        if self._n != other._n or self._num_edges != other._num_edges:
            return False
        return all(
            self._edge_map(a) == other._edge_map(a) for a in range(self._n)
        )

    __hash__ = None  # type: ignore[assignment]

    def _edge_map(self, a: int) -> dict[int, Any]:
        return dict(zip(self._nbrs[a], self._vals[a]))

    def __repr__(self) -> str:
        return f"Graph(n={self._n}, edges={self._num_edges})"


def degree_sequence(graph: Graph) -> list[int]:
    """Sorted degree multiset."""
    return sorted(graph.degree(a) for a in range(graph.size()))


def is_simple(graph: Graph) -> bool:
    """True if the graph has no self-loops and a symmetric, duplicate-free relation."""
    for a in range(graph.size()):
        nbrs = graph._nbrs[a]
        if a in graph._slot[a] or len(set(nbrs)) != len(nbrs):
            return False
        for b in nbrs:
            if graph.edge_value(b, a) is NO_EDGE:
                return False
            if graph.edge_value(a, b) != graph.edge_value(b, a):
                return False
    return True
