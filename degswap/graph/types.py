"""Shared graph types: the no-edge sentinel and precondition errors."""

from dataclasses import dataclass


class _NoEdge:
    """Singleton marker for an absent edge.

    Distinct from every weight a caller can store, including 0, 0.0,
    False and None.
    """

    _instance = None

    def __new__(cls) -> "_NoEdge":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_EDGE"


NO_EDGE = _NoEdge()


class GraphPreconditionError(ValueError):
    """Raised when an operation is called with arguments it cannot honor.

    Examples: a traversal budget outside [1, N], a swap requested on a graph
    with fewer than two edges, a neighbor requested for an isolated node.
    """


@dataclass(frozen=True, slots=True)
class DualTraversalResult:
    """Outcome of a bounded lock-step exploration from two start nodes.

    A side is ``finished`` when it exhausted its reachable set before the
    step budget ran out. ``reached`` counts the nodes discovered on that
    side (start node included).
    """

    first_finished: bool
    second_finished: bool
    first_reached: int
    second_reached: int
    steps: int

    def isolates_component(self, n: int) -> bool:
        """True if either side closed off a component smaller than the graph."""
        return (self.first_finished and self.first_reached < n) or (
            self.second_finished and self.second_reached < n
        )
