"""Graph store and connectivity checks used by the randomizers."""

from degswap.graph.store import Graph, NeighborView, degree_sequence, is_simple
from degswap.graph.traversal import (
    BoundedSearch,
    bounded_dual_traversal,
    count_components,
    is_connected,
)
from degswap.graph.types import NO_EDGE, DualTraversalResult, GraphPreconditionError

__all__ = [
    "BoundedSearch",
    "DualTraversalResult",
    "Graph",
    "GraphPreconditionError",
    "NO_EDGE",
    "NeighborView",
    "bounded_dual_traversal",
    "count_components",
    "degree_sequence",
    "is_connected",
    "is_simple",
]
