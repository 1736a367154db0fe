"""Result and diagnostic types for degree-preserving randomization."""

from dataclasses import dataclass, field

from degswap.graph.store import Graph


class SwapExhaustedError(RuntimeError):
    """Raised when a proposal bound is hit before any swap was accepted.

    The graph is left exactly as it was before the call.
    """


@dataclass(frozen=True, slots=True)
class RoundRecord:
    """Diagnostics for one completed (accepted) round."""

    round_index: int  # 0-indexed
    tries_per_switch: float  # mean proposals per accepted swap, final pass
    disconnections: int  # rollbacks before the round was accepted
    limit_used: int  # traversal budget during the accepted pass
    limit_after: int  # budget carried into the next round


@dataclass
class RandomizationResult:
    """Outcome of a multi-round randomization run.

    ``graph`` is the same object that was passed in, mutated in place.
    """

    graph: Graph
    rounds: list[RoundRecord] = field(default_factory=list)
    initial_limit: int = 1
    final_limit: int = 1
    cancelled: bool = False

    @property
    def rounds_completed(self) -> int:
        return len(self.rounds)

    @property
    def total_disconnections(self) -> int:
        return sum(r.disconnections for r in self.rounds)

    @property
    def tries_per_switch(self) -> list[float]:
        return [r.tries_per_switch for r in self.rounds]
