"""Per-round randomization trace: proposal cost and traversal budget.

Useful for judging whether the adaptive budget has settled and how often
rounds had to be rolled back.
"""

import matplotlib.pyplot as plt
import numpy as np

from degswap.randomize.types import RandomizationResult
from degswap.visualization.style import LIMIT_COLOR, ROLLBACK_COLOR, TRIES_COLOR


def plot_randomization_trace(result: RandomizationResult) -> plt.Figure:
    """Plot tries per switch and traversal limit against round number.

    Creates a figure with two stacked subplots sharing the round axis:
    - Top: mean proposals per accepted swap, rounds with rollbacks marked
    - Bottom: limit in effect during each accepted round (step plot)

    Args:
        result: Output of run_randomization.

    Returns:
        The matplotlib Figure.
    """
    fig, (ax_tries, ax_limit) = plt.subplots(2, 1, figsize=(8, 6), sharex=True)

    records = result.rounds
    if records:
        rounds = np.arange(1, len(records) + 1)
        tries = np.array([r.tries_per_switch for r in records])
        limits = np.array([r.limit_used for r in records])
        rollbacks = np.array([r.disconnections for r in records])

        ax_tries.plot(
            rounds, tries, color=TRIES_COLOR, linewidth=1.5,
            marker="o", markersize=3, label="Tries per switch",
        )
        rolled = rollbacks > 0
        if rolled.any():
            ax_tries.scatter(
                rounds[rolled], tries[rolled], color=ROLLBACK_COLOR,
                zorder=3, label="Round rolled back",
            )
        ax_tries.legend(fontsize=8)

        ax_limit.step(rounds, limits, where="mid", color=LIMIT_COLOR, linewidth=1.5)
    else:
        ax_tries.text(
            0.5, 0.5, "No completed rounds", ha="center", va="center",
            transform=ax_tries.transAxes,
        )

    ax_tries.set_ylabel("Tries per switch")
    ax_tries.set_title("Randomization trace")
    ax_limit.set_xlabel("Round")
    ax_limit.set_ylabel("Traversal limit")

    fig.tight_layout()
    return fig
