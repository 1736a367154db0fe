"""Render randomization traces for one run or a batch of null samples.

Figures are written as ``<output_dir>/<name>.<fmt>`` for each configured
format. Batch rendering skips samples without a randomization trace
(configuration-model samples) and keeps going when a single figure fails.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from degswap.randomize.pipeline import NullSample
from degswap.randomize.types import RandomizationResult
from degswap.visualization.style import apply_style, save_figure
from degswap.visualization.trace import plot_randomization_trace

log = logging.getLogger(__name__)


def render_randomization_trace(
    result: RandomizationResult,
    output_dir: str | Path,
    name: str = "randomization_trace",
) -> list[Path]:
    """Plot one run's per-round trace and save it.

    Returns:
        Paths of the written files.
    """
    apply_style()
    fig = plot_randomization_trace(result)
    paths = save_figure(fig, Path(output_dir), name)
    log.info("Generated: %s (%d round(s))", name, result.rounds_completed)
    return paths


def render_null_samples(
    samples: Iterable[NullSample], output_dir: str | Path
) -> list[Path]:
    """Save a trace figure for every connected-randomizer sample.

    Each figure is named ``trace_<config_hash>_<index>``. A failure on one
    sample is logged and does not stop the others.

    Returns:
        Paths of all written files.
    """
    apply_style()
    output_dir = Path(output_dir)
    generated: list[Path] = []
    for sample in samples:
        if sample.randomization is None:
            log.debug("Sample %d has no randomization trace, skipped", sample.index)
            continue
        name = f"trace_{sample.config_hash}_{sample.index}"
        try:
            fig = plot_randomization_trace(sample.randomization)
            generated.extend(save_figure(fig, output_dir, name))
            log.info("Generated: %s", name)
        except (OSError, ValueError) as e:
            log.warning("Failed to generate %s: %s", name, e)
    return generated
