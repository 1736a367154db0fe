"""Diagnostic plots for randomization runs."""

from degswap.visualization.render import render_null_samples, render_randomization_trace
from degswap.visualization.style import apply_style, save_figure
from degswap.visualization.trace import plot_randomization_trace

__all__ = [
    "apply_style",
    "plot_randomization_trace",
    "render_null_samples",
    "render_randomization_trace",
    "save_figure",
]
