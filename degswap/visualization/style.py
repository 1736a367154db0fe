"""Figure style and output for randomization diagnostics.

Traces are written headless (Agg) and saved in every format listed in
``FIGURE_FORMATS``; raster output uses ``FIGURE_DPI``.
"""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path

PALETTE = sns.color_palette("colorblind", n_colors=8)
TRIES_COLOR = PALETTE[0]
LIMIT_COLOR = PALETTE[2]
ROLLBACK_COLOR = PALETTE[3]

FIGURE_DPI = 300
FIGURE_FORMATS: tuple[str, ...] = ("png", "svg")

_TRACE_RC = {
    "figure.dpi": 120,
    "savefig.dpi": FIGURE_DPI,
    "figure.figsize": (8, 6),
    "axes.titlesize": 12,
    "axes.labelsize": 10,
    "lines.markersize": 3,
    "legend.frameon": False,
    "svg.fonttype": "none",  # keep labels as text in SVG
}


def apply_style() -> None:
    """Whitegrid theme plus trace-figure rcParams. Safe to call repeatedly."""
    sns.set_theme(style="whitegrid", palette=PALETTE)
    plt.rcParams.update(_TRACE_RC)


def save_figure(
    fig: plt.Figure,
    output_dir: Path,
    name: str,
    formats: tuple[str, ...] = FIGURE_FORMATS,
) -> list[Path]:
    """Write ``fig`` as ``output_dir/name.<fmt>`` for each format and close it.

    Returns:
        Written paths, in ``formats`` order.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    try:
        for fmt in formats:
            path = output_dir / f"{name}.{fmt}"
            fig.savefig(path, format=fmt, bbox_inches="tight")
            paths.append(path)
    finally:
        plt.close(fig)
    return paths
