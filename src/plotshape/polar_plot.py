"""
polar_plot.py
-------------

Raster rendering of (theta, r) curves on a Matplotlib polar axis.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence, Union

import matplotlib
matplotlib.use("Agg")  # headless; only files are produced
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure
from numpy.typing import NDArray

from .defaults import LOGGER_NAME

PathLike = Union[str, os.PathLike]


def plot_polar_graphs(
        plots  : Sequence[NDArray],
        width  : int = 1080,
        height : int = 1080,
        dpi    : int = 100,
    ) -> Figure:
    """Draw each (theta, r) array as a line on one polar axis.

    Args:
        plots: Arrays of shape (N, 2) holding theta in radians and radius.
        width: Image width in pixels.
        height: Image height in pixels.
        dpi: Figure resolution; figure size is width/dpi by height/dpi inches.

    Returns:
        The Matplotlib Figure; callers save and close it.
    """
    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    ax = fig.add_subplot(projection="polar")
    for plot in plots:
        pts = np.asarray(plot, dtype=np.float64).reshape(-1, 2)
        ax.plot(pts[:, 0], pts[:, 1], linewidth=1.0)
    ax.set_rlim(bottom=0)
    logging.getLogger(LOGGER_NAME).debug(f"Polar figure with {len(plots)} plot(s), {width}x{height}px")
    return fig


def save_polar_image(fig: Figure, output_path: PathLike, dpi: int = 100) -> Path:
    """Save `fig` as JPEG and close it."""
    out = Path(output_path)
    try:
        fig.savefig(out, dpi=dpi, format="jpg", bbox_inches=None, pad_inches=0)
    finally:
        plt.close(fig)
    return out
