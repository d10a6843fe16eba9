"""
assembler.py
------------

Turns curve parameters into styled shapes for the renderers and computes the
padded bounding viewbox around everything that is about to be drawn.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np
from numpy.typing import NDArray

from .curves import closed_pendulum_segment, latitude_arc, lissajous, polar_projection
from .defaults import (
    DEFAULT_MARGIN, LISSAJOUS_FILL, LOGGER_NAME, POLAR_DIAMETER, REFERENCE_LATITUDE,
)
from .segment import Segment
from .shape import Shape

HOURS_RANGE = range(-6, 7)


# =============================================================================
# Viewbox
# =============================================================================
@dataclass(frozen=True)
class ViewBox:
    """Axis-aligned rectangle in user coordinates."""
    x: float
    y: float
    width: float
    height: float

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)

    def contains(self, points: NDArray) -> bool:
        """True if every point lies inside or on the boundary."""
        pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        return bool(
            np.all(pts[:, 0] >= self.x) and np.all(pts[:, 0] <= self.x + self.width)
            and np.all(pts[:, 1] >= self.y) and np.all(pts[:, 1] <= self.y + self.height)
        )


def compute_viewbox(shapes: Iterable[Shape], margin: float = DEFAULT_MARGIN) -> Optional[ViewBox]:
    """Bounding box over all points of all shapes, padded by `margin` on each side.

    Returns None when the shapes hold no points at all.
    """
    arrays = [shape.points for shape in shapes if len(shape)]
    if not arrays:
        return None
    pts = np.concatenate(arrays)
    x_min, y_min = pts.min(axis=0)
    x_max, y_max = pts.max(axis=0)
    return ViewBox(
        x=float(x_min - margin),
        y=float(y_min - margin),
        width=float(x_max - x_min + 2 * margin),
        height=float(y_max - y_min + 2 * margin),
    )


# =============================================================================
# Vector modes
# =============================================================================
def wedge_fill(start: int) -> str:
    """Red shade for a single wedge, keyed on its start hour.

    ``start + 6`` is written in hex ahead of five zeros: -6 -> "#000000",
    3 -> "#900000". Negative values use their 32-bit two's complement.
    """
    value = start + 6
    if value < 0:
        value &= 0xFFFFFFFF
    return f"#{value:x}00000"


def lissajous_shapes(x_cycles: int, y_cycles: int, diameter: int, phase_deg: int,
                     fill: str = LISSAJOUS_FILL) -> List[Shape]:
    return [Shape(lissajous(x_cycles, y_cycles, diameter, phase_deg), closed=True, fill=fill)]


def pendulum_wedge_shapes(start: int, end: int, diameter: int) -> List[Shape]:
    return [Shape(closed_pendulum_segment(diameter, start, end), closed=True,
                  fill=wedge_fill(start))]


def pendulum_file_shapes(segments: Sequence[Segment], diameter: int) -> List[Shape]:
    """One closed wedge per segment, in segment order (later ones draw on top)."""
    logger = logging.getLogger(LOGGER_NAME)
    shapes = []
    for segment in segments:
        shape = Shape(
            closed_pendulum_segment(diameter, segment.start, segment.end),
            closed=True,
            stroke=segment.stroke,
            stroke_width=segment.line_width,
            fill=segment.fill,
        )
        logger.debug(f"Segment {segment} -> {shape.json}")
        shapes.append(shape)
    return shapes


# =============================================================================
# Diagnostic polar plot
# =============================================================================
def polar_plots(diameter: float = POLAR_DIAMETER, latitude_deg: float = REFERENCE_LATITUDE) -> List[NDArray]:
    """(theta, r) curves for every spoke from -6 to +6 hours plus the latitude arc."""
    plots = [polar_projection(diameter, hours) for hours in HOURS_RANGE]
    plots.append(latitude_arc(latitude_deg))
    return plots
