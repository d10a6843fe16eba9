"""
plotshape
---------

Lissajous figures and Foucault pendulum rosettes as SVG paths, plus a
diagnostic polar raster plot.
"""

from .curves import (
    circumferential_arc, closed_pendulum_segment, latitude_arc, lissajous,
    pendulum_arc, polar_projection,
)
from .segment import Segment, load_segments, parse_segments
from .shape import Shape
from .assembler import ViewBox, compute_viewbox

__version__ = "0.1.0"
