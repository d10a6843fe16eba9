"""
svg_canvas.py
-------------

Thin `svgwrite` wrapper that collects styled shapes into one SVG document.

The document is sized in millimetres and starts with a viewbox centered on
the origin; `calculate_viewbox` replaces it with a padded bounding box once
every shape has been added.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

import svgwrite

from .assembler import DEFAULT_MARGIN, ViewBox, compute_viewbox
from .defaults import LOGGER_NAME
from .shape import Shape

PathLike = Union[str, os.PathLike]
DIMENSION_UNITS = "mm"


class SvgCanvas:
    """Square SVG document of `diameter` millimetres."""

    def __init__(self, diameter: float, units: str = DIMENSION_UNITS) -> None:
        self.diameter = diameter
        self.shapes: List[Shape] = []
        # Colour tokens are passed through untouched; debug=False skips svgwrite validation.
        self.drawing = svgwrite.Drawing(
            size=(f"{diameter}{units}", f"{diameter}{units}"),
            profile="full",
            debug=False,
        )
        self.viewbox = ViewBox(-diameter / 2, -diameter / 2, diameter, diameter)
        self._apply_viewbox()

    def add_shape(self, shape: Shape) -> None:
        """Append a shape; later shapes draw over earlier ones."""
        points = shape.points.tolist()
        style = {"fill": shape.fill if shape.fill is not None else "none"}
        if shape.stroke is not None:
            style["stroke"] = shape.stroke
            style["stroke_width"] = shape.stroke_width
        if shape.closed:
            element = self.drawing.polygon(points=points, **style)
        else:
            element = self.drawing.polyline(points=points, **style)
        self.drawing.add(element)
        self.shapes.append(shape)

    def add_shapes(self, shapes: List[Shape]) -> None:
        for shape in shapes:
            self.add_shape(shape)

    def calculate_viewbox(self, margin: float = DEFAULT_MARGIN) -> ViewBox:
        """Fit the viewbox to all added shapes; keep the current one if they are empty."""
        viewbox = compute_viewbox(self.shapes, margin)
        if viewbox is None:
            logging.getLogger(LOGGER_NAME).warning("No points to fit, keeping default viewbox")
        else:
            self.viewbox = viewbox
            self._apply_viewbox()
        return self.viewbox

    def _apply_viewbox(self) -> None:
        self.drawing.viewbox(*self.viewbox.as_tuple())

    # -------------------------------------------------------------------------
    # output
    # -------------------------------------------------------------------------
    def tostring(self) -> str:
        return self.drawing.tostring()

    def save(self, output_path: PathLike) -> Path:
        """Write the document; the file is closed on every exit path."""
        out = Path(output_path)
        with open(out, "w", encoding="utf-8") as f:
            self.drawing.write(f, pretty=True)
        return out
