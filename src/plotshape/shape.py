"""
shape.py
--------

Defines `Shape`, one curve paired with the style it is rendered with.
"""

from __future__ import annotations

import copy
import json
from typing import Any, Dict, Optional

import numpy as np
from numpy.typing import NDArray


class Shape:
    """
    A rendered curve: an ordered (N, 2) point array plus stroke/fill style.

    A style attribute set to None is omitted by the renderer; for `fill`
    that means the shape is not filled.
    """

    __slots__ = ("_points", "closed", "stroke", "stroke_width", "fill")

    def __init__(
        self,
        points: Any,
        closed: bool = True,
        stroke: Optional[str] = None,
        stroke_width: int = 0,
        fill: Optional[str] = None,
    ) -> None:
        """
        Args:
            points: Sequence of (x, y) pairs, converted to a float array.
            closed: Whether the last point connects back to the first.
            stroke: Stroke colour token, passed through untouched.
            stroke_width: Stroke thickness.
            fill: Fill colour token, passed through untouched.
        """
        pts = np.array(points, dtype=np.float64)
        if pts.size == 0:
            pts = pts.reshape(0, 2)
        if pts.ndim != 2 or pts.shape[1] != 2:
            raise ValueError(f"Expected (N, 2) points, got shape {pts.shape}")
        pts.setflags(write=False)
        self._points = pts
        self.closed = closed
        self.stroke = stroke
        self.stroke_width = stroke_width
        self.fill = fill

    # ---------------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------------
    @property
    def points(self) -> NDArray[np.float64]:
        """Read-only point array."""
        return self._points

    def __len__(self) -> int:
        return len(self._points)

    @property
    def meta(self) -> Dict[str, Any]:
        """Deep copy of the shape's style and extent (safe to mutate)."""
        meta: Dict[str, Any] = {
            "points": len(self._points),
            "closed": self.closed,
            "stroke": self.stroke,
            "stroke_width": self.stroke_width,
            "fill": self.fill,
        }
        if len(self._points):
            meta["bounds"] = [
                self._points.min(axis=0).tolist(),
                self._points.max(axis=0).tolist(),
            ]
        return copy.deepcopy(meta)

    @property
    def json(self) -> str:
        """JSON-encoded metadata string (sorted, compact)."""
        return json.dumps(self.meta, sort_keys=True, separators=(",", ":"), default=str)

    @property
    def jsonpp(self) -> str:
      """Return pretty-printed JSON (good for debugging / logs)."""
      return json.dumps(self.meta, sort_keys=True, indent=4, default=str)

    # ---------------------------------------------------------------------------
    # Representation
    # ---------------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} points={len(self._points)} closed={self.closed}>"

    def __str__(self) -> str:
        """
        Return a detailed, human-readable string representation.

        Example output:
            Shape(id=0x1f2c4fa2):
            {
                "closed": true,
                "fill": "gray",
                ...
            }
        """
        cls_name: str = self.__class__.__name__
        obj_id: str = hex(id(self))
        return f"{cls_name}(id={obj_id}):\n{self.jsonpp}"
