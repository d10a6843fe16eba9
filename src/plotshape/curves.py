"""
curves.py
---------

Curve generators for Lissajous figures and Foucault pendulum rosettes.

Every generator is a pure function returning a fresh ``(N, 2)`` float array of
points in drawing order. Angles of pendulum spokes are given in "hours", one
hour being 30 degrees (pi/6 radians), so the useful range is -6..+6.

Core API:

    lissajous(x_cycles, y_cycles, diameter, phase_deg) -> NDArray

        256 samples of a Lissajous figure scaled to sit inside `diameter`.

    pendulum_arc(diameter, hours) -> NDArray

        One spoke of the rosette: 271 samples sweeping latitude 0..90 degrees
        while the radius grows linearly from the center to the rim.

    circumferential_arc(diameter, start_hours, end_hours) -> NDArray

        Rim arc sampled every pi/1080 radians. Empty when end <= start.

    closed_pendulum_segment(diameter, start_hours, end_hours) -> NDArray

        Wedge outline: spoke out, rim across, second spoke back in.

    polar_projection(diameter, hours) -> NDArray
    latitude_arc(latitude_deg) -> NDArray

        (theta, r) counterparts used by the diagnostic polar plot.
"""

from __future__ import annotations

import math
from typing import TypeAlias, Union

import numpy as np
from numpy.typing import NDArray

numeric: TypeAlias = Union[int, float]

LISSAJOUS_POINTS = 256
LISSAJOUS_SCALE = 0.4 * 0.7071
LATITUDE_STEPS = 270
LATITUDE_STEPS_PER_DEG = 3.0
RIM_STEP_RAD = math.pi / 1080
HOUR_RAD = math.pi / 6
LATITUDE_ARC_HALF_SPAN = 180

__all__ = [
    "lissajous", "pendulum_arc", "circumferential_arc", "closed_pendulum_segment",
    "polar_projection", "latitude_arc",
    "LISSAJOUS_POINTS", "LATITUDE_STEPS", "RIM_STEP_RAD", "HOUR_RAD",
]


# ---------------------------------------------------------------------------
# Lissajous
# ---------------------------------------------------------------------------
def lissajous(
        x_cycles  : numeric,
        y_cycles  : numeric,
        diameter  : numeric,
        phase_deg : numeric = 0,
    ) -> NDArray[np.float64]:
    """Sample a Lissajous figure.

    The amplitude is ``diameter * 0.4 * 0.7071`` so that the corners of the
    figure stay inside a circle of the requested diameter.

    Args:
        x_cycles: Number of full cosine periods along X.
        y_cycles: Number of full cosine periods along Y.
        diameter: Diameter of the enclosing circle.
        phase_deg: Phase offset applied to the X component, in degrees.

    Returns:
        Array of shape (256, 2).
    """
    i = np.arange(LISSAJOUS_POINTS, dtype=np.float64)
    x_limit = 2 * math.pi * x_cycles
    y_limit = 2 * math.pi * y_cycles
    amplitude = diameter * LISSAJOUS_SCALE
    phi = math.radians(phase_deg)

    x = amplitude * np.cos(x_limit * i / LISSAJOUS_POINTS + phi)
    y = amplitude * np.cos(y_limit * i / LISSAJOUS_POINTS)
    return np.column_stack((x, y))


# ---------------------------------------------------------------------------
# Foucault pendulum rosette
# ---------------------------------------------------------------------------
def _spoke(diameter: numeric, hours: numeric) -> tuple[NDArray, NDArray]:
    """Return (theta, r) of a spoke; shared by the cartesian and polar forms."""
    i = np.arange(LATITUDE_STEPS + 1, dtype=np.float64)
    sin_lat = np.sin(np.radians(i / LATITUDE_STEPS_PER_DEG))
    theta = HOUR_RAD * hours * sin_lat
    r = i / LATITUDE_STEPS * diameter / 2.0
    return theta, r


def pendulum_arc(diameter: numeric, hours: numeric) -> NDArray[np.float64]:
    """One spoke of the rosette in cartesian coordinates (271 points).

    At latitude ``lat`` a Foucault pendulum precesses ``hours * 30 * sin(lat)``
    degrees in ``hours`` hours. The sweep runs latitude 0..90 in 1/3 degree
    steps, mapped to a radius from 0 out to ``diameter / 2``.
    """
    theta, r = _spoke(diameter, hours)
    return np.column_stack((r * np.cos(theta), r * np.sin(theta)))


def circumferential_arc(
        diameter    : numeric,
        start_hours : numeric,
        end_hours   : numeric,
    ) -> NDArray[np.float64]:
    """Arc of radius ``diameter / 2`` from `start_hours` up to `end_hours`.

    The running angle starts at ``start_hours * pi/6`` and advances by
    pi/1080 while strictly below ``end_hours * pi/6``. There is no wrap: when
    ``end_hours <= start_hours`` the arc is empty.
    """
    start = start_hours * HOUR_RAD
    end = end_hours * HOUR_RAD
    # running sum: the sample count follows float accumulation
    angles = []
    angle = start
    while angle < end:
        angles.append(angle)
        angle += RIM_STEP_RAD
    angles = np.asarray(angles, dtype=np.float64)
    radius = diameter / 2.0
    return np.column_stack((radius * np.cos(angles), radius * np.sin(angles)))


def closed_pendulum_segment(
        diameter    : numeric,
        start_hours : numeric,
        end_hours   : numeric,
    ) -> NDArray[np.float64]:
    """Closed wedge outline between two spokes.

    Concatenates the start spoke (center to rim), the rim arc, and the end
    spoke reversed (rim to center), so the outline does not cross itself.
    The result always has ``271 + k + 271`` points, ``k`` being the rim count.
    """
    return np.concatenate((
        pendulum_arc(diameter, start_hours),
        circumferential_arc(diameter, start_hours, end_hours),
        pendulum_arc(diameter, end_hours)[::-1],
    ))


# ---------------------------------------------------------------------------
# Polar (theta, r) forms for the diagnostic plot
# ---------------------------------------------------------------------------
def polar_projection(diameter: numeric, hours: numeric) -> NDArray[np.float64]:
    """Spoke as (theta, r) pairs, same samples as `pendulum_arc`."""
    theta, r = _spoke(diameter, hours)
    return np.column_stack((theta, r))


def latitude_arc(latitude_deg: numeric) -> NDArray[np.float64]:
    """Constant-latitude reference arc as (theta, latitude_deg) pairs.

    Samples i = -180..180; theta = i degrees scaled by sin(latitude).
    """
    i = np.arange(-LATITUDE_ARC_HALF_SPAN, LATITUDE_ARC_HALF_SPAN + 1, dtype=np.float64)
    theta = np.radians(i) * math.sin(math.radians(latitude_deg))
    return np.column_stack((theta, np.full_like(theta, float(latitude_deg))))
