"""
config.py - Run configuration for the plotshape command line.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from ..defaults import DEFAULT_MARGIN, LISSAJOUS_FILL, POLAR_DIAMETER, REFERENCE_LATITUDE


@dataclass(frozen=True)
class PlotConfig:
    """Immutable settings shared by every output mode."""
    logger_level: int = logging.DEBUG
    console_level: int = logging.INFO
    log_dir: Path = Path("logs")
    output_dir: Path = Path(".")
    margin: float = DEFAULT_MARGIN
    lissajous_fill: str = LISSAJOUS_FILL
    polar_size: Tuple[int, int] = (1080, 1080)
    polar_diameter: int = POLAR_DIAMETER
    reference_latitude: float = REFERENCE_LATITUDE
    polar_filename: str = "polar.jpg"
    dpi: int = 100

    def __post_init__(self):
        self.output_dir.mkdir(parents=True, exist_ok=True)
