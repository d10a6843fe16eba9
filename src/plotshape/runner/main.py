"""
main.py - Command line entry point for plotshape.
"""

import argparse
import logging
import sys
import time
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional, Sequence

from ..defaults import LOGGER_NAME
from ..assembler import (
    lissajous_shapes, pendulum_file_shapes, pendulum_wedge_shapes, polar_plots,
)
from ..polar_plot import plot_polar_graphs, save_polar_image
from ..segment import load_segments
from ..shape import Shape
from ..svg_canvas import SvgCanvas
from .config import PlotConfig
from .logging_utils import configure_logging


USAGE = """\
Usage: plotshape -l XCycles YCycles Diameter Phase
    XCycles    Number of cycles on X axis
    YCycles    Number of cycles on Y axis
    Diameter   Diameter of the circle enclosing the Lissajous figure at its corners
    Phase      The rotational phase of the shape in degrees
plotshape -f XTwelfth YTwelfth Diameter
    XTwelfth   The angle in multiples of 30 degrees for the outermost point of
               the shape at the diameter of the shape. Range -6 to +6
    YTwelfth   The angle on multiples of 30 degrees of the second edge of the shape
    Diameter   The outer diameter of the circle surrounding the shape
plotshape -F filePath Diameter
    filePath   The path to the Foucault segment description file
    Diameter   The outer diameter of the circle surrounding the shape
plotshape -g
    Writes polar.jpg, a polar plot of the pendulum spokes for -6 to +6"""


class UsageError(Exception):
    """Raised for any malformed command line."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(prog="plotshape", add_help=False)
    mode = ap.add_mutually_exclusive_group(required=True)
    mode.add_argument("-l", "--lissajous", nargs=4, type=int,
                      metavar=("XCYCLES", "YCYCLES", "DIAMETER", "PHASE"))
    mode.add_argument("-f", "--pendulum-wedge", nargs=3, type=int,
                      metavar=("START", "END", "DIAMETER"))
    mode.add_argument("-F", "--pendulum-file", nargs=2, metavar=("FILE", "DIAMETER"))
    mode.add_argument("-g", "--diagnostic-plot", action="store_true")
    return ap


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Parse and validate; any problem surfaces as UsageError."""
    args = build_parser().parse_args(list(argv))
    if args.pendulum_file is not None:
        path, diameter = args.pendulum_file
        try:
            args.pendulum_file = (Path(path), int(diameter))
        except ValueError as e:
            raise UsageError(f"invalid diameter: {diameter!r}") from e
    return args


# ---------------------------------------------------------------------------
# Modes
# ---------------------------------------------------------------------------
def build_shapes(args: argparse.Namespace, config: PlotConfig) -> tuple[List[Shape], int]:
    """Return (shapes, diameter) for a vector mode."""
    logger = logging.getLogger(LOGGER_NAME)
    if args.lissajous is not None:
        logger.info("Mode: lissajous")
        x_cycles, y_cycles, diameter, phase = args.lissajous
        return lissajous_shapes(x_cycles, y_cycles, diameter, phase, fill=config.lissajous_fill), diameter
    if args.pendulum_wedge is not None:
        logger.info("Mode: pendulum-wedge")
        start, end, diameter = args.pendulum_wedge
        return pendulum_wedge_shapes(start, end, diameter), diameter
    logger.info("Mode: pendulum-file")
    path, diameter = args.pendulum_file
    return pendulum_file_shapes(load_segments(path), diameter), diameter


def write_svg(shapes: List[Shape], diameter: int, config: PlotConfig) -> Path:
    logger = logging.getLogger(LOGGER_NAME)
    canvas = SvgCanvas(diameter)
    canvas.add_shapes(shapes)
    viewbox = canvas.calculate_viewbox(config.margin)
    logger.info(f"{len(shapes)} shape(s), {sum(len(s) for s in shapes)} point(s), viewbox {viewbox}")
    out = canvas.save(config.output_dir / f"{time.strftime('%H%M%S')}.svg")
    logger.info(f"SVG written: {out}")
    return out


def write_polar(config: PlotConfig) -> Path:
    width, height = config.polar_size
    fig = plot_polar_graphs(
        polar_plots(config.polar_diameter, config.reference_latitude),
        width, height, config.dpi,
    )
    out = save_polar_image(fig, config.output_dir / config.polar_filename, config.dpi)
    logging.getLogger(LOGGER_NAME).info(f"Polar plot written: {out}")
    return out


# ---------------------------------------------------------------------------
# Main driver
# ---------------------------------------------------------------------------
def main(argv: Optional[Sequence[str]] = None, config: Optional[PlotConfig] = None) -> int:
    """Run one plotshape invocation; returns the process exit status."""
    argv = sys.argv[1:] if argv is None else argv
    try:
        args = parse_args(argv)
    except UsageError:
        print(USAGE)
        return 2

    logger = logging.getLogger(LOGGER_NAME)
    try:
        config = config or PlotConfig()
        configure_logging(level=config.logger_level, log_dir=config.log_dir,
                          name=LOGGER_NAME, run_prefix="plotshape",
                          console_level=config.console_level)
        logger.debug(f"PlotConfig: {asdict(config)}")
        if args.diagnostic_plot:
            logger.info("Mode: diagnostic-plot")
            write_polar(config)
        else:
            shapes, diameter = build_shapes(args, config)
            write_svg(shapes, diameter, config)
    except Exception as e:
        logger.exception(f"Run aborted due to fatal error: {e}")
        print(f"{type(e).__name__}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
