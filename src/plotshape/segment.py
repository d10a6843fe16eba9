"""
segment.py
----------

Describes one coloured segment of a rosette and reads segment files.

Each line of a segment file has the form

    -2 3 red 2 green

meaning: start at -2 * 30 degrees, end at +3 * 30 degrees, stroke red with
width 2, fill green. A stroke or fill of "-" or "none" means no colour.

Reading stops at the end of the stream or at the first line that does not
parse (an empty line included); everything after that line is ignored.
"""

from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, TextIO, Union

from .defaults import LOGGER_NAME

PathLike = Union[str, os.PathLike]
NO_COLOR_TOKENS = frozenset({"-", "none"})
FIELD_COUNT = 5
INTEGER_TOKEN = re.compile(r"[+-]?\d+\Z", re.ASCII)


def _color(token: str) -> Optional[str]:
    return None if token in NO_COLOR_TOKENS else token


@dataclass(frozen=True)
class Segment:
    """One styled wedge of the rosette; angles are in 30 degree units."""
    start: int
    end: int
    stroke: Optional[str] = None
    line_width: int = 0
    fill: Optional[str] = None

    @classmethod
    def from_line(cls, line: str) -> Optional[Segment]:
        """Parse a single line; return None if it is not a valid segment.

        Numbers are plain ASCII digits with an optional sign; tokens past the
        fifth are ignored.
        """
        elements = line.split()
        if len(elements) < FIELD_COUNT:
            return None
        numbers = (elements[0], elements[1], elements[3])
        if not all(INTEGER_TOKEN.match(token) for token in numbers):
            return None
        start, end, line_width = (int(token) for token in numbers)
        return cls(
            start=start,
            end=end,
            stroke=_color(elements[2]),
            line_width=line_width,
            fill=_color(elements[4]),
        )

    @classmethod
    def from_text(cls, stream: TextIO) -> Optional[Segment]:
        """Read the next line from `stream`; None at end of input or on a bad line."""
        line = stream.readline()
        if not line:
            return None
        return cls.from_line(line)


def iter_segments(stream: TextIO) -> Iterator[Segment]:
    """Yield segments in file order until end of input or the first bad line."""
    logger = logging.getLogger(LOGGER_NAME)
    for lineno, line in enumerate(stream, start=1):
        segment = Segment.from_line(line)
        if segment is None:
            logger.warning(f"Segment scan stopped at line {lineno}: {line.rstrip()!r}")
            return
        yield segment


def parse_segments(stream: TextIO) -> List[Segment]:
    return list(iter_segments(stream))


def load_segments(path: PathLike) -> List[Segment]:
    """Read all segments from a text file."""
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        segments = parse_segments(f)
    logging.getLogger(LOGGER_NAME).info(f"Loaded {len(segments)} segment(s) from {path}")
    return segments
