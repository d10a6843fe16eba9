"""
-------
test_segment.py
-------
"""

import io
import logging

import pytest

from plotshape.segment import Segment, iter_segments, load_segments, parse_segments


# A. Single lines

def test_from_line_full_segment():
  seg = Segment.from_line("-2 3 red 2 green")
  assert seg == Segment(start=-2, end=3, stroke="red", line_width=2, fill="green")


def test_from_line_no_color_sentinels():
  seg = Segment.from_line("0 1 - 0 none")
  assert seg is not None
  assert seg.stroke is None
  assert seg.fill is None
  assert (seg.start, seg.end, seg.line_width) == (0, 1, 0)


def test_from_line_whitespace_runs():
  seg = Segment.from_line("  4 \t 6   blue  3 #00ff00 \n")
  assert seg == Segment(4, 6, "blue", 3, "#00ff00")


def test_from_line_ignores_extra_tokens():
  seg = Segment.from_line("1 2 red 1 green trailing words")
  assert seg == Segment(1, 2, "red", 1, "green")


@pytest.mark.parametrize("line", [
    "", "\n", "1 2 red 1", "a 2 red 1 green", "1 b red 1 green",
    "1 2 red thick green", "1.5 2 red 1 green",
    "1_0 2 red 1 green", "+3 \u0663 red 1 green", "1 2 red \uff11 green",
])
def test_from_line_rejects(line):
  assert Segment.from_line(line) is None


def test_segment_is_frozen():
  seg = Segment(1, 2)
  with pytest.raises(Exception):
    seg.start = 3


# B. Streams

def test_from_text_reads_one_line_at_a_time():
  stream = io.StringIO("1 2 red 1 green\n3 4 - 0 -\n")
  assert Segment.from_text(stream) == Segment(1, 2, "red", 1, "green")
  assert Segment.from_text(stream) == Segment(3, 4, None, 0, None)
  assert Segment.from_text(stream) is None


def test_parse_preserves_file_order():
  text = "3 6 a 1 b\n-6 -2 c 1 d\n0 1 e 1 f\n"
  segments = parse_segments(io.StringIO(text))
  assert [s.start for s in segments] == [3, -6, 0]


def test_parse_stops_at_first_bad_line(caplog):
  text = "1 2 red 1 green\nnot a segment\n3 4 red 1 green\n"
  with caplog.at_level(logging.WARNING, logger="plotshape"):
    segments = parse_segments(io.StringIO(text))
  assert segments == [Segment(1, 2, "red", 1, "green")]
  assert "line 2" in caplog.text


def test_parse_stops_at_empty_line():
  text = "1 2 red 1 green\n\n3 4 red 1 green\n"
  assert len(parse_segments(io.StringIO(text))) == 1


def test_parse_empty_input():
  assert parse_segments(io.StringIO("")) == []


def test_iter_segments_is_lazy():
  it = iter_segments(io.StringIO("1 2 r 1 g\n2 3 r 1 g\n"))
  assert next(it) == Segment(1, 2, "r", 1, "g")


def test_load_segments(segment_file):
  segments = load_segments(segment_file)
  assert segments == [
      Segment(-6, -2, "black", 1, "#ff0000"),
      Segment(-2, 3, "red", 2, "green"),
      Segment(3, 6, None, 0, None),
  ]


def test_load_segments_missing_file(tmp_path):
  with pytest.raises(FileNotFoundError):
    load_segments(tmp_path / "missing.txt")


def test_from_line_accepts_explicit_sign():
  assert Segment.from_line("+3 -4 red +1 green") == Segment(3, -4, "red", 1, "green")
