"""
-------
conftest.py
-------
Shared pytest fixtures for plotshape tests.
"""

import logging

import pytest
import matplotlib
matplotlib.use("Agg")  # headless backend for CI
import matplotlib.pyplot as plt

from plotshape.runner.config import PlotConfig


# -----------------------------------------------------------------------------
# Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def close_figures():
  """Close any figure a test leaves open."""
  yield
  plt.close("all")


# -----------------------------------------------------------------------------
# Run fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def plot_config(tmp_path) -> PlotConfig:
  """PlotConfig writing output and logs under tmp_path."""
  return PlotConfig(
      logger_level=logging.DEBUG,
      log_dir=tmp_path / "logs",
      output_dir=tmp_path / "out",
  )


@pytest.fixture(autouse=True)
def reset_plotshape_logger():
  """Drop handlers installed by configure_logging so log files get closed."""
  yield
  logger = logging.getLogger("plotshape")
  for h in list(logger.handlers):
    logger.removeHandler(h)
    h.close()


@pytest.fixture
def segment_file(tmp_path):
  """Three-segment rosette description."""
  path = tmp_path / "rosette.txt"
  path.write_text(
      "-6 -2 black 1 #ff0000\n"
      "-2 3 red 2 green\n"
      "3 6 - 0 none\n",
      encoding="utf-8",
  )
  return path
