"""
defaults.py - Names and values shared by the library and the runner.
"""

LOGGER_NAME = "plotshape"
DEFAULT_MARGIN = 10.0
LISSAJOUS_FILL = "gray"
POLAR_DIAMETER = 180  # radius then reads as latitude in degrees
REFERENCE_LATITUDE = 56.4566
