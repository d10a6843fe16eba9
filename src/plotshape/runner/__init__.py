from .config import PlotConfig
from .logging_utils import configure_logging


__all__ = [
    "PlotConfig",
    "configure_logging",
]
