"""
Miscellaneous utilities shared across hasse-diagram.
"""

from .logging import configure_logging, logger
from .config import HasseConfig, LayoutConfig, config

__all__ = ["logger", "configure_logging", "config", "HasseConfig", "LayoutConfig"]
