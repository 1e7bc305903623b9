"""
Package logger.

Library code only logs; attaching handlers is left to applications (the CLI
calls `configure_logging`).
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOGGER_NAME = "hasse_diagram"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def configure_logging(
    level: Union[int, str] = logging.INFO,
    *,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    for existing in list(logger.handlers):
        if not isinstance(existing, logging.NullHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
