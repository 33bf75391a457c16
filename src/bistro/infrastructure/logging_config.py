"""Centralized logging configuration.

Log records go to stderr so that stdout carries nothing but the order
transcript.  Only the ``bistro`` logger is configured; the root logger
is left to whoever embeds us (pytest, for one).
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(levelname)s - [PID:%(process)d] - %(message)s"
ROOT_LOGGER = "bistro"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the ``bistro`` logger and set its level.

    Safe to call more than once: the handler is installed only on the
    first call, later calls just change the level.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if not any(getattr(h, "_bistro", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._bistro = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger that inherits the ``bistro`` configuration.

    Use ``__name__`` from inside the package; anything else is nested
    under ``bistro.`` so it still reaches the configured handler.
    """
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
