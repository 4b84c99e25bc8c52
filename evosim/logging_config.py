"""Logging setup for the simulation CLI.

Cycle reports are printed to stdout, so diagnostic logging goes to stderr
and the two streams can be redirected separately.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

from evosim.exceptions import ConfigurationError

LOG_FORMAT = "%(levelname)s:%(name)s:%(message)s"
LOG_LEVEL_ENV_VAR = "EVOSIM_LOG_LEVEL"
LOG_LEVELS = ("debug", "info", "warning", "error")


def resolve_level(level: Optional[str] = None) -> str:
    """Pick the log level from the argument, then ``EVOSIM_LOG_LEVEL``, then INFO.

    Raises:
        ConfigurationError: If the chosen name is not one of LOG_LEVELS
    """
    raw_level = level if level is not None else os.getenv(LOG_LEVEL_ENV_VAR)
    name = (raw_level or "info").strip().lower()
    if name not in LOG_LEVELS:
        raise ConfigurationError(
            f"Unknown log level '{raw_level}' (choose from: {', '.join(LOG_LEVELS)})"
        )
    return name.upper()


def configure_logging(level: Optional[str] = None, stream: Optional[TextIO] = None) -> logging.Logger:
    """Send log records to ``stream`` (stderr by default) at the resolved level.

    Returns:
        The package logger (``evosim``).
    """
    resolved_level = resolve_level(level)
    logging.basicConfig(level=resolved_level, format=LOG_FORMAT, stream=stream or sys.stderr)

    app_logger = logging.getLogger("evosim")
    app_logger.setLevel(resolved_level)
    return app_logger
