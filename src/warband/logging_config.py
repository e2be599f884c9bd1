"""Logging setup for the command-line walkthrough.

The library itself only creates module loggers; handlers are configured
here, by the entrypoint, and nowhere else.
"""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: str = "INFO",
    *,
    format: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
) -> logging.Logger:
    """Configure root logging and return the ``warband`` logger."""

    resolved_level = level.upper()
    logging.basicConfig(level=resolved_level, format=format, datefmt=datefmt)

    app_logger = logging.getLogger("warband")
    app_logger.setLevel(resolved_level)
    app_logger.debug("logging configured at %s", resolved_level)
    return app_logger
