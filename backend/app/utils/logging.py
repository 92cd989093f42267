"""Structured logging configuration.

Installs a single stdout handler on the root logger with timestamp, level and
module name. The level comes from ``LOG_LEVEL``.
"""

import logging
import sys

from ..config import LOG_LEVEL


def setup_logging() -> None:
    log_level = getattr(logging, LOG_LEVEL, logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(log_level)
    # Replace handlers so repeated startups don't duplicate output.
    root.handlers.clear()
    root.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
