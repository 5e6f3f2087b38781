"""structlog loggers backed by the standard library.

Module loggers hand rendered events to ``logging``, so an application that
never configures logging only sees warnings and errors. The command-line
entry point calls ``configure_logging`` to pick a level.
"""

from __future__ import annotations

import logging
import sys

import structlog

from pixelcompare.config import LOG_LEVELS

ROOT_LOGGER = "pixelcompare"


def get_logger(name: str):
    return structlog.wrap_logger(
        logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger
    )


def configure_logging(level: str = "WARNING") -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
    )
    logging.basicConfig(format="%(message)s", stream=sys.stderr)
    logging.getLogger(ROOT_LOGGER).setLevel(
        LOG_LEVELS.get(level.upper(), logging.WARNING)
    )
