"""
Opt-in console logging for the metaheuristics package.

Library modules only create ``logging.getLogger(__name__)`` loggers; nothing
is printed unless the application configures logging, either itself or by
calling :func:`configure_metaheuristics_logging`.
"""

from __future__ import annotations

import logging
from typing import TextIO

PACKAGE_LOGGER = "metaheuristics"


def configure_metaheuristics_logging(*, level: int = logging.INFO, stream: TextIO | None = None) -> logging.Logger:
    """
    Attach a console handler to the package logger and return that logger.

    Does nothing (besides returning the logger) when the application already
    configured handlers on the root or package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if logging.getLogger().handlers or package_logger.handlers:
        return package_logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False
    return package_logger


__all__ = ["PACKAGE_LOGGER", "configure_metaheuristics_logging"]
