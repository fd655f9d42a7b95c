from __future__ import annotations

import io
import logging

import metaheuristics
from metaheuristics.foundation.logging import PACKAGE_LOGGER, configure_metaheuristics_logging
from metaheuristics.foundation.version import get_version


def test_version_is_a_string():
    assert isinstance(get_version(), str)
    assert metaheuristics.__version__ == get_version()


def test_configure_logging_is_opt_in(monkeypatch):
    root = logging.getLogger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(package_logger, "handlers", [])
    monkeypatch.setattr(package_logger, "propagate", True)
    monkeypatch.setattr(package_logger, "level", logging.NOTSET)

    stream = io.StringIO()
    logger = configure_metaheuristics_logging(level=logging.DEBUG, stream=stream)
    logging.getLogger("metaheuristics.engine.algorithm.grasp").debug("hello")
    assert logger is package_logger
    assert "DEBUG metaheuristics.engine.algorithm.grasp: hello" in stream.getvalue()


def test_configure_logging_respects_existing_handlers(monkeypatch):
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    existing = logging.NullHandler()
    monkeypatch.setattr(package_logger, "handlers", [existing])
    configure_metaheuristics_logging()
    assert package_logger.handlers == [existing]
