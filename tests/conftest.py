"""Pytest configuration and fixtures."""

import logging

import pytest

from truecss.config import ReportConfig
from truecss.session import ReportSession


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up truecss loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("truecss")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def session() -> ReportSession:
    """Fresh session with terminal output switched off."""
    return ReportSession(config=ReportConfig(terminal_output=False))


@pytest.fixture
def emit(session):
    """Build a body callable that emits the given CSS lines."""

    def _body(*lines: str):
        def body() -> None:
            for line in lines:
                session.emit(line)

        return body

    return _body
