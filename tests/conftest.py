"""Pytest configuration and fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Detach handlers from ctest loggers after each test so names can be reused."""
    yield

    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("ctest") and isinstance(logger, logging.Logger):
            for handler in logger.handlers:
                handler.close()
            logger.handlers.clear()
