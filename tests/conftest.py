import logging

import pytest


@pytest.fixture(autouse=True)
def fresh_loggers():
    yield
    for name in ("TAGCLOUD", "PROMPT"):
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def logger() -> logging.Logger:
    return logging.getLogger("tagcloud.test")
