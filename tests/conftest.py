import logging

import pytest


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo handler/propagation changes made by MetropolisLogger during a test."""
    logger = logging.getLogger("mhsampler")
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
