import logging

import pytest


@pytest.fixture(autouse=True)
def _restore_orderbot_logger():
    """CLI and logging tests reconfigure the ``orderbot`` logger."""
    logger = logging.getLogger("orderbot")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield
    logger.handlers, logger.level, logger.propagate = saved
