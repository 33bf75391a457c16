import logging

import pytest

from bistro.infrastructure.logging_config import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _reset_bistro_logger():
    """Undo whatever setup_logging() did, so captured streams don't leak."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
