import logging

import pytest
from loguru import logger

from container_models import PGMImage
from settings import get_settings

from .helper_function import build_pgm


class PropagateHandler(logging.Handler):
    """Handler that propagates loguru records to standard logging."""

    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


@pytest.fixture
def caplog(caplog):
    """Fixture to enable caplog to capture loguru logs."""
    handler_id = logger.add(PropagateHandler(), format="{message}")
    yield caplog
    logger.remove(handler_id)


@pytest.fixture
def clear_settings_cache():
    """Make the test read the settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(scope="session")
def pixels() -> bytes:
    """Pixel data of a 4x3 gradient."""
    return bytes(range(0, 240, 20))


@pytest.fixture(scope="session")
def pgm_data(pixels: bytes) -> bytes:
    """A complete 4x3 PGM file."""
    return build_pgm(4, 3, 240, pixels)


@pytest.fixture(scope="session")
def pgm_image(pixels: bytes) -> PGMImage:
    return PGMImage(width=4, height=3, max_grey_val=240, contents=pixels)
