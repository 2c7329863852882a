"""Shared pytest configuration."""

import logging
from collections.abc import Iterator

import pytest
import structlog


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by CLI tests."""
    root = logging.getLogger()
    level = root.level

    yield

    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
    logging.getLogger("layercheck").setLevel(logging.NOTSET)
    structlog.reset_defaults()
