from __future__ import annotations

import logging

import pytest

from tests._fixtures.doc_builder import DocPageBuilder


@pytest.fixture
def doc_builder() -> DocPageBuilder:
    """Provide a fresh synthetic page builder for a Frobnicator widget."""
    return DocPageBuilder()


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    """Drop handlers installed by CLI runs so later tests never log to a closed capture stream."""
    yield
    logger = logging.getLogger("gtkdoc2ctk")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
