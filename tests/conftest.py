"""Shared test fixtures and configuration."""

import contextlib
import logging

import pytest
from fastapi.testclient import TestClient

from library_inventory.api.v1.deps import get_inventory_repository
from library_inventory.domain import Book, BookCategory
from library_inventory.main import app

ODYSSEY_ISBN = "9780140449136"
ILIAD_ISBN = "9780140449181"
DICTIONARY_ISBN = "9780199535569"


@pytest.fixture
def client() -> TestClient:
    """Create a test client with an empty inventory."""
    get_inventory_repository().clear()
    return TestClient(app)


@pytest.fixture
def odyssey() -> Book:
    return Book(ODYSSEY_ISBN, "The Odyssey", "Homer", BookCategory.NORMAL)


@pytest.fixture
def iliad() -> Book:
    return Book(ILIAD_ISBN, "The Iliad", "Homer", BookCategory.NORMAL)


@pytest.fixture
def dictionary() -> Book:
    return Book(
        DICTIONARY_ISBN, "Oxford English Dictionary", "Oxford", BookCategory.REFERENCE
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration between tests to avoid interference."""
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    yield

    logging.root.handlers = original_handlers
    logging.root.level = original_level


@contextlib.contextmanager
def capture_logger(
    caplog: pytest.LogCaptureFixture, logger_name: str, level: int = logging.INFO
):
    logger = logging.getLogger(logger_name)
    with caplog.at_level(level, logger=logger_name):
        logger.addHandler(caplog.handler)
        try:
            yield
        finally:
            logger.removeHandler(caplog.handler)
