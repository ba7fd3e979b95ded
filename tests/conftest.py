"""
Pytest configuration and fixtures for the User Store API tests
"""

import logging
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from user_store_api.app.core.config import Settings
from user_store_api.app.core.logging_config import PACKAGE_LOGGER, service_handlers
from user_store_api.app.main import create_app


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """A client bound to a brand new app with a freshly seeded store"""
    with TestClient(create_app(Settings())) as test_client:
        yield test_client


@pytest.fixture
def counter_client() -> Generator[TestClient, None, None]:
    """Same as ``client`` but ids come from a monotonic counter"""
    with TestClient(create_app(Settings(id_strategy="counter"))) as test_client:
        yield test_client


@pytest.fixture
def unconfigured_logging() -> Generator[logging.Logger, None, None]:
    """Remove the service's own root handlers for one test, then put them back

    Handlers owned by pytest are left untouched.
    """
    root = logging.getLogger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved_handlers = service_handlers(root)
    saved_level = package_logger.level
    for handler in saved_handlers:
        root.removeHandler(handler)
    yield root
    for handler in service_handlers(root):
        root.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        root.addHandler(handler)
    package_logger.setLevel(saved_level)
