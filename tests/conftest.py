"""Global pytest configuration and fixtures."""

import pytest

from schemakit import setup_test_logging


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()
