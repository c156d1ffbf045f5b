"""Root conftest.py for runtimex tests.

Provides shared fixtures used across all test modules:
- mock_logger: MagicMock satisfying LoggerProtocol
- mock_terminator: MagicMock satisfying TerminatorProtocol that never exits
- clean_settings: drops cached settings before and after a test
"""

import pytest
from unittest.mock import MagicMock


@pytest.fixture
def mock_logger():
    """Create a mock logger for testing."""
    logger = MagicMock()
    logger.info = MagicMock()
    logger.debug = MagicMock()
    logger.warning = MagicMock()
    logger.error = MagicMock()
    logger.critical = MagicMock()
    logger.exception = MagicMock()
    logger.bind = MagicMock(return_value=logger)
    return logger


@pytest.fixture
def mock_terminator():
    """Create a terminator that records calls instead of exiting.

    Pass it as ``terminator=`` to the fatal helpers and assert on
    ``terminate`` / ``fatal_log``.
    """
    terminator = MagicMock()
    terminator.terminate = MagicMock(return_value=None)
    terminator.fatal_log = MagicMock(return_value=None)
    return terminator


@pytest.fixture
def clean_settings():
    """Reset the cached RuntimexSettings around a test."""
    from runtimex.settings import reset_settings

    reset_settings()
    yield
    reset_settings()
