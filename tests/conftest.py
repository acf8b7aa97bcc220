"""Pytest configuration and fixtures for 1code-linux tests."""

import logging
import os
import tempfile

# Must be set before onecode_linux creates its file handler
os.environ.setdefault(
    "ONECODE_LINUX_LOG_DIR", tempfile.mkdtemp(prefix="onecode-linux-logs-")
)

import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("onecode_linux"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value
