"""Pytest configuration and fixtures for ghfetch tests."""

import logging
import os
import tempfile

import pytest

# Keep test logs out of the user's real log directory. Must be set before
# any ghfetch module creates its logger.
os.environ.setdefault(
    "GHFETCH_LOG_DIR", tempfile.mkdtemp(prefix="ghfetch-test-logs-")
)


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees ghfetch records."""
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("ghfetch"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value
