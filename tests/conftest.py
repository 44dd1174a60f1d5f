"""Shared fixtures for the blockstats test suite."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the engine attaches so each test starts clean."""
    yield
    package_logger = logging.getLogger("blockstats")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)
