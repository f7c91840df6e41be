"""Shared pytest fixtures."""

from loguru import logger
import pytest


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop any loguru handlers a test installed so they don't leak into the next one."""
    yield
    logger.remove()
