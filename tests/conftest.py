"""Shared test fixtures."""

from __future__ import annotations

import logging

import pytest
import structlog

from selectorcraft.builder.selector import SelectorBuilder
from selectorcraft.config.logging import LOGGER_NAME
from selectorcraft.config.settings import get_settings


@pytest.fixture()
def builder() -> SelectorBuilder:
    return SelectorBuilder()


@pytest.fixture(autouse=True)
def _reset_config():
    """Drop cached settings and logging configuration between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True
