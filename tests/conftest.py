"""Pytest configuration and shared fixtures for textdisplay tests

This module provides common fixtures and test utilities used across
unit and integration tests.
"""

import logging

import pytest

from textdisplay.common.types import TextMetrics


@pytest.fixture
def abc_metrics() -> TextMetrics:
    """Metrics of "abc" in a 10px-advance font with ascent 6, descent 2

    With margins (10, 20) this gives the 50x48 window of the documented
    placement scenarios.
    """
    return TextMetrics(width=30, ascent=6, descent=2)


@pytest.fixture(autouse=True)
def setup_logging(caplog):
    """Setup logging for tests"""
    caplog.set_level(logging.DEBUG)


# Markers for test organization
def pytest_configure(config) -> None:
    """Register custom pytest markers used by this test suite."""
    config.addinivalue_line("markers", "requires_x11: mark test as requiring X11 display")
