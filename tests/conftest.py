"""Shared fixtures for confetti tests."""

import pytest

from confetti import reset_settings, set_logger


@pytest.fixture(autouse=True)
def clean_library_state():
    """Drop cached settings and any injected logger around each test."""
    reset_settings()
    set_logger(None)
    yield
    reset_settings()
    set_logger(None)
