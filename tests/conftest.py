"""Shared test fixtures."""

import pytest

from pixframe.core.colors import Color
from pixframe.core.geometry import Rect


RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
TRANSPARENT_PX = (0, 0, 0, 0)


@pytest.fixture
def red():
    return RED


@pytest.fixture
def green():
    return GREEN


@pytest.fixture
def blue():
    return BLUE


@pytest.fixture
def large_rect():
    """Available space larger than any widget under test."""
    return Rect(0, 0, 200, 200)


@pytest.fixture
def display_rect():
    """A 64x32 matrix display."""
    return Rect(0, 0, 64, 32)
