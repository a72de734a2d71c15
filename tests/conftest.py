"""Pytest configuration for kodak tests."""

import pytest

from kodak import Colour, Dim, Image

from .kodak.utils import gradient


@pytest.fixture
def black_canvas() -> Image:
    """4x4 opaque black image."""
    return Image.blank(Dim(4, 4))


@pytest.fixture
def white_square() -> Image:
    """2x2 opaque white image."""
    return Image.blank_with_colour(Dim(2, 2), Colour.WHITE)


@pytest.fixture
def photo() -> Image:
    """Opaque 6x5 image with distinct pixels."""
    return gradient(6, 5)
