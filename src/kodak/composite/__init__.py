"""
Composite module for canvas creation and alpha blending.

This subpackage holds the pure functions behind
:py:class:`~kodak.api.image.Image`. They work on
:py:class:`~kodak.buffer.PixelBuffer` values and always return new buffers.

Key modules:

- :py:mod:`kodak.composite.composite`: canvases, fills, crops and overlay
- :py:mod:`kodak.composite.blend`: the source-over blending operator

Example usage::

    from kodak.composite import blank_with_colour, expand, overlay

    canvas = blank_with_colour(expand(buffer.dimensions(), 16), Colour.WHITE)
    framed = overlay(canvas, buffer, Loc(16, 16))
"""

from kodak.composite.composite import (
    blank_with_colour,
    crop,
    expand,
    fill,
    fill_region,
    overlay,
)

__all__ = [
    "blank_with_colour",
    "crop",
    "expand",
    "fill",
    "fill_region",
    "overlay",
]
