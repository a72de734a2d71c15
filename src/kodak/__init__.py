"""
kodak: Python package for image creation and composition.

Images are immutable values and every operation returns a new image, so code
reads as a chain of operations.

Basic usage::

    from kodak import Colour, Image, Loc

    # Add a white border around an image.
    border_width = 16

    src_img = Image.open('photo.png')
    new_img = Image.blank_with_colour(
        src_img.dimensions().expand(border_width), Colour.WHITE
    ).overlay(src_img, Loc(border_width, border_width))
    new_img.save('framed.png')

Architecture:

- :py:mod:`kodak.geometry` and :py:mod:`kodak.colour`: value types
- :py:mod:`kodak.buffer`: pixel storage
- :py:mod:`kodak.composite`: canvas, crop and overlay engine
- :py:mod:`kodak.api`: high-level user-facing API (primary interface)
"""

from kodak.api.image import Image
from kodak.buffer import PixelBuffer
from kodak.colour import Colour
from kodak.errors import InvalidArgumentError, KodakError, OutOfBoundsError
from kodak.geometry import Dim, Loc, Region
from kodak.version import __version__

__all__ = [
    "Colour",
    "Dim",
    "Image",
    "InvalidArgumentError",
    "KodakError",
    "Loc",
    "OutOfBoundsError",
    "PixelBuffer",
    "Region",
    "__version__",
]
