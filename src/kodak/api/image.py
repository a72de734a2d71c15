"""
Image module.

This module provides the :py:class:`Image` class, the entry point for users of
kodak. An image is an immutable value: every operation returns a new image,
so operations chain in a functional style.

Key functionality:

- **Creating images**: :py:meth:`Image.blank`,
  :py:meth:`Image.blank_with_colour`, :py:meth:`Image.open`,
  :py:meth:`Image.frompil` and :py:meth:`Image.fromarray`
- **Composing**: :py:meth:`~Image.overlay`, :py:meth:`~Image.fill`,
  :py:meth:`~Image.fill_region`, :py:meth:`~Image.crop` and
  :py:meth:`~Image.add_border`
- **Saving**: :py:meth:`~Image.save` through Pillow

Example usage::

    from kodak import Colour, Image, Loc

    # Add a white border around an image.
    border_width = 16

    src_img = Image.open('photo.png')
    new_img = Image.blank_with_colour(
        src_img.dimensions().expand(border_width), Colour.WHITE
    ).overlay(src_img, Loc(border_width, border_width))
    new_img.save('framed.png')
"""

import logging
import os
from typing import Any, BinaryIO, Optional, Union

import numpy as np
from PIL import Image as PILImage

from kodak import composite
from kodak.api import pil_io
from kodak.buffer import PixelBuffer
from kodak.colour import Colour
from kodak.geometry import Dim, Loc, Region

logger = logging.getLogger(__name__)

LocLike = Union[Loc, tuple[int, int]]


class Image:
    """
    Immutable RGBA raster image.

    The pixels are held in a frozen :py:class:`~kodak.buffer.PixelBuffer`
    that no other image shares.

    Example::

        from kodak import Colour, Dim, Image, Loc

        canvas = Image.blank(Dim(4, 4))
        square = Image.blank_with_colour(Dim(2, 2), Colour.WHITE)
        result = canvas.overlay(square, Loc(1, 1))
        assert result.get_pixel(Loc(1, 1)) == Colour.WHITE
    """

    __slots__ = ("_buffer",)

    def __init__(self, buffer: PixelBuffer):
        if not isinstance(buffer, PixelBuffer):
            raise TypeError(f"Expected PixelBuffer, got {type(buffer).__name__}")
        self._buffer = buffer.copy().freeze()

    @classmethod
    def _wrap(cls, buffer: PixelBuffer) -> "Image":
        """Take ownership of a buffer nothing else references."""
        self = cls.__new__(cls)
        self._buffer = buffer.freeze()
        return self

    @classmethod
    def blank(cls, dimension: Dim) -> "Image":
        """
        Create a new blank image.

        The default colour used is opaque black.

        :param dimension: the :py:class:`~kodak.geometry.Dim` of the image.
        :return: the newly created :py:class:`Image`.
        """
        return cls.blank_with_colour(dimension, Colour.BLACK)

    @classmethod
    def blank_with_colour(cls, dimension: Dim, colour: Colour) -> "Image":
        """
        Create a new image where every pixel is ``colour``.

        This is more efficient than ``Image.blank(dim).fill(colour)``.
        """
        return cls._wrap(composite.blank_with_colour(dimension, colour))

    @classmethod
    def open(cls, fp: Union[BinaryIO, str, bytes, os.PathLike], **kwargs: Any) -> "Image":
        """
        Open an image file.

        :param fp: filename or file-like object.
        :param kwargs: passed to :py:func:`PIL.Image.open`.
        :return: An :py:class:`Image` object.
        """
        with PILImage.open(fp, **kwargs) as image:
            image.load()
            logger.debug("Opened %s image of %dx%d" % (image.format, *image.size))
            return cls.frompil(image)

    @classmethod
    def frompil(cls, image: PILImage.Image) -> "Image":
        """
        Create an image from a PIL Image. Any mode is converted to RGBA.

        :param image: :py:class:`PIL.Image.Image` object.
        """
        return cls._wrap(pil_io.convert_pil_to_buffer(image))

    @classmethod
    def fromarray(cls, array: np.ndarray) -> "Image":
        """
        Create an image from a ``(height, width, 3)`` or
        ``(height, width, 4)`` uint8 array. The array is copied.
        """
        return cls._wrap(PixelBuffer.fromarray(array))

    def save(
        self,
        fp: Union[BinaryIO, str, bytes, os.PathLike],
        format: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """
        Save the image through Pillow.

        :param fp: filename or file-like object.
        :param format: Pillow format name. Inferred from the filename when
            omitted; file-like objects default to PNG.
        :param kwargs: passed to :py:meth:`PIL.Image.Image.save`.
        """
        if format is None and not isinstance(fp, (str, bytes, os.PathLike)):
            format = "PNG"
        logger.debug("Saving %r as %s" % (self, format or fp))
        self.topil().save(fp, format=format, **kwargs)

    def topil(self) -> PILImage.Image:
        """Get an RGBA :py:class:`PIL.Image.Image`."""
        return pil_io.convert_buffer_to_pil(self._buffer)

    def numpy(self) -> np.ndarray:
        """Copy of the pixels as a ``(height, width, 4)`` uint8 array."""
        return self._buffer.data.copy()

    def dimensions(self) -> Dim:
        """Returns the dimensions of the image."""
        return self._buffer.dimensions()

    @property
    def width(self) -> int:
        return self._buffer.width

    @property
    def height(self) -> int:
        return self._buffer.height

    @property
    def size(self) -> tuple[int, int]:
        """``(width, height)`` tuple."""
        return (self.width, self.height)

    def as_region(self) -> Region:
        """Returns the entire image as a region."""
        return self._buffer.region()

    def get_pixel(self, loc: LocLike) -> Colour:
        """
        Colour of the pixel at ``loc``.

        :raise OutOfBoundsError: if ``loc`` falls outside of the image.
        """
        return self._buffer.get(_as_loc(loc))

    def fill(self, colour: Colour) -> "Image":
        """New image of the same size, entirely ``colour``."""
        return Image._wrap(composite.fill(self._buffer, colour))

    def fill_region(self, region: Region, colour: Colour) -> "Image":
        """New image with ``region`` replaced by ``colour``."""
        return Image._wrap(composite.fill_region(self._buffer, region, colour))

    def crop(self, region: Region) -> "Image":
        """
        Crop ``region`` out of the image. The region is clamped when it
        reaches past the right or bottom edge.

        :raise InvalidArgumentError: if the corner of the region falls outside
            of the image.
        """
        return Image._wrap(composite.crop(self._buffer, region))

    def overlay(self, other: "Image", offset: LocLike = Loc(0, 0)) -> "Image":
        """
        Overlay ``other`` on top of this image at ``offset`` using
        source-over alpha blending.

        The result has the size of this image; the parts of ``other`` that do
        not fit are clipped.
        """
        if not isinstance(other, Image):
            raise TypeError(f"Expected Image, got {type(other).__name__}")
        return Image._wrap(
            composite.overlay(self._buffer, other._buffer, _as_loc(offset))
        )

    def add_border(self, width: int, colour: Colour = Colour.WHITE) -> "Image":
        """
        Surround the image with a uniform border of ``width`` pixels.

        Example::

            framed = Image.open('photo.png').add_border(16)
        """
        canvas = Image.blank_with_colour(
            composite.expand(self.dimensions(), width), colour
        )
        return canvas.overlay(self, Loc(width, width))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return self._buffer == other._buffer

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "%s(size=%dx%d)" % (self.__class__.__name__, self.width, self.height)


def _as_loc(value: LocLike) -> Loc:
    return value if isinstance(value, Loc) else Loc(*value)
