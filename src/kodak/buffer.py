"""
Pixel buffer module.

A :py:class:`PixelBuffer` is the dense storage behind every
:py:class:`~kodak.api.image.Image`: a row-major ``uint8`` array of shape
``(height, width, 4)`` holding RGBA values. Pixel ``Loc(x, y)`` lives at
``data[y, x]``.
"""

import logging

import numpy as np

from kodak.colour import Colour
from kodak.errors import InvalidArgumentError, OutOfBoundsError
from kodak.geometry import Dim, Loc, Region

logger = logging.getLogger(__name__)

CHANNELS = 4


class PixelBuffer:
    """
    Coordinate-indexed RGBA storage.

    Buffers are mutable while being built and frozen once handed over to an
    image; a frozen buffer rejects :py:meth:`set`.

    Example::

        buffer = PixelBuffer.create(Dim(4, 4), Colour.BLACK)
        buffer.set(Loc(1, 1), Colour.WHITE)
        assert buffer.get(Loc(1, 1)) == Colour.WHITE
    """

    __slots__ = ("_data",)

    def __init__(self, data: np.ndarray):
        if not isinstance(data, np.ndarray):
            raise TypeError(f"Expected ndarray, got {type(data).__name__}")
        if data.dtype != np.uint8 or data.ndim != 3 or data.shape[2] != CHANNELS:
            raise InvalidArgumentError(
                "Expected uint8 array of shape (height, width, %d), got %s %s"
                % (CHANNELS, data.dtype, data.shape)
            )
        self._data = data

    @classmethod
    def create(cls, dimensions: Dim, fill: Colour = Colour.BLACK) -> "PixelBuffer":
        """
        Allocate ``width * height`` pixels, each set to ``fill``.

        :param dimensions: :py:class:`~kodak.geometry.Dim` of the buffer.
        :param fill: initial :py:class:`~kodak.colour.Colour`.
        """
        if not isinstance(dimensions, Dim):
            raise InvalidArgumentError(
                f"Expected Dim, got {type(dimensions).__name__}"
            )
        data = np.empty((dimensions.h, dimensions.w, CHANNELS), dtype=np.uint8)
        data[:, :] = fill.to_vec()
        return cls(data)

    @classmethod
    def fromarray(cls, array: np.ndarray) -> "PixelBuffer":
        """
        Copy an ``(height, width, 3)`` or ``(height, width, 4)`` uint8 array
        into a new buffer. RGB input becomes opaque RGBA.
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] not in (3, CHANNELS):
            raise InvalidArgumentError(
                "Expected array of shape (height, width, 3 or 4), got %s"
                % (array.shape,)
            )
        if array.dtype != np.uint8:
            raise InvalidArgumentError("Expected uint8 array, got %s" % array.dtype)
        if array.shape[2] == 3:
            alpha = np.full(array.shape[:2] + (1,), 255, dtype=np.uint8)
            return cls(np.concatenate((array, alpha), axis=2))
        return cls(array.copy())

    @property
    def data(self) -> np.ndarray:
        """Underlying ``(height, width, 4)`` array."""
        return self._data

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    def dimensions(self) -> Dim:
        return Dim(self.width, self.height)

    def region(self) -> Region:
        return Region.from_top_left(self.dimensions())

    def get(self, loc: Loc) -> Colour:
        """
        Pixel at ``loc``.

        :raise OutOfBoundsError: if ``loc`` is outside of the buffer.
        """
        self._check_bounds(loc)
        return Colour.from_vec(self._data[loc.y, loc.x].tolist())

    def set(self, loc: Loc, colour: Colour) -> None:
        """
        Replace the pixel at ``loc``.

        :raise OutOfBoundsError: if ``loc`` is outside of the buffer.
        :raise ValueError: if the buffer is frozen.
        """
        self._check_bounds(loc)
        self._data[loc.y, loc.x] = colour.to_vec()

    def copy(self) -> "PixelBuffer":
        """Independent, writable copy."""
        return PixelBuffer(self._data.copy())

    def freeze(self) -> "PixelBuffer":
        """Make the buffer read-only and return it."""
        self._data.setflags(write=False)
        return self

    @property
    def frozen(self) -> bool:
        return not self._data.flags.writeable

    def _check_bounds(self, loc: Loc) -> None:
        if not loc.inside(self.region()):
            raise OutOfBoundsError(
                "%r is outside of the %dx%d buffer" % (loc, self.width, self.height)
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self._data.shape == other._data.shape and bool(
            np.array_equal(self._data, other._data)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "%s(width=%d, height=%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
        )
