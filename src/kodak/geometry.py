"""
Geometry value types.

Coordinates follow the usual raster convention: ``Loc(0, 0)`` is the top-left
pixel, ``x`` grows to the right and ``y`` grows downwards. All the types are
immutable; arithmetic returns new values.
"""

from typing import Iterator, Union

from attrs import define, field

from kodak.errors import InvalidArgumentError, OutOfBoundsError
from kodak.validators import as_int, integer, non_negative


@define(frozen=True)
class Dim:
    """
    Dimensions of an image.

    Both components are non-negative; a zero component describes a valid
    image without pixels.

    .. py:attribute:: w
    .. py:attribute:: h
    """

    w: int = field(default=0, converter=as_int, validator=[integer(), non_negative()])
    h: int = field(default=0, converter=as_int, validator=[integer(), non_negative()])

    @classmethod
    def square(cls, side: int) -> "Dim":
        """Creates a square dimension."""
        return cls(side, side)

    def expand(self, margin: int) -> "Dim":
        """
        Expands the dimension symmetrically by ``margin`` on every side, that
        is ``(w + 2 * margin, h + 2 * margin)``.

        A negative margin shrinks the dimension.

        :raise InvalidArgumentError: if the result would be negative.
        """
        margin = as_int(margin)
        if isinstance(margin, bool) or not isinstance(margin, int):
            raise InvalidArgumentError(
                "Margin must be an integer, got %s" % type(margin).__name__
            )
        w, h = self.w + 2 * margin, self.h + 2 * margin
        if w < 0 or h < 0:
            raise InvalidArgumentError(
                "Margin %d is too small for dimension %dx%d" % (margin, self.w, self.h)
            )
        return Dim(w, h)

    @property
    def area(self) -> int:
        """Number of pixels."""
        return self.w * self.h

    def astuple(self) -> tuple[int, int]:
        """``(width, height)`` tuple, as used by Pillow's ``size``."""
        return (self.w, self.h)

    def __iter__(self) -> Iterator[int]:
        return iter(self.astuple())


@define(frozen=True)
class Loc:
    """
    A location on an image, or an offset of one image on another.

    Components are signed so that an offset may place an image partially off
    the top or the left edge.

    .. py:attribute:: x
    .. py:attribute:: y
    """

    x: int = field(default=0, converter=as_int, validator=integer())
    y: int = field(default=0, converter=as_int, validator=integer())

    @classmethod
    def from_index(cls, index: int, dimension: Dim) -> "Loc":
        """Returns the location of a row-major flat index."""
        if not 0 <= index < dimension.area:
            raise OutOfBoundsError(
                "Index %d is outside of dimension %dx%d"
                % (index, dimension.w, dimension.h)
            )
        return cls(index % dimension.w, index // dimension.w)

    def as_index(self, dimension: Dim) -> int:
        """Returns the row-major flat index of this location."""
        if not self.inside(Region.from_top_left(dimension)):
            raise OutOfBoundsError(
                "%r is outside of dimension %dx%d" % (self, dimension.w, dimension.h)
            )
        return self.x + self.y * dimension.w

    def inside(self, region: "Region") -> bool:
        """
        Checks if the location falls inside of a region.

        Note that this is left-inclusive, but right-exclusive.
        """
        return (
            region.left <= self.x < region.right
            and region.top <= self.y < region.bottom
        )

    def astuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __iter__(self) -> Iterator[int]:
        return iter(self.astuple())

    def __add__(self, other: Union["Loc", Dim]) -> "Loc":
        if isinstance(other, Loc):
            return Loc(self.x + other.x, self.y + other.y)
        if isinstance(other, Dim):
            return Loc(self.x + other.w, self.y + other.h)
        return NotImplemented

    def __neg__(self) -> "Loc":
        return Loc(-self.x, -self.y)


@define(frozen=True)
class Region:
    """
    A rectangle given by its top-left corner and its dimensions.

    .. py:attribute:: l

        Top-left :py:class:`Loc`.

    .. py:attribute:: d

        :py:class:`Dim` of the region.
    """

    l: Loc = field(factory=Loc)  # noqa: E741
    d: Dim = field(factory=Dim)

    @classmethod
    def from_top_left(cls, dim: Dim) -> "Region":
        """Makes a region which starts in the top left corner."""
        return cls(Loc(0, 0), dim)

    @classmethod
    def from_bbox(cls, bbox: tuple[int, int, int, int]) -> "Region":
        """
        Makes a region from a ``(left, top, right, bottom)`` tuple. An
        inverted box gives an empty region.
        """
        left, top, right, bottom = bbox
        return cls(Loc(left, top), Dim(max(right - left, 0), max(bottom - top, 0)))

    @property
    def left(self) -> int:
        return self.l.x

    @property
    def top(self) -> int:
        return self.l.y

    @property
    def right(self) -> int:
        return self.l.x + self.d.w

    @property
    def bottom(self) -> int:
        return self.l.y + self.d.h

    @property
    def bbox(self) -> tuple[int, int, int, int]:
        """``(left, top, right, bottom)`` tuple."""
        return (self.left, self.top, self.right, self.bottom)

    def is_empty(self) -> bool:
        return self.d.area == 0

    def contains(self, loc: Loc) -> bool:
        return loc.inside(self)

    def intersect(self, other: "Region") -> "Region":
        """
        Overlap of two regions. Regions that do not overlap give an empty
        region anchored at the corner of the would-be overlap.
        """
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Region(Loc(left, top), Dim(max(right - left, 0), max(bottom - top, 0)))

    def translate(self, offset: Loc) -> "Region":
        return Region(self.l + offset, self.d)
