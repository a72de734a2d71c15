"""
Colour value type.

Colours are 8-bit sRGB with straight (non-premultiplied) alpha. Alpha 0 is
fully transparent and 255 fully opaque.
"""

from typing import ClassVar, Iterator, Sequence

from attrs import define, field

from kodak.errors import InvalidArgumentError
from kodak.validators import as_int, integer, range_

_CHANNEL = [integer(), range_(0, 255)]


@define(frozen=True)
class Colour:
    """
    RGBA colour with channels in [0, 255].

    Example::

        red = Colour(255, 0, 0)
        half_red = Colour(255, 0, 0, 128)
    """

    r: int = field(converter=as_int, validator=_CHANNEL)
    g: int = field(converter=as_int, validator=_CHANNEL)
    b: int = field(converter=as_int, validator=_CHANNEL)
    a: int = field(default=255, converter=as_int, validator=_CHANNEL)

    BLACK: ClassVar["Colour"]
    WHITE: ClassVar["Colour"]
    TRANSPARENT: ClassVar["Colour"]

    @classmethod
    def from_vec(cls, values: Sequence[int]) -> "Colour":
        """
        Creates a colour from three (opaque) or four channel values.

        :raise InvalidArgumentError: for any other number of values.
        """
        values = list(values)
        if len(values) not in (3, 4):
            raise InvalidArgumentError(
                "Three or four channel values expected, got %d" % len(values)
            )
        return cls(*values)

    def to_vec(self) -> list[int]:
        return [self.r, self.g, self.b, self.a]

    @property
    def is_opaque(self) -> bool:
        return self.a == 255

    @property
    def is_transparent(self) -> bool:
        return self.a == 0

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_vec())


Colour.BLACK = Colour(0, 0, 0)
Colour.WHITE = Colour(255, 255, 255)
Colour.TRANSPARENT = Colour(0, 0, 0, 0)
