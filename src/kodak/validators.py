"""
Validation functions for attrs.
"""

import numbers
from typing import Any

from attrs import define

from kodak.errors import InvalidArgumentError

__all__ = ["as_int", "integer", "non_negative", "range_"]


def as_int(value: Any) -> Any:
    """Converter that turns integral numbers (numpy included) into ``int``."""
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return int(value)
    return value


@define(repr=False, hash=True)
class _RangeValidator:
    minimum: Any
    maximum: Any

    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        try:
            in_range = self.minimum <= value and value <= self.maximum
        except TypeError:
            in_range = False

        if not in_range:
            raise InvalidArgumentError(
                "'{name}' must be in range [{minimum}, {maximum}], got {value!r}".format(
                    name=attr.name,
                    minimum=self.minimum,
                    maximum=self.maximum,
                    value=value,
                )
            )

    def __repr__(self) -> str:
        return "<range_ validator with [{minimum!r}, {maximum!r}]>".format(
            minimum=self.minimum, maximum=self.maximum
        )


@define(repr=False, hash=True)
class _NonNegativeValidator:
    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        if value < 0:
            raise InvalidArgumentError(
                "'{name}' must be non-negative, got {value!r}".format(
                    name=attr.name, value=value
                )
            )

    def __repr__(self) -> str:
        return "<non_negative validator>"


@define(repr=False, hash=True)
class _IntegerValidator:
    def __call__(self, inst: Any, attr: Any, value: Any) -> None:
        # bool is an int subclass but never a meaningful coordinate.
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                "'{name}' must be an integer, got {type}".format(
                    name=attr.name, type=type(value).__name__
                )
            )

    def __repr__(self) -> str:
        return "<integer validator>"


def range_(minimum: Any, maximum: Any) -> _RangeValidator:
    """
    A validator that raises a :exc:`~kodak.errors.InvalidArgumentError` if the
    initializer is called with a value that does not belong in the
    [minimum, maximum] range. The check is performed using
    ``minimum <= value and value <= maximum``
    """
    return _RangeValidator(minimum, maximum)


def non_negative() -> _NonNegativeValidator:
    """
    A validator that raises a :exc:`~kodak.errors.InvalidArgumentError` if
    the value is negative.
    """
    return _NonNegativeValidator()


def integer() -> _IntegerValidator:
    """
    A validator that raises a :exc:`~kodak.errors.InvalidArgumentError` if
    the value is not an ``int``. Pair it with :py:func:`as_int` so that numpy
    integers are accepted.
    """
    return _IntegerValidator()
