"""
Exceptions raised by kodak.

Both concrete exceptions also derive from the matching built-in exception, so
``except IndexError`` or ``except ValueError`` keeps working for callers that
do not know about kodak.
"""


class KodakError(Exception):
    """Base class for kodak exceptions."""


class OutOfBoundsError(KodakError, IndexError):
    """A pixel coordinate falls outside of the image."""


class InvalidArgumentError(KodakError, ValueError):
    """An argument cannot describe a valid image, colour or geometry."""
