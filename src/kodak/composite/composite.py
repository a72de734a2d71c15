"""Composite implementation for canvases, fills, crops and overlays."""

import logging

from kodak.buffer import PixelBuffer
from kodak.colour import Colour
from kodak.composite import utils
from kodak.composite.blend import blend
from kodak.errors import InvalidArgumentError
from kodak.geometry import Dim, Loc, Region

logger = logging.getLogger(__name__)


def blank_with_colour(dimensions: Dim, colour: Colour) -> PixelBuffer:
    """
    Canvas of ``dimensions`` where every pixel is ``colour``.

    A zero width or height gives an empty buffer, not an error.
    """
    logger.debug("Creating %dx%d canvas of %r" % (dimensions.w, dimensions.h, colour))
    return PixelBuffer.create(dimensions, colour)


def expand(dimensions: Dim, margin: int) -> Dim:
    """Canvas size needed for a border of ``margin`` pixels on every side."""
    return dimensions.expand(margin)


def overlay(destination: PixelBuffer, source: PixelBuffer, offset: Loc) -> PixelBuffer:
    """
    Blend ``source`` over ``destination`` with its top-left corner at
    ``offset``, and return the result as a new buffer of the destination's
    size.

    Source pixels that land outside of the destination are clipped silently,
    so any offset is valid, including negative ones. Neither input is
    modified.

    Example::

        canvas = blank_with_colour(Dim(4, 4), Colour.BLACK)
        square = blank_with_colour(Dim(2, 2), Colour.WHITE)
        result = overlay(canvas, square, Loc(1, 1))
    """
    _check_buffer("destination", destination)
    _check_buffer("source", source)

    result = destination.copy()
    target, visible = utils.clip_placement(destination.region(), source.region(), offset)
    if target.is_empty():
        logger.debug("Out of canvas %r at %r" % (source, offset))
        return result

    logger.debug(
        "Overlaying %r at %r, visible %r" % (source, offset, visible.bbox)
    )
    backdrop = utils.view(result.data, target)
    backdrop[...] = blend(backdrop, utils.view(source.data, visible))
    return result


def fill(buffer: PixelBuffer, colour: Colour) -> PixelBuffer:
    """New buffer of the same size, entirely ``colour``."""
    return PixelBuffer.create(buffer.dimensions(), colour)


def fill_region(buffer: PixelBuffer, region: Region, colour: Colour) -> PixelBuffer:
    """
    Copy of ``buffer`` with ``region`` replaced by ``colour``. The parts of
    the region outside of the buffer are ignored.
    """
    result = buffer.copy()
    target = result.region().intersect(region)
    if not target.is_empty():
        utils.view(result.data, target)[...] = colour.to_vec()
    return result


def crop(buffer: PixelBuffer, region: Region) -> PixelBuffer:
    """
    Cut ``region`` out of ``buffer``.

    A region that reaches past the right or bottom edge is clamped to the
    buffer.

    :raise InvalidArgumentError: if the top-left corner of the region is
        outside of the buffer.
    """
    if not region.l.inside(buffer.region()):
        raise InvalidArgumentError(
            "The corner %r from which to crop falls outside of %r" % (region.l, buffer)
        )
    target = buffer.region().intersect(region)
    if target != region:
        logger.debug("Clamping crop %r to %r" % (region.bbox, target.bbox))
    return PixelBuffer(utils.view(buffer.data, target).copy())


def _check_buffer(name: str, buffer: PixelBuffer) -> None:
    if not isinstance(buffer, PixelBuffer):
        raise InvalidArgumentError(
            "Expected PixelBuffer for %s, got %s" % (name, type(buffer).__name__)
        )
    # Dim rejects negative components.
    buffer.dimensions()
