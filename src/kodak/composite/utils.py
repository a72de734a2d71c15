"""Utility functions for composite operations."""

import numpy as np
from numpy.typing import NDArray

from kodak.geometry import Loc, Region


def divide(a: NDArray[np.floating], b: NDArray[np.floating]) -> NDArray[np.floating]:
    """Safe division for color ops; undefined results become 0."""
    with np.errstate(divide="ignore", invalid="ignore"):
        c = np.true_divide(a, b)
        c[~np.isfinite(c)] = 0.0
    return c


def clip(x: NDArray[np.floating]) -> NDArray[np.floating]:
    """Clip between [0, 1]."""
    return np.clip(x, 0.0, 1.0)


def to_float(values: np.ndarray) -> NDArray[np.float32]:
    """Convert uint8 channels to float32 in [0, 1]."""
    return values.astype(np.float32) / 255.0


def to_uint8(values: NDArray[np.floating]) -> NDArray[np.uint8]:
    """Convert float channels in [0, 1] to rounded uint8."""
    return np.round(clip(values) * 255.0).astype(np.uint8)


def clip_placement(
    canvas: Region, placed: Region, offset: Loc
) -> tuple[Region, Region]:
    """
    Clip the ``placed`` rectangle, moved by ``offset``, to ``canvas``.

    Returns the visible part twice: once in canvas coordinates and once in
    the coordinates of the placed rectangle. Both regions are empty when
    nothing is visible.
    """
    target = canvas.intersect(placed.translate(offset))
    return target, target.translate(-offset)


def view(values: np.ndarray, region: Region) -> np.ndarray:
    """Slice a ``(height, width, channels)`` array to ``region``."""
    return values[region.top : region.bottom, region.left : region.right]
