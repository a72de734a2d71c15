"""
Blending module.

Implements the source-over operator of the W3C Compositing_ recommendation
on straight (non-premultiplied) alpha.

.. _Compositing: https://www.w3.org/TR/compositing/#porterduffcompositingoperators_srcover
"""

import logging

import numpy as np
from numpy.typing import NDArray

from kodak.composite import utils

logger = logging.getLogger(__name__)


def source_over(
    backdrop: NDArray[np.floating], source: NDArray[np.floating]
) -> NDArray[np.float32]:
    """
    Composite ``source`` over ``backdrop``.

    Both arguments are float RGBA arrays in [0, 1] of the same shape, with
    the channels on the last axis. With ``As`` and ``Ab`` the source and
    backdrop alpha::

        Ao = As + Ab * (1 - As)
        Co = (Cs * As + Cb * Ab * (1 - As)) / Ao

    ``Co`` is 0 wherever ``Ao`` is 0.
    """
    Cb, Ab = backdrop[..., :3], backdrop[..., 3:]
    Cs, As = source[..., :3], source[..., 3:]

    Ao = As + Ab * (1.0 - As)
    Co = utils.divide(Cs * As + Cb * Ab * (1.0 - As), Ao)
    return np.concatenate((utils.clip(Co), utils.clip(Ao)), axis=-1).astype(
        np.float32
    )


def blend(backdrop: NDArray[np.uint8], source: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """
    Source-over blend of two same-shaped uint8 RGBA arrays.

    Fully transparent source pixels keep the backdrop pixel and fully opaque
    source pixels replace it, both without a round trip through floats.
    """
    if backdrop.shape != source.shape:
        raise ValueError(
            "Shape mismatch: backdrop %s, source %s" % (backdrop.shape, source.shape)
        )
    logger.debug("Blending %dx%d pixels" % (backdrop.shape[1], backdrop.shape[0]))
    alpha = source[..., 3:]
    result = utils.to_uint8(source_over(utils.to_float(backdrop), utils.to_float(source)))
    result = np.where(alpha == 0, backdrop, result)
    result = np.where(alpha == 255, source, result)
    return result.astype(np.uint8)
