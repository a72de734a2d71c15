"""
PIL IO module.

Pillow is the raster codec: it decodes files into images that are converted
to :py:class:`~kodak.buffer.PixelBuffer` here, and encodes buffers converted
back into RGBA images.
"""

import logging

import numpy as np
from PIL import Image

from kodak.buffer import PixelBuffer

logger = logging.getLogger(__name__)


def convert_pil_to_buffer(image: Image.Image) -> PixelBuffer:
    """
    Convert a PIL Image of any mode to an RGBA buffer.

    High bit depth grayscale is scaled into 8 bits rather than clipped:
    ``I`` and ``I;16*`` values span [0, 65535] and ``F`` values span [0, 1].
    """
    if not isinstance(image, Image.Image):
        raise TypeError(f"Expected PIL Image, got {type(image).__name__}")
    if image.width == 0 or image.height == 0:
        return PixelBuffer(np.zeros((image.height, image.width, 4), dtype=np.uint8))
    if image.mode == "I" or image.mode.startswith("I;16"):
        image = _to_grayscale(image, 65535.0)
    elif image.mode == "F":
        image = _to_grayscale(image, 1.0)
    if image.mode != "RGBA":
        logger.debug("Converting %s image to RGBA" % image.mode)
        image = image.convert("RGBA")
    return PixelBuffer(np.array(image, dtype=np.uint8))


def _to_grayscale(image: Image.Image, maximum: float) -> Image.Image:
    logger.debug("Scaling %s image from [0, %g] to 8 bits" % (image.mode, maximum))
    values = np.clip(np.asarray(image, dtype=np.float64), 0.0, maximum)
    return Image.fromarray(np.round(values * (255.0 / maximum)).astype(np.uint8))


def convert_buffer_to_pil(buffer: PixelBuffer) -> Image.Image:
    """Convert a buffer to an RGBA PIL Image."""
    if buffer.width == 0 or buffer.height == 0:
        return Image.new("RGBA", (buffer.width, buffer.height))
    return Image.fromarray(np.ascontiguousarray(buffer.data))
