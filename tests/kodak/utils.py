import logging

import numpy as np

from kodak import Colour, Dim, Image

logging.basicConfig(level=logging.DEBUG)


def gradient(width: int, height: int, alpha: int = 255) -> Image:
    """Image whose pixels are all distinct, for checking exact placement."""
    ys, xs = np.mgrid[0:height, 0:width]
    array = np.stack(
        (
            (xs * 7 + 3) % 256,
            (ys * 11 + 5) % 256,
            (xs * ys + 13) % 256,
            np.full_like(xs, alpha),
        ),
        axis=2,
    ).astype(np.uint8)
    return Image.fromarray(array)


def solid(width: int, height: int, colour: Colour) -> Image:
    return Image.blank_with_colour(Dim(width, height), colour)


def pixels(image: Image) -> list[list[tuple[int, ...]]]:
    """Nested ``[y][x]`` list of RGBA tuples, for readable assertion diffs."""
    return [[tuple(p) for p in row] for row in image.numpy().tolist()]
