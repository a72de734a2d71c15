"""
High-level API.

- :py:mod:`kodak.api.image`: the chainable :py:class:`~kodak.api.image.Image`
- :py:mod:`kodak.api.pil_io`: conversion to and from Pillow
"""

from kodak.api.image import Image

__all__ = ["Image"]
