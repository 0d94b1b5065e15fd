"""Input normalization.

Every image handed to :mod:`pixmatrix` ends up as an ``RGBA`` Pillow image.
numpy arrays must declare their layout explicitly (see :class:`ImageFormat`).
"""

from __future__ import annotations

from .image_format import ImageFormat, as_image, parse_image_format

__all__ = [
    "ImageFormat",
    "as_image",
    "parse_image_format",
]
