"""Scoped access to the packed BGRA pixel buffer behind a Pillow image.

A view exposes the pixels of a ``W x H`` image as one flat ``uint8`` array
of ``W * H * 4`` bytes, four bytes per pixel in Blue, Green, Red, Alpha
order, rows back to back with no padding. Views are context managers and
are always released when the ``with`` block exits::

    with lock_for_read(image) as view:
        blue = view.data[0::4]

    with lock_for_write(width, height) as view:
        view.data[:] = packed_bytes
    result = view.image  # committed on normal exit only
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np
from PIL import Image

from pixmatrix.channels import BYTES_PER_PIXEL
from pixmatrix.errors import NullInputError
from pixmatrix.utils.param_check import check_parameter

logger = logging.getLogger(__name__)

# Index permutation between RGBA (Pillow) and BGRA (packed) channel order.
# Swapping R and B is its own inverse.
_SWAP_RB = [2, 1, 0, 3]


@dataclass
class PackedBuffer:
    """A locked view over an image's packed pixel bytes."""

    data: np.ndarray
    width: int
    height: int
    image: Optional[Image.Image] = None

    def as_pixels(self) -> np.ndarray:
        """Return ``data`` reshaped to ``(width, height, 4)`` in traversal order.

        Pixel index ``i`` of the flat buffer becomes cell ``[x, y]`` with
        ``i = x * height + y``. The result shares memory with ``data``.
        """

        return self.data.reshape(self.width, self.height, BYTES_PER_PIXEL)


def new_image(width: int, height: int) -> Image.Image:
    """Allocate a fully transparent black ``RGBA`` image."""

    w = check_parameter(width, 0, param_name="width")
    h = check_parameter(height, 0, param_name="height")
    return Image.new("RGBA", (w, h), (0, 0, 0, 0))


def pack_image(image: Image.Image) -> np.ndarray:
    """Copy the pixels of ``image`` into a new flat BGRA byte array."""

    rgba = image if image.mode == "RGBA" else image.convert("RGBA")
    hwc = np.asarray(rgba, dtype=np.uint8)
    return np.ascontiguousarray(hwc[..., _SWAP_RB]).reshape(-1)


def unpack_image(data: np.ndarray, width: int, height: int) -> Image.Image:
    """Build a new ``RGBA`` image from a flat BGRA byte array."""

    expected = width * height * BYTES_PER_PIXEL
    if data.size != expected:
        raise ValueError(
            f"Packed buffer holds {data.size} bytes, expected {expected} for {width}x{height}"
        )
    if expected == 0:
        return new_image(width, height)
    hwc = data.reshape(height, width, BYTES_PER_PIXEL)[..., _SWAP_RB]
    return Image.fromarray(np.ascontiguousarray(hwc))


@contextmanager
def lock_for_read(image: Image.Image) -> Iterator[PackedBuffer]:
    """Acquire a read-only packed view of ``image``.

    The view holds a private copy of the bytes, so the image may be used
    freely once the block exits. ``image`` itself is never modified.
    """

    if image is None:
        raise NullInputError("Image cannot be None")

    width, height = image.size
    data = pack_image(image)
    data.flags.writeable = False
    view = PackedBuffer(data=data, width=int(width), height=int(height))
    logger.debug("Locked %dx%d image for reading (mode=%s)", width, height, image.mode)
    try:
        yield view
    finally:
        logger.debug("Released read view of %dx%d image", width, height)


@contextmanager
def lock_for_write(width: int, height: int) -> Iterator[PackedBuffer]:
    """Acquire a zeroed write view for a new ``width x height`` image.

    On normal exit the buffer is committed to a new image stored in
    ``view.image``. If the block raises, the buffer is discarded and
    ``view.image`` stays ``None``.
    """

    w = check_parameter(width, 0, param_name="width")
    h = check_parameter(height, 0, param_name="height")
    data = np.zeros(w * h * BYTES_PER_PIXEL, dtype=np.uint8)
    view = PackedBuffer(data=data, width=w, height=h)
    logger.debug("Locked new %dx%d image for writing", w, h)
    committed = False
    try:
        yield view
        view.image = unpack_image(view.data, w, h)
        committed = True
    finally:
        view.data.flags.writeable = False
        if committed:
            logger.debug("Committed %dx%d write view", w, h)
        else:
            logger.debug("Discarded %dx%d write view", w, h)
