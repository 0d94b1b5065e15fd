from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from pixmatrix.buffer import lock_for_read
from pixmatrix.channels import CHANNEL_OFFSETS, Channel, parse_channel
from pixmatrix.config import ConversionConfig, resolve_config
from pixmatrix.errors import NullInputError

logger = logging.getLogger(__name__)


def extract_channel(
    image: Image.Image,
    channel: str | Channel,
    *,
    config: ConversionConfig | None = None,
) -> np.ndarray:
    """Read one channel of ``image`` into a 2D intensity matrix.

    Parameters
    ----------
    image:
        Source image. Non-``RGBA`` images are converted on a private copy.
    channel:
        Channel to read; see :func:`pixmatrix.channels.parse_channel`.

    Returns
    -------
    np.ndarray
        New matrix of shape ``(image.width, image.height)`` indexed ``[x, y]``,
        values in [0, 255]. It does not share memory with the image.

    Raises
    ------
    NullInputError
        If ``image`` is ``None``.
    """

    if image is None:
        raise NullInputError("Image cannot be None")

    ch = parse_channel(channel)
    cfg = resolve_config(config)
    with lock_for_read(image) as view:
        pixels = view.as_pixels()
        out = pixels[:, :, CHANNEL_OFFSETS[ch]].astype(cfg.matrix_dtype)

    logger.debug("Extracted %s channel with shape %s", ch.value, out.shape)
    return out


def extract_channels(
    image: Image.Image,
    *,
    config: ConversionConfig | None = None,
) -> dict[Channel, np.ndarray]:
    """Read all four channels of ``image`` from a single buffer view."""

    if image is None:
        raise NullInputError("Image cannot be None")

    cfg = resolve_config(config)
    with lock_for_read(image) as view:
        pixels = view.as_pixels()
        return {
            ch: pixels[:, :, offset].astype(cfg.matrix_dtype)
            for ch, offset in CHANNEL_OFFSETS.items()
        }
