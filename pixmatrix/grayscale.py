"""Grayscale conversion through a 5x5 affine color matrix.

Each pixel is treated as the row vector ``(R, G, B, A, 1)`` with the color
components scaled to [0, 1]; multiplying by a color matrix yields the new
``(R', G', B', A', 1)``. :data:`GRAYSCALE_MATRIX` maps every pixel to
``(Y, Y, Y, A, 1)`` with ``Y = 0.299 R + 0.587 G + 0.114 B``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import numpy as np
from PIL import Image

from pixmatrix.buffer import lock_for_read, lock_for_write
from pixmatrix.config import ConversionConfig, resolve_config

logger = logging.getLogger(__name__)

LUMA_WEIGHTS = (0.299, 0.587, 0.114)

GRAYSCALE_MATRIX = np.array(
    [
        [0.299, 0.299, 0.299, 0.0, 0.0],
        [0.587, 0.587, 0.587, 0.0, 0.0],
        [0.114, 0.114, 0.114, 0.0, 0.0],
        [0.0, 0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 0.0, 1.0],
    ],
    dtype=np.float64,
)
GRAYSCALE_MATRIX.flags.writeable = False

# Keeps exact integer results (e.g. gray pixels) from truncating one step low.
_TRUNCATE_EPS = 1e-6


def _check_color_matrix(matrix: Any) -> np.ndarray:
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (5, 5):
        raise ValueError(f"Color matrix must have shape (5, 5), got {m.shape}")
    return m


def _to_u8(values: np.ndarray, rounding: str) -> np.ndarray:
    if rounding == "truncate":
        reduced = np.floor(values + _TRUNCATE_EPS)
    else:
        reduced = np.rint(values)
    return np.clip(reduced, 0.0, 255.0).astype(np.uint8)


def apply_color_matrix(
    image: Optional[Image.Image],
    matrix: Any,
    *,
    config: ConversionConfig | None = None,
) -> Optional[Image.Image]:
    """Apply a 5x5 affine color matrix to every pixel of ``image``.

    Returns a new ``RGBA`` image of the same size, or ``None`` when ``image``
    is ``None``. The source image is not modified.
    """

    if image is None:
        return None

    m = _check_color_matrix(matrix)
    cfg = resolve_config(config)

    with lock_for_read(image) as src:
        bgra = src.data.reshape(-1, 4).astype(np.float64) / 255.0
        width, height = src.width, src.height

    # Packed bytes are BGRA; the matrix works on RGBA rows.
    vectors = np.empty((bgra.shape[0], 5), dtype=np.float64)
    vectors[:, 0] = bgra[:, 2]
    vectors[:, 1] = bgra[:, 1]
    vectors[:, 2] = bgra[:, 0]
    vectors[:, 3] = bgra[:, 3]
    vectors[:, 4] = 1.0

    rgba = _to_u8((vectors @ m)[:, :4] * 255.0, cfg.rounding)

    with lock_for_write(width, height) as dst:
        out = dst.data.reshape(-1, 4)
        out[:, 0] = rgba[:, 2]
        out[:, 1] = rgba[:, 1]
        out[:, 2] = rgba[:, 0]
        out[:, 3] = rgba[:, 3]

    logger.debug("Applied color matrix to %dx%d image (rounding=%s)", width, height, cfg.rounding)
    return dst.image


def to_grayscale(
    image: Optional[Image.Image],
    *,
    config: ConversionConfig | None = None,
) -> Optional[Image.Image]:
    """Return a grayscale copy of ``image``, or ``None`` if ``image`` is ``None``.

    Red, green and blue become ``0.299 R + 0.587 G + 0.114 B``; alpha is kept.
    """

    return apply_color_matrix(image, GRAYSCALE_MATRIX, config=config)
