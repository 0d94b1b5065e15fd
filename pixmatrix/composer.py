"""Assemble channel matrices back into a packed image.

Output width and height always come from the first matrix argument
(``matrix.shape[0]`` and ``matrix.shape[1]``); every other matrix must have
the same shape or :class:`~pixmatrix.errors.DimensionMismatchError` is
raised. Values are clamped into [0, 255] before being written.
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from PIL import Image

from pixmatrix.buffer import lock_for_write
from pixmatrix.channels import CHANNEL_OFFSETS, Channel
from pixmatrix.config import ConversionConfig, resolve_config
from pixmatrix.utils.clamp import check_same_shape, clamp_to_u8, require_matrix

logger = logging.getLogger(__name__)


def _write_channels(
    sources: dict[Channel, tuple[str, Any]],
    *,
    default_alpha: int | None = None,
) -> Image.Image:
    """Validate ``sources`` and write them into a new image in one pass.

    ``sources`` maps each output channel to ``(argument_name, matrix)``;
    insertion order decides which matrix defines the output shape.
    """

    arrays: dict[str, np.ndarray] = {}
    for name, matrix in sources.values():
        if name not in arrays:
            arrays[name] = require_matrix(matrix, name=name)

    width, height = check_same_shape(arrays)
    clamped = {name: clamp_to_u8(arr, name=name) for name, arr in arrays.items()}

    with lock_for_write(width, height) as view:
        pixels = view.as_pixels()
        for ch, (name, _) in sources.items():
            pixels[:, :, CHANNEL_OFFSETS[ch]] = clamped[name]
        if default_alpha is not None:
            pixels[:, :, CHANNEL_OFFSETS[Channel.ALPHA]] = default_alpha

    logger.debug("Composed %dx%d image from %s", width, height, ", ".join(arrays))
    return view.image


def compose_gray(intensity: Any, *, config: ConversionConfig | None = None) -> Image.Image:
    """Build an opaque gray image: ``intensity`` is used for red, green and blue."""

    cfg = resolve_config(config)
    return _write_channels(
        {
            Channel.RED: ("intensity", intensity),
            Channel.GREEN: ("intensity", intensity),
            Channel.BLUE: ("intensity", intensity),
        },
        default_alpha=cfg.default_alpha,
    )


def compose_rgb(r: Any, g: Any, b: Any, *, config: ConversionConfig | None = None) -> Image.Image:
    """Build an opaque image from red, green and blue matrices."""

    cfg = resolve_config(config)
    return _write_channels(
        {
            Channel.RED: ("red", r),
            Channel.GREEN: ("green", g),
            Channel.BLUE: ("blue", b),
        },
        default_alpha=cfg.default_alpha,
    )


def compose_argb(
    a: Any, r: Any, g: Any, b: Any, *, config: ConversionConfig | None = None
) -> Image.Image:
    """Build an image from alpha, red, green and blue matrices.

    Note that ``a`` comes first, so the alpha matrix defines the output shape.
    ``config.default_alpha`` is ignored since alpha is given explicitly.
    """

    return _write_channels(
        {
            Channel.ALPHA: ("alpha", a),
            Channel.RED: ("red", r),
            Channel.GREEN: ("green", g),
            Channel.BLUE: ("blue", b),
        }
    )


def compose(*matrices: Any, config: ConversionConfig | None = None) -> Image.Image:
    """Dispatch on the number of matrices: 1 (gray), 3 (RGB) or 4 (ARGB)."""

    if len(matrices) == 1:
        return compose_gray(matrices[0], config=config)
    if len(matrices) == 3:
        return compose_rgb(*matrices, config=config)
    if len(matrices) == 4:
        return compose_argb(*matrices, config=config)
    raise TypeError(f"compose() takes 1, 3 or 4 channel matrices, got {len(matrices)}")
