"""Shared helpers for channel matrices: validation and 8-bit clamping."""

from __future__ import annotations

import logging
from numbers import Real
from typing import Any

import numpy as np

from pixmatrix.errors import DimensionMismatchError, NullInputError

logger = logging.getLogger(__name__)


def require_matrix(matrix: Any, *, name: str = "matrix") -> np.ndarray:
    """Return ``matrix`` as a 2D ndarray, rejecting ``None`` and non-2D input."""

    if matrix is None:
        raise NullInputError(f"{name} cannot be None")
    arr = np.asarray(matrix)
    if arr.ndim != 2:
        raise DimensionMismatchError(f"{name} must be 2D (width, height), got shape {arr.shape}")
    return arr


def check_same_shape(matrices: dict[str, np.ndarray]) -> tuple[int, int]:
    """Return the shared ``(width, height)`` of ``matrices``.

    The first entry defines the expected shape; every other entry must match it.
    """

    items = list(matrices.items())
    first_name, first = items[0]
    width, height = int(first.shape[0]), int(first.shape[1])
    for name, arr in items[1:]:
        if arr.shape != first.shape:
            raise DimensionMismatchError(
                f"{name} has shape {tuple(arr.shape)} but {first_name} has shape "
                f"{(width, height)}; all channel matrices must share one shape"
            )
    return width, height


def _clip_real(value: Any) -> float:
    if value != value:  # NaN
        return 0.0
    return float(min(max(value, 0), 255))


def clamp_to_u8(matrix: np.ndarray, *, name: str = "matrix") -> np.ndarray:
    """Clamp values to [0, 255] and convert to ``uint8``.

    Float values are truncated toward zero after clamping. NaN maps to 0.
    Integers of any width, including Python ints beyond 64 bits, are clamped
    before any narrowing cast.
    """

    arr = np.asarray(matrix)
    if arr.dtype == np.uint8:
        return arr

    if arr.dtype == bool:
        return arr.astype(np.uint8)

    if arr.dtype == object:
        if not all(isinstance(v, Real) for v in arr.flat):
            raise TypeError(f"{name} must hold numbers, got dtype {arr.dtype}")
        logger.debug("%s: clamping object array of Python numbers", name)
        clipped = np.frompyfunc(_clip_real, 1, 1)(arr).astype(np.float64)
        return np.trunc(clipped).astype(np.uint8)

    if np.issubdtype(arr.dtype, np.floating):
        arr = np.nan_to_num(arr, nan=0.0, posinf=255.0, neginf=0.0)
    elif np.issubdtype(arr.dtype, np.signedinteger):
        arr = arr.astype(np.int64)
    elif np.issubdtype(arr.dtype, np.unsignedinteger):
        arr = arr.astype(np.uint64)
    else:
        raise TypeError(f"{name} must hold numbers, got dtype {arr.dtype}")

    out_of_range = int(np.count_nonzero((arr < 0) | (arr > 255)))
    if out_of_range:
        logger.debug("%s: clamped %d value(s) into [0, 255]", name, out_of_range)

    clipped = np.clip(arr, 0, 255)
    if np.issubdtype(clipped.dtype, np.floating):
        clipped = np.trunc(clipped)
    return clipped.astype(np.uint8)
