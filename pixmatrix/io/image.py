from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from pixmatrix.buffer import pack_image
from pixmatrix.errors import NullInputError
from pixmatrix.inputs import ImageFormat, as_image
from pixmatrix.utils.optional_deps import require

logger = logging.getLogger(__name__)

MATRIX_SUFFIXES = (".npy", ".csv")


def read_image(path: str | Path) -> Image.Image:
    """Read an image file from disk via OpenCV as an ``RGBA`` Pillow image.

    Files are read with ``cv2.IMREAD_UNCHANGED`` so an alpha channel, when
    present, is kept. Grayscale files become opaque gray ``RGBA`` images.
    """

    cv2 = require("cv2", purpose="reading image files")

    path_str = str(path)
    img = cv2.imread(path_str, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise FileNotFoundError(f"Unable to read image: {path_str}")

    if img.dtype != np.uint8:
        raise ValueError(f"Only 8-bit images are supported, got dtype {img.dtype} from {path_str}")

    if img.ndim == 2:
        fmt = ImageFormat.GRAY_U8_HW
    elif img.shape[2] == 4:
        fmt = ImageFormat.BGRA_U8_HWC
    elif img.shape[2] == 3:
        fmt = ImageFormat.BGR_U8_HWC
    else:
        raise ValueError(f"Unsupported channel count {img.shape[2]} in {path_str}")

    logger.debug("Read %s as %s with shape %s", path_str, fmt.value, img.shape)
    return as_image(img, input_format=fmt)


def write_image(path: str | Path, image: Image.Image) -> Path:
    """Write ``image`` to ``path`` via OpenCV, keeping the alpha channel.

    The encoder is chosen from the file extension. Formats without alpha
    support (e.g. JPEG) are written from the color channels only.
    """

    if image is None:
        raise NullInputError("Image cannot be None")

    cv2 = require("cv2", purpose="writing image files")

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    width, height = image.size
    bgra = pack_image(image).reshape(height, width, 4)
    if out.suffix.lower() in (".jpg", ".jpeg"):
        bgra = np.ascontiguousarray(bgra[..., :3])

    if not cv2.imwrite(str(out), bgra):
        raise OSError(f"Unable to write image: {out}")
    logger.debug("Wrote %dx%d image to %s", width, height, out)
    return out


def _check_matrix_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in MATRIX_SUFFIXES:
        raise ValueError(
            f"Unsupported matrix extension: {suffix!r} for {str(path)!r}. "
            f"Supported: {', '.join(MATRIX_SUFFIXES)}."
        )
    return suffix


def load_matrix(path: str | Path) -> np.ndarray:
    """Load a 2D channel matrix from ``.npy`` or ``.csv`` (one row per x)."""

    p = Path(path)
    suffix = _check_matrix_suffix(p)
    if suffix == ".npy":
        arr = np.load(p, allow_pickle=False)
    else:
        arr = np.loadtxt(p, delimiter=",", dtype=np.int64, ndmin=2)

    if arr.ndim != 2:
        raise ValueError(f"Expected a 2D matrix in {str(p)!r}, got shape {arr.shape}")
    return arr


def save_matrix(path: str | Path, matrix: Any) -> Path:
    """Save a 2D channel matrix to ``.npy`` or ``.csv``."""

    if matrix is None:
        raise NullInputError("matrix cannot be None")

    p = Path(path)
    suffix = _check_matrix_suffix(p)
    arr = np.asarray(matrix)
    p.parent.mkdir(parents=True, exist_ok=True)
    if suffix == ".npy":
        np.save(p, arr, allow_pickle=False)
    else:
        np.savetxt(p, arr, delimiter=",", fmt="%d")
    return p
