from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np
from PIL import Image

from pixmatrix.errors import NullInputError


class ImageFormat(str, Enum):
    """Supported explicit layouts for in-memory numpy images."""

    BGRA_U8_HWC = "bgra_u8_hwc"
    RGBA_U8_HWC = "rgba_u8_hwc"
    BGR_U8_HWC = "bgr_u8_hwc"
    RGB_U8_HWC = "rgb_u8_hwc"
    GRAY_U8_HW = "gray_u8_hw"


_CHANNELS = {
    ImageFormat.BGRA_U8_HWC: 4,
    ImageFormat.RGBA_U8_HWC: 4,
    ImageFormat.BGR_U8_HWC: 3,
    ImageFormat.RGB_U8_HWC: 3,
}


def parse_image_format(raw: str | ImageFormat) -> ImageFormat:
    if isinstance(raw, ImageFormat):
        return raw
    try:
        return ImageFormat(str(raw).strip().lower())
    except Exception as exc:  # noqa: BLE001 - value validation helper
        raise ValueError(f"Unknown image format: {raw!r}") from exc


def _array_to_rgba(arr: np.ndarray, fmt: ImageFormat) -> np.ndarray:
    if arr.dtype != np.uint8:
        raise ValueError(f"Expected dtype=uint8 for {fmt.value}, got {arr.dtype}")

    if fmt is ImageFormat.GRAY_U8_HW:
        if arr.ndim != 2:
            raise ValueError(f"Expected shape (H,W) for {fmt.value}, got {arr.shape}")
        alpha = np.full(arr.shape, 255, dtype=np.uint8)
        return np.stack([arr, arr, arr, alpha], axis=-1)

    channels = _CHANNELS[fmt]
    if arr.ndim != 3 or arr.shape[2] != channels:
        raise ValueError(f"Expected shape (H,W,{channels}) for {fmt.value}, got {arr.shape}")

    if fmt in (ImageFormat.BGR_U8_HWC, ImageFormat.BGRA_U8_HWC):
        arr = arr[..., [2, 1, 0] + ([3] if channels == 4 else [])]
    if channels == 3:
        alpha = np.full(arr.shape[:2] + (1,), 255, dtype=np.uint8)
        arr = np.concatenate([arr, alpha], axis=-1)
    return np.ascontiguousarray(arr)


def as_image(image: Any, *, input_format: str | ImageFormat | None = None) -> Image.Image:
    """Normalize ``image`` into a new ``RGBA`` Pillow image.

    Pillow images are copied (and converted when not already ``RGBA``).
    numpy arrays need an explicit ``input_format``: the layout is never
    guessed from the shape.
    """

    if image is None:
        raise NullInputError("Image cannot be None")

    if isinstance(image, Image.Image):
        if image.mode == "RGBA":
            return image.copy()
        return image.convert("RGBA")

    if isinstance(image, np.ndarray):
        if input_format is None:
            raise ValueError(
                "input_format is required for numpy images, e.g. 'bgra_u8_hwc' or 'rgb_u8_hwc'"
            )
        fmt = parse_image_format(input_format)
        return Image.fromarray(_array_to_rgba(image, fmt))

    raise TypeError(f"Expected PIL.Image.Image or np.ndarray, got {type(image)}")
