from __future__ import annotations

from .image import load_matrix, read_image, save_matrix, write_image

__all__ = [
    "load_matrix",
    "read_image",
    "save_matrix",
    "write_image",
]
