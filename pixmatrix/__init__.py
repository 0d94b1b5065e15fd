"""pixmatrix - packed BGRA images as 2D integer channel matrices.

Keep top-level imports lightweight: OpenCV is only needed for file I/O, so
exports are loaded on first access.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__version__ = "0.1.0"

__all__ = [
    # Modules
    "config",
    "inputs",
    "io",
    "utils",
    # Channels
    "Channel",
    "CHANNEL_OFFSETS",
    "parse_channel",
    # Errors
    "PixmatrixError",
    "NullInputError",
    "DimensionMismatchError",
    # Operations
    "extract_channel",
    "extract_channels",
    "compose",
    "compose_gray",
    "compose_rgb",
    "compose_argb",
    "to_grayscale",
    "apply_color_matrix",
    "GRAYSCALE_MATRIX",
    # Buffer views
    "lock_for_read",
    "lock_for_write",
    "new_image",
    # Wrapper
    "BitmapAdapter",
    "ConversionConfig",
]


_LAZY_SUBMODULES = {
    "config",
    "inputs",
    "io",
    "utils",
}

_LAZY_EXPORTS = {
    "Channel": ("channels", "Channel"),
    "CHANNEL_OFFSETS": ("channels", "CHANNEL_OFFSETS"),
    "parse_channel": ("channels", "parse_channel"),
    "PixmatrixError": ("errors", "PixmatrixError"),
    "NullInputError": ("errors", "NullInputError"),
    "DimensionMismatchError": ("errors", "DimensionMismatchError"),
    "extract_channel": ("extract", "extract_channel"),
    "extract_channels": ("extract", "extract_channels"),
    "compose": ("composer", "compose"),
    "compose_gray": ("composer", "compose_gray"),
    "compose_rgb": ("composer", "compose_rgb"),
    "compose_argb": ("composer", "compose_argb"),
    "to_grayscale": ("grayscale", "to_grayscale"),
    "apply_color_matrix": ("grayscale", "apply_color_matrix"),
    "GRAYSCALE_MATRIX": ("grayscale", "GRAYSCALE_MATRIX"),
    "lock_for_read": ("buffer", "lock_for_read"),
    "lock_for_write": ("buffer", "lock_for_write"),
    "new_image": ("buffer", "new_image"),
    "BitmapAdapter": ("adapter", "BitmapAdapter"),
    "ConversionConfig": ("config", "ConversionConfig"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover - thin delegation
    if name in _LAZY_SUBMODULES:
        module = import_module(f"{__name__}.{name}")
        globals()[name] = module
        return module

    target = _LAZY_EXPORTS.get(name)
    if target is not None:
        module_name, attr = target
        module = import_module(f"{__name__}.{module_name}")
        value = getattr(module, attr)
        globals()[name] = value
        return value

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
