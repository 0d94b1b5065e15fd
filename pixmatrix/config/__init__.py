from __future__ import annotations

from .io import (
    DEFAULT_CONFIG,
    ConversionConfig,
    config_from_dict,
    load_config,
    load_conversion_config,
    resolve_config,
)

__all__ = [
    "DEFAULT_CONFIG",
    "ConversionConfig",
    "config_from_dict",
    "load_config",
    "load_conversion_config",
    "resolve_config",
]
