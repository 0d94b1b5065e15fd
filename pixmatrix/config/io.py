from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Mapping

from pixmatrix.utils.param_check import check_choice, check_parameter

ROUNDING_MODES = ("nearest", "truncate")
MATRIX_DTYPES = ("int32", "int64", "uint8")


@dataclass(frozen=True)
class ConversionConfig:
    """Tunable knobs shared by the conversion operations.

    rounding:
        How grayscale luminance values are reduced to 8 bits:
        ``"nearest"`` (round half to even) or ``"truncate"``.
    default_alpha:
        Alpha written by the one- and three-matrix composers.
    matrix_dtype:
        dtype of matrices returned by channel extraction.
    """

    rounding: str = "nearest"
    default_alpha: int = 255
    matrix_dtype: str = "int32"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "rounding", check_choice(self.rounding, ROUNDING_MODES, param_name="rounding")
        )
        object.__setattr__(
            self,
            "default_alpha",
            check_parameter(self.default_alpha, 0, 255, param_name="default_alpha"),
        )
        object.__setattr__(
            self,
            "matrix_dtype",
            check_choice(self.matrix_dtype, MATRIX_DTYPES, param_name="matrix_dtype"),
        )


DEFAULT_CONFIG = ConversionConfig()


def resolve_config(config: ConversionConfig | None) -> ConversionConfig:
    return DEFAULT_CONFIG if config is None else config


def config_from_dict(data: Mapping[str, Any] | None) -> ConversionConfig:
    """Build a :class:`ConversionConfig`, rejecting unknown keys."""

    if not data:
        return DEFAULT_CONFIG

    known = {f.name for f in fields(ConversionConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(
            f"Unknown config key(s): {unknown}. Allowed keys: {', '.join(sorted(known))}"
        )
    return ConversionConfig(**dict(data))


def load_config(path: str | Path) -> dict[str, Any]:
    """Load a config file into a Python dict.

    Supported formats:
    - JSON (.json) always
    - YAML (.yml/.yaml) only when PyYAML is installed
    """

    config_path = Path(path)
    suffix = str(config_path.suffix).lower()

    if suffix == ".json":
        with config_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    elif suffix in (".yml", ".yaml"):
        from pixmatrix.utils.optional_deps import require

        yaml = require("yaml", purpose="YAML config files")
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(
            f"Unsupported config extension: {suffix!r} for {str(config_path)!r}. "
            "Supported: .json, .yml, .yaml."
        )

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ValueError(
            "Config must be an object/dict at the top level, "
            f"got {type(data).__name__} from {str(config_path)!r}."
        )

    return dict(data)


def load_conversion_config(path: str | Path | None) -> ConversionConfig:
    if path is None:
        return DEFAULT_CONFIG
    return config_from_dict(load_config(path))
