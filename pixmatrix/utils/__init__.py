"""Utility helpers for pixmatrix."""

from __future__ import annotations

from .clamp import check_same_shape, clamp_to_u8, require_matrix
from .optional_deps import optional_import, require
from .param_check import check_choice, check_parameter

__all__ = [
    "check_choice",
    "check_parameter",
    "check_same_shape",
    "clamp_to_u8",
    "optional_import",
    "require",
    "require_matrix",
]
