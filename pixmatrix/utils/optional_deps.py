"""Optional dependency helpers.

OpenCV and PyYAML are only needed for file I/O and YAML configs, so they
are imported on demand instead of at package import time.
"""

from __future__ import annotations

from importlib import import_module
from types import ModuleType
from typing import Optional, Tuple


_PIP_NAME_OVERRIDES = {
    # Module name -> distribution name on the package index.
    "cv2": "opencv-python",
    "PIL": "Pillow",
    "yaml": "PyYAML",
}


def optional_import(module_name: str) -> Tuple[Optional[ModuleType], Optional[BaseException]]:
    """Attempt to import a module, returning (module, error)."""

    try:
        return import_module(module_name), None
    except Exception as exc:  # noqa: BLE001 - return import error without swallowing BaseException
        return None, exc


def pip_name(module_name: str) -> str:
    root = str(module_name).split(".", 1)[0]
    return _PIP_NAME_OVERRIDES.get(root, root)


def require(module_name: str, *, purpose: Optional[str] = None) -> ModuleType:
    """Import ``module_name``, raising an ImportError with an install hint if missing."""

    module, error = optional_import(module_name)
    if module is not None:
        return module

    context = f" for {purpose}" if purpose else ""
    raise ImportError(
        f"Dependency '{module_name}' is required{context}.\n"
        f"Install it via:\n  pip install '{pip_name(module_name)}'\n"
        f"Original error: {error}"
    ) from error
