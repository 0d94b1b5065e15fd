"""Small parameter validation helpers used by the configuration layer."""

from __future__ import annotations

from numbers import Integral


def check_parameter(
    param: int,
    low: int | None = None,
    high: int | None = None,
    *,
    param_name: str = "parameter",
) -> int:
    """Validate that ``param`` is an integer inside the inclusive range ``[low, high]``.

    Returns the value as a plain ``int`` so callers can store it directly.
    """

    if not isinstance(param, Integral) or isinstance(param, bool):
        raise TypeError(f"{param_name} must be an integer, got {type(param).__name__}")

    if low is not None and high is not None and low > high:
        raise ValueError(f"Invalid bounds for {param_name}: low={low} > high={high}")

    if low is not None and param < low:
        raise ValueError(f"{param_name} must be >= {low}, got {param}")
    if high is not None and param > high:
        raise ValueError(f"{param_name} must be <= {high}, got {param}")

    return int(param)


def check_choice(value: str, choices: tuple[str, ...], *, param_name: str = "parameter") -> str:
    text = str(value).strip().lower()
    if text not in choices:
        raise ValueError(
            f"Unknown {param_name}: {value!r}. Choose from: {', '.join(choices)}."
        )
    return text
