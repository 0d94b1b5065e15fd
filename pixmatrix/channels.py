from __future__ import annotations

from enum import Enum
from typing import Mapping


class Channel(str, Enum):
    """Selects one 8-bit component of a packed pixel."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    ALPHA = "alpha"


# Byte offset of each channel inside a packed BGRA pixel.
CHANNEL_OFFSETS: Mapping[Channel, int] = {
    Channel.BLUE: 0,
    Channel.GREEN: 1,
    Channel.RED: 2,
    Channel.ALPHA: 3,
}

BYTES_PER_PIXEL = 4

_SHORT_NAMES = {
    "r": Channel.RED,
    "g": Channel.GREEN,
    "b": Channel.BLUE,
    "a": Channel.ALPHA,
}


def parse_channel(raw: str | Channel) -> Channel:
    """Resolve a channel from an enum member, its value, its name or ``r/g/b/a``."""

    if isinstance(raw, Channel):
        return raw
    key = str(raw).strip().lower()
    if key in _SHORT_NAMES:
        return _SHORT_NAMES[key]
    try:
        return Channel(key)
    except Exception as exc:  # noqa: BLE001 - value validation helper
        choices = ", ".join(c.value for c in Channel)
        raise ValueError(f"Unknown channel: {raw!r}. Choose from: {choices}.") from exc


def channel_offset(channel: str | Channel) -> int:
    return CHANNEL_OFFSETS[parse_channel(channel)]
