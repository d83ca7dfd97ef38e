"""Configuration validation helpers and the named palette."""
from __future__ import annotations

import math
import string
from typing import Iterable, Sequence

from soothe import ConfigError

from soothe_widgets.scene import RGB, RGBA, Stop

# Named system colors used for component defaults.
PALETTE: dict[str, RGB] = {
    "black": (0, 0, 0),
    "white": (255, 255, 255),
    "gray": (142, 142, 147),
    "blue": (0, 122, 255),
    "purple": (175, 82, 222),
    "pink": (255, 45, 85),
    "green": (52, 199, 89),
    "orange": (255, 149, 0),
}


def positive(field: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(field, f"must be a number, got {value!r}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(field, f"must be positive, got {value!r}")
    return value


def non_negative(field: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(field, f"must be a number, got {value!r}")
    if not math.isfinite(value) or value < 0:
        raise ConfigError(field, f"must be >= 0, got {value!r}")
    return value


def color(field: str, value: Stop) -> Stop:
    """Validate an RGB or RGBA tuple with components in 0..255."""
    if not isinstance(value, tuple) or len(value) not in (3, 4):
        raise ConfigError(field, f"expected an RGB or RGBA tuple, got {value!r}")
    for channel in value:
        if isinstance(channel, bool) or not isinstance(channel, int):
            raise ConfigError(field, f"channels must be integers, got {value!r}")
        if not 0 <= channel <= 255:
            raise ConfigError(field, f"channels must be in 0..255, got {value!r}")
    return value


def colors(field: str, values: Sequence[Stop], minimum: int = 1) -> tuple[Stop, ...]:
    values = tuple(values)
    if len(values) < minimum:
        raise ConfigError(
            field, f"needs at least {minimum} color(s), got {len(values)}"
        )
    for i, value in enumerate(values):
        color(f"{field}[{i}]", value)
    return values


def count(field: str, value: int, minimum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(field, f"must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(field, f"must be >= {minimum}, got {value}")
    return value


def unit(field: str, value: float) -> float:
    non_negative(field, value)
    if value > 1:
        raise ConfigError(field, f"must be in [0, 1], got {value!r}")
    return value


def hex_color(text: str) -> RGB | RGBA:
    """Parse ``"f35872"``-style hex colors.

    Three digits expand each nibble, six digits are RGB, eight digits are
    ARGB and come back as an RGBA tuple. A leading ``#`` is ignored.
    """
    digits = text.strip().lstrip("#")
    if len(digits) not in (3, 6, 8) or any(c not in string.hexdigits for c in digits):
        raise ConfigError("hex", f"not a 3, 6 or 8 digit hex color: {text!r}")
    value = int(digits, 16)
    if len(digits) == 3:
        return ((value >> 8) * 17, (value >> 4 & 0xF) * 17, (value & 0xF) * 17)
    if len(digits) == 6:
        return (value >> 16, value >> 8 & 0xFF, value & 0xFF)
    return (value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF, value >> 24)


def named(names: Iterable[str]) -> tuple[RGB, ...]:
    """Look up palette colors by name; unknown names raise ``KeyError``."""
    return tuple(PALETTE[name] for name in names)
