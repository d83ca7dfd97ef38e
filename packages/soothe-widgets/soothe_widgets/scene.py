"""Scene items handed to the rendering substrate.

Coordinates are widget-local: origin at the top-left of the widget's
intrinsic size, y down. Colors are RGB tuples; gradient stops may carry a
fourth alpha channel.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from soothe_shapes import Path, Point

RGB = tuple[int, int, int]
RGBA = tuple[int, int, int, int]
Stop = Union[RGB, RGBA]


@dataclass(frozen=True, slots=True)
class LinearGradient:
    colors: tuple[Stop, ...]
    start: Point
    end: Point


@dataclass(frozen=True, slots=True)
class RadialGradient:
    colors: tuple[Stop, ...]
    center: Point
    radius: float


Paint = Union[RGB, LinearGradient, RadialGradient]


@dataclass(frozen=True, slots=True)
class Fill:
    path: Path
    paint: Paint
    alpha: float = 1.0
    clip: Path | None = None


@dataclass(frozen=True, slots=True)
class Stroke:
    path: Path
    paint: Paint
    width: float = 1.0
    alpha: float = 1.0
    cap: str = "butt"
    clip: Path | None = None


@dataclass(frozen=True, slots=True)
class Label:
    text: str
    center: Point
    size: float
    color: RGB
    alpha: float = 1.0
    bold: bool = False
    italic: bool = False


SceneItem = Union[Fill, Stroke, Label]


def with_alpha(color: Stop, alpha: float) -> RGBA:
    """RGBA stop from a color and an opacity in [0, 1]."""
    a = max(0.0, min(alpha, 1.0))
    base = color[3] if len(color) == 4 else 255
    return (color[0], color[1], color[2], round(base * a))


def mix(a: RGB, b: RGB, t: float) -> RGB:
    t = max(0.0, min(t, 1.0))
    return (
        round(a[0] + (b[0] - a[0]) * t),
        round(a[1] + (b[1] - a[1]) * t),
        round(a[2] + (b[2] - a[2]) * t),
    )
