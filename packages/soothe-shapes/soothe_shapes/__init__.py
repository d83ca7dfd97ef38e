"""soothe-shapes - Polyline paths and parametric shape generators."""
from __future__ import annotations

from soothe_shapes.curves import arc, circle_points, cubic
from soothe_shapes.generators import (
    capsule,
    checkmark,
    circle,
    dashes,
    ellipse,
    ghost_body,
    heart,
    hourglass,
    infinity,
    rect,
    ring_arc,
    rounded_rect,
    wave,
    wave_fill,
    wave_y,
)
from soothe_shapes.path import Path, Point

__all__ = [
    "Path",
    "Point",
    "arc",
    "circle_points",
    "cubic",
    "capsule",
    "checkmark",
    "circle",
    "dashes",
    "ellipse",
    "ghost_body",
    "heart",
    "hourglass",
    "infinity",
    "rect",
    "ring_arc",
    "rounded_rect",
    "wave",
    "wave_fill",
    "wave_y",
]
