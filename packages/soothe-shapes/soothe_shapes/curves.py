"""Curve flattening helpers producing point lists."""
from __future__ import annotations

import math

from soothe_shapes.path import Point


def cubic(p0: Point, c1: Point, c2: Point, p3: Point, steps: int = 24) -> list[Point]:
    """Points along a cubic Bezier, excluding ``p0`` so segments chain."""
    out: list[Point] = []
    for i in range(1, steps + 1):
        t = i / steps
        mt = 1.0 - t
        a = mt * mt * mt
        b = 3 * mt * mt * t
        c = 3 * mt * t * t
        d = t * t * t
        out.append((
            a * p0[0] + b * c1[0] + c * c2[0] + d * p3[0],
            a * p0[1] + b * c1[1] + c * c2[1] + d * p3[1],
        ))
    return out


def arc(
    center: Point,
    radius: float,
    start_deg: float,
    delta_deg: float,
    steps: int | None = None,
) -> list[Point]:
    """Points along a circular arc, start included. Positive delta is clockwise."""
    if steps is None:
        steps = max(2, math.ceil(abs(delta_deg) / 7.5))
    cx, cy = center
    out: list[Point] = []
    for i in range(steps + 1):
        angle = math.radians(start_deg + delta_deg * i / steps)
        out.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return out


def circle_points(center: Point, radius: float, steps: int = 96) -> list[Point]:
    """Closed ring of points starting at 3 o'clock, clockwise on screen."""
    return arc(center, radius, 0.0, 360.0, steps)[:-1]
