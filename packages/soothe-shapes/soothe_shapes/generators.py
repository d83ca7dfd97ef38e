"""Pure shape generators. Same arguments always give the same path."""
from __future__ import annotations

import math

from soothe_shapes.curves import arc, circle_points, cubic
from soothe_shapes.path import Path, Point


def _dedupe(points: list[Point]) -> list[Point]:
    out: list[Point] = []
    for p in points:
        if not out or math.dist(out[-1], p) > 1e-9:
            out.append(p)
    return out


# -- Wave family --

def wave_y(
    x: float,
    amplitude: float,
    period: float,
    phase: float = 0.0,
    baseline: float = 0.0,
) -> float:
    """Height of a sine wave at ``x``. Periodic in ``x`` with ``period``."""
    return baseline + amplitude * math.sin(2 * math.pi * x / period + phase)


def _wave_points(
    width: float,
    amplitude: float,
    period: float,
    phase: float,
    baseline: float,
    step: float,
) -> list[Point]:
    if period <= 0:
        raise ValueError(f"period must be positive, got {period}")
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    count = max(1, math.ceil(width / step))
    xs = [min(i * step, width) for i in range(count + 1)]
    return [(x, wave_y(x, amplitude, period, phase, baseline)) for x in xs]


def wave(
    width: float,
    amplitude: float,
    period: float,
    phase: float = 0.0,
    baseline: float = 0.0,
    step: float = 1.0,
) -> Path:
    """Open horizontal sweep across ``[0, width]``."""
    return Path(tuple(_wave_points(width, amplitude, period, phase, baseline, step)))


def wave_fill(
    width: float,
    amplitude: float,
    period: float,
    phase: float,
    baseline: float,
    bottom: float,
    step: float = 1.0,
) -> Path:
    """Closed region between a wave and the horizontal line ``y = bottom``."""
    points = _wave_points(width, amplitude, period, phase, baseline, step)
    points.append((width, bottom))
    points.append((0.0, bottom))
    return Path(tuple(points), True)


def ghost_body(
    width: float,
    height: float,
    amplitude: float,
    period: float,
    phase: float,
    step: float = 1.0,
) -> Path:
    """Flat top edge down to a wavy hem at half height."""
    hem = _wave_points(width, amplitude, period, phase, height / 2, step)
    return Path(tuple([(width, 0.0), (0.0, 0.0)] + hem), True)


# -- Outlines --

def infinity(size: float, center: Point = (0.0, 0.0), steps: int = 32) -> Path:
    """Figure-eight of four cubic segments mirrored about both midlines.

    Coordinates are laid out on a 400 unit design grid scaled by ``size / 400``,
    so the outline spans ``0.875 * size`` by ``0.36 * size``.
    """
    f = size / 400
    cx, cy = center

    def at(x: float, y: float) -> Point:
        return (cx + x * f, cy + y * f)

    start = at(-100, 72)
    points = [start]
    points += cubic(start, at(-200, 72), at(-200, -72), at(-100, -72), steps)
    points += cubic(points[-1], at(0, -72), at(0, 72), at(100, 72), steps)
    points += cubic(points[-1], at(200, 72), at(200, -72), at(100, -72), steps)
    points += cubic(points[-1], at(0, -72), at(0, 72), start, steps)
    return Path(tuple(points[:-1]), True)


def hourglass(width: float, height: float, arc_steps: int = 12) -> Path:
    """Sandglass outline in the box ``(0, 0, width, height)``.

    Eight straight segments and four rounded corners of radius ``height / 15``.
    The waist is ``0.1 * height`` wide and tall.
    """
    mid_x = width / 2
    mid_y = height / 2
    waist = height * 0.05
    r = height / 15
    # Inset of a 45 degree tangent point from the bounding box corner.
    cd = math.sqrt(((math.sqrt(2 * r * r) - r) ** 2) / 2)

    points: list[Point] = []
    points += arc((width - r, r), r, 270, 135, arc_steps)
    points.append((mid_x + waist, mid_y - waist))
    points.append((mid_x + waist, mid_y + waist))
    points.append((width - cd, height - r - (r - cd)))
    points += arc((width - r, height - r), r, 315, 135, arc_steps)
    points.append((r, height))
    points += arc((r, height - r), r, 90, 135, arc_steps)
    points.append((mid_x - waist, mid_y + waist))
    points.append((mid_x - waist, mid_y - waist))
    points.append((cd, r + (r - cd)))
    points += arc((r, r), r, 135, 135, arc_steps)
    return Path(tuple(_dedupe(points)), True)


def circle(center: Point, radius: float, steps: int = 96) -> Path:
    """Closed circle starting at 3 o'clock, clockwise on screen."""
    return Path(tuple(circle_points(center, radius, steps)), True)


def ellipse(
    center: Point,
    rx: float,
    ry: float,
    rotation: float = 0.0,
    steps: int = 64,
) -> Path:
    cx, cy = center
    points = []
    for i in range(steps):
        angle = 2 * math.pi * i / steps
        points.append((cx + rx * math.cos(angle), cy + ry * math.sin(angle)))
    return Path(tuple(points), True).rotate(rotation, center)


def rect(x: float, y: float, w: float, h: float) -> Path:
    return Path(((x, y), (x + w, y), (x + w, y + h), (x, y + h)), True)


def rounded_rect(
    x: float, y: float, w: float, h: float, r: float, arc_steps: int = 12
) -> Path:
    """Rounded rectangle starting at the middle of its right edge, clockwise."""
    r = max(0.0, min(r, w / 2, h / 2))
    points: list[Point] = [(x + w, y + h / 2)]
    points += arc((x + w - r, y + h - r), r, 0, 90, arc_steps)
    points += arc((x + r, y + h - r), r, 90, 90, arc_steps)
    points += arc((x + r, y + r), r, 180, 90, arc_steps)
    points += arc((x + w - r, y + r), r, 270, 90, arc_steps)
    points = _dedupe(points)
    if len(points) > 1 and math.dist(points[0], points[-1]) <= 1e-9:
        points.pop()
    return Path(tuple(points), True)


def capsule(x: float, y: float, w: float, h: float) -> Path:
    return rounded_rect(x, y, w, h, min(w, h) / 2)


# -- Arc / segment indicators --

def ring_arc(
    center: Point,
    radius: float,
    start: float,
    end: float,
    rotation: float = 0.0,
    steps: int = 96,
) -> Path:
    """Circle stroke trimmed to ``[start, end]`` and rotated by ``rotation`` degrees."""
    return circle(center, radius, steps).trim(start, end).rotate(rotation, center)


def dashes(path: Path, dash: float, gap: float) -> list[Path]:
    """Split a path into dashes of ``dash`` length separated by ``gap``."""
    if dash <= 0 or gap < 0:
        raise ValueError("dash must be positive and gap non-negative")
    total = path.length
    if total == 0.0:
        return []
    out = []
    pos = 0.0
    while pos < total:
        out.append(path.trim(pos / total, min(pos + dash, total) / total))
        pos += dash + gap
    return out


# -- Glyphs --

def heart(center: Point, size: float, steps: int = 72) -> Path:
    """Heart outline ``size`` wide, centered on ``center``."""
    cx, cy = center
    s = size / 32
    points = []
    for i in range(steps):
        t = 2 * math.pi * i / steps
        x = 16 * math.sin(t) ** 3
        y = -(13 * math.cos(t) - 5 * math.cos(2 * t) - 2 * math.cos(3 * t) - math.cos(4 * t))
        points.append((cx + x * s, cy + (y - 2.5) * s))
    return Path(tuple(points), True)


def checkmark(center: Point, size: float) -> Path:
    cx, cy = center
    return Path((
        (cx - 0.32 * size, cy + 0.02 * size),
        (cx - 0.1 * size, cy + 0.24 * size),
        (cx + 0.34 * size, cy - 0.26 * size),
    ))
