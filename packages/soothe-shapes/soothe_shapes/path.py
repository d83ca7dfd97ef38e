"""Immutable polyline paths with arc-length trimming.

Screen coordinates: x grows right, y grows down, so positive rotation
angles turn clockwise on screen.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Iterable

Point = tuple[float, float]


def _lerp(a: Point, b: Point, t: float) -> Point:
    return (a[0] + (b[0] - a[0]) * t, a[1] + (b[1] - a[1]) * t)


def _push(out: list[Point], p: Point) -> None:
    """Append unless ``p`` repeats the last point."""
    if not out or math.dist(out[-1], p) > 1e-12:
        out.append(p)


def _clamp01(value: float) -> float:
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


@dataclass(frozen=True, slots=True)
class Path:
    points: tuple[Point, ...] = ()
    closed: bool = False

    @classmethod
    def empty(cls) -> Path:
        return cls()

    @classmethod
    def of(cls, points: Iterable[Point], closed: bool = False) -> Path:
        return cls(tuple((float(x), float(y)) for x, y in points), closed)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def _vertices(self) -> tuple[Point, ...]:
        if self.closed and len(self.points) > 1:
            return self.points + (self.points[0],)
        return self.points

    def segment_lengths(self) -> list[float]:
        verts = self._vertices()
        return [math.dist(a, b) for a, b in zip(verts, verts[1:])]

    @property
    def length(self) -> float:
        return sum(self.segment_lengths())

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y). All zeros for an empty path."""
        if not self.points:
            return (0.0, 0.0, 0.0, 0.0)
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def point_at(self, fraction: float) -> Point:
        if not self.points:
            raise ValueError("point_at on an empty path")
        verts = self._vertices()
        lengths = self.segment_lengths()
        total = sum(lengths)
        if total == 0.0:
            return verts[0]
        target = _clamp01(fraction) * total
        walked = 0.0
        for (a, b), seg in zip(zip(verts, verts[1:]), lengths):
            if seg > 0.0 and walked + seg >= target:
                return _lerp(a, b, (target - walked) / seg)
            walked += seg
        return verts[-1]

    def trim(self, start: float, end: float) -> Path:
        """Sub-path covering [start, end] of the arc length.

        Fractions are clamped to [0, 1]. ``start >= end`` gives an empty path.
        """
        start = _clamp01(start)
        end = _clamp01(end)
        if end <= start or len(self.points) < 2:
            return Path.empty()
        verts = self._vertices()
        lengths = self.segment_lengths()
        total = sum(lengths)
        if total == 0.0:
            return Path.empty()

        lo = start * total
        hi = end * total
        out: list[Point] = []
        walked = 0.0
        for (a, b), seg in zip(zip(verts, verts[1:]), lengths):
            seg_start = walked
            seg_end = walked + seg
            walked = seg_end
            if seg == 0.0 or seg_end <= lo:
                continue
            if out and seg_start >= hi:
                break
            if not out:
                _push(out, _lerp(a, b, max(lo - seg_start, 0.0) / seg))
            if seg_end <= hi:
                _push(out, b)
            else:
                _push(out, _lerp(a, b, (hi - seg_start) / seg))
                break
        if len(out) == 1:
            out.append(out[0])
        return Path(tuple(out), False)

    def map(self, fn: Callable[[Point], Point]) -> Path:
        return Path(tuple(fn(p) for p in self.points), self.closed)

    def translate(self, dx: float, dy: float) -> Path:
        return self.map(lambda p: (p[0] + dx, p[1] + dy))

    def scale(self, sx: float, sy: float | None = None, origin: Point = (0.0, 0.0)) -> Path:
        if sy is None:
            sy = sx
        ox, oy = origin
        return self.map(lambda p: (ox + (p[0] - ox) * sx, oy + (p[1] - oy) * sy))

    def rotate(self, degrees: float, origin: Point = (0.0, 0.0)) -> Path:
        if degrees == 0.0:
            return self
        rad = math.radians(degrees)
        cos_r = math.cos(rad)
        sin_r = math.sin(rad)
        ox, oy = origin

        def turn(p: Point) -> Point:
            dx = p[0] - ox
            dy = p[1] - oy
            return (ox + dx * cos_r - dy * sin_r, oy + dx * sin_r + dy * cos_r)

        return self.map(turn)
