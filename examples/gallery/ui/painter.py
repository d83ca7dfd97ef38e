"""Scene renderer: paints Fill, Stroke and Label items with pygame."""
from __future__ import annotations

import math
from functools import lru_cache

import pygame

from soothe_widgets import Fill, Label, LinearGradient, RadialGradient, Stroke

_fonts: dict[tuple[int, bool, bool], pygame.font.Font] = {}


def _rgba(color: tuple) -> tuple[int, int, int, int]:
    if len(color) == 4:
        return tuple(color)
    return (color[0], color[1], color[2], 255)


def _stop(colors: tuple, t: float) -> tuple[int, int, int, int]:
    """Color at ``t`` along evenly spaced gradient stops."""
    if len(colors) == 1:
        return _rgba(colors[0])
    t = max(0.0, min(t, 1.0)) * (len(colors) - 1)
    i = min(int(t), len(colors) - 2)
    a, b = _rgba(colors[i]), _rgba(colors[i + 1])
    f = t - i
    return tuple(round(a[k] + (b[k] - a[k]) * f) for k in range(4))


@lru_cache(maxsize=64)
def _strip(colors: tuple, length: int, pad: int) -> pygame.Surface:
    """One-pixel-high gradient, padded with the end colors on both sides."""
    strip = pygame.Surface((length + 2 * pad, 1), pygame.SRCALPHA)
    for x in range(length + 2 * pad):
        strip.set_at((x, 0), _stop(colors, (x - pad) / max(length, 1)))
    return strip


@lru_cache(maxsize=32)
def _linear(paint: LinearGradient, size: tuple[int, int]) -> pygame.Surface:
    (x0, y0), (x1, y1) = paint.start, paint.end
    length = max(1, int(math.hypot(x1 - x0, y1 - y0)))
    pad = int(math.hypot(*size)) + 1
    band = pygame.transform.scale(
        _strip(paint.colors, length, pad), (length + 2 * pad, 2 * pad)
    )
    band = pygame.transform.rotate(band, -math.degrees(math.atan2(y1 - y0, x1 - x0)))
    out = pygame.Surface(size, pygame.SRCALPHA)
    rect = band.get_rect(center=((x0 + x1) / 2, (y0 + y1) / 2))
    out.blit(band, rect)
    return out


@lru_cache(maxsize=32)
def _radial(paint: RadialGradient, size: tuple[int, int]) -> pygame.Surface:
    out = pygame.Surface(size, pygame.SRCALPHA)
    out.fill(_stop(paint.colors, 1.0))
    r = max(1, int(paint.radius))
    for rr in range(r, 0, -1):
        pygame.draw.circle(out, _stop(paint.colors, rr / r), paint.center, rr)
    return out


def _draw_stroke(layer: pygame.Surface, item: Stroke, color) -> None:
    points = list(item.path.points)
    if len(points) < 2:
        return
    width = max(1, round(item.width))
    pygame.draw.lines(layer, color, item.path.closed, points, width)
    if width > 2:
        # Joints between thick segments leave notches.
        for p in points[1:-1]:
            pygame.draw.circle(layer, color, p, width / 2)
    if item.cap == "round" and not item.path.closed:
        pygame.draw.circle(layer, color, points[0], width / 2)
        pygame.draw.circle(layer, color, points[-1], width / 2)


def _draw_shape(layer: pygame.Surface, item, color) -> None:
    if isinstance(item, Stroke):
        _draw_stroke(layer, item, color)
    elif len(item.path.points) >= 3:
        pygame.draw.polygon(layer, color, list(item.path.points))


def _paint_item(item, size: tuple[int, int]) -> pygame.Surface:
    layer = pygame.Surface(size, pygame.SRCALPHA)
    alpha = round(255 * max(0.0, min(item.alpha, 1.0)))
    paint = item.paint
    if isinstance(paint, (LinearGradient, RadialGradient)):
        _draw_shape(layer, item, (255, 255, 255, alpha))
        shader = _linear(paint, size) if isinstance(paint, LinearGradient) else _radial(paint, size)
        layer.blit(shader, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
    else:
        _draw_shape(layer, item, (paint[0], paint[1], paint[2], alpha))
    if item.clip is not None and len(item.clip.points) >= 3:
        mask = pygame.Surface(size, pygame.SRCALPHA)
        pygame.draw.polygon(mask, (255, 255, 255, 255), list(item.clip.points))
        layer.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MULT)
    return layer


def _font(size: float, bold: bool, italic: bool) -> pygame.font.Font:
    key = (max(6, round(size)), bold, italic)
    if key not in _fonts:
        _fonts[key] = pygame.font.SysFont("sans", key[0], bold=bold, italic=italic)
    return _fonts[key]


def _draw_label(surface: pygame.Surface, item: Label) -> None:
    text = _font(item.size, item.bold, item.italic).render(item.text, True, item.color)
    if item.alpha < 1.0:
        text.set_alpha(round(255 * max(0.0, item.alpha)))
    surface.blit(text, text.get_rect(center=item.center))


def draw_scene(surface: pygame.Surface, scene: list, origin: tuple[int, int], size) -> None:
    """Paint a widget's scene with its top-left corner at ``origin``."""
    size = (max(1, math.ceil(size[0])), max(1, math.ceil(size[1])))
    canvas = pygame.Surface(size, pygame.SRCALPHA)
    for item in scene:
        if isinstance(item, Label):
            _draw_label(canvas, item)
        elif isinstance(item, (Fill, Stroke)):
            canvas.blit(_paint_item(item, size), (0, 0))
    surface.blit(canvas, origin)
