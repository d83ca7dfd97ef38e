"""Passive loaders built on discrete timers and outline trimming."""
from __future__ import annotations

import math

from soothe import TimerHandle
from soothe_shapes import (
    Path,
    capsule,
    circle,
    dashes,
    ellipse,
    ghost_body,
    hourglass,
    infinity,
    rect,
    ring_arc,
)
from soothe_tween import Animation

from soothe_widgets.base import Widget
from soothe_widgets.components import (
    EternalLoaderConfig,
    GhostLoaderConfig,
    RotatingGradientLoaderConfig,
    RotatingLoaderConfig,
    SandglassLoaderConfig,
    SwingLoaderConfig,
)
from soothe_widgets.config import PALETTE
from soothe_widgets.scene import Fill, LinearGradient, SceneItem, Stroke

BLACK = PALETTE["black"]
WHITE = PALETTE["white"]


class EternalLoader(Widget):
    """A segment chasing itself around an infinity sign.

    Every ``animation_duration / 10`` seconds the head advances 0.05 along
    the outline and the tail follows ``0.05 + extra`` behind it, both
    animated linearly. ``extra`` grows by 0.015 every three advances, so
    the segment lengthens lap after lap. Once the head would pass 1.205
    everything snaps back to zero and a new lap starts.
    """

    STEP = 0.05
    GROWTH = 0.015
    CAP = 1.205

    def __init__(self, config: EternalLoaderConfig | None = None) -> None:
        super().__init__(config or EternalLoaderConfig())
        cfg = self.config
        self.scaled = cfg.size * 1.25
        w, h = self.size
        self.outline = infinity(self.scaled, (w / 2, h / 2))
        self.head = self.param("head", 0.0, 0.0, self.CAP + self.STEP)
        self.tail = self.param("tail", 0.0, -1.0, self.CAP + self.STEP)
        self.steps = 0
        self.extra = 0.0
        self.laps = 0

    @property
    def size(self) -> tuple[float, float]:
        pad = 2 * self.config.stroke_width
        return (self.scaled * 0.875 + pad, self.scaled * 0.36 + pad)

    @property
    def interval(self) -> float:
        return self.config.animation_duration / 10

    def begin(self) -> None:
        self._rewind()
        self.timers.schedule("advance", self.interval, self._advance)
        self.timers.schedule("grow", self.interval * 3, self._grow)

    def _rewind(self) -> None:
        self.steps = 0
        self.extra = 0.0
        self.transitions.set(self.head, 0.0)
        self.transitions.set(self.tail, 0.0)

    def _advance(self, handle: TimerHandle) -> None:
        self.steps += 1
        head = self.steps * self.STEP
        if head >= self.CAP:
            self._rewind()
            self.laps += 1
            self.complete()
            self.recycle()
            return
        glide = Animation.linear(self.interval)
        self.transitions.animate(self.head, head, glide)
        self.transitions.animate(self.tail, head - (self.STEP + self.extra), glide)

    def _grow(self, handle: TimerHandle) -> None:
        self.extra += self.GROWTH

    def render(self) -> list[SceneItem]:
        cfg = self.config
        return [
            Stroke(self.outline, cfg.color, cfg.stroke_width, 0.5, cap="round"),
            Stroke(
                self.outline.trim(self.tail.value, self.head.value),
                cfg.color,
                cfg.stroke_width - 0.5,
                cap="round",
            ),
        ]


def _overlap(a: tuple[float, float, float, float], b: tuple[float, float, float, float]) -> Path:
    x0 = max(a[0], b[0])
    y0 = max(a[1], b[1])
    x1 = min(a[0] + a[2], b[0] + b[2])
    y1 = min(a[1] + a[3], b[1] + b[3])
    if x1 <= x0 or y1 <= y0:
        return Path.empty()
    return rect(x0, y0, x1 - x0, y1 - y0)


class SandglassLoader(Widget):
    """Sand pours from the top bulb into the bottom one, then the glass flips.

    A cycle lasts ``1.8 * animation_duration``. The top drains and the
    bottom fills linearly over ``animation_duration`` (the bottom 15%
    later). The stream drops through the waist early and runs out at
    0.95. At 1.3 the glass turns 180 degrees, and at 1.6 it snaps back to
    the starting state, which looks the same upside down.
    """

    def __init__(self, config: SandglassLoaderConfig | None = None) -> None:
        super().__init__(config or SandglassLoaderConfig())
        s = self.config.size
        self.rest_stream = -s / 4 - s * 0.03
        self.top = self.param("top", 0.0, 0.0, s / 2)
        self.bottom = self.param("bottom", s / 2, 0.0, s / 2)
        self.stream = self.param("stream", self.rest_stream)
        self.rotation = self.param("rotation", 0.0, 0.0, 180.0)
        self.glass = hourglass(s * 0.8, s).translate(s * 0.1, 0.0)

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    def begin(self) -> None:
        self._reset()
        self._pour()
        self.timers.schedule("cycle", self.config.animation_duration * 1.8, self._cycle)

    def _reset(self) -> None:
        s = self.config.size
        self.transitions.set(self.rotation, 0.0)
        self.transitions.set(self.top, 0.0)
        self.transitions.set(self.bottom, s / 2)
        self.transitions.set(self.stream, self.rest_stream)

    def _cycle(self, handle: TimerHandle) -> None:
        self._pour()

    def _pour(self) -> None:
        s = self.config.size
        d = self.config.animation_duration
        self.transitions.animate(self.stream, s / 4 - s * 0.03, Animation.linear(d * 0.15))
        self.transitions.animate(self.top, s / 2, Animation.linear(d))
        self.transitions.animate(self.bottom, 0.0, Animation.linear(d).delayed(d * 0.15))
        self.timers.after("drip", d * 0.95, self._drip)
        self.timers.after("flip", d * 1.3, self._flip)
        self.timers.after("settle", d * 1.6, self._settle)

    def _drip(self, handle: TimerHandle) -> None:
        s = self.config.size
        self.transitions.animate(
            self.stream,
            s / 2 - s * 0.03,
            Animation.linear(self.config.animation_duration * 0.25),
        )

    def _flip(self, handle: TimerHandle) -> None:
        self.transitions.animate(
            self.rotation, 180.0, Animation.ease_in_out(self.config.animation_duration * 0.3)
        )

    def _settle(self, handle: TimerHandle) -> None:
        self._reset()
        self.complete()
        self.recycle()

    def render(self) -> list[SceneItem]:
        cfg = self.config
        s = cfg.size
        c = (s / 2, s / 2)
        lip = s * 0.03
        upper = (0.0, -lip, s, s / 2)
        lower = (0.0, s / 2 + lip, s, s / 2)
        top = _overlap((0.0, -lip + self.top.value, s, s / 2), upper)
        bottom = _overlap((0.0, s / 2 + lip + self.bottom.value, s, s / 2), lower)
        stream = rect(s / 2 - s * 0.035, s / 4 + self.stream.value, s * 0.07, s / 2)

        angle = self.rotation.value
        glass = self.glass.rotate(angle, c)
        items: list[SceneItem] = [
            Fill(part.rotate(angle, c), cfg.sand_color, clip=glass)
            for part in (top, stream, bottom)
            if not part.is_empty
        ]
        items.append(Stroke(glass, cfg.frame_color, 5, cap="round"))
        return items


class RotatingLoader(Widget):
    """Two concentric arcs that wind up and unwind in counter-rhythm.

    After a 0.1 s pause a cycle starts, and repeats every
    ``1.98 * animation_duration``. The large arc grows to a full ring while
    the small one shrinks to a dot; at 0.7 both speed up, and at 1.0 they
    swap roles and spin on to 990 degrees.
    """

    def __init__(self, config: RotatingLoaderConfig | None = None) -> None:
        super().__init__(config or RotatingLoaderConfig())
        self.large_progress = self.param("large_progress", 0.001, 0.0, 1.0)
        self.small_progress = self.param("small_progress", 1.0, 0.0, 1.0)
        self.large_rotation = self.param("large_rotation", -90.0)
        self.small_rotation = self.param("small_rotation", -30.0)

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.large_circle_size, self.config.large_circle_size)

    def begin(self) -> None:
        self.timers.after("kickoff", 0.1, self._kickoff)

    def _kickoff(self, handle: TimerHandle) -> None:
        self._wind()
        self.timers.schedule(
            "cycle", self.config.animation_duration * 1.98, self._cycle
        )

    def _cycle(self, handle: TimerHandle) -> None:
        self.complete()
        self.recycle()
        self.transitions.set(self.large_rotation, -90.0)
        self.transitions.set(self.small_rotation, -30.0)
        self._wind()

    def _wind(self) -> None:
        d = self.config.animation_duration
        t = self.transitions
        t.animate(self.large_progress, 1.0, Animation.ease_out(d))
        t.animate(self.large_rotation, 365.0, Animation.ease_out(d * 1.1))
        t.animate(self.small_progress, 0.001, Animation.ease_out(d * 0.85))
        t.animate(self.small_rotation, 679.0, Animation.ease_out(d * 0.85))
        self.timers.after("midturn", d * 0.7, self._midturn)
        self.timers.after("unwind", d, self._unwind)

    def _midturn(self, handle: TimerHandle) -> None:
        d = self.config.animation_duration
        self.transitions.animate(self.small_rotation, 825.0, Animation.ease_in(d * 0.4))
        self.transitions.animate(self.large_rotation, 375.0, Animation.ease_in(d * 0.4))

    def _unwind(self, handle: TimerHandle) -> None:
        d = self.config.animation_duration
        t = self.transitions
        t.animate(self.large_rotation, 990.0, Animation.ease_out(d))
        t.animate(self.large_progress, 0.001, Animation.ease_out(d))
        t.animate(self.small_progress, 1.0, Animation.linear(d * 0.8))
        t.animate(self.small_rotation, 990.0, Animation.linear(d * 0.8))

    def render(self) -> list[SceneItem]:
        cfg = self.config
        big = cfg.large_circle_size
        small = cfg.small_circle_size
        c = (big / 2, big / 2)
        return [
            Stroke(
                ring_arc(c, big / 2 - big / 19, 0.0, self.large_progress.value,
                         self.large_rotation.value),
                cfg.color,
                big / 9.5,
                cap="round",
            ),
            Stroke(
                ring_arc(c, small / 2 - small / 11, 0.0, self.small_progress.value,
                         self.small_rotation.value),
                cfg.color,
                small / 5.5,
                0.8,
                cap="round",
            ),
        ]


class SwingLoader(Widget):
    """A dot swinging along the lower half of a ring like a pendulum bob.

    The dot is a 0.001 trim of an upright capsule whose lower end hugs the
    ring. It eases from 0.20 to 0.80 of the capsule over ``duration`` and
    swings back.
    """

    def __init__(self, config: SwingLoaderConfig | None = None) -> None:
        super().__init__(config or SwingLoaderConfig())
        main = self.config.size * 2
        self.main = main
        self.thickness = main * 0.065
        w, h = self.size
        self.pivot = (w / 2, self.thickness + main * 0.75)
        cx, cy = self.pivot
        self.track = (
            capsule(-main / 2, -main / 4, main, main / 2)
            .rotate(-90.0)
            .translate(cx, cy - main / 4)
        )
        self.start_trim = self.param("start", 0.20, 0.0, 1.0)
        self.end_trim = self.param("end", 0.201, 0.0, 1.0)

    @property
    def size(self) -> tuple[float, float]:
        main = self.config.size * 2
        pad = 2 * main * 0.065
        return (main / 2 + pad, main + pad)

    def begin(self) -> None:
        self.transitions.set(self.start_trim, 0.20)
        self.transitions.set(self.end_trim, 0.201)
        swing = Animation.ease_in_out(self.config.duration).repeat_forever()
        self.transitions.animate(self.start_trim, 0.80, swing)
        self.transitions.animate(self.end_trim, 0.801, swing)

    def render(self) -> list[SceneItem]:
        cfg = self.config
        return [
            Stroke(circle(self.pivot, self.main / 4), cfg.background_circle_color, self.thickness),
            Stroke(
                self.track.trim(self.start_trim.value, self.end_trim.value),
                cfg.loader_color,
                self.thickness,
                cap="round",
            ),
        ]


class RotatingGradientLoader(Widget):
    """Gradient disc inside a ring of turning dashes, with five pulsing bars.

    The dashes make a full turn every 4 s. The bars grow from half to full
    height over 1.2 s and shrink back.
    """

    BARS = 5

    def __init__(self, config: RotatingGradientLoaderConfig | None = None) -> None:
        super().__init__(config or RotatingGradientLoaderConfig())
        cfg = self.config
        w, h = self.size
        self.center = (w / 2, h / 2)
        dash = cfg.capsule_width / 2
        ring = circle(self.center, cfg.rotation_line_size / 2, 144)
        self.dashes = dashes(ring, dash, dash * 3)
        self.rotation = self.param("rotation", 0.0, 0.0, 360.0)
        self.scale = self.param("scale", 0.5, 0.5, 1.0)

    @property
    def size(self) -> tuple[float, float]:
        cfg = self.config
        side = max(cfg.main_circle_size, cfg.rotation_line_size) + cfg.capsule_width
        return (side, side)

    def _paint(self, diameter: float) -> LinearGradient:
        cx, cy = self.center
        stops = tuple(self.config.gradient_colors)
        if len(stops) == 1:
            stops = stops * 2
        return LinearGradient(stops, (cx - diameter / 2, cy), (cx + diameter / 2, cy))

    def begin(self) -> None:
        self.transitions.set(self.rotation, 0.0)
        self.transitions.set(self.scale, 0.5)
        self.transitions.animate(
            self.rotation, 360.0, Animation.linear(4.0).repeat_forever(autoreverses=False)
        )
        self.transitions.animate(
            self.scale, 1.0, Animation.ease_in_out(1.2).repeat_forever()
        )

    def render(self) -> list[SceneItem]:
        cfg = self.config
        cx, cy = self.center
        main = cfg.main_circle_size
        cw = cfg.capsule_width
        ring_paint = self._paint(cfg.rotation_line_size)
        items: list[SceneItem] = [Fill(circle(self.center, main / 2), self._paint(main))]
        angle = self.rotation.value
        for dash in self.dashes:
            items.append(Stroke(dash.rotate(angle, self.center), ring_paint, cw / 2, cap="round"))
        tallest = main / 3
        left = cx - (self.BARS * cw + (self.BARS - 1) * cw / 2) / 2
        for i in range(self.BARS):
            h = tallest * (self.scale.value + i * 0.1)
            items.append(Fill(capsule(left + i * cw * 1.5, cy - h / 2, cw, h), WHITE))
        return items


class GhostLoader(Widget):
    """Floating ghost with a rippling hem.

    The hem wave advances by 0.0015 every 0.02 s while the ghost bobs down
    ``ghost_size / 50`` and back every 2 s. A black copy 5% larger behind
    the body draws the outline.
    """

    TICK = 0.02

    def __init__(self, config: GhostLoaderConfig | None = None) -> None:
        super().__init__(config or GhostLoaderConfig())
        g = self.config.ghost_size
        self.curve_height = g * 0.06
        self.curve_length = g / (g * 0.05)
        self.time = self.param("time", 0.0)
        self.bob = self.param("bob", 0.0, 0.0, g / 50)

    @property
    def size(self) -> tuple[float, float]:
        g = self.config.ghost_size
        return (g * 1.2, g * 1.5)

    @property
    def origin(self) -> tuple[float, float]:
        g = self.config.ghost_size
        return (g * 0.6, g * 0.85)

    def begin(self) -> None:
        self.transitions.set(self.bob, 0.0)
        self.timers.schedule("drift", self.TICK, self._drift)
        self.transitions.animate(
            self.bob, self.config.ghost_size / 50, Animation.ease_in_out(2.0).repeat_forever()
        )

    def _drift(self, handle: TimerHandle) -> None:
        self.time.value += 0.0015

    def _body(self, scale: float) -> tuple[Path, Path]:
        g = self.config.ghost_size
        ox, oy = self.origin
        w = g * scale
        h = g * 2.5 * scale
        x = ox - w / 2
        y = oy + self.bob.value + g / 2 * scale - h / 2
        # Hem period and phase follow sin(((x / h) + time) * L * pi).
        period = 2 * h / self.curve_length
        phase = self.time.value * self.curve_length * math.pi
        body = ghost_body(w, h, self.curve_height, period, phase, step=max(1.0, w / 60))
        return body.translate(x, y), capsule(x, y, w, h)

    def render(self) -> list[SceneItem]:
        g = self.config.ghost_size
        ox, oy = self.origin
        oy += self.bob.value
        outline, outline_clip = self._body(1.05)
        body, body_clip = self._body(1.0)
        items: list[SceneItem] = [
            Fill(outline, BLACK, clip=outline_clip),
            Fill(body, self.config.ghost_color, clip=body_clip),
        ]
        eye_y = oy - g / 3
        for eye_x, pupil_x in ((0.0, g * 0.01), (g / 3.75, g / 3.8)):
            items.append(Fill(circle((ox + eye_x, eye_y), g / 12), BLACK))
            items.append(Fill(circle((ox + eye_x, eye_y), g / 14), WHITE))
            items.append(Fill(circle((ox + pupil_x, eye_y), g / 30), BLACK))
        items.append(Fill(ellipse((ox + g / 6, oy - g / 7.5), g / 15, g / 22), BLACK))
        return items
