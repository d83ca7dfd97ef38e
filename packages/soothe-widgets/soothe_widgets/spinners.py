"""Passive spinners driven by looping eased transitions."""
from __future__ import annotations

import math

from soothe import TimerHandle
from soothe_shapes import Point, capsule, circle, ellipse, ring_arc
from soothe_tween import Animation

from soothe_widgets.base import Widget
from soothe_widgets.components import (
    AnimatedGradientCirclesConfig,
    FaceAnimationConfig,
    HarmonySpinnerConfig,
    PulsingCapsulesConfig,
    RippleEffectConfig,
    RotatingCirclesConfig,
)
from soothe_widgets.config import PALETTE
from soothe_widgets.scene import RGB, Fill, LinearGradient, SceneItem, Stroke, with_alpha

BLACK = PALETTE["black"]
WHITE = PALETTE["white"]


def _orbit(center: Point, radius: float, degrees: float) -> Point:
    rad = math.radians(degrees)
    return (center[0] + radius * math.cos(rad), center[1] + radius * math.sin(rad))


class HarmonySpinner(Widget):
    """One arc per color, spaced evenly around the ring.

    Over ``rotation_time`` the arcs grow from 3% to the full circle while the
    group turns one full revolution from 270 degrees, then play it back.
    Stroke width follows the arc length.
    """

    START = 270.0

    def __init__(self, config: HarmonySpinnerConfig | None = None) -> None:
        super().__init__(config or HarmonySpinnerConfig())
        self.rotation = self.param("rotation", self.START)
        self.ends = self.param("ends", 0.03, 0.0, 1.0)

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    @property
    def turned(self) -> float:
        """Degrees turned since the cycle began."""
        return self.rotation.value - self.START

    def begin(self) -> None:
        self.transitions.set(self.rotation, self.START)
        self.transitions.set(self.ends, 0.03)
        sweep = Animation.ease_in_out(self.config.rotation_time).repeat_forever()
        self.transitions.animate(self.rotation, self.START + 360.0, sweep)
        self.transitions.animate(self.ends, 1.0, sweep)

    def render(self) -> list[SceneItem]:
        s = self.config.size
        c = (s / 2, s / 2)
        r = s / 2 - s / 20
        ends = self.ends.value
        spacing = 360.0 / len(self.config.colors)
        return [
            Stroke(
                ring_arc(c, r, 0.0, ends, self.rotation.value + spacing * i),
                color,
                s / 10 * ends,
                cap="round",
            )
            for i, color in enumerate(self.config.colors)
        ]


class PulsingCapsules(Widget):
    """A row of capsules with a pulse bouncing back and forth along it.

    The pulse moves one capsule every ``(animation_duration / 2) / (n - 1)``
    seconds. Capsules at distance 0, 1, 2 from the pulse ease toward 4x, 3x
    and 2x the base height; the rest rest at 1x.
    """

    def __init__(self, config: PulsingCapsulesConfig | None = None) -> None:
        super().__init__(config or PulsingCapsulesConfig())
        self.index = 0
        self.decreasing = False
        self.heights = [
            self.param(f"height_{i}", self.height_for(i))
            for i in range(self.config.number_of_capsules)
        ]

    @property
    def size(self) -> tuple[float, float]:
        cfg = self.config
        n = cfg.number_of_capsules
        return ((2 * n - 1) * cfg.capsule_width, cfg.capsule_height * 4)

    @property
    def interval(self) -> float:
        return self.config.animation_duration / 2 / (self.config.number_of_capsules - 1)

    def height_for(self, i: int) -> float:
        distance = abs(self.index - i)
        return self.config.capsule_height * (4 - distance if distance < 3 else 1)

    def begin(self) -> None:
        self.index = 0
        self.decreasing = False
        for i, p in enumerate(self.heights):
            self.transitions.set(p, self.height_for(i))
        self.timers.schedule("pulse", self.interval, self._pulse)

    def _pulse(self, handle: TimerHandle) -> None:
        last = self.config.number_of_capsules - 1
        if self.index == last:
            self.decreasing = True
        elif self.index == 0:
            self.decreasing = False
        self.index += -1 if self.decreasing else 1
        ease = Animation.ease_out(self.config.animation_duration / 2)
        for i, p in enumerate(self.heights):
            self.transitions.animate(p, self.height_for(i), ease)

    def render(self) -> list[SceneItem]:
        cfg = self.config
        w = cfg.capsule_width
        mid = self.size[1] / 2
        return [
            Fill(capsule(2 * w * i, mid - p.value / 2, w, p.value), cfg.color)
            for i, p in enumerate(self.heights)
        ]


class RippleEffect(Widget):
    """Three rings that expand from the center and fade out, staggered.

    Each ring plays an ease-out over ``duration`` forever. Ring ``i`` starts
    ``i * duration / 9`` seconds late.
    """

    RINGS = 3

    def __init__(self, config: RippleEffectConfig | None = None) -> None:
        super().__init__(config or RippleEffectConfig())
        self.ripples = [self.param(f"ripple_{i}", 0.0, 0.0, 1.0) for i in range(self.RINGS)]

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    def begin(self) -> None:
        d = self.config.duration
        for i, p in enumerate(self.ripples):
            self.transitions.set(p, 0.0)
            wave = Animation.ease_out(d).repeat_forever(autoreverses=False).delayed(i * d / 9)
            self.transitions.animate(p, 1.0, wave)

    def render(self) -> list[SceneItem]:
        s = self.config.size
        c = (s / 2, s / 2)
        items: list[SceneItem] = []
        for p in self.ripples:
            t = p.value
            items.append(
                Stroke(circle(c, s / 2 * t), self.config.color, s / 10 * (1 - t), 1 - t)
            )
        return items


class RotatingCircles(Widget):
    """Three dots that spread out while spinning, then gather back.

    One spread plus one full turn takes ``duration / 2``; the gather plays it
    in reverse.
    """

    def __init__(self, config: RotatingCirclesConfig | None = None) -> None:
        super().__init__(config or RotatingCirclesConfig())
        self.phase = self.param("phase", 0.0, 0.0, 1.0)

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    def begin(self) -> None:
        self.transitions.set(self.phase, 0.0)
        self.transitions.animate(
            self.phase, 1.0, Animation.linear(self.config.duration / 2).repeat_forever()
        )

    def render(self) -> list[SceneItem]:
        s = self.config.size
        c = (s / 2, s / 2)
        phase = self.phase.value
        colors = self.config.colors
        return [
            Fill(
                circle(_orbit(c, s / 3 * phase, 120.0 * i + 360.0 * phase), s / 6),
                colors[i % len(colors)],
            )
            for i in range(3)
        ]


class AnimatedGradientCircles(Widget):
    """Three pairs of gradient circles that bloom outward while turning 90 degrees.

    The whole group scales from 0.45x to 1x. One bloom lasts
    ``0.35 / (animation_speed / 20)`` seconds and then reverses.
    """

    PAIRS = (0.0, 60.0, 120.0)

    def __init__(self, config: AnimatedGradientCirclesConfig | None = None) -> None:
        super().__init__(config or AnimatedGradientCirclesConfig())
        self.phase = self.param("phase", 0.0, 0.0, 1.0)

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    def begin(self) -> None:
        self.transitions.set(self.phase, 0.0)
        bloom = Animation.ease_in_out(0.35).with_speed(self.config.animation_speed / 20)
        self.transitions.animate(self.phase, 1.0, bloom.repeat_forever())

    def _disc(
        self,
        center: Point,
        offset: float,
        angle: float,
        radius: float,
        color: RGB,
        upper: bool,
    ) -> Fill:
        # Offset runs along the pair's own vertical axis; negative is up.
        mid = _orbit(center, offset, angle + 90.0)
        top = _orbit(mid, radius, angle - 90.0)
        bottom = _orbit(mid, radius, angle + 90.0)
        start, end = (top, bottom) if upper else (bottom, top)
        paint = LinearGradient((color, with_alpha(color, 0.3)), start, end)
        return Fill(circle(mid, radius), paint, 0.7)

    def render(self) -> list[SceneItem]:
        cfg = self.config
        c = (cfg.size / 2, cfg.size / 2)
        phase = self.phase.value
        k = 0.45 + 0.55 * phase
        half = cfg.size / 2 * k
        turn = 90.0 * phase
        items: list[SceneItem] = []
        for n, angle in enumerate(self.PAIRS):
            upper, lower = cfg.primary_color, cfg.secondary_color
            if n % 2:
                upper, lower = lower, upper
            a = angle + turn
            items.append(self._disc(c, -half / 2 * phase, a, half / 2, upper, True))
            items.append(self._disc(c, half / 2 * phase, a, half / 2, lower, False))
        return items


class FaceAnimation(Widget):
    """Face whose pupils circle around the inside of each eye.

    The pupils slide into place once (ease-out, 1 s) and orbit forever,
    one turn per second with an ease-out each turn.
    """

    def __init__(self, config: FaceAnimationConfig | None = None) -> None:
        super().__init__(config or FaceAnimationConfig())
        s = self.config.size
        self.mouth_offset = -s / 8 if s <= 50 else s / 15
        self.drop = 0.24 * s
        self.slide = self.param("slide", self.drop)
        self.spin = self.param("spin", 0.0, 0.0, 360.0)

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    def begin(self) -> None:
        self.transitions.set(self.slide, self.drop)
        self.transitions.set(self.spin, 0.0)
        self.transitions.animate(self.slide, 0.0, Animation.ease_out(1.0))
        self.transitions.animate(
            self.spin, 360.0, Animation.ease_out(1.0).repeat_forever(autoreverses=False)
        )

    def render(self) -> list[SceneItem]:
        s = self.config.size
        c = (s / 2, s / 2)
        eye = s / 3
        gap = s / 30
        content = s / 15 + eye + gap + eye / 3
        top = c[1] - content / 2
        eye_y = top + s / 15 + eye / 2 - self.mouth_offset / 5
        mouth_y = top + s / 15 + eye + gap + eye / 6 + self.mouth_offset

        items: list[SceneItem] = [Fill(circle(c, s / 2), self.config.face_color)]
        for side in (-1, 1):
            center = (c[0] + side * (eye / 2 + s / 20), eye_y)
            pupil = _orbit(center, eye / 4, self.spin.value)
            items.append(Fill(circle(center, eye / 2), BLACK))
            items.append(Fill(circle(center, eye * 0.97 / 2), WHITE))
            items.append(Fill(circle((pupil[0], pupil[1] + self.slide.value), eye / 6), BLACK))
        items.append(Fill(ellipse((c[0], mouth_y), eye / 4, eye / 6), BLACK))
        return items
