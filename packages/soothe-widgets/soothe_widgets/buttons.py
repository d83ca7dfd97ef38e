"""Tap-activated buttons."""
from __future__ import annotations

import math

from soothe import TimerHandle
from soothe_fsm import IDLE, RESETTING, RUNNING
from soothe_shapes import (
    Point,
    capsule,
    checkmark,
    circle,
    ellipse,
    heart,
    ring_arc,
    wave_fill,
)
from soothe_tween import Animation

from soothe_widgets.base import Widget
from soothe_widgets.components import (
    BubbleButtonConfig,
    FluidLoadingButtonConfig,
    LikeButtonConfig,
    ProgressButtonConfig,
    WaveButtonConfig,
)
from soothe_widgets.config import PALETTE
from soothe_widgets.scene import Fill, Label, RadialGradient, SceneItem, Stroke, with_alpha

WHITE = PALETTE["white"]


class ProgressButton(Widget):
    """Ring that fills over ``duration`` seconds, then shows a checkmark.

    The fill timer fires every ``duration / 100`` seconds and adds one
    percent, animated linearly over the interval. At 100 percent the timer
    is invalidated, the action is dispatched once, and the button rests
    until tapped again. A tap mid-fill restarts from zero.
    """

    interactive = True

    def __init__(self, config: ProgressButtonConfig | None = None) -> None:
        super().__init__(config or ProgressButtonConfig())
        self.progress = self.param("progress", 0.0, 0.0, 1.0)
        self.steps = 0
        self.done = False

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    @property
    def interval(self) -> float:
        return self.config.duration / 100

    def begin(self) -> None:
        self.steps = 0
        self.done = False
        self.transitions.set(self.progress, 0.0)
        self.invalidate()
        self.timers.schedule("fill", self.interval, self._fill)

    def _fill(self, handle: TimerHandle) -> None:
        self.steps += 1
        self.transitions.animate(
            self.progress, self.steps / 100, Animation.linear(self.interval)
        )
        if self.steps >= 100:
            self.done = True
            handle.invalidate()
            self.invalidate()
            self.complete(self.config.action)
            self.rest()

    def render(self) -> list[SceneItem]:
        s = self.config.size
        c = (s / 2, s / 2)
        r = s / 2 - s / 20
        items: list[SceneItem] = [
            Stroke(circle(c, r), self.config.color, s / 10, alpha=0.3),
            Stroke(
                ring_arc(c, r, 0.0, self.progress.value, 270.0),
                self.config.color,
                s / 10,
                cap="round",
            ),
        ]
        if self.done:
            items.append(Stroke(checkmark(c, s / 4), self.config.color, s / 40, cap="round"))
        else:
            items.append(Label(f"{self.steps}%", c, s / 5, self.config.color))
        return items


class WaveButton(Widget):
    """Circle filled with a rolling wave; each tap raises the level by ten percent.

    The first tap starts the wave rolling (one full phase every 2 s, forever).
    Taps never restart it. At 100 percent the next tap drains back to zero.
    """

    interactive = True

    def __init__(self, config: WaveButtonConfig | None = None) -> None:
        super().__init__(config or WaveButtonConfig())
        self.offset = self.param("offset", 0.0, 0.0, 360.0)
        self.percent = self.param("percent", 50.0, 0.0, 100.0)

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    def hit(self, point: Point) -> bool:
        s = self.config.size
        return math.dist(point, (s / 2, s / 2)) <= s / 2

    def pressed(self, point: Point | None) -> None:
        self.dispatch(self.config.action)
        if self.state == IDLE:
            self.lifecycle.to(RUNNING)
        if not self.transitions.active(self.offset):
            self.transitions.animate(
                self.offset, 360.0, Animation.linear(2.0).repeat_forever(autoreverses=False)
            )
        current = self.percent.value
        self.transitions.set(self.percent, 0.0 if current >= 100 else current + 10)

    def render(self) -> list[SceneItem]:
        s = self.config.size
        c = (s / 2, s / 2)
        wave_h = 0.015 * s
        level = (1 - self.percent.value / 100) * (s - wave_h)
        surface = wave_fill(
            s, wave_h, s, math.radians(self.offset.value), level, s, step=max(1.0, s / 100)
        )
        return [
            Label(f"{int(self.percent.value)}%", c, s * 0.4, WHITE),
            Stroke(circle(c, s / 2 - 1), self.config.wave_color, 2),
            Fill(surface, self.config.wave_color, 0.5, clip=circle(c, s / 2)),
        ]


class BubbleButton(Widget):
    """Bubble that pops when tapped and reappears.

    Popping grows the bubble to 1.2x while it fades out (ease-out, 0.5 s).
    Then it hides, dispatches the action, and comes back 0.2 s later.
    """

    interactive = True

    def __init__(self, config: BubbleButtonConfig | None = None) -> None:
        super().__init__(config or BubbleButtonConfig())
        self.pop = self.param("pop", 0.0, 0.0, 1.0)
        self.visible = self.param("visible", 1.0, 0.0, 1.0)

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.size, self.config.size)

    def hit(self, point: Point) -> bool:
        s = self.config.size
        return math.dist(point, (s / 2, s / 2)) <= s / 2

    def begin(self) -> None:
        self.transitions.set(self.pop, 0.0)
        self.visible.value = 1.0
        self.transitions.animate(self.pop, 1.0, Animation.ease_out(0.5))
        self.timers.after("hide", 0.5, self._hide)

    def _hide(self, handle: TimerHandle) -> None:
        self.visible.value = 0.0
        self.complete(self.config.action)
        self.timers.after("restore", 0.2, self._restore)

    def _restore(self, handle: TimerHandle) -> None:
        self.transitions.set(self.pop, 0.0)
        self.visible.value = 1.0
        self.lifecycle.to(RESETTING)
        self.rest()

    def render(self) -> list[SceneItem]:
        if not self.visible.value:
            return []
        s = self.config.size
        c = (s / 2, s / 2)
        pop = self.pop.value
        k = 1 + 0.2 * pop
        alpha = 1 - pop
        color = self.config.color
        body = circle(c, s / 2 * k)
        glint = circle((c[0] - s / 3 * k, c[1] - s / 5 * k), s / 28 * k)
        streak = (
            ellipse((c[0] - s / 2.5, c[1] - s / 10), s / 20, s / 10)
            .rotate(40.0, c)
            .scale(k, origin=c)
        )
        return [
            Fill(
                body,
                RadialGradient((with_alpha(color, 0.6), with_alpha(color, 0.3)), c, s / 2 * k),
                alpha,
            ),
            Stroke(body, color, 4, alpha),
            Fill(glint, WHITE, 0.5 * alpha),
            Fill(streak, WHITE, 0.8 * alpha),
        ]


class FluidLoadingButton(Widget):
    """Capsule that fills with two rolling waves, then reads "100%".

    Every 0.03 s the wave phase advances by 0.01 and the fluid rises by
    ``fluid_speed`` points. The fluid starts ``height / 2 + wave_height``
    below center and is full at the same distance above it.
    """

    interactive = True
    TICK = 0.03

    def __init__(self, config: FluidLoadingButtonConfig | None = None) -> None:
        super().__init__(config or FluidLoadingButtonConfig())
        cfg = self.config
        self.floor = -cfg.height / 2 - cfg.wave_height
        self.ceiling = cfg.height / 2 + cfg.wave_height
        self.time = self.param("time", 0.0)
        self.offset_y = self.param("offset_y", 0.0, self.floor, self.ceiling)
        self.filled = False
        self.loading = False
        self._level = 0.0

    @property
    def width(self) -> float:
        return self.config.height / 3

    @property
    def size(self) -> tuple[float, float]:
        h = self.config.height
        return (self.width, h + h / 30 + h / 15 * 1.2)

    def hit(self, point: Point) -> bool:
        return 0 <= point[0] <= self.width and 0 <= point[1] <= self.config.height

    def begin(self) -> None:
        self.filled = False
        self.loading = True
        self._level = self.ceiling
        self.transitions.set(self.offset_y, self._level)
        self.invalidate()
        self.timers.schedule("fill", self.TICK, self._rise)

    def _rise(self, handle: TimerHandle) -> None:
        self.time.value += 0.01
        self._level -= self.config.fluid_speed
        if self._level <= self.floor:
            self._level = self.floor
            self.transitions.set(self.offset_y, self.floor)
            self.filled = True
            self.loading = False
            handle.invalidate()
            self.invalidate()
            self.complete(self.config.action)
            self.rest()
            return
        self.transitions.animate(self.offset_y, self._level, Animation.linear(self.TICK))

    def render(self) -> list[SceneItem]:
        cfg = self.config
        w = self.width
        h = cfg.height
        shell = capsule(0, 0, w, h)
        baseline = h / 2 + self.offset_y.value
        step = max(1.0, w / 60)
        phase = 4 * math.pi * self.time.value

        def fluid(phase: float):
            return wave_fill(w, cfg.wave_height, h / 2, phase, baseline, 2 * h, step)

        items: list[SceneItem] = [
            Fill(shell, WHITE),
            Fill(fluid(phase * 1.2), cfg.background, 0.4, clip=shell),
            Fill(fluid(phase), cfg.foreground_paint, 0.2, clip=shell),
        ]
        if self.filled:
            items.append(Label("100%", (w / 2, h / 2), h / 10, cfg.background, bold=True))
        items.append(
            Label(
                "Loading...",
                (w / 2, h + h / 30 + h / 30),
                h / 15,
                cfg.background,
                1.0 if self.loading else 0.0,
                bold=True,
                italic=True,
            )
        )
        return items


class LikeButton(Widget):
    """Heart with a like counter.

    Liking pops the heart to 1.1x on a spring and settles it at 1.0 after
    0.3 s; unliking shrinks it back to 0.7x. The counter shows
    ``initial_likes`` plus one while liked. The action runs on every tap.
    """

    interactive = True
    POP = Animation.spring(0.3, 0.6)
    SHRINK = Animation.ease_in_out(0.2)

    def __init__(self, config: LikeButtonConfig | None = None) -> None:
        super().__init__(config or LikeButtonConfig())
        self.scale = self.param("scale", 0.7)
        self.liked = False
        self.likes = self.config.initial_likes

    @property
    def size(self) -> tuple[float, float]:
        s = self.config.size
        digits = len(str(self.config.initial_likes + 1))
        return (s * 1.2 + s * 0.3 * digits, s)

    def hit(self, point: Point) -> bool:
        s = self.config.size
        return 0 <= point[0] <= s and 0 <= point[1] <= s

    def pressed(self, point: Point | None) -> None:
        self.liked = not self.liked
        self.start()

    def begin(self) -> None:
        if self.liked:
            self.transitions.animate(self.scale, 1.1, self.POP)
        else:
            self.transitions.animate(self.scale, 0.7, self.SHRINK)
        self.likes = self.config.initial_likes + (1 if self.liked else 0)
        self.invalidate()
        self.dispatch(self.config.action)
        self.timers.after("settle", 0.3, self._settle)

    def _settle(self, handle: TimerHandle) -> None:
        if self.liked:
            self.transitions.animate(self.scale, 1.0, self.POP)
        self.rest()

    def render(self) -> list[SceneItem]:
        s = self.config.size
        cfg = self.config
        color = cfg.active_color if self.liked else cfg.inactive_color
        return [
            Fill(heart((s / 2, s / 2), s * self.scale.value), color),
            Label(str(self.likes), (s * 1.2 + s * 0.3, s / 2), s / 2, cfg.inactive_color),
        ]
