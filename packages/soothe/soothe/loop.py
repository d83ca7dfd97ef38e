"""AnimationLoop - fixed-timestep loop, pacing, and lifecycle hooks."""

import logging
import time
from typing import Callable

from soothe_signal import RedrawBus

from soothe.clock import Clock
from soothe.types import Animated, FrameContext

logger = logging.getLogger(__name__)

Hook = Callable[[FrameContext], None]


class AnimationLoop:
    def __init__(self, tps: int = 60) -> None:
        self._clock = Clock(tps)
        self._bus = RedrawBus()
        self._widgets: list[Animated] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._frame_hooks: list[Hook] = []
        self._stop_requested: bool = False
        self._bus.subscribe(self._redraw)

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def redraw_bus(self) -> RedrawBus:
        return self._bus

    @property
    def widgets(self) -> tuple[Animated, ...]:
        return tuple(self._widgets)

    def mount(self, widget: Animated) -> None:
        if widget in self._widgets:
            return
        self._widgets.append(widget)
        widget.attach(self._bus)
        widget.appear()
        logger.debug("Mounted %s", type(widget).__name__)

    def unmount(self, widget: Animated) -> None:
        if widget not in self._widgets:
            return
        self._widgets.remove(widget)
        widget.disappear()
        widget.detach()
        logger.debug("Unmounted %s", type(widget).__name__)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def on_frame(self, hook: Hook) -> None:
        self._frame_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _redraw(self, widget: Animated) -> None:
        try:
            widget.redraw()
        except Exception:
            logger.exception("%s failed to redraw; stopping it", type(widget).__name__)
            widget.stop()

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self.request_stop)
        for widget in list(self._widgets):
            try:
                widget.tick(ctx)
            except Exception:
                # One broken component must not take its siblings down.
                logger.exception(
                    "%s failed on tick %d; stopping it",
                    type(widget).__name__,
                    ctx.tick_number,
                )
                widget.stop()
        self._bus.flush()
        for widget in list(self._widgets):
            widget.drain()
        for hook in self._frame_hooks:
            hook(ctx)

    def step(self) -> None:
        self._stop_requested = False
        self._tick()

    def _fire(self, hooks: list[Hook]) -> None:
        ctx = self._clock.context(self.request_stop)
        for hook in hooks:
            hook(ctx)

    def run(self, n: int) -> None:
        self._stop_requested = False
        self._fire(self._start_hooks)
        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break
        self._fire(self._stop_hooks)

    def run_for(self, seconds: float) -> None:
        """Run as many ticks as fit in ``seconds`` of simulated time."""
        self.run(self._clock.ticks_for(seconds))

    def run_forever(self) -> None:
        """Tick in real time until a hook or widget requests a stop."""
        self._stop_requested = False
        self._fire(self._start_hooks)
        deadline = time.monotonic()
        while not self._stop_requested:
            self._tick()
            deadline += self._clock.dt
            # A late tick resets the deadline instead of bursting to catch up.
            remaining = deadline - time.monotonic()
            if remaining > 0:
                time.sleep(remaining)
            else:
                deadline = time.monotonic()
        self._fire(self._stop_hooks)
