"""Widget - one configured, self-contained animated component."""
from __future__ import annotations

import logging
from typing import Any, Callable, ClassVar

from soothe import FrameContext, Timers
from soothe_fsm import COMPLETING, IDLE, RESETTING, RUNNING, Lifecycle
from soothe_shapes import Point
from soothe_signal import RedrawBus
from soothe_tween import Param, Transitions

from soothe_widgets.scene import SceneItem

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class Widget:
    """Base for every component.

    A widget owns its timers, transitions, lifecycle and params outright;
    nothing is shared between instances. Param writes mark the widget dirty
    and, once mounted, request a redraw on the loop's bus, so any number of
    writes within one tick cost a single ``render()``.

    Subclasses set ``interactive`` for tap-driven buttons, implement
    ``size``, ``render()`` and ``begin()``, and override ``pressed()`` when
    interactive. Passive widgets start on ``appear()``.
    """

    interactive: ClassVar[bool] = False

    def __init__(self, config: Any) -> None:
        self.config = config
        self.timers = Timers()
        self.transitions = Transitions()
        self.lifecycle = Lifecycle(type(self).__name__)
        self.redraws = 0
        self._params: dict[str, Param] = {}
        self._bus: RedrawBus | None = None
        self._scene: list[SceneItem] | None = None
        self._dirty = True
        self._queue: list[Callback] = []
        self._removed = False

    # -- Params --

    def param(
        self,
        name: str,
        value: float,
        lo: float | None = None,
        hi: float | None = None,
        wrap: bool = False,
    ) -> Param:
        if name in self._params:
            raise ValueError(f"{type(self).__name__}: duplicate param {name!r}")
        p = Param(name, value, lo, hi, wrap)
        p.subscribe(self._on_param)
        self._params[name] = p
        return p

    def values(self) -> dict[str, float]:
        return {name: p.value for name, p in self._params.items()}

    def _on_param(self, param: Param) -> None:
        self.invalidate()

    def invalidate(self) -> None:
        self._dirty = True
        if self._bus is not None:
            self._bus.request(self)

    # -- Rendering --

    @property
    def size(self) -> tuple[float, float]:
        raise NotImplementedError

    def render(self) -> list[SceneItem]:
        raise NotImplementedError

    def redraw(self) -> None:
        self._scene = self.render()
        self._dirty = False
        self.redraws += 1

    @property
    def scene(self) -> list[SceneItem]:
        """Current scene, re-rendered first if a param changed since the last redraw."""
        if self._scene is None or self._dirty:
            self.redraw()
        assert self._scene is not None
        return list(self._scene)

    def hit(self, point: Point) -> bool:
        w, h = self.size
        return 0 <= point[0] <= w and 0 <= point[1] <= h

    # -- Loop protocol --

    def attach(self, bus: RedrawBus) -> None:
        self._bus = bus
        self.invalidate()

    def detach(self) -> None:
        self._bus = None

    def appear(self) -> None:
        self._removed = False
        if not self.interactive:
            self.start()

    def disappear(self) -> None:
        """Stop and drop queued callbacks; nothing fires until the next appear."""
        self._removed = True
        self._queue.clear()
        self.stop()

    def tick(self, ctx: FrameContext) -> None:
        self.timers.advance(ctx.dt)
        self.transitions.advance(ctx.dt)

    def dispatch(self, callback: Callback | None) -> None:
        """Queue a caller callback to run after this tick's redraws."""
        if callback is not None and not self._removed:
            self._queue.append(callback)

    def drain(self) -> None:
        pending, self._queue = self._queue, []
        for callback in pending:
            try:
                callback()
            except Exception:
                logger.exception("%s callback failed", type(self).__name__)

    # -- Lifecycle --

    @property
    def state(self) -> str:
        return self.lifecycle.state

    def start(self) -> None:
        """Begin a fresh cycle, invalidating every handle from the previous one."""
        self.timers.cancel_all()
        self.transitions.cancel_all()
        if self.lifecycle.state == COMPLETING:
            self.lifecycle.to(RESETTING)
        self.lifecycle.to(RUNNING)
        self.begin()

    def begin(self) -> None:
        pass

    def stop(self) -> None:
        self.timers.cancel_all()
        self.transitions.cancel_all()
        self.lifecycle.stop()

    def complete(self, callback: Callback | None = None) -> None:
        """Enter completing and dispatch ``callback`` once for this cycle."""
        self.lifecycle.to(COMPLETING)
        self.dispatch(callback)

    def rest(self) -> None:
        if self.lifecycle.state != IDLE:
            self.lifecycle.to(IDLE)

    def recycle(self) -> None:
        """Loop back from completing into a new running cycle, keeping handles."""
        self.lifecycle.to(RESETTING)
        self.lifecycle.to(RUNNING)

    def tap(self, point: Point | None = None) -> bool:
        """Activate the widget. Returns whether the tap was handled."""
        if not self.interactive:
            return False
        if point is not None and not self.hit(point):
            return False
        self.pressed(point)
        return True

    def pressed(self, point: Point | None) -> None:
        self.start()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.config!r})"
