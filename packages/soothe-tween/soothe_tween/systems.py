"""Per-component transition driver."""
from __future__ import annotations

import logging
import math
from typing import Callable

from soothe_tween.components import Animation, Transition
from soothe_tween.params import Param

logger = logging.getLogger(__name__)


def progress_at(animation: Animation, t: float) -> float:
    """Eased progress of ``animation`` after ``t`` seconds (delay included)."""
    t -= animation.delay
    if t <= 0:
        return animation.curve()(0.0)
    span = animation.pass_duration
    if not animation.repeats:
        return animation.curve()(min(t / span, 1.0))
    cycles = t / span
    index = math.floor(cycles)
    u = cycles - index
    if animation.autoreverses and index % 2 == 1:
        u = 1.0 - u
    return animation.curve()(u)


def finished(animation: Animation, t: float) -> bool:
    return not animation.repeats and t - animation.delay >= animation.pass_duration


class Transitions:
    """Drives parameters owned by one component. One transition per parameter."""

    def __init__(self) -> None:
        self._active: dict[str, Transition] = {}

    def animate(
        self,
        param: Param,
        to: float,
        animation: Animation,
        on_done: Callable[[], None] | None = None,
    ) -> Transition:
        """Start moving ``param`` to ``to``, replacing whatever drove it before."""
        self.cancel(param)
        transition = Transition(
            param=param,
            start=param.value,
            end=to,
            animation=animation,
            on_done=on_done,
        )
        self._active[param.name] = transition
        return transition

    def set(self, param: Param, value: float) -> None:
        """Assign without animating."""
        self.cancel(param)
        param.value = value

    def cancel(self, param: Param) -> None:
        self._active.pop(param.name, None)

    def cancel_all(self) -> None:
        self._active.clear()

    def active(self, param: Param | None = None) -> bool:
        if param is None:
            return bool(self._active)
        return param.name in self._active

    def get(self, param: Param) -> Transition | None:
        return self._active.get(param.name)

    def __len__(self) -> int:
        return len(self._active)

    def advance(self, dt: float) -> None:
        for name, transition in list(self._active.items()):
            # Skip entries cancelled or replaced earlier in this pass.
            if self._active.get(name) is not transition:
                continue
            transition.elapsed += dt
            animation = transition.animation
            if transition.elapsed < animation.delay:
                continue

            if finished(animation, transition.elapsed):
                transition.param.value = transition.end
                if self._active.get(name) is transition:
                    del self._active[name]
                if transition.on_done is not None:
                    transition.on_done()
                continue

            eased = progress_at(animation, transition.elapsed)
            transition.param.value = (
                transition.start + (transition.end - transition.start) * eased
            )
