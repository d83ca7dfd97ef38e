"""Animation descriptor and Transition record."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Callable

from soothe_tween.easing import EASINGS, Easing
from soothe_tween.easing import interpolating_spring as _interpolating_spring
from soothe_tween.easing import spring as _spring
from soothe_tween.params import Param


@dataclass(frozen=True)
class Animation:
    """How a parameter moves toward its target.

    Attributes:
        duration: Seconds for one pass from start to end, before ``speed``.
        easing: Name in ``EASINGS`` or a curve callable.
        delay: Seconds to wait before the first pass; applied once.
        repeats: Loop forever instead of finishing.
        autoreverses: With ``repeats``, play every other pass backwards.
        speed: Playback rate multiplier; 2.0 halves every pass.
    """

    duration: float
    easing: str | Easing = "ease_in_out"
    delay: float = 0.0
    repeats: bool = False
    autoreverses: bool = False
    speed: float = 1.0

    def __post_init__(self) -> None:
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")
        if isinstance(self.easing, str) and self.easing not in EASINGS:
            raise ValueError(f"Unknown easing: {self.easing!r}")

    @classmethod
    def linear(cls, duration: float) -> Animation:
        return cls(duration, "linear")

    @classmethod
    def ease_in(cls, duration: float) -> Animation:
        return cls(duration, "ease_in")

    @classmethod
    def ease_out(cls, duration: float) -> Animation:
        return cls(duration, "ease_out")

    @classmethod
    def ease_in_out(cls, duration: float) -> Animation:
        return cls(duration, "ease_in_out")

    @classmethod
    def spring(cls, response: float = 0.55, damping_fraction: float = 0.825) -> Animation:
        settle, curve = _spring(response, damping_fraction)
        return cls(settle, curve)

    @classmethod
    def interpolating_spring(
        cls, mass: float, stiffness: float, damping: float
    ) -> Animation:
        settle, curve = _interpolating_spring(mass, stiffness, damping)
        return cls(settle, curve)

    def repeat_forever(self, autoreverses: bool = True) -> Animation:
        return replace(self, repeats=True, autoreverses=autoreverses)

    def delayed(self, seconds: float) -> Animation:
        return replace(self, delay=seconds)

    def with_speed(self, factor: float) -> Animation:
        return replace(self, speed=factor)

    @property
    def pass_duration(self) -> float:
        return self.duration / self.speed

    def curve(self) -> Easing:
        if callable(self.easing):
            return self.easing
        return EASINGS[self.easing]


@dataclass
class Transition:
    """A parameter moving from ``start`` to ``end`` under ``animation``."""

    param: Param
    start: float
    end: float
    animation: Animation
    elapsed: float = 0.0
    on_done: Callable[[], None] | None = field(default=None, repr=False)
