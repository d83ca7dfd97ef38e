"""Shared type aliases and errors for the animation core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol

Color = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class FrameContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]


class ConfigError(ValueError):
    """Raised when a component is constructed with an invalid configuration."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class Animated(Protocol):
    """What the animation loop needs from a mounted component."""

    def attach(self, bus: RedrawBus) -> None: ...

    def detach(self) -> None: ...

    def appear(self) -> None: ...

    def disappear(self) -> None: ...

    def stop(self) -> None: ...

    def tick(self, ctx: FrameContext) -> None: ...

    def drain(self) -> None: ...

    def redraw(self) -> None: ...


if TYPE_CHECKING:
    from soothe_signal import RedrawBus
