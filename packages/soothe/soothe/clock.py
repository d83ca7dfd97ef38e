"""Clock and FrameContext for the fixed-timestep animation loop."""

from typing import Callable

from soothe.types import FrameContext


def _noop() -> None:
    pass


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._tick_number * self._dt

    def ticks_for(self, seconds: float) -> int:
        """Whole ticks covering ``seconds`` of animation time."""
        return round(seconds * self._tps)

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(self, stop_fn: Callable[[], None] = _noop) -> FrameContext:
        return FrameContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self.elapsed,
            request_stop=stop_fn,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
