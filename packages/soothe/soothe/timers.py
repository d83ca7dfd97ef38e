"""Discrete repeating and one-shot timers owned by a single component."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

logger = logging.getLogger(__name__)

# Accumulated float error tolerated when comparing elapsed time to an interval.
_EPSILON = 1e-9


@dataclass
class TimerHandle:
    """A scheduled timer. Fires every ``interval`` seconds until invalidated."""

    name: str
    interval: float
    callback: Callable[[TimerHandle], None] = field(repr=False)
    repeats: bool = True
    elapsed: float = 0.0
    fired: int = 0
    valid: bool = True

    def invalidate(self) -> None:
        self.valid = False


class Timers:
    """Named timer registry. At most one live handle per name."""

    def __init__(self) -> None:
        self._handles: dict[str, TimerHandle] = {}

    def schedule(
        self,
        name: str,
        interval: float,
        callback: Callable[[TimerHandle], None],
        repeats: bool = True,
    ) -> TimerHandle:
        """Create a timer, invalidating any previous handle with the same name first."""
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        self.cancel(name)
        handle = TimerHandle(
            name=name, interval=interval, callback=callback, repeats=repeats
        )
        self._handles[name] = handle
        return handle

    def after(
        self, name: str, delay: float, callback: Callable[[TimerHandle], None]
    ) -> TimerHandle:
        """One-shot timer firing once after ``delay`` seconds."""
        return self.schedule(name, delay, callback, repeats=False)

    def cancel(self, name: str) -> None:
        handle = self._handles.pop(name, None)
        if handle is not None:
            handle.invalidate()
            logger.debug("Timer %r cancelled after %d fires", name, handle.fired)

    def cancel_all(self) -> None:
        for name in list(self._handles):
            self.cancel(name)

    def get(self, name: str) -> TimerHandle | None:
        return self._handles.get(name)

    def active(self) -> list[str]:
        return [name for name, h in self._handles.items() if h.valid]

    def __contains__(self, name: object) -> bool:
        handle = self._handles.get(name)  # type: ignore[arg-type]
        return handle is not None and handle.valid

    def __len__(self) -> int:
        return len(self.active())

    def advance(self, dt: float) -> None:
        for handle in list(self._handles.values()):
            if not handle.valid:
                continue
            handle.elapsed += dt
            while handle.valid and handle.elapsed >= handle.interval - _EPSILON:
                handle.elapsed = max(handle.elapsed - handle.interval, 0.0)
                handle.fired += 1
                if not handle.repeats:
                    handle.invalidate()
                handle.callback(handle)
            if not handle.valid and self._handles.get(handle.name) is handle:
                del self._handles[handle.name]
