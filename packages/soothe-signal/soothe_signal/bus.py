"""Redraw requests with per-tick batching."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[Any], None]


class RedrawBus:
    """Collects redraw requests and delivers each dirty source once per flush."""

    def __init__(self) -> None:
        self._subscribers: list[_Handler] = []
        self._queue: dict[int, Any] = {}

    def subscribe(self, handler: _Handler) -> None:
        self._subscribers.append(handler)

    def unsubscribe(self, handler: _Handler) -> None:
        try:
            self._subscribers.remove(handler)
        except ValueError:
            pass

    def request(self, source: Any) -> None:
        # Keyed by identity so sources need not be hashable.
        self._queue.setdefault(id(source), source)

    def pending(self) -> list[Any]:
        return list(self._queue.values())

    def flush(self) -> int:
        """Deliver queued sources to every subscriber. Returns the number delivered."""
        snapshot = self._queue
        self._queue = {}
        for source in snapshot.values():
            for handler in list(self._subscribers):
                handler(source)
        return len(snapshot)

    def clear(self) -> None:
        self._queue.clear()
