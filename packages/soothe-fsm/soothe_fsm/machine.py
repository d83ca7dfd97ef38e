"""Component lifecycle state machine."""
from __future__ import annotations

import logging
from typing import Callable

from soothe_fsm.components import COMPLETING, IDLE, RUNNING, TRANSITIONS

logger = logging.getLogger(__name__)

_Hook = Callable[[str, str], None]


class LifecycleError(ValueError):
    """Raised on a transition the table does not allow."""


class Lifecycle:
    """Idle -> Running -> Completing -> (Resetting -> Idle | Idle).

    ``cycles`` counts entries into running, ``completions`` counts entries
    into completing.
    """

    def __init__(
        self,
        owner: str = "component",
        transitions: dict[str, tuple[str, ...]] | None = None,
    ) -> None:
        self._owner = owner
        self._transitions = transitions if transitions is not None else TRANSITIONS
        self._state = IDLE
        self._hooks: list[_Hook] = []
        self.cycles = 0
        self.completions = 0

    @property
    def state(self) -> str:
        return self._state

    def can(self, target: str) -> bool:
        return target in self._transitions.get(self._state, ())

    def to(self, target: str) -> None:
        if not self.can(target):
            raise LifecycleError(
                f"{self._owner}: cannot go from {self._state!r} to {target!r}"
            )
        self._enter(target)

    def stop(self) -> None:
        """Force idle from any state."""
        if self._state != IDLE:
            self._enter(IDLE)

    def on_transition(self, hook: _Hook) -> None:
        self._hooks.append(hook)

    def _enter(self, target: str) -> None:
        old = self._state
        self._state = target
        if target == RUNNING:
            self.cycles += 1
        elif target == COMPLETING:
            self.completions += 1
        logger.debug("%s: %s -> %s", self._owner, old, target)
        for hook in self._hooks:
            hook(old, target)
