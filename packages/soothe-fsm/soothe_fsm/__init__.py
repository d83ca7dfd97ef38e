"""soothe-fsm - Lifecycle state machine for animated components."""
from __future__ import annotations

from soothe_fsm.components import (
    COMPLETING,
    IDLE,
    RESETTING,
    RUNNING,
    STATES,
    TRANSITIONS,
)
from soothe_fsm.machine import Lifecycle, LifecycleError

__all__ = [
    "Lifecycle",
    "LifecycleError",
    "IDLE",
    "RUNNING",
    "COMPLETING",
    "RESETTING",
    "STATES",
    "TRANSITIONS",
]
