"""Lifecycle states and transition table."""
from __future__ import annotations

IDLE = "idle"
RUNNING = "running"
COMPLETING = "completing"
RESETTING = "resetting"

STATES = (IDLE, RUNNING, COMPLETING, RESETTING)

# Allowed edges. running -> running is a restart.
TRANSITIONS: dict[str, tuple[str, ...]] = {
    IDLE: (RUNNING,),
    RUNNING: (RUNNING, COMPLETING, IDLE),
    COMPLETING: (RESETTING, IDLE),
    RESETTING: (RUNNING, IDLE),
}
