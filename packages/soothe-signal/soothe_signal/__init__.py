"""soothe-signal - Batched redraw scheduling for animated components."""
from __future__ import annotations

from soothe_signal.bus import RedrawBus

__all__ = ["RedrawBus"]
