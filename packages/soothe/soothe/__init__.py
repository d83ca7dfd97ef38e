"""soothe - Fixed-timestep animation clock for decorative UI components."""

from soothe.clock import Clock
from soothe.loop import AnimationLoop
from soothe.timers import TimerHandle, Timers
from soothe.types import Animated, Color, ConfigError, FrameContext

__all__ = [
    "AnimationLoop",
    "Clock",
    "FrameContext",
    "Timers",
    "TimerHandle",
    "Animated",
    "Color",
    "ConfigError",
]
