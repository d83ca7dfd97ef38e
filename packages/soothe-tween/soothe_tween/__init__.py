"""soothe-tween - Animated parameters and eased transitions."""
from __future__ import annotations

from soothe_tween.components import Animation, Transition
from soothe_tween.easing import EASINGS, interpolating_spring, spring
from soothe_tween.params import Param
from soothe_tween.systems import Transitions, progress_at

__all__ = [
    "Animation",
    "Transition",
    "Transitions",
    "Param",
    "EASINGS",
    "spring",
    "interpolating_spring",
    "progress_at",
]
