"""Immutable component configurations, validated on construction."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from soothe import ConfigError

from soothe_widgets.config import PALETTE, color, colors, count, positive
from soothe_widgets.scene import RGB, LinearGradient

Action = Callable[[], None]


def _action() -> Any:
    return field(default=None, repr=False, compare=False)


# -- Buttons --


@dataclass(frozen=True)
class ProgressButtonConfig:
    duration: float = 1.0
    size: float = 100.0
    color: RGB = PALETTE["blue"]
    action: Action | None = _action()

    def __post_init__(self) -> None:
        positive("duration", self.duration)
        positive("size", self.size)
        color("color", self.color)


@dataclass(frozen=True)
class WaveButtonConfig:
    size: float = 100.0
    wave_color: RGB = PALETTE["blue"]
    action: Action | None = _action()

    def __post_init__(self) -> None:
        positive("size", self.size)
        color("wave_color", self.wave_color)


@dataclass(frozen=True)
class BubbleButtonConfig:
    size: float = 100.0
    color: RGB = PALETTE["blue"]
    action: Action | None = _action()

    def __post_init__(self) -> None:
        positive("size", self.size)
        color("color", self.color)


@dataclass(frozen=True)
class FluidLoadingButtonConfig:
    """``fluid_speed`` is the rise in points per 0.03 s fill tick."""

    height: float = 350.0
    fluid_speed: float = 1.5
    wave_height: float = 20.0
    foreground: tuple[RGB, ...] = (PALETTE["blue"], PALETTE["pink"])
    background: RGB = PALETTE["purple"]
    action: Action | None = _action()

    def __post_init__(self) -> None:
        positive("height", self.height)
        positive("fluid_speed", self.fluid_speed)
        positive("wave_height", self.wave_height)
        object.__setattr__(self, "foreground", colors("foreground", self.foreground))
        color("background", self.background)

    @property
    def foreground_paint(self) -> LinearGradient:
        """Top-to-bottom gradient across the capsule."""
        stops = self.foreground if len(self.foreground) > 1 else self.foreground * 2
        return LinearGradient(stops, (0.0, 0.0), (0.0, self.height))


@dataclass(frozen=True)
class LikeButtonConfig:
    initial_likes: int = 0
    size: float = 50.0
    active_color: RGB = PALETTE["pink"]
    inactive_color: RGB = PALETTE["gray"]
    action: Action | None = _action()

    def __post_init__(self) -> None:
        count("initial_likes", self.initial_likes, 0)
        positive("size", self.size)
        color("active_color", self.active_color)
        color("inactive_color", self.inactive_color)


# -- Spinners and loaders --


@dataclass(frozen=True)
class HarmonySpinnerConfig:
    """``rotation_time`` is the length of one sweep; the cycle reverses after it."""

    rotation_time: float = 2.0
    size: float = 100.0
    colors: tuple[RGB, ...] = (PALETTE["blue"], PALETTE["purple"], PALETTE["pink"])

    def __post_init__(self) -> None:
        positive("rotation_time", self.rotation_time)
        positive("size", self.size)
        object.__setattr__(self, "colors", colors("colors", self.colors))


@dataclass(frozen=True)
class EternalLoaderConfig:
    """``animation_duration`` covers ten 0.05 head advances."""

    size: float = 100.0
    stroke_width: float = 8.0
    color: RGB = PALETTE["pink"]
    animation_duration: float = 2.0

    def __post_init__(self) -> None:
        positive("size", self.size)
        positive("stroke_width", self.stroke_width)
        color("color", self.color)
        positive("animation_duration", self.animation_duration)


@dataclass(frozen=True)
class SandglassLoaderConfig:
    """One sand pour takes ``animation_duration``; a full cycle takes 1.8x that."""

    size: float = 100.0
    frame_color: RGB = PALETTE["black"]
    sand_color: RGB = PALETTE["pink"]
    animation_duration: float = 2.5

    def __post_init__(self) -> None:
        positive("size", self.size)
        color("frame_color", self.frame_color)
        color("sand_color", self.sand_color)
        positive("animation_duration", self.animation_duration)


@dataclass(frozen=True)
class RotatingLoaderConfig:
    large_circle_size: float = 100.0
    small_circle_size: float = 50.0
    color: RGB = PALETTE["pink"]
    animation_duration: float = 2.0

    def __post_init__(self) -> None:
        positive("large_circle_size", self.large_circle_size)
        positive("small_circle_size", self.small_circle_size)
        if self.small_circle_size > self.large_circle_size:
            raise ConfigError(
                "small_circle_size",
                f"must not exceed large_circle_size ({self.large_circle_size})",
            )
        color("color", self.color)
        positive("animation_duration", self.animation_duration)


@dataclass(frozen=True)
class SwingLoaderConfig:
    """``duration`` is one swing from left to right."""

    size: float = 100.0
    duration: float = 1.5
    loader_color: RGB = PALETTE["black"]
    background_circle_color: RGB = PALETTE["pink"]

    def __post_init__(self) -> None:
        positive("size", self.size)
        positive("duration", self.duration)
        color("loader_color", self.loader_color)
        color("background_circle_color", self.background_circle_color)


@dataclass(frozen=True)
class PulsingCapsulesConfig:
    """``animation_duration`` is one sweep there and back across all capsules."""

    capsule_width: float = 10.0
    capsule_height: float = 40.0
    color: RGB = PALETTE["pink"]
    number_of_capsules: int = 5
    animation_duration: float = 2.0

    def __post_init__(self) -> None:
        positive("capsule_width", self.capsule_width)
        positive("capsule_height", self.capsule_height)
        color("color", self.color)
        count("number_of_capsules", self.number_of_capsules, 2)
        positive("animation_duration", self.animation_duration)


@dataclass(frozen=True)
class RippleEffectConfig:
    color: RGB = PALETTE["black"]
    size: float = 50.0
    duration: float = 0.5

    def __post_init__(self) -> None:
        color("color", self.color)
        positive("size", self.size)
        positive("duration", self.duration)


@dataclass(frozen=True)
class RotatingCirclesConfig:
    """``duration`` is a full spread-and-gather cycle."""

    size: float = 100.0
    colors: tuple[RGB, ...] = (PALETTE["blue"], PALETTE["pink"], PALETTE["purple"])
    duration: float = 2.0

    def __post_init__(self) -> None:
        positive("size", self.size)
        object.__setattr__(self, "colors", colors("colors", self.colors))
        positive("duration", self.duration)


@dataclass(frozen=True)
class RotatingGradientLoaderConfig:
    main_circle_size: float = 100.0
    rotation_line_size: float = 110.0
    capsule_width: float = 6.0
    gradient_colors: tuple[RGB, ...] = (PALETTE["pink"], PALETTE["blue"])

    def __post_init__(self) -> None:
        positive("main_circle_size", self.main_circle_size)
        positive("rotation_line_size", self.rotation_line_size)
        positive("capsule_width", self.capsule_width)
        object.__setattr__(
            self, "gradient_colors", colors("gradient_colors", self.gradient_colors)
        )


@dataclass(frozen=True)
class AnimatedGradientCirclesConfig:
    """``animation_speed`` 20 plays one pulse in 0.35 s; lower is slower."""

    size: float = 100.0
    primary_color: RGB = PALETTE["pink"]
    secondary_color: RGB = PALETTE["blue"]
    animation_speed: float = 1.8

    def __post_init__(self) -> None:
        positive("size", self.size)
        color("primary_color", self.primary_color)
        color("secondary_color", self.secondary_color)
        positive("animation_speed", self.animation_speed)


@dataclass(frozen=True)
class GhostLoaderConfig:
    ghost_size: float = 60.0
    ghost_color: RGB = PALETTE["white"]

    def __post_init__(self) -> None:
        positive("ghost_size", self.ghost_size)
        color("ghost_color", self.ghost_color)


@dataclass(frozen=True)
class FaceAnimationConfig:
    size: float = 100.0
    face_color: RGB = PALETTE["pink"]

    def __post_init__(self) -> None:
        positive("size", self.size)
        color("face_color", self.face_color)


# -- Navigation --


@dataclass(frozen=True)
class NavigationBarItem:
    icon: str
    color: RGB
    action: Action | None = _action()

    def __post_init__(self) -> None:
        if not self.icon:
            raise ConfigError("icon", "must be non-empty")
        color("color", self.color)


@dataclass(frozen=True)
class NavigationBarConfig:
    width: float = 300.0
    height: float = 65.0
    items: tuple[NavigationBarItem, ...] = ()

    def __post_init__(self) -> None:
        positive("width", self.width)
        positive("height", self.height)
        object.__setattr__(self, "items", tuple(self.items))
        if not self.items:
            raise ConfigError("items", "needs at least one item")
