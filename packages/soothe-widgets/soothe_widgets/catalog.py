"""Showcase catalog: every component with its gallery configuration."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from soothe_widgets.base import Widget
from soothe_widgets.buttons import (
    BubbleButton,
    FluidLoadingButton,
    LikeButton,
    ProgressButton,
    WaveButton,
)
from soothe_widgets.components import (
    AnimatedGradientCirclesConfig,
    BubbleButtonConfig,
    EternalLoaderConfig,
    FaceAnimationConfig,
    FluidLoadingButtonConfig,
    GhostLoaderConfig,
    HarmonySpinnerConfig,
    LikeButtonConfig,
    NavigationBarConfig,
    NavigationBarItem,
    ProgressButtonConfig,
    PulsingCapsulesConfig,
    RippleEffectConfig,
    RotatingCirclesConfig,
    RotatingGradientLoaderConfig,
    RotatingLoaderConfig,
    SandglassLoaderConfig,
    SwingLoaderConfig,
    WaveButtonConfig,
)
from soothe_widgets.config import PALETTE, named
from soothe_widgets.loaders import (
    EternalLoader,
    GhostLoader,
    RotatingGradientLoader,
    RotatingLoader,
    SandglassLoader,
    SwingLoader,
)
from soothe_widgets.navigation import NavigationBar
from soothe_widgets.spinners import (
    AnimatedGradientCircles,
    FaceAnimation,
    HarmonySpinner,
    PulsingCapsules,
    RippleEffect,
    RotatingCircles,
)

PINK = PALETTE["pink"]


@dataclass(frozen=True)
class CatalogEntry:
    name: str
    title: str
    kind: type[Widget]
    build: Callable[[], Widget]

    @property
    def interactive(self) -> bool:
        """Whether the component waits for a tap before animating."""
        return self.kind.interactive


def _navigation_bar() -> NavigationBar:
    items = tuple(
        NavigationBarItem(icon, PALETTE[color])
        for icon, color in (
            ("person", "blue"),
            ("search", "purple"),
            ("heart", "pink"),
            ("gear", "gray"),
        )
    )
    return NavigationBar(NavigationBarConfig(width=300, height=65, items=items))


CATALOG: list[CatalogEntry] = [
    CatalogEntry(
        "progress_button",
        "Progress Button",
        ProgressButton,
        lambda: ProgressButton(ProgressButtonConfig(duration=3, size=250, color=PINK)),
    ),
    CatalogEntry(
        "wave_button",
        "Wave Button",
        WaveButton,
        lambda: WaveButton(WaveButtonConfig(size=250, wave_color=PINK)),
    ),
    CatalogEntry(
        "rotating_gradient_loader",
        "Rotating Gradient Loader",
        RotatingGradientLoader,
        lambda: RotatingGradientLoader(
            RotatingGradientLoaderConfig(
                main_circle_size=250,
                rotation_line_size=275,
                capsule_width=15,
                gradient_colors=named(["pink", "blue"]),
            )
        ),
    ),
    CatalogEntry(
        "bubble_button",
        "Bubble Button",
        BubbleButton,
        lambda: BubbleButton(BubbleButtonConfig(size=200, color=PINK)),
    ),
    CatalogEntry(
        "fluid_loading_button",
        "Fluid Loading Button",
        FluidLoadingButton,
        lambda: FluidLoadingButton(
            FluidLoadingButtonConfig(
                height=350,
                fluid_speed=1.5,
                wave_height=20,
                foreground=named(["blue", "pink"]),
                background=PALETTE["purple"],
            )
        ),
    ),
    CatalogEntry(
        "like_button",
        "Like Button",
        LikeButton,
        lambda: LikeButton(
            LikeButtonConfig(
                initial_likes=3,
                size=170,
                active_color=PINK,
                inactive_color=PALETTE["gray"],
            )
        ),
    ),
    CatalogEntry(
        "harmony_spinner",
        "Harmony Spinner",
        HarmonySpinner,
        lambda: HarmonySpinner(
            HarmonySpinnerConfig(
                rotation_time=2.5, size=250, colors=named(["blue", "purple", "pink"])
            )
        ),
    ),
    CatalogEntry(
        "eternal_loader",
        "Eternal Loader",
        EternalLoader,
        lambda: EternalLoader(
            EternalLoaderConfig(size=250, stroke_width=15, color=PINK, animation_duration=2)
        ),
    ),
    CatalogEntry(
        "sandglass_loader",
        "Sandglass Loader",
        SandglassLoader,
        lambda: SandglassLoader(
            SandglassLoaderConfig(
                size=200,
                frame_color=PALETTE["black"],
                sand_color=PINK,
                animation_duration=2.5,
            )
        ),
    ),
    CatalogEntry(
        "rotating_loader",
        "Rotating Loader",
        RotatingLoader,
        lambda: RotatingLoader(
            RotatingLoaderConfig(
                large_circle_size=230, small_circle_size=100, color=PINK, animation_duration=2
            )
        ),
    ),
    CatalogEntry(
        "swing_loader",
        "Swing Loader",
        SwingLoader,
        lambda: SwingLoader(
            SwingLoaderConfig(
                size=220,
                duration=1.5,
                loader_color=PALETTE["black"],
                background_circle_color=PINK,
            )
        ),
    ),
    CatalogEntry(
        "pulsing_capsules",
        "Pulsing Capsules",
        PulsingCapsules,
        lambda: PulsingCapsules(
            PulsingCapsulesConfig(
                capsule_width=10,
                capsule_height=70,
                color=PINK,
                number_of_capsules=12,
                animation_duration=2,
            )
        ),
    ),
    CatalogEntry(
        "ripple_effect",
        "Ripple Effect",
        RippleEffect,
        lambda: RippleEffect(RippleEffectConfig(color=PINK, size=250, duration=1.5)),
    ),
    CatalogEntry(
        "rotating_circles",
        "Rotating Circles",
        RotatingCircles,
        lambda: RotatingCircles(
            RotatingCirclesConfig(
                size=170, colors=named(["blue", "pink", "purple"]), duration=2
            )
        ),
    ),
    CatalogEntry(
        "animated_gradient_circles",
        "Animated Gradient Circles",
        AnimatedGradientCircles,
        lambda: AnimatedGradientCircles(
            AnimatedGradientCirclesConfig(
                size=250,
                primary_color=PINK,
                secondary_color=PALETTE["blue"],
                animation_speed=1.8,
            )
        ),
    ),
    CatalogEntry(
        "ghost_loader",
        "Ghost Loader",
        GhostLoader,
        lambda: GhostLoader(GhostLoaderConfig(ghost_size=200, ghost_color=PALETTE["white"])),
    ),
    CatalogEntry(
        "face_animation",
        "Face Animation",
        FaceAnimation,
        lambda: FaceAnimation(FaceAnimationConfig(size=250, face_color=PINK)),
    ),
    CatalogEntry("navigation_bar", "Navigation Bar", NavigationBar, _navigation_bar),
]

_BY_NAME: dict[str, CatalogEntry] = {entry.name: entry for entry in CATALOG}


def names() -> list[str]:
    return [entry.name for entry in CATALOG]


def get(name: str) -> CatalogEntry:
    if name not in _BY_NAME:
        raise KeyError(f"Unknown component: {name!r}")
    return _BY_NAME[name]


def build_widget(name: str) -> Widget:
    """Build a fresh instance of the named component."""
    return get(name).build()
