"""soothe-widgets - Animated buttons, spinners, loaders and a navigation bar."""
from __future__ import annotations

from soothe_widgets.base import Widget
from soothe_widgets.buttons import (
    BubbleButton,
    FluidLoadingButton,
    LikeButton,
    ProgressButton,
    WaveButton,
)
from soothe_widgets.catalog import CATALOG, CatalogEntry, build_widget, names
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
from soothe_widgets.config import PALETTE, hex_color
from soothe_widgets.loaders import (
    EternalLoader,
    GhostLoader,
    RotatingGradientLoader,
    RotatingLoader,
    SandglassLoader,
    SwingLoader,
)
from soothe_widgets.navigation import NavigationBar
from soothe_widgets.scene import Fill, Label, LinearGradient, RadialGradient, SceneItem, Stroke
from soothe_widgets.spinners import (
    AnimatedGradientCircles,
    FaceAnimation,
    HarmonySpinner,
    PulsingCapsules,
    RippleEffect,
    RotatingCircles,
)

__all__ = [
    "Widget",
    # Buttons
    "ProgressButton",
    "WaveButton",
    "BubbleButton",
    "FluidLoadingButton",
    "LikeButton",
    # Spinners and loaders
    "HarmonySpinner",
    "EternalLoader",
    "SandglassLoader",
    "RotatingLoader",
    "SwingLoader",
    "PulsingCapsules",
    "RippleEffect",
    "RotatingCircles",
    "RotatingGradientLoader",
    "AnimatedGradientCircles",
    "GhostLoader",
    "FaceAnimation",
    # Navigation
    "NavigationBar",
    "NavigationBarItem",
    # Configs
    "ProgressButtonConfig",
    "WaveButtonConfig",
    "BubbleButtonConfig",
    "FluidLoadingButtonConfig",
    "LikeButtonConfig",
    "HarmonySpinnerConfig",
    "EternalLoaderConfig",
    "SandglassLoaderConfig",
    "RotatingLoaderConfig",
    "SwingLoaderConfig",
    "PulsingCapsulesConfig",
    "RippleEffectConfig",
    "RotatingCirclesConfig",
    "RotatingGradientLoaderConfig",
    "AnimatedGradientCirclesConfig",
    "GhostLoaderConfig",
    "FaceAnimationConfig",
    "NavigationBarConfig",
    # Scene
    "Fill",
    "Stroke",
    "Label",
    "LinearGradient",
    "RadialGradient",
    "SceneItem",
    # Catalog and config helpers
    "CATALOG",
    "CatalogEntry",
    "build_widget",
    "names",
    "PALETTE",
    "hex_color",
]
