"""Tests for configuration validation, colors and scene helpers."""

import pytest
from soothe import ConfigError
from soothe_widgets import (
    PALETTE,
    FluidLoadingButtonConfig,
    HarmonySpinner,
    HarmonySpinnerConfig,
    NavigationBarConfig,
    NavigationBarItem,
    ProgressButtonConfig,
    PulsingCapsulesConfig,
    RotatingCirclesConfig,
    RotatingGradientLoaderConfig,
    RotatingLoaderConfig,
    hex_color,
)
from soothe_widgets.config import named
from soothe_widgets.scene import mix, with_alpha


class TestHexColor:
    def test_six_digits(self):
        assert hex_color("f35872") == (243, 88, 114)

    def test_hash_prefix(self):
        assert hex_color("#007AFF") == (0, 122, 255)

    def test_three_digits_expand(self):
        assert hex_color("fff") == (255, 255, 255)
        assert hex_color("0a0") == (0, 170, 0)

    def test_eight_digits_are_argb(self):
        assert hex_color("80ff0000") == (255, 0, 0, 128)

    @pytest.mark.parametrize("text", ["", "zz0000", "12345", "#1234567"])
    def test_invalid(self, text):
        with pytest.raises(ConfigError) as info:
            hex_color(text)
        assert info.value.field == "hex"


class TestValidation:
    def test_defaults_are_valid(self):
        ProgressButtonConfig()
        HarmonySpinnerConfig()
        PulsingCapsulesConfig()

    def test_error_names_the_field(self):
        with pytest.raises(ConfigError) as info:
            ProgressButtonConfig(duration=0)
        assert info.value.field == "duration"
        assert "duration" in str(info.value)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            ProgressButtonConfig(size=-5)

    @pytest.mark.parametrize(
        "value", [(300, 0, 0), (1, 2), "pink", (0.5, 0.5, 0.5)]
    )
    def test_bad_color(self, value):
        with pytest.raises(ConfigError):
            ProgressButtonConfig(color=value)

    def test_empty_color_list(self):
        with pytest.raises(ConfigError) as info:
            HarmonySpinnerConfig(colors=())
        assert info.value.field == "colors"

    def test_bad_color_in_list_is_indexed(self):
        with pytest.raises(ConfigError) as info:
            HarmonySpinnerConfig(colors=(PALETTE["blue"], (0, 0, 999)))
        assert info.value.field == "colors[1]"

    def test_capsule_count_minimum(self):
        with pytest.raises(ConfigError):
            PulsingCapsulesConfig(number_of_capsules=1)

    def test_non_finite_rejected(self):
        with pytest.raises(ConfigError):
            ProgressButtonConfig(duration=float("inf"))

    def test_small_circle_cannot_exceed_large(self):
        with pytest.raises(ConfigError) as info:
            RotatingLoaderConfig(large_circle_size=50, small_circle_size=80)
        assert info.value.field == "small_circle_size"

    def test_navigation_needs_items(self):
        with pytest.raises(ConfigError):
            NavigationBarConfig(items=())

    def test_navigation_item_needs_icon(self):
        with pytest.raises(ConfigError):
            NavigationBarItem("", PALETTE["blue"])

    def test_configs_are_frozen(self):
        cfg = ProgressButtonConfig()
        with pytest.raises(AttributeError):
            cfg.duration = 3  # type: ignore[misc]

    def test_color_lists_are_copied_into_tuples(self):
        """Mutating the caller's list afterwards leaves the config untouched."""
        palette = [PALETTE["blue"], PALETTE["purple"], PALETTE["pink"]]
        cfg = HarmonySpinnerConfig(colors=palette)
        palette.clear()
        assert isinstance(cfg.colors, tuple)
        assert cfg.colors == (PALETTE["blue"], PALETTE["purple"], PALETTE["pink"])
        assert len(HarmonySpinner(cfg).scene) == 3

    @pytest.mark.parametrize(
        "make, field",
        [
            (lambda v: FluidLoadingButtonConfig(foreground=v), "foreground"),
            (lambda v: RotatingCirclesConfig(colors=v), "colors"),
            (lambda v: RotatingGradientLoaderConfig(gradient_colors=v), "gradient_colors"),
        ],
    )
    def test_every_color_list_is_frozen(self, make, field):
        values = [PALETTE["pink"], PALETTE["blue"]]
        cfg = make(values)
        values.append(PALETTE["gray"])
        assert getattr(cfg, field) == (PALETTE["pink"], PALETTE["blue"])

    def test_navigation_items_become_tuple(self):
        items = [NavigationBarItem("home", PALETTE["blue"])]
        cfg = NavigationBarConfig(items=items)
        items.clear()
        assert cfg.items == (NavigationBarItem("home", PALETTE["blue"]),)

    def test_action_ignored_in_equality(self):
        assert ProgressButtonConfig(action=lambda: None) == ProgressButtonConfig()


def test_named_palette_lookup():
    assert named(["pink", "blue"]) == (PALETTE["pink"], PALETTE["blue"])
    with pytest.raises(KeyError):
        named(["mauve"])


def test_with_alpha():
    assert with_alpha((10, 20, 30), 0.5) == (10, 20, 30, 128)
    assert with_alpha((10, 20, 30, 100), 0.5) == (10, 20, 30, 50)
    assert with_alpha((10, 20, 30), 2.0)[3] == 255


def test_mix_clamps():
    black, white = (0, 0, 0), (255, 255, 255)
    assert mix(black, white, 0.0) == black
    assert mix(black, white, 1.5) == white
    assert mix(black, white, 0.5) == (128, 128, 128)
