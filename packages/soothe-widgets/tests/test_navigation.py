"""Tests for the navigation bar."""

import pytest
from soothe import AnimationLoop
from soothe_fsm import IDLE, RUNNING
from soothe_widgets import (
    PALETTE,
    Label,
    NavigationBar,
    NavigationBarConfig,
    NavigationBarItem,
)
from soothe_widgets.navigation import SELECTED_ALPHA, SELECTED_STRETCH


def _bar(calls=None, width=300.0):
    calls = calls if calls is not None else []
    items = tuple(
        NavigationBarItem(icon, PALETTE[color], action=lambda icon=icon: calls.append(icon))
        for icon, color in (
            ("person", "blue"),
            ("search", "purple"),
            ("heart", "pink"),
            ("gear", "gray"),
        )
    )
    return NavigationBar(NavigationBarConfig(width=width, height=65, items=items))


class TestLayout:
    def test_first_item_selected(self):
        bar = _bar()
        assert bar.selected == 0
        assert bar.widths[0].value == pytest.approx(bar.item_width * SELECTED_STRETCH)
        assert bar.widths[1].value == pytest.approx(bar.item_width)
        assert bar.alphas[0].value == SELECTED_ALPHA
        assert bar.bar_color == PALETTE["blue"]

    def test_slots_are_centered(self):
        bar = _bar()
        slots = bar.slots()
        left = slots[0][0]
        right = slots[-1][0] + slots[-1][1]
        assert left == pytest.approx(300.0 - right)

    def test_scene(self):
        scene = _bar().scene
        assert len(scene) == 1 + 2 * 4
        assert [item.text for item in scene if isinstance(item, Label)] == [
            "person",
            "search",
            "heart",
            "gear",
        ]


class TestSelection:
    def test_select_blends_color_and_stretches_pill(self):
        calls = []
        bar = _bar(calls)
        loop = AnimationLoop(tps=100)
        loop.mount(bar)
        bar.select(2)
        assert bar.state == RUNNING
        loop.run(5)
        assert calls == ["heart"]
        assert bar.bar_color not in (PALETTE["blue"], PALETTE["pink"])
        loop.run(200)
        assert bar.bar_color == PALETTE["pink"]
        assert bar.widths[2].value == pytest.approx(bar.item_width * SELECTED_STRETCH)
        assert bar.widths[0].value == pytest.approx(bar.item_width)
        assert bar.alphas[2].value == SELECTED_ALPHA
        assert bar.alphas[0].value == 1.0
        assert bar.state == IDLE

    def test_pill_overshoots_on_spring(self):
        bar = _bar()
        loop = AnimationLoop(tps=100)
        loop.mount(bar)
        bar.select(1)
        peak = 0.0
        for _ in range(100):
            loop.step()
            peak = max(peak, bar.widths[1].value)
        assert peak > bar.item_width * SELECTED_STRETCH

    def test_tap_on_item(self):
        calls = []
        bar = _bar(calls)
        loop = AnimationLoop(tps=100)
        loop.mount(bar)
        left, width = bar.slots()[3]
        assert bar.tap((left + width / 2, 30.0))
        loop.step()
        assert bar.selected == 3
        assert calls == ["gear"]

    def test_tap_in_gap_selects_nothing(self):
        bar = _bar()
        left, width = bar.slots()[0]
        bar.tap((left + width + bar.gap / 2, 30.0))
        assert bar.selected == 0
        assert bar.state == IDLE

    def test_tap_without_point_cycles(self):
        bar = _bar()
        for expected in (1, 2, 3, 0):
            bar.tap()
            assert bar.selected == expected

    def test_reselect_mid_spring(self):
        """A new selection starts from the color currently on screen."""
        bar = _bar()
        loop = AnimationLoop(tps=100)
        loop.mount(bar)
        bar.select(2)
        loop.run(10)
        midway = bar.bar_color
        bar.select(1)
        assert bar.bar_color == midway
        loop.run(200)
        assert bar.bar_color == PALETTE["purple"]

    @pytest.mark.parametrize("index", [-1, 4])
    def test_invalid_index(self, index):
        with pytest.raises(IndexError):
            _bar().select(index)
