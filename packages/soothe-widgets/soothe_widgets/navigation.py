"""Pill-shaped navigation bar."""
from __future__ import annotations

from soothe_fsm import IDLE, RUNNING
from soothe_shapes import Point, rounded_rect
from soothe_tween import Animation

from soothe_widgets.base import Widget
from soothe_widgets.components import NavigationBarConfig
from soothe_widgets.config import PALETTE
from soothe_widgets.scene import RGB, Fill, Label, SceneItem, mix

PADDING_RATIO = 0.15
SELECTED_STRETCH = 1.6
SELECTED_ALPHA = 0.3


class NavigationBar(Widget):
    """Row of items on a bar tinted with the selected item's color.

    Selecting an item stretches its pill to 1.6x, fades it to 30%, and
    blends the bar toward the item's color, all on an interpolating spring
    (mass 0.5, stiffness 100, damping 6). The item's action is dispatched
    on every selection.
    """

    interactive = True
    SPRING = Animation.interpolating_spring(0.5, 100, 6)

    def __init__(self, config: NavigationBarConfig) -> None:
        super().__init__(config)
        n = len(config.items)
        total = config.width * PADDING_RATIO
        self.gap = total / (n + 1)
        self.item_width = (config.width - total - self.gap * (n - 1)) / n
        self.selected = 0
        self._from: RGB = config.items[0].color
        self.tint = self.param("tint", 1.0)
        self.widths = [
            self.param(f"width_{i}", self._width_for(i)) for i in range(n)
        ]
        self.alphas = [
            self.param(f"alpha_{i}", self._alpha_for(i)) for i in range(n)
        ]

    @property
    def size(self) -> tuple[float, float]:
        return (self.config.width, self.config.height)

    def _width_for(self, i: int) -> float:
        return self.item_width * (SELECTED_STRETCH if i == self.selected else 1.0)

    def _alpha_for(self, i: int) -> float:
        return SELECTED_ALPHA if i == self.selected else 1.0

    @property
    def bar_color(self) -> RGB:
        return mix(self._from, self.config.items[self.selected].color, self.tint.value)

    def slots(self) -> list[tuple[float, float]]:
        """(left, width) of every item pill at the current widths."""
        span = sum(p.value for p in self.widths) + self.gap * (len(self.widths) - 1)
        x = (self.config.width - span) / 2
        out = []
        for p in self.widths:
            out.append((x, p.value))
            x += p.value + self.gap
        return out

    def select(self, index: int) -> None:
        items = self.config.items
        if not 0 <= index < len(items):
            raise IndexError(f"NavigationBar has no item {index}")
        if self.state == IDLE:
            self.lifecycle.to(RUNNING)
        self._from = self.bar_color
        self.selected = index
        self.transitions.set(self.tint, 0.0)
        self.transitions.animate(self.tint, 1.0, self.SPRING, on_done=self.rest)
        for i in range(len(items)):
            self.transitions.animate(self.widths[i], self._width_for(i), self.SPRING)
            self.transitions.animate(self.alphas[i], self._alpha_for(i), self.SPRING)
        self.dispatch(items[index].action)

    def pressed(self, point: Point | None) -> None:
        if point is None:
            self.select((self.selected + 1) % len(self.config.items))
            return
        for i, (left, width) in enumerate(self.slots()):
            if left <= point[0] <= left + width:
                self.select(i)
                return

    def render(self) -> list[SceneItem]:
        cfg = self.config
        h = cfg.height
        pill = h * (1 - PADDING_RATIO)
        top = (h - pill) / 2
        items: list[SceneItem] = [
            Fill(rounded_rect(0, 0, cfg.width, h, h / 2), self.bar_color)
        ]
        for i, (left, width) in enumerate(self.slots()):
            selected = i == self.selected
            items.append(
                Fill(
                    rounded_rect(left, top, width, pill, h / 2),
                    PALETTE["white"],
                    max(0.0, min(self.alphas[i].value, 1.0)),
                )
            )
            items.append(
                Label(
                    cfg.items[i].icon,
                    (left + width / 2, h / 2),
                    pill / 4,
                    PALETTE["white"] if selected else PALETTE["gray"],
                    bold=selected,
                )
            )
        return items
