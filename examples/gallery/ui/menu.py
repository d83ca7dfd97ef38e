"""Component menu, showcase header and bottom status bar."""
from __future__ import annotations

import math

import pygame

from soothe_widgets import CatalogEntry
from ui.constants import (
    HEADER_BG,
    HEADER_H,
    MARKER_INTERACTIVE,
    MARKER_PASSIVE,
    MARKER_RADIUS,
    MENU_PAD,
    ROW_H,
    ROW_HIGHLIGHT,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_COLOR,
    TEXT_DIM,
)


def row_at(pos: tuple[int, int], count: int) -> int | None:
    """Menu row under a screen position, if any."""
    row = (pos[1] - HEADER_H) // ROW_H
    if 0 <= row < count and pos[1] >= HEADER_H:
        return row
    return None


def draw_header(surface: pygame.Surface, font: pygame.font.Font, title: str, detail: str) -> None:
    pygame.draw.rect(surface, HEADER_BG, (0, 0, SCREEN_W, HEADER_H))
    surface.blit(font.render(title, True, TEXT_COLOR), (MENU_PAD, 8))
    surface.blit(font.render(detail, True, TEXT_DIM), (MENU_PAD, 26))


def draw_menu(
    surface: pygame.Surface,
    font: pygame.font.Font,
    entries: list[CatalogEntry],
    interactive: list[bool],
    selected: int,
    ticks: int,
) -> None:
    """Draw the catalog list with an orbiting marker per row."""
    draw_header(surface, font, "Soothing UI", f"{len(entries)} components")
    for i, entry in enumerate(entries):
        y = HEADER_H + i * ROW_H
        if i == selected:
            pygame.draw.rect(surface, ROW_HIGHLIGHT, (0, y, SCREEN_W, ROW_H))

        # Marker orbits faster on the selected row
        speed = 8 if i == selected else 3
        angle = math.radians(ticks * speed + i * 40)
        cx = MENU_PAD + MARKER_RADIUS
        cy = y + ROW_H // 2
        color = MARKER_INTERACTIVE if interactive[i] else MARKER_PASSIVE
        pygame.draw.circle(surface, color, (cx, cy), MARKER_RADIUS, 1)
        dot = (cx + MARKER_RADIUS * math.cos(angle), cy + MARKER_RADIUS * math.sin(angle))
        pygame.draw.circle(surface, color, dot, 2)

        label = font.render(entry.title, True, TEXT_COLOR)
        surface.blit(label, (MENU_PAD * 2 + MARKER_RADIUS * 2, cy - label.get_height() // 2))
        name = font.render(entry.name, True, TEXT_DIM)
        surface.blit(name, (SCREEN_W - MENU_PAD - name.get_width(), cy - name.get_height() // 2))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, mode: str) -> None:
    """Draw bottom key-bindings bar."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))

    if mode == "menu":
        text = "[Up/Down] Select  [Enter/Click] Open  [Esc] Quit"
    else:
        text = "[Click] Tap  [Space] Tap  [R] Reset  [Esc/Backspace] Menu"

    label = font.render(text, True, TEXT_DIM)
    surface.blit(label, (8, y + STATUS_H // 2 - label.get_height() // 2))
