"""Soothing UI Gallery - Showcase of every animated component.

Exercises soothe, soothe-signal, soothe-tween, soothe-fsm, soothe-shapes,
and soothe-widgets.

Controls (menu):
  Up/Down     Select component
  Enter       Open showcase
  Click       Open the clicked component
  Esc         Quit

Controls (showcase):
  Click       Tap the component at the cursor
  Space       Tap the component
  R           Rebuild the component
  Esc/Bksp    Back to menu
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from soothe import AnimationLoop
from soothe_widgets import CATALOG, Widget, names
from soothe_widgets.catalog import get
from ui.constants import BG_COLOR, FPS, HEADER_H, SCREEN_H, SCREEN_W, STAGE_BG, STAGE_H, TPS
from ui.menu import draw_header, draw_menu, draw_status_bar, row_at
from ui.painter import draw_scene

logger = logging.getLogger("gallery")


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Soothing UI - component gallery")
    p.add_argument("--tps", type=int, default=TPS, help=f"Animation ticks per second (default: {TPS})")
    p.add_argument("--fps", type=int, default=FPS, help=f"Render frames per second (default: {FPS})")
    p.add_argument("--component", type=str, default=None, metavar="NAME",
                   help="Open this component directly")
    p.add_argument("--list", action="store_true", help="Print component names and exit")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level (default: WARNING)")
    args = p.parse_args()
    args.tps = max(1, args.tps)
    args.fps = max(1, args.fps)
    return args


class GalleryState:
    """Menu selection plus the loop and widget of the open showcase."""

    def __init__(self, tps: int) -> None:
        self.tps = tps
        self.mode = "menu"
        self.selected = 0
        self.menu_ticks = 0
        self.taps = 0
        self.loop: AnimationLoop | None = None
        self.widget: Widget | None = None
        self.interactive = [entry.interactive for entry in CATALOG]

    def open(self, index: int) -> None:
        self.close()
        entry = CATALOG[index]
        self.selected = index
        self.loop = AnimationLoop(tps=self.tps)
        self.widget = entry.build()
        self.loop.mount(self.widget)
        self.taps = 0
        self.mode = "showcase"
        logger.info("Opened %s", entry.name)

    def close(self) -> None:
        if self.loop is not None and self.widget is not None:
            self.loop.unmount(self.widget)
        self.loop = None
        self.widget = None
        self.mode = "menu"

    def step(self) -> None:
        if self.loop is None:
            self.menu_ticks += 1
        else:
            self.loop.step()

    def origin(self) -> tuple[int, int]:
        """Top-left of the widget, centered on the stage."""
        w, h = self.widget.size
        return (int((SCREEN_W - w) / 2), int(HEADER_H + (STAGE_H - h) / 2))

    def tap(self, pos: tuple[int, int] | None = None) -> None:
        point = None
        if pos is not None:
            ox, oy = self.origin()
            point = (pos[0] - ox, pos[1] - oy)
        if self.widget.tap(point):
            self.taps += 1


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.list:
        for name in names():
            print(name)
        return

    state = GalleryState(args.tps)
    if args.component is not None:
        try:
            state.open(CATALOG.index(get(args.component)))
        except KeyError as exc:
            print(exc.args[0], file=sys.stderr)
            sys.exit(2)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Soothing UI Gallery")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    tick_interval = 1.0 / args.tps
    accumulator = 0.0
    running = True

    while running:
        dt = clock.tick(args.fps) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if state.mode == "menu":
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_UP:
                        state.selected = (state.selected - 1) % len(CATALOG)
                    elif event.key == pygame.K_DOWN:
                        state.selected = (state.selected + 1) % len(CATALOG)
                    elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                        state.open(state.selected)
                else:
                    if event.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE):
                        state.close()
                    elif event.key == pygame.K_SPACE:
                        state.tap()
                    elif event.key == pygame.K_r:
                        state.open(state.selected)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if state.mode == "menu":
                    row = row_at(event.pos, len(CATALOG))
                    if row is not None:
                        state.open(row)
                else:
                    state.tap(event.pos)

        # --- Fixed-rate animation ticks ---
        while accumulator >= tick_interval:
            state.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(BG_COLOR)
        if state.mode == "menu":
            draw_menu(screen, font, CATALOG, state.interactive, state.selected, state.menu_ticks)
        else:
            entry = CATALOG[state.selected]
            widget = state.widget
            kind = "tap to play" if widget.interactive else "plays on its own"
            detail = f"{kind}  state: {widget.state}  taps: {state.taps}  redraws: {widget.redraws}"
            draw_header(screen, font, entry.title, detail)
            pygame.draw.rect(screen, STAGE_BG, (0, HEADER_H, SCREEN_W, STAGE_H))
            draw_scene(screen, widget.scene, state.origin(), widget.size)
        draw_status_bar(screen, font, state.mode)
        pygame.display.flip()

    state.close()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
