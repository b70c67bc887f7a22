"""Reading Room - pygame front end for the 372 Pages clicker.

Read books to earn resources, convert them into 372 Pages, and spend those
on upgrades. Clicks regenerate every few seconds, also while the game is
closed.

Controls:
  Left-click  Press a Read / Convert / Upgrade button, or close a notice
  Enter       Close a notice
  Escape      Quit (progress is saved continuously)
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from pages372 import (
    DEFAULT_ECONOMY,
    GameStateView,
    JsonFileStorage,
    Session,
    SessionConfig,
    load_economy,
)
from ui.constants import COLOR_BG, FPS, SCREEN_H, SCREEN_W
from ui.modal import Modal
from ui.panels import button_enabled, draw_books, draw_buttons, draw_header, hit_test, layout_buttons


class PygamePresenter:
    """Keeps the latest view for the draw loop and routes notices to the modal."""

    def __init__(self, modal: Modal) -> None:
        self.modal = modal
        self.view: GameStateView | None = None

    def render(self, view: GameStateView) -> None:
        self.view = view

    def notify(self, message: str) -> None:
        self.modal.show(message)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Reading Room - 372 Pages clicker")
    p.add_argument("--save-dir", type=Path, default=None,
                   help="Directory for the save file (default: $PAGES372_HOME or ~/.pages372)")
    p.add_argument("--economy", type=Path, default=None, metavar="FILE",
                   help="JSON file overriding economy values")
    p.add_argument("--tick-ms", type=int, default=100, help="Milliseconds per engine tick (default: 100)")
    p.add_argument("--reset", action="store_true", help="Discard the existing save and start over")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    economy = load_economy(args.economy) if args.economy else DEFAULT_ECONOMY
    config = SessionConfig(tick_ms=max(1, args.tick_ms), save_dir=args.save_dir)
    storage = JsonFileStorage(config.resolved_save_dir())
    if args.reset:
        storage.path_for(config.save_key).unlink(missing_ok=True)

    modal = Modal()
    presenter = PygamePresenter(modal)
    session = Session(storage, presenter, economy=economy, config=config)

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("372 Pages - Reading Room")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 16)
    small_font = pygame.font.SysFont("monospace", 13)
    buttons = layout_buttons()

    session.start()

    tick_interval = config.tick_ms / 1000.0
    accumulator = 0.0
    running = True

    while running:
        accumulator += clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_RETURN and modal.visible:
                    modal.hide()

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if modal.visible:
                    modal.hide()
                    continue
                button = hit_test(buttons, event.pos)
                if button is not None and presenter.view is not None \
                        and button_enabled(button, presenter.view):
                    session.intents.enqueue(button.intent)

        # --- Tick engine at fixed rate ---
        while accumulator >= tick_interval:
            session.step()
            accumulator -= tick_interval

        # --- Render ---
        screen.fill(COLOR_BG)
        view = presenter.view
        if view is not None:
            draw_header(screen, font, view)
            draw_books(screen, font, small_font, view)
            draw_buttons(screen, small_font, buttons, view)
        modal.draw(screen, small_font)
        pygame.display.flip()

    session.stop()
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
