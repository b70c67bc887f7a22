"""Header, book rows, and buttons."""
from __future__ import annotations

from dataclasses import dataclass

import pygame

from pages372 import ALL_KINDS, BuyUpgrade, ConvertResource, GameStateView, ReadBook, ResourceKind
from ui.constants import (
    BOOK_TITLES,
    BUTTON_H,
    BUTTON_W,
    COLOR_ACCENT,
    COLOR_BUTTON,
    COLOR_BUTTON_DISABLED,
    COLOR_ROW_BG,
    COLOR_TEXT,
    COLOR_TEXT_DIM,
    HEADER_H,
    RESOURCE_NAMES,
    ROW_H,
    ROW_PAD,
    SCREEN_W,
)


@dataclass(frozen=True)
class Button:
    rect: pygame.Rect
    label: str
    intent: object


def layout_buttons() -> list[Button]:
    """Read / Convert / Upgrade buttons for every book, top to bottom."""
    buttons: list[Button] = []
    for row, kind in enumerate(ALL_KINDS):
        y = HEADER_H + row * (ROW_H + ROW_PAD) + ROW_H - BUTTON_H - 10
        x = SCREEN_W - 3 * (BUTTON_W + 10) - ROW_PAD
        for label, intent in (
            ("Read", ReadBook(kind)),
            ("Convert", ConvertResource(kind)),
            ("Upgrade", BuyUpgrade(kind)),
        ):
            buttons.append(Button(pygame.Rect(x, y, BUTTON_W, BUTTON_H), label, intent))
            x += BUTTON_W + 10
    return buttons


def button_enabled(button: Button, view: GameStateView) -> bool:
    intent = button.intent
    if isinstance(intent, ReadBook):
        return view.can_read
    if isinstance(intent, ConvertResource):
        return view.can_convert[intent.kind]
    if isinstance(intent, BuyUpgrade):
        return view.can_buy[intent.kind]
    return False


def hit_test(buttons: list[Button], pos: tuple[int, int]) -> Button | None:
    for button in buttons:
        if button.rect.collidepoint(pos):
            return button
    return None


def draw_header(surface: pygame.Surface, font: pygame.font.Font, view: GameStateView) -> None:
    clicks = font.render(f"Clicks: {view.clicks}/{view.max_clicks}", True, COLOR_TEXT)
    pages = font.render(f"372 Pages: {view.currency}", True, COLOR_ACCENT)
    surface.blit(clicks, (ROW_PAD, 20))
    surface.blit(pages, (SCREEN_W // 2, 20))


def draw_books(
    surface: pygame.Surface,
    font: pygame.font.Font,
    small_font: pygame.font.Font,
    view: GameStateView,
) -> None:
    for row, kind in enumerate(ALL_KINDS):
        y = HEADER_H + row * (ROW_H + ROW_PAD)
        pygame.draw.rect(surface, COLOR_ROW_BG, (ROW_PAD, y, SCREEN_W - 2 * ROW_PAD, ROW_H))
        _draw_book_text(surface, font, small_font, view, kind, ROW_PAD + 10, y + 8)


def _draw_book_text(
    surface: pygame.Surface,
    font: pygame.font.Font,
    small_font: pygame.font.Font,
    view: GameStateView,
    kind: ResourceKind,
    x: int,
    y: int,
) -> None:
    title = font.render(BOOK_TITLES[kind], True, COLOR_TEXT)
    surface.blit(title, (x, y))
    amount = small_font.render(
        f"{RESOURCE_NAMES[kind]}: {view.resources[kind]}", True, COLOR_TEXT_DIM
    )
    surface.blit(amount, (x, y + 26))
    level = small_font.render(
        f"Upgrade level: {view.upgrade_levels[kind]}", True, COLOR_TEXT_DIM
    )
    surface.blit(level, (x, y + 44))


def draw_buttons(
    surface: pygame.Surface,
    font: pygame.font.Font,
    buttons: list[Button],
    view: GameStateView,
) -> None:
    for button in buttons:
        enabled = button_enabled(button, view)
        color = COLOR_BUTTON if enabled else COLOR_BUTTON_DISABLED
        pygame.draw.rect(surface, color, button.rect, border_radius=4)
        text = font.render(button.label, True, COLOR_TEXT if enabled else COLOR_TEXT_DIM)
        surface.blit(text, text.get_rect(center=button.rect.center))
