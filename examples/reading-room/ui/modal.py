"""Modal notice box, dismissed by a click or Enter."""
from __future__ import annotations

import pygame

from ui.constants import COLOR_MODAL_BG, COLOR_MODAL_BOX, COLOR_TEXT, COLOR_TEXT_DIM


class Modal:
    def __init__(self) -> None:
        self.message: str | None = None

    def show(self, message: str) -> None:
        self.message = message

    def hide(self) -> None:
        self.message = None

    @property
    def visible(self) -> bool:
        return self.message is not None

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        if self.message is None:
            return
        w, h = surface.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill(COLOR_MODAL_BG)
        surface.blit(overlay, (0, 0))

        box = pygame.Rect(0, 0, min(w - 40, 620), 110)
        box.center = (w // 2, h // 2)
        pygame.draw.rect(surface, COLOR_MODAL_BOX, box, border_radius=6)

        text = font.render(self.message, True, COLOR_TEXT)
        surface.blit(text, text.get_rect(center=(box.centerx, box.centery - 14)))
        hint = font.render("Click or press Enter to close", True, COLOR_TEXT_DIM)
        surface.blit(hint, hint.get_rect(center=(box.centerx, box.centery + 22)))
