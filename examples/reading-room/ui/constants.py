"""Layout, color, and label constants."""
from __future__ import annotations

from pages372 import ResourceKind

SCREEN_W = 760
SCREEN_H = 520
FPS = 60

HEADER_H = 64
ROW_H = 84
ROW_PAD = 10
BUTTON_W = 110
BUTTON_H = 28

BOOK_TITLES: dict[ResourceKind, str] = {
    ResourceKind.RP1: "Ready Player One",
    ResourceKind.ARMADA: "Armada",
    ResourceKind.EYEOFARGON: "The Eye of Argon",
    ResourceKind.UGLYLOVE: "Ugly Love",
}

RESOURCE_NAMES: dict[ResourceKind, str] = {
    ResourceKind.RP1: "80s Nostalgia Bits",
    ResourceKind.ARMADA: "Gamer Logic Bytes",
    ResourceKind.EYEOFARGON: "Purple Prose Blobs",
    ResourceKind.UGLYLOVE: "Troubled Romance Tokens",
}

COLOR_BG = (24, 22, 30)
COLOR_ROW_BG = (34, 32, 44)
COLOR_TEXT = (220, 216, 200)
COLOR_TEXT_DIM = (140, 136, 150)
COLOR_ACCENT = (200, 160, 80)
COLOR_BUTTON = (70, 90, 140)
COLOR_BUTTON_DISABLED = (55, 55, 62)
COLOR_MODAL_BG = (15, 15, 20, 200)
COLOR_MODAL_BOX = (44, 40, 56)
