"""The bar at the top of the screen showing hit points and score."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from spacecraze.resources import TextureManager
from spacecraze.ui.button import load_font

if TYPE_CHECKING:
    from spacecraze.objects.player import Player

FONT_PATH = "res/fonts/PixeloidSansBold.ttf"
FONT_SIZE = 50

ICON_POSITION = (10.0, 10.0)
HP_POSITION = (98.0, 8.0)
SCORE_POSITION = (448.0, 8.0)

MAGENTA = (255, 0, 255)
CYAN = (0, 255, 255)
WHITE = (255, 255, 255)

# Shadow layers of each text, in drawing order: offset and colour.
LAYERS = ((0.0, MAGENTA), (4.0, CYAN), (2.0, WHITE))


def format_score(score: int) -> str:
    """Show a score as at least four digits, wrapping once past 9999."""
    if score >= 10000:
        score -= 10000
    digits = str(score)
    return "0" * (4 - len(digits)) + digits


class GameBar:
    """Shows the player's hit points and the current score."""

    def __init__(self, player: Player, font: pygame.font.Font | None = None) -> None:
        self.player = player
        self.icon = TextureManager.instance().load("res/player.png")
        self._font = font
        self.hp_text = str(player.hitpoints)
        self.score_text = "0000"

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = load_font(FONT_PATH, FONT_SIZE)
        return self._font

    def update(self) -> None:
        self.hp_text = str(self.player.hitpoints)

    def show_score(self, score: int) -> None:
        self.score_text = format_score(score)

    def draw(self, surface: pygame.Surface) -> None:
        surface.blit(self.icon, ICON_POSITION)
        font = self._get_font()
        for offset, color in LAYERS:
            surface.blit(
                font.render(self.hp_text, True, color),
                (HP_POSITION[0] + offset, HP_POSITION[1] + offset),
            )
            surface.blit(
                font.render(self.score_text, True, color),
                (SCORE_POSITION[0] + offset, SCORE_POSITION[1] + offset),
            )