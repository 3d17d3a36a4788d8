"""A clickable rectangular button with a text label."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from spacecraze.util import logger

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)

BUTTON_COLOR: Color = (0x93, 0x93, 0x93, 0xFF)
BUTTON_HOVER_COLOR: Color = (0xAD, 0xAD, 0xAD, 0xFF)
BUTTON_ACTIVE_COLOR: Color = (0xCE, 0xCE, 0xCE, 0xFF)

TEXT_SIZE = 24


def load_font(path: str, size: int) -> pygame.font.Font:
    """Load a font file, falling back to pygame's default font."""
    if not pygame.font.get_init():
        pygame.font.init()
    try:
        return pygame.font.Font(path, size)
    except (OSError, pygame.error) as exc:
        logger.error("Failed to load font %s: %s", path, exc)
        return pygame.font.Font(None, size)


class Button:
    """A button that reports a click when the mouse is released over it."""

    def __init__(self) -> None:
        self.position = pygame.Vector2()
        self.size = pygame.Vector2()
        self.text = ""
        self._image: pygame.Surface | None = None
        self.held = False
        self.color: Color = BLACK
        self.hover_color: Color = BLACK
        self.active_color: Color = BLACK
        self.fill_color: Color = WHITE

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """``(left, top, width, height)``; the position is the button's centre."""
        left = self.position.x - self.size.x / 2
        top = self.position.y - self.size.y / 2
        return (left, top, self.size.x, self.size.y)

    def contains(self, point: Sequence[float]) -> bool:
        left, top, width, height = self.bounds
        x, y = point
        return left <= x < left + width and top <= y < top + height

    def set_size(self, size: Sequence[float]) -> None:
        self.size = pygame.Vector2(size)

    def set_position(self, position: Sequence[float]) -> None:
        self.position = pygame.Vector2(position)

    def set_text(self, text: str, font: pygame.font.Font, color: Color = WHITE) -> None:
        self.text = text
        self._image = font.render(text, True, color[:3])

    def set_color(self, color: Color, hover_color: Color, active_color: Color) -> None:
        self.color = color
        self.hover_color = hover_color
        self.active_color = active_color

    def update(self, mouse_pos: Sequence[float], pressed: bool) -> bool:
        """Track the mouse; return True when a press over the button is released."""
        if self.contains(mouse_pos):
            if pressed:
                self.fill_color = self.active_color
                self.held = True
            else:
                self.fill_color = self.hover_color
                if self.held:
                    self.held = False
                    return True
        else:
            self.fill_color = self.color
        return False

    def draw(self, surface: pygame.Surface) -> None:
        left, top, width, height = self.bounds
        rect = pygame.Rect(round(left), round(top), round(width), round(height))
        pygame.draw.rect(surface, self.fill_color, rect)
        if self._image is not None:
            text_width, text_height = self._image.get_size()
            surface.blit(
                self._image,
                (round(self.position.x - text_width / 2), round(self.position.y - text_height / 2)),
            )