"""Background stars scrolling across the screen."""

from __future__ import annotations

import random

import pygame

from spacecraze.constants import SCREEN_HEIGHT, SCREEN_WIDTH, STAR_BLUE, STAR_GREEN, STAR_RED
from spacecraze.data import DataKind, DataManager, StarData
from spacecraze.objects.base import GameObject


class Star(GameObject):
    """A coloured star that wraps back to the right edge when it leaves the screen."""

    def __init__(self, data: StarData | None = None) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.STAR)
        self.initialize("res/star.png")

        self.green_speed = data.green_speed
        self.red_speed = data.red_speed
        self.blue_speed = data.blue_speed
        self.speed = pygame.Vector2()
        self.color = STAR_BLUE

        self.sprite.scale = pygame.Vector2(data.scale, data.scale)

        self.reallocate()
        self.position = (random.randrange(SCREEN_WIDTH), random.randrange(SCREEN_HEIGHT))

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        self.move(self.speed * dt)
        if self.sprite.position.x < 0:
            self.reallocate()

    def reallocate(self) -> None:
        """Move the star to the right edge with a fresh colour and speed."""
        choice = random.randrange(3)
        if choice == 0:
            self.speed.x = self.blue_speed
            self.color = STAR_BLUE
        elif choice == 1:
            self.speed.x = self.green_speed
            self.color = STAR_GREEN
        else:
            self.speed.x = self.red_speed
            self.color = STAR_RED
        self.sprite.color = self.color
        self.position = (SCREEN_WIDTH, random.randrange(SCREEN_HEIGHT))