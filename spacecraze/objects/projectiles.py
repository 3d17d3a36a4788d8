"""Shots fired by enemies and by the player."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame

from spacecraze.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from spacecraze.data import DataKind, DataManager, ProjectileData
from spacecraze.objects.base import Collidable, GameObject, MovingObject, Tag
from spacecraze.objects.explosion import Explosion


class EnemyProjectile(MovingObject):
    """A plasma shot travelling in a fixed direction."""

    def __init__(
        self,
        position: Sequence[float],
        angle: float,
        data: ProjectileData | None = None,
    ) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.ENEMY_PROJECTILE)
        self.initialize("res/plasma.png")
        self.position = position
        self.velocity = pygame.Vector2(math.cos(angle), math.sin(angle))
        self.tag = Tag.ENEMY_PROJ
        self.speed = data.speed

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        self.movement(dt)

    def movement(self, dt: float) -> None:
        self.move(self.velocity * self.speed * dt)
        x, y = self.sprite.position
        if x < 0 or x > SCREEN_WIDTH:
            self.dead = True
        if y < 0 or y > SCREEN_HEIGHT:
            self.dead = True

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if other.tag & (Tag.EXPLOSION | Tag.PLAYER):
            self.dead = True
            return True
        return False


class PlayerProjectile(MovingObject):
    """A shot from the player travelling right."""

    def __init__(self, position: Sequence[float], data: ProjectileData | None = None) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.PROJECTILE)
        self.velocity = pygame.Vector2(1.0, 0.0)
        self.tag = Tag.PLAYER_PROJ
        # No texture is loaded yet, so there is no half-width to offset by.
        self.position = position
        self.speed = data.speed

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        self.movement(dt)

    def movement(self, dt: float) -> None:
        self.move(self.velocity * self.speed * dt)
        if self.sprite.position.x > SCREEN_WIDTH:
            self.dead = True

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if other.tag & Tag.EXPLOSION:
            self.dead = True
            return True
        return False


class Lazer(PlayerProjectile):
    """The plain player shot; it vanishes on hitting an enemy."""

    def __init__(self, position: Sequence[float], data: ProjectileData | None = None) -> None:
        super().__init__(position, data)
        self.initialize("res/lazer.png")

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if super().on_collision(other, new_objects):
            return True
        if other.tag & Tag.ENEMY:
            self.dead = True
            return True
        return False


class Missile(PlayerProjectile):
    """A player shot that explodes on hitting an enemy."""

    def __init__(self, position: Sequence[float], data: ProjectileData | None = None) -> None:
        super().__init__(position, data)
        self.initialize("res/missile.png")

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if super().on_collision(other, new_objects):
            return True
        if other.tag & Tag.ENEMY:
            new_objects.append(Explosion(self.position))
            self.dead = True
            return True
        return False