"""A slow bomb drifting left across the screen."""

from __future__ import annotations

import pygame

from spacecraze.data import DataKind, DataManager, EnemyData
from spacecraze.objects.base import Collidable, GameObject, MovingObject, Tag
from spacecraze.objects.explosion import Explosion


class Bomb(MovingObject):
    """An enemy that explodes when shot or when it hits the player."""

    def __init__(self, data: EnemyData | None = None) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.BOMB)
        self.initialize("res/bomb.png")
        self.velocity = pygame.Vector2(-1.0, 0.0)
        self.tag = Tag.ENEMY | Tag.BOMB
        self.speed = data.speed

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        self.movement(dt)

    def movement(self, dt: float) -> None:
        self.move(self.velocity * self.speed * dt)
        if self.sprite.position.x < 0:
            self.dead = True

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if other.tag & (Tag.PLAYER_PROJ | Tag.EXPLOSION):
            new_objects.append(Explosion(self.position))
            self.dead = True
            self.add_score = True
            return True

        if other.tag & Tag.PLAYER:
            new_objects.append(Explosion(self.position))
            self.dead = True
            return True

        if other.tag == self.tag:
            if self.sprite.position.y > other.position.y:
                self.move((0.0, 10.0))
            else:
                self.move((0.0, -10.0))
            return True

        return False