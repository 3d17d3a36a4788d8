"""Base classes of everything that is updated and drawn in the game world."""

from __future__ import annotations

import abc
import enum
from collections.abc import Sequence

import pygame

from spacecraze.resources import TextureManager

WHITE = (255, 255, 255, 255)

Bounds = tuple[float, float, float, float]


class Tag(enum.IntFlag):
    """Collision categories; an object may carry several at once."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    BOMB = 1 << 2
    UFO = 1 << 3
    SEEKER = 1 << 4
    POWER_UP = 1 << 5
    PLAYER_PROJ = 1 << 6
    ENEMY_PROJ = 1 << 7
    EXPLOSION = 1 << 8
    HP_UP = 1 << 9
    MISSILE_UP = 1 << 10


def _intersects(first: Bounds, second: Bounds) -> bool:
    left = max(first[0], second[0])
    top = max(first[1], second[1])
    right = min(first[0] + first[2], second[0] + second[2])
    bottom = min(first[1] + first[3], second[1] + second[3])
    return left < right and top < bottom


class Sprite:
    """A texture placed in the world with a position, origin, scale and tint."""

    def __init__(self) -> None:
        self.texture: pygame.Surface | None = None
        self.position = pygame.Vector2()
        self.origin = pygame.Vector2()
        self.scale = pygame.Vector2(1.0, 1.0)
        self.color: tuple[int, int, int, int] = WHITE

    @property
    def texture_size(self) -> tuple[int, int]:
        if self.texture is None:
            return (0, 0)
        return self.texture.get_size()

    def set_texture(self, texture: pygame.Surface) -> None:
        self.texture = texture

    def move(self, offset: Sequence[float]) -> None:
        self.position += pygame.Vector2(offset)

    def global_bounds(self) -> Bounds:
        """Return ``(left, top, width, height)`` of the sprite in world space."""
        width, height = self.texture_size
        xs = ((0 - self.origin.x) * self.scale.x, (width - self.origin.x) * self.scale.x)
        ys = ((0 - self.origin.y) * self.scale.y, (height - self.origin.y) * self.scale.y)
        return (
            self.position.x + min(xs),
            self.position.y + min(ys),
            abs(width * self.scale.x),
            abs(height * self.scale.y),
        )

    def draw(self, surface: pygame.Surface) -> None:
        if self.texture is None or self.color[3] == 0:
            return
        left, top, width, height = self.global_bounds()
        size = (round(width), round(height))
        if size[0] <= 0 or size[1] <= 0:
            return
        image = self.texture
        if size != image.get_size():
            image = pygame.transform.scale(image, size)
        if tuple(self.color) != WHITE:
            tinted = pygame.Surface(size, pygame.SRCALPHA)
            tinted.blit(image, (0, 0))
            tinted.fill(self.color, special_flags=pygame.BLEND_RGBA_MULT)
            image = tinted
        surface.blit(image, (round(left), round(top)))


class GameObject(abc.ABC):
    """Anything with a sprite that is updated every frame."""

    def __init__(self) -> None:
        self.sprite = Sprite()
        self.texture: pygame.Surface | None = None
        self.dead = False
        self.add_score = False

    @property
    def position(self) -> pygame.Vector2:
        return pygame.Vector2(self.sprite.position)

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self.sprite.position = pygame.Vector2(value)

    @abc.abstractmethod
    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        """Advance the object by ``dt`` seconds, appending anything it spawns."""

    def move(self, distance: Sequence[float]) -> None:
        self.sprite.move(distance)

    def initialize(self, path: str) -> None:
        """Load the texture at ``path`` and centre the sprite's origin on it."""
        texture = TextureManager.instance().load(path)
        self.texture = texture
        self.sprite.set_texture(texture)
        width, height = texture.get_size()
        self.sprite.origin = pygame.Vector2(width // 2, height // 2)

    def draw(self, surface: pygame.Surface) -> None:
        self.sprite.draw(surface)


class Collidable(GameObject):
    """A game object that takes part in collision checks."""

    def __init__(self) -> None:
        super().__init__()
        self.tag = Tag.NONE

    def collides(self, other: Collidable) -> bool:
        return _intersects(self.sprite.global_bounds(), other.sprite.global_bounds())

    @abc.abstractmethod
    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        """React to touching ``other``; return whether anything happened."""


class MovingObject(Collidable):
    """A collidable object with a velocity, a speed and hit points."""

    def __init__(self) -> None:
        super().__init__()
        self.velocity = pygame.Vector2()
        self.speed = 0.0
        self.hitpoints = 1

    @abc.abstractmethod
    def movement(self, dt: float) -> None:
        """Move the object for ``dt`` seconds."""

    def add_hitpoint(self) -> None:
        self.hitpoints += 1