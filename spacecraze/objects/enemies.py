"""Enemy ships: the common enemy behaviour, the boss, seekers and UFOs."""

from __future__ import annotations

import enum
import math
from typing import TYPE_CHECKING

import pygame

from spacecraze.constants import PI, SCREEN_HEIGHT, SCREEN_WIDTH
from spacecraze.data import BossData, DataKind, DataManager, EnemyData
from spacecraze.objects.animated import AnimatedObject
from spacecraze.objects.base import Collidable, GameObject, Tag
from spacecraze.objects.powerups import HpUp, MissileUp, TripleShot
from spacecraze.objects.projectiles import EnemyProjectile
from spacecraze.resources import AudioManager
from spacecraze.util import random_int

if TYPE_CHECKING:
    from spacecraze.objects.player import Player

PUSH_DISTANCE = 10.0


class Enemy(AnimatedObject):
    """An enemy that dies with a sound and may drop a power-up."""

    def __init__(self) -> None:
        super().__init__()
        self.death_sound = AudioManager.instance().load("res/audio/ufo.wav")
        self.death_sound.set_volume(0.5)
        self.sound_timer = 0.0
        self.tag = Tag.ENEMY

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        if self.hitpoints <= 0:
            if self.sound_timer == 0.0:
                self.death_sound.play()
                self.sprite.color = (0, 0, 0, 0)
                if random_int(1, 5) == 1:
                    kind = random_int(1, 3)
                    drop = {1: TripleShot, 2: HpUp, 3: MissileUp}[kind]
                    new_objects.append(drop(self.position))
            elif self.death_sound.get_num_channels() == 0:
                self.dead = True
                self.add_score = True
            self.sound_timer += dt
        elif self.sprite.position.x < 0:
            self.dead = True

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if other.tag & (Tag.PLAYER_PROJ | Tag.EXPLOSION):
            self.hitpoints -= 1
            return True

        if other.tag == self.tag:
            if self.sprite.position.y > other.position.y:
                self.move((0.0, PUSH_DISTANCE))
            else:
                self.move((0.0, -PUSH_DISTANCE))
            return True

        return False


class BossPhase(enum.Enum):
    """The stages of the boss fight, in order."""

    FIRST = enum.auto()
    SECOND = enum.auto()
    THIRD = enum.auto()
    FOURTH = enum.auto()
    FIFTH = enum.auto()


class Boss(Enemy):
    """A large enemy that changes its movement and fire pattern as it is hurt."""

    def __init__(self, data: BossData | None = None) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.BOSS)
        self.initialize("res/boss.png")
        self.sprite.scale = pygame.Vector2(3.0, 3.0)
        self.position = (SCREEN_WIDTH, SCREEN_HEIGHT // 2)

        self.tag = Tag.ENEMY
        self.velocity = pygame.Vector2(-1.0, 0.0)

        self.phase = BossPhase.FIRST
        self.t_lazer = 0.0
        self.fire_rate = 0.0
        self.angle = 0.0
        self.phi = 0.0

        self.max_hp = data.hp
        self.hitpoints = self.max_hp
        self.speed1 = data.speed1
        self.speed2 = data.speed2

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        super().update(dt, new_objects)
        self.movement(dt)
        self.blast(dt, new_objects)
        self._set_phase()

    def movement(self, dt: float) -> None:
        if self.phase is BossPhase.FIRST:
            self.move(self.velocity * self.speed1 * dt)
        elif self.phase is BossPhase.SECOND:
            self.velocity = pygame.Vector2(0.0, math.cos(self.angle))
            self.angle += PI / 2 * dt
            self.move(self.velocity * self.speed2 * dt)
        elif self.phase is BossPhase.THIRD:
            center = pygame.Vector2(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
            difference = center - self.position
            length = difference.length()
            if length > 0:
                self.velocity = difference / length
                self.move(self.velocity * self.speed1 * dt)

    def _set_phase(self) -> None:
        x = self.sprite.position.x
        if self.phase is BossPhase.FIRST:
            if x < SCREEN_WIDTH * 0.85:
                self.fire_rate = 0.6
                self.phase = BossPhase.SECOND
        elif self.phase is BossPhase.SECOND:
            if self.hitpoints <= self.max_hp * 2 // 3:
                self.phase = BossPhase.THIRD
        elif self.phase is BossPhase.THIRD:
            if x < SCREEN_WIDTH // 2:
                self.fire_rate = 0.2
                self.phase = BossPhase.FOURTH
        elif self.phase is BossPhase.FOURTH:
            if self.hitpoints <= self.max_hp // 3:
                self.fire_rate = 0.4
                self.phase = BossPhase.FIFTH

    def _ring(self, origin: pygame.Vector2, radius: float) -> list[EnemyProjectile]:
        shots = []
        for index in range(4):
            angle = self.phi + index * PI / 2
            offset = pygame.Vector2(3 * radius * math.cos(angle), 3 * radius * math.sin(angle))
            shots.append(EnemyProjectile(origin + offset, angle))
        return shots

    def blast(self, dt: float, new_objects: list[GameObject]) -> None:
        """Fire the pattern of the current phase once the fire rate allows."""
        if self.t_lazer > self.fire_rate:
            self.t_lazer = 0.0
            origin = self.position
            width = self.texture.get_width() if self.texture is not None else 0
            radius = width / 2

            if self.phase is BossPhase.SECOND:
                for index, offset in enumerate((30.0, 0.0, -30.0)):
                    angle = 5 * PI / 6 + index * PI / 6
                    new_objects.append(
                        EnemyProjectile(origin + pygame.Vector2(0.0, offset), angle)
                    )
            elif self.phase is BossPhase.FOURTH:
                new_objects.extend(self._ring(origin, radius))
                self.phi += 2 * PI * dt
            elif self.phase is BossPhase.FIFTH:
                new_objects.extend(self._ring(origin, radius))
                self.phi += 1
        self.t_lazer += dt


class Seeker(Enemy):
    """An asteroid that homes in on the player."""

    def __init__(self, player: Player, data: EnemyData | None = None) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.SEEKER)
        self.player = player
        self.initialize("res/asteroid.png")
        self.sprite.scale = pygame.Vector2(1.5, 1.5)
        self.tag |= Tag.SEEKER
        self.hitpoints = data.hp
        self.speed = data.speed

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        super().update(dt, new_objects)
        if self.hitpoints > 0:
            self.movement(dt)

    def movement(self, dt: float) -> None:
        difference = self.player.position - self.position
        length = difference.length()
        if length == 0:
            return
        self.velocity = difference / length
        self.move(self.velocity * self.speed * dt)

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if super().on_collision(other, new_objects):
            return True
        if other.tag & Tag.PLAYER:
            self.dead = True
            return True
        return False


class UFO(Enemy):
    """A saucer that weaves across the screen and fires now and then."""

    def __init__(self, data: EnemyData | None = None) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.UFO)
        self.anim_timer = 0.0
        self.current_frame = 0
        self.frame_duration = 0.1
        self.loop = True

        self.path = "res/ufo/ufo-0"
        self.initialize(self.path + "0.png")
        self.load_frames(3)

        self.tag |= Tag.UFO
        self.laser_timer = 0.0
        self.hitpoints = data.hp
        self.speed = data.speed

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        super().update(dt, new_objects)
        if self.hitpoints > 0:
            self.movement(dt)
            self.anim_update(dt)
            self.blast(dt, new_objects)

    def movement(self, dt: float) -> None:
        self.velocity = pygame.Vector2(-1.0, math.sin(self.sprite.position.x / 10))
        self.move(self.velocity * self.speed * dt)

    def blast(self, dt: float, new_objects: list[GameObject]) -> None:
        """Every second, fire left with a one-in-three chance."""
        if self.laser_timer > 1.0:
            self.laser_timer = 0.0
            if random_int(1, 3) != 1:
                return
            x, y = self.sprite.position
            new_objects.append(EnemyProjectile((x - 64.0, y), PI))
        self.laser_timer += dt