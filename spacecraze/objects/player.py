"""The ship controlled by the player."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import pygame

from spacecraze.constants import ROOT2, SCREEN_HEIGHT, SCREEN_WIDTH
from spacecraze.data import DataKind, DataManager, PlayerData
from spacecraze.objects.base import Collidable, GameObject, MovingObject, Tag
from spacecraze.objects.projectiles import Lazer, Missile

POWER_UP_DURATION = 10.0
INVINCIBILITY_TIME = 1.0
SHOT_OFFSET = 40.0
SHOT_SPREAD = 30.0


@dataclass(frozen=True)
class Controls:
    """The state of the player's inputs for one frame."""

    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    fire: bool = False

    @classmethod
    def from_keyboard(cls) -> Controls:
        """Read the arrow keys, WASD and space; no keyboard means no input."""
        try:
            keys = pygame.key.get_pressed()
        except pygame.error:
            return cls()
        return cls(
            left=bool(keys[pygame.K_LEFT] or keys[pygame.K_a]),
            right=bool(keys[pygame.K_RIGHT] or keys[pygame.K_d]),
            up=bool(keys[pygame.K_UP] or keys[pygame.K_w]),
            down=bool(keys[pygame.K_DOWN] or keys[pygame.K_s]),
            fire=bool(keys[pygame.K_SPACE]),
        )


class Player(MovingObject):
    """The player's ship: moves, fires and picks up power-ups."""

    def __init__(
        self,
        data: PlayerData | None = None,
        controls: Callable[[], Controls] | None = None,
    ) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.PLAYER)
        self.read_controls = controls or Controls.from_keyboard

        from spacecraze.resources import AudioManager

        audio = AudioManager.instance()
        self.hurt_sound = audio.load("res/audio/hurt.wav")
        self.pick_up_sound = audio.load("res/audio/powerup.wav")
        self.laser_sound = audio.load("res/audio/laser.wav")
        self.laser_sound.set_volume(0.75)

        self.initialize("res/player.png")
        width, _ = self.sprite.texture_size
        self.position = (width, SCREEN_HEIGHT // 2)

        self.tag = Tag.PLAYER

        self.tripleshot_active = False
        self.missile_active = False
        self.god_mode = False

        self.t_lazer = 0.0
        self.t_tripleshot = 0.0
        self.t_missile = 0.0
        self.t_invincibility = 0.0

        self.fire_rate = data.fire_rate
        self.hitpoints = data.hp
        self.speed = data.speed

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        self.t_tripleshot += dt
        self.t_missile += dt

        if self.t_tripleshot > POWER_UP_DURATION:
            self.tripleshot_active = False
        if self.t_missile > POWER_UP_DURATION:
            self.missile_active = False

        if self.t_invincibility >= 0.0:
            self.t_invincibility -= dt

        if self.hitpoints > 0:
            self.movement(dt)
            self.blast(dt, new_objects)
        else:
            self.sprite.color = (0, 0, 0, 0)
            self.dead = True

    def movement(self, dt: float) -> None:
        """Move by the pressed directions, staying inside the screen."""
        controls = self.read_controls()
        velocity = pygame.Vector2()
        if controls.left:
            velocity.x = -1.0
        if controls.right:
            velocity.x = 1.0
        if controls.up:
            velocity.y = -1.0
        if controls.down:
            velocity.y = 1.0

        old_position = self.position
        if velocity.x != 0.0 or velocity.y != 0.0:
            if velocity.x != 0.0 and velocity.y != 0.0:
                velocity /= ROOT2
            self.move(velocity * self.speed * dt)
        self.velocity = velocity

        position = self.position
        _, _, width, height = self.sprite.global_bounds()
        if position.x - width / 2 < 0 or position.x + width / 2 > SCREEN_WIDTH:
            position.x = old_position.x
        if position.y - height / 2 < 0 or position.y + height / 2 > SCREEN_HEIGHT:
            position.y = old_position.y
        self.position = position

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if self.hitpoints <= 0:
            return False

        if other.tag & Tag.POWER_UP:
            self.tripleshot_active = True
            self.t_tripleshot = 0.0
            self.pick_up_sound.play()
            return True

        if other.tag & Tag.HP_UP:
            self.hitpoints += 1
            self.pick_up_sound.play()
            return True

        if other.tag & Tag.MISSILE_UP:
            self.missile_active = True
            self.t_missile = 0.0
            self.pick_up_sound.play()
            return True

        if other.tag & (Tag.EXPLOSION | Tag.ENEMY | Tag.ENEMY_PROJ):
            self.hurt()
            return True

        return False

    def blast(self, dt: float, new_objects: list[GameObject]) -> None:
        """Fire when the fire input is held and the weapon has cooled down."""
        if self.read_controls().fire and self.t_lazer > self.fire_rate:
            self.t_lazer = 0.0
            origin = self.position + pygame.Vector2(SHOT_OFFSET, 0.0)
            shot = Missile if self.missile_active else Lazer

            if self.tripleshot_active:
                for offset in (SHOT_SPREAD, 0.0, -SHOT_SPREAD):
                    new_objects.append(shot(origin + pygame.Vector2(0.0, offset)))
            else:
                new_objects.append(shot(origin))

            self.laser_sound.play()
        self.t_lazer += dt

    def hurt(self, amount: int = 1) -> None:
        """Lose one hit point unless invincible or in god mode."""
        if self.god_mode:
            return
        if self.t_invincibility <= 0.0:
            self.t_invincibility = INVINCIBILITY_TIME
            self.hitpoints -= 1
            self.hurt_sound.play()

    def toggle_god_mode(self) -> None:
        self.god_mode = not self.god_mode