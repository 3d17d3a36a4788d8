"""A short-lived explosion that damages whatever it touches on its first frame."""

from __future__ import annotations

from collections.abc import Sequence

import pygame

from spacecraze.objects.animated import AnimatedObject
from spacecraze.objects.base import Collidable, GameObject, Tag
from spacecraze.resources import AudioManager

EXPLOSION_SOUND = "res/audio/explosion.wav"
EXPLOSION_FRAMES = "res/explosion/ex-0"


class Explosion(AnimatedObject):
    """An animated blast; it stops being harmful once its first frame is over."""

    def __init__(self, start_pos: Sequence[float]) -> None:
        super().__init__()
        self.anim_timer = 0.0
        self.current_frame = 0
        self.frame_duration = 0.06
        self.loop = False

        self.sound = AudioManager.instance().load(EXPLOSION_SOUND)
        self.sound.set_volume(0.5)
        self.sound.play()

        self.path = EXPLOSION_FRAMES
        self.initialize(self.path + "0.png")
        self.load_frames(8)

        self.position = start_pos
        self.sprite.scale = pygame.Vector2(2.5, 2.5)

        self.tag = Tag.EXPLOSION

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        self.anim_update(dt)
        if self.current_frame == 1:
            self.tag = Tag.NONE

    def movement(self, dt: float) -> None:
        """Explosions stay where they are."""

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        return False