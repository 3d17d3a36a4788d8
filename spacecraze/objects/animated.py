"""Objects whose sprite cycles through a list of frames."""

from __future__ import annotations

import pygame

from spacecraze.objects.base import MovingObject
from spacecraze.resources import TextureManager


class AnimatedObject(MovingObject):
    """A moving object animated by swapping its texture over time."""

    def __init__(self) -> None:
        super().__init__()
        self.path = ""
        self.current_frame = 0
        self.anim_timer = 0.0
        self.frames: list[pygame.Surface] = []
        self.frame_duration = 0.0
        self.loop = False

    def anim_update(self, dt: float) -> None:
        """Advance the animation; a non-looping one dies after its last frame."""
        self.anim_timer += dt
        if self.anim_timer > self.frame_duration:
            self.current_frame += 1
            if self.current_frame + 1 > len(self.frames):
                if not self.loop:
                    self.dead = True
                    return
                self.current_frame = 0
            self.anim_timer -= self.frame_duration
            self.sprite.set_texture(self.frames[self.current_frame])

    def load_frames(self, count: int) -> None:
        """Append ``count`` frames named ``<path><index>.png``."""
        textures = TextureManager.instance()
        self.frames.extend(textures.load(f"{self.path}{index}.png") for index in range(count))