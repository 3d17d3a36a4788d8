"""Caches for textures and sounds, keyed by file path."""

from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, Union

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from spacecraze.util import logger  # noqa: E402


class SilentSound:
    """A sound that plays nothing, used when audio is unavailable."""

    def __init__(self) -> None:
        self.volume = 1.0
        self.play_count = 0
        self.stop_count = 0

    def play(self) -> None:
        """Record a request to play; no audio is produced."""
        self.play_count += 1

    def stop(self) -> None:
        """Record a request to stop; nothing is ever playing."""
        self.stop_count += 1

    def set_volume(self, value: float) -> None:
        self.volume = value

    def get_volume(self) -> float:
        return self.volume

    def get_num_channels(self) -> int:
        """Return 0: a silent sound never occupies a channel."""
        return 0


Sound = Union[pygame.mixer.Sound, SilentSound]


class TextureManager:
    """Loads images once and hands out the cached surface afterwards."""

    _instance: ClassVar[TextureManager | None] = None

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}

    @classmethod
    def instance(cls) -> TextureManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self, path: str | Path) -> pygame.Surface:
        """Return the image at ``path``; an unreadable file gives an empty surface."""
        key = str(path)
        cached = self._textures.get(key)
        if cached is not None:
            return cached

        try:
            texture = pygame.image.load(key)
        except (OSError, pygame.error) as exc:
            logger.error("Failed to load image %s: %s", key, exc)
            texture = pygame.Surface((0, 0), pygame.SRCALPHA)

        self._textures[key] = texture
        return texture


class AudioManager:
    """Loads sounds once and hands out the cached sound afterwards."""

    _instance: ClassVar[AudioManager | None] = None

    def __init__(self) -> None:
        self._sounds: dict[str, Sound] = {}

    @classmethod
    def instance(cls) -> AudioManager:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def load(self, path: str | Path) -> Sound:
        """Return the sound at ``path``; without a mixer or file, a silent one."""
        key = str(path)
        cached = self._sounds.get(key)
        if cached is not None:
            return cached

        sound: Sound
        if pygame.mixer.get_init() is None:
            sound = SilentSound()
        else:
            try:
                sound = pygame.mixer.Sound(key)
            except (OSError, pygame.error) as exc:
                logger.error("Failed to load sound %s: %s", key, exc)
                sound = SilentSound()

        self._sounds[key] = sound
        return sound