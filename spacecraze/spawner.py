"""Feeds waves of enemies into the game from a level file."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from spacecraze.constants import SCREEN_WIDTH
from spacecraze.objects.bomb import Bomb
from spacecraze.objects.enemies import UFO, Seeker
from spacecraze.util import random_int

if TYPE_CHECKING:
    from spacecraze.objects.base import GameObject
    from spacecraze.objects.player import Player

EnemyFactory = Callable[[str, "Player | None"], "GameObject | None"]

_ENTRY = re.compile(r"\s*([+-]?\d+)\s*(\S)")


def parse_wave_line(line: str) -> list[tuple[int, str]]:
    """Split one level line into ``(amount, kind)`` entries.

    Entries are separated by ``;`` and read as a number followed by a kind
    letter; entries that do not read that way are skipped, and a line that
    starts with ``#`` is a comment.
    """
    if line.startswith("#"):
        return []
    entries = []
    for word in line.split(";"):
        match = _ENTRY.match(word)
        if match is not None:
            entries.append((int(match.group(1)), match.group(2)))
    return entries


def create_enemy(kind: str, player: Player | None) -> GameObject | None:
    """Build the enemy for a kind letter: ``b`` bomb, ``s`` seeker, ``u`` UFO."""
    if kind == "b":
        return Bomb()
    if kind == "s":
        return Seeker(player)
    if kind == "u":
        return UFO()
    return None


class Spawner:
    """Releases the enemies of the current wave a few at a time."""

    def __init__(
        self,
        spawn_delay: float = 0.5,
        wave_delay: float = 3.0,
        factory: EnemyFactory | None = None,
    ) -> None:
        self.spawn_delay = spawn_delay
        self.wave_delay = wave_delay
        self.factory = factory or create_enemy
        self.waves: list[list[GameObject]] = []
        self.timer = 0.0

    def update(self, dt: float, new_objects: list[GameObject]) -> bool:
        """Spawn due enemies into ``new_objects``; return True when no waves remain."""
        self.timer += dt

        if not self.waves:
            return True

        wave = self.waves[0]
        if wave:
            if self.timer >= self.spawn_delay:
                count = 1
                while count < random_int(1, 3):
                    index = random_int(0, len(wave) - 1)
                    wave[index], wave[-1] = wave[-1], wave[index]
                    new_objects.append(wave.pop())
                    if not wave:
                        break
                    count += 1
                self.timer = 0.0
        elif self.timer >= self.wave_delay:
            self.waves[0], self.waves[-1] = self.waves[-1], self.waves[0]
            self.waves.pop()
            self.timer = 0.0

        return False

    def _build(self, kind: str, amount: int, player: Player | None) -> Iterator[GameObject]:
        for _ in range(amount):
            enemy = self.factory(kind, player)
            if enemy is None:
                return
            enemy.position = (SCREEN_WIDTH + random_int(0, 32), random_int(32, 448))
            yield enemy

    def read_file(self, path: str | Path, player: Player | None) -> bool:
        """Append the waves described in a level file; False if it cannot be opened."""
        try:
            with open(path, encoding="utf-8", newline="") as handle:
                text = handle.read()
        except OSError:
            return False

        for line in text.split("\n"):
            wave = [
                enemy
                for amount, kind in parse_wave_line(line)
                for enemy in self._build(kind, amount, player)
            ]
            if wave:
                self.waves.append(wave)
        return True

    def cleanup(self) -> None:
        """Drop every wave not yet spawned."""
        self.waves.clear()