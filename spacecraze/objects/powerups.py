"""Pick-ups dropped by destroyed enemies."""

from __future__ import annotations

from collections.abc import Sequence

from spacecraze.data import DataKind, DataManager, PowerUpData
from spacecraze.objects.base import Collidable, GameObject, Tag


class PowerUp(Collidable):
    """A pick-up that lasts a limited time and vanishes when collected."""

    def __init__(self, position: Sequence[float], data: PowerUpData | None = None) -> None:
        super().__init__()
        if data is None:
            data = DataManager.instance().get(DataKind.POWER_UP)
        self.position = position
        self.elapsed = 0.0
        self.life = data.life_time

    def update(self, dt: float, new_objects: list[GameObject]) -> None:
        self.elapsed += dt
        if self.elapsed > self.life:
            self.dead = True

    def on_collision(self, other: Collidable, new_objects: list[GameObject]) -> bool:
        if other.tag & Tag.PLAYER:
            self.dead = True
            return True
        return False


class TripleShot(PowerUp):
    """Makes the player fire three shots at once."""

    def __init__(self, position: Sequence[float], data: PowerUpData | None = None) -> None:
        super().__init__(position, data)
        self.initialize("res/powerUpTripleShot.png")
        self.tag = Tag.POWER_UP


class HpUp(PowerUp):
    """Gives the player an extra hit point."""

    def __init__(self, position: Sequence[float], data: PowerUpData | None = None) -> None:
        super().__init__(position, data)
        self.initialize("res/hpUp.png")
        self.tag = Tag.HP_UP


class MissileUp(PowerUp):
    """Makes the player fire missiles."""

    def __init__(self, position: Sequence[float], data: PowerUpData | None = None) -> None:
        super().__init__(position, data)
        self.initialize("res/powerUpMissile.png")
        self.tag = Tag.MISSILE_UP