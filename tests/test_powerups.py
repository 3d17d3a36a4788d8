import pygame
import pytest

from spacecraze.data import PowerUpData
from spacecraze.objects.base import Collidable, Tag
from spacecraze.objects.powerups import HpUp, MissileUp, PowerUp, TripleShot

DATA = PowerUpData(life_time=2.0)


class Probe(Collidable):
    def __init__(self, tag):
        super().__init__()
        self.tag = tag

    def update(self, dt, new_objects):
        self.dead = self.dead

    def on_collision(self, other, new_objects):
        return False


@pytest.mark.parametrize(
    ("cls", "tag"),
    [(TripleShot, Tag.POWER_UP), (HpUp, Tag.HP_UP), (MissileUp, Tag.MISSILE_UP)],
)
def test_kinds_carry_their_tags(cls, tag):
    power_up = cls((5, 7), data=DATA)
    assert power_up.tag == tag
    assert power_up.position == pygame.Vector2(5, 7)
    assert power_up.life == DATA.life_time


def test_lives_until_life_time_passes():
    power_up = TripleShot((0, 0), data=DATA)
    power_up.update(1.0, [])
    assert not power_up.dead
    power_up.update(1.5, [])
    assert power_up.dead


def test_exact_life_time_still_alive():
    power_up = PowerUp((0, 0), data=DATA)
    power_up.update(DATA.life_time, [])
    assert not power_up.dead


def test_collected_by_player():
    power_up = HpUp((0, 0), data=DATA)
    assert power_up.on_collision(Probe(Tag.PLAYER), []) is True
    assert power_up.dead


def test_ignores_other_objects():
    power_up = MissileUp((0, 0), data=DATA)
    assert power_up.on_collision(Probe(Tag.ENEMY | Tag.EXPLOSION), []) is False
    assert not power_up.dead