import json

import pygame
import pytest

from spacecraze.constants import SCREEN_HEIGHT, SCREEN_WIDTH
from spacecraze.data import BossData, DataManager, EnemyData, PlayerData
from spacecraze.objects.enemies import UFO, Boss, BossPhase, Seeker
from spacecraze.objects.player import Controls, Player
from spacecraze.objects.powerups import TripleShot
from spacecraze.objects.projectiles import EnemyProjectile, Lazer

DATA = {
    "Bomb": {"hp": 1, "speed": 50},
    "Boss": {"hp": 30, "speed1": 40, "speed2": 60},
    "Projectile": {"Enemy": {"speed": 200}, "Player": {"speed": 400}},
    "Player": {"fireRate": 0.1, "hp": 3, "speed": 150},
    "PowerUp": {"lifeTime": 5},
    "Seeker": {"hp": 2, "speed": 80},
    "UFO": {"hp": 2, "speed": 70},
    "Star": {"greenSpeed": -20, "blueSpeed": -30, "redSpeed": -40, "scale": 1},
}

BOSS_DATA = BossData(hp=30, speed1=40.0, speed2=60.0)
UFO_DATA = EnemyData(hp=2, speed=70.0)
SEEKER_DATA = EnemyData(hp=2, speed=80.0)


@pytest.fixture(autouse=True)
def game_data(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    resource_dir = tmp_path / "res"
    resource_dir.mkdir()
    path = resource_dir / "data.json"
    path.write_text(json.dumps(DATA))
    manager = DataManager.instance()
    manager.read_file(path)
    return manager


def make_player():
    return Player(data=PlayerData(fire_rate=0.1, hp=3, speed=150.0), controls=Controls)


def test_shot_reduces_hitpoints():
    ufo = UFO(UFO_DATA)
    assert ufo.on_collision(Lazer((0, 0)), []) is True
    assert ufo.hitpoints == UFO_DATA.hp - 1


def test_same_kind_pushes_apart():
    lower = UFO(UFO_DATA)
    upper = UFO(UFO_DATA)
    lower.position = (200, 100)
    upper.position = (200, 50)
    assert lower.on_collision(upper, []) is True
    assert upper.on_collision(lower, []) is True
    assert lower.position.y == 100 + 10
    assert upper.position.y == 50 - 10


def test_enemy_leaving_screen_dies():
    ufo = UFO(UFO_DATA)
    ufo.position = (-5, 100)
    ufo.update(0.0, [])
    assert ufo.dead is True


def test_death_sequence_without_drop(monkeypatch):
    monkeypatch.setattr("random.randrange", lambda n: 1)
    ufo = UFO(UFO_DATA)
    ufo.position = (200, 100)
    ufo.hitpoints = 0
    spawned = []
    ufo.update(0.1, spawned)
    assert spawned == []
    assert ufo.sprite.color[3] == 0
    assert ufo.dead is False
    ufo.update(0.1, spawned)
    assert ufo.dead is True
    assert ufo.add_score is True


def test_death_drops_power_up(monkeypatch):
    monkeypatch.setattr("random.randrange", lambda n: 0)
    ufo = UFO(UFO_DATA)
    ufo.position = (200, 100)
    ufo.hitpoints = 0
    spawned = []
    ufo.update(0.1, spawned)
    assert len(spawned) == 1
    assert isinstance(spawned[0], TripleShot)
    assert spawned[0].position == ufo.position


def test_ufo_moves_left():
    ufo = UFO(UFO_DATA)
    ufo.position = (300, 100)
    ufo.movement(0.5)
    assert ufo.position.x == pytest.approx(300 - UFO_DATA.speed * 0.5)


def test_ufo_fires_when_lucky(monkeypatch):
    monkeypatch.setattr("random.randrange", lambda n: 0)
    ufo = UFO(UFO_DATA)
    ufo.position = (300, 100)
    ufo.laser_timer = 2.0
    spawned = []
    ufo.blast(0.1, spawned)
    assert len(spawned) == 1
    assert isinstance(spawned[0], EnemyProjectile)
    assert spawned[0].position.x == ufo.position.x - 64
    assert spawned[0].velocity.x < 0


def test_ufo_holds_fire_when_unlucky(monkeypatch):
    monkeypatch.setattr("random.randrange", lambda n: 1)
    ufo = UFO(UFO_DATA)
    ufo.laser_timer = 2.0
    spawned = []
    ufo.blast(0.1, spawned)
    assert spawned == []
    assert ufo.laser_timer == 0.0


def test_boss_starts_in_first_phase():
    boss = Boss(BOSS_DATA)
    assert boss.phase is BossPhase.FIRST
    assert boss.hitpoints == BOSS_DATA.hp
    assert boss.position == pygame.Vector2(SCREEN_WIDTH, SCREEN_HEIGHT // 2)


def test_boss_phase_progression():
    boss = Boss(BOSS_DATA)
    boss.position = (500, 200)
    boss.update(0.01, [])
    assert boss.phase is BossPhase.SECOND
    assert boss.fire_rate == 0.6
    boss.hitpoints = BOSS_DATA.hp // 2
    boss.update(0.01, [])
    assert boss.phase is BossPhase.THIRD
    boss.position = (100, 200)
    boss.update(0.01, [])
    assert boss.phase is BossPhase.FOURTH
    assert boss.fire_rate == 0.2
    boss.hitpoints = 1
    boss.update(0.01, [])
    assert boss.phase is BossPhase.FIFTH
    assert boss.fire_rate == 0.4


def test_boss_second_phase_spread():
    boss = Boss(BOSS_DATA)
    boss.position = (500, 200)
    boss.phase = BossPhase.SECOND
    boss.fire_rate = 0.6
    boss.t_lazer = 1.0
    spawned = []
    boss.blast(0.0, spawned)
    assert len(spawned) == 3
    assert [shot.position.y for shot in spawned] == [230, 200, 170]
    assert all(shot.velocity.x < 0 for shot in spawned)


def test_boss_fourth_phase_ring():
    boss = Boss(BOSS_DATA)
    boss.phase = BossPhase.FOURTH
    boss.fire_rate = 0.2
    boss.t_lazer = 1.0
    spawned = []
    boss.blast(0.1, spawned)
    assert len(spawned) == 4
    first, second = spawned[0].velocity, spawned[1].velocity
    assert first.dot(second) == pytest.approx(0.0, abs=1e-6)
    assert boss.phi > 0


def test_boss_fifth_phase_advances_phi_by_one():
    boss = Boss(BOSS_DATA)
    boss.phase = BossPhase.FIFTH
    boss.fire_rate = 0.4
    boss.t_lazer = 1.0
    spawned = []
    boss.blast(0.1, spawned)
    assert len(spawned) == 4
    assert boss.phi == 1.0


def test_boss_third_phase_moves_to_centre():
    boss = Boss(BOSS_DATA)
    boss.phase = BossPhase.THIRD
    boss.position = (600, 100)
    centre = pygame.Vector2(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2)
    before = (centre - boss.position).length()
    boss.movement(0.5)
    after = (centre - boss.position).length()
    assert after == pytest.approx(before - BOSS_DATA.speed1 * 0.5)


def test_seeker_homes_in():
    player = make_player()
    player.position = (100, 240)
    seeker = Seeker(player, SEEKER_DATA)
    seeker.position = (300, 240)
    before = (player.position - seeker.position).length()
    seeker.movement(0.5)
    after = (player.position - seeker.position).length()
    assert after == pytest.approx(before - SEEKER_DATA.speed * 0.5)


def test_seeker_dies_on_player():
    player = make_player()
    seeker = Seeker(player, SEEKER_DATA)
    assert seeker.on_collision(player, []) is True
    assert seeker.dead is True
    assert player.on_collision(seeker, []) is True
    assert player.hitpoints == 2