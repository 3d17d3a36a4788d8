import json

import pytest

from spacecraze.data import (
    BossData,
    Data,
    DataKind,
    DataManager,
    EnemyData,
    PlayerData,
    PowerUpData,
    ProjectileData,
    StarData,
)

SAMPLE = {
    "Bomb": {"hp": 1, "speed": 120.0},
    "Boss": {"hp": 60, "speed1": 40.0, "speed2": 80.0},
    "Projectile": {"Enemy": {"speed": 200.0}, "Player": {"speed": 400.0}},
    "Player": {"fireRate": 0.25, "hp": 3, "speed": 250.0},
    "PowerUp": {"lifeTime": 5.0},
    "Seeker": {"hp": 2, "speed": 90.0},
    "UFO": {"hp": 3, "speed": 60.0},
    "Star": {"greenSpeed": -20.0, "blueSpeed": -40.0, "redSpeed": -60.0, "scale": 0.5},
}


@pytest.fixture
def manager(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps(SAMPLE), encoding="utf-8")
    result = DataManager()
    result.read_file(path)
    return result


def test_boss_from_json():
    data = BossData.from_json(SAMPLE["Boss"])
    assert (data.hp, data.speed1, data.speed2) == (60, 40.0, 80.0)


def test_player_from_json_reads_fire_rate():
    data = PlayerData.from_json(SAMPLE["Player"])
    assert data == PlayerData(fire_rate=0.25, hp=3, speed=250.0)


def test_missing_keys_default_to_zero():
    assert EnemyData.from_json({}) == EnemyData(hp=0, speed=0.0)
    assert StarData.from_json(None) == StarData()


def test_float_hp_is_truncated():
    assert EnemyData.from_json({"hp": 2.9, "speed": 3}).hp == 2
    assert EnemyData.from_json({"hp": 2.9, "speed": 3}).speed == 3.0


def test_string_value_raises():
    with pytest.raises(ValueError):
        ProjectileData.from_json({"speed": "fast"})


def test_power_up_life_time():
    assert PowerUpData.from_json({"lifeTime": 5}).life_time == 5.0


def test_manager_reads_every_kind(manager):
    assert manager.get(DataKind.BOMB) == EnemyData(hp=1, speed=120.0)
    assert manager.get(DataKind.SEEKER) == EnemyData(hp=2, speed=90.0)
    assert manager.get(DataKind.UFO) == EnemyData(hp=3, speed=60.0)
    assert manager.get(DataKind.BOSS) == BossData(hp=60, speed1=40.0, speed2=80.0)
    assert manager.get(DataKind.STAR).scale == 0.5


def test_manager_reads_nested_projectiles(manager):
    assert manager.get(DataKind.ENEMY_PROJECTILE) == ProjectileData(speed=200.0)
    assert manager.get(DataKind.PROJECTILE) == ProjectileData(speed=400.0)


def test_empty_manager_returns_plain_data():
    assert DataManager().get(DataKind.PLAYER) == Data()


def test_missing_sections_give_zero_records(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{}", encoding="utf-8")
    result = DataManager()
    result.read_file(path)
    assert result.get(DataKind.ENEMY_PROJECTILE) == ProjectileData(speed=0.0)
    assert result.get(DataKind.PLAYER) == PlayerData()


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        DataManager().read_file(tmp_path / "absent.json")


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        DataManager().read_file(path)