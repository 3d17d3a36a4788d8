"""Tuning values for the game objects, read from a JSON file."""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, ClassVar

from spacecraze.constants import DATA_PATH


class DataKind(enum.Enum):
    """The kinds of object that have tuning data."""

    BOMB = enum.auto()
    BOSS = enum.auto()
    ENEMY_PROJECTILE = enum.auto()
    PROJECTILE = enum.auto()
    PLAYER = enum.auto()
    POWER_UP = enum.auto()
    SEEKER = enum.auto()
    STAR = enum.auto()
    UFO = enum.auto()


def _member(value: Any, key: str) -> Any:
    if isinstance(value, dict):
        return value.get(key)
    if value is None:
        return None
    raise ValueError(f"cannot look up {key!r} in a non-object value")


def _as_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, (bool, int, float)):
        return int(value)
    raise ValueError(f"value {value!r} is not convertible to int")


def _as_float(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        return float(value)
    raise ValueError(f"value {value!r} is not convertible to float")


@dataclass(frozen=True)
class Data:
    """Base of all tuning records; also returned when nothing is known."""


@dataclass(frozen=True)
class BossData(Data):
    hp: int = 0
    speed1: float = 0.0
    speed2: float = 0.0

    @classmethod
    def from_json(cls, value: Any) -> BossData:
        return cls(
            hp=_as_int(_member(value, "hp")),
            speed1=_as_float(_member(value, "speed1")),
            speed2=_as_float(_member(value, "speed2")),
        )


@dataclass(frozen=True)
class EnemyData(Data):
    hp: int = 0
    speed: float = 0.0

    @classmethod
    def from_json(cls, value: Any) -> EnemyData:
        return cls(
            hp=_as_int(_member(value, "hp")),
            speed=_as_float(_member(value, "speed")),
        )


@dataclass(frozen=True)
class ProjectileData(Data):
    speed: float = 0.0

    @classmethod
    def from_json(cls, value: Any) -> ProjectileData:
        return cls(speed=_as_float(_member(value, "speed")))


@dataclass(frozen=True)
class PlayerData(Data):
    fire_rate: float = 0.0
    hp: int = 0
    speed: float = 0.0

    @classmethod
    def from_json(cls, value: Any) -> PlayerData:
        return cls(
            fire_rate=_as_float(_member(value, "fireRate")),
            hp=_as_int(_member(value, "hp")),
            speed=_as_float(_member(value, "speed")),
        )


@dataclass(frozen=True)
class PowerUpData(Data):
    life_time: float = 0.0

    @classmethod
    def from_json(cls, value: Any) -> PowerUpData:
        return cls(life_time=_as_float(_member(value, "lifeTime")))


@dataclass(frozen=True)
class StarData(Data):
    green_speed: float = 0.0
    blue_speed: float = 0.0
    red_speed: float = 0.0
    scale: float = 0.0

    @classmethod
    def from_json(cls, value: Any) -> StarData:
        return cls(
            green_speed=_as_float(_member(value, "greenSpeed")),
            blue_speed=_as_float(_member(value, "blueSpeed")),
            red_speed=_as_float(_member(value, "redSpeed")),
            scale=_as_float(_member(value, "scale")),
        )


class DataManager:
    """Holds the tuning record of every object kind."""

    _instance: ClassVar[DataManager | None] = None

    def __init__(self) -> None:
        self._data: dict[DataKind, Data] = {}

    @classmethod
    def instance(cls) -> DataManager:
        """Return the shared manager, reading the data file on first use."""
        if cls._instance is None:
            manager = cls()
            manager.read_file(DATA_PATH)
            cls._instance = manager
        return cls._instance

    def read_file(self, path: str | Path) -> None:
        """Load all records from a JSON file, replacing those already held."""
        with open(path, "rb") as handle:
            root = json.load(handle)

        projectile = _member(root, "Projectile")
        self._data[DataKind.BOMB] = EnemyData.from_json(_member(root, "Bomb"))
        self._data[DataKind.BOSS] = BossData.from_json(_member(root, "Boss"))
        self._data[DataKind.ENEMY_PROJECTILE] = ProjectileData.from_json(
            _member(projectile, "Enemy")
        )
        self._data[DataKind.PROJECTILE] = ProjectileData.from_json(
            _member(projectile, "Player")
        )
        self._data[DataKind.PLAYER] = PlayerData.from_json(_member(root, "Player"))
        self._data[DataKind.POWER_UP] = PowerUpData.from_json(_member(root, "PowerUp"))
        self._data[DataKind.SEEKER] = EnemyData.from_json(_member(root, "Seeker"))
        self._data[DataKind.UFO] = EnemyData.from_json(_member(root, "UFO"))
        self._data[DataKind.STAR] = StarData.from_json(_member(root, "Star"))

    def get(self, kind: DataKind) -> Data:
        """Return the record for ``kind``, or an empty ``Data`` if none is held."""
        return self._data.get(kind, Data())