"""Enemy kinds, their stats and death handling helpers."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum

from hatgame.vec import Vec2, Vec3


class EnemyType(Enum):
    IMP = "imp"
    IMP_QUEEN = "imp_queen"
    BEHOLDER = "beholder"
    BEHOLDER_PRINCE = "beholder_prince"
    REAPER = "reaper"

    @classmethod
    def all(cls) -> list[EnemyType]:
        """Every enemy type, in spawn-table order."""
        return [
            cls.IMP,
            cls.IMP_QUEEN,
            cls.BEHOLDER,
            cls.BEHOLDER_PRINCE,
            cls.REAPER,
        ]

    def difficulty(self) -> float:
        """Spawn cost of this enemy when building a wave."""
        return _DIFFICULTY[self]

    def sprite_size(self) -> Vec2:
        """Size in pixels of one frame of this enemy's sprite sheet."""
        if self is EnemyType.REAPER:
            return Vec2(64.0, 64.0)
        return Vec2(32.0, 32.0)

    def texture_name(self) -> str:
        """Name of the texture asset holding this enemy's sprite sheet."""
        return self.value

    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DIFFICULTY = {
    EnemyType.IMP: 5.0,
    EnemyType.IMP_QUEEN: 50.0,
    EnemyType.BEHOLDER: 10.0,
    EnemyType.BEHOLDER_PRINCE: 100.0,
    EnemyType.REAPER: 120.0,
}

_DISPLAY_NAMES = {
    EnemyType.IMP: "Imp",
    EnemyType.IMP_QUEEN: "Imp Queen",
    EnemyType.BEHOLDER: "Beholder",
    EnemyType.BEHOLDER_PRINCE: "BeholderPrince",
    EnemyType.REAPER: "Reaper",
}

_IMP_DEATH_SOUNDS = ("imp_death", "imp_death2", "imp_death3", "imp_death4")


@dataclass(frozen=True)
class Enemy:
    enemy_type: EnemyType
    xp: int


@dataclass(frozen=True)
class EnemyDeathEvent:
    entity: Hashable
    enemy: Enemy
    location: Vec3


def death_sound(enemy_type: EnemyType, rng) -> str:
    """Name of the sound played when an enemy dies.

    Imps pick one of four cries with ``rng.randrange``.
    """
    if enemy_type in (EnemyType.IMP, EnemyType.IMP_QUEEN):
        return _IMP_DEATH_SOUNDS[rng.randrange(len(_IMP_DEATH_SOUNDS))]
    if enemy_type is EnemyType.BEHOLDER:
        return "beholder_death"
    if enemy_type is EnemyType.BEHOLDER_PRINCE:
        return "beholder_prince_death"
    return "reaper_death"


def spread_pair(a_translation: Vec3, b_translation: Vec3, force: float = 1.0) -> tuple[Vec3, Vec3]:
    """Push two overlapping enemies apart by ``force`` each."""
    diff = (a_translation - b_translation).normalize()
    return a_translation + diff * force, b_translation - diff * force