"""Experience crystals dropped by dying enemies and picked up by the player."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable
from dataclasses import dataclass

from hatgame.constants import SortingLayer
from hatgame.experience import Experience
from hatgame.vec import Vec2, Vec3

BIG_XP_AMT = 40
MIN_SPEED = 20.0
MAX_SPEED = 50.0
FRICTION_FORCE = 50.0
MAGNETIC_FORCE = 1_000_000.0


@dataclass
class XPCrystal:
    """A crystal lying in the world; it teleports at screen edges."""

    contained_xp: int
    translation: Vec3
    velocity: Vec2
    friction: float = FRICTION_FORCE
    magnetic_force: float = MAGNETIC_FORCE

    @property
    def is_big(self) -> bool:
        return self.contained_xp == BIG_XP_AMT

    @property
    def texture(self) -> str:
        return "big_crystal" if self.is_big else "crystal"

    @property
    def sound(self) -> str:
        """Sound played on pickup."""
        return "big_crystal" if self.is_big else "coin"


def crystal_rng(seed: str) -> random.Random:
    """Random generator for crystal drops, derived from the game seed."""
    return random.Random(f"{seed}:crystal_rng")


def drop_crystals(xp: int, location: Vec3, rng: random.Random) -> list[XPCrystal]:
    """Scatter ``xp`` as crystals worth 40 while possible, then 1 each."""
    crystals = []
    remaining = xp
    while remaining > 0:
        speed = rng.uniform(MIN_SPEED, MAX_SPEED)
        angle = rng.uniform(0.0, 2.0 * math.pi)
        amount = BIG_XP_AMT if remaining >= BIG_XP_AMT else 1
        crystals.append(
            XPCrystal(
                contained_xp=amount,
                translation=Vec3(location.x, location.y, float(SortingLayer.BEHIND_ACTION)),
                velocity=Vec2(math.cos(angle), math.sin(angle)) * speed,
            )
        )
        remaining -= amount
    return crystals


def collect_crystals(
    crystals: Iterable[XPCrystal], player_position: Vec3, experience: Experience
) -> list[XPCrystal]:
    """Add the xp of crystals within pick distance and return them for removal."""
    collected = []
    for crystal in crystals:
        if crystal.translation.distance(player_position) < experience.pick_distance:
            experience.curr_experience += crystal.contained_xp
            collected.append(crystal)
    return collected