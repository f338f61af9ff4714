"""Enemy steering: chasing the player and stopping to shoot."""

from __future__ import annotations

import math
from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

from hatgame.timing import Timer, TimerMode
from hatgame.vec import Vec2, Vec3

_STOPPED_SPEED = 0.05


def direction_to(origin: Vec2, target: Vec2) -> Vec2:
    """Unit vector from ``origin`` towards ``target``; +x when they coincide."""
    delta = target - origin
    angle = math.atan2(delta.y, delta.x)
    return Vec2(math.cos(angle), math.sin(angle))


def _steer(desired: Vec2, velocity: Vec2, corrective_force: float) -> Vec2:
    diff = desired - velocity
    if diff.length() < corrective_force:
        return desired
    return velocity + diff.normalize() * corrective_force


@dataclass
class FollowPlayerAI:
    """Flies straight at the player."""

    speed: float
    corrective_force: float

    def steer(self, position: Vec2, player_position: Vec2, velocity: Vec2) -> Vec2:
        """New velocity, corrected towards the player by at most ``corrective_force``."""
        desired = direction_to(position, player_position) * self.speed
        return _steer(desired, velocity, self.corrective_force)


class MoveAndShootAIState(Enum):
    MOVE = "move"
    SLOW = "slow"
    CHARGE = "charge"


@dataclass(frozen=True)
class ChargeShootEvent:
    entity: Hashable


@dataclass(frozen=True)
class ShootEvent:
    entity: Hashable
    target: Hashable


class AIUpdate(NamedTuple):
    velocity: Vec2
    events: list[Union[ChargeShootEvent, ShootEvent]]


class MoveAndShootAI:
    """Approaches to shooting range, stops, charges, then fires."""

    def __init__(
        self,
        speed: float,
        corrective_force: float,
        shoot_distance: float,
        charge_time: float,
        refresh_time: float,
    ) -> None:
        self._state = MoveAndShootAIState.MOVE
        self.speed = speed
        self.corrective_force = corrective_force
        self.shoot_distance = shoot_distance
        self.charge_timer = Timer(charge_time, TimerMode.ONCE)
        self.refresh_timer = Timer(refresh_time, TimerMode.ONCE)

    def __repr__(self) -> str:
        return (
            f"MoveAndShootAI(state={self._state}, speed={self.speed!r}, "
            f"shoot_distance={self.shoot_distance!r})"
        )

    @property
    def state(self) -> MoveAndShootAIState:
        return self._state

    def update(
        self,
        entity: Hashable,
        position: Vec3,
        velocity: Vec2,
        player_entity: Hashable,
        player_position: Vec3,
        delta: float,
    ) -> AIUpdate:
        """Advance one frame; returns the new velocity and any charge/shoot events."""
        self.charge_timer.tick(delta)
        self.refresh_timer.tick(delta)
        events: list[Union[ChargeShootEvent, ShootEvent]] = []

        if (
            self._state is MoveAndShootAIState.MOVE
            and player_position.distance(position) <= self.shoot_distance
            and self.refresh_timer.finished()
        ):
            self._state = MoveAndShootAIState.SLOW

        if self._state is MoveAndShootAIState.SLOW and velocity.length() < _STOPPED_SPEED:
            self._state = MoveAndShootAIState.CHARGE
            events.append(ChargeShootEvent(entity))
            self.charge_timer.reset()

        if self._state is MoveAndShootAIState.CHARGE and self.charge_timer.just_finished():
            self._state = MoveAndShootAIState.MOVE
            self.refresh_timer.reset()
            events.append(ShootEvent(entity=entity, target=player_entity))

        if self._state is MoveAndShootAIState.CHARGE:
            return AIUpdate(velocity, events)

        flat_position = position.truncate()
        flat_player = player_position.truncate()
        distance = (flat_player - flat_position).length()
        if self._state is MoveAndShootAIState.MOVE and distance > self.shoot_distance:
            desired = direction_to(flat_position, flat_player) * self.speed
        else:
            desired = Vec2.ZERO
        return AIUpdate(_steer(desired, velocity, self.corrective_force), events)