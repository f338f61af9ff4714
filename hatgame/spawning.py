"""Timed enemy waves that grow harder as the game goes on."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from hatgame.enemy import EnemyType
from hatgame.timing import Stopwatch, Timer, TimerMode
from hatgame.vec import Vec2

SPAWN_INTERVAL = 3.0
START_ELAPSED = 5.0
SCALING_FACTOR = 1.01
EDGE_MARGIN = 32.0
DIFFICULTY_SLACK = 10.0
GROUP_SCALING = 1.5


@dataclass(frozen=True)
class EnemySpawnEvent:
    enemy_type: EnemyType
    position: Vec2 = field(default_factory=lambda: Vec2.ZERO)


@dataclass
class SpawnInfo:
    """Wave timer, total game time and number of waves spawned so far."""

    timer: Timer = field(default_factory=lambda: Timer(SPAWN_INTERVAL, TimerMode.REPEATING))
    game: Stopwatch = field(default_factory=Stopwatch)
    count: int = 0

    def needed_difficulty(self) -> float:
        """Total difficulty the next wave must reach."""
        return 2.0 + 3.0 * SCALING_FACTOR**self.count * self.count

    def start(self) -> None:
        """Prime the timer so the first wave comes at once."""
        self.timer.set_elapsed(START_ELAPSED)


def spawning_rng(seed: str) -> random.Random:
    """Random generator for spawning, derived from the game seed."""
    return random.Random(f"{seed}:spawning")


def _uniform(rng: random.Random, low: float, high: float) -> float:
    return low + (high - low) * rng.random()


def _edge_position(window_width: float, window_height: float, rng: random.Random) -> Vec2:
    half_w = window_width / 2.0
    half_h = window_height / 2.0
    side = rng.randrange(4)
    if side == 0:
        return Vec2(_uniform(rng, -half_w, half_w), half_h + EDGE_MARGIN)
    if side == 1:
        return Vec2(_uniform(rng, -half_w, half_w), -half_h - EDGE_MARGIN)
    if side == 2:
        return Vec2(-half_w - EDGE_MARGIN, _uniform(rng, -half_h, half_h))
    return Vec2(half_w + EDGE_MARGIN, _uniform(rng, -half_h, half_h))


def spawn_wave(
    needed_difficulty: float,
    window_width: float,
    window_height: float,
    rng: random.Random,
) -> list[EnemySpawnEvent]:
    """Pick enemies just outside the window until the wave is hard enough.

    Each enemy already chosen makes the next one count for more. The wave
    stops early when no enemy type fits the remaining budget.
    """
    events: list[EnemySpawnEvent] = []
    current = 0.0
    while current < needed_difficulty:
        current *= GROUP_SCALING
        position = _edge_position(window_width, window_height, rng)
        available = [
            enemy
            for enemy in EnemyType.all()
            if enemy.difficulty() + current < needed_difficulty + DIFFICULTY_SLACK
        ]
        if not available:
            break
        enemy = rng.choice(available)
        current += enemy.difficulty()
        events.append(EnemySpawnEvent(enemy_type=enemy, position=position))
    return events


def spawn_loop(
    spawn_info: SpawnInfo,
    delta: float,
    window_width: float,
    window_height: float,
    rng: random.Random,
) -> list[EnemySpawnEvent]:
    """Advance the spawn timer and return the wave due this frame, if any."""
    spawn_info.timer.tick(delta)
    spawn_info.game.tick(delta)
    needed = spawn_info.needed_difficulty()

    if not spawn_info.timer.just_finished():
        return []
    spawn_info.timer.reset()
    spawn_info.count += 1
    return spawn_wave(needed, window_width, window_height, rng)