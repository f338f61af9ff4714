"""Sprite-sheet animation states, storage and per-frame update logic."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from hatgame.constants import SCALING_VEC3
from hatgame.timing import Timer, TimerMode
from hatgame.vec import Vec3


@dataclass(frozen=True, eq=False)
class AnimationStateInfo:
    """One animation state: a run of frames in a sprite sheet.

    Two infos are equal when their ids are equal.
    """

    id: Hashable
    start_index: int
    frame_count: int
    frame_duration: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnimationStateInfo):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class AnimationInfoBuilder:
    """Builds consecutive animation states laid out in one sprite sheet."""

    def __init__(self) -> None:
        self._blocks: list[tuple[Hashable, int, float]] = []

    def add_single(self, state: Hashable) -> AnimationInfoBuilder:
        self._blocks.append((state, 1, 0.0))
        return self

    def add_frames(
        self, state: Hashable, frame_count: int, duration: float
    ) -> AnimationInfoBuilder:
        self._blocks.append((state, frame_count, duration))
        return self

    def build(self) -> list[AnimationStateInfo]:
        infos = []
        index = 0
        for state, frame_count, duration in self._blocks:
            infos.append(AnimationStateInfo(state, index, frame_count, duration))
            index += frame_count
        return infos


@dataclass
class AnimationStateStorage:
    """All states of one animation, keyed by state id."""

    states: dict[Hashable, AnimationStateInfo]
    size: int

    def get(self, state_id: Hashable) -> AnimationStateInfo | None:
        return self.states.get(state_id)


def make_storage(states: Iterable[AnimationStateInfo]) -> AnimationStateStorage:
    """Index a list of states by id and total their frames."""
    states = list(states)
    return AnimationStateStorage(
        states={state.id: state for state in states},
        size=sum(state.frame_count for state in states),
    )


@dataclass(frozen=True)
class AnimationStateChangeEvent:
    id: Any
    state_id: Hashable


@dataclass
class AnimationController:
    """Current animation state and facing of a sprite."""

    state: AnimationStateInfo
    is_facing_right: bool = True

    @property
    def state_id(self) -> Hashable:
        return self.state.id

    def set_facing_right(self, is_facing_right: bool) -> None:
        self.is_facing_right = is_facing_right


@dataclass
class AnimatedSprite:
    """A sprite-sheet sprite driven by an animation controller."""

    controller: AnimationController
    timer: Timer
    index: int
    translation: Vec3 = field(default_factory=lambda: Vec3.ZERO)
    scale: Vec3 = field(default_factory=lambda: SCALING_VEC3)
    flip_x: bool = False


def make_animated_sprite(
    start_state_id: Hashable,
    storage: AnimationStateStorage,
    position: Vec3,
    scaling: float,
) -> AnimatedSprite:
    """Create a sprite starting in ``start_state_id``; KeyError if it is unknown."""
    start_state = storage.get(start_state_id)
    if start_state is None:
        raise KeyError(f"start state {start_state_id!r} is not in the storage")
    return AnimatedSprite(
        controller=AnimationController(start_state),
        timer=Timer(start_state.frame_duration, TimerMode.REPEATING),
        index=start_state.start_index,
        translation=position,
        scale=SCALING_VEC3 * scaling,
    )


def update_animation_state(
    storage: AnimationStateStorage,
    changes: Iterable[AnimationStateChangeEvent],
    sprites: Mapping[Any, AnimatedSprite],
) -> None:
    """Apply state change events to the sprites they name.

    Processing stops at the first event whose sprite is already in the
    requested state; later events in the batch are dropped.
    """
    for change in changes:
        sprite = sprites.get(change.id)
        if sprite is None:
            continue
        controller = sprite.controller
        if controller.state_id == change.state_id:
            return
        controller.state = storage.states[change.state_id]
        sprite.timer.set_duration(controller.state.frame_duration)
        sprite.timer.set_elapsed(0.0)
        sprite.index = controller.state.start_index
        sprite.flip_x = not controller.is_facing_right


def update_animation_frames(delta: float, sprites: Iterable[AnimatedSprite]) -> None:
    """Advance each sprite's frame when its timer completes, looping in its state."""
    for sprite in sprites:
        sprite.timer.tick(delta)
        if not sprite.timer.just_finished():
            continue
        state = sprite.controller.state
        last_index = state.start_index + state.frame_count - 1
        if sprite.index >= last_index:
            sprite.index = state.start_index
        else:
            sprite.index += 1
        sprite.flip_x = not sprite.controller.is_facing_right