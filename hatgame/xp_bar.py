"""The ten-slice experience bar shown at the top of the screen."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from hatgame.animation import AnimationInfoBuilder, AnimationStateInfo
from hatgame.constants import SortingLayer
from hatgame.experience import Experience
from hatgame.vec import Vec3

XP_BAR_SLICES = 10
BUBBLE_FRAME_DURATION = 0.1
SLICE_WIDTH = 32.0
TOP_MARGIN = 30.0


class XPBarPosition(Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class XPBarFill(Enum):
    EMPTY = "empty"
    HALF = "half"
    FILLED = "filled"


@dataclass(frozen=True)
class XPBarAnimation:
    """Animation state of one slice: how full it is and where it sits."""

    fill: XPBarFill
    position: XPBarPosition

    @classmethod
    def empty(cls, position: XPBarPosition) -> XPBarAnimation:
        return cls(XPBarFill.EMPTY, position)

    @classmethod
    def half(cls, position: XPBarPosition) -> XPBarAnimation:
        return cls(XPBarFill.HALF, position)

    @classmethod
    def filled(cls, position: XPBarPosition) -> XPBarAnimation:
        return cls(XPBarFill.FILLED, position)


def xp_bar_states() -> list[AnimationStateInfo]:
    builder = AnimationInfoBuilder()
    for position in XPBarPosition:
        (
            builder.add_single(XPBarAnimation.empty(position))
            .add_frames(XPBarAnimation.half(position), 4, BUBBLE_FRAME_DURATION)
            .add_frames(XPBarAnimation.filled(position), 4, BUBBLE_FRAME_DURATION)
        )
    return builder.build()


def slice_position(index: int) -> XPBarPosition:
    if index == 0:
        return XPBarPosition.LEFT
    if index == XP_BAR_SLICES - 1:
        return XPBarPosition.RIGHT
    return XPBarPosition.CENTER


def _fill_tenths(experience: Experience) -> float:
    if experience.threshold == 0:
        return math.inf if experience.curr_experience > 0 else math.nan
    return experience.curr_experience / experience.threshold * 10.0


def desired_state(index: int, experience: Experience) -> XPBarAnimation:
    """State slice ``index`` should show for the given experience."""
    position = slice_position(index)
    tenths = _fill_tenths(experience)
    if tenths > index + 1:
        return XPBarAnimation.filled(position)
    if tenths > index:
        return XPBarAnimation.half(position)
    return XPBarAnimation.empty(position)


def slice_translation(index: int, window_height: float) -> Vec3:
    return Vec3(
        SLICE_WIDTH * index,
        window_height / 2.0 - TOP_MARGIN,
        float(SortingLayer.UI),
    )