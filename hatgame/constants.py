"""Global game constants and sprite depth layers."""

from enum import Enum

from hatgame.vec import Vec3

DISTANCE_SCALING = 2.0
SCALING_VEC3 = Vec3(DISTANCE_SCALING, DISTANCE_SCALING, 1.0)

IS_DEBUG = True


class SortingLayer(float, Enum):
    """Depth (z) values used to order sprites; higher draws in front."""

    DEBUG_FRONT = 20.0
    UI = 10.0
    UI_BACK = 8.0
    FRONT = 6.0
    PLAYER = 5.0
    ACTION = 3.0
    BEHIND_ACTION = 2.0