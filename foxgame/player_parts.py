"""Sprite layout of the player and the small pure rules behind grabbing and throwing."""

from __future__ import annotations

import enum
from typing import Optional

from foxgame.powerups import FeetPowerup, HeadPowerup, State
from foxgame.util import Rect, Vec2

PART_WIDTH = 16.0

# Vertical position and height of each part in the entity atlas
_HEAD_Y, _HEAD_H = 0.0, 15.0
_BODY_Y, _BODY_H = 16.0, 7.0
_ARM_Y, _ARM_H = 24.0, 19.0
_FEET_Y, _FEET_H = 44.0, 8.0

# Where each part is drawn relative to the top of the head
HEAD_DRAW_Y = 0.0
ARM_DRAW_Y = 3.0
BODY_DRAW_Y = 15.0
FEET_DRAW_Y = 18.0


class PlayerArmKind(enum.Enum):
    """The arm sprites, in the order they sit in the atlas."""

    NORMAL = 0
    TILTED = 1
    HOLDING = 2
    HOLDING_BACK = 3
    JUMP = 4
    LADDER = 5
    DEAD = 6
    DEAD_BACK = 7


def head_rect(powerup: Optional[HeadPowerup], ladder: bool, dead: bool) -> Rect:
    """Atlas source rectangle of the head sprite."""
    if dead:
        x = 6.0 * PART_WIDTH
    else:
        x = 16.0 if ladder else 0.0
        if powerup is not None:
            x += 32.0 * (powerup.value + 1)
    return Rect(x, _HEAD_Y, PART_WIDTH, _HEAD_H)


def body_rect(ladder: bool) -> Rect:
    """Atlas source rectangle of the body sprite."""
    return Rect(16.0 if ladder else 0.0, _BODY_Y, PART_WIDTH, _BODY_H)


def arm_rect(kind: PlayerArmKind) -> Rect:
    """Atlas source rectangle of an arm sprite."""
    return Rect(16.0 * kind.value, _ARM_Y, PART_WIDTH, _ARM_H)


def feet_rect(powerup: Optional[FeetPowerup], run: bool, ladder: bool) -> Rect:
    """Atlas source rectangle of the feet sprite."""
    if ladder:
        x = 32.0
    elif run:
        x = 16.0
    else:
        x = 0.0
    if powerup is not None:
        x += 48.0 * (powerup.value + 1)
    return Rect(x, _FEET_Y, PART_WIDTH, _FEET_H)


def choose_arms(
    dead: bool, state: State, holding: bool, ladder: bool, full_speed: bool
) -> tuple[Optional[PlayerArmKind], Optional[PlayerArmKind]]:
    """The front and back arm to draw; either may be None.

    full_speed is whether the player has been running long enough at top speed.
    """
    if dead:
        return PlayerArmKind.DEAD, PlayerArmKind.DEAD_BACK
    if ladder:
        return None, PlayerArmKind.LADDER
    if holding:
        return PlayerArmKind.HOLDING, PlayerArmKind.HOLDING_BACK
    if state is State.JUMPING:
        return PlayerArmKind.TILTED, PlayerArmKind.JUMP
    if state is State.FALLING:
        return PlayerArmKind.TILTED, None
    if full_speed:
        return PlayerArmKind.TILTED, None
    return PlayerArmKind.NORMAL, None


def sprite_y_offset(feet_powerup: Optional[FeetPowerup], stepping: bool, ladder: bool) -> float:
    """How far the sprite is raised: boots lift the player, and so does a step."""
    offset = 8.0 if feet_powerup in (None, FeetPowerup.SKIRT) else 10.0
    if stepping and not ladder:
        offset += 1.0
    return offset


def grab_hitbox(pos: Vec2, facing_right: bool) -> Rect:
    """The area in front of the player where entities can be grabbed."""
    x = 8.0 if facing_right else 3.0
    return Rect(x, -6.0, 5.0, 22.0).offset(pos)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def throw_velocity(
    vel: Vec2, up_held: bool, down_held: bool, top_hit: bool, facing_left: bool
) -> Vec2:
    """The velocity given to a held entity when it is thrown."""
    speed = abs(vel.x)
    if up_held:
        x, y = _clamp(speed, 0.0, 0.8), -2.4
    elif down_held:
        x, y = 0.0, 0.0
    elif not top_hit:
        x = _clamp(speed, 0.5, 1.0) + 0.7
        y = _clamp(-speed / 4.0, 0.0, 0.4) - 0.6
    else:
        x, y = _clamp(speed, 0.5, 1.0) + 0.8, 1.0
    if facing_left:
        x = -x
    y = _clamp(y + vel.y, -2.4, 0.0)
    return Vec2(x, y)