import pytest

from foxgame.player_parts import (
    PlayerArmKind,
    arm_rect,
    body_rect,
    choose_arms,
    feet_rect,
    grab_hitbox,
    head_rect,
    sprite_y_offset,
    throw_velocity,
)
from foxgame.powerups import FeetPowerup, HeadPowerup, State
from foxgame.util import Rect, Vec2


def test_plain_head_rect():
    assert head_rect(None, False, False) == Rect(0.0, 0.0, 16.0, 15.0)


def test_head_powerups_shift_by_32():
    base = head_rect(None, False, False).x
    assert head_rect(HeadPowerup.HELMET, False, False).x - base == 32.0
    assert head_rect(HeadPowerup.XRAY_GOGGLES, False, False).x - base == 64.0


def test_head_ladder_adds_16():
    for powerup in (None, HeadPowerup.HELMET, HeadPowerup.XRAY_GOGGLES):
        assert head_rect(powerup, True, False).x - head_rect(powerup, False, False).x == 16.0


def test_dead_head_ignores_powerup_and_ladder():
    dead = head_rect(None, False, True)
    assert head_rect(HeadPowerup.HELMET, True, True) == dead
    assert dead.x == 6 * 16.0


def test_body_rect():
    assert body_rect(False) == Rect(0.0, 16.0, 16.0, 7.0)
    assert body_rect(True).x == 16.0


def test_arm_rects_step_along_atlas():
    xs = [arm_rect(kind).x for kind in PlayerArmKind]
    assert xs == sorted(xs)
    assert all(b - a == 16.0 for a, b in zip(xs, xs[1:]))
    assert all(arm_rect(kind).h == 19.0 for kind in PlayerArmKind)


def test_feet_rects():
    assert feet_rect(None, False, False) == Rect(0.0, 44.0, 16.0, 8.0)
    assert feet_rect(None, True, False).x == 16.0
    assert feet_rect(None, True, True).x == 32.0
    assert feet_rect(FeetPowerup.BOOTS, False, False).x == 48.0


def test_choose_arms_priority():
    assert choose_arms(True, State.CLIMBING, True, True, True) == (
        PlayerArmKind.DEAD,
        PlayerArmKind.DEAD_BACK,
    )
    assert choose_arms(False, State.CLIMBING, True, True, False) == (None, PlayerArmKind.LADDER)
    assert choose_arms(False, State.JUMPING, True, False, False) == (
        PlayerArmKind.HOLDING,
        PlayerArmKind.HOLDING_BACK,
    )
    assert choose_arms(False, State.JUMPING, False, False, False) == (
        PlayerArmKind.TILTED,
        PlayerArmKind.JUMP,
    )
    assert choose_arms(False, State.FALLING, False, False, False) == (PlayerArmKind.TILTED, None)
    assert choose_arms(False, State.MOVING, False, False, True) == (PlayerArmKind.TILTED, None)
    assert choose_arms(False, State.STANDING, False, False, False) == (PlayerArmKind.NORMAL, None)


@pytest.mark.parametrize(
    "feet,expected",
    [(None, 8.0), (FeetPowerup.SKIRT, 8.0), (FeetPowerup.BOOTS, 10.0), (FeetPowerup.MOON_SHOES, 10.0)],
)
def test_sprite_y_offset(feet, expected):
    assert sprite_y_offset(feet, False, False) == expected
    assert sprite_y_offset(feet, True, False) == expected + 1.0
    assert sprite_y_offset(feet, True, True) == expected


def test_grab_hitbox_sides():
    pos = Vec2(32.0, 48.0)
    right = grab_hitbox(pos, True)
    left = grab_hitbox(pos, False)
    assert right == Rect(8.0, -6.0, 5.0, 22.0).offset(pos)
    assert left == Rect(3.0, -6.0, 5.0, 22.0).offset(pos)


def test_throw_up():
    v = throw_velocity(Vec2(0.5, 0.0), True, False, False, False)
    assert v == Vec2(0.5, -2.4)


def test_throw_down_is_gentle():
    v = throw_velocity(Vec2(0.9, 0.0), False, True, False, False)
    assert v.x == 0.0
    assert v.y == 0.0


def test_throw_normal_and_mirrored():
    right = throw_velocity(Vec2(0.0, 0.0), False, False, False, False)
    left = throw_velocity(Vec2(0.0, 0.0), False, False, False, True)
    assert right.x == pytest.approx(0.5 + 0.7)
    assert right.y == pytest.approx(-0.6)
    assert left == Vec2(-right.x, right.y)


def test_throw_lower_when_ceiling_hit_is_clamped():
    v = throw_velocity(Vec2(2.0, 0.0), False, False, True, False)
    assert v.x == pytest.approx(1.0 + 0.8)
    assert v.y == 0.0


def test_throw_y_always_in_range():
    for vy in (-5.0, -1.0, 0.0, 1.0, 5.0):
        for flags in ((True, False, False), (False, True, False), (False, False, True), (False, False, False)):
            v = throw_velocity(Vec2(0.3, vy), *flags, False)
            assert -2.4 <= v.y <= 0.0