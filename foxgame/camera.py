"""The camera that follows the player through a level, with screen shake."""

from __future__ import annotations

import math
import random
from typing import Optional, Protocol

from foxgame.powerups import Dir, State
from foxgame.util import VIEW_SIZE, Vec2, approach_target

X_LEFT = VIEW_SIZE.x / 3.0 * 1.3
X_RIGHT = VIEW_SIZE.x / 3.0 * 1.7
Y_TOP_GRND = VIEW_SIZE.y / 3.0 * 1.5
Y_TOP = VIEW_SIZE.y / 3.0 * 1.0
Y_BOT = VIEW_SIZE.y / 3.0 * 2.1

SHAKE_INTERVAL = 0.015


class CameraSubject(Protocol):
    """What the camera needs to know about the player it follows."""

    pos: Vec2
    vel: Vec2
    move_dir: Optional[Dir]
    state: State


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


class Camera:
    def __init__(self, center: Vec2, rng: Optional[random.Random] = None) -> None:
        self.center = center
        self.target_offset_x = 0.0
        self.shook = False
        self.shake_timer = 0.0
        self.shake_first = True
        self.shake_offset = Vec2(0.0, 0.0)
        self.shake_damp = 0.0
        self._rng = rng or random.Random()

    def pos(self) -> Vec2:
        """Top-left corner of the view in world space."""
        return (self.center - VIEW_SIZE / 2.0 + self.shake_offset).floor()

    def on_screen(self, pos: Vec2) -> bool:
        c = self.center
        return (
            c.x - 14.0 * 16.0 <= pos.x <= c.x + 13.0 * 16.0
            and c.y - 12.0 * 16.0 <= pos.y <= c.y + 13.0 * 16.0
        )

    def on_screen_far(self, pos: Vec2) -> bool:
        c = self.center
        return (
            c.x - 24.0 * 16.0 <= pos.x <= c.x + 22.0 * 16.0
            and c.y - 20.0 * 16.0 <= pos.y <= c.y + 18.0 * 16.0
        )

    def shake(self, amount: float) -> None:
        self.shake_damp = amount
        self.shook = True

    def offset_center(self, offset: Vec2) -> None:
        """Move the camera along with a player who teleported."""
        self.center = self.center + offset

    def _shake_var(self, low: float, high: float) -> float:
        # Never close to zero, so a shake always shows
        sign = -1.0 if self._rng.randrange(2) == 0 else 1.0
        return self._rng.uniform(low, high) * sign

    def _update_shake(self, deltatime: float) -> None:
        if self.shake_timer < SHAKE_INTERVAL:
            self.shake_timer += deltatime
            return
        self.shake_timer = 0.0
        if self.shake_first:
            self.shake_offset = (
                Vec2(self._shake_var(2.0, 5.0), self._shake_var(2.0, 4.0)) * self.shake_damp
            )
        else:
            self.shake_offset = -self.shake_offset
            self.shake_damp *= 0.7
            if self.shake_damp < 0.1:
                self.shake_damp = 0.0
        self.shake_first = not self.shake_first

    def update(
        self, deltatime: float, player: CameraSubject, level_width: int, level_height: int
    ) -> None:
        self.shook = False
        self._update_shake(deltatime)

        # Horizontal
        if player.move_dir is Dir.LEFT and player.vel.x <= 0.0:
            self.target_offset_x = X_RIGHT - 8.0
        elif player.move_dir is Dir.RIGHT and player.vel.x >= 0.0:
            self.target_offset_x = X_LEFT - 8.0
        approach = 2.0 if player.state is State.CLIMBING else 1.5

        player_x = float(math.floor(player.pos.x))
        right_edge = player_x - (X_RIGHT - 8.0) + VIEW_SIZE.x / 2.0
        left_edge = player_x - (X_LEFT - 8.0) + VIEW_SIZE.x / 2.0
        cx = _clamp(self.center.x, right_edge, left_edge)
        cx = approach_target(
            cx,
            abs(player.vel.x) * approach,
            player_x - self.target_offset_x + VIEW_SIZE.x / 2.0,
        )

        # Vertical
        cy = self.center.y
        view_top = cy - VIEW_SIZE.y / 2.0
        top_grnd = view_top + Y_TOP_GRND
        top = view_top + Y_TOP
        bot = view_top + Y_BOT - 16.0
        grounded = player.state not in (State.JUMPING, State.FALLING, State.CLIMBING)
        py = player.pos.y
        if py < top_grnd and grounded:
            cy -= max(abs(py - top_grnd) / 20.0, 0.1)
        elif py < top:
            cy -= abs(py - top) / 10.0
        if py > bot:
            cy += abs(py - bot) / 10.0

        # Keep the view inside the level
        level_size = Vec2(float(level_width), float(level_height)) * 16.0
        self.center = Vec2(cx, cy).clamp(VIEW_SIZE / 2.0, level_size - VIEW_SIZE / 2.0)