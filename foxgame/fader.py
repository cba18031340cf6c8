"""Fade to black and back, moving the player while the screen is dark."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from foxgame.util import Vec2

# The time the screen is fading in or out
FADE_TIME = 0.3
# The time the screen is fully black
BLACK_TIME = 0.1


@dataclass
class Fader:
    fading: bool = False
    moved: bool = False
    timer: float = 0.0
    dest: Optional[Vec2] = None

    def begin_fade(self, dest: Optional[Vec2]) -> None:
        self.fading = True
        self.moved = False
        self.timer = 0.0
        self.dest = dest

    def move_player(self) -> Optional[Vec2]:
        """Once the screen is dark, hand out the destination once."""
        if self.timer >= FADE_TIME + BLACK_TIME * 0.5:
            self.moved = True
            dest, self.dest = self.dest, None
            return dest
        return None

    def update(self, deltatime: float) -> None:
        if self.fading:
            self.timer += deltatime
        if self.timer >= FADE_TIME * 2.0 + BLACK_TIME:
            self.fading = False

    def alpha(self) -> float:
        """Opacity of the black overlay; zero when not fading."""
        if not self.fading:
            return 0.0
        if self.timer < FADE_TIME:
            return self.timer / FADE_TIME
        if self.timer > FADE_TIME + BLACK_TIME:
            return 1.0 - (self.timer - FADE_TIME - BLACK_TIME) / FADE_TIME
        return 1.0