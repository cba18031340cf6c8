"""The help and credits pages shown over the main menu."""

from __future__ import annotations

import enum
from typing import Optional

from foxgame.button import Button
from foxgame.ui import Ui
from foxgame.util import VIEW_SIZE, Rect, Vec2

# Where the first line of a page is drawn, and the gap between lines
LINES_BEGIN = Vec2(24.0, 70.0)
LINE_GAP = 10.0

_CREDITS = (
    "             = FOX GAME =            ",
    "Programming, art and writing",
    "   all by one very tired fox",
    "",
    "Made with a wonderful open-source",
    "game library, and the help of the",
    "kind folks in its community!",
)

_HELP = (
    "Movement:",
    " - Move left/right with 'A' and 'D'",
    " - Run / pick objects up by holding",
    "   'left shift', (release to throw!)",
    " - Jump with 'Space'",
    " - Read signs, enter doors, and climb",
    "   ladders/vines with 'W'",
    "",
    "General:",
    " - Avoid enemies and collect powerups",
    " - Reach the flag to finish a level",
    " - HAVE FUN!",
)


class SubmenuState(enum.Enum):
    NONE = "none"
    HELP = "help"
    CREDITS = "credits"


class Submenu:
    def __init__(self) -> None:
        self.state = SubmenuState.NONE
        size = Vec2(80.0, 16.0)
        pos = Vec2(VIEW_SIZE.x / 2.0, VIEW_SIZE.y - 20.0)
        self.back = Button(Rect.from_pos_size(pos - size / 2.0, size), "Back")

    def is_open(self) -> bool:
        return self.state is not SubmenuState.NONE

    def set_state(self, state: SubmenuState) -> None:
        self.state = state

    def update(
        self, ui: Ui, mouse: Optional[Vec2], pressed: bool, down: bool, released: bool
    ) -> None:
        """Update the back button, closing the page once it is released."""
        if not self.is_open():
            return
        self.back.update(ui, mouse, pressed, down, released)
        if self.back.released:
            self.state = SubmenuState.NONE

    def content(self) -> Optional[tuple[str, tuple[str, ...]]]:
        """The title and lines of the open page, or None when closed."""
        if self.state is SubmenuState.CREDITS:
            return "Credits", _CREDITS
        if self.state is SubmenuState.HELP:
            return "How to play", _HELP
        return None