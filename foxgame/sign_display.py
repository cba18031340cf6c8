"""The overlay that shows the four lines of a sign the player is reading."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

SIGN_LINE_COUNT = 4
CLOSE_HINT = "Press W to close sign"

SignLines = tuple[str, str, str, str]


@dataclass
class SignDisplay:
    lines: Optional[SignLines] = None
    closed_this_frame: bool = False

    @property
    def active(self) -> bool:
        return self.lines is not None

    def set_lines(self, lines: Sequence[str]) -> None:
        """Open the display with a sign's lines; a sign always has exactly four."""
        lines = tuple(lines)
        if len(lines) != SIGN_LINE_COUNT:
            raise ValueError(f"a sign has {SIGN_LINE_COUNT} lines, got {len(lines)}")
        self.lines = lines

    def update(self, close_pressed: bool) -> None:
        """Close the display when the close key was pressed this frame."""
        self.closed_this_frame = False
        if self.lines is None:
            return
        if close_pressed:
            self.lines = None
            self.closed_this_frame = True