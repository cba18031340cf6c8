"""A single-line text field with a fixed maximum length."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from foxgame.fonts import Font, font_data
from foxgame.ui import Ui
from foxgame.util import Rect, Vec2

MAX_USER_STRING_LEN = 22
LINE_FLASH_DURATION = 0.2
BACKSPACE_TIMER_FIRST = 0.5
BACKSPACE_TIMER_OTHER = 0.035

TEXT_INPUT_RECT = Rect(0.0, 0.0, 8.0 * MAX_USER_STRING_LEN + 6.0, 12.0)


class TextInputKind(enum.Enum):
    ALL = "all"
    FILE_NAME = "file_name"


def _ascii_lower(c: str) -> str:
    return c.lower() if "A" <= c <= "Z" else c


@dataclass
class TextInput:
    pos: Vec2
    kind: TextInputKind
    flash_timer: float = 0.0
    backspace_timer: Optional[float] = None
    active: bool = False

    @property
    def rect(self) -> Rect:
        return TEXT_INPUT_RECT.offset(self.pos)

    @property
    def flash_on(self) -> bool:
        """Whether the active field is in the lighter half of its flash."""
        return self.active and self.flash_timer >= LINE_FLASH_DURATION / 2.0

    def deactivate(self) -> None:
        self.active = False

    def accepts(self, c: str) -> bool:
        """Whether the character (after lower-casing) may be typed into this field."""
        c = _ascii_lower(c)
        if self.kind is TextInputKind.ALL:
            return font_data(Font.SMALL).typable_char(c)
        return c.isascii() and (c.isalnum() or c in "_-")

    def update(
        self,
        text: str,
        deltatime: float,
        ui: Ui,
        mouse: Optional[Vec2],
        mouse_pressed: bool,
        char_pressed: Optional[str],
        backspace_down: bool,
        enter_pressed: bool,
    ) -> str:
        """Handle one frame of input and return the edited text."""
        if ui.interacted:
            self.active = False
            return text

        input_cleared = False
        if mouse is not None and self.rect.contains(mouse):
            if mouse_pressed:
                self.flash_timer = 0.0
                self.active = not self.active
                # Keys typed before the click are discarded
                input_cleared = True
        elif mouse_pressed:
            self.active = False

        if not self.active:
            return text

        self.flash_timer = (self.flash_timer + deltatime) % LINE_FLASH_DURATION

        if char_pressed is not None and not input_cleared:
            c = _ascii_lower(char_pressed)
            if self.accepts(c):
                self.backspace_timer = None
                if len(text) < MAX_USER_STRING_LEN:
                    text += c

        if backspace_down:
            if self.backspace_timer is None:
                self.backspace_timer = BACKSPACE_TIMER_FIRST
                text = text[:-1]
            else:
                self.backspace_timer -= deltatime
                if self.backspace_timer < 0.0:
                    text = text[:-1]
                    self.backspace_timer = BACKSPACE_TIMER_OTHER
        else:
            self.backspace_timer = None

        if enter_pressed:
            self.active = False
        return text