"""A clickable button with a label and an optional tooltip."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from foxgame.ui import Ui
from foxgame.util import Rect, Vec2

RGB = tuple[int, int, int]

DISABLED_COLOR: RGB = (80, 80, 80)
HOVERED_COLOR: RGB = (250, 135, 0)
IDLE_COLOR: RGB = (210, 105, 0)
PRESSED_COLOR: RGB = (170, 80, 0)


class ButtonState(enum.Enum):
    IDLE = "idle"
    HOVERED = "hovered"
    CLICKED = "clicked"
    HELD = "held"
    RELEASED = "released"


@dataclass
class Button:
    rect: Rect
    label: Optional[str] = None
    tooltip: Optional[str] = None
    state: ButtonState = ButtonState.IDLE
    disabled: bool = False

    @property
    def released(self) -> bool:
        """Whether the button was clicked and let go this frame."""
        return self.state is ButtonState.RELEASED

    def set_pos(self, pos: Vec2) -> None:
        self.rect = Rect(pos.x, pos.y, self.rect.w, self.rect.h)

    def set_label(self, label: str) -> None:
        self.label = label

    def update(
        self,
        ui: Ui,
        mouse: Optional[Vec2],
        pressed: bool,
        down: bool,
        released: bool,
    ) -> None:
        """Advance the button one frame given the mouse position and left button."""
        if self.disabled:
            self.state = ButtonState.IDLE
            return
        if mouse is None or not self.rect.contains(mouse):
            self.state = ButtonState.IDLE
            return
        # Only one element may be interacted with per frame
        if ui.interacted:
            return
        ui.interact()

        if self.tooltip is not None:
            ui.set_tooltip(self.tooltip)

        state = self.state
        if state is ButtonState.IDLE:
            self.state = ButtonState.HOVERED
        elif pressed and state is ButtonState.HOVERED:
            self.state = ButtonState.CLICKED
        elif down and state in (ButtonState.CLICKED, ButtonState.HELD):
            self.state = ButtonState.HELD
        elif released and state is ButtonState.HELD:
            self.state = ButtonState.RELEASED
        elif state is ButtonState.RELEASED:
            self.state = ButtonState.HOVERED

    def color(self) -> RGB:
        """The fill colour for the button's current state."""
        if self.disabled:
            return DISABLED_COLOR
        if self.state is ButtonState.HOVERED:
            return HOVERED_COLOR
        if self.state is ButtonState.IDLE:
            return IDLE_COLOR
        return PRESSED_COLOR