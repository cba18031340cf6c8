"""A horizontal slider for byte values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from foxgame.ui import Ui
from foxgame.util import Rect, Vec2


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


@dataclass
class SliderU8:
    """A slider for a value between low and high, both within 0..255."""

    low: int
    high: int
    rect: Rect
    active: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.low <= self.high <= 255:
            raise ValueError(f"invalid slider range {self.low}..{self.high}")

    def _over(self, mouse: Optional[Vec2]) -> bool:
        return mouse is not None and self.rect.contains(mouse)

    def update(
        self,
        value: int,
        ui: Ui,
        mouse: Optional[Vec2],
        mouse_pressed: bool,
        mouse_down: bool,
        left_pressed: bool,
        right_pressed: bool,
    ) -> int:
        """Handle one frame of input and return the new value."""
        if mouse_pressed and self._over(mouse):
            self.active = True
        if not mouse_down:
            self.active = False

        # Arrow keys nudge the value while hovering
        if self._over(mouse):
            if left_pressed:
                value = _clamp(max(value - 1, 0), self.low, self.high)
            if right_pressed:
                value = _clamp(min(value + 1, 255), self.low, self.high)

        if self.active:
            if mouse is None or ui.interacted:
                return value
            ui.interact()
            percent = min(max((mouse.x - self.rect.x) / (self.rect.w - 1.0), 0.0), 1.0)
            value = self.low + int(percent * (self.high - self.low))
        return value

    def handle_x(self, value: int) -> float:
        """Horizontal offset of the handle from the slider's left edge."""
        span = self.high - self.low
        if span == 0:
            return 0.0
        return (value - self.low) / span * (self.rect.w - 1.0)

    def label(self, value: int) -> str:
        return f"{value:3}"