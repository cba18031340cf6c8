"""Interaction bookkeeping for UI elements and mapping between window and view space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from foxgame.fonts import Font, text_size
from foxgame.util import VIEW_SIZE, Rect, Vec2

TOOLTIP_PAD = 1.0


@dataclass
class Ui:
    """Makes sure only one element is interacted with per frame, and holds the tooltip."""

    tooltip: str = ""
    interacted: bool = False

    def interact(self) -> None:
        self.interacted = True

    def set_tooltip(self, tooltip: str) -> None:
        self.tooltip = tooltip

    def begin_frame(self) -> None:
        self.interacted = False
        self.tooltip = ""

    def end_frame(self, mouse_down: bool) -> None:
        if not mouse_down:
            self.interacted = False


def _target_aspect() -> float:
    return VIEW_SIZE.x / VIEW_SIZE.y


def render_target_rect(screen_width: float, screen_height: float) -> Rect:
    """Where the view is drawn in the window, letterboxed to keep its aspect ratio."""
    window_aspect = screen_width / screen_height
    target_aspect = _target_aspect()
    if window_aspect > target_aspect:
        target_width = target_aspect * screen_height
        x_offset = (screen_width - target_width) / 2.0
        return Rect(x_offset, 0.0, target_width, screen_height)
    target_height = screen_width / target_aspect
    y_offset = (screen_height - target_height) / 2.0
    return Rect(0.0, y_offset, screen_width, target_height)


def mouse_pos(local: Vec2, screen_width: float, screen_height: float) -> Optional[Vec2]:
    """Map a window-local mouse position (-1..1 on each axis) to view space.

    Returns None when the mouse is outside the letterboxed view.
    """
    window_aspect = screen_width / screen_height
    target_aspect = _target_aspect()
    if window_aspect > target_aspect:
        scale = Vec2(window_aspect / target_aspect, 1.0)
    else:
        scale = Vec2(1.0, target_aspect / window_aspect)
    scaled = local * scale
    if not (-1.0 <= scaled.x <= 1.0 and -1.0 <= scaled.y <= 1.0):
        return None
    return (scaled / 2.0 + 0.5) * VIEW_SIZE


def tooltip_rect(tooltip: str, mouse: Vec2) -> Optional[Rect]:
    """The box a tooltip is drawn in at the mouse, kept from running off the view."""
    if not tooltip:
        return None
    size = text_size(tooltip, Vec2(1.0, 1.0), Font.SMALL) + TOOLTIP_PAD * 2.0 - Vec2(0.0, 1.0)
    x, y = mouse.x, mouse.y
    if x + size.x > VIEW_SIZE.x + 1.0:
        x -= size.x - 1.0
    if y + size.y > VIEW_SIZE.y + 1.0:
        y -= size.y - 1.0
    return Rect(x, y, size.x, size.y)