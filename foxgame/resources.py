"""Shared game resources that outlive a single frame."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TileAnimationTimer:
    """The clock that drives animated tiles; it can be paused while the game is frozen."""

    value: float = 0.0
    updating: bool = True

    def update(self, deltatime: float) -> None:
        if self.updating:
            self.value += deltatime

    def reset(self) -> None:
        self.value = 0.0

    def set_updating(self, should: bool) -> None:
        self.updating = should