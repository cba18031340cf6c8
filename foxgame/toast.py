"""Short-lived messages shown at the bottom of the screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

TOAST_DURATION = 3.0


class ToastKind(enum.Enum):
    WARNING = "warning"
    INFO = "info"


@dataclass
class Toast:
    text: str
    kind: ToastKind
    timer: float = TOAST_DURATION

    @property
    def alpha(self) -> float:
        """Opacity: fully visible until the last second, then fading out."""
        return min(max(self.timer, 0.0), 1.0)


@dataclass
class ToastManager:
    toasts: list[Toast] = field(default_factory=list)

    def add_toast(self, text: str, kind: ToastKind) -> None:
        self.toasts.append(Toast(text, kind))

    def add_couldnt_open_pack_file(self) -> None:
        self.add_toast("Couldn't open pack file! (refresh?)", ToastKind.WARNING)

    def add_invalid_pack_toast(self) -> None:
        self.add_toast("Invalid level pack file!", ToastKind.WARNING)

    def update(self, deltatime: float) -> None:
        """Count every toast down and drop the ones whose time has run out."""
        for toast in self.toasts:
            toast.timer -= deltatime
        self.toasts = [t for t in self.toasts if t.timer > 0.0]