"""Player movement states, powerups, invulnerability and the rules that tie them together."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

# Fixed physics timestep and falling constants
PHYSICS_STEP = 1.0 / 120.0
MAX_FALL_SPEED = 2.0
GRAVITY = 0.045

# How long the player blinks after taking damage or collecting a powerup
DAMAGE_INVULN_TIME = 1.5
POWERUP_INVULN_TIME = 1.0

Color = tuple[int, int, int]


def _hex(value: int) -> Color:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


class State(enum.Enum):
    """The movement state machine of the player."""

    STANDING = "standing"
    MOVING = "moving"
    JUMPING = "jumping"
    FALLING = "falling"
    CLIMBING = "climbing"


class Dir(enum.Enum):
    LEFT = "left"
    RIGHT = "right"

    def flipped(self) -> Dir:
        return Dir.RIGHT if self is Dir.LEFT else Dir.LEFT


class HeadPowerup(enum.Enum):
    HELMET = 0
    XRAY_GOGGLES = 1


class FeetPowerup(enum.Enum):
    BOOTS = 0
    MOON_SHOES = 1
    SKIRT = 2


_NAMES = {
    HeadPowerup.HELMET: "Helmet",
    HeadPowerup.XRAY_GOGGLES: "X-Ray Goggles",
    FeetPowerup.BOOTS: "Boots",
    FeetPowerup.MOON_SHOES: "Moon Shoes",
    FeetPowerup.SKIRT: "Skirt",
}

_TEXT_COLORS = {
    HeadPowerup.HELMET: 0xE43B44,
    HeadPowerup.XRAY_GOGGLES: 0x55F998,
    FeetPowerup.BOOTS: 0x855A55,
    FeetPowerup.MOON_SHOES: 0xBC41C7,
    FeetPowerup.SKIRT: 0xF994FB,
}

_PARTICLE_COLORS = {
    HeadPowerup.HELMET: 0xFF6D75,
    HeadPowerup.XRAY_GOGGLES: 0x70E09E,
    FeetPowerup.BOOTS: 0xB37972,
    FeetPowerup.MOON_SHOES: 0x93FB7B,
    FeetPowerup.SKIRT: 0xFDA7FF,
}


@dataclass(frozen=True)
class PowerupKind:
    """A powerup worn either on the head or on the feet."""

    powerup: Union[HeadPowerup, FeetPowerup]

    @property
    def is_head(self) -> bool:
        return isinstance(self.powerup, HeadPowerup)

    @property
    def is_feet(self) -> bool:
        return isinstance(self.powerup, FeetPowerup)

    def display_name(self) -> str:
        return _NAMES[self.powerup]

    def text_color(self) -> Color:
        return _hex(_TEXT_COLORS[self.powerup])

    def particle_color(self) -> Color:
        return _hex(_PARTICLE_COLORS[self.powerup])


@dataclass
class Invuln:
    """A running invulnerability period; without a powerup it was caused by damage."""

    timer: float
    powerup: Optional[PowerupKind] = None

    @property
    def is_damage(self) -> bool:
        return self.powerup is None


@dataclass
class PlayerStatus:
    """What the player wears, whether they are invulnerable and whether they are dead."""

    head_powerup: Optional[HeadPowerup] = None
    feet_powerup: Optional[FeetPowerup] = None
    invuln: Optional[Invuln] = None
    dead_timer: Optional[float] = None

    @property
    def dead(self) -> bool:
        return self.dead_timer is not None

    def hurt(self) -> bool:
        """Take a hit: lose the head powerup, else the feet one, else die.

        Returns False when the player was invulnerable and nothing happened.
        """
        if self.invuln is not None:
            return False
        self.invuln = Invuln(DAMAGE_INVULN_TIME)
        if self.head_powerup is not None:
            self.head_powerup = None
        elif self.feet_powerup is not None:
            self.feet_powerup = None
        else:
            self.kill()
        return True

    def kill(self) -> None:
        self.dead_timer = 0.0
        self.head_powerup = None
        self.feet_powerup = None

    def tick_invuln(self) -> None:
        """Advance the invulnerability timer by one physics step."""
        if self.invuln is None:
            return
        self.invuln.timer -= PHYSICS_STEP
        if self.invuln.timer <= 0.0:
            self.invuln = None

    def collect_powerup(self, powerup: PowerupKind) -> Optional[PowerupKind]:
        """Wear the powerup; return the one it replaced in the same slot, if any."""
        replaced: Optional[PowerupKind] = None
        if isinstance(powerup.powerup, FeetPowerup):
            if self.feet_powerup is not None:
                replaced = PowerupKind(self.feet_powerup)
            self.feet_powerup = powerup.powerup
        else:
            if self.head_powerup is not None:
                replaced = PowerupKind(self.head_powerup)
            self.head_powerup = powerup.powerup
        self.invuln = Invuln(POWERUP_INVULN_TIME, powerup)
        return replaced


def fall_physics(
    feet_powerup: Optional[FeetPowerup], state: State, jump_held: bool
) -> tuple[float, float]:
    """The gravity and maximum fall speed for the player's feet, state and jump key."""
    if feet_powerup is FeetPowerup.SKIRT and state is State.FALLING:
        return GRAVITY * 0.9, (0.2 if jump_held else 1.2)
    if feet_powerup is FeetPowerup.MOON_SHOES:
        if state is State.JUMPING and jump_held:
            return GRAVITY * 0.65 * 0.7, MAX_FALL_SPEED
        return GRAVITY * 0.65, MAX_FALL_SPEED
    if state is State.JUMPING and jump_held:
        return GRAVITY * 0.7, MAX_FALL_SPEED
    return GRAVITY, MAX_FALL_SPEED