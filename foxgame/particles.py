"""Short-lived visual effects: debris, smoke, sparkles and powerup names."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass
from typing import Optional, Protocol, Union

from foxgame.powerups import GRAVITY, MAX_FALL_SPEED, PHYSICS_STEP, PowerupKind
from foxgame.util import Rect, Vec2

# Where the particle sprites start in the entity atlas
ATLAS_ORIGIN = Vec2(288.0, 80.0)

RGB = tuple[int, int, int]
RGBA = tuple[float, float, float, float]


class CrateParticleKind(enum.Enum):
    TL = "tl"
    TR = "tr"
    BL = "bl"
    BR = "br"
    STRAIGHT1 = "straight1"
    STRAIGHT2 = "straight2"
    DIAG1 = "diag1"
    DIAG2 = "diag2"


@dataclass(frozen=True)
class CrateParticle:
    piece: CrateParticleKind


@dataclass(frozen=True)
class ExplosionSmoke:
    pass


@dataclass(frozen=True)
class Explosion:
    pass


@dataclass(frozen=True)
class Sparkle:
    color: RGB


@dataclass(frozen=True)
class OneUp:
    pass


@dataclass(frozen=True)
class Stone:
    index: int


@dataclass(frozen=True)
class PowerupParticle:
    powerup: PowerupKind


@dataclass(frozen=True)
class Smoke:
    color: RGB
    lifetime: float


ParticleKind = Union[
    CrateParticle, ExplosionSmoke, Explosion, Sparkle, OneUp, Stone, PowerupParticle, Smoke
]

_CRATE_SOURCES = {
    CrateParticleKind.TL: (Vec2(0.0, 0.0), Vec2(12.0, 12.0)),
    CrateParticleKind.TR: (Vec2(12.0, 0.0), Vec2(12.0, 12.0)),
    CrateParticleKind.BL: (Vec2(24.0, 0.0), Vec2(12.0, 12.0)),
    CrateParticleKind.BR: (Vec2(36.0, 0.0), Vec2(12.0, 12.0)),
    CrateParticleKind.STRAIGHT1: (Vec2(0.0, 12.0), Vec2(8.0, 4.0)),
    CrateParticleKind.STRAIGHT2: (Vec2(8.0, 12.0), Vec2(11.0, 4.0)),
    CrateParticleKind.DIAG1: (Vec2(0.0, 16.0), Vec2(8.0, 8.0)),
    CrateParticleKind.DIAG2: (Vec2(9.0, 16.0), Vec2(8.0, 8.0)),
}


def draw_order(kind: ParticleKind) -> int:
    """Particles with a lower order are drawn first, underneath the others."""
    if isinstance(kind, (CrateParticle, Stone, Smoke)):
        return 0
    if isinstance(kind, ExplosionSmoke):
        return 1
    if isinstance(kind, (Sparkle, Explosion)):
        return 2
    if isinstance(kind, PowerupParticle):
        return 3
    return 4


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


class _Camera(Protocol):
    def on_screen(self, pos: Vec2) -> bool: ...


@dataclass
class Particle:
    pos: Vec2
    vel: Vec2
    kind: ParticleKind
    timer: float = 0.0
    flip_x: bool = False
    flip_y: bool = False

    def update(self) -> None:
        """Advance the particle by one physics step."""
        if isinstance(self.kind, (CrateParticle, Stone)):
            self.vel = Vec2(self.vel.x, min(self.vel.y + GRAVITY, MAX_FALL_SPEED))
        if isinstance(self.kind, Smoke):
            self.vel = self.vel * 0.99
        self.pos = self.pos + self.vel
        self.timer += PHYSICS_STEP

    def should_remove(self) -> bool:
        kind, t = self.kind, self.timer
        if isinstance(kind, (ExplosionSmoke, OneUp, PowerupParticle)):
            return t >= 2.0
        if isinstance(kind, Explosion):
            return t >= 0.25
        if isinstance(kind, Sparkle):
            return t >= 0.4
        if isinstance(kind, Smoke):
            return t >= kind.lifetime
        return False

    def _source(self) -> Optional[tuple[Vec2, Vec2]]:
        kind, t = self.kind, self.timer
        if isinstance(kind, CrateParticle):
            return _CRATE_SOURCES[kind.piece]
        if isinstance(kind, ExplosionSmoke):
            return Vec2(80.0, 0.0), Vec2(41.0, 29.0)
        if isinstance(kind, Explosion):
            return Vec2(80.0, 32.0), Vec2(48.0, 40.0)
        if isinstance(kind, Sparkle):
            if t >= 0.3:
                x = 63.0
            elif t >= 0.2:
                x = 58.0
            elif t >= 0.1:
                x = 53.0
            else:
                x = 48.0
            return Vec2(x, 32.0), Vec2(5.0, 9.0)
        if isinstance(kind, OneUp):
            return Vec2(48.0, 0.0), Vec2(15.0, 7.0)
        if isinstance(kind, Stone):
            return Vec2(kind.index * 16.0, 48.0), Vec2(16.0, 16.0)
        if isinstance(kind, Smoke):
            frame = 0
            for step in (4, 3, 2, 1):
                if t >= kind.lifetime * step / 5.0:
                    frame = step
                    break
            return Vec2(frame * 16.0, 64.0), Vec2(16.0, 16.0)
        return None

    def atlas_source(self) -> Optional[Rect]:
        """The sprite's rectangle in the entity atlas; None for text particles."""
        source = self._source()
        if source is None:
            return None
        pos, size = source
        return Rect.from_pos_size(pos, size).offset(ATLAS_ORIGIN)

    def draw_pos(self) -> Vec2:
        """Top-left corner of the sprite in world space."""
        source = self._source()
        size = source[1] if source else Vec2(0.0, 0.0)
        wobble = Vec2(0.0, 0.0)
        if isinstance(self.kind, OneUp):
            import math

            wobble = Vec2(math.sin(self.timer * 6.0) * 5.0, 0.0)
        return wobble + self.pos - size / 2.0

    def color(self) -> RGBA:
        """Tint and opacity the particle is drawn with."""
        kind, t = self.kind, self.timer
        if isinstance(kind, ExplosionSmoke):
            return 1.0, 1.0, 1.0, _clamp01(1.0 - t * 1.5)
        if isinstance(kind, Sparkle):
            r, g, b = kind.color
            return r / 255.0, g / 255.0, b / 255.0, 1.0
        if isinstance(kind, OneUp):
            return 1.0, 1.0, 1.0, _clamp01(2.0 - t)
        if isinstance(kind, Smoke):
            r, g, b = kind.color
            return r / 255.0, g / 255.0, b / 255.0, _clamp01(1.0 - t / kind.lifetime)
        if isinstance(kind, PowerupParticle):
            r, g, b = kind.powerup.text_color()
            return r / 255.0, g / 255.0, b / 255.0, _clamp01(1.0 - t / 2.0)
        return 1.0, 1.0, 1.0, 1.0

    def flips(self) -> tuple[bool, bool]:
        """Horizontal and vertical mirroring of the sprite."""
        if isinstance(self.kind, Explosion):
            return self.timer % 0.2 > 0.1, (self.timer + 0.05) % 0.2 > 0.1
        if isinstance(self.kind, (CrateParticle, OneUp, Stone)):
            return False, False
        return self.flip_x, self.flip_y


class Particles:
    """All live particles, kept in drawing order."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.particles: list[Particle] = []
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def _sort(self) -> None:
        self.particles.sort(key=lambda p: draw_order(p.kind))

    def add_particle(self, pos: Vec2, vel: Vec2, kind: ParticleKind) -> None:
        flip_x = self._rng.randrange(2) == 0
        flip_y = self._rng.randrange(2) == 0
        self.particles.append(Particle(pos, vel, kind, flip_x=flip_x, flip_y=flip_y))
        self._sort()

    def add_powerup(self, pos: Vec2, kind: PowerupKind) -> None:
        """Show the name of a collected powerup floating upwards."""
        self.particles.append(Particle(pos, Vec2(0.0, -0.4), PowerupParticle(kind)))
        self._sort()

    def add_stone_block(self, pos: Vec2) -> None:
        """Break a stone block into four flying pieces."""
        u = self._rng.uniform
        self.add_particle(pos, Vec2(u(-1.0, -0.8), u(-0.7, -1.0)), Stone(0))
        self.add_particle(pos, Vec2(u(1.0, 0.8), u(-0.7, -1.0)), Stone(1))
        self.add_particle(pos, Vec2(u(-1.0, -0.8), u(-0.4, -0.6)), Stone(2))
        self.add_particle(pos, Vec2(u(1.0, 0.8), u(-0.4, -0.6)), Stone(3))

    def add_smoke_cloud(self, pos: Vec2, color: RGB) -> None:
        """Four puffs of smoke drifting out diagonally."""
        u = self._rng.uniform
        for dx, dy in ((1.0, 1.0), (-1.0, 1.0), (1.0, -1.0), (-1.0, -1.0)):
            vel = Vec2(dx * u(0.2, 0.5), dy * u(0.2, 0.5))
            self.add_particle(pos, vel, Smoke(color, u(0.3, 0.7)))

    def update(self, camera: _Camera) -> None:
        """Step every particle and drop those that are done or off screen."""
        for particle in self.particles:
            particle.update()
        self.particles = [
            p for p in self.particles if not p.should_remove() and camera.on_screen(p.pos)
        ]