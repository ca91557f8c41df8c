"""Shell casings and muzzle flash particles fired by the weapon."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from .config import Config

MAX_PARTICLES = 50
MAX_MUZZLE_PARTICLES = 10
SHELL_ANGLE = 60.0
SHELL_GRAVITY = 64.0
FLOOR_RATIO = 0.98

Color = tuple[int, int, int, int]


@dataclass
class Particle:
    """A single short-lived particle in screen coordinates."""

    position: tuple[float, float] = (0.0, 0.0)
    velocity: tuple[float, float] = (0.0, 0.0)
    color: Color = (255, 255, 255, 255)
    size: float = 0.0
    lifetime: float = 0.0
    max_lifetime: float = 0.0
    active: bool = False

    def age(self, dt: float) -> bool:
        """Advance the lifetime, fading the alpha; return whether still active."""
        self.lifetime += dt
        if self.lifetime >= self.max_lifetime:
            self.active = False
            return False
        alpha = 255.0 * (1.0 - (self.lifetime / self.max_lifetime) * 0.8)
        r, g, b, _ = self.color
        self.color = (r, g, b, int(alpha))
        return True


def _inactive_pool(count: int) -> list[Particle]:
    return [Particle() for _ in range(count)]


@dataclass
class ShellParticles:
    """Ejected shell casings that fall and bounce on the floor."""

    config: Config = field(default_factory=Config)
    rng: random.Random = field(default_factory=random.Random)
    particles: list[Particle] = field(
        default_factory=lambda: _inactive_pool(MAX_PARTICLES)
    )

    @property
    def _floor(self) -> float:
        return self.config.window.height * FLOOR_RATIO

    def spawn(self) -> Particle | None:
        """Eject one casing into a free slot; None when every slot is busy."""
        slot = next((p for p in self.particles if not p.active), None)
        if slot is None:
            return None
        rand = self.rng.randrange
        speed = 3.0 + rand(10) / 2.0
        radians = math.radians(SHELL_ANGLE)
        width, height = self.config.window.width, self.config.window.height
        slot.position = (float(width // 2 + 350), float(height - 350))
        slot.velocity = (math.cos(radians) * speed, -math.sin(radians) * speed)
        slot.color = (220 + rand(35), 180 + rand(40), 50 + rand(30), 255)
        slot.size = 4.0 + rand(2) / 5.0
        slot.lifetime = 0.0
        slot.max_lifetime = 1.5 + rand(10) / 10.0
        slot.active = True
        return slot

    def _move(self, particle: Particle, dt: float) -> None:
        vx, vy = particle.velocity
        vy += SHELL_GRAVITY * dt
        x, y = particle.position
        x += vx
        y += vy
        floor = self._floor
        if y > floor:
            y = floor
            vy *= -0.3
            vx *= 0.5
        particle.position = (x, y)
        particle.velocity = (vx, vy)

    def update(self, dt: float) -> None:
        """Age every casing and move the ones still alive."""
        for particle in self.active():
            if particle.age(dt):
                self._move(particle, dt)

    def active(self) -> list[Particle]:
        """Casings currently in flight."""
        return [p for p in self.particles if p.active]


@dataclass
class MuzzleFlash:
    """A brief burst of glowing sparks at the barrel."""

    config: Config = field(default_factory=Config)
    rng: random.Random = field(default_factory=random.Random)
    particles: list[Particle] = field(
        default_factory=lambda: _inactive_pool(MAX_MUZZLE_PARTICLES)
    )
    is_active: bool = False

    def spawn(self) -> list[Particle]:
        """Replace any current flash with a fresh burst of sparks."""
        rand = self.rng.randrange
        count = 3 + rand(MAX_MUZZLE_PARTICLES - 3)
        for particle in self.particles:
            particle.active = False
        width, height = self.config.window.width, self.config.window.height
        for particle in self.particles[:count]:
            base_x = width // 2 + 160 + rand(30) - 15
            base_y = height - 320 + rand(20) - 10
            particle.size = 3.0 + rand(6)
            particle.position = (float(base_x), float(base_y))
            particle.velocity = (0.0, 0.0)
            particle.color = (
                220 + rand(35),
                120 + rand(80),
                10 + rand(30),
                200 + rand(55),
            )
            particle.lifetime = 0.0
            particle.max_lifetime = 0.1 + rand(10) / 100.0
            particle.active = True
        self.is_active = True
        return self.particles[:count]

    def update(self, dt: float) -> None:
        """Age the sparks; the flash ends once none is left."""
        if not self.is_active:
            return
        for particle in self.particles:
            if particle.active:
                particle.age(dt)
        if not any(p.active for p in self.particles):
            self.is_active = False

    def active(self) -> list[Particle]:
        """Sparks to draw, empty when the flash is over."""
        if not self.is_active:
            return []
        return [p for p in self.particles if p.active]