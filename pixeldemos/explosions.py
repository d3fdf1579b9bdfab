"""Bursts of short-lived, bouncing particles."""

from __future__ import annotations

import random
import threading
from dataclasses import dataclass
from typing import Iterable

from .geometry import Color, Vec

DEFAULT_COLORS: tuple[Color, ...] = tuple(
    Color(r / 255, g / 255, b / 255, 1.0)
    for r, g, b in (
        (190, 38, 51),
        (224, 111, 139),
        (73, 60, 43),
        (164, 100, 34),
        (235, 137, 49),
        (247, 226, 107),
        (47, 72, 78),
        (68, 137, 26),
        (163, 206, 39),
        (0, 87, 132),
        (49, 162, 242),
        (178, 220, 239),
    )
)

PARTICLE_ALPHA = 5 / 255
PARTICLES_PER_EXPLOSION = 18

_SLOW_TURNS = tuple(range(1, 10))
_FAST_TURNS = tuple(range(10, 100, 10))


class ColorPicker:
    """Cycles through a fixed list of colours."""

    def __init__(self, colors: Iterable[object] | None = None) -> None:
        source = DEFAULT_COLORS if colors is None else colors
        self.colors: list[Color] = [c for c in source if isinstance(c, Color)]
        if not self.colors:
            raise ValueError("a colour picker needs at least one colour")
        self.index = 0

    def next(self) -> Color:
        """Advance to the following colour, wrapping around, and return it."""
        self.index = (self.index + 1) % len(self.colors)
        return self.colors[self.index]

    def current(self) -> Color:
        return self.colors[self.index]


@dataclass
class Particle:
    """A fading dot that bounces off the edges of its area."""

    pos: Vec
    vel: Vec
    color: Color
    life: float

    @classmethod
    def at(cls, pos: Vec, vel: Vec, color: Color, rng: random.Random) -> Particle:
        faded = Color(color.r, color.g, color.b, PARTICLE_ALPHA)
        return cls(pos, vel, faded, rng.random() * 1.5)

    def update(self, dt: float, width: float, height: float) -> None:
        self.pos = self.pos + self.vel
        self.life -= 3 * dt
        if self.pos.y < 0 or self.pos.y >= height:
            self.vel = Vec(self.vel.x, self.vel.y * (-10 * dt))
        elif self.pos.x < 0 or self.pos.x >= width:
            self.vel = Vec(self.vel.x * (-10 * dt), self.vel.y)


@dataclass(frozen=True)
class Circle:
    """A filled circle to draw."""

    center: Vec
    radius: float
    color: Color


class Explosions:
    """Owns every live particle and lays them out as circles."""

    def __init__(
        self,
        width: float,
        height: float,
        colors: Iterable[object] | None = None,
        precision: int = 5,
        rng: random.Random | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.precision = precision
        self.picker = ColorPicker(colors)
        self.particles: list[Particle] = []
        self._rng = rng if rng is not None else random.Random()
        self._lock = threading.Lock()

    @property
    def is_exploding(self) -> bool:
        with self._lock:
            return bool(self.particles)

    def set_bound(self, width: float, height: float) -> None:
        """Particles bounce when they meet this bound."""
        self.width = width
        self.height = height

    def update(self, dt: float) -> None:
        """Move every particle and drop the ones that have faded out."""
        with self._lock:
            for particle in self.particles:
                particle.update(dt, self.width, self.height)
            self.particles = [p for p in self.particles if p.life > 0]

    def explode_at(self, pos: Vec, vel: Vec) -> None:
        """Spray a burst of particles from ``pos`` in the next colour."""
        with self._lock:
            self.picker.next()
            color = self.picker.current()
            rng = self._rng
            for turn in _SLOW_TURNS:
                velocity = vel.rotated(turn).scaled(rng.random())
                self.particles.append(Particle.at(pos, velocity, color, rng))
            for turn in _FAST_TURNS:
                velocity = vel.rotated(turn).scaled(rng.random() + 1)
                self.particles.append(Particle.at(pos, velocity, color, rng))

    def shapes(self) -> list[Circle]:
        """One circle per live particle, sized by its remaining life."""
        with self._lock:
            return [Circle(p.pos, 16 * p.life, p.color) for p in self.particles]