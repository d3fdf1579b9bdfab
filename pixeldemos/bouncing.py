"""Two balls bouncing off the walls and each other, shedding particles."""

from __future__ import annotations

import argparse
import math
import random
import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .geometry import Color, Vec

WIDTH = 640.0
HEIGHT = 360.0
INITIAL_SCALE = 32.0
INITIAL_PULSE = 2.3
DEFAULT_SEED = 4
TICK_SECONDS = 0.032
PARTICLE_ALPHA = 5 / 255
LIFE_DECAY = 0.03

COLORS: tuple[Color, ...] = tuple(
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

_SLOW_TURNS = tuple(range(1, 10))
_FAST_TURNS = tuple(range(10, 100, 10))


class Palette:
    """A cycling list of colours."""

    def __init__(self, colors: Iterable[object] = COLORS) -> None:
        self.colors: list[Color] = [c for c in colors if isinstance(c, Color)]
        if not self.colors:
            raise ValueError("a palette needs at least one colour")
        self.index = 0

    def next(self) -> Color:
        """Advance to the following colour, wrapping around, and return it."""
        self.index = (self.index + 1) % len(self.colors)
        return self.colors[self.index]

    def color(self) -> Color:
        return self.colors[self.index]

    def random(self, rng: random.Random) -> Color:
        """Jump to a random colour and return it."""
        self.index = rng.randrange(len(self.colors))
        return self.colors[self.index]


@dataclass
class Particle:
    """A fading dot that bounces off the edges of the window."""

    pos: Vec
    vel: Vec
    color: Color
    life: float

    @classmethod
    def at(cls, pos: Vec, vel: Vec, palette: Palette, rng: random.Random) -> Particle:
        base = palette.color()
        faded = Color(base.r, base.g, base.b, PARTICLE_ALPHA)
        return cls(pos, vel, faded, rng.random() * 1.5)

    def update(self, width: float, height: float) -> None:
        self.pos = self.pos + self.vel
        self.life -= LIFE_DECAY
        if self.pos.y < 0 or self.pos.y >= height:
            self.vel = Vec(self.vel.x, -self.vel.y)
        elif self.pos.x < 0 or self.pos.x >= width:
            self.vel = Vec(-self.vel.x, self.vel.y)


@dataclass(eq=False)
class Ball:
    """A round body that bounces and changes colour on every bounce."""

    pos: Vec
    vel: Vec
    mass: float
    radius: float
    color: Color
    palette: Palette
    particles: list[Particle] = field(default_factory=list)

    def update(
        self, balls: Iterable[Ball], width: float, height: float, rng: random.Random
    ) -> None:
        """Move one tick, bouncing off walls and colliding with the other balls."""
        self.pos = self.pos + self.vel
        radius = self.radius
        bounced = False

        if self.pos.y <= radius or self.pos.y >= height - radius:
            self.vel = Vec(self.vel.x, -self.vel.y)
            bounced = True
            y = radius if self.pos.y < radius else height - radius
            self.pos = Vec(self.pos.x, y)
        elif self.pos.x <= radius or self.pos.x >= width - radius:
            self.vel = Vec(-self.vel.x, self.vel.y)
            bounced = True
            x = radius if self.pos.x < radius else width - radius
            self.pos = Vec(x, self.pos.y)

        for other in balls:
            if other is self:
                continue
            d = other.pos - self.pos
            reach = other.radius + radius
            if d.length() > reach:
                continue
            total = other.mass + self.mass
            unit = d.unit()
            pen = unit.scaled(reach - d.length())
            other.pos = other.pos + pen.scaled(self.mass / total)
            self.pos = self.pos - pen.scaled(other.mass / total)

            impulse = 2 * (other.vel.dot(unit) - self.vel.dot(unit)) / total
            other.vel = other.vel - unit.scaled(impulse * self.mass)
            self.vel = self.vel + unit.scaled(impulse * other.mass)
            bounced = True

        if bounced:
            self._burst(rng)

    def _burst(self, rng: random.Random) -> None:
        self.color = self.palette.next()
        for turn in _SLOW_TURNS:
            velocity = self.vel.rotated(turn).scaled(rng.random())
            self.particles.append(Particle.at(self.pos, velocity, self.palette, rng))
        for turn in _FAST_TURNS:
            velocity = self.vel.rotated(turn).scaled(rng.random() + 1)
            self.particles.append(Particle.at(self.pos, velocity, self.palette, rng))


class BouncingWorld:
    """The balls, their shared palette and the pulsing drawing scale."""

    def __init__(
        self,
        width: float = WIDTH,
        height: float = HEIGHT,
        rng: random.Random | None = None,
        ball_count: int = 2,
        colors: Iterable[object] = COLORS,
    ) -> None:
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random(DEFAULT_SEED)
        self.palette = Palette(colors)
        self.s = INITIAL_PULSE
        self.scale = INITIAL_SCALE
        self.balls: list[Ball] = [self._new_ball(INITIAL_SCALE) for _ in range(ball_count)]

    def center(self) -> Vec:
        return Vec(self.width / 2, self.height / 2)

    def random_velocity(self) -> Vec:
        rng = self.rng
        return Vec(rng.random() * 2 - 1, rng.random() * 2 - 1).scaled(self.scale / 4)

    def _new_ball(self, radius: float) -> Ball:
        return Ball(
            self.center(),
            self.random_velocity(),
            math.pi * radius * radius,
            radius,
            self.palette.random(self.rng),
            self.palette,
        )

    def step(self) -> None:
        """Advance every ball and particle by one tick, dropping faded particles."""
        for ball in self.balls:
            ball.update(self.balls, self.width, self.height, self.rng)
            for particle in ball.particles:
                particle.update(self.width, self.height)
            ball.particles = [p for p in ball.particles if p.life > 0]

    def pulse(self, elapsed: float) -> None:
        """Set the pulse and drawing scale for ``elapsed`` seconds of running."""
        self.s = abs(math.sin(elapsed) * 0.8) * 2 - 1
        self.scale = 64 + 15 * self.s

    def background(self) -> Color:
        """A dark colour tinted by the palette's current colour."""
        current = self.palette.color()

        def channel(value: float) -> float:
            return (32 + (round(value * 255) // 128) * 4) / 255

        return Color(channel(current.r), channel(current.g), channel(current.b), 1.0)

    def recolor(self) -> None:
        for ball in self.balls:
            ball.color = ball.palette.next()

    def recenter(self) -> None:
        for ball in self.balls:
            ball.pos = self.center()
            ball.vel = self.random_velocity()

    def alive_particles(self) -> Iterator[Particle]:
        for ball in self.balls:
            yield from (p for p in ball.particles if p.life > 0)


def _rgba(color: Color, alpha: float | None = None) -> tuple[int, int, int, int]:
    a = color.a if alpha is None else alpha
    return tuple(max(0, min(255, round(v * 255))) for v in (color.r, color.g, color.b, a))  # type: ignore[return-value]


def _draw(pygame, screen, world: BouncingWorld) -> None:  # type: ignore[no-untyped-def]
    height = world.height

    def flip(v: Vec) -> tuple[int, int]:
        return round(v.x), round(height - v.y)

    screen.fill(_rgba(world.background())[:3])
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    points = [flip(ball.pos) for ball in world.balls]

    def thick_outline(thickness: float, alpha: float | None) -> None:
        if thickness <= 0 or not world.balls:
            return
        color = _rgba(world.balls[0].color, alpha)
        if len(points) > 1:
            pygame.draw.lines(overlay, color, True, points, max(1, round(thickness)))
        for ball, point in zip(world.balls, points):
            pygame.draw.circle(overlay, _rgba(ball.color, alpha), point, max(1, round(thickness / 2)))

    thick_outline(world.scale, None)
    thick_outline(world.scale * world.s, max(0.0, min(1.0, (128 - 128 * world.s) / 255)))

    for particle in world.alive_particles():
        radius = round(16 * particle.life)
        if radius > 0:
            pygame.draw.circle(overlay, _rgba(particle.color), flip(particle.pos), radius)

    screen.blit(overlay, (0, 0))


def main(argv: list[str] | None = None) -> int:
    """Open the window and run until Escape or Q is pressed."""
    parser = argparse.ArgumentParser(prog="bouncing", description="Bouncing balls demo.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="random seed")
    args = parser.parse_args(argv)

    import pygame

    world = BouncingWorld(rng=random.Random(args.seed))
    pygame.init()
    try:
        screen = pygame.display.set_mode((int(world.width), int(world.height)), pygame.NOFRAME)
        frame_clock = pygame.time.Clock()
        start = time.monotonic()
        next_tick = start
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key in (pygame.K_ESCAPE, pygame.K_q):
                        running = False
                    elif event.key == pygame.K_SPACE:
                        world.recolor()
                    elif event.key == pygame.K_RETURN:
                        world.recenter()
            now = time.monotonic()
            while now >= next_tick:
                world.step()
                next_tick += TICK_SECONDS
            world.pulse(now - start)
            _draw(pygame, screen, world)
            pygame.display.flip()
            frame_clock.tick(60)
    finally:
        pygame.quit()
    return 0