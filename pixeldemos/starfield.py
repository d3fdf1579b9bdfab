"""A flying-through-stars background."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from .geometry import Color, Vec

STAR_COLORS: tuple[Color, ...] = tuple(
    Color(r / 255, g / 255, b / 255, 1.0)
    for r, g, b in (
        (157, 180, 255),
        (162, 185, 255),
        (167, 188, 255),
        (170, 191, 255),
        (175, 195, 255),
        (186, 204, 255),
        (192, 209, 255),
        (202, 216, 255),
        (228, 232, 255),
        (237, 238, 255),
        (251, 248, 255),
        (255, 249, 249),
        (255, 245, 236),
        (255, 244, 232),
        (255, 241, 223),
        (255, 235, 209),
        (255, 215, 174),
        (255, 198, 144),
        (255, 190, 127),
        (255, 187, 123),
        (255, 187, 123),
    )
)

STAR_COUNT = 1024
MAX_RADIUS = 11.0
_TRAIL_THRESHOLD = 6.0


@dataclass
class Star:
    """A star at a plane position and depth; ``p`` is the depth one frame ago."""

    pos: Vec
    z: float
    p: float
    color: Color


@dataclass(frozen=True)
class StarShape:
    """A star as drawn: a dot at ``head``, with a trail to ``tail`` when moving fast."""

    head: Vec
    tail: Vec | None
    radius: float
    color: Color


def _ratio(a: float, b: float) -> float:
    if b != 0:
        return a / b
    if a == 0:
        return math.nan
    return math.copysign(math.inf, a)


def _scale(value: float, low: float, high: float, low_out: float, high_out: float) -> float:
    return (high_out - low_out) * (value - low) / (high - low) + low_out


class Galaxy:
    """A field of stars rushing towards the viewer."""

    def __init__(
        self,
        width: float,
        height: float,
        speed: float,
        rng: random.Random | None = None,
        count: int = STAR_COUNT,
    ) -> None:
        self.width = width
        self.height = height
        self.speed = speed
        self.count = count
        self.stars: list[Star] = []
        self._rng = rng if rng is not None else random.Random()
        self._shapes: list[StarShape] = []

    def _uniform(self, low: float, high: float) -> float:
        return self._rng.random() * (high - low) + low

    def _new_star(self) -> Star:
        pos = Vec(self._uniform(-self.width, self.width), self._uniform(-self.height, self.height))
        z = self._uniform(0, self.width)
        color = STAR_COLORS[self._rng.randrange(len(STAR_COLORS))]
        return Star(pos, z, 0.0, color)

    def update(self, dt: float) -> None:
        """Move every star ``dt`` seconds closer and recompute what to draw."""
        if not self.stars:
            self.stars = [self._new_star() for _ in range(self.count)]
        w, h = self.width, self.height
        offset = Vec(w / 2, h / 2)
        shapes: list[StarShape] = []
        for star in self.stars:
            star.p = star.z
            star.z -= dt * self.speed
            if star.z < 0:
                star.pos = Vec(self._uniform(-w, w), self._uniform(-h, h))
                star.z = w
                star.p = star.z

            head = Vec(
                _scale(_ratio(star.pos.x, star.z), 0, 1, 0, w),
                _scale(_ratio(star.pos.y, star.z), 0, 1, 0, h),
            )
            tail = Vec(
                _scale(_ratio(star.pos.x, star.p), 0, 1, 0, w),
                _scale(_ratio(star.pos.y, star.p), 0, 1, 0, h),
            )
            radius = _scale(star.z, 0, w, MAX_RADIUS, 0)
            trail = tail + offset if (head - tail).length() > _TRAIL_THRESHOLD else None
            shapes.append(StarShape(head + offset, trail, radius, star.color))
        self._shapes = shapes

    def shapes(self) -> list[StarShape]:
        """What the last update decided to draw, one entry per star."""
        return list(self._shapes)