"""Plane geometry, colours and text anchoring shared by the demos."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, Protocol


@dataclass(frozen=True)
class Vec:
    """A 2D vector or point."""

    x: float = 0.0
    y: float = 0.0

    def add(self, other: Vec) -> Vec:
        return Vec(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec) -> Vec:
        return Vec(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> Vec:
        return Vec(self.x * factor, self.y * factor)

    def rotated(self, angle: float) -> Vec:
        """Rotate counterclockwise by ``angle`` radians around the origin."""
        sin, cos = math.sin(angle), math.cos(angle)
        return Vec(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def unit(self) -> Vec:
        """Vector of length 1 in the same direction; (1, 0) for the zero vector."""
        if self.x == 0 and self.y == 0:
            return Vec(1.0, 0.0)
        return self.scaled(1 / self.length())

    def dot(self, other: Vec) -> float:
        return self.x * other.x + self.y * other.y

    def to(self, other: Vec) -> Vec:
        """Vector pointing from this point to ``other``."""
        return other.sub(self)

    def __add__(self, other: Vec) -> Vec:
        return self.add(other)

    def __sub__(self, other: Vec) -> Vec:
        return self.sub(other)

    def __mul__(self, factor: float) -> Vec:
        return self.scaled(factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec:
        return self.scaled(-1)


ZERO = Vec(0.0, 0.0)


@dataclass(frozen=True)
class Line:
    """A line segment from ``a`` to ``b``."""

    a: Vec
    b: Vec

    def intersection(self, other: Line) -> Vec | None:
        """Point where the two segments cross, or None if they do not."""
        r = self.b - self.a
        s = other.b - other.a
        denom = r.x * s.y - r.y * s.x
        if denom == 0:
            return None
        qp = other.a - self.a
        t = (qp.x * s.y - qp.y * s.x) / denom
        u = (qp.x * r.y - qp.y * r.x) / denom
        if 0 <= t <= 1 and 0 <= u <= 1:
            return self.a + r * t
        return None


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle between ``min`` and ``max``."""

    min: Vec
    max: Vec

    @classmethod
    def of(cls, min_x: float, min_y: float, max_x: float, max_y: float) -> Rect:
        return cls(Vec(min_x, min_y), Vec(max_x, max_y))

    def width(self) -> float:
        return self.max.x - self.min.x

    def height(self) -> float:
        return self.max.y - self.min.y

    def center(self) -> Vec:
        return Vec((self.min.x + self.max.x) / 2, (self.min.y + self.max.y) / 2)

    def moved(self, delta: Vec) -> Rect:
        return Rect(self.min + delta, self.max + delta)

    def vertices(self) -> list[Vec]:
        """The four corners, counterclockwise from ``min``."""
        return [
            self.min,
            Vec(self.max.x, self.min.y),
            self.max,
            Vec(self.min.x, self.max.y),
        ]

    def edges(self) -> list[Line]:
        """Left, top, right and bottom edges."""
        low_left, low_right, high_right, high_left = self.vertices()
        return [
            Line(low_left, high_left),
            Line(high_left, high_right),
            Line(high_right, low_right),
            Line(low_right, low_left),
        ]

    def intersection_points(self, line: Line) -> list[Vec]:
        """Distinct points where ``line`` crosses the rectangle's edges."""
        points: list[Vec] = []
        for edge in self.edges():
            point = line.intersection(edge)
            if point is not None and point not in points:
                points.append(point)
        return points


@dataclass(frozen=True)
class Matrix:
    """An affine 2D transformation: (a c e / b d f)."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Matrix:
        return cls()

    def moved(self, delta: Vec) -> Matrix:
        return Matrix(self.a, self.b, self.c, self.d, self.e + delta.x, self.f + delta.y)

    def chained(self, following: Matrix) -> Matrix:
        """Apply this matrix first and ``following`` after it."""
        n = following
        return Matrix(
            n.a * self.a + n.c * self.b,
            n.b * self.a + n.d * self.b,
            n.a * self.c + n.c * self.d,
            n.b * self.c + n.d * self.d,
            n.a * self.e + n.c * self.f + n.e,
            n.b * self.e + n.d * self.f + n.f,
        )

    def scaled_xy(self, around: Vec, factors: Vec) -> Matrix:
        m = self.moved(-around)
        sx, sy = factors.x, factors.y
        m = Matrix(m.a * sx, m.b * sy, m.c * sx, m.d * sy, m.e * sx, m.f * sy)
        return m.moved(around)

    def scaled(self, around: Vec, factor: float) -> Matrix:
        return self.scaled_xy(around, Vec(factor, factor))

    def rotated(self, around: Vec, angle: float) -> Matrix:
        sin, cos = math.sin(angle), math.cos(angle)
        m = self.moved(-around).chained(Matrix(cos, sin, -sin, cos, 0.0, 0.0))
        return m.moved(around)

    def project(self, v: Vec) -> Vec:
        return Vec(self.a * v.x + self.c * v.y + self.e, self.b * v.x + self.d * v.y + self.f)

    def unproject(self, v: Vec) -> Vec:
        det = self.a * self.d - self.c * self.b
        if det == 0:
            raise ValueError("matrix is not invertible")
        x, y = v.x - self.e, v.y - self.f
        return Vec((self.d * x - self.c * y) / det, (-self.b * x + self.a * y) / det)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in [0, 1]."""

    r: float
    g: float
    b: float
    a: float = 1.0


class AnchorY(IntEnum):
    TOP = 1
    MIDDLE = 2
    BOTTOM = 3


class AnchorX(IntEnum):
    LEFT = 1
    CENTER = 2
    RIGHT = 3


class _RandomSource(Protocol):
    def random(self) -> float: ...


def lerp(a: Any, b: Any, t: float) -> Any:
    """Linear interpolation between two vectors or two numbers."""
    if isinstance(a, Vec):
        return a.scaled(1 - t).add(b.scaled(t))
    return a * (1 - t) + b * t


def direction(start: Vec, end: Vec) -> Vec:
    """Unit vector from ``start`` to ``end``; the zero vector if they coincide."""
    vec = end - start
    if vec.x == 0 and vec.y == 0:
        return vec
    return vec.unit()


def vertices_of_rect(rect: Rect) -> list[Vec]:
    """The four corners of ``rect``."""
    return rect.vertices()


def random_nice_color(rng: _RandomSource | None = None) -> Color:
    """A random opaque colour whose RGB vector has length 1."""
    source = rng if rng is not None else random
    while True:
        r, g, b = source.random(), source.random(), source.random()
        norm = math.sqrt(r * r + g * g + b * b)
        if norm != 0:
            return Color(r / norm, g / norm, b / norm, 1.0)


def _format_item(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)


def to_strings(items: Iterable[Any]) -> list[str]:
    """Format every item as text; whole floats lose their fractional part."""
    return [_format_item(item) for item in items]


def anchor_offset(
    pos: Vec, width: float, height: float, anchor_x: AnchorX, anchor_y: AnchorY
) -> Vec:
    """Where to start writing a ``width`` x ``height`` label so it is anchored at ``pos``."""
    dx = {AnchorX.LEFT: 0.0, AnchorX.CENTER: width / 2, AnchorX.RIGHT: width}[anchor_x]
    dy = {AnchorY.TOP: height, AnchorY.MIDDLE: height / 2, AnchorY.BOTTOM: 0.0}[anchor_y]
    return Vec(pos.x - dx, pos.y - dy)