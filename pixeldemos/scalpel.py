"""Debug overlays that lay bare a ladder's anatomy."""

from __future__ import annotations

from dataclasses import dataclass

from .explosions import Circle
from .geometry import Color, Matrix, Rect, Vec, vertices_of_rect
from .ladder import Ladder

BLACK = Color(0.0, 0.0, 0.0, 1.0)
BLUE_VIOLET = Color(138 / 255, 43 / 255, 226 / 255, 1.0)
RED = Color(1.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Polygon:
    """A closed outline; a thickness of 0 means filled."""

    points: tuple[Vec, ...]
    thickness: float
    color: Color


def dissect(ladder: Ladder) -> list[Polygon | Circle]:
    """The ladder's bound, its end points and every grid point."""
    drawn: list[Polygon | Circle] = [Polygon(tuple(vertices_of_rect(ladder.bound)), 4.0, BLACK)]
    drawn.extend(Circle(point, 10.0, BLUE_VIOLET) for point in ladder.points_at_prizes())
    drawn.extend(Circle(point, 5.0, RED) for row in ladder.grid for point in row)
    return drawn


def projected_outline(rect: Rect, matrix: Matrix) -> list[Vec]:
    """Corners of ``rect`` taken through ``matrix``."""
    return [matrix.project(v) for v in vertices_of_rect(rect)]


def unprojected_outline(rect: Rect, matrix: Matrix) -> list[Vec]:
    """Corners of ``rect`` taken back through the inverse of ``matrix``."""
    return [matrix.unproject(v) for v in vertices_of_rect(rect)]