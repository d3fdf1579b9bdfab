import random

import pytest

from pixeldemos.explosions import Circle
from pixeldemos.geometry import Matrix, Rect, Vec
from pixeldemos.ladder import Ladder
from pixeldemos.scalpel import Polygon, dissect, projected_outline, unprojected_outline


def test_dissect_counts_and_bound():
    ladder = Ladder(4, 6, 300, 200, rng=random.Random(2))
    drawn = dissect(ladder)
    polygons = [d for d in drawn if isinstance(d, Polygon)]
    circles = [d for d in drawn if isinstance(d, Circle)]
    assert len(polygons) == 1
    assert list(polygons[0].points) == ladder.bound.vertices()
    assert len(circles) == 4 + 4 * 6


def test_dissect_marks_prize_points_first():
    ladder = Ladder(3, 4, 100, 100, rng=random.Random(0))
    circles = [d for d in dissect(ladder) if isinstance(d, Circle)]
    assert [c.center for c in circles[:3]] == ladder.points_at_prizes()


def test_projected_outline_identity():
    rect = Rect.of(1, 2, 30, 40)
    assert projected_outline(rect, Matrix.identity()) == rect.vertices()


def test_projected_outline_moves():
    rect = Rect.of(0, 0, 10, 10)
    shifted = projected_outline(rect, Matrix.identity().moved(Vec(5, -5)))
    assert shifted == rect.moved(Vec(5, -5)).vertices()


def test_unprojected_inverts_projected():
    rect = Rect.of(-3, 4, 17, 25)
    matrix = Matrix.identity().scaled(Vec(2, 3), 1.5).rotated(Vec(1, 1), 0.7).moved(Vec(9, -2))
    forward = projected_outline(rect, matrix)
    back = [matrix.unproject(v) for v in forward]
    for got, want in zip(back, rect.vertices()):
        assert got.x == pytest.approx(want.x)
        assert got.y == pytest.approx(want.y)


def test_unprojected_outline_singular_matrix():
    with pytest.raises(ValueError):
        unprojected_outline(Rect.of(0, 0, 1, 1), Matrix(0, 0, 0, 0, 0, 0))