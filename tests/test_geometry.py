import math
import random

import pytest

from pixeldemos.geometry import (
    AnchorX,
    AnchorY,
    Line,
    Matrix,
    Rect,
    Vec,
    anchor_offset,
    direction,
    lerp,
    random_nice_color,
    to_strings,
    vertices_of_rect,
)


def test_vec_add_sub_round_trip():
    a, b = Vec(3, -2), Vec(7.5, 4)
    assert a.add(b).sub(b) == a
    assert a.to(b) == b.sub(a)


def test_vec_rotation_preserves_length():
    v = Vec(3, 4)
    for angle in (0.3, 1.0, math.pi, -2.2):
        assert math.isclose(v.rotated(angle).length(), v.length())


def test_vec_rotation_quarter_turn():
    turned = Vec(1, 0).rotated(math.pi / 2)
    assert turned.x == pytest.approx(0.0, abs=1e-9)
    assert turned.y == pytest.approx(1.0, abs=1e-9)


def test_vec_unit_and_zero_unit():
    assert math.isclose(Vec(3, 4).unit().length(), 1.0)
    assert Vec(0, 0).unit() == Vec(1, 0)


def test_vec_dot_perpendicular_is_zero():
    v = Vec(2, 5)
    assert math.isclose(v.dot(v.rotated(math.pi / 2)), 0.0, abs_tol=1e-9)
    assert v.dot(v) == pytest.approx(v.length() ** 2)


def test_direction_zero_and_unit():
    assert direction(Vec(1, 1), Vec(1, 1)) == Vec(0, 0)
    d = direction(Vec(0, 0), Vec(0, -5))
    assert d == Vec(0, -1)


def test_lerp_endpoints():
    a, b = Vec(1, 2), Vec(9, -4)
    assert lerp(a, b, 0) == a
    assert lerp(a, b, 1) == b
    assert lerp(2.0, 6.0, 0.5) == 4.0


def test_rect_measures():
    r = Rect.of(10, 10, 70, 50)
    assert r.width() == 60
    assert r.height() == 40
    assert r.center() == Vec(40, 30)
    assert r.moved(Vec(5, -5)) == Rect.of(15, 5, 75, 45)


def test_vertices_of_rect_order():
    r = Rect.of(0, 0, 2, 3)
    assert vertices_of_rect(r) == [Vec(0, 0), Vec(2, 0), Vec(2, 3), Vec(0, 3)]


def test_rect_intersection_points_horizontal_line():
    r = Rect.of(10, 10, 70, 50)
    points = r.intersection_points(Line(Vec(0, 30), Vec(100, 30)))
    assert sorted(points, key=lambda p: p.x) == [Vec(10, 30), Vec(70, 30)]


def test_rect_intersection_points_line_inside():
    r = Rect.of(10, 10, 70, 50)
    assert r.intersection_points(Line(Vec(20, 20), Vec(30, 30))) == []


def test_line_parallel_has_no_intersection():
    assert Line(Vec(0, 0), Vec(1, 0)).intersection(Line(Vec(0, 1), Vec(1, 1))) is None


def test_matrix_project_unproject_round_trip():
    m = (
        Matrix.identity()
        .scaled(Vec(3, 4), 2.5)
        .rotated(Vec(-1, 2), 0.7)
        .moved(Vec(10, -20))
        .scaled_xy(Vec(0, 0), Vec(1, 3))
    )
    for v in (Vec(0, 0), Vec(5, 7), Vec(-3.5, 12)):
        back = m.unproject(m.project(v))
        assert back.x == pytest.approx(v.x, abs=1e-9)
        assert back.y == pytest.approx(v.y, abs=1e-9)


def test_matrix_identity_and_moved():
    v = Vec(4, 5)
    assert Matrix.identity().project(v) == v
    assert Matrix.identity().moved(Vec(1, 2)).project(v) == v + Vec(1, 2)


def test_matrix_scaled_keeps_center_fixed():
    center = Vec(3, 3)
    m = Matrix.identity().scaled(center, 4)
    assert m.project(center) == center
    assert m.rotated(center, 1.2).project(center) == pytest.approx(center)


def test_matrix_singular_unproject_raises():
    m = Matrix.identity().scaled(Vec(0, 0), 0)
    with pytest.raises(ValueError):
        m.unproject(Vec(1, 1))


def test_random_nice_color_is_normalised():
    rng = random.Random(7)
    for _ in range(20):
        c = random_nice_color(rng)
        assert math.isclose(c.r**2 + c.g**2 + c.b**2, 1.0)
        assert c.a == 1.0


def test_to_strings():
    assert to_strings(["Bulbasaur", 1.0, 2.5, True]) == ["Bulbasaur", "1", "2.5", "true"]


@pytest.mark.parametrize(
    "ax, ay, dx, dy",
    [
        (AnchorX.LEFT, AnchorY.BOTTOM, 0, 0),
        (AnchorX.RIGHT, AnchorY.TOP, 1, 1),
        (AnchorX.CENTER, AnchorY.MIDDLE, 0.5, 0.5),
    ],
)
def test_anchor_offset(ax, ay, dx, dy):
    pos, w, h = Vec(100, 50), 40, 20
    assert anchor_offset(pos, w, h, ax, ay) == Vec(pos.x - w * dx, pos.y - h * dy)