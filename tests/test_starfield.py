import random

import pytest

from pixeldemos.starfield import MAX_RADIUS, STAR_COLORS, STAR_COUNT, Galaxy


def test_no_shapes_before_update():
    galaxy = Galaxy(100, 80, 400, rng=random.Random(0))
    assert galaxy.shapes() == []
    assert galaxy.stars == []


def test_default_star_count():
    galaxy = Galaxy(100, 80, 400, rng=random.Random(0))
    galaxy.update(0.01)
    assert len(galaxy.stars) == STAR_COUNT
    assert len(galaxy.shapes()) == STAR_COUNT


def test_stars_stay_within_depth_and_radius():
    galaxy = Galaxy(200, 100, 400, rng=random.Random(1), count=64)
    for _ in range(20):
        galaxy.update(0.05)
        for star in galaxy.stars:
            assert 0 <= star.z <= galaxy.width
            assert -galaxy.width <= star.pos.x <= galaxy.width
            assert -galaxy.height <= star.pos.y <= galaxy.height
        for shape in galaxy.shapes():
            assert 0 <= shape.radius <= MAX_RADIUS


def test_radius_follows_depth():
    galaxy = Galaxy(200, 100, 10, rng=random.Random(2), count=16)
    galaxy.update(0.1)
    for star, shape in zip(galaxy.stars, galaxy.shapes()):
        assert shape.radius == pytest.approx(MAX_RADIUS * (1 - star.z / galaxy.width))


def test_zero_speed_keeps_depth_and_has_no_trails():
    galaxy = Galaxy(200, 100, 0, rng=random.Random(3), count=16)
    galaxy.update(0.5)
    depths = [star.z for star in galaxy.stars]
    galaxy.update(0.5)
    assert [star.z for star in galaxy.stars] == depths
    assert all(star.p == star.z for star in galaxy.stars)
    assert all(shape.tail is None for shape in galaxy.shapes())


def test_stars_passing_the_viewer_are_recycled():
    galaxy = Galaxy(200, 100, 1e9, rng=random.Random(4), count=16)
    galaxy.update(1.0)
    assert all(star.z == galaxy.width for star in galaxy.stars)
    assert all(star.p == galaxy.width for star in galaxy.stars)


def test_star_colours_come_from_palette():
    galaxy = Galaxy(200, 100, 400, rng=random.Random(5), count=50)
    galaxy.update(0.01)
    assert all(star.color in STAR_COLORS for star in galaxy.stars)


def test_speed_can_be_changed():
    galaxy = Galaxy(200, 100, 400)
    galaxy.speed = galaxy.speed * 10
    assert galaxy.speed == 4000


def test_reproducible_with_seed():
    one = Galaxy(200, 100, 400, rng=random.Random(9), count=8)
    two = Galaxy(200, 100, 400, rng=random.Random(9), count=8)
    one.update(0.1)
    two.update(0.1)
    assert one.shapes() == two.shapes()