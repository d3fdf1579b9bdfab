import random

import pytest

from pixeldemos.explosions import (
    DEFAULT_COLORS,
    PARTICLE_ALPHA,
    PARTICLES_PER_EXPLOSION,
    ColorPicker,
    Explosions,
    Particle,
)
from pixeldemos.geometry import Color, Vec


def test_default_picker_starts_at_first_colour():
    picker = ColorPicker()
    assert picker.current() == Color(190 / 255, 38 / 255, 51 / 255, 1.0)


def test_picker_wraps_around():
    picker = ColorPicker()
    first = picker.current()
    for _ in range(len(DEFAULT_COLORS)):
        picker.next()
    assert picker.current() == first
    assert picker.index == 0


def test_picker_next_returns_following_colour():
    picker = ColorPicker()
    assert picker.next() == DEFAULT_COLORS[1]


def test_picker_ignores_non_colours():
    red = Color(1.0, 0.0, 0.0)
    picker = ColorPicker(["red", red, 3])
    assert picker.colors == [red]


def test_picker_without_colours_raises():
    with pytest.raises(ValueError):
        ColorPicker([])


def test_explode_adds_particles_in_next_colour():
    boom = Explosions(100, 100, rng=random.Random(1))
    assert not boom.is_exploding
    boom.explode_at(Vec(50, 50), Vec(10, 10))
    assert boom.is_exploding
    assert len(boom.particles) == PARTICLES_PER_EXPLOSION
    expected = DEFAULT_COLORS[1]
    for particle in boom.particles:
        assert particle.pos == Vec(50, 50)
        assert particle.color.r == expected.r
        assert particle.color.a == pytest.approx(PARTICLE_ALPHA)
        assert 0 <= particle.life < 1.5


def test_explode_is_reproducible_with_seed():
    one = Explosions(100, 100, rng=random.Random(7))
    two = Explosions(100, 100, rng=random.Random(7))
    one.explode_at(Vec(1, 2), Vec(3, 4))
    two.explode_at(Vec(1, 2), Vec(3, 4))
    assert one.particles == two.particles


def test_particle_moves_and_fades():
    particle = Particle(Vec(1, 1), Vec(2, 3), Color(0, 0, 0), 1.0)
    particle.update(0.1, 100, 100)
    assert particle.pos == Vec(3, 4)
    assert particle.life == pytest.approx(1.0 - 0.3)
    assert particle.vel == Vec(2, 3)


def test_particle_bounces_off_top():
    particle = Particle(Vec(5, 99), Vec(1, 5), Color(0, 0, 0), 1.0)
    particle.update(0.1, 100, 100)
    assert particle.vel.y < 0
    assert particle.vel.x == 1


def test_particle_bounces_off_side():
    particle = Particle(Vec(99, 5), Vec(5, 1), Color(0, 0, 0), 1.0)
    particle.update(0.1, 100, 100)
    assert particle.vel.x < 0
    assert particle.vel.y == 1


def test_update_drops_dead_particles():
    boom = Explosions(100, 100, rng=random.Random(2))
    boom.explode_at(Vec(50, 50), Vec(1, 1))
    boom.update(1.0)
    assert boom.particles == []
    assert not boom.is_exploding
    assert boom.shapes() == []


def test_shapes_follow_particles():
    boom = Explosions(100, 100, rng=random.Random(3))
    boom.explode_at(Vec(20, 20), Vec(1, 1))
    shapes = boom.shapes()
    assert len(shapes) == len(boom.particles)
    for shape, particle in zip(shapes, boom.particles):
        assert shape.center == particle.pos
        assert shape.radius == pytest.approx(16 * particle.life)


def test_set_bound():
    boom = Explosions(10, 20)
    boom.set_bound(30, 40)
    assert (boom.width, boom.height) == (30, 40)