import random

import pytest

from pixeldemos.demos import (
    CAMERA_MAX_X,
    CAMERA_MIN_X,
    FLOOR,
    JETPACK_GROUND_OFFSET,
    LEVEL_DATA,
    TILE_SIZE,
    WALL,
    Gopher,
    Jetpack,
    JetSprite,
    LineEditor,
    cartesian_to_iso,
    depth_sorted_tiles,
    gophermark_title,
    main,
)
from pixeldemos.geometry import Vec


def test_idle_jetpack_falls_by_gravity():
    jet = Jetpack()
    jet.step(up=False, left=False, right=False)
    assert jet.vel_y == pytest.approx(-jet.gravity)
    assert jet.sprite is JetSprite.OFF
    assert jet.thrusting is False


def test_first_step_position_is_relative_to_center():
    jet = Jetpack()
    position = jet.step(up=False, left=False, right=False)
    assert position.x == pytest.approx(jet.center.x)
    assert position.y == pytest.approx(jet.center.y - JETPACK_GROUND_OFFSET)


def test_thrust_flame_alternates_every_five_frames():
    jet = Jetpack()
    for _ in range(5):
        jet.step(up=True, left=False, right=False)
    assert jet.sprite is JetSprite.ON1
    for _ in range(5):
        jet.step(up=True, left=False, right=False)
    assert jet.sprite is JetSprite.ON2
    assert jet.vel_y == pytest.approx(10 * jet.acceleration)


def test_right_turns_and_flips():
    jet = Jetpack()
    jet.step(up=False, left=False, right=True)
    assert jet.flipped == -1
    assert jet.thrusting is True
    assert jet.radians == pytest.approx(-jet.tilt)
    assert jet.vel_x == pytest.approx(jet.tilt * 30)


def test_left_mirrors_right():
    jet = Jetpack()
    jet.step(up=False, left=True, right=False)
    assert jet.flipped == 1
    assert jet.radians == pytest.approx(jet.tilt)
    assert jet.vel_x == pytest.approx(-jet.tilt * 30)


def test_ground_bounces_upwards():
    jet = Jetpack()
    jet.y = -10.0
    jet.vel_y = -5.0
    jet.step(up=False, left=False, right=False)
    assert jet.vel_y == pytest.approx(-0.3 * -5.0 - jet.gravity)
    assert jet.y == pytest.approx(jet.vel_y)


def test_camera_follows_part_way():
    jet = Jetpack()
    start = jet.camera
    position = jet.step(up=False, left=False, right=False)
    assert jet.camera.x == pytest.approx(start.x + (position.x - start.x) * 0.2)
    assert jet.camera.y == pytest.approx(start.y + (position.y - start.y) * 0.2)


def test_camera_is_clamped():
    jet = Jetpack()
    jet.x = 1e9
    jet.step(up=False, left=False, right=False)
    assert jet.camera.x == CAMERA_MAX_X
    jet.x = -1e9
    jet.step(up=False, left=False, right=False)
    assert jet.camera.x == CAMERA_MIN_X


def test_gopher_spawn_speed_in_range():
    rng = random.Random(7)
    for _ in range(50):
        gopher = Gopher.spawn(Vec(500, 400), rng)
        assert 50 <= gopher.vel.length() <= 150 + 1e-9
        assert gopher.pos.x == 500


def test_gopher_bounces_off_left_edge():
    gopher = Gopher(Vec(10, 400), Vec(-100, 0))
    gopher.update(0.1, 1000, 800, 40, 40)
    assert gopher.vel.x == pytest.approx(100)
    assert gopher.vel.y == pytest.approx(0)


def test_gopher_keeps_heading_in_open_space():
    gopher = Gopher(Vec(500, 400), Vec(30, -20))
    gopher.update(1.0, 1000, 800, 40, 40)
    assert gopher.pos.x == pytest.approx(530)
    assert gopher.pos.y == pytest.approx(380)
    assert gopher.vel.x == pytest.approx(30)


def test_gophermark_title_format():
    assert gophermark_title("Gophermark", 1000, 60) == "Gophermark | Gophers: 1000 | FPS: 60"


def test_iso_of_origin_is_origin():
    iso = cartesian_to_iso(Vec(0, 0))
    assert iso.x == 0 and iso.y == 0


def test_iso_diagonal_is_vertical():
    iso = cartesian_to_iso(Vec(3, 3))
    assert iso.x == 0
    assert iso.y > 0


def test_iso_unit_step_uses_half_tile():
    iso = cartesian_to_iso(Vec(1, 0))
    assert iso.x == TILE_SIZE // 2
    assert iso.y == TILE_SIZE // 4


def test_depth_sorted_tiles_order_and_kinds():
    tiles = depth_sorted_tiles(LEVEL_DATA)
    assert len(tiles) == sum(len(row) for row in LEVEL_DATA)
    assert (tiles[0].row, tiles[0].column) == (5, 5)
    assert (tiles[-1].row, tiles[-1].column) == (0, 0)
    assert tiles[-1].kind == FLOOR
    assert tiles[0].kind == WALL
    assert all(tile.kind == LEVEL_DATA[tile.row][tile.column] for tile in tiles)
    keys = [(tile.row, tile.column) for tile in tiles]
    assert keys == sorted(keys, reverse=True)


def test_right_clicks_alternate_line_ends():
    editor = LineEditor()
    editor.right_click(Vec(200, 300))
    assert (editor.start.x, editor.start.y) == (200, 300)
    assert (editor.end.x, editor.end.y) == (201, 301)
    editor.right_click(Vec(400, 50))
    assert (editor.start.x, editor.start.y) == (200, 300)
    assert (editor.end.x, editor.end.y) == (400, 50)
    assert editor.placing_start is True


def test_left_click_centers_rect():
    editor = LineEditor()
    editor.left_click(Vec(500, 600))
    center = editor.rect.center()
    assert center.x == pytest.approx(500)
    assert center.y == pytest.approx(600)


def test_default_line_crosses_right_edge_once():
    editor = LineEditor()
    points = editor.intersections()
    assert len(points) == 1
    assert points[0].x == pytest.approx(70)
    assert 10 <= points[0].y <= 50


def test_line_away_from_rect_has_no_intersections():
    editor = LineEditor()
    editor.right_click(Vec(500, 500))
    editor.right_click(Vec(600, 700))
    assert editor.intersections() == []


def test_main_rejects_zero_cell_size():
    with pytest.raises(SystemExit) as info:
        main(["life", "--size", "0"])
    assert info.value.code == 2


def test_main_requires_a_demo():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2