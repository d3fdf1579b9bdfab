"""Small interactive demos: life, jetpack, gophermark, isometric tiles and line collisions."""

from __future__ import annotations

import argparse
import enum
import math
import os
import random
import time
from dataclasses import dataclass, field
from typing import Iterable, NamedTuple, Sequence

from .geometry import ZERO, Line, Matrix, Rect, Vec
from .life import Life

# ---------------------------------------------------------------------------
# Jetpack

JETPACK_WINDOW = (1024, 768)
JETPACK_GROUND_OFFSET = 372.0
CAMERA_MAX_X = 25085.0
CAMERA_MIN_X = -14843.0
CAMERA_MAX_Y = 22500.0
CAMERA_FOLLOW = 0.2
FRAMES_PER_FLAME = 5
TUTORIAL = "Explore the Skies with WASD or Arrow Keys!"


class JetSprite(enum.Enum):
    """Which jetpack picture is shown; the value is its file name."""

    OFF = "jetpack.png"
    ON1 = "jetpack-on.png"
    ON2 = "jetpack-on2.png"


@dataclass
class Jetpack:
    """A jetpack flying over the ground with a camera chasing it."""

    center: Vec = Vec(JETPACK_WINDOW[0] / 2, JETPACK_WINDOW[1] / 2)
    gravity: float = 0.6
    acceleration: float = 0.9
    tilt: float = 0.01
    x: float = 0.0
    y: float = 0.0
    vel_x: float = 0.0
    vel_y: float = 0.0
    radians: float = 0.0
    flipped: float = 1.0
    thrusting: bool = False
    which_on: bool = False
    on_number: int = 0
    sprite: JetSprite = JetSprite.OFF
    camera: Vec = field(default=ZERO, init=False)
    position: Vec = field(default=ZERO, init=False)

    def __post_init__(self) -> None:
        self.camera = self.center
        self.position = self._screen_position()

    def _screen_position(self) -> Vec:
        return Vec(self.center.x + self.x, self.center.y + self.y - JETPACK_GROUND_OFFSET)

    def step(self, up: bool, left: bool, right: bool) -> Vec:
        """Advance one frame under the given controls; return where the jetpack is drawn."""
        self.thrusting = up
        if right:
            self.thrusting = True
            self.flipped = -1.0
            self.radians -= self.tilt
            self.vel_x += self.tilt * 30
        elif left:
            self.thrusting = True
            self.flipped = 1.0
            self.radians += self.tilt
            self.vel_x -= self.tilt * 30
        elif self.vel_x < 0:
            self.radians -= self.tilt / 3
            self.vel_x += self.tilt * 10
        elif self.vel_x > 0:
            self.radians += self.tilt / 3
            self.vel_x -= self.tilt * 10

        if self.y < 0:
            self.y = 0.0
            self.vel_y = -0.3 * self.vel_y

        if self.thrusting:
            self.vel_y += self.acceleration
            self.which_on = not self.which_on
            self.on_number += 1
            if self.on_number == FRAMES_PER_FLAME:
                self.on_number = 0
                self.sprite = JetSprite.ON1 if self.which_on else JetSprite.ON2
        else:
            self.sprite = JetSprite.OFF
            self.vel_y -= self.gravity

        position = self._screen_position()
        self.position = position
        self.x += self.vel_x
        self.y += self.vel_y

        cam_x = self.camera.x + (position.x - self.camera.x) * CAMERA_FOLLOW
        cam_y = self.camera.y + (position.y - self.camera.y) * CAMERA_FOLLOW
        cam_x = min(max(cam_x, CAMERA_MIN_X), CAMERA_MAX_X)
        cam_y = min(cam_y, CAMERA_MAX_Y)
        self.camera = Vec(cam_x, cam_y)
        return position

    def camera_matrix(self) -> Matrix:
        """Matrix that takes world positions to the window."""
        return Matrix.identity().moved(self.center - self.camera)

    def sprite_matrix(self) -> Matrix:
        """Placement of the jetpack picture: scaled, moved, mirrored and tilted."""
        pos = self.position
        return (
            Matrix.identity()
            .scaled(ZERO, 4)
            .moved(pos)
            .scaled_xy(pos, Vec(self.flipped, 1))
            .rotated(pos, self.radians)
        )


# ---------------------------------------------------------------------------
# Gophermark

GOPHERMARK_WINDOW = (1000, 800)
INITIAL_GOPHERS = 1000
GOPHERS_PER_CLICK = 10


@dataclass
class Gopher:
    """A sprite drifting around and bouncing off the window edges."""

    pos: Vec
    vel: Vec

    @classmethod
    def spawn(cls, pos: Vec, rng: random.Random) -> Gopher:
        """A gopher at ``pos`` heading in a random direction at 50 to 150 px/s."""
        heading = Vec(1, 0).rotated(rng.random() * 2 * math.pi)
        return cls(pos, heading.scaled(rng.random() * 100 + 50))

    def update(
        self,
        dt: float,
        width: float,
        height: float,
        sprite_width: float,
        sprite_height: float,
    ) -> None:
        """Move ``dt`` seconds and turn back at the edges."""
        self.pos = self.pos + self.vel.scaled(dt)
        vx, vy = self.vel.x, self.vel.y
        if self.pos.x <= sprite_width / 2 or self.pos.x > width - sprite_width / 2:
            vx = -vx
        if self.pos.y <= sprite_height / 2 or self.pos.y > height - sprite_height / 2:
            vy = -vy
        self.vel = Vec(vx, vy)


def gophermark_title(title: str, gophers: int, fps: int) -> str:
    return f"{title} | Gophers: {gophers} | FPS: {fps}"


# ---------------------------------------------------------------------------
# Isometric tiles

TILE_SIZE = 64
FLOOR = 0
WALL = 1
ISO_WINDOW = (800, 800)
ISO_OFFSET = Vec(400, 325)

# The first row is drawn nearest the viewer, at the lower left.
LEVEL_DATA: tuple[tuple[int, ...], ...] = (
    (FLOOR, FLOOR, FLOOR, FLOOR, FLOOR, FLOOR),
    (WALL, FLOOR, FLOOR, FLOOR, FLOOR, WALL),
    (WALL, FLOOR, FLOOR, FLOOR, FLOOR, WALL),
    (WALL, FLOOR, FLOOR, FLOOR, FLOOR, WALL),
    (WALL, FLOOR, FLOOR, FLOOR, FLOOR, WALL),
    (WALL, WALL, WALL, WALL, WALL, WALL),
)


class Tile(NamedTuple):
    """A tile to draw: its place in the level, its kind and its position."""

    row: int
    column: int
    kind: int
    position: Vec


def cartesian_to_iso(point: Vec) -> Vec:
    """Map level coordinates onto the isometric plane."""
    return Vec((point.x - point.y) * (TILE_SIZE // 2), (point.x + point.y) * (TILE_SIZE // 4))


def depth_sorted_tiles(level: Sequence[Sequence[int]]) -> list[Tile]:
    """Every tile of ``level`` from the farthest to the closest (painter's order)."""
    return [
        Tile(x, y, level[x][y], ISO_OFFSET + cartesian_to_iso(Vec(x, y)))
        for x in reversed(range(len(level)))
        for y in reversed(range(len(level[x])))
    ]


# ---------------------------------------------------------------------------
# Line collisions

LINES_WINDOW = (1024, 768)


class LineEditor:
    """A rectangle moved by left clicks and a line set by pairs of right clicks."""

    def __init__(self) -> None:
        self.rect = Rect.of(10, 10, 70, 50)
        self.start = Vec(20, 20)
        self.end = Vec(100, 30)
        self.placing_start = True

    def right_click(self, pos: Vec) -> None:
        """Set the line's first point, then its second, by turns."""
        if self.placing_start:
            self.start = pos
            self.end = pos + Vec(1, 1)
        else:
            self.end = pos
        self.placing_start = not self.placing_start

    def left_click(self, pos: Vec) -> None:
        """Move the rectangle so that its centre is at ``pos``."""
        self.rect = self.rect.moved(self.rect.center().to(pos))

    def line(self) -> Line:
        return Line(self.start, self.end)

    def intersections(self) -> list[Vec]:
        """Where the line crosses the rectangle's edges."""
        return list(self.rect.intersection_points(self.line()))


# ---------------------------------------------------------------------------
# Runners


def _flip(v: Vec, height: float) -> tuple[float, float]:
    return v.x, height - v.y


def _quit_requested(pygame, events: Iterable) -> bool:  # type: ignore[no-untyped-def]
    return any(event.type == pygame.QUIT for event in events)


def _run_life(args: argparse.Namespace) -> int:
    import pygame

    side = int(args.window_size)
    rows = side // args.size
    game = Life.random(rows, args.size)
    interval = args.frame_rate / 1000
    pygame.init()
    try:
        screen = pygame.display.set_mode((side, side))
        pygame.display.set_caption("Pixel Rocks!")
        screen.fill((255, 255, 255))
        frame_clock = pygame.time.Clock()
        next_tick = time.monotonic()
        while not _quit_requested(pygame, pygame.event.get()):
            now = time.monotonic()
            if now >= next_tick:
                for square, alive in game.grid.cells_to_draw():
                    color = (0, 0, 0) if alive else (255, 255, 255)
                    points = [_flip(v, side) for v in square.vertices()]
                    pygame.draw.polygon(screen, color, points)
                game.step()
                next_tick = now + interval
            pygame.display.flip()
            frame_clock.tick(120)
    finally:
        pygame.quit()
    return 0


def _run_jetpack(args: argparse.Namespace) -> int:
    import pygame

    width, height = JETPACK_WINDOW
    jet = Jetpack(center=Vec(width / 2, height / 2))
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Jetpack!")

        def load(name: str):  # type: ignore[no-untyped-def]
            return pygame.image.load(os.path.join(args.assets, name)).convert_alpha()

        sprites = {}
        for kind in JetSprite:
            image = load(kind.value)
            w, h = image.get_size()
            sprites[kind] = pygame.transform.scale(image, (w * 4, h * 4))
        sky_path = os.path.join(args.assets, "sky.png")
        sky = None
        if os.path.exists(sky_path):
            image = load("sky.png")
            w, h = image.get_size()
            sky = pygame.transform.scale(image, (w * 10, h * 10))
        font = pygame.font.Font(os.path.join(args.assets, "intuitive.ttf"), 50)
        tutorial = font.render(TUTORIAL, True, (255, 255, 255))
        tutorial_origin = Vec(jet.center.x - 450, jet.center.y - 200)
        sky_center = (jet.center + Vec(0, 766)).scaled(10)

        frame_clock = pygame.time.Clock()
        while not _quit_requested(pygame, pygame.event.get()):
            keys = pygame.key.get_pressed()
            jet.step(
                up=keys[pygame.K_UP] or keys[pygame.K_w],
                left=keys[pygame.K_LEFT] or keys[pygame.K_a],
                right=keys[pygame.K_RIGHT] or keys[pygame.K_d],
            )
            camera = jet.camera_matrix()

            def to_screen(v: Vec) -> tuple[float, float]:
                return _flip(camera.project(v), height)

            screen.fill((0, 128, 0))
            if sky is not None:
                screen.blit(sky, sky.get_rect(center=to_screen(sky_center)))
            screen.blit(tutorial, tutorial.get_rect(bottomleft=to_screen(tutorial_origin)))
            image = sprites[jet.sprite]
            if jet.flipped < 0:
                image = pygame.transform.flip(image, True, False)
            image = pygame.transform.rotate(image, math.degrees(jet.radians))
            screen.blit(image, image.get_rect(center=to_screen(jet.position)))
            pygame.display.flip()
            frame_clock.tick(60)
    finally:
        pygame.quit()
    return 0


def _run_gophermark(args: argparse.Namespace) -> int:
    import pygame

    title = "Gophermark"
    width, height = GOPHERMARK_WINDOW
    rng = random.Random()
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        picture = pygame.image.load(os.path.join(args.assets, "gopher.png")).convert_alpha()
        sprite_width, sprite_height = picture.get_size()
        center = Vec(width / 2, height / 2)
        gophers = [Gopher.spawn(center, rng) for _ in range(INITIAL_GOPHERS)]
        frames = 0
        last = time.monotonic()
        next_second = last + 1.0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
            now = time.monotonic()
            dt, last = now - last, now

            if pygame.mouse.get_pressed()[0]:
                mx, my = pygame.mouse.get_pos()
                mouse = Vec(mx, height - my)
                gophers.extend(Gopher.spawn(mouse, rng) for _ in range(GOPHERS_PER_CLICK))

            screen.fill((0, 0, 0))
            for gopher in gophers:
                gopher.update(dt, width, height, sprite_width, sprite_height)
                screen.blit(picture, picture.get_rect(center=_flip(gopher.pos, height)))
            pygame.display.flip()

            frames += 1
            if now >= next_second:
                pygame.display.set_caption(gophermark_title(title, len(gophers), frames))
                frames = 0
                next_second = now + 1.0
    finally:
        pygame.quit()
    return 0


def _run_isometric(args: argparse.Namespace) -> int:
    import pygame

    width, height = ISO_WINDOW
    center = Vec(width / 2, height / 2)
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Isometric demo")
        castle = pygame.image.load(os.path.join(args.assets, "castle.png")).convert_alpha()
        sheet_height = castle.get_height()

        def tile_image(bottom: int):  # type: ignore[no-untyped-def]
            region = castle.subsurface((0, sheet_height - bottom, TILE_SIZE, TILE_SIZE))
            return pygame.transform.scale(region, (TILE_SIZE * 2, TILE_SIZE * 2))

        images = {WALL: tile_image(512), FLOOR: tile_image(192)}
        for tile in depth_sorted_tiles(LEVEL_DATA):
            placed = (
                Matrix.identity().moved(tile.position).scaled_xy(center, Vec(2, 2)).project(ZERO)
            )
            image = images[FLOOR] if tile.kind == FLOOR else images[WALL]
            screen.blit(image, image.get_rect(center=_flip(placed, height)))
        pygame.display.flip()

        frame_clock = pygame.time.Clock()
        while not _quit_requested(pygame, pygame.event.get()):
            pygame.display.flip()
            frame_clock.tick(60)
    finally:
        pygame.quit()
    return 0


def _run_lines(args: argparse.Namespace) -> int:
    import pygame

    width, height = LINES_WINDOW
    editor = LineEditor()
    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Line collision")
        frame_clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    pos = Vec(event.pos[0], height - event.pos[1])
                    if event.button == 1:
                        editor.left_click(pos)
                    elif event.button == 3:
                        editor.right_click(pos)

            screen.fill((23, 39, 58))
            outline = [_flip(v, height) for v in editor.rect.vertices()]
            pygame.draw.polygon(screen, (0, 0, 0), outline, 3)
            pygame.draw.line(
                screen,
                (10, 10, 250),
                _flip(editor.start, height),
                _flip(editor.end, height),
                3,
            )
            for point in editor.intersections():
                pygame.draw.circle(screen, (250, 10, 10), _flip(point, height), 4)
            pygame.display.flip()
            frame_clock.tick(60)
    finally:
        pygame.quit()
    return 0


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pixeldemos", description="Small graphics demos.")
    commands = parser.add_subparsers(dest="demo", required=True)

    life = commands.add_parser("life", help="Conway's Game of Life")
    life.add_argument("--size", type=int, default=5, help="the size of each cell")
    life.add_argument(
        "--window-size", type=float, default=800.0, help="the pixel size of one side of the grid"
    )
    life.add_argument(
        "--frame-rate", type=float, default=33.0, help="milliseconds between generations"
    )
    life.set_defaults(run=_run_life)

    for name, runner, text in (
        ("jetpack", _run_jetpack, "fly a jetpack"),
        ("gophermark", _run_gophermark, "sprite benchmark"),
        ("isometric", _run_isometric, "isometric tiles"),
    ):
        sub = commands.add_parser(name, help=text)
        sub.add_argument("--assets", default=".", help="directory holding the pictures")
        sub.set_defaults(run=runner)

    lines = commands.add_parser("lines", help="line and rectangle intersections")
    lines.set_defaults(run=_run_lines)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the demo named on the command line."""
    parser = _parser()
    args = parser.parse_args(argv)
    if args.demo == "life":
        if args.size <= 0:
            parser.error("--size must be positive")
        if int(args.window_size) < args.size:
            parser.error("--window-size must hold at least one cell")
        if args.frame_rate < 0:
            parser.error("--frame-rate must not be negative")
    return args.run(args)