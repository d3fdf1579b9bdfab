"""An amidakuji (ghost leg) lottery: picks at one end, prizes at the other."""

from __future__ import annotations

import argparse
import json
import math
import random
import threading
import time
from dataclasses import dataclass, field, fields
from typing import Any, Callable, Mapping

from .camera import Camera
from .explosions import Circle, Explosions
from .fpswatch import FPSWatch
from .geometry import (
    AnchorX,
    AnchorY,
    Color,
    Rect,
    Vec,
    random_nice_color,
    to_strings,
)
from .ladder import Ladder, Segment
from .nametag import Nametag
from .path import Path
from .scalpel import Polygon, dissect, projected_outline, unprojected_outline
from .starfield import Galaxy

TITLE = "AMIDA KUJI"
GALAXY_SPEED = 400.0
EXPLOSION_PRECISION = 5
MIN_FPS_FOR_GALAXY = 10
SHUFFLE_TIMES = 10
SHUFFLE_MILLISECONDS = 750
CAMERA_SPEED = 1000.0

DEFAULT_PICKS: tuple[str, ...] = (
    "Bulbasaur", "Ivysaur", "Venusaur", "Charmander", "Charmeleon", "Charizard",
    "Squirtle", "Wartortle", "Blastoise", "Caterpie", "Metapod", "Butterfree",
    "Weedle", "Kakuna", "Beedrill", "Pidgey", "Pidgeotto", "Pidgeot", "Rattata",
)
DEFAULT_PRIZES: tuple[str, ...] = (
    "TM88", "TM89", "TM90", "TM91", "TM92",
    "HM01", "HM02", "HM03", "HM04", "HM05", "HM06",
)

_PICK_SHIFT = Vec(-60.0, 5.0)
_PRIZE_SHIFT = Vec(15.0, 5.0)

# Setting keys as they appear in a settings file, by field name.
_NUMBER_KEYS = {
    "window_width": "window_width",
    "window_height": "window_height",
    "participants": "max_player",
    "levels": "max_level",
    "width": "width",
    "height": "height",
    "zoom": "zoom",
    "rotate_degree": "rotate_degree",
    "margin_top": "margin_top",
    "margin_right": "margin_right",
    "margin_bottom": "margin_bottom",
    "margin_left": "margin_left",
    "font_size": "font_size",
}
_INTEGER_FIELDS = {"participants", "levels"}
_NAME_KEYS = {"picks": "picks", "prizes": "prizes"}


@dataclass(frozen=True)
class GameConfig:
    """User settings for a game."""

    window_width: float = 800.0
    window_height: float = 800.0
    participants: int = 10
    levels: int = 100
    width: float = 1500.0
    height: float = 1500.0
    zoom: float = -4.0
    rotate_degree: float = 270.0
    margin_top: float = 50.0
    margin_right: float = 100.0
    margin_bottom: float = 50.0
    margin_left: float = 200.0
    font_size: float = 28.0
    picks: tuple[str, ...] = field(default=DEFAULT_PICKS)
    prizes: tuple[str, ...] = field(default=DEFAULT_PRIZES)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> GameConfig:
        """Read settings keyed as in a settings file; every key is required."""
        values: dict[str, Any] = {}
        for name, key in _NUMBER_KEYS.items():
            number = _number(data, key)
            values[name] = int(number) if name in _INTEGER_FIELDS else number
        for name, key in _NAME_KEYS.items():
            values[name] = tuple(to_strings(_names(data, key)))
        return cls(**values)

    def to_mapping(self) -> dict[str, Any]:
        """Settings keyed as in a settings file."""
        keys = {**_NUMBER_KEYS, **_NAME_KEYS}
        result: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            result[keys[f.name]] = list(value) if isinstance(value, tuple) else value
        return result


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise ValueError(f"missing setting {key!r}") from None


def _number(data: Mapping[str, Any], key: str) -> float:
    value = _lookup(data, key)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"setting {key!r} must be a number, not {value!r}")
    return float(value)


def _names(data: Mapping[str, Any], key: str) -> list[Any]:
    value = _lookup(data, key)
    if not isinstance(value, (list, tuple)):
        raise ValueError(f"setting {key!r} must be a list")
    return list(value)


def load_config(path: str) -> GameConfig:
    """Load settings from a JSON file."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError("settings file must hold a JSON object")
    return GameConfig.from_mapping(data)


def _nametags(
    names: tuple[str, ...], points: list[Vec], shift: Vec, anchor_x: AnchorX
) -> list[Nametag]:
    return [
        Nametag(names[i] if i < len(names) else "", point + shift, AnchorY.MIDDLE, anchor_x)
        for i, point in enumerate(points)
    ]


class Game:
    """A ladder with its paths, labels and decorations, driven frame by frame."""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        cfg = config if config is not None else GameConfig()
        self.config = cfg
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock
        self._lock = threading.RLock()
        self.background: Color = random_nice_color(self._rng)
        self.is_scalpel_mode = False
        self.on_result: Callable[[str], None] | None = None
        self.ladder = Ladder(
            cfg.participants,
            cfg.levels,
            cfg.width,
            cfg.height,
            cfg.margin_top,
            cfg.margin_right,
            cfg.margin_bottom,
            cfg.margin_left,
            rng=self._rng,
        )
        self.galaxy = Galaxy(cfg.width, cfg.height, GALAXY_SPEED, rng=self._rng)
        self.explosions = Explosions(
            cfg.width, cfg.width, None, EXPLOSION_PRECISION, rng=self._rng
        )
        self.fps_watch = FPSWatch(
            Vec(cfg.window_width, cfg.window_height), AnchorY.TOP, AnchorX.RIGHT, clock=clock
        )
        self.camera = Camera(
            self.ladder.bound.center(), Rect.of(0, 0, cfg.window_width, cfg.window_height)
        )
        self.camera.zoom(cfg.zoom)
        self.camera.rotate(cfg.rotate_degree)
        self.paths: list[Path] = []
        self.reset_paths()
        self.nametag_picks = _nametags(
            cfg.picks, self.ladder.points_at_picks(), _PICK_SHIFT, AnchorX.RIGHT
        )
        self.nametag_prizes = _nametags(
            cfg.prizes, self.ladder.points_at_prizes(), _PRIZE_SHIFT, AnchorX.LEFT
        )

    @property
    def participants(self) -> int:
        return self.ladder.participants

    def reset_path(self, participant: int) -> None:
        """Find the participant's route through the ladder afresh."""
        with self._lock:
            route, prize = self.ladder.find_route(participant)
            path = Path(route, prize, self.ladder.colors[participant], clock=self._clock)
            path.on_passed_each_point = lambda pt, heading: self.explosions.explode_at(
                pt, heading.scaled(2)
            )
            if participant < len(self.paths):
                self.paths[participant] = path
            else:
                self.paths.append(path)

    def reset_paths(self) -> None:
        with self._lock:
            del self.paths[self.participants :]
            for participant in range(self.participants):
                self.reset_path(participant)

    def _start(self, participant: int, seconds: float | None) -> None:
        path = self.paths[participant]
        if seconds is None:
            path.animate()
        else:
            path.animate_in_time(seconds)

    def animate_paths(self, seconds: float | None = None) -> None:
        """Reveal every path in turn, reporting each result as it completes.

        Without ``seconds`` paths move at a constant speed; with it, each
        path takes that long.
        """
        with self._lock:
            for participant, path in enumerate(self.paths):
                path.on_finished_animation = self._finisher(participant, seconds)
            if self.paths:
                self._start(0, seconds)

    def _finisher(self, participant: int, seconds: float | None) -> Callable[[], None]:
        caption = self.result_caption(participant)

        def finished() -> None:
            if self.on_result is not None:
                self.on_result(caption)
            following = participant + 1
            if following < len(self.paths):
                self._start(following, seconds)
            self.paths[participant].on_finished_animation = None

        return finished

    def result_caption(self, participant: int) -> str:
        """The text announcing what a participant's pick leads to."""
        prize = self.paths[participant].prize
        pick_name = self.nametag_picks[participant]
        prize_name = self.nametag_prizes[prize]
        return (
            f" 👆 Pick\t(No. {participant + 1})\t{pick_name}\t\r\n\r\n"
            f" 🎁 Prize\t(No. {prize + 1})\t{prize_name}\t\r\n"
        )

    def reset(self) -> None:
        """New bridges and colours, and the paths through them."""
        with self._lock:
            self.ladder.reset()
            self.reset_paths()

    def _shuffle_step(self) -> None:
        self.background = random_nice_color(self._rng)
        self.reset()

    def pause(self) -> None:
        with self._lock:
            for path in self.paths:
                if path.is_animating:
                    path.pause()

    def resume(self) -> None:
        with self._lock:
            for path in self.paths:
                if path.is_animating:
                    path.resume()

    def update(self, dt: float) -> None:
        """Advance everything that moves by ``dt`` seconds."""
        with self._lock:
            self.camera.update(dt)
            for path, color in zip(self.paths, self.ladder.colors):
                if path.is_animating:
                    path.color = color
                    path.update()
            if self.fps_watch.fps >= MIN_FPS_FOR_GALAXY:
                self.galaxy.update(dt)
            if self.explosions.is_exploding:
                self.explosions.update(dt)

    def _on_resize(self, width: float, height: float) -> None:
        self.camera.set_screen_bound(Rect.of(0, 0, width, height))
        self.fps_watch.set_pos(Vec(width, height), AnchorY.TOP, AnchorX.RIGHT)


def _rgb(color: Color) -> tuple[int, int, int]:
    return tuple(max(0, min(255, round(v * 255))) for v in (color.r, color.g, color.b))  # type: ignore[return-value]


def _rgba(color: Color) -> tuple[int, int, int, int]:
    return (*_rgb(color), max(0, min(255, round(color.a * 255))))


def _draw(pygame, screen, game: Game, font, small_font) -> None:  # type: ignore[no-untyped-def]
    _, height = screen.get_size()
    matrix = game.camera.transform()
    zoom = game.camera.zoom_level

    def pt(v: Vec) -> tuple[float, float]:
        p = matrix.project(v)
        return p.x, height - p.y

    def size(value: float) -> int:
        return max(1, round(value * zoom))

    def shape(item: Segment | Circle | Polygon, surface=screen) -> None:  # type: ignore[no-untyped-def]
        if isinstance(item, Segment):
            color = _rgba(item.color)
            a, b = pt(item.start), pt(item.end)
            pygame.draw.line(surface, color, a, b, size(item.thickness))
            for end in (a, b):
                pygame.draw.circle(surface, color, end, size(item.thickness / 2))
        elif isinstance(item, Circle):
            pygame.draw.circle(surface, _rgba(item.color), pt(item.center), size(item.radius))
        else:
            points = [pt(v) for v in item.points]
            width = 0 if item.thickness == 0 else max(1, round(item.thickness))
            pygame.draw.polygon(surface, _rgba(item.color), points, width)

    screen.fill(_rgb(game.background))
    for star in game.galaxy.shapes():
        color = _rgb(star.color)
        if star.tail is not None:
            pygame.draw.line(screen, color, pt(star.head), pt(star.tail), size(star.radius))
        pygame.draw.circle(screen, color, pt(star.head), size(star.radius))
    for item in game.ladder.shapes():
        shape(item)
    for path in game.paths:
        for segment in path.drawn_segments():
            shape(segment)

    char_width, char_height = font.size("M")
    angle = math.degrees(game.camera.angle)
    for tag in (*game.nametag_picks, *game.nametag_prizes):
        if not tag.desc:
            continue
        layout = tag.layout(char_width, char_height)
        pygame.draw.polygon(screen, _rgb(tag.background), [pt(v) for v in layout.box.vertices()])
        label = font.render(tag.desc, True, _rgb(tag.foreground))
        label = pygame.transform.rotozoom(label, angle, zoom)
        screen.blit(label, label.get_rect(center=pt(layout.box.center())))

    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    for circle in game.explosions.shapes():
        if circle.radius > 0:
            shape(circle, overlay)
    screen.blit(overlay, (0, 0))

    for path, color in zip(game.paths, game.ladder.colors):
        if path.tip is not None:
            pygame.draw.circle(screen, _rgb(color), pt(path.tip), size(12))

    if game.is_scalpel_mode:
        for item in dissect(game.ladder):
            shape(item)
        bound = game.ladder.bound
        blue = [pt(v) for v in unprojected_outline(bound, matrix)]
        pygame.draw.polygon(screen, (0, 0, 255), blue, 10)
        red = [pt(game.camera.unproject(v)) for v in bound.vertices()]
        pygame.draw.polygon(screen, (255, 0, 0), red, 10)
        black = [(v.x, height - v.y) for v in projected_outline(bound, matrix)]
        pygame.draw.polygon(screen, (0, 0, 0), black, 10)

    caption = small_font.render(game.fps_watch.caption(), True, (255, 255, 255), (0, 0, 0))
    pos = game.fps_watch.pos
    screen.blit(caption, caption.get_rect(topright=(pos.x, height - pos.y)))


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until it is closed or Escape is pressed."""
    parser = argparse.ArgumentParser(prog="amidakuji", description="Amidakuji lottery.")
    parser.add_argument("--config", help="JSON file with user settings")
    parser.add_argument("--seed", type=int, help="random seed")
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else GameConfig()
    rng = random.Random(args.seed) if args.seed is not None else random.Random()

    import pygame

    game = Game(config, rng)
    game.on_result = lambda caption: print(caption.strip())
    pygame.init()
    try:
        window_size = (int(config.window_width), int(config.window_height))
        screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        font = pygame.font.SysFont("monospace", int(config.font_size))
        small_font = pygame.font.SysFont("monospace", 18)
        frame_clock = pygame.time.Clock()
        game.fps_watch.start()
        fullscreen = False
        paused = False
        shuffles_left = 0
        next_shuffle = 0.0
        saved_speed = game.galaxy.speed
        last = time.monotonic()
        running = True
        while running:
            now = time.monotonic()
            dt, last = now - last, now
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.VIDEORESIZE:
                    game._on_resize(event.w, event.h)
                elif event.type == pygame.MOUSEWHEEL:
                    game.camera.zoom(event.y)
                elif event.type == pygame.KEYUP:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        if paused:
                            game.resume()
                        else:
                            game.pause()
                        paused = not paused
                    elif event.key == pygame.K_TAB:
                        fullscreen = not fullscreen
                        if fullscreen:
                            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
                        else:
                            screen = pygame.display.set_mode(window_size, pygame.RESIZABLE)
                        game._on_resize(*screen.get_size())
                    elif event.key == pygame.K_1 and shuffles_left == 0:
                        shuffles_left = SHUFFLE_TIMES
                        saved_speed = game.galaxy.speed
                        game.galaxy.speed = saved_speed * 10
                        next_shuffle = now
                    elif event.key == pygame.K_2:
                        game.reset_paths()
                        game.animate_paths()
                    elif event.key == pygame.K_3:
                        game.reset_paths()
                        game.animate_paths(1.0)
                    elif event.key == pygame.K_RETURN:
                        game.camera.rotate(-90)
                elif event.type == pygame.MOUSEBUTTONUP:
                    screen_pos = Vec(event.pos[0], screen.get_height() - event.pos[1])
                    if event.button == 3:
                        game.is_scalpel_mode = not game.is_scalpel_mode
                    elif event.button == 1:
                        game_pos = game.camera.unproject(screen_pos)
                        game.explosions.explode_at(game_pos, Vec(10, 10))
                        if game.is_scalpel_mode:
                            print(
                                f"number of bridges: {game.ladder.bridge_count()}\n"
                                f"camera angle in degree: {math.degrees(game.camera.angle)}\n"
                                f"camera coordinates: {game.camera.position.x} "
                                f"{game.camera.position.y}\n"
                                f"starfield speed: {game.galaxy.speed}\n"
                                f"mouse click coords in screen pos: {screen_pos.x} {screen_pos.y}\n"
                                f"mouse click coords in game pos: {game_pos.x} {game_pos.y}"
                            )

            pressed = pygame.key.get_pressed()
            turn = -game.camera.angle
            for key, heading in (
                (pygame.K_RIGHT, Vec(1, 0)),
                (pygame.K_LEFT, Vec(-1, 0)),
                (pygame.K_UP, Vec(0, 1)),
                (pygame.K_DOWN, Vec(0, -1)),
            ):
                if pressed[key]:
                    game.camera.move(heading.scaled(CAMERA_SPEED * dt).rotated(turn))

            if shuffles_left and now >= next_shuffle:
                game._shuffle_step()
                shuffles_left -= 1
                next_shuffle = now + SHUFFLE_MILLISECONDS / 1000 / SHUFFLE_TIMES
                if shuffles_left == 0:
                    game.galaxy.speed = saved_speed

            if not paused:
                game.update(dt)
            game.fps_watch.poll()
            _draw(pygame, screen, game, font, small_font)
            pygame.display.flip()
            frame_clock.tick(120)
    finally:
        pygame.quit()
    return 0