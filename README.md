# pixeldemos

A handful of small 2D game demos drawn with pygame, together with the plain
game logic behind them. The logic lives in ordinary modules that can be used
and tested without opening a window; pygame is only imported when a demo is
started.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running the demos

### Amida-kuji

```
pixeldemos-amidakuji [--config SETTINGS.json] [--seed N]
```

An Amida-kuji (ghost leg) lottery. Every participant starts at one end of a
lane, follows it and crosses every bridge met on the way, ending at a prize.

- `--config` loads settings from a JSON object. Every key must be present:
  `window_width`, `window_height`, `max_player`, `max_level`, `width`,
  `height`, `zoom`, `rotate_degree`, `margin_top`, `margin_right`,
  `margin_bottom`, `margin_left`, `font_size` (numbers) and `picks`,
  `prizes` (lists). Without `--config` the built-in defaults of
  `GameConfig` are used: 10 participants, 100 levels, a 1500 x 1500 ladder
  in an 800 x 800 window.
- `--seed` makes the ladder, colours and effects repeatable.

Keys (acted on when released):

| Key | Action |
| --- | --- |
| `1` | shuffle the ladder ten times in about 0.75 s |
| `2` | trace every path in turn at a constant speed |
| `3` | trace every path in turn, one second each |
| arrows | move the camera |
| `Enter` | rotate the camera by 90° |
| mouse wheel | zoom |
| `Space` | pause; press again to resume |
| `Tab` | toggle full screen |
| `Esc` | quit |

A left click sets off an explosion where you clicked. A right click toggles
the debugging view, which outlines the ladder's bound and grid; in that view
a left click also prints the bridge count, camera angle and position,
starfield speed and the click position to standard output. As each path
finishes, the pick and the prize it reached are printed to standard output.

### Bouncing balls

```
pixeldemos-bouncing [--seed N]
```

Two balls bouncing around a borderless 640 x 360 window, colliding with
each other and throwing off particles. The seed defaults to 4. `Space`
changes their colours, `Enter` sends them back to the centre, `Esc` or `Q`
quits.

### Smaller demos

```
pixeldemos life [--size 5] [--window-size 800] [--frame-rate 33]
pixeldemos jetpack [--assets DIR]
pixeldemos gophermark [--assets DIR]
pixeldemos isometric [--assets DIR]
pixeldemos lines
```

- `life` — Conway's Game of Life on a wrapping square board, about half
  filled at random. `--size` is the pixel size of a cell, `--window-size`
  the side of the window, `--frame-rate` the milliseconds between
  generations.
- `jetpack` — fly a jetpack with the arrow keys or WASD.
- `gophermark` — a sprite benchmark: 1000 sprites bounce around, holding the
  left mouse button adds ten more per frame, and the window title shows the
  count and frames per second. `Esc` quits.
- `isometric` — a small level of floor and wall tiles drawn in isometric
  projection, farthest first.
- `lines` — a left click moves a rectangle, pairs of right clicks set the
  two ends of a line, and the points where the line crosses the rectangle
  are marked.

## Pictures and fonts

The package ships no pictures or fonts. The `jetpack`, `gophermark` and
`isometric` demos load them from the directory given with `--assets`
(the current directory by default):

- `jetpack`: `jetpack.png`, `jetpack-on.png`, `jetpack-on2.png` and
  `intuitive.ttf`; `sky.png` is drawn as a background when present.
- `gophermark`: `gopher.png`.
- `isometric`: `castle.png`, a sprite sheet whose 64 x 64 tiles are taken
  from fixed places.

The Amida-kuji game draws with pygame's monospace system font and plain
coloured markers. It plays no music, shows no picture sprites for the
participants and opens no dialog boxes: settings come from `--config` and
results go to standard output.

## Using the building blocks

- `pixeldemos.geometry` — `Vec`, `Rect`, `Line`, `Matrix`, `Color`,
  `AnchorX`, `AnchorY` and helpers such as `lerp`, `direction`,
  `vertices_of_rect`, `random_nice_color`, `to_strings` and `anchor_offset`.
- `pixeldemos.camera` — a `Camera` that follows, zooms and rotates smoothly.
- `pixeldemos.dtwatch` and `pixeldemos.fpswatch` — `DtWatch` and `FPSWatch`
  for frame timing; both accept a clock function.
- `pixeldemos.life` — `Grid` and `Life`, a wrapping Game of Life board.
- `pixeldemos.ladder`, `pixeldemos.path`, `pixeldemos.nametag`,
  `pixeldemos.scalpel` — the Amida-kuji `Ladder`, its animated `Path`s,
  `Nametag` labels and debugging outlines.
- `pixeldemos.amidakuji` — `GameConfig`, `load_config` and `Game`, which ties
  them together.
- `pixeldemos.explosions`, `pixeldemos.starfield` — `Explosions` and
  `Galaxy` particle effects.
- `pixeldemos.bouncing` — `Palette`, `Ball` and `BouncingWorld`.
- `pixeldemos.demos` — `Jetpack`, `Gopher`, `LineEditor`,
  `cartesian_to_iso` and `depth_sorted_tiles`.

Shapes are returned as plain data (`Segment`, `Circle`, `Polygon`,
`StarShape`) rather than drawn, so any renderer can use them.

```python
import random

from pixeldemos.geometry import Matrix, Vec
from pixeldemos.ladder import Ladder
from pixeldemos.life import Life

print(Vec(3, 4).length())                                  # 5.0
print(Matrix.identity().moved(Vec(1, 2)).project(Vec(0, 0)))  # Vec(x=1.0, y=2.0)

game = Life.random(32, 5, random.Random(1))
game.step()

ladder = Ladder(4, 10, 600, 400, rng=random.Random(7))
ladder.reset()
route, prize = ladder.find_route(0)
print(prize, ladder.bridge_count())
```