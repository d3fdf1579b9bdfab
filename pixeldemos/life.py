"""Conway's Game of Life on a wrapping square grid."""

from __future__ import annotations

import random
from typing import Iterator

from .geometry import Rect, Vec


class Grid:
    """A square field of cells whose edges wrap around."""

    def __init__(self, size: int, cell_size: int) -> None:
        self.size = size
        self.cell_size = cell_size
        self.cells: list[list[bool]] = [[False] * size for _ in range(size)]

    def alive(self, x: int, y: int) -> bool:
        """State of the cell at (x, y), wrapping coordinates off the edges."""
        return self.cells[y % self.size][x % self.size]

    def set(self, x: int, y: int, state: bool) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.size}x{self.size} grid")
        self.cells[y][x] = state

    def next_state(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) lives in the next generation."""
        neighbours = sum(
            self.alive(x + dx, y + dy)
            for dx in (-1, 0, 1)
            for dy in (-1, 0, 1)
            if dx or dy
        )
        return neighbours == 3 or (neighbours == 2 and self.alive(x, y))

    def cells_to_draw(self) -> Iterator[tuple[Rect, bool]]:
        """Each cell's square in pixels together with whether it is alive."""
        cs = self.cell_size
        for x in range(self.size):
            for y in range(self.size):
                square = Rect(Vec(x * cs, y * cs), Vec(x * cs + cs, y * cs + cs))
                yield square, self.alive(x, y)


class Life:
    """The state of a round of the Game of Life."""

    def __init__(self, size: int, cell_size: int) -> None:
        self.size = size
        self.grid = Grid(size, cell_size)
        self._spare = Grid(size, cell_size)

    @classmethod
    def random(cls, size: int, cell_size: int, rng: random.Random | None = None) -> Life:
        """A game with about a quarter to a half of its cells alive."""
        source = rng if rng is not None else random.Random()
        life = cls(size, cell_size)
        for _ in range(size * size // 2):
            life.grid.set(source.randrange(size), source.randrange(size), True)
        return life

    def step(self) -> None:
        """Advance the game by one generation."""
        for y in range(self.size):
            for x in range(self.size):
                self._spare.set(x, y, self.grid.next_state(x, y))
        self.grid, self._spare = self._spare, self.grid