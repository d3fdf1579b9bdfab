"""The ladder of an amidakuji: lanes, bridges between them and their colours."""

from __future__ import annotations

import random
from dataclasses import dataclass

from .explosions import Circle
from .geometry import Color, Rect, Vec, random_nice_color

WHITE = Color(1.0, 1.0, 1.0, 1.0)
LINE_THICKNESS = 13.0
START_RADIUS = 20.0
_START_GAP = 10.0


@dataclass(frozen=True)
class Segment:
    """A straight stroke to draw."""

    start: Vec
    end: Vec
    thickness: float
    color: Color


class Ladder:
    """Lanes for every participant, crossed by random bridges at each level."""

    def __init__(
        self,
        participants: int,
        levels: int,
        width: float,
        height: float,
        padding_top: float = 0.0,
        padding_right: float = 0.0,
        padding_bottom: float = 0.0,
        padding_left: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        if participants < 2:
            raise ValueError("a ladder needs at least two participants")
        if levels < 2:
            raise ValueError("a ladder needs at least two levels")
        self.participants = participants
        self.levels = levels
        self.bound = Rect.of(0, 0, width, height)
        self.padding_top = padding_top
        self.padding_right = padding_right
        self.padding_bottom = padding_bottom
        self.padding_left = padding_left
        self._rng = rng if rng is not None else random.Random()
        self.colors: list[Color] = [random_nice_color(self._rng) for _ in range(participants)]
        self.bridges: list[list[bool]] = [[False] * levels for _ in range(participants - 1)]
        # Rows run downwards on screen: participant 0 is the top lane.
        self.grid: list[list[Vec]] = [
            [
                Vec(
                    level * self.dist_level() + padding_left,
                    height - participant * self.dist_participant() - padding_top,
                )
                for level in range(levels)
            ]
            for participant in range(participants)
        ]

    @property
    def width(self) -> float:
        return self.bound.width()

    @property
    def height(self) -> float:
        return self.bound.height()

    def dist_level(self) -> float:
        """Distance between two neighbouring levels."""
        return (self.width - (self.padding_left + self.padding_right)) / (self.levels - 1)

    def dist_participant(self) -> float:
        """Distance between two neighbouring lanes."""
        return (self.height - (self.padding_top + self.padding_bottom)) / (self.participants - 1)

    def points_at_picks(self) -> list[Vec]:
        """Where every lane starts."""
        return [row[0] for row in self.grid]

    def points_at_prizes(self) -> list[Vec]:
        """Where every lane ends."""
        return [row[-1] for row in self.grid]

    def clear_bridges(self) -> None:
        for row in self.bridges:
            row[:] = [False] * len(row)

    def _may_bridge(self, row: int, level: int) -> bool:
        neighbours = (row - 1, row + 1)
        return not any(
            0 <= other < len(self.bridges) and self.bridges[other][level] for other in neighbours
        )

    def generate_random_bridges(self, amount_approx: int) -> None:
        """Try ``amount_approx`` random spots, bridging those with no bridge beside them."""
        for _ in range(amount_approx):
            row = self._rng.randrange(len(self.bridges))
            level = self._rng.randrange(self.levels)
            if self._may_bridge(row, level):
                self.bridges[row][level] = True

    def regenerate_random_bridges(self, amount_approx: int) -> None:
        self.clear_bridges()
        self.generate_random_bridges(amount_approx)

    def regenerate_random_colors(self) -> None:
        self.colors = [random_nice_color(self._rng) for _ in self.colors]

    def reset(self) -> None:
        """New random bridges, dense or sparse, and new colours."""
        about_one = self.participants * (self.levels - 1)
        choices = (about_one * 2, about_one, about_one // 2)
        self.regenerate_random_bridges(choices[self._rng.randrange(3)])
        self.regenerate_random_colors()

    def bridge_count(self) -> int:
        return sum(sum(row) for row in self.bridges)

    def find_route(self, participant: int) -> tuple[list[Vec], int]:
        """The points a participant passes on the way down, and the prize reached."""
        if not 0 <= participant < self.participants:
            raise IndexError(f"no participant {participant}")
        row = participant
        route: list[Vec] = []
        for level in range(self.levels):
            route.append(self.grid[row][level])
            if row + 1 < self.participants and self.bridges[row][level]:
                row += 1
                route.append(self.grid[row][level])
            elif row - 1 >= 0 and self.bridges[row - 1][level]:
                row -= 1
                route.append(self.grid[row][level])
        return route, row

    def shapes(self) -> list[Segment | Circle]:
        """Lanes, then bridges, then a coloured start marker for each lane."""
        starts = self.points_at_picks()
        ends = self.points_at_prizes()
        drawn: list[Segment | Circle] = [
            Segment(start, end, LINE_THICKNESS, WHITE) for start, end in zip(starts, ends)
        ]
        for row, levels in enumerate(self.bridges):
            drawn.extend(
                Segment(self.grid[row][level], self.grid[row + 1][level], LINE_THICKNESS, WHITE)
                for level, bridged in enumerate(levels)
                if bridged
            )
        shift = Vec(START_RADIUS + _START_GAP, 0)
        drawn.extend(
            Circle(start - shift, START_RADIUS, color) for start, color in zip(starts, self.colors)
        )
        return drawn