"""Animated routes from a pick down a ladder to its prize."""

from __future__ import annotations

import math
import time
from typing import Callable, Iterable, NamedTuple

from .dtwatch import DtWatch
from .geometry import ZERO, Color, Vec, direction, lerp
from .ladder import WHITE, Segment

DIST_PER_SEC = 500.0
PATH_THICKNESS = 9.0


class RoadPosition(NamedTuple):
    """Where a distance along a path falls."""

    index: int
    road: Vec
    pos: Vec
    direction: Vec


class Path:
    """A route through a ladder that can be revealed over time."""

    def __init__(
        self,
        roads: Iterable[Vec] | None = None,
        prize: int = -1,
        color: Color = WHITE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.roads: list[Vec] = list(roads) if roads is not None else []
        self.prize = prize
        self.color = color
        self.tip: Vec | None = self.roads[0] if self.roads else None
        self.iroad = 0
        self.is_animating = False
        self.on_finished_animation: Callable[[], None] | None = None
        self.on_passed_each_point: Callable[[Vec, Vec], None] | None = None
        self._watch = DtWatch(clock)
        self._time_limit = 0.0
        self._animate_in_time = False
        self._segments: list[Segment] = []

    def length(self) -> float:
        """Total length of all roads."""
        return sum((a - b).length() for a, b in zip(self.roads, self.roads[1:]))

    def find_road_by_dist(self, distance: float) -> RoadPosition:
        """The road reached after travelling ``distance`` and the exact point on it."""
        if not self.roads:
            raise ValueError("path has no roads")
        travelled = 0.0
        for index, (start, end) in enumerate(zip(self.roads, self.roads[1:])):
            this_road = (start - end).length()
            travelled += this_road
            if travelled > distance:
                scalar = this_road - (travelled - distance)
                if start.y == end.y and start.x < end.x:
                    return RoadPosition(index, start, Vec(start.x + scalar, start.y), Vec(1.0, 0.0))
                if start.x == end.x and start.y > end.y:
                    return RoadPosition(index, start, Vec(start.x, start.y - scalar), Vec(0.0, -1.0))
                if start.x == end.x and start.y < end.y:
                    return RoadPosition(index, start, Vec(start.x, start.y + scalar), Vec(0.0, 1.0))
                if start.y == end.y and start.x > end.x:
                    return RoadPosition(index, start, Vec(start.x - scalar, start.y), Vec(-1.0, 0.0))
                raise ValueError(f"road {index} is not axis-aligned")
        last = len(self.roads) - 1
        heading = ZERO if last == 0 else direction(self.roads[last - 1], self.roads[last])
        end_point = self.roads[last]
        return RoadPosition(last, end_point, end_point, heading)

    def animate(self) -> None:
        """Start revealing the path at a constant speed."""
        self._watch.start()
        self._animate_in_time = False
        self.is_animating = True

    def animate_in_time(self, seconds: float) -> None:
        """Start revealing the path so that it completes in ``seconds``."""
        self._watch.start()
        self._time_limit = seconds
        self._animate_in_time = True
        self.is_animating = True

    def pause(self) -> None:
        """Mark the moment the animation clock stops."""
        if self._watch.is_started:
            self._watch.dt()

    def resume(self) -> None:
        """Shift the animation start by the time spent paused."""
        if self._watch.is_started:
            paused = self._watch.dt()
            self._watch.started_at += paused  # type: ignore[operator]

    def _progress(self) -> float:
        elapsed = self._watch.dt_since_start()
        if not self._animate_in_time:
            return elapsed * DIST_PER_SEC
        if self._time_limit <= 0:
            return math.inf
        return lerp(0.0, self.length(), elapsed / self._time_limit)

    def update(self) -> None:
        """Advance the animation and recompute the drawn segments and the tip."""
        if not self.roads:
            raise ValueError("path has no roads")
        last = len(self.roads) - 1
        iroad, start, end = last, self.roads[last], self.roads[last]
        passed: tuple[Vec, Vec] | None = None
        finished = False
        if self.is_animating:
            iroad, start, end, heading = self.find_road_by_dist(self._progress())
            if iroad > self.iroad:
                passed = (start, heading)
            self.iroad = iroad
            if iroad >= last:
                self.is_animating = False
                finished = True

        segments = [
            Segment(a, b, PATH_THICKNESS, self.color)
            for a, b in zip(self.roads[:iroad], self.roads[1 : iroad + 1])
        ]
        segments.append(Segment(start, end, PATH_THICKNESS, self.color))
        self._segments = segments
        self.tip = end

        if passed is not None and self.on_passed_each_point is not None:
            self.on_passed_each_point(*passed)
        if finished and self.on_finished_animation is not None:
            self.on_finished_animation()

    def drawn_segments(self) -> list[Segment]:
        """What the last update decided to draw."""
        return list(self._segments)