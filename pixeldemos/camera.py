"""A smoothly following 2D camera."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .geometry import Matrix, Rect, Vec, lerp

_ZOOM_STEP = 1.2
_FOLLOW_BASE = 1.0 / 128


@dataclass
class Camera:
    """Keeps a point of the plane at the screen centre, easing towards its targets."""

    position: Vec
    screen_bound: Rect
    move_smooth: bool = True
    angle: float = field(default=0.0, init=False)
    zoom_level: float = field(default=1.0, init=False)
    _angle_follow: float = field(default=0.0, init=False, repr=False)
    _zoom_follow: float = field(default=1.0, init=False, repr=False)
    _position_follow: Vec = field(default=Vec(), init=False, repr=False)

    def __post_init__(self) -> None:
        self._position_follow = self.position

    def transform(self) -> Matrix:
        """Matrix taking game coordinates to screen coordinates."""
        return (
            Matrix.identity()
            .scaled(self.position, self.zoom_level)
            .rotated(self.position, self.angle)
            .moved(self.screen_bound.center() - self.position)
        )

    def unproject(self, screen_position: Vec) -> Vec:
        """Convert a screen position to a game position."""
        scale_move = (
            Matrix.identity()
            .scaled(self.position, self.zoom_level)
            .moved(self.screen_bound.center() - self.position)
        )
        rotation = Matrix.identity().rotated(self.position, -self.angle)
        return rotation.project(scale_move.unproject(screen_position))

    def update(self, dt: float) -> None:
        """Advance the physical state ``dt`` seconds towards the targets."""
        if self.move_smooth:
            t = 1 - math.pow(_FOLLOW_BASE, dt)
            self.angle = lerp(self.angle, self._angle_follow, t)
            self.position = lerp(self.position, self._position_follow, t)
            self.zoom_level = lerp(self.zoom_level, self._zoom_follow, t)
        else:
            self.angle = self._angle_follow
            self.position = self._position_follow
            self.zoom_level = self._zoom_follow

    def rotate(self, degree: float) -> None:
        """Turn by ``degree``: positive is counterclockwise."""
        self._angle_follow += degree * math.pi / 180

    def zoom(self, by_level: float) -> None:
        """Zoom in (positive) or out (negative) by whole or fractional levels."""
        self._zoom_follow *= math.pow(_ZOOM_STEP, by_level)

    def move(self, distance: Vec) -> None:
        self._position_follow = self._position_follow + distance

    def move_to(self, target: Vec) -> None:
        self._position_follow = target

    def set_screen_bound(self, screen_bound: Rect) -> None:
        self.screen_bound = screen_bound