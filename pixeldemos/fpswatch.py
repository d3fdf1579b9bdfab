"""Frame-rate measurement."""

from __future__ import annotations

import math
import time
from typing import Callable

from .geometry import AnchorX, AnchorY, Color, Vec

_TICK = 1.0


class FPSWatch:
    """Counts frames and takes an FPS reading once every second."""

    def __init__(
        self,
        pos: Vec,
        anchor_y: AnchorY = AnchorY.TOP,
        anchor_x: AnchorX = AnchorX.RIGHT,
        description: str = "",
        background: Color = Color(0.0, 0.0, 0.0),
        foreground: Color = Color(1.0, 1.0, 1.0),
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.pos = pos
        self.anchor_y = anchor_y
        self.anchor_x = anchor_x
        self.description = description
        self.background = background
        self.foreground = foreground
        self.fps = 0
        self.frames = 0
        self._clock = clock
        self._next_tick: float | None = None

    def start(self) -> None:
        """Begin ticking every second."""
        self._next_tick = self._clock() + _TICK

    def poll(self) -> bool:
        """Count one frame; return True when a new reading was taken."""
        self.frames += 1
        if self._next_tick is None:
            return False
        now = self._clock()
        if now < self._next_tick:
            return False
        self.fps = self.frames
        self.frames = 0
        missed = math.floor((now - self._next_tick) / _TICK) + 1
        self._next_tick += missed * _TICK
        return True

    def set_pos(self, pos: Vec, anchor_y: AnchorY, anchor_x: AnchorX) -> None:
        """Move the label to ``pos`` in screen coordinates."""
        self.pos = pos
        self.anchor_y = anchor_y
        self.anchor_x = anchor_x

    def caption(self) -> str:
        return f"FPS: {self.fps} {self.description}"