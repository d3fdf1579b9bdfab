"""Text labels with a background box, anchored at a point."""

from __future__ import annotations

from dataclasses import dataclass

from .geometry import AnchorX, AnchorY, Color, Rect, Vec, anchor_offset

WHEAT = Color(245 / 255, 222 / 255, 179 / 255, 1.0)
BLACK = Color(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class NametagLayout:
    """Where the text starts and the box drawn behind it."""

    origin: Vec
    box: Rect


@dataclass
class Nametag:
    """A label such as a participant's name or a prize."""

    desc: str
    pos: Vec
    anchor_y: AnchorY = AnchorY.MIDDLE
    anchor_x: AnchorX = AnchorX.LEFT
    background: Color = WHEAT
    foreground: Color = BLACK

    def __str__(self) -> str:
        return self.desc

    def layout(self, char_width: float, char_height: float) -> NametagLayout:
        """Place the text in a fixed-width font of the given glyph size."""
        width = len(self.desc) * char_width
        origin = anchor_offset(self.pos, width, char_height, self.anchor_x, self.anchor_y)
        return NametagLayout(origin, Rect(origin, origin + Vec(width, char_height)))