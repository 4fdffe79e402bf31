"""Resolved render configuration: everything the renderer and fingerprint see."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MIN_DIMENSION = 1
MAX_DIMENSION = 8000

DEFAULT_FONT = 'system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif'
DEFAULT_MAX_LINES = 2


class Align(str, enum.Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @property
    def anchor(self) -> str:
        """SVG text-anchor for this alignment."""
        if self is Align.LEFT:
            return "start"
        if self is Align.RIGHT:
            return "end"
        return "middle"


@dataclass(frozen=True)
class Dimensions:
    width: int
    height: int

    @property
    def shortest_side(self) -> int:
        return min(self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class RenderConfig:
    """Fully clamped render parameters.

    radius and stroke_width are stored already multiplied by scale.
    text is None when no caption was supplied.
    """

    dimensions: Dimensions
    background: str
    foreground: str
    font_size: float
    text: str | None = None
    font_family: str | None = None
    font_weight: str | None = None
    pad: float = 0.0
    align: Align = Align.CENTER
    wrap: bool = False
    scale: int = 1
    radius: float = 0.0
    stroke: str | None = None
    stroke_width: float | None = None
    shadow: bool = False
    max_lines: int = DEFAULT_MAX_LINES

    @property
    def width(self) -> int:
        return self.dimensions.width

    @property
    def height(self) -> int:
        return self.dimensions.height
