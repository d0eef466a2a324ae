"""Basic value types and playfield dimensions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

GAME_WINDOW_WIDTH = 40
GAME_WINDOW_HEIGHT = 15

GAME_WINDOW_CELL_WIDTH = 2
WINDOW_PIXEL_WIDTH = GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH
WINDOW_PIXEL_HEIGHT = GAME_WINDOW_HEIGHT

SPF = 0.3
"""Seconds per frame."""


class Color(IntEnum):
    """Terminal colours; the value is the ANSI colour index."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PINK = 5
    CYAN = 6
    WHITE = 7
    NOCHANGE = 8


class Direction(IntEnum):
    """Movement direction; opposite directions have opposite signs."""

    RIGHT = -2
    DOWN = -1
    NONE = 0
    UP = 1
    LEFT = 2


@dataclass
class Vec2:
    """A mutable pair of integers used both as a position and as a size."""

    x: int
    y: int

    @property
    def width(self) -> int:
        return self.x

    @width.setter
    def width(self, value: int) -> None:
        self.x = value

    @property
    def height(self) -> int:
        return self.y

    @height.setter
    def height(self, value: int) -> None:
        self.y = value


Position = Vec2
Size = Vec2