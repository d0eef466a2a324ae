"""Icons: rectangular grids of coloured cells."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .units import Color, Vec2


@dataclass(frozen=True)
class Cell:
    """One icon cell: a background colour and the text drawn in it."""

    color: Color
    ascii: str


Icon = List[List[Cell]]


def icon_width(icon: Icon) -> int:
    """Number of cells in the first row, or 0 for an empty icon."""
    return len(icon[0]) if icon else 0


def icon_height(icon: Icon) -> int:
    """Number of rows in the icon."""
    return len(icon)


def solid_icon(size: Vec2, color: Color) -> Icon:
    """Build a ``size.width`` x ``size.height`` icon of blank cells in one colour."""
    return [[Cell(color, " ") for _ in range(size.width)] for _ in range(size.height)]