"""Double-buffered terminal rendering of the playfield."""

from __future__ import annotations

import os
import sys
from typing import Callable, List, Optional, TextIO, Tuple

from wcwidth import wcwidth

from .ansi import ansi_print
from .objects import GameObject
from .units import GAME_WINDOW_CELL_WIDTH, GAME_WINDOW_HEIGHT, GAME_WINDOW_WIDTH, Color

_CLEAR_SCREEN = "\033[2J\033[H"
_CURSOR_HOME = "\033[H"


def display_width(text: str) -> int:
    """Number of terminal columns ``text`` occupies, never less than 1."""
    width = sum(max(0, wcwidth(ch)) for ch in text)
    return max(1, width)


def terminal_size() -> Tuple[int, int]:
    """Return ``(rows, columns)`` of the terminal on standard output, or ``(-1, -1)``."""
    try:
        size = os.get_terminal_size(1)
    except (OSError, ValueError):
        return -1, -1
    return size.lines, size.columns


def _grid(value):
    return [[value] * GAME_WINDOW_WIDTH for _ in range(GAME_WINDOW_HEIGHT)]


class View:
    """Draws game objects into a frame buffer and redraws only when it changes."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        size_source: Callable[[], Tuple[int, int]] = terminal_size,
    ) -> None:
        self._stream = stream
        self._size_source = size_source
        self._term_size: Optional[Tuple[int, int]] = None
        self.latest_map: List[List[str]] = _grid("")
        self.latest_fg_color: List[List[Color]] = _grid(Color.NOCHANGE)
        self.latest_bg_color: List[List[Color]] = _grid(Color.NOCHANGE)
        self.last_map: List[List[str]] = _grid("")
        self.last_fg_color: List[List[Color]] = _grid(Color.NOCHANGE)
        self.last_bg_color: List[List[Color]] = _grid(Color.NOCHANGE)
        self.reset_latest()

    def update_game_object(self, obj: GameObject) -> None:
        """Paint ``obj``'s icon into the pending frame, clipped to the playfield."""
        pos = obj.position
        for dy, icon_row in enumerate(obj.icon):
            row = pos.y + dy
            if not 0 <= row < GAME_WINDOW_HEIGHT:
                continue
            for dx, cell in enumerate(icon_row):
                col = pos.x + dx
                if not 0 <= col < GAME_WINDOW_WIDTH:
                    continue
                self.latest_map[row][col] = cell.ascii
                self.latest_bg_color[row][col] = cell.color

    def compose_frame(self) -> str:
        """Build the bordered text of the pending frame."""
        border = "+" + "-" * (GAME_WINDOW_WIDTH * GAME_WINDOW_CELL_WIDTH) + "+\n"
        lines = [border]
        for texts, fgs, bgs in zip(self.latest_map, self.latest_fg_color, self.latest_bg_color):
            parts = ["|"]
            for text, fg, bg in zip(texts, fgs, bgs):
                pad_total = GAME_WINDOW_CELL_WIDTH - display_width(text)
                pad_left = max(0, pad_total // 2)
                pad_right = max(0, pad_total - pad_total // 2)
                pad = ansi_print(" ", Color.NOCHANGE, bg)
                parts.append(pad * pad_left + ansi_print(text, fg, bg) + pad * pad_right)
            parts.append("|\n")
            lines.append("".join(parts))
        lines.append(border)
        return "".join(lines)

    def render(self) -> bool:
        """Draw the pending frame if it differs from the last one; return whether it did."""
        stream = self._stream if self._stream is not None else sys.stdout
        size = self._size_source()
        if size != self._term_size:
            stream.write(_CLEAR_SCREEN)
        self._term_size = size

        dirty = (
            self.last_map != self.latest_map
            or self.last_fg_color != self.latest_fg_color
            or self.last_bg_color != self.latest_bg_color
        )
        if not dirty:
            return False

        stream.write(_CURSOR_HOME + self.compose_frame())
        stream.flush()

        self.last_map = [row[:] for row in self.latest_map]
        self.last_fg_color = [row[:] for row in self.latest_fg_color]
        self.last_bg_color = [row[:] for row in self.latest_bg_color]
        return True

    def reset_latest(self) -> None:
        """Clear the pending frame to blank, uncoloured cells."""
        self.latest_map = _grid(" ")
        self.latest_fg_color = _grid(Color.NOCHANGE)
        self.latest_bg_color = _grid(Color.NOCHANGE)