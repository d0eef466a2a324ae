"""Game loop: input, collisions, spawning and frame pacing."""

from __future__ import annotations

import itertools
import os
import random
import sys
import time
from enum import Enum
from typing import Callable, List, Optional, TextIO

try:
    import termios
except ImportError:  # pragma: no cover - non-POSIX systems
    termios = None  # type: ignore[assignment]

from .objects import Dino, GameObject, create_cactus, create_coin, create_player
from .units import SPF
from .view import View

ESC = 27
WINNING_SCORE = 10
STDIN_FILENO = 0


class Outcome(Enum):
    QUIT = "quit"
    WIN = "win"
    LOSE = "lose"


class RawTerminal:
    """Context manager that puts the terminal in non-blocking, no-echo mode."""

    def __init__(self, fd: int = STDIN_FILENO, stream: Optional[TextIO] = None) -> None:
        self._fd = fd
        self._stream = stream
        self._saved = None

    def _out(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def __enter__(self) -> "RawTerminal":
        if termios is not None:
            try:
                if os.isatty(self._fd):
                    self._saved = termios.tcgetattr(self._fd)
                    new = list(self._saved)
                    new[3] &= ~(termios.ICANON | termios.ECHO)
                    cc = list(self._saved[6])
                    cc[termios.VMIN] = 0
                    cc[termios.VTIME] = 0
                    new[6] = cc
                    termios.tcsetattr(self._fd, termios.TCSANOW, new)
            except (OSError, termios.error):
                self._saved = None
        self._out().write("\x1b[?25l")
        return self

    def __exit__(self, *exc) -> None:
        out = self._out()
        out.write("\x1b[m\x1b[?25h")
        out.flush()
        if self._saved is not None:
            termios.tcsetattr(self._fd, termios.TCSANOW, self._saved)
            self._saved = None


def read_input() -> int:
    """Return the last byte waiting on standard input, or -1 when there is none."""
    sys.stdout.flush()
    try:
        data = os.read(STDIN_FILENO, 4096)
    except OSError:
        return -1
    return data[-1] if data else -1


class Controller:
    """Owns the game objects and drives them frame by frame."""

    def __init__(
        self,
        view: View,
        rng: Optional[random.Random] = None,
        read_key: Callable[[], int] = read_input,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.view = view
        self.player: Dino = create_player()
        self.objects: List[GameObject] = [self.player]
        self.won = False
        self._space = False
        self._rng = rng if rng is not None else random.Random()
        self._read_key = read_key
        self._sleep = sleep

    def run(self) -> Outcome:
        """Play until the player quits with ESC, wins or loses."""
        with RawTerminal():
            while True:
                start = time.perf_counter()
                key = self._read_key()
                if key == ESC:
                    return Outcome.QUIT
                self.step(key)

                elapsed = time.perf_counter() - start
                if elapsed > SPF:
                    continue
                delay_ms = int((SPF - elapsed) * 1000)
                if delay_ms > 0:
                    self._sleep(delay_ms / 1000)

                self.check_score()
                if self.won:
                    print("You win!!!")
                    return Outcome.WIN
                if not self.player.alive:
                    print("You lose.")
                    return Outcome.LOSE

    def step(self, key: int) -> None:
        """Advance the game by one frame given the key pressed (-1 for none)."""
        self.handle_input(key)

        for first, second in itertools.combinations(self.objects, 2):
            if first.intersect(second):
                first.on_collision(second)
                second.on_collision(first)

        self.objects = [obj for obj in self.objects if obj.alive]

        self.view.reset_latest()
        for obj in self.objects:
            obj.update()
            self.view.update_game_object(obj)

        roll = self._rng.randint(1, 5)
        if roll == 1 and not self._space:
            self.objects.append(create_cactus())
            self._space = True
        elif roll == 2 and not self._space:
            self.objects.append(create_coin())
            self._space = True
        else:
            self._space = False

        self.view.render()

    def handle_input(self, key: int) -> None:
        """Start a jump on 'w' or 'W'."""
        if key in (ord("w"), ord("W")):
            self.player.start_jump()

    def check_score(self) -> None:
        """Mark the game won once the player has enough coins."""
        if self.player.score >= WINNING_SCORE:
            self.won = True