"""Command-line entry point for the runner game."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .ansi import ansi_print
from .controller import Controller
from .units import Color
from .view import View

DEFAULT_ID = "113703040"


def format_id(student_id: str) -> str:
    """Return the highlighted, blinking ID banner."""
    return ansi_print(f"ID: {student_id}", Color.YELLOW, Color.RED, True, True)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play one game, then print the ID banner."""
    parser = argparse.ArgumentParser(
        prog="dinorun",
        description="Jump over cacti with 'w', collect coins, ESC to quit.",
    )
    parser.add_argument("--id", dest="student_id", default=DEFAULT_ID, help="ID shown at the end")
    args = parser.parse_args(argv)

    controller = Controller(View())
    controller.run()
    print(format_id(args.student_id))
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())