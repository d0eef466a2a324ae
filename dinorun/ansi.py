"""ANSI escape formatting for coloured terminal text."""

from __future__ import annotations

from .units import Color

_INIT = "\x1b["
_END = "m"
_HILIT = "1"
_BLINK = "5"
_RECOVER = "\x1b[0m"


def _wrap(text: str, codes: list[str]) -> str:
    return f"{_INIT}{';'.join(codes)}{_END}{text}{_RECOVER}"


def ansi_print(
    text: str | None,
    fg: Color = Color.NOCHANGE,
    bg: Color = Color.NOCHANGE,
    hi: bool = False,
    blinking: bool = False,
) -> str:
    """Return ``text`` wrapped in ANSI codes for the given colours and style."""
    if not text:
        return ""
    codes = []
    if hi:
        codes.append(_HILIT)
    if blinking:
        codes.append(_BLINK)
    if fg != Color.NOCHANGE:
        codes.append(f"3{int(fg)}")
    if bg != Color.NOCHANGE:
        codes.append(f"4{int(bg)}")
    return _wrap(text, codes)


def ansi_emphasis(text: str | None, hi: bool = False, blinking: bool = False) -> str:
    """Return ``text`` with optional highlight and blinking, followed by a reset."""
    if not text:
        return ""
    if not (hi or blinking):
        return text + _RECOVER
    codes = []
    if hi:
        codes.append(_HILIT)
    if blinking:
        codes.append(_BLINK)
    return _wrap(text, codes)