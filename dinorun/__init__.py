"""A side-scrolling runner game for ANSI terminals."""

__version__ = "0.1.0"