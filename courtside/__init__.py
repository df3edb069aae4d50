"""Courtside - live basketball scoreboards, box scores and play-by-play in the terminal."""

__version__ = "0.1.0"
