"""Worked exercise lessons and styled terminal progress messages."""

__version__ = "4.5.0"