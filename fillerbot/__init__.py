"""A Filler game player, with its text, byte-buffer, list and line-reading helpers."""

__version__ = "1.0.0"