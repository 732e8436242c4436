"""Falling-block puzzle game rendered to a character-cell terminal."""

__version__ = "0.1.0"
