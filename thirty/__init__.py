"""Thirty — a ten-round dice game."""

__version__ = "1.0.0"
