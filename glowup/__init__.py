"""Glow Up Diaries content API."""

__version__ = "1.0.0"
