"""Windowed pitch contours, cents conversion and swara axis ticks."""

__version__ = "0.1.0"
