"""Escape-time rendering of the Mandelbrot and Julia sets, with small helpers."""

__version__ = "0.1.0"