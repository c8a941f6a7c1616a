"""Colour palette used to shade escape-time fractals."""

from __future__ import annotations

import math
from collections.abc import Sequence

WINDOW_WIDTH = 1500
WINDOW_HEIGHT = 1500
ITERATIONS = 50

PALETTE_STOPS = (0xCC0000, 0xCCCC00, 0x00CC00, 0x0000CC, 0xCC00CC)
INTERIOR_COLOR = 0x000000

_OPAQUE = 0xFF


def _channels(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def blend(color1: int, color2: int, ratio: float) -> int:
    """Mix two 0xRRGGBB colours; ``ratio`` 0 gives ``color1``, 1 gives ``color2``.

    The result is fully opaque, with 0xFF in the top byte.
    """
    mixed = (
        _round_half_up(a * (1 - ratio) + b * ratio) & 0xFF
        for a, b in zip(_channels(color1), _channels(color2))
    )
    red, green, blue = mixed
    return (_OPAQUE << 24) | (red << 16) | (green << 8) | blue


def _palette_entry(index: int, iterations: int) -> int:
    position = 5 * index / (iterations - 1)
    segment = min(int(position), 4) if position >= 0 else 0
    start = PALETTE_STOPS[segment]
    end = PALETTE_STOPS[(segment + 1) % len(PALETTE_STOPS)]
    return blend(start, end, math.sqrt(position - segment))


def build_palette(iterations: int = ITERATIONS) -> list[int]:
    """Build one colour per iteration, cycling through the five palette stops."""
    if iterations < 2:
        raise ValueError("a palette needs at least two iterations")
    return [_palette_entry(i, iterations) for i in range(iterations)]


def shift_left(colors: Sequence[int]) -> list[int]:
    """Rotate the palette one step left: the first colour moves to the end."""
    items = list(colors)
    return items[1:] + items[:1]


def shift_right(colors: Sequence[int]) -> list[int]:
    """Rotate the palette one step right: the last colour moves to the front."""
    items = list(colors)
    return items[-1:] + items[:-1]