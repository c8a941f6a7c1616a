"""Escape-time rendering of the Mandelbrot and Julia sets."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from fractol.palette import INTERIOR_COLOR, WINDOW_HEIGHT, WINDOW_WIDTH

_ESCAPE_RADIUS_SQUARED = 4.0
_VIEW_MIN = -2.0
_VIEW_MAX = 2.0


def scale(value, new_min, new_max, old_min, old_max):
    """Map ``value`` linearly from ``[old_min, old_max]`` onto ``[new_min, new_max]``.

    Works on plain numbers and on numpy arrays alike.
    """
    return (new_max - new_min) * (value - old_min) / (old_max - old_min) + new_min


def pixel_to_complex(x: int, y: int, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> complex:
    """Return the point of the complex plane shown at pixel ``(x, y)``.

    The view spans -2 to 2 on both axes, with the imaginary axis pointing up.
    """
    real = scale(x, _VIEW_MIN, _VIEW_MAX, 0, width)
    imag = scale(y, _VIEW_MAX, _VIEW_MIN, 0, height)
    return complex(real, imag)


def escape_index(z: complex, c: complex, iterations: int) -> int | None:
    """Iterate ``z -> z*z + c`` and return the step at which ``|z|`` exceeds 2.

    At most ``iterations - 1`` steps are taken; ``None`` means the orbit stayed
    bounded, so the point counts as inside the set.
    """
    zr, zi = z.real, z.imag
    cr, ci = c.real, c.imag
    for step in range(iterations - 1):
        zr, zi = zr * zr - zi * zi + cr, 2 * zr * zi + ci
        if zr * zr + zi * zi > _ESCAPE_RADIUS_SQUARED:
            return step
    return None


def _grid(width: int, height: int) -> tuple[np.ndarray, np.ndarray]:
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    xs = scale(np.arange(width, dtype=np.float64), _VIEW_MIN, _VIEW_MAX, 0.0, float(width))
    ys = scale(np.arange(height, dtype=np.float64), _VIEW_MAX, _VIEW_MIN, 0.0, float(height))
    real = np.broadcast_to(xs[np.newaxis, :], (height, width)).copy()
    imag = np.broadcast_to(ys[:, np.newaxis], (height, width)).copy()
    return real, imag


def _escape_indices(z_re, z_im, c_re, c_im, iterations: int) -> np.ndarray:
    """Vectorised :func:`escape_index`; bounded points get -1."""
    index = np.full(z_re.shape, -1, dtype=np.int64)
    active = np.ones(z_re.shape, dtype=bool)
    with np.errstate(over="ignore", invalid="ignore"):
        for step in range(iterations - 1):
            new_re = z_re * z_re - z_im * z_im + c_re
            new_im = 2 * z_re * z_im + c_im
            z_re = np.where(active, new_re, z_re)
            z_im = np.where(active, new_im, z_im)
            escaped = active & (z_re * z_re + z_im * z_im > _ESCAPE_RADIUS_SQUARED)
            index[escaped] = step
            active &= ~escaped
            if not active.any():
                break
    return index


def _colorize(index: np.ndarray, palette: Sequence[int]) -> np.ndarray:
    # The interior colour sits last, so the -1 of bounded points selects it.
    colors = np.array([*palette, INTERIOR_COLOR], dtype=np.uint32)
    return colors[index]


def render_mandelbrot(
    palette: Sequence[int], width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT
) -> np.ndarray:
    """Render the Mandelbrot set as a ``(height, width)`` array of 0xAARRGGBB colours.

    A point that escapes at step ``i`` takes ``palette[i]``; the palette length
    sets the iteration limit.
    """
    c_re, c_im = _grid(width, height)
    zeros = np.zeros_like(c_re)
    index = _escape_indices(zeros, zeros.copy(), c_re, c_im, len(palette))
    return _colorize(index, palette)


def render_julia(
    c: complex,
    palette: Sequence[int],
    width: int = WINDOW_WIDTH,
    height: int = WINDOW_HEIGHT,
) -> np.ndarray:
    """Render the Julia set for constant ``c`` as a ``(height, width)`` colour array."""
    z_re, z_im = _grid(width, height)
    c_re = np.full_like(z_re, c.real)
    c_im = np.full_like(z_im, c.imag)
    index = _escape_indices(z_re, z_im, c_re, c_im, len(palette))
    return _colorize(index, palette)