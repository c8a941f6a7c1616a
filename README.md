# fractol

Escape-time rendering of two classic fractals: the Mandelbrot set and Julia
sets. Points that escape are coloured from a palette that fades through red,
yellow, green, blue and magenta; points that never escape take the interior
colour `0x000000`.

## Installing

```
pip install .
```

This pulls in `numpy`, which the renderer uses.

## Rendering

```python
from fractol.palette import build_palette, shift_left, shift_right
from fractol.render import render_mandelbrot, render_julia

palette = build_palette(50)
image = render_mandelbrot(palette, 300, 300)
julia = render_julia(complex(-0.8, 0.156), palette, 300, 300)
```

`render_mandelbrot` and `render_julia` return a `(height, width)` numpy array
of `uint32` colours in `0xAARRGGBB` form. The view covers the square from -2
to 2 on both axes, with the imaginary axis pointing up; width and height
default to 1500. A point that escapes at step `i` takes `palette[i]`, and the
palette's length sets the iteration limit.

Lower-level pieces in `fractol.render`:

- `scale(value, new_min, new_max, old_min, old_max)` – linear remapping, for
  numbers or numpy arrays.
- `pixel_to_complex(x, y, width, height)` – the point shown at a pixel.
- `escape_index(z, c, iterations)` – the step at which `z -> z*z + c` leaves
  the radius-2 disc, or `None` if it stays bounded for `iterations - 1` steps.

## Palettes

`fractol.palette.build_palette(iterations=50)` builds one opaque colour per
iteration and raises `ValueError` for fewer than two. `blend(color1, color2,
ratio)` mixes two `0xRRGGBB` colours. `shift_left` and `shift_right` return a
new list rotated by one step, which makes colour bands appear to flow when
the picture is redrawn with each shift.

## Parsing numbers

`fractol.atod.parse_double(text)` reads a decimal number leniently: leading
whitespace is skipped, one sign is accepted, either `.` or `,` separates the
fraction, and trailing text is ignored. When no separator follows the integer
digits, those digits are read again as the fraction, so `"12"` gives `12.12`.

## Other helpers

- `fractol.ascii` – ASCII classification (`is_alpha`, `is_digit`, …),
  `to_upper`/`to_lower`, `atoi` and `itoa`.
- `fractol.memory` – byte-buffer helpers: `mem_set`, `bzero`, `calloc`,
  `mem_chr`, `mem_cmp`, `mem_cpy`, `mem_move`.
- `fractol.linked_list` – a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `for_each`, `map` and `clear`.
- `fractol.printf_spec` – `parse_spec` reads a printf conversion
  specification (flags, width, precision, conversion for `csdiuxXp%`) into a
  `FormatSpec`.
- `fractol.printf_layout` – `compute_layout` works out the padding, sign and
  prefix for one value under a `FormatSpec`, and `value_size` its length.

## What it does not do

The package has no command and opens no window: it renders images into numpy
arrays, and showing them or reacting to keys is left to the caller. The
printf modules parse specifications and compute layouts but do not produce
formatted text or write output.

## Tests

```
pip install .[test]
pytest
```