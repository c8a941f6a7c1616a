"""Lenient decimal parser for fractal parameters given on the command line."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = frozenset(" \t\n\v\f\r")
_SEPARATORS = frozenset(".,")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def parse_double(text: str) -> float:
    """Read a decimal number from the start of ``text``.

    Leading whitespace is skipped and one optional sign accepted. Either ``.``
    or ``,`` separates the fractional digits. Anything after the number is
    ignored. When no separator follows the integer digits, those digits are
    read again as the fractional part, so ``"12"`` gives ``12.12``.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1.0
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1.0
        pos += 1

    whole = 0.0
    while pos < len(text) and _is_digit(text[pos]):
        whole = 10 * whole + (ord(text[pos]) - 48)
        pos += 1
    if pos < len(text) and text[pos] in _SEPARATORS:
        pos += 1
    while pos < len(text) and _is_digit(text[pos]):
        pos += 1

    fraction = 0.0
    for ch in takewhile(_is_digit, reversed(text[:pos])):
        fraction = fraction / 10 + (ord(ch) - 48) / 10
    return (whole + fraction) * sign