"""Character classification and integer/text conversion for ASCII input."""

from __future__ import annotations

_WHITESPACE = frozenset(" \t\n\v\f\r")


def _code(c: int | str) -> int:
    """Return the code point of a one-character string, or the integer itself."""
    if isinstance(c, str):
        return ord(c)
    return int(c)


def is_alnum(c: int | str) -> bool:
    """True for ASCII letters and decimal digits."""
    return is_alpha(c) or is_digit(c)


def is_alpha(c: int | str) -> bool:
    """True for ASCII letters A-Z and a-z."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_ascii(c: int | str) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_digit(c: int | str) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_print(c: int | str) -> bool:
    """True for printable ASCII characters, space to tilde."""
    return 32 <= _code(c) <= 126


def to_upper(c: int | str) -> int | str:
    """Map a lowercase ASCII letter to uppercase; other values pass through.

    A string argument gives a string back, an integer gives an integer.
    """
    code = _code(c)
    result = code - 32 if 97 <= code <= 122 else code
    return chr(result) if isinstance(c, str) else result


def to_lower(c: int | str) -> int | str:
    """Map an uppercase ASCII letter to lowercase; other values pass through.

    A string argument gives a string back, an integer gives an integer.
    """
    code = _code(c)
    result = code + 32 if 65 <= code <= 90 else code
    return chr(result) if isinstance(c, str) else result


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and reading
    stops at the first character that is not a digit. No digits give 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - 48)
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal text of an integer, with a leading minus if negative."""
    if not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    digits = []
    magnitude = abs(n)
    while True:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(48 + digit))
        if magnitude == 0:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))