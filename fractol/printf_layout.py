"""Padding, sign and prefix layout for a single printf conversion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fractol.printf_spec import Conversion, FormatSpec

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_SIGNED_KINDS = frozenset({Conversion.DECIMAL, Conversion.INTEGER})
_UNSIGNED_KINDS = frozenset(
    {Conversion.UNSIGNED, Conversion.HEX_LOWER, Conversion.HEX_UPPER}
)
_NUMERIC_KINDS = _SIGNED_KINDS | _UNSIGNED_KINDS


@dataclass(frozen=True)
class Layout:
    """How one converted value is laid out.

    The output is ``space_before`` spaces, then ``sign``, then ``prefix``,
    then ``zero_fill`` zeros, then the value itself, then ``space_after``
    spaces. ``size`` is the length the value itself counts for, and
    ``value`` is the argument as the conversion reads it (integers wrapped
    to 32 bits, a null pointer as ``None``).
    """

    space_before: int
    sign: str
    prefix: str
    zero_fill: int
    size: int
    space_after: int
    value: Any


def _require_int(value: Any, kind: Conversion) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"%{kind.char} expects an integer, got {type(value).__name__}"
        )
    return value


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _normalize(kind: Conversion, value: Any) -> Any:
    """Return ``value`` as the conversion would read it from its argument."""
    if kind is Conversion.CHAR:
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError("%c expects a single character")
            return _to_int32(ord(value))
        return _to_int32(_require_int(value, kind))
    if kind in _SIGNED_KINDS:
        return _to_int32(_require_int(value, kind))
    if kind in _UNSIGNED_KINDS:
        return _require_int(value, kind) & 0xFFFFFFFF
    if kind is Conversion.STRING:
        if value is not None and not isinstance(value, str):
            raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
        return value
    if kind is Conversion.POINTER:
        if value is None:
            return None
        address = _require_int(value, kind)
        if address < 0:
            raise ValueError("a pointer address must not be negative")
        return address or None
    return None


def _digit_count(value: int, base: int) -> int:
    count = 1
    while value >= base:
        value //= base
        count += 1
    return count


def _size(spec: FormatSpec, value: Any) -> int:
    kind = spec.conversion
    if kind in (Conversion.CHAR, Conversion.PERCENT):
        return 1
    if kind is Conversion.STRING:
        return len(NULL_STRING) if value is None else len(value)
    if kind is Conversion.POINTER:
        return len(NULL_POINTER) if value is None else _digit_count(value, 16)
    if value == 0 and spec.precision == 0:
        return 0
    base = 16 if kind in (Conversion.HEX_LOWER, Conversion.HEX_UPPER) else 10
    return _digit_count(abs(value), base)


def value_size(spec: FormatSpec, value: Any) -> int:
    """Return how many characters ``value`` counts for under ``spec``.

    Signs and prefixes are not included. A zero with precision 0 counts as
    nothing; a missing string counts as ``(null)`` and a null pointer as
    ``(nil)``.
    """
    return _size(spec, _normalize(spec.conversion, value))


def compute_layout(spec: FormatSpec, value: Any) -> Layout:
    """Work out the padding, sign and prefix around ``value`` for ``spec``."""
    kind = spec.conversion
    value = _normalize(kind, value)
    size = _size(spec, value)

    space_before = spec.width - size
    zero_fill = 0
    if spec.precision is not None:
        zero_fill = spec.precision - size
        if kind is Conversion.STRING and spec.precision < size:
            space_before += size - spec.precision
            if value is None:
                space_before += spec.precision
        if kind in _NUMERIC_KINDS and spec.precision > size:
            space_before -= zero_fill

    prefix = ""
    if spec.alternate:
        if kind is Conversion.POINTER and value is not None:
            prefix = "0x"
        elif kind in _UNSIGNED_KINDS and value != 0:
            prefix = "0X" if kind is Conversion.HEX_UPPER else "0x"
        space_before -= len(prefix)

    signed_value = value if kind in _SIGNED_KINDS else 0
    sign = ""
    if spec.sign and signed_value >= 0:
        sign = spec.sign
        space_before -= 1
    if kind in _SIGNED_KINDS and signed_value < 0:
        sign = "-"
        space_before -= 1

    space_after = 0
    if spec.left_align:
        space_after, space_before = space_before, 0
    if spec.zero_pad and spec.precision is None:
        zero_fill += space_before
        space_before = 0

    if kind is Conversion.STRING:
        zero_fill = 0
    return Layout(
        space_before=max(space_before, 0),
        sign=sign,
        prefix=prefix,
        zero_fill=max(zero_fill, 0),
        size=size,
        space_after=max(space_after, 0),
        value=value,
    )