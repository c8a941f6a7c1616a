"""Parsing of printf conversion specifications."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

CONVERSION_CHARS = "csdiuxXp%"


class Conversion(IntEnum):
    """Conversion kinds, numbered by their position in ``CONVERSION_CHARS`` plus one."""

    CHAR = 1
    STRING = 2
    DECIMAL = 3
    INTEGER = 4
    UNSIGNED = 5
    HEX_LOWER = 6
    HEX_UPPER = 7
    POINTER = 8
    PERCENT = 9

    @property
    def char(self) -> str:
        """The conversion character, such as ``"d"``."""
        return CONVERSION_CHARS[self.value - 1]

    @classmethod
    def from_char(cls, ch: str) -> "Conversion":
        index = conversion_index(CONVERSION_CHARS, ch)
        if not 1 <= index <= len(CONVERSION_CHARS):
            raise ValueError(f"unknown conversion character {ch!r}")
        return cls(index)


_PRECISION_KINDS = frozenset(Conversion) - {Conversion.CHAR, Conversion.PERCENT}
_ZERO_PAD_KINDS = _PRECISION_KINDS - {Conversion.STRING}
_ALTERNATE_KINDS = frozenset({Conversion.HEX_LOWER, Conversion.HEX_UPPER})
_SIGN_KINDS = frozenset({Conversion.DECIMAL, Conversion.INTEGER, Conversion.POINTER})


@dataclass
class FormatSpec:
    """A parsed conversion specification.

    ``precision`` is ``None`` when none was given or it does not apply.
    ``sign`` is ``""``, ``" "`` or ``"+"``. ``length`` is the number of
    characters the specification took, conversion character included.
    """

    conversion: Conversion
    width: int = 0
    precision: int | None = None
    zero_pad: bool = False
    left_align: bool = False
    sign: str = ""
    alternate: bool = False
    length: int = 0


def conversion_index(chars: str, c: str) -> int:
    """Return the 1-based position of ``c`` in ``chars``, or 0 if absent.

    The end-of-string character (``""`` or NUL) gives one past the last position.
    """
    if c in ("", "\0"):
        return len(chars) + 1
    index = chars.find(c)
    return index + 1


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _digit_run_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and _is_digit(text[end]):
        end += 1
    return end


def parse_spec(text: str) -> FormatSpec:
    """Parse the specification that follows a ``%`` at the start of ``text``.

    Characters before the first conversion character are read as flags,
    width and precision; any that do not apply to the conversion are ignored.
    Raises ``ValueError`` when no conversion character is found.
    """
    type_pos = next((i for i, ch in enumerate(text) if ch in CONVERSION_CHARS), None)
    if type_pos is None:
        raise ValueError(f"no conversion character in {text!r}")
    conversion = Conversion.from_char(text[type_pos])
    spec = FormatSpec(
        conversion=conversion,
        alternate=conversion is Conversion.POINTER,
        length=type_pos + 1,
    )
    flags = text[:type_pos]
    pos = 0
    while pos < len(flags):
        ch = flags[pos]
        if ch == "-" and conversion is not Conversion.PERCENT:
            spec.zero_pad = False
            spec.left_align = True
        elif _is_digit(ch) and ch != "0" and conversion is not Conversion.PERCENT:
            end = _digit_run_end(flags, pos)
            spec.width = int(flags[pos:end])
            pos = end
            continue
        elif ch == "." and conversion is not Conversion.PERCENT:
            end = _digit_run_end(flags, pos + 1)
            digits = flags[pos + 1:end]
            spec.precision = int(digits or "0") if conversion in _PRECISION_KINDS else None
            pos = end
            continue
        else:
            if ch == "0" and not spec.left_align and conversion in _ZERO_PAD_KINDS:
                spec.zero_pad = True
            elif ch == "#" and conversion in _ALTERNATE_KINDS:
                spec.alternate = True
            if conversion in _SIGN_KINDS:
                if ch == " " and spec.sign != "+":
                    spec.sign = " "
                elif ch == "+":
                    spec.sign = "+"
        pos += 1
    return spec