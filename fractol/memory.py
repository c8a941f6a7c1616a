"""Byte-buffer helpers: fill, search, compare and copy."""

from __future__ import annotations


def _check_length(length: int, *buffers) -> None:
    if length < 0:
        raise ValueError("length must not be negative")
    for buffer in buffers:
        if length > len(buffer):
            raise IndexError(f"length {length} exceeds buffer of size {len(buffer)}")


def mem_set(buffer: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buffer`` with the low byte of ``value``."""
    _check_length(length, buffer)
    buffer[:length] = bytes([value & 0xFF]) * length
    return buffer


def bzero(buffer: bytearray, length: int) -> bytearray:
    """Zero the first ``length`` bytes of ``buffer``."""
    return mem_set(buffer, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def mem_chr(data: bytes | bytearray, value: int, length: int) -> int | None:
    """Return the index of the first byte equal to ``value`` in the first ``length`` bytes."""
    _check_length(length, data)
    index = bytes(data[:length]).find(value & 0xFF)
    return None if index < 0 else index


def mem_cmp(first: bytes | bytearray, second: bytes | bytearray, length: int) -> int:
    """Compare ``length`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(length, first, second)
    for a, b in zip(first[:length], second[:length]):
        if a != b:
            return a - b
    return 0


def mem_cpy(dst: bytearray, src: bytes | bytearray, length: int) -> bytearray:
    """Copy ``length`` bytes from ``src`` to the start of ``dst``."""
    _check_length(length, dst, src)
    dst[:length] = src[:length]
    return dst


def mem_move(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy ``length`` bytes within ``buffer`` from offset ``src`` to ``dst``.

    Overlapping regions are handled as if the source were copied out first.
    """
    if dst < 0 or src < 0:
        raise IndexError("offsets must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")
    if max(dst, src) + length > len(buffer):
        raise IndexError("move runs past the end of the buffer")
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer