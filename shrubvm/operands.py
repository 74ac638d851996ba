"""Conversion between signed 16-bit jump offsets and operand bytes."""

from __future__ import annotations


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} byte out of range: {value}")


def to_signed_word(lo: int, hi: int) -> int:
    """Combine a little-endian byte pair into a signed 16-bit integer."""
    _check_byte("low", lo)
    _check_byte("high", hi)
    word = (hi << 8) | lo
    return word - 0x10000 if word & 0x8000 else word


def from_signed_word(value: int) -> tuple[int, int]:
    """Split a value, truncated to 16 bits, into its (low, high) bytes."""
    word = value & 0xFFFF
    return word & 0xFF, (word >> 8) & 0xFF