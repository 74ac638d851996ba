"""A growable buffer of instruction bytes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

Operand = Union[int, Iterable[int]]


class InstructionBuffer:
    """Holds the bytes of a program in the order they were inserted."""

    def __init__(self) -> None:
        self._code = bytearray()

    def insert(self, *args: Operand) -> None:
        """Append bytes; an argument may be one byte or an iterable of bytes."""
        for arg in args:
            items = [arg] if isinstance(arg, int) else list(arg)
            for item in items:
                if not 0 <= int(item) <= 0xFF:
                    raise ValueError(f"instruction byte out of range: {item}")
                self._code.append(int(item))

    def __len__(self) -> int:
        return len(self._code)

    def __getitem__(self, index):
        return self._code[index]

    def __bytes__(self) -> bytes:
        return bytes(self._code)