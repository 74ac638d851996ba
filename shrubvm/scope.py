"""A fixed-size block of variable slots."""

from __future__ import annotations

from .errors import ErrorType, VMError


class Scope:
    """Variable slots addressed by offset; unset slots hold ``None``."""

    def __init__(self, size: int) -> None:
        self._values: list[object] = [None] * size

    def _check(self, index: int, action: str) -> None:
        if not 0 <= index < len(self._values):
            raise VMError(
                ErrorType.INDEX_ERROR,
                f"Index out of range in variable scope ({action})",
            )

    def store(self, index: int, value: object) -> None:
        self._check(index, "insert")
        self._values[index] = value

    def load(self, index: int) -> object:
        self._check(index, "index")
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)