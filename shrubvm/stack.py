"""The bounded value stack."""

from __future__ import annotations

from .errors import ErrorType, VMError

STACK_SIZE = 255


class Stack:
    """A last-in first-out stack with a fixed capacity."""

    def __init__(self, capacity: int = STACK_SIZE) -> None:
        self.capacity = capacity
        self._items: list[object] = []

    def push(self, value: object) -> None:
        if len(self._items) == self.capacity:
            raise VMError(ErrorType.STACK_ERROR, "Stack Overflow")
        self._items.append(value)

    def pop(self) -> object:
        if not self._items:
            raise VMError(ErrorType.STACK_ERROR, "Stack underflow")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)