"""Error kinds and the exception raised by the virtual machine."""

from __future__ import annotations

from enum import Enum


class ErrorType(Enum):
    """The kinds of runtime error the machine can report."""

    TYPE_ERROR = "Type Error"
    STACK_ERROR = "Stack Error"
    MALLOC_ERROR = "Malloc Error"
    INDEX_ERROR = "Index Error"

    @property
    def label(self) -> str:
        return self.value


class VMError(Exception):
    """A runtime error raised while building or running a program."""

    def __init__(self, kind: ErrorType, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind.label}: {self.message}"