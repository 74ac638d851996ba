"""The stack of nested variable scopes."""

from __future__ import annotations

from .errors import ErrorType, VMError
from .scope import Scope


class Environment:
    """Nested scopes; depth 0 is the innermost one."""

    def __init__(self) -> None:
        self._scopes: list[Scope] = []

    def push(self, size: int) -> None:
        """Enter a new scope with ``size`` slots."""
        self._scopes.append(Scope(size))

    def pop(self) -> None:
        """Leave the innermost scope."""
        if not self._scopes:
            raise VMError(ErrorType.STACK_ERROR, "Stack underflow in environment")
        self._scopes.pop()

    def _scope_at(self, depth: int) -> Scope:
        if not 0 <= depth < len(self._scopes):
            raise VMError(
                ErrorType.STACK_ERROR,
                "Tried to access variable from too many scopes back",
            )
        return self._scopes[-1 - depth]

    def get(self, depth: int, offset: int) -> object:
        return self._scope_at(depth).load(offset)

    def set(self, value: object, depth: int, offset: int) -> None:
        self._scope_at(depth).store(offset, value)

    def __len__(self) -> int:
        return len(self._scopes)