"""The bytecode interpreter."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Callable
from typing import TextIO

from .bytecode import InstructionBuffer, Operand
from .environment import Environment
from .errors import ErrorType, VMError
from .opcodes import Opcode
from .operands import to_signed_word
from .stack import STACK_SIZE, Stack
from .values import ValueType, format_value, same_type, value_type

CONST_POOL_SIZE = 255

_COMPARISONS: dict[int, Callable[[object, object], bool]] = {
    Opcode.EQUAL: operator.eq,
    Opcode.NOT_EQUAL: operator.ne,
    Opcode.GREATER: operator.gt,
    Opcode.LESS: operator.lt,
    Opcode.GREATER_EQUAL: operator.ge,
    Opcode.LESS_EQUAL: operator.le,
}


def compare(first: object, second: object, opcode: int) -> bool:
    """Apply a comparison opcode to two values.

    Values of different types are never equal, so only NOT_EQUAL holds for them.
    """
    try:
        test = _COMPARISONS[opcode]
    except KeyError:
        raise ValueError(f"not a comparison opcode: {opcode!r}") from None
    if not same_type(first, second):
        return opcode == Opcode.NOT_EQUAL
    return bool(test(first, second))


def _divide(dividend: float, divisor: float) -> float:
    if divisor == 0:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(1.0, dividend) * math.copysign(1.0, divisor) * math.inf
    return dividend / divisor


_ARITHMETIC: dict[int, tuple[str, Callable[[float, float], float]]] = {
    Opcode.ADD: ("add", operator.add),
    Opcode.SUB: ("subtract", operator.sub),
    Opcode.MUL: ("multiply", operator.mul),
    Opcode.DIV: ("divide", _divide),
}


class VM:
    """A stack machine with a constant pool and nested variable scopes."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.stack = Stack(STACK_SIZE)
        self.constants: list[object] = []
        self.instructions = InstructionBuffer()
        self.environment = Environment()
        self.program_counter = 0

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def add_const(self, value: object) -> int:
        """Append a value to the constant pool and return its index."""
        if len(self.constants) == CONST_POOL_SIZE:
            raise VMError(ErrorType.INDEX_ERROR, "Too many constants")
        if value_type(value) is ValueType.NUMBER:
            value = float(value)  # type: ignore[arg-type]
        self.constants.append(value)
        return len(self.constants) - 1

    def add_constants(self, *args: object) -> None:
        """Append several values to the constant pool in order."""
        for value in args:
            self.add_const(value)

    def emit(self, *args: Operand) -> None:
        """Append instruction bytes to the program."""
        self.instructions.insert(*args)

    def _fetch(self) -> int:
        if not 0 <= self.program_counter < len(self.instructions):
            raise VMError(ErrorType.INDEX_ERROR, "Program counter out of range")
        byte = self.instructions[self.program_counter]
        self.program_counter += 1
        return byte

    def _fetch_offset(self) -> int:
        lo = self._fetch()
        hi = self._fetch()
        return to_signed_word(lo, hi)

    def _arithmetic(self, verb: str, apply: Callable[[float, float], float]) -> None:
        second = self.stack.pop()
        first = self.stack.pop()
        if not same_type(first, second):
            raise VMError(
                ErrorType.TYPE_ERROR, f"Attempt to {verb} values of different types"
            )
        if value_type(first) is ValueType.NUMBER:
            self.stack.push(float(apply(first, second)))  # type: ignore[arg-type]

    def _conditional_jump(self, when: bool) -> None:
        offset = self._fetch_offset()
        condition = self.stack.pop()
        if not isinstance(condition, bool):
            raise VMError(ErrorType.TYPE_ERROR, "Jumps must use boolean types")
        if condition is when:
            self.program_counter += offset

    def run(self) -> None:
        """Execute the program from its first byte until HALT."""
        self.program_counter = 0
        while True:
            opcode = self._fetch()
            if opcode == Opcode.HALT:
                return
            if opcode == Opcode.PRINT:
                self.out.write(format_value(self.stack.pop()) + "\n")
            elif opcode == Opcode.LOAD_CONST:
                index = self._fetch()
                if index >= len(self.constants):
                    raise VMError(
                        ErrorType.INDEX_ERROR, "Constant index out of range"
                    )
                self.stack.push(self.constants[index])
            elif opcode in _ARITHMETIC:
                self._arithmetic(*_ARITHMETIC[opcode])
            elif opcode == Opcode.STORE_VAR:
                value = self.stack.pop()
                depth = self._fetch()
                offset = self._fetch()
                self.environment.set(value, depth, offset)
            elif opcode == Opcode.LOAD_VAR:
                depth = self._fetch()
                offset = self._fetch()
                self.stack.push(self.environment.get(depth, offset))
            elif opcode == Opcode.PUSH_SCOPE:
                self.environment.push(self._fetch())
            elif opcode == Opcode.POP_SCOPE:
                self.environment.pop()
            elif opcode == Opcode.JUMP:
                offset = self._fetch_offset()
                self.program_counter += offset
            elif opcode == Opcode.JUMP_IF_TRUE:
                self._conditional_jump(True)
            elif opcode == Opcode.JUMP_IF_FALSE:
                self._conditional_jump(False)
            elif opcode in _COMPARISONS:
                second = self.stack.pop()
                first = self.stack.pop()
                self.stack.push(compare(first, second, opcode))