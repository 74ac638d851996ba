"""Instruction opcodes of the virtual machine."""

from __future__ import annotations

from enum import IntEnum


class Opcode(IntEnum):
    """One-byte instruction codes."""

    HALT = 0x00
    PRINT = 0x01
    LOAD_CONST = 0x02
    ADD = 0x03
    SUB = 0x04
    MUL = 0x05
    DIV = 0x06
    STORE_VAR = 0x07
    LOAD_VAR = 0x08
    PUSH_SCOPE = 0x09
    POP_SCOPE = 0x0A
    JUMP = 0x0B
    JUMP_IF_TRUE = 0x0C
    JUMP_IF_FALSE = 0x0D
    EQUAL = 0x0E
    NOT_EQUAL = 0x0F
    GREATER = 0x10
    LESS = 0x11
    GREATER_EQUAL = 0x12
    LESS_EQUAL = 0x13