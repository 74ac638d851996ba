import pytest

from shrubvm.opcodes import Opcode


def test_codes_are_dense_from_zero():
    names = [Opcode(code).name for code in range(0x14)]
    assert names == [
        "HALT",
        "PRINT",
        "LOAD_CONST",
        "ADD",
        "SUB",
        "MUL",
        "DIV",
        "STORE_VAR",
        "LOAD_VAR",
        "PUSH_SCOPE",
        "POP_SCOPE",
        "JUMP",
        "JUMP_IF_TRUE",
        "JUMP_IF_FALSE",
        "EQUAL",
        "NOT_EQUAL",
        "GREATER",
        "LESS",
        "GREATER_EQUAL",
        "LESS_EQUAL",
    ]


def test_lookup_by_byte():
    assert Opcode(0x00) is Opcode.HALT
    assert Opcode(0x0C) is Opcode.JUMP_IF_TRUE
    assert Opcode(0x13) is Opcode.LESS_EQUAL


def test_lookup_by_name():
    opcode = Opcode(0x07)
    assert opcode.name == "STORE_VAR"
    assert Opcode["STORE_VAR"] is opcode


def test_unknown_byte_rejected():
    with pytest.raises(ValueError):
        Opcode(0x14)