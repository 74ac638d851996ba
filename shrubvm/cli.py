"""The command that runs the built-in demonstration program."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .errors import VMError
from .opcodes import Opcode as Op
from .operands import from_signed_word
from .values import make_string
from .vm import VM


def build_demo(out: TextIO | None = None) -> VM:
    """Return a machine loaded with the counting and Fibonacci program."""
    vm = VM(out)
    vm.add_constants(
        0.0,
        1.0,
        20.0,
        make_string("\nCOUNT TO 20: \n", 15),
        make_string("\nFIBONACCI SEQUENCE: \n", 22),
    )

    # Count from 0 to 20.
    vm.emit(
        Op.PUSH_SCOPE, 1,
        Op.LOAD_CONST, 3,
        Op.PRINT,
        Op.LOAD_CONST, 0,
        Op.STORE_VAR, 0, 0,
        Op.LOAD_VAR, 0, 0,
        Op.PRINT,
        Op.LOAD_VAR, 0, 0,
        Op.LOAD_CONST, 1,
        Op.ADD,
        Op.STORE_VAR, 0, 0,
        Op.LOAD_VAR, 0, 0,
        Op.LOAD_CONST, 2,
        Op.LESS_EQUAL,
        Op.JUMP_IF_TRUE, from_signed_word(-22),
        Op.POP_SCOPE,
    )

    # Fibonacci sequence.
    vm.emit(
        Op.PUSH_SCOPE, 2,
        Op.LOAD_CONST, 4,
        Op.PRINT,
        Op.LOAD_CONST, 1,
        Op.LOAD_CONST, 0,
        Op.STORE_VAR, 0, 0,
        Op.STORE_VAR, 0, 1,
        Op.PUSH_SCOPE, 2,
        Op.LOAD_CONST, 0,
        Op.STORE_VAR, 0, 0,
        Op.LOAD_VAR, 1, 0,
        Op.STORE_VAR, 0, 1,
        Op.LOAD_VAR, 1, 1,
        Op.STORE_VAR, 1, 0,
        Op.LOAD_VAR, 0, 1,
        Op.LOAD_VAR, 1, 1,
        Op.ADD,
        Op.STORE_VAR, 1, 1,
        Op.LOAD_CONST, 1,
        Op.LOAD_VAR, 0, 0,
        Op.ADD,
        Op.STORE_VAR, 0, 0,
        Op.LOAD_VAR, 1, 0,
        Op.PRINT,
        Op.LOAD_VAR, 0, 0,
        Op.LOAD_CONST, 2,
        Op.LESS,
        Op.JUMP_IF_TRUE, from_signed_word(-44),
        Op.POP_SCOPE,
        Op.POP_SCOPE,
        Op.HALT,
    )
    return vm


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration program and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="shrubvm", description="Run the built-in demonstration program."
    )
    parser.parse_args(argv)
    vm = build_demo()
    try:
        vm.run()
    except VMError as error:
        print(error)
        return 1
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())