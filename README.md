# shrubvm

A small stack-based bytecode virtual machine. A program is a constant pool
plus a stream of byte-sized instructions. The machine has numbers, booleans
and strings. It supports arithmetic, comparisons, relative jumps and
lexically nested variable scopes.

## Running the demo

The `shrubvm` command runs a built-in program. It prints the heading
`COUNT TO 20:` and the numbers 0 to 20. It then prints the heading
`FIBONACCI SEQUENCE:` and twenty Fibonacci numbers, starting 1, 1, 2, 3, ...

```
shrubvm
```

The command takes no options apart from `--help`. It exits with status 0. If
the program stops with a runtime error, the command prints the error and exits
with status 1.

`shrubvm.cli.build_demo(out)` returns a `VM` loaded with the same program. The
`out` argument is optional; the machine writes its output to `out`.

## Writing a program

```python
import sys

from shrubvm.opcodes import Opcode
from shrubvm.operands import from_signed_word
from shrubvm.vm import VM

vm = VM(sys.stdout)
vm.add_constants(0.0, 1.0, 3.0)
vm.emit(
    Opcode.PUSH_SCOPE, 1,
    Opcode.LOAD_CONST, 0,
    Opcode.STORE_VAR, 0, 0,          # i = 0
    Opcode.LOAD_VAR, 0, 0,
    Opcode.PRINT,
    Opcode.LOAD_VAR, 0, 0,
    Opcode.LOAD_CONST, 1,
    Opcode.ADD,
    Opcode.STORE_VAR, 0, 0,          # i = i + 1
    Opcode.LOAD_VAR, 0, 0,
    Opcode.LOAD_CONST, 2,
    Opcode.LESS,
    Opcode.JUMP_IF_TRUE, *from_signed_word(-22),
    Opcode.POP_SCOPE,
    Opcode.HALT,
)
vm.run()
```

This prints:

```
0.000000
1.000000
2.000000
```

### The machine

- `VM(out=None)` writes to `out`, or to `sys.stdout` when `out` is `None`.
- `add_const(value)` appends a value to the constant pool and returns its
  index. Numbers are stored as floats.
- `add_constants(*values)` appends several values in order.
- The pool holds at most 255 constants.
- `emit(*args)` appends instruction bytes. Each argument is either one byte or
  an iterable of bytes, such as the pair returned by `from_signed_word`.
- `run()` executes the program from its first byte until it reaches `HALT`. A
  program that runs past its last byte raises `VMError`.
- The value stack holds at most 255 values.
- `InstructionBuffer` in `shrubvm.bytecode` keeps a program's bytes. `Stack`,
  `Scope` and `Environment` are the machine's value stack, its variable slots
  and its nested scopes.

### Values

`shrubvm.values` holds the helpers for values. `value_type(value)` returns a
`ValueType`: `NUMBER`, `BOOLEAN` or `STRING`. `same_type(a, b)` compares those
type tags. `make_string(text, length)` takes the first `length` characters of
`text`. `format_value(value)` renders a value the way `PRINT` does:

- numbers with six decimal places;
- booleans as `true` or `false`;
- strings as they are.

## Instructions

| Opcode | Operands | Effect |
| --- | --- | --- |
| `HALT` | | stop execution |
| `PRINT` | | pop a value and print it on its own line |
| `LOAD_CONST` | index | push a constant from the pool |
| `ADD`, `SUB`, `MUL`, `DIV` | | pop two values of the same type; for numbers, push the result |
| `STORE_VAR` | depth, offset | pop a value into a variable slot |
| `LOAD_VAR` | depth, offset | push a variable's value |
| `PUSH_SCOPE` | size | enter a scope with `size` slots |
| `POP_SCOPE` | | leave the innermost scope |
| `JUMP` | lo, hi | jump by a signed 16-bit offset |
| `JUMP_IF_TRUE`, `JUMP_IF_FALSE` | lo, hi | pop a boolean and jump on it |
| `EQUAL`, `NOT_EQUAL`, `GREATER`, `LESS`, `GREATER_EQUAL`, `LESS_EQUAL` | | pop two values, push a boolean |

The opcodes are members of `shrubvm.opcodes.Opcode`.

Jump offsets count from the byte after the operands. Use
`shrubvm.operands.from_signed_word` to encode an offset as its (low, high)
bytes, and `to_signed_word` to decode them.

Variable `depth` counts outward from the innermost scope, starting at 0.

Arithmetic on two booleans or two strings pushes nothing. Dividing by zero
gives an infinity, or NaN for `0 / 0`.

`shrubvm.vm.compare(a, b, opcode)` performs the comparisons. Values of
different types never compare equal, and strings compare lexicographically.

## Errors

Runtime faults raise `shrubvm.errors.VMError`. These include:

- a type mismatch;
- a stack overflow or underflow;
- an out-of-range variable slot, scope depth or constant index.

The error's `kind` is an `ErrorType`: `TYPE_ERROR`, `STACK_ERROR`,
`MALLOC_ERROR` or `INDEX_ERROR`. Its text reads, for example,
`Type Error: Attempt to add values of different types`.

## What it does not do

There is no source language, assembler or compiler. Programs are built in
Python from opcodes and constants, as shown above. The only command runs the
built-in demo. It cannot load or run a program from a file.