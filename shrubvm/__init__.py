"""A small stack-based bytecode virtual machine with scoped variables."""

__version__ = "0.1.0"