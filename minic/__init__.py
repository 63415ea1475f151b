"""Syntax tree, AST DOT output, ARM32 platform checks, register allocation and assembly emission for a small C subset."""

__version__ = "1.0.1"