"""Code generator bases: output handling and the assembly file layout."""

from __future__ import annotations

import abc
import sys
from typing import Any, Iterable, Protocol, TextIO


class FunctionLike(Protocol):
    """What the generators need from a function."""

    name: str
    builtin: bool


class ModuleLike(Protocol):
    """What the generators need from a compilation unit."""

    functions: Iterable[Any]


class CodeGenerator(abc.ABC):
    """Base of all code generators for one module."""

    def __init__(self, module: Any) -> None:
        self.module = module
        self.show_linear_ir = False

    def run(self, out_file_name: str = "") -> bool:
        """Generate code into ``out_file_name``, or to standard output when it is empty.

        Raises OSError if the file cannot be created.
        """
        if out_file_name:
            with open(out_file_name, "w", encoding="utf-8") as out:
                return self.generate(out)
        return self.generate(sys.stdout)

    @abc.abstractmethod
    def generate(self, out: TextIO) -> bool:
        """Write the generated code to ``out``; return True on success."""


class AsmCodeGenerator(CodeGenerator):
    """Base of generators producing an assembly file: header, data, then code."""

    def __init__(self, module: Any) -> None:
        super().__init__(module)
        self.label_index = 0

    def generate(self, out: TextIO) -> bool:
        """Write header, data section and the code of every non-builtin function."""
        self.gen_header(out)
        self.gen_data_section(out)
        self.label_index = 0
        for func in self.module.functions:
            if not func.builtin:
                self.gen_function(out, func)
        return True

    @abc.abstractmethod
    def gen_header(self, out: TextIO) -> None:
        """Write the assembly file header."""

    @abc.abstractmethod
    def gen_data_section(self, out: TextIO) -> None:
        """Write the global variables."""

    @abc.abstractmethod
    def gen_function(self, out: TextIO, func: Any) -> None:
        """Write the code of one function."""