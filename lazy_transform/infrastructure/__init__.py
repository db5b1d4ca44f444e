"""
Test-harness host: tree-sitter reader, oracle program, printer.
"""

from .compile import compile_modules
from .module_reader import ModuleReader, read_module
from .printer import Printer, print_module
from .program import TreeSitterProgram

__all__ = [
    "ModuleReader",
    "Printer",
    "TreeSitterProgram",
    "compile_modules",
    "print_module",
    "read_module",
]
