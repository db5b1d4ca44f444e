"""
Parsing Layer

Tree-sitter based parsing for the test-harness host.

Components:
- parser_registry: Language parser management
- source_file: Source file representation
- ast_tree: Tree wrapper with text access and error detection
"""

from lazy_transform.parsing.ast_tree import AstTree
from lazy_transform.parsing.parser_registry import ParserRegistry, get_registry
from lazy_transform.parsing.source_file import SourceFile

__all__ = [
    "ParserRegistry",
    "get_registry",
    "SourceFile",
    "AstTree",
]
