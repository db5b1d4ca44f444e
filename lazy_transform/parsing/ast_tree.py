"""
AST Tree wrapper for Tree-sitter
"""

from tree_sitter import Node as TSNode
from tree_sitter import Tree as TSTree

from lazy_transform.exceptions import ParsingError
from lazy_transform.parsing.parser_registry import get_registry
from lazy_transform.parsing.source_file import SourceFile


class AstTree:
    """
    Wrapper for a Tree-sitter tree.

    Node offsets are byte offsets; all text access goes through the encoded
    source so multi-byte characters stay aligned.
    """

    def __init__(self, source: SourceFile, tree: TSTree):
        self.source = source
        self.tree = tree
        self._root = tree.root_node
        self._content = source.content_bytes

    @classmethod
    def parse(cls, source: SourceFile) -> "AstTree":
        """
        Parse source file into AST.

        Raises:
            ParsingError: If language not supported or parsing fails
        """
        parser = get_registry().get_parser(source.language)
        if parser is None:
            raise ParsingError(f"Language not supported: {source.language}", source.file_path)

        tree = parser.parse(source.content_bytes)
        if tree is None:
            raise ParsingError("Failed to parse file", source.file_path)

        return cls(source, tree)

    @property
    def root(self) -> TSNode:
        return self._root

    def get_text(self, node: TSNode) -> str:
        return self.slice(node.start_byte, node.end_byte)

    def slice(self, start_byte: int, end_byte: int) -> str:
        return self._content[start_byte:end_byte].decode(self.source.encoding)

    @property
    def byte_length(self) -> int:
        return len(self._content)

    def has_error(self, node: TSNode | None = None) -> bool:
        node = node or self._root
        return node.has_error

    def get_errors(self, node: TSNode | None = None) -> list[TSNode]:
        """
        Get all error nodes.

        Args:
            node: Starting node (defaults to root)
        """
        if node is None:
            node = self._root

        errors = []
        if node.type == "ERROR" or node.is_missing:
            errors.append(node)

        for child in node.children:
            errors.extend(self.get_errors(child))

        return errors

    def __repr__(self) -> str:
        return f"AstTree(file={self.source.file_path}, language={self.source.language})"
