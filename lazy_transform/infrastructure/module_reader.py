"""
Module Reader

Reads a tree-sitter TypeScript/TSX tree into a domain Module. Import
statements become structured ImportDeclarations that keep their source text;
every other top-level statement is carried as a RawStatement. Comments and
blank lines before a statement are kept as its leading trivia.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lazy_transform.domain.models import (
    Identifier,
    ImportDeclaration,
    ImportSpecifier,
    Module,
    NamedImports,
    NamespaceImport,
    RawStatement,
    Statement,
    StringLiteral,
)
from lazy_transform.parsing import AstTree

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode

TRIVIA_NODE_TYPES = frozenset(["comment", "hash_bang_line"])
TYPE_ONLY_TOKENS = frozenset(["type", "typeof"])


def is_type_only(node: TSNode) -> bool:
    """Whether a `type`/`typeof` keyword token is a direct child of the node."""
    return any(not child.is_named and child.type in TYPE_ONLY_TOKENS for child in node.children)


def read_string_literal(tree: AstTree, node: TSNode) -> StringLiteral:
    raw = tree.get_text(node)
    if len(raw) >= 2 and raw[0] in "\"'" and raw[-1] == raw[0]:
        return StringLiteral(raw[1:-1], raw[0])
    return StringLiteral(raw)


def read_module_export_name(tree: AstTree, node: TSNode) -> str:
    """Name of an import/export specifier part (identifier or string literal)."""
    if node.type == "string":
        return read_string_literal(tree, node).text
    return tree.get_text(node)


class ModuleReader:
    """Converts one parsed file into a domain Module."""

    def __init__(self, tree: AstTree):
        self.tree = tree

    def read(self) -> Module:
        statements: list[Statement] = []
        previous_end = 0

        for child in self.tree.root.children:
            if child.type in TRIVIA_NODE_TYPES:
                continue
            leading = self.tree.slice(previous_end, child.start_byte)
            statements.append(self.read_statement(child, leading))
            previous_end = child.end_byte

        return Module(
            file_name=self.tree.source.file_path,
            statements=tuple(statements),
            trailing_trivia=self.tree.slice(previous_end, self.tree.byte_length),
        )

    def read_statement(self, node: TSNode, leading_trivia: str) -> Statement:
        text = self.tree.get_text(node)
        if node.type == "import_statement":
            declaration = self.read_import(node, leading_trivia, text)
            if declaration is not None:
                return declaration
        return RawStatement(text=text, node_type=node.type, leading_trivia=leading_trivia)

    def read_import(self, node: TSNode, leading_trivia: str, text: str) -> ImportDeclaration | None:
        """
        Read an import statement.

        Returns:
            ImportDeclaration, or None for forms without a module specifier
            (`import x = require("y")`)
        """
        source = node.child_by_field_name("source")
        if source is None or source.type != "string":
            return None

        default_name = None
        named_bindings: NamedImports | NamespaceImport | None = None

        clause = next((c for c in node.named_children if c.type == "import_clause"), None)
        if clause is not None:
            for part in clause.named_children:
                if part.type == "identifier":
                    default_name = Identifier(self.tree.get_text(part))
                elif part.type == "namespace_import":
                    name = next(c for c in part.named_children if c.type == "identifier")
                    named_bindings = NamespaceImport(Identifier(self.tree.get_text(name)))
                elif part.type == "named_imports":
                    named_bindings = NamedImports(
                        tuple(
                            self.read_import_specifier(spec)
                            for spec in part.named_children
                            if spec.type == "import_specifier"
                        )
                    )

        return ImportDeclaration(
            module_specifier=read_string_literal(self.tree, source),
            default_name=default_name,
            named_bindings=named_bindings,
            is_type_only=is_type_only(node),
            leading_trivia=leading_trivia,
            source_text=text,
        )

    def read_import_specifier(self, node: TSNode) -> ImportSpecifier:
        name = read_module_export_name(self.tree, node.child_by_field_name("name"))
        alias_node = node.child_by_field_name("alias")

        if alias_node is None:
            return ImportSpecifier(Identifier(name), is_type_only=is_type_only(node))
        return ImportSpecifier(
            name=Identifier(self.tree.get_text(alias_node)),
            property_name=Identifier(name),
            is_type_only=is_type_only(node),
        )


def read_module(tree: AstTree) -> Module:
    return ModuleReader(tree).read()
