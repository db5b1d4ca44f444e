"""
Type Inference (local, syntactic)

Just enough typing for component classification:
- Declared return types are read from annotations into qualified TypeSymbols
  (`JSX.Element` -> Element in JSX). Unions, arrays, literals and predefined
  types have no symbol.
- Without an annotation, a body that only ever returns JSX has type
  `JSX.Element`. Anything else is unknown.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from lazy_transform.domain.symbols import JSX_ELEMENT, CallSignature, TypeHandle, TypeSymbol
from lazy_transform.infrastructure.declarations import (
    CLASS_TYPES,
    FUNCTION_DECLARATION_TYPES,
    FUNCTION_EXPRESSION_TYPES,
    DeclarationReader,
)
from lazy_transform.parsing import AstTree

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode

QUALIFIED_NAME = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")

PREDEFINED_TYPES = frozenset(
    ["any", "unknown", "never", "void", "null", "undefined", "string", "number", "boolean", "bigint", "symbol", "object"]
)

JSX_NODE_TYPES = frozenset(["jsx_element", "jsx_self_closing_element", "jsx_fragment"])

FUNCTION_LIKE_TYPES = FUNCTION_DECLARATION_TYPES | FUNCTION_EXPRESSION_TYPES | {"arrow_function", "method_definition"}

# Nested scopes whose return statements belong to another function
NESTED_SCOPE_TYPES = FUNCTION_LIKE_TYPES | CLASS_TYPES | {"class_body"}


def parse_type_symbol(type_text: str) -> TypeSymbol | None:
    """
    Symbol of a written type.

    Examples:
        "JSX.Element" -> TypeSymbol("Element", TypeSymbol("JSX"))
        "React.ReactElement<any>" -> TypeSymbol("ReactElement", TypeSymbol("React"))
        "JSX.Element | null" -> None
    """
    text = type_text.strip()
    if text.startswith(":"):
        text = text[1:].strip()

    # Type arguments do not change the symbol
    if "<" in text and text.endswith(">"):
        text = text[: text.index("<")].strip()

    if not QUALIFIED_NAME.match(text) or text in PREDEFINED_TYPES:
        return None

    symbol = None
    for part in text.split("."):
        symbol = TypeSymbol(part, parent=symbol)
    return symbol


class TypeInference:
    """Computes declared types for declaration nodes of one file."""

    def __init__(self, tree: AstTree):
        self.tree = tree
        self.reader = DeclarationReader(tree)

    def type_of(
        self,
        node: TSNode,
        signatures: list[TSNode] | None = None,
        type_annotation: TSNode | None = None,
    ) -> TypeHandle:
        """
        Declared type of a declaration node.

        Args:
            node: Function, class, variable declarator or export value node
            signatures: Overload signatures, in source order
            type_annotation: Declared type of a variable, if any

        Returns:
            TypeHandle; classes and non-callables have no call signatures
        """
        if node.type == "variable_declarator":
            annotation = type_annotation or node.child_by_field_name("type")
            if annotation is not None:
                return self._type_from_annotation(annotation)
            value = node.child_by_field_name("value")
            if value is None:
                return TypeHandle("any")
            return self.type_of(value)

        if node.type in CLASS_TYPES:
            return TypeHandle(f"typeof {self.reader.text(node.child_by_field_name('name')) or 'class'}")

        if node.type == "parenthesized_expression":
            inner = next((c for c in node.named_children if c.type != "comment"), None)
            if inner is not None:
                return self.type_of(inner)

        if node.type in FUNCTION_LIKE_TYPES:
            signature_nodes = signatures or [node]
            return TypeHandle(
                "function",
                tuple(self.call_signature(sig) for sig in signature_nodes),
            )

        return TypeHandle(node.type)

    def call_signature(self, node: TSNode) -> CallSignature:
        return CallSignature(
            parameter_count=len(self.reader.read_parameters(node)),
            return_type=self.return_type(node),
        )

    def return_type(self, node: TSNode) -> TypeSymbol | None:
        annotation = node.child_by_field_name("return_type")
        if annotation is not None:
            return parse_type_symbol(self.reader.text(annotation))

        body = node.child_by_field_name("body")
        if body is None:
            return None
        if body.type == "statement_block":
            return self._block_return_type(body)
        return self.expression_type(body)

    def expression_type(self, node: TSNode) -> TypeSymbol | None:
        if node.type in JSX_NODE_TYPES:
            return JSX_ELEMENT
        if node.type == "parenthesized_expression":
            inner = next((c for c in node.named_children if c.type != "comment"), None)
            return self.expression_type(inner) if inner is not None else None
        if node.type == "ternary_expression":
            consequence = node.child_by_field_name("consequence")
            alternative = node.child_by_field_name("alternative")
            if consequence is None or alternative is None:
                return None
            left = self.expression_type(consequence)
            return left if left is not None and left == self.expression_type(alternative) else None
        return None

    def _block_return_type(self, block: TSNode) -> TypeSymbol | None:
        returned = [self._returned_type(r) for r in self._return_statements(block)]
        if not returned:
            return None
        first = returned[0]
        if first is not None and all(t == first for t in returned):
            return first
        return None

    def _returned_type(self, statement: TSNode) -> TypeSymbol | None:
        value = next((c for c in statement.named_children if c.type != "comment"), None)
        return self.expression_type(value) if value is not None else None

    def _return_statements(self, node: TSNode) -> list[TSNode]:
        result = []
        for child in node.named_children:
            if child.type == "return_statement":
                result.append(child)
            elif child.type not in NESTED_SCOPE_TYPES:
                result.extend(self._return_statements(child))
        return result

    def _type_from_annotation(self, annotation: TSNode) -> TypeHandle:
        type_node = next((c for c in annotation.named_children if c.type != "comment"), annotation)
        if type_node.type == "function_type":
            return TypeHandle(self.reader.text(type_node), (self.call_signature(type_node),))
        return TypeHandle(self.reader.text(type_node))
