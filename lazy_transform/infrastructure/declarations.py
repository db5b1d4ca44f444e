"""
Declaration Reader

Converts tree-sitter declaration nodes of a target module into the domain
declarations the classifier inspects.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lazy_transform.domain.models import (
    ArrowFunction,
    ClassDeclaration,
    Declaration,
    ExportAssignment,
    Expression,
    ExpressionWithTypeArguments,
    FunctionDeclaration,
    FunctionExpression,
    HeritageClause,
    HeritageToken,
    Identifier,
    OtherDeclaration,
    OtherExpression,
    Parameter,
    ParenthesizedExpression,
    PropertyAccess,
    VariableDeclaration,
)
from lazy_transform.parsing import AstTree

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode

FUNCTION_DECLARATION_TYPES = frozenset(
    ["function_declaration", "generator_function_declaration", "function_signature"]
)
FUNCTION_EXPRESSION_TYPES = frozenset(["function_expression", "function", "generator_function"])
CLASS_TYPES = frozenset(["class_declaration", "abstract_class_declaration", "class"])
VARIABLE_STATEMENT_TYPES = frozenset(["lexical_declaration", "variable_declaration"])
NAMESPACE_TYPES = frozenset(["internal_module", "module"])
PARAMETER_TYPES = frozenset(["required_parameter", "optional_parameter", "identifier", "rest_pattern"])


class DeclarationReader:
    """Reads declaration-shaped tree-sitter nodes of one file."""

    def __init__(self, tree: AstTree):
        self.tree = tree

    def text(self, node: TSNode | None) -> str:
        return self.tree.get_text(node) if node is not None else ""

    # ============================================================
    # Declarations
    # ============================================================

    def read_declaration(self, node: TSNode) -> Declaration:
        if node.type in CLASS_TYPES:
            return self.read_class(node)
        if node.type in FUNCTION_DECLARATION_TYPES:
            return self.read_function(node)
        if node.type == "variable_declarator":
            return self.read_variable_declarator(node)
        name = node.child_by_field_name("name")
        return OtherDeclaration(node.type, self.text(name) or None)

    def read_class(self, node: TSNode) -> ClassDeclaration:
        name = node.child_by_field_name("name")
        clauses = []
        for heritage in (c for c in node.named_children if c.type == "class_heritage"):
            for clause in heritage.named_children:
                if clause.type == "extends_clause":
                    clauses.append(self._read_extends_clause(clause))
                elif clause.type == "implements_clause":
                    clauses.append(
                        HeritageClause(
                            HeritageToken.IMPLEMENTS,
                            tuple(
                                ExpressionWithTypeArguments(OtherExpression(t.type, self.text(t)))
                                for t in clause.named_children
                            ),
                        )
                    )
        return ClassDeclaration(name=self.text(name) or None, heritage_clauses=tuple(clauses))

    def _read_extends_clause(self, clause: TSNode) -> HeritageClause:
        types = []
        for child in clause.named_children:
            if child.type == "type_arguments":
                if types:
                    previous = types[-1]
                    arguments = tuple(self.text(a) for a in child.named_children)
                    types[-1] = ExpressionWithTypeArguments(previous.expression, arguments)
                continue
            types.append(ExpressionWithTypeArguments(self.read_expression(child)))
        return HeritageClause(HeritageToken.EXTENDS, tuple(types))

    def read_function(self, node: TSNode) -> FunctionDeclaration:
        name = node.child_by_field_name("name")
        return FunctionDeclaration(name=self.text(name) or None, parameters=self.read_parameters(node))

    def read_variable_declarator(self, node: TSNode) -> VariableDeclaration:
        value = node.child_by_field_name("value")
        return VariableDeclaration(
            name=self.text(node.child_by_field_name("name")),
            initializer=self.read_expression(value) if value is not None else None,
        )

    def read_export_value(self, node: TSNode) -> Declaration:
        """Declaration for `export default <expression>`."""
        if node.type in CLASS_TYPES:
            return self.read_class(node)
        return ExportAssignment(self.read_expression(node))

    # ============================================================
    # Expressions
    # ============================================================

    def read_expression(self, node: TSNode) -> Expression:
        if node.type == "identifier":
            return Identifier(self.text(node))
        if node.type == "member_expression":
            obj = node.child_by_field_name("object")
            prop = node.child_by_field_name("property")
            return PropertyAccess(self.read_expression(obj), self.text(prop))
        if node.type == "arrow_function":
            return ArrowFunction(parameters=self.read_parameters(node))
        if node.type in FUNCTION_EXPRESSION_TYPES:
            name = node.child_by_field_name("name")
            return FunctionExpression(name=self.text(name) or None, parameters=self.read_parameters(node))
        if node.type == "parenthesized_expression":
            inner = next((c for c in node.named_children if c.type != "comment"), None)
            if inner is not None:
                return ParenthesizedExpression(self.read_expression(inner))
        return OtherExpression(node.type, self.text(node))

    def read_parameters(self, node: TSNode) -> tuple[Parameter, ...]:
        """Parameters of a function-like node (`x => ...` has a single `parameter` field)."""
        single = node.child_by_field_name("parameter")
        if single is not None:
            return (Parameter(self.text(single)),)

        params = node.child_by_field_name("parameters")
        if params is None:
            params = next((c for c in node.named_children if c.type == "formal_parameters"), None)
        if params is None:
            return ()

        result = []
        for param in params.named_children:
            if param.type not in PARAMETER_TYPES:
                continue
            pattern = param.child_by_field_name("pattern")
            result.append(Parameter(self.text(pattern if pattern is not None else param)))
        return tuple(result)
