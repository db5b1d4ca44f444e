"""
Printer

Emits a domain Module as source text. Statements read from source are printed
verbatim (with their leading trivia); synthesized statements are printed in a
canonical form, one per line:

    const MyComp1 = React.lazy(() => import("./component1"));
"""

from __future__ import annotations

from lazy_transform.domain.factory import create_name_literal, is_identifier_name
from lazy_transform.domain.models import (
    ArrowFunction,
    CallExpression,
    ElementAccess,
    Identifier,
    ImportCall,
    ImportDeclaration,
    Module,
    NamedImports,
    NamespaceImport,
    Node,
    ObjectLiteral,
    OtherExpression,
    ParenthesizedExpression,
    PropertyAccess,
    RawStatement,
    Statement,
    StringLiteral,
    VariableStatement,
)
from lazy_transform.exceptions import EmitError


class Printer:
    """Stateless printer for module-level syntax."""

    def __init__(self, newline: str = "\n"):
        self.newline = newline
        self._dispatch = {
            Identifier: self._print_identifier,
            StringLiteral: self._print_string_literal,
            PropertyAccess: self._print_property_access,
            ElementAccess: self._print_element_access,
            CallExpression: self._print_call,
            ImportCall: self._print_import_call,
            ArrowFunction: self._print_arrow_function,
            ParenthesizedExpression: self._print_parenthesized,
            ObjectLiteral: self._print_object_literal,
            OtherExpression: self._print_other_expression,
            ImportDeclaration: self._print_import_declaration,
            VariableStatement: self._print_variable_statement,
            RawStatement: self._print_raw_statement,
        }

    def print_module(self, module: Module) -> str:
        return self._print_statements(module.statements) + module.trailing_trivia

    def print_node(self, node: Node) -> str:
        handler = self._dispatch.get(type(node))
        if handler is None:
            raise EmitError("Cannot print node", node.kind)
        return handler(node)

    def _print_statements(self, statements: tuple[Statement, ...]) -> str:
        parts = []
        for index, statement in enumerate(statements):
            trivia = getattr(statement, "leading_trivia", None)
            if trivia is None:
                trivia = "" if index == 0 else self.newline
            parts.append(trivia + self.print_node(statement))
        return "".join(parts)

    # ============================================================
    # Statements
    # ============================================================

    def _print_import_declaration(self, node: ImportDeclaration) -> str:
        if node.source_text is not None:
            return node.source_text

        keyword = "import type" if node.is_type_only else "import"
        specifier = self.print_node(node.module_specifier)
        if not node.has_import_clause:
            return f"{keyword} {specifier};"

        clause = []
        if node.default_name is not None:
            clause.append(node.default_name.text)
        if isinstance(node.named_bindings, NamespaceImport):
            clause.append(f"* as {node.named_bindings.name.text}")
        elif isinstance(node.named_bindings, NamedImports):
            elements = []
            for spec in node.named_bindings.elements:
                text = spec.name.text
                if spec.property_name is not None:
                    text = f"{self._print_module_export_name(spec.property_name.text)} as {text}"
                if spec.is_type_only:
                    text = f"type {text}"
                elements.append(text)
            clause.append("{ " + ", ".join(elements) + " }" if elements else "{}")

        return f"{keyword} {', '.join(clause)} from {specifier};"

    def _print_module_export_name(self, name: str) -> str:
        if is_identifier_name(name):
            return name
        return self.print_node(create_name_literal(name))

    def _print_variable_statement(self, node: VariableStatement) -> str:
        declarators = []
        for decl in node.declarations:
            if decl.initializer is None:
                declarators.append(decl.name)
            else:
                declarators.append(f"{decl.name} = {self.print_node(decl.initializer)}")
        return f"{node.declaration_kind.value} {', '.join(declarators)};"

    def _print_raw_statement(self, node: RawStatement) -> str:
        return node.text

    # ============================================================
    # Expressions
    # ============================================================

    def _print_identifier(self, node: Identifier) -> str:
        return node.text

    def _print_string_literal(self, node: StringLiteral) -> str:
        return node.raw

    def _print_property_access(self, node: PropertyAccess) -> str:
        return f"{self.print_node(node.expression)}.{node.name}"

    def _print_element_access(self, node: ElementAccess) -> str:
        return f"{self.print_node(node.expression)}[{self.print_node(node.argument)}]"

    def _print_call(self, node: CallExpression) -> str:
        arguments = ", ".join(self.print_node(arg) for arg in node.arguments)
        return f"{self.print_node(node.expression)}({arguments})"

    def _print_import_call(self, node: ImportCall) -> str:
        return f"import({self.print_node(node.argument)})"

    def _print_arrow_function(self, node: ArrowFunction) -> str:
        if len(node.parameters) == 1:
            params = node.parameters[0].name
        else:
            params = "(" + ", ".join(p.name for p in node.parameters) + ")"
        body = self.print_node(node.body) if node.body is not None else "{}"
        return f"{params} => {body}"

    def _print_parenthesized(self, node: ParenthesizedExpression) -> str:
        return f"({self.print_node(node.expression)})"

    def _print_object_literal(self, node: ObjectLiteral) -> str:
        if not node.properties:
            return "{}"
        props = ", ".join(f"{p.name}: {self.print_node(p.initializer)}" for p in node.properties)
        return "{ " + props + " }"

    def _print_other_expression(self, node: OtherExpression) -> str:
        return node.text


def print_module(module: Module) -> str:
    return Printer().print_module(module)
