"""
Node factory

Helpers for building syntax nodes, used by the synthesizer and by option
builders (wrapper expression, injected import).
"""

from __future__ import annotations

import re

from .models import (
    ArrowFunction,
    CallExpression,
    ElementAccess,
    Expression,
    Identifier,
    ImportCall,
    ImportDeclaration,
    ImportSpecifier,
    NamedImports,
    NamespaceImport,
    Node,
    ObjectLiteral,
    Parameter,
    ParenthesizedExpression,
    PropertyAccess,
    PropertyAssignment,
    StringLiteral,
    VariableDeclaration,
    VariableKind,
    VariableStatement,
)

IDENTIFIER_NAME = re.compile(r"^(?:[^\W\d]|\$)[\w$]*$")


def is_identifier_name(name: str) -> bool:
    return IDENTIFIER_NAME.match(name) is not None


def create_identifier(text: str) -> Identifier:
    return Identifier(text)


def create_string_literal(text: str, quote: str = '"') -> StringLiteral:
    return StringLiteral(text, quote)


def create_name_literal(name: str) -> StringLiteral:
    """String literal spelling of a module export name (`"my-comp"`)."""
    return StringLiteral(name, "'" if '"' in name else '"')


def create_property_access(expression: Expression | str, name: str) -> PropertyAccess:
    if isinstance(expression, str):
        expression = Identifier(expression)
    return PropertyAccess(expression, name)


def create_element_access(expression: Expression | str, name: str) -> ElementAccess:
    if isinstance(expression, str):
        expression = Identifier(expression)
    return ElementAccess(expression, create_name_literal(name))


def create_member_access(expression: Expression | str, name: str) -> PropertyAccess | ElementAccess:
    """`expression.name`, or `expression["name"]` when the name is not an identifier."""
    if is_identifier_name(name):
        return create_property_access(expression, name)
    return create_element_access(expression, name)


def create_call(expression: Expression, arguments: list[Expression] | tuple[Expression, ...] = ()) -> CallExpression:
    return CallExpression(expression, tuple(arguments))


def create_import_call(specifier: StringLiteral) -> ImportCall:
    return ImportCall(specifier)


def create_arrow_function(parameters: list[str] | tuple[str, ...], body: Node) -> ArrowFunction:
    return ArrowFunction(tuple(Parameter(name) for name in parameters), body)


def create_paren(expression: Expression) -> ParenthesizedExpression:
    return ParenthesizedExpression(expression)


def create_object_literal(properties: dict[str, Expression]) -> ObjectLiteral:
    return ObjectLiteral(tuple(PropertyAssignment(name, value) for name, value in properties.items()))


def create_const_statement(name: str, initializer: Expression, leading_trivia: str | None = None) -> VariableStatement:
    return VariableStatement(
        declarations=(VariableDeclaration(name, initializer),),
        declaration_kind=VariableKind.CONST,
        leading_trivia=leading_trivia,
    )


def create_import_declaration(
    module_specifier: str | StringLiteral,
    default_name: str | None = None,
    named: list[str | tuple[str, str]] | None = None,
    namespace: str | None = None,
) -> ImportDeclaration:
    """
    Build an import declaration.

    Args:
        module_specifier: Specifier text or literal
        default_name: Default binding
        named: Named bindings; a (exported, local) pair makes an aliased binding
        namespace: Namespace binding (`* as name`), exclusive with `named`

    Returns:
        ImportDeclaration without original source text
    """
    if isinstance(module_specifier, str):
        module_specifier = StringLiteral(module_specifier)

    bindings: NamedImports | NamespaceImport | None = None
    if namespace is not None:
        bindings = NamespaceImport(Identifier(namespace))
    elif named is not None:
        elements = []
        for item in named:
            if isinstance(item, tuple):
                exported, local = item
                elements.append(ImportSpecifier(Identifier(local), Identifier(exported)))
            else:
                elements.append(ImportSpecifier(Identifier(item)))
        bindings = NamedImports(tuple(elements))

    return ImportDeclaration(
        module_specifier=module_specifier,
        default_name=Identifier(default_name) if default_name else None,
        named_bindings=bindings,
    )
