"""
Syntax tree models

Module-level syntax nodes the rewrite engine reads and builds. Statements the
engine never looks into are carried as RawStatement; import declarations and
every node the synthesizer creates are fully structured.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Node:
    """Base class for all syntax nodes."""

    __slots__ = ()

    @property
    def kind(self) -> str:
        return type(self).__name__


class Expression(Node):
    __slots__ = ()


class Statement(Node):
    __slots__ = ()


class Declaration(Node):
    """Declaration reachable through an exported name of a target module."""

    __slots__ = ()


# ============================================================
# Expressions
# ============================================================


@dataclass(frozen=True, slots=True)
class Identifier(Expression):
    text: str


@dataclass(frozen=True, slots=True)
class StringLiteral(Expression):
    """
    String literal.

    Attributes:
        text: Literal content between the quotes, escapes kept as written
        quote: Quote character used in the source
    """

    text: str
    quote: str = '"'

    @property
    def raw(self) -> str:
        return f"{self.quote}{self.text}{self.quote}"


@dataclass(frozen=True, slots=True)
class PropertyAccess(Expression):
    expression: Expression
    name: str


@dataclass(frozen=True, slots=True)
class ElementAccess(Expression):
    """`expression[argument]`"""

    expression: Expression
    argument: Expression


@dataclass(frozen=True, slots=True)
class CallExpression(Expression):
    expression: Expression
    arguments: tuple[Expression, ...] = ()


@dataclass(frozen=True, slots=True)
class ImportCall(Expression):
    """Dynamic `import(<argument>)`."""

    argument: Expression


@dataclass(frozen=True, slots=True)
class Parameter(Node):
    name: str


@dataclass(frozen=True, slots=True)
class ArrowFunction(Expression):
    parameters: tuple[Parameter, ...] = ()
    body: Node | None = None


@dataclass(frozen=True, slots=True)
class FunctionExpression(Expression):
    name: str | None = None
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True, slots=True)
class ParenthesizedExpression(Expression):
    expression: Expression


@dataclass(frozen=True, slots=True)
class PropertyAssignment(Node):
    name: str
    initializer: Expression


@dataclass(frozen=True, slots=True)
class ObjectLiteral(Expression):
    properties: tuple[PropertyAssignment, ...] = ()


@dataclass(frozen=True, slots=True)
class OtherExpression(Expression):
    """Expression the engine has no structured model for (kept as text)."""

    node_type: str
    text: str = ""


# ============================================================
# Import statements
# ============================================================


@dataclass(frozen=True, slots=True)
class ImportSpecifier(Node):
    """
    One named binding of an import statement.

    `name` is the local binding; `property_name` is the exported name and is
    only set when the binding is aliased (`{ Foo as Bar }`).
    """

    name: Identifier
    property_name: Identifier | None = None
    is_type_only: bool = False

    @property
    def exported_name(self) -> str:
        return (self.property_name or self.name).text


@dataclass(frozen=True, slots=True)
class NamedImports(Node):
    elements: tuple[ImportSpecifier, ...] = ()


@dataclass(frozen=True, slots=True)
class NamespaceImport(Node):
    name: Identifier


@dataclass(frozen=True, slots=True)
class ImportDeclaration(Statement):
    """
    `import <default>, <named bindings> from <module_specifier>`

    Attributes:
        module_specifier: Module the bindings come from
        default_name: Default binding, if any
        named_bindings: Named or namespace bindings, if any
        is_type_only: `import type ...`
        leading_trivia: Whitespace and comments preceding the statement
        source_text: Original text; printed verbatim while set
    """

    module_specifier: StringLiteral
    default_name: Identifier | None = None
    named_bindings: NamedImports | NamespaceImport | None = None
    is_type_only: bool = False
    leading_trivia: str | None = field(default=None, compare=False)
    source_text: str | None = field(default=None, compare=False)

    @property
    def has_import_clause(self) -> bool:
        return self.default_name is not None or self.named_bindings is not None

    @property
    def specifiers(self) -> tuple[ImportSpecifier, ...]:
        if isinstance(self.named_bindings, NamedImports):
            return self.named_bindings.elements
        return ()

    def bound_names(self) -> list[str]:
        """Local names bound by this statement, in source order."""
        names = []
        if self.default_name is not None:
            names.append(self.default_name.text)
        if isinstance(self.named_bindings, NamespaceImport):
            names.append(self.named_bindings.name.text)
        names.extend(spec.name.text for spec in self.specifiers)
        return names


# ============================================================
# Other statements
# ============================================================


class VariableKind(str, Enum):
    CONST = "const"
    LET = "let"
    VAR = "var"


@dataclass(frozen=True, slots=True)
class VariableDeclaration(Declaration):
    name: str
    initializer: Expression | None = None


@dataclass(frozen=True, slots=True)
class VariableStatement(Statement, Declaration):
    declarations: tuple[VariableDeclaration, ...]
    declaration_kind: VariableKind = VariableKind.CONST
    leading_trivia: str | None = field(default=None, compare=False)

    def bound_names(self) -> list[str]:
        return [decl.name for decl in self.declarations]


@dataclass(frozen=True, slots=True)
class RawStatement(Statement):
    """Statement kept as source text (never rewritten)."""

    text: str
    node_type: str = ""
    leading_trivia: str | None = field(default=None, compare=False)


# ============================================================
# Declarations (read through the oracle)
# ============================================================


class HeritageToken(str, Enum):
    EXTENDS = "extends"
    IMPLEMENTS = "implements"


@dataclass(frozen=True, slots=True)
class ExpressionWithTypeArguments(Node):
    expression: Expression
    type_arguments: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class HeritageClause(Node):
    token: HeritageToken
    types: tuple[ExpressionWithTypeArguments, ...] = ()


@dataclass(frozen=True, slots=True)
class ClassDeclaration(Declaration):
    name: str | None = None
    heritage_clauses: tuple[HeritageClause, ...] = ()


@dataclass(frozen=True, slots=True)
class FunctionDeclaration(Declaration):
    name: str | None = None
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True, slots=True)
class ExportAssignment(Declaration):
    """`export default <expression>`"""

    expression: Expression


@dataclass(frozen=True, slots=True)
class OtherDeclaration(Declaration):
    """Value declaration of a kind the classifier never accepts (namespace, enum)."""

    node_type: str
    name: str | None = None


# ============================================================
# Module
# ============================================================


@dataclass(frozen=True, slots=True)
class Module(Node):
    """
    One compilation unit.

    Attributes:
        file_name: Path of the module
        statements: Top-level statements in source order
        trailing_trivia: Text after the last statement
    """

    file_name: str
    statements: tuple[Statement, ...] = ()
    trailing_trivia: str = field(default="", compare=False)

    @property
    def is_declaration_file(self) -> bool:
        return self.file_name.endswith(".d.ts")

    @property
    def import_declarations(self) -> list[ImportDeclaration]:
        return [s for s in self.statements if isinstance(s, ImportDeclaration)]
