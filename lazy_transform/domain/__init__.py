"""
Domain: syntax nodes, oracle-facing symbols, ports.
"""

from .models import (
    ArrowFunction,
    ElementAccess,
    CallExpression,
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
    ImportCall,
    ImportDeclaration,
    ImportSpecifier,
    Module,
    NamedImports,
    NamespaceImport,
    Node,
    ObjectLiteral,
    OtherDeclaration,
    OtherExpression,
    Parameter,
    ParenthesizedExpression,
    PropertyAccess,
    PropertyAssignment,
    RawStatement,
    Statement,
    StringLiteral,
    VariableDeclaration,
    VariableKind,
    VariableStatement,
)
from .ports import SymbolOraclePort
from .symbols import JSX_ELEMENT, CallSignature, ExportedSymbol, TypeHandle, TypeSymbol

__all__ = [
    "ArrowFunction",
    "ElementAccess",
    "CallExpression",
    "CallSignature",
    "ClassDeclaration",
    "Declaration",
    "ExportAssignment",
    "ExportedSymbol",
    "Expression",
    "ExpressionWithTypeArguments",
    "FunctionDeclaration",
    "FunctionExpression",
    "HeritageClause",
    "HeritageToken",
    "Identifier",
    "ImportCall",
    "ImportDeclaration",
    "ImportSpecifier",
    "JSX_ELEMENT",
    "Module",
    "NamedImports",
    "NamespaceImport",
    "Node",
    "ObjectLiteral",
    "OtherDeclaration",
    "OtherExpression",
    "Parameter",
    "ParenthesizedExpression",
    "PropertyAccess",
    "PropertyAssignment",
    "RawStatement",
    "Statement",
    "StringLiteral",
    "SymbolOraclePort",
    "TypeHandle",
    "TypeSymbol",
    "VariableDeclaration",
    "VariableKind",
    "VariableStatement",
]
