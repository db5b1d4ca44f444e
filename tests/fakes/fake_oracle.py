"""
Fake Symbol Oracle for Unit Testing

SymbolOraclePort implementation backed by dictionaries. Exports are keyed by
module specifier only; the importing file is recorded but not used.
"""

from lazy_transform.domain.models import (
    ArrowFunction,
    ClassDeclaration,
    Declaration,
    ExportAssignment,
    ExpressionWithTypeArguments,
    FunctionDeclaration,
    HeritageClause,
    HeritageToken,
    Identifier,
    OtherExpression,
    Parameter,
    PropertyAccess,
    VariableDeclaration,
)
from lazy_transform.domain.symbols import JSX_ELEMENT, CallSignature, ExportedSymbol, TypeHandle, TypeSymbol
from lazy_transform.exceptions import SymbolResolutionError


def params(count: int) -> tuple[Parameter, ...]:
    names = ["props", "context", "extra", "more"]
    return tuple(Parameter(names[i]) for i in range(count))


class FakeSymbolOracle:
    """SymbolOraclePort fake; the TypeHandle of a symbol travels in its origin."""

    def __init__(self):
        self.modules: dict[str, list[ExportedSymbol]] = {}
        self.failing: set[str] = set()
        self.export_queries: list[tuple[str, str]] = []
        self.type_queries: list[str] = []

    # SymbolOraclePort

    def get_exports_of_module(self, module_specifier: str, importing_file: str):
        self.export_queries.append((module_specifier, importing_file))
        if module_specifier in self.failing:
            raise SymbolResolutionError("lookup failed", module_specifier=module_specifier)
        return self.modules.get(module_specifier)

    def get_type_of_symbol(self, symbol: ExportedSymbol):
        self.type_queries.append(symbol.name)
        return symbol.origin

    # Builders

    def add_symbol(
        self,
        specifier: str,
        name: str,
        *declarations: Declaration,
        type_handle: TypeHandle | None = None,
    ) -> ExportedSymbol:
        symbol = ExportedSymbol(name, tuple(declarations), origin=type_handle)
        self.modules.setdefault(specifier, []).append(symbol)
        return symbol

    def add_function_component(
        self,
        specifier: str,
        name: str,
        parameter_count: int = 1,
        return_type: TypeSymbol | None = JSX_ELEMENT,
    ) -> ExportedSymbol:
        return self.add_symbol(
            specifier,
            name,
            FunctionDeclaration(name=None if name == "default" else name, parameters=params(parameter_count)),
            type_handle=TypeHandle("function", (CallSignature(parameter_count, return_type),)),
        )

    def add_arrow_component(self, specifier: str, name: str, parameter_count: int = 1) -> ExportedSymbol:
        arrow = ArrowFunction(parameters=params(parameter_count))
        declaration = ExportAssignment(arrow) if name == "default" else VariableDeclaration(name, arrow)
        return self.add_symbol(
            specifier,
            name,
            declaration,
            type_handle=TypeHandle("function", (CallSignature(parameter_count, JSX_ELEMENT),)),
        )

    def add_class_component(self, specifier: str, name: str, root: str = "React", base: str = "Component"):
        heritage = HeritageClause(
            HeritageToken.EXTENDS,
            (ExpressionWithTypeArguments(PropertyAccess(Identifier(root), base), ("any",)),),
        )
        return self.add_symbol(
            specifier,
            name,
            ClassDeclaration(name=None if name == "default" else name, heritage_clauses=(heritage,)),
            type_handle=TypeHandle(f"typeof {name}"),
        )

    def add_constant(self, specifier: str, name: str) -> ExportedSymbol:
        return self.add_symbol(
            specifier,
            name,
            VariableDeclaration(name, OtherExpression("string", '"123"')),
            type_handle=TypeHandle("string"),
        )
