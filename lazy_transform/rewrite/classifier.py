"""
Component Classifier

Decides whether an exported binding structurally qualifies as a UI component.

Two independent rules, either of which qualifies:
- Class rule: class whose immediate `extends` clause is `<Root>.<BaseComponent>`
  (e.g. `React.Component`). Deeper inheritance chains are not walked.
- Function rule: callable value with one or two parameters (props, context)
  whose first call signature returns `JSX.Element`, compared by symbol name
  and enclosing namespace name.

Resolution failures classify as non-component.
"""

from __future__ import annotations

from dataclasses import dataclass

from lazy_transform.config import FrameworkConfig
from lazy_transform.domain.models import (
    ArrowFunction,
    ClassDeclaration,
    Declaration,
    ExportAssignment,
    FunctionDeclaration,
    FunctionExpression,
    HeritageToken,
    Identifier,
    Parameter,
    PropertyAccess,
    VariableDeclaration,
    VariableStatement,
)
from lazy_transform.domain.ports import SymbolOraclePort
from lazy_transform.domain.symbols import ExportedSymbol, TypeSymbol
from lazy_transform.exceptions import SymbolResolutionError
from lazy_transform.observability import get_logger

logger = get_logger(__name__)

# props and context
COMPONENT_PARAMETER_COUNTS = frozenset([1, 2])


@dataclass(frozen=True, slots=True)
class CallableShape:
    """A declaration reduced to a function value."""

    parameters: tuple[Parameter, ...]
    node: Declaration | ArrowFunction | FunctionExpression


def get_callable(declaration: Declaration) -> CallableShape | None:
    """
    Normalize a declaration to the function value it denotes.

    Accepts function declarations, `export default <function or arrow>`,
    and variable statements/declarators initialized with a function or arrow
    expression (first declarator only).

    Returns:
        CallableShape, or None if the declaration is not a function value
    """
    if isinstance(declaration, FunctionDeclaration):
        return CallableShape(declaration.parameters, declaration)

    if isinstance(declaration, ExportAssignment):
        expression = declaration.expression
        if isinstance(expression, (ArrowFunction, FunctionExpression)):
            return CallableShape(expression.parameters, expression)
        return None

    if isinstance(declaration, VariableStatement):
        if not declaration.declarations:
            return None
        declaration = declaration.declarations[0]

    if isinstance(declaration, VariableDeclaration):
        initializer = declaration.initializer
        if isinstance(initializer, (ArrowFunction, FunctionExpression)):
            return CallableShape(initializer.parameters, initializer)

    return None


class ComponentClassifier:
    """
    Classifies exported names through a symbol oracle.

    Thread-Safety: Safe (no state besides the read-only oracle)
    """

    def __init__(self, oracle: SymbolOraclePort, framework: FrameworkConfig | None = None):
        self.oracle = oracle
        self.framework = framework or FrameworkConfig()

    def is_component(self, module_specifier: str, exported_name: str, importing_file: str) -> bool:
        """
        Check whether an exported binding is a UI component.

        Args:
            module_specifier: Specifier as written in the importing module
            exported_name: Exported name ("default" for the default export)
            importing_file: Module the import statement lives in

        Returns:
            True only if a rule positively matches
        """
        symbol = self._resolve_export(module_specifier, exported_name, importing_file)
        if symbol is None:
            return False

        declaration = symbol.value_declaration
        if declaration is None:
            logger.debug(
                "symbol_ambiguous",
                specifier=module_specifier,
                name=exported_name,
                declarations=len(symbol.declarations),
            )
            return False

        if isinstance(declaration, ClassDeclaration):
            return self._extends_base_component(declaration)

        callable_shape = get_callable(declaration)
        if callable_shape is None:
            return False
        return self._is_function_component(symbol, callable_shape)

    def _resolve_export(self, module_specifier: str, exported_name: str, importing_file: str) -> ExportedSymbol | None:
        try:
            exports = self.oracle.get_exports_of_module(module_specifier, importing_file)
        except SymbolResolutionError as e:
            logger.debug("symbol_unresolved", specifier=module_specifier, name=exported_name, error=str(e))
            return None

        if exports is None:
            logger.debug("module_unresolved", specifier=module_specifier, file=importing_file)
            return None

        return next((e for e in exports if e.name == exported_name), None)

    def _extends_base_component(self, declaration: ClassDeclaration) -> bool:
        extends_clause = next(
            (h for h in declaration.heritage_clauses if h.token == HeritageToken.EXTENDS),
            None,
        )
        if extends_clause is None:
            return False

        for base in extends_clause.types:
            expression = base.expression
            if (
                isinstance(expression, PropertyAccess)
                and isinstance(expression.expression, Identifier)
                and expression.expression.text == self.framework.root_identifier
                and expression.name == self.framework.base_component_name
            ):
                return True
        return False

    def _is_function_component(self, symbol: ExportedSymbol, callable_shape: CallableShape) -> bool:
        if len(callable_shape.parameters) not in COMPONENT_PARAMETER_COUNTS:
            return False

        try:
            declared_type = self.oracle.get_type_of_symbol(symbol)
        except SymbolResolutionError as e:
            logger.debug("type_unresolved", name=symbol.name, error=str(e))
            return False

        if declared_type is None or not declared_type.call_signatures:
            return False

        # Overloads: only the first signature counts
        return self._is_element_type(declared_type.call_signatures[0].return_type)

    def _is_element_type(self, return_type: TypeSymbol | None) -> bool:
        return (
            return_type is not None
            and return_type.name == self.framework.element_type_name
            and return_type.parent is not None
            and return_type.parent.name == self.framework.element_namespace
        )
