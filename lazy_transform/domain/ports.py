"""
Domain Ports

Capabilities the rewrite engine consumes but does not implement.
"""

from typing import Protocol

from .symbols import ExportedSymbol, TypeHandle


class SymbolOraclePort(Protocol):
    """Whole-program symbol/type resolution (read-only during a pass)."""

    def get_exports_of_module(self, module_specifier: str, importing_file: str) -> list[ExportedSymbol] | None:
        """
        List the exports of the module a specifier resolves to.

        Args:
            module_specifier: Specifier as written in the importing module
            importing_file: File the specifier is resolved from

        Returns:
            Exported symbols in declaration order, None if the specifier
            does not resolve

        Raises:
            SymbolResolutionError: If resolution fails part-way
        """
        ...

    def get_type_of_symbol(self, symbol: ExportedSymbol) -> TypeHandle | None:
        """Declared type of an exported symbol, None if unknown."""
        ...
