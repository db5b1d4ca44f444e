"""
Oracle-facing symbol and type models.

Values returned by a SymbolOraclePort. The rewrite engine only reads them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import Declaration


@dataclass(frozen=True, slots=True)
class ExportedSymbol:
    """
    Symbol exported from a target module.

    Attributes:
        name: Exported name ("default" for the default export)
        declarations: Value declarations merged into this symbol
        origin: Oracle-private handle, opaque to the engine
    """

    name: str
    declarations: tuple[Declaration, ...] = ()
    origin: Any = field(default=None, compare=False, repr=False)

    @property
    def value_declaration(self) -> Declaration | None:
        """The declaration, when the symbol resolves to exactly one."""
        if len(self.declarations) == 1:
            return self.declarations[0]
        return None


@dataclass(frozen=True, slots=True)
class TypeSymbol:
    """Named type symbol with its enclosing namespace (e.g. Element in JSX)."""

    name: str
    parent: TypeSymbol | None = None


@dataclass(frozen=True, slots=True)
class CallSignature:
    parameter_count: int
    return_type: TypeSymbol | None = None


@dataclass(frozen=True, slots=True)
class TypeHandle:
    """Declared type of a binding."""

    text: str
    call_signatures: tuple[CallSignature, ...] = ()


JSX_ELEMENT = TypeSymbol("Element", parent=TypeSymbol("JSX"))
