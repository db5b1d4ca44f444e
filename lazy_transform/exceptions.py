"""
Exceptions for lazy_transform.

Hierarchy:
- LazyTransformError (base)
  - InvalidConfigurationError (caller-contract violations, raised at setup)
  - SymbolResolutionError (oracle lookups; never escapes the classifier)
  - ParsingError (test-harness host parsing failures)
  - EmitError (printer met a node it cannot print)
"""

from __future__ import annotations


class LazyTransformError(Exception):
    """Base exception for all lazy_transform errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{super().__str__()} [{ctx_str}]"
        return super().__str__()


class InvalidConfigurationError(LazyTransformError):
    """Transformer was set up without a required collaborator or option."""

    pass


class SymbolResolutionError(LazyTransformError):
    """Oracle could not resolve a module specifier or exported name."""

    def __init__(
        self,
        message: str,
        module_specifier: str | None = None,
        exported_name: str | None = None,
    ):
        context = {}
        if module_specifier:
            context["specifier"] = module_specifier
        if exported_name:
            context["name"] = exported_name
        super().__init__(message, context)
        self.module_specifier = module_specifier
        self.exported_name = exported_name


class ParsingError(LazyTransformError):
    """Source text could not be parsed."""

    def __init__(self, message: str, file_path: str | None = None):
        super().__init__(message, {"file": file_path} if file_path else None)
        self.file_path = file_path


class EmitError(LazyTransformError):
    """Printer received a node kind it does not know how to print."""

    def __init__(self, message: str, node_kind: str | None = None):
        super().__init__(message, {"node": node_kind} if node_kind else None)
        self.node_kind = node_kind
