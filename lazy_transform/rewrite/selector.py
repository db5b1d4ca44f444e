"""
Import Candidate Selector

Cheap syntactic pre-filter run before any oracle query.
"""

from __future__ import annotations

from lazy_transform.config import FrameworkConfig
from lazy_transform.domain.models import ImportDeclaration, Module


def starts_uppercase(name: str) -> bool:
    return name[:1].isupper()


def imports_framework(module: Module, framework: FrameworkConfig) -> bool:
    """Whether the module imports the framework entry module (exact specifier match)."""
    return any(
        imp.module_specifier.text == framework.module_specifier for imp in module.import_declarations
    )


def should_process_module(module: Module, framework: FrameworkConfig) -> bool:
    """
    Module gate.

    Only modules with runtime code that import the framework can need a rewrite.
    """
    if module.is_declaration_file:
        return False
    return imports_framework(module, framework)


def is_candidate_import(declaration: ImportDeclaration) -> bool:
    """
    Whether an import statement may bind a component.

    True when the default name or any named-binding local name starts with an
    uppercase character. Type-only statements and type-only specifiers are
    erased at runtime and never qualify.
    """
    if declaration.is_type_only or not declaration.has_import_clause:
        return False

    if declaration.default_name is not None and starts_uppercase(declaration.default_name.text):
        return True

    return any(
        starts_uppercase(spec.name.text) for spec in declaration.specifiers if not spec.is_type_only
    )


def select_candidate_imports(module: Module) -> list[ImportDeclaration]:
    """Top-level import statements worth classifying, in source order."""
    return [imp for imp in module.import_declarations if is_candidate_import(imp)]
