"""
Tree-sitter Program

In-memory whole-program symbol oracle for the test-harness host. Holds a set
of TypeScript/TSX files, resolves module specifiers between them and lists
exports with their declarations:

- `export function/class/const/namespace ...`
- `export default <declaration | expression | local name>`
- `export { A, B as C }` (local names and imported bindings)
- `export { A } from "./x"`, `export * from "./x"`, `export * as ns from "./x"`
- overload signatures grouped into one function declaration

Implements SymbolOraclePort.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from lazy_transform.domain.models import Declaration, Module, OtherDeclaration
from lazy_transform.domain.symbols import ExportedSymbol, TypeHandle
from lazy_transform.exceptions import SymbolResolutionError
from lazy_transform.infrastructure.declarations import (
    CLASS_TYPES,
    FUNCTION_DECLARATION_TYPES,
    NAMESPACE_TYPES,
    VARIABLE_STATEMENT_TYPES,
    DeclarationReader,
)
from lazy_transform.infrastructure.module_reader import is_type_only, read_module, read_module_export_name
from lazy_transform.infrastructure.type_inference import TypeInference
from lazy_transform.observability import get_logger
from lazy_transform.parsing import AstTree, SourceFile, get_registry

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode

logger = get_logger(__name__)

RESOLUTION_EXTENSIONS = (".tsx", ".ts", ".d.ts", ".jsx", ".js")
DEFAULT_EXPORT = "default"


@dataclass
class DeclarationOrigin:
    """Oracle-private link from a domain declaration back to its syntax node."""

    file_name: str
    node: TSNode
    signatures: list[TSNode] = field(default_factory=list)


@dataclass
class _Entry:
    declaration: Declaration
    origin: DeclarationOrigin


class TreeSitterProgram:
    """
    Whole-program oracle over in-memory files.

    Example:
        program = TreeSitterProgram({"a.tsx": "...", "b.tsx": "..."})
        exports = program.get_exports_of_module("./a", "b.tsx")
    """

    def __init__(self, files: dict[str, str]):
        self._sources = {posixpath.normpath(name): content for name, content in files.items()}
        self._trees: dict[str, AstTree] = {}
        self._exports_cache: dict[str, dict[str, list[_Entry]]] = {}

    @property
    def file_names(self) -> list[str]:
        return list(self._sources)

    # ============================================================
    # Files
    # ============================================================

    def is_source_file(self, file_name: str) -> bool:
        """Whether the file is in a language the program can parse (not `.svg`, `.css`)."""
        return get_registry().detect_language(file_name) is not None

    def get_tree(self, file_name: str) -> AstTree:
        file_name = posixpath.normpath(file_name)
        if file_name not in self._trees:
            source = SourceFile.from_content(file_name, self._sources[file_name])
            tree = AstTree.parse(source)
            if tree.has_error():
                logger.warning(
                    "parse_errors_found",
                    file=file_name,
                    errors=len(tree.get_errors()),
                )
            self._trees[file_name] = tree
        return self._trees[file_name]

    def get_module(self, file_name: str) -> Module:
        """Domain module of a file, freshly read on every call."""
        return read_module(self.get_tree(file_name))

    def resolve_module(self, module_specifier: str, importing_file: str) -> str | None:
        """
        Resolve a specifier to a file of this program.

        Relative specifiers resolve against the importing file's directory,
        trying the specifier as-is, with each known extension, and as a
        directory index. Bare specifiers are looked up under node_modules.
        Files the program cannot parse never resolve.
        """
        if module_specifier.startswith("."):
            base = posixpath.normpath(posixpath.join(posixpath.dirname(importing_file), module_specifier))
            bases = [base]
        else:
            bases = [
                module_specifier,
                f"node_modules/{module_specifier}/index",
                f"node_modules/@types/{module_specifier}/index",
            ]

        for candidate_base in bases:
            candidates = [candidate_base]
            candidates.extend(candidate_base + ext for ext in RESOLUTION_EXTENSIONS)
            candidates.extend(f"{candidate_base}/index{ext}" for ext in RESOLUTION_EXTENSIONS)
            for candidate in candidates:
                if candidate in self._sources and self.is_source_file(candidate):
                    return candidate
        return None

    # ============================================================
    # SymbolOraclePort
    # ============================================================

    def get_exports_of_module(self, module_specifier: str, importing_file: str) -> list[ExportedSymbol] | None:
        target = self.resolve_module(module_specifier, importing_file)
        if target is None:
            return None

        exports = self._module_exports(target)
        return [
            ExportedSymbol(
                name=name,
                declarations=tuple(entry.declaration for entry in entries),
                origin=tuple(entry.origin for entry in entries),
            )
            for name, entries in exports.items()
        ]

    def get_type_of_symbol(self, symbol: ExportedSymbol) -> TypeHandle | None:
        origins = symbol.origin or ()
        if len(origins) != 1:
            return None

        origin = origins[0]
        inference = TypeInference(self.get_tree(origin.file_name))
        return inference.type_of(origin.node, signatures=origin.signatures or None)

    # ============================================================
    # Export collection
    # ============================================================

    def _module_exports(self, file_name: str, visiting: frozenset[str] = frozenset()) -> dict[str, list[_Entry]]:
        if file_name in self._exports_cache:
            return self._exports_cache[file_name]
        if file_name in visiting:
            raise SymbolResolutionError("Circular re-export", module_specifier=file_name)

        exports = self._collect_exports(file_name, visiting | {file_name})
        if not visiting:
            self._exports_cache[file_name] = exports
        return exports

    def _collect_exports(self, file_name: str, visiting: frozenset[str]) -> dict[str, list[_Entry]]:
        tree = self.get_tree(file_name)
        reader = DeclarationReader(tree)
        local = self._local_declarations(file_name, tree, reader)
        exports: dict[str, list[_Entry]] = {}

        for statement in tree.root.named_children:
            if statement.type != "export_statement" or is_type_only(statement):
                continue

            source = statement.child_by_field_name("source")
            is_default = any(not c.is_named and c.type == "default" for c in statement.children)
            declaration = statement.child_by_field_name("declaration")
            value = statement.child_by_field_name("value")
            clause = next((c for c in statement.named_children if c.type == "export_clause"), None)

            if declaration is not None:
                if is_default:
                    exports[DEFAULT_EXPORT] = [self._entry(file_name, reader, declaration)]
                else:
                    # Interfaces and type aliases have no value declaration
                    for name in self._declared_names(declaration, reader):
                        if name in local:
                            exports[name] = local[name]

            elif value is not None and is_default:
                if value.type == "identifier":
                    exports[DEFAULT_EXPORT] = self._lookup_binding(file_name, tree, local, reader.text(value), visiting)
                else:
                    exports[DEFAULT_EXPORT] = [
                        _Entry(reader.read_export_value(value), DeclarationOrigin(file_name, value))
                    ]

            elif clause is not None:
                for spec in (c for c in clause.named_children if c.type == "export_specifier"):
                    if is_type_only(spec):
                        continue
                    name = read_module_export_name(tree, spec.child_by_field_name("name"))
                    alias = spec.child_by_field_name("alias")
                    exported = read_module_export_name(tree, alias) if alias is not None else name
                    if source is not None:
                        exports[exported] = self._reexport(file_name, tree, source, name, visiting)
                    else:
                        exports[exported] = self._lookup_binding(file_name, tree, local, name, visiting)

            elif source is not None:
                namespace = next((c for c in statement.named_children if c.type == "namespace_export"), None)
                if namespace is not None:
                    ns_name = reader.text(next(c for c in namespace.named_children if c.type != "comment"))
                    exports[ns_name] = [
                        _Entry(OtherDeclaration("namespace_export", ns_name), DeclarationOrigin(file_name, namespace))
                    ]
                else:
                    self._merge_star_export(file_name, tree, source, exports, visiting)

        return exports

    def _local_declarations(self, file_name: str, tree: AstTree, reader: DeclarationReader) -> dict[str, list[_Entry]]:
        """Top-level value declarations by name (exported or not)."""
        local: dict[str, list[_Entry]] = {}
        functions: dict[str, _Entry] = {}

        for node in self._top_level_declarations(tree.root):
            if node.type in FUNCTION_DECLARATION_TYPES:
                name = reader.text(node.child_by_field_name("name"))
                existing = functions.get(name)
                if existing is None:
                    entry = self._entry(file_name, reader, node)
                    functions[name] = entry
                    local.setdefault(name, []).append(entry)
                else:
                    existing.origin.signatures.append(node)
                continue

            for name in self._declared_names(node, reader):
                if node.type in VARIABLE_STATEMENT_TYPES:
                    declarator = next(
                        d
                        for d in node.named_children
                        if d.type == "variable_declarator" and reader.text(d.child_by_field_name("name")) == name
                    )
                    entry = self._entry(file_name, reader, declarator)
                else:
                    entry = self._entry(file_name, reader, node)
                local.setdefault(name, []).append(entry)

        for entry in functions.values():
            # Overloads: the first signature is the value declaration and the
            # implementation signature is not callable from outside
            signatures = entry.origin.signatures
            overloads = [s for s in signatures if s.type == "function_signature"]
            if overloads and len(overloads) < len(signatures):
                entry.origin.signatures = overloads

        return local

    def _top_level_declarations(self, root: TSNode):
        for statement in root.named_children:
            node = statement
            if node.type == "export_statement":
                node = node.child_by_field_name("declaration")
                if node is None:
                    continue
            if node.type == "ambient_declaration":
                node = next((c for c in node.named_children if c.type != "comment"), None)
                if node is None:
                    continue
            if node.type == "expression_statement":
                inner = next((c for c in node.named_children if c.type in NAMESPACE_TYPES), None)
                if inner is None:
                    continue
                node = inner
            if (
                node.type in FUNCTION_DECLARATION_TYPES
                or node.type in CLASS_TYPES
                or node.type in VARIABLE_STATEMENT_TYPES
                or node.type in NAMESPACE_TYPES
                or node.type == "enum_declaration"
            ):
                yield node

    def _declared_names(self, node: TSNode, reader: DeclarationReader) -> list[str]:
        if node.type == "ambient_declaration":
            inner = next((c for c in node.named_children if c.type != "comment"), None)
            return self._declared_names(inner, reader) if inner is not None else []
        if node.type in VARIABLE_STATEMENT_TYPES:
            return [
                reader.text(d.child_by_field_name("name"))
                for d in node.named_children
                if d.type == "variable_declarator"
            ]
        name = node.child_by_field_name("name")
        return [reader.text(name)] if name is not None else []

    def _entry(self, file_name: str, reader: DeclarationReader, node: TSNode) -> _Entry:
        if node.type == "ambient_declaration":
            node = next(c for c in node.named_children if c.type != "comment")
        origin = DeclarationOrigin(file_name, node)
        if node.type in FUNCTION_DECLARATION_TYPES:
            origin.signatures.append(node)
        return _Entry(reader.read_declaration(node), origin)

    # ============================================================
    # Bindings and re-exports
    # ============================================================

    def _lookup_binding(
        self,
        file_name: str,
        tree: AstTree,
        local: dict[str, list[_Entry]],
        name: str,
        visiting: frozenset[str],
    ) -> list[_Entry]:
        """Entries for a local name: a declaration, or an imported binding followed to its module."""
        if name in local:
            return local[name]

        for statement in tree.root.named_children:
            if statement.type != "import_statement":
                continue
            source = statement.child_by_field_name("source")
            clause = next((c for c in statement.named_children if c.type == "import_clause"), None)
            if source is None or clause is None:
                continue
            for part in clause.named_children:
                if part.type == "identifier" and tree.get_text(part) == name:
                    return self._reexport(file_name, tree, source, DEFAULT_EXPORT, visiting)
                if part.type == "named_imports":
                    for spec in (s for s in part.named_children if s.type == "import_specifier"):
                        imported = read_module_export_name(tree, spec.child_by_field_name("name"))
                        alias = spec.child_by_field_name("alias")
                        local_name = tree.get_text(alias) if alias is not None else imported
                        if local_name == name:
                            return self._reexport(file_name, tree, source, imported, visiting)
        return []

    def _reexport(
        self,
        file_name: str,
        tree: AstTree,
        source: TSNode,
        name: str,
        visiting: frozenset[str],
    ) -> list[_Entry]:
        specifier = read_module_export_name(tree, source)
        target = self.resolve_module(specifier, file_name)
        if target is None:
            return []
        return self._module_exports(target, visiting).get(name, [])

    def _merge_star_export(
        self,
        file_name: str,
        tree: AstTree,
        source: TSNode,
        exports: dict[str, list[_Entry]],
        visiting: frozenset[str],
    ) -> None:
        specifier = read_module_export_name(tree, source)
        target = self.resolve_module(specifier, file_name)
        if target is None or target in visiting:
            return
        for name, entries in self._module_exports(target, visiting).items():
            if name != DEFAULT_EXPORT and name not in exports:
                exports[name] = entries
