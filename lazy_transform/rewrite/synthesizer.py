"""
Rewrite Synthesizer

Turns one import statement into its replacement statements:

    import MyComp1, { MyComp2, MyConst } from "./component1";

becomes

    const MyComp1 = React.lazy(() => import("./component1"));
    const MyComp2 = React.lazy(() => import("./component1").then(m => ({ default: m.MyComp2 })));
    import { MyConst } from "./component1";

Plans are built completely in memory; the walker splices them in one step.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from lazy_transform.config import TransformOptions
from lazy_transform.domain import factory
from lazy_transform.domain.models import (
    Expression,
    ImportDeclaration,
    NamedImports,
    NamespaceImport,
    Statement,
    VariableStatement,
)
from lazy_transform.observability import get_logger
from lazy_transform.rewrite.classifier import ComponentClassifier

logger = get_logger(__name__)

DEFAULT_EXPORT_NAME = "default"
MODULE_PARAMETER = "m"


@dataclass(frozen=True, slots=True)
class RewritePlan:
    """
    Replacement for one import statement.

    Attributes:
        statements: Statements to splice in place of the original
        rewritten: False when `statements` is just the original statement
        component_names: Local names turned into lazy bindings
        residual: Import kept for the non-component bindings, if any
    """

    statements: tuple[Statement, ...]
    rewritten: bool = False
    component_names: tuple[str, ...] = ()
    residual: ImportDeclaration | None = None

    @classmethod
    def unchanged(cls, declaration: ImportDeclaration) -> RewritePlan:
        return cls(statements=(declaration,))


class RewriteSynthesizer:
    """Classifies the bindings of an import statement and builds its RewritePlan."""

    def __init__(self, classifier: ComponentClassifier, options: TransformOptions):
        self.classifier = classifier
        self.options = options

    def synthesize(self, declaration: ImportDeclaration, importing_file: str) -> RewritePlan:
        """
        Build the plan for one import statement.

        Args:
            declaration: Candidate import statement
            importing_file: Module the statement lives in

        Returns:
            RewritePlan (unchanged when opted out, nothing classifies, or a
            partial rewrite is not allowed)
        """
        if not declaration.has_import_clause:
            return RewritePlan.unchanged(declaration)

        specifier = declaration.module_specifier.text
        if not self.options.should_rewrite(specifier, importing_file):
            logger.debug("import_opted_out", specifier=specifier, file=importing_file)
            return RewritePlan.unchanged(declaration)

        component_names = self.classify(declaration, importing_file)
        if not component_names:
            return RewritePlan.unchanged(declaration)

        return self.build_plan(declaration, component_names, importing_file)

    def classify(self, declaration: ImportDeclaration, importing_file: str) -> list[str]:
        """Local names of the statement's bindings that are components (default first)."""
        specifier = declaration.module_specifier.text
        component_names = []

        if declaration.default_name is not None:
            if self.classifier.is_component(specifier, DEFAULT_EXPORT_NAME, importing_file):
                component_names.append(declaration.default_name.text)

        if not self.options.only_default_exports:
            for spec in declaration.specifiers:
                if spec.is_type_only:
                    continue
                if self.classifier.is_component(specifier, spec.exported_name, importing_file):
                    component_names.append(spec.name.text)

        return component_names

    def build_plan(
        self,
        declaration: ImportDeclaration,
        component_names: list[str],
        importing_file: str,
    ) -> RewritePlan:
        """
        Build the replacement statements for already-classified names.

        Args:
            declaration: Original import statement
            component_names: Local names classified as components
            importing_file: Module the statement lives in

        Returns:
            RewritePlan
        """
        classified = set(component_names)
        lazy_statements = [self._lazy_binding(declaration, name) for name in component_names]

        residual_default = declaration.default_name
        if residual_default is not None and residual_default.text in classified:
            residual_default = None

        residual_bindings: NamedImports | NamespaceImport | None = None
        residual_count = 1 if residual_default is not None else 0
        if isinstance(declaration.named_bindings, NamespaceImport):
            residual_bindings = declaration.named_bindings
            residual_count += 1
        elif isinstance(declaration.named_bindings, NamedImports):
            kept = tuple(spec for spec in declaration.specifiers if spec.name.text not in classified)
            if kept:
                residual_bindings = NamedImports(kept)
            residual_count += len(kept)

        residual = None
        if residual_count:
            if self.options.only_rewrite_if_fully_removable:
                logger.debug(
                    "import_bail_out",
                    specifier=declaration.module_specifier.text,
                    file=importing_file,
                    residual=residual_count,
                )
                return RewritePlan.unchanged(declaration)

            residual = ImportDeclaration(
                module_specifier=declaration.module_specifier,
                default_name=residual_default,
                named_bindings=residual_bindings,
            )

        statements: list[Statement] = []
        injected = self.options.create_import_declaration(importing_file)
        if injected is not None:
            statements.append(injected)
        statements.extend(lazy_statements)
        if residual is not None:
            statements.append(residual)

        statements[0] = replace(statements[0], leading_trivia=declaration.leading_trivia)

        logger.debug(
            "import_rewritten",
            specifier=declaration.module_specifier.text,
            file=importing_file,
            components=component_names,
            residual=residual_count,
        )
        return RewritePlan(
            statements=tuple(statements),
            rewritten=True,
            component_names=tuple(component_names),
            residual=residual,
        )

    def _lazy_binding(self, declaration: ImportDeclaration, local_name: str) -> VariableStatement:
        loader_body: Expression = factory.create_import_call(declaration.module_specifier)

        is_default = declaration.default_name is not None and declaration.default_name.text == local_name
        if not is_default:
            spec = next(s for s in declaration.specifiers if s.name.text == local_name)
            loader_body = factory.create_call(
                factory.create_property_access(loader_body, "then"),
                [
                    factory.create_arrow_function(
                        [MODULE_PARAMETER],
                        factory.create_paren(
                            factory.create_object_literal(
                                {
                                    DEFAULT_EXPORT_NAME: factory.create_member_access(
                                        MODULE_PARAMETER, spec.exported_name
                                    )
                                }
                            )
                        ),
                    )
                ],
            )

        wrapper_call = factory.create_call(
            self.options.wrapper_expression(),
            [factory.create_arrow_function([], loader_body)],
        )
        return factory.create_const_statement(local_name, wrapper_call)
