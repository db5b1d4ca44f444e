"""
Transformer factory

    transform = create_transformer(program, TransformOptions())
    new_module = transform(module)

One pass per module: gate, select candidates, classify through the oracle,
synthesize plans, splice. Each call gets a fresh traversal context.
"""

from __future__ import annotations

from collections.abc import Callable

from lazy_transform.config import TransformOptions
from lazy_transform.domain.models import ImportDeclaration, Module, Node
from lazy_transform.domain.ports import SymbolOraclePort
from lazy_transform.exceptions import InvalidConfigurationError
from lazy_transform.observability import get_logger
from lazy_transform.rewrite.classifier import ComponentClassifier
from lazy_transform.rewrite.selector import select_candidate_imports, should_process_module
from lazy_transform.rewrite.synthesizer import RewriteSynthesizer
from lazy_transform.rewrite.walker import walk_module

logger = get_logger(__name__)

ModuleTransformer = Callable[[Module], Module]


class LazyComponentTransformer:
    """Rewrites component imports of one module at a time into lazy bindings."""

    def __init__(self, program: SymbolOraclePort, options: TransformOptions | None = None):
        if program is None:
            raise InvalidConfigurationError("No program (symbol oracle) was passed to the transformer factory")
        if options is not None and not isinstance(options, TransformOptions):
            raise InvalidConfigurationError(
                "Transformer options must be TransformOptions",
                {"got": type(options).__name__},
            )

        self.program = program
        self.options = options or TransformOptions()
        self.classifier = ComponentClassifier(program, self.options.framework)
        self.synthesizer = RewriteSynthesizer(self.classifier, self.options)

    def __call__(self, module: Module) -> Module:
        return self.transform(module)

    def transform(self, module: Module) -> Module:
        """
        Transform one module.

        Args:
            module: Module syntax tree

        Returns:
            Rewritten module, or the input object itself when nothing applies
        """
        if not should_process_module(module, self.options.framework):
            logger.debug("module_skipped", file=module.file_name)
            return module

        candidates = select_candidate_imports(module)
        if not candidates:
            return module

        def rewrite(declaration: ImportDeclaration) -> list[Node]:
            return list(self.synthesizer.synthesize(declaration, module.file_name).statements)

        return walk_module(module, candidates, rewrite)


def create_transformer(program: SymbolOraclePort, options: TransformOptions | None = None) -> ModuleTransformer:
    """
    Create a module transformer.

    Args:
        program: Whole-program symbol oracle
        options: Transform options (defaults when None)

    Returns:
        Callable mapping a Module to its rewritten Module

    Raises:
        InvalidConfigurationError: If no program is supplied
    """
    return LazyComponentTransformer(program, options)
