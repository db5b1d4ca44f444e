"""
Compile harness

Runs the transformer over a set of in-memory files, playing the host compiler:

    outputs = compile_modules({"a.tsx": "...", "b.tsx": "..."})
    outputs["b.tsx"]  # rewritten source text
"""

from __future__ import annotations

from lazy_transform.config import TransformOptions
from lazy_transform.infrastructure.printer import Printer
from lazy_transform.infrastructure.program import TreeSitterProgram
from lazy_transform.observability import get_logger
from lazy_transform.rewrite.transformer import create_transformer

logger = get_logger(__name__)


def compile_modules(files: dict[str, str], options: TransformOptions | None = None) -> dict[str, str]:
    """
    Transform every non-declaration file of an in-memory program.

    Args:
        files: File name to source text
        options: Transform options (defaults when None)

    Returns:
        File name to emitted source text (declaration files and files in
        other languages, such as stylesheets or images, are not emitted)
    """
    program = TreeSitterProgram(files)
    transform = create_transformer(program, options)
    printer = Printer()

    outputs = {}
    for file_name in program.file_names:
        if not program.is_source_file(file_name):
            continue
        module = program.get_module(file_name)
        if module.is_declaration_file:
            continue
        transformed = transform(module)
        outputs[file_name] = printer.print_module(transformed)

    logger.debug("compile_complete", files=len(files), emitted=len(outputs))
    return outputs
