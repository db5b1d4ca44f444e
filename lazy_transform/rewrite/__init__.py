"""
Rewrite engine: selector, classifier, synthesizer, walker.
"""

from .classifier import CallableShape, ComponentClassifier, get_callable
from .selector import is_candidate_import, select_candidate_imports, should_process_module
from .synthesizer import RewritePlan, RewriteSynthesizer
from .transformer import LazyComponentTransformer, create_transformer
from .walker import visit_each_child, walk_module

__all__ = [
    "CallableShape",
    "ComponentClassifier",
    "LazyComponentTransformer",
    "RewritePlan",
    "RewriteSynthesizer",
    "create_transformer",
    "get_callable",
    "is_candidate_import",
    "select_candidate_imports",
    "should_process_module",
    "visit_each_child",
    "walk_module",
]
