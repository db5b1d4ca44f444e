"""
Tree Walker

Depth-first visit-and-splice over the syntax tree. A visitor returns a node,
or a list of nodes to splice in place of a node that sits in a sequence.
Unchanged subtrees are returned as the same objects.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import fields, replace

from lazy_transform.domain.models import ImportDeclaration, Module, Node

VisitResult = Node | list[Node] | tuple[Node, ...]
Visitor = Callable[[Node], VisitResult]


def visit_each_child(node: Node, visitor: Visitor) -> Node:
    """
    Apply a visitor to every direct child of a node.

    Children held in tuples are flattened, so a visitor may replace one
    statement with zero or more statements. A single-node field must get
    exactly one node back.

    Returns:
        The same node if no child changed, otherwise an updated copy
    """
    changes = {}
    for f in fields(node):
        value = getattr(node, f.name)

        if isinstance(value, Node):
            result = visitor(value)
            if isinstance(result, (list, tuple)):
                if len(result) != 1:
                    raise ValueError(f"Cannot splice {len(result)} nodes into {node.kind}.{f.name}")
                result = result[0]
            if result is not value:
                changes[f.name] = result

        elif isinstance(value, tuple) and any(isinstance(item, Node) for item in value):
            updated = []
            changed = False
            for item in value:
                result = visitor(item)
                if isinstance(result, (list, tuple)):
                    updated.extend(result)
                    changed = changed or len(result) != 1 or result[0] is not item
                else:
                    updated.append(result)
                    changed = changed or result is not item
            if changed:
                changes[f.name] = tuple(updated)

    if not changes:
        return node
    return replace(node, **changes)


def walk_module(
    module: Module,
    candidates: list[ImportDeclaration],
    rewrite: Callable[[ImportDeclaration], list[Node]],
) -> Module:
    """
    Replace candidate import statements throughout a module.

    Args:
        module: Module to walk
        candidates: Import statements selected for rewriting (matched by identity)
        rewrite: Produces the replacement statements for a candidate

    Returns:
        Module with candidates replaced; the same object if nothing changed
    """
    candidate_ids = {id(c) for c in candidates}

    def visit(node: Node) -> VisitResult:
        if isinstance(node, ImportDeclaration) and id(node) in candidate_ids:
            return rewrite(node)
        return visit_each_child(node, visit)

    return visit_each_child(module, visit)
