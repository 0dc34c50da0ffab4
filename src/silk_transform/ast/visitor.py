"""Post-order traversal and node replacement over the expression tree."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import fields, replace

from silk_transform.ast.nodes import Node

__all__ = ["Rewrite", "children", "transform", "walk"]

# Called on each node after its children; returns a replacement or None.
Rewrite = Callable[[Node], "Node | None"]


def children(node: Node) -> Iterator[Node]:
    """Yield the direct child nodes of *node* in field order."""
    for f in fields(node):
        if f.name == "span":
            continue
        value = getattr(node, f.name)
        if isinstance(value, Node):
            yield value
        elif isinstance(value, tuple):
            for item in value:
                if isinstance(item, Node):
                    yield item


def walk(node: Node) -> Iterator[Node]:
    """Yield *node* and all of its descendants, parents before children."""
    yield node
    for child in children(node):
        yield from walk(child)


def transform(node: Node, rewrite: Rewrite) -> Node:
    """Rebuild *node* bottom-up, letting *rewrite* replace any node.

    Children are transformed before their parent, so *rewrite* always sees
    a parent whose children are already rewritten. Subtrees with no
    replacements are returned as the same objects.
    """
    changes: dict[str, object] = {}
    for f in fields(node):
        if f.name == "span":
            continue
        value = getattr(node, f.name)
        if isinstance(value, Node):
            new_value = transform(value, rewrite)
            if new_value is not value:
                changes[f.name] = new_value
        elif isinstance(value, tuple) and any(isinstance(item, Node) for item in value):
            new_items = tuple(
                transform(item, rewrite) if isinstance(item, Node) else item for item in value
            )
            if any(new is not old for new, old in zip(new_items, value)):
                changes[f.name] = new_items

    if changes:
        node = replace(node, **changes)  # type: ignore[arg-type]

    replacement = rewrite(node)
    return node if replacement is None else replacement
