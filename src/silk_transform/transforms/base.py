"""Base protocol for tree transforms."""

from __future__ import annotations

from typing import Protocol

from silk_transform.ast.nodes import Node


class Transform(Protocol):
    """A tree-to-tree rewriting pass over one compilation unit."""

    css_rules: list[str]

    def apply(self, program: Node) -> Node: ...
