"""Rewrite ``css({...})`` calls into class-name string literals."""

from __future__ import annotations

import logging

from silk_transform.ast.nodes import (
    CallExpression,
    Identifier,
    MemberExpression,
    Node,
    ObjectExpression,
    StringLiteral,
)
from silk_transform.ast.visitor import transform
from silk_transform.config import Configuration
from silk_transform.css.rules import emit_rule
from silk_transform.naming.class_name import generate_class_name
from silk_transform.transforms.extract import extract_styles

logger = logging.getLogger(__name__)

CSS_FUNCTION_NAME = "css"


def is_css_call(call: CallExpression) -> bool:
    """Return True for ``css(...)`` and ``<anything>.css(...)``.

    Calls inside an optional chain (``x?.css(...)``, ``css?.(...)``) never
    match.
    """
    if call.optional:
        return False
    callee = call.callee
    if isinstance(callee, Identifier):
        return callee.name == CSS_FUNCTION_NAME
    if isinstance(callee, MemberExpression):
        prop = callee.property
        return isinstance(prop, Identifier) and prop.name == CSS_FUNCTION_NAME
    return False


class CssCallTransform:
    """Replace each style call with the space-joined class names it declares.

    The generated CSS rules are collected on ``css_rules`` in the order the
    calls are rewritten (children before parents, then source order within
    each call). Use one instance per compilation unit.
    """

    def __init__(self, config: Configuration | None = None) -> None:
        self.config = config or Configuration()
        self.css_rules: list[str] = []

    def apply(self, program: Node) -> Node:
        return transform(program, self._rewrite)

    def _rewrite(self, node: Node) -> Node | None:
        if not isinstance(node, CallExpression) or not is_css_call(node):
            return None
        if not node.arguments or not isinstance(node.arguments[0], ObjectExpression):
            logger.debug("Leaving css() call untouched: first argument is not an object literal")
            return None

        class_names: list[str] = []
        for pair in extract_styles(node.arguments[0]):
            class_name = generate_class_name(pair.name, pair.value, self.config)
            self.css_rules.append(emit_rule(class_name, pair.name, pair.value))
            class_names.append(class_name)

        return StringLiteral(value=" ".join(class_names), span=node.span)
