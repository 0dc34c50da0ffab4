"""Static extraction of style pairs from an object literal."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from silk_transform.ast.nodes import (
    Identifier,
    Node,
    NumericLiteral,
    ObjectExpression,
    Property,
    StringLiteral,
)
from silk_transform.css.values import format_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StylePair:
    """One style entry exactly as written: the key and the literal value text."""

    name: str
    value: str


def _key_name(key: Node) -> str | None:
    if isinstance(key, Identifier):
        return key.name
    if isinstance(key, StringLiteral):
        return key.value
    return None


def _literal_text(value: Node) -> str | None:
    if isinstance(value, StringLiteral):
        return value.value
    if isinstance(value, NumericLiteral):
        return format_number(value.value)
    return None


def extract_styles(obj: ObjectExpression) -> list[StylePair]:
    """Return the static key/value pairs of *obj* in source order.

    Spreads, computed keys, shorthand entries, methods and non-literal
    values are skipped. Duplicate keys are all kept.
    """
    pairs: list[StylePair] = []
    for entry in obj.properties:
        if not isinstance(entry, Property) or entry.computed or entry.shorthand or entry.method:
            logger.debug("Skipping non key/value entry %s", type(entry).__name__)
            continue
        name = _key_name(entry.key)
        if name is None:
            logger.debug("Skipping entry with unsupported key %s", type(entry.key).__name__)
            continue
        text = _literal_text(entry.value)
        if text is None:
            logger.debug("Skipping %r: value is not a static literal", name)
            continue
        pairs.append(StylePair(name=name, value=text))
    return pairs
