"""CSS rule text for atomic classes, and stylesheet assembly."""

from __future__ import annotations

from collections.abc import Iterable

from silk_transform.css.properties import resolve_property
from silk_transform.css.values import normalize_value

__all__ = ["assemble_stylesheet", "emit_rule"]


def emit_rule(class_name: str, name: str, raw: str) -> str:
    """Return ``.class { property: value; }`` for one style pair.

    No escaping is applied; *name* and *raw* must already be safe CSS tokens.
    """
    return f".{class_name} {{ {resolve_property(name)}: {normalize_value(name, raw)}; }}"


def assemble_stylesheet(rules: Iterable[str]) -> str:
    """Join rule strings into a stylesheet, dropping exact duplicates.

    The first occurrence of each rule keeps its position.
    """
    seen: dict[str, None] = {}
    for rule in rules:
        seen.setdefault(rule, None)
    if not seen:
        return ""
    return "\n".join(seen) + "\n"
