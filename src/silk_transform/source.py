"""Source-to-source driver: parse, rewrite style calls, splice the results back."""

from __future__ import annotations

import json
from dataclasses import dataclass, field

from silk_transform.ast.nodes import Node, StringLiteral
from silk_transform.ast.visitor import walk
from silk_transform.config import Configuration
from silk_transform.parser import parse_source
from silk_transform.transforms.base import Transform
from silk_transform.transforms.css_call import CssCallTransform


@dataclass(frozen=True)
class TransformResult:
    """Rewritten source text and the CSS rules it produced, in order."""

    code: str
    css_rules: list[str] = field(default_factory=list)


def _replacements(tree: Node) -> list[StringLiteral]:
    # Literals synthesized by the rewriter carry the replaced call's span but
    # no raw source text. Rewritten calls nested in other rewritten calls are
    # gone from the tree, so every span found here is outermost.
    return [
        node
        for node in walk(tree)
        if isinstance(node, StringLiteral) and node.raw is None and node.span is not None
    ]


def transform_source(source: str, config: Configuration | None = None) -> TransformResult:
    """Rewrite every ``css({...})`` call in *source*.

    Text outside rewritten calls is preserved exactly. Raises ParseError if
    the source cannot be tokenized.
    """
    rewriter: Transform = CssCallTransform(config)
    tree = rewriter.apply(parse_source(source))

    pieces: list[str] = []
    cursor = 0
    for literal in sorted(_replacements(tree), key=lambda n: n.span[0]):  # type: ignore[index]
        start, end = literal.span  # type: ignore[misc]
        pieces.append(source[cursor:start])
        pieces.append(json.dumps(literal.value))
        cursor = end
    pieces.append(source[cursor:])

    return TransformResult(code="".join(pieces), css_rules=list(rewriter.css_rules))
