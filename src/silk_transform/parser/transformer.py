"""Lark Transformer that converts a JavaScript token tree into expression nodes."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token as LarkToken, Transformer
from lark.exceptions import UnexpectedCharacters, UnexpectedInput, UnexpectedToken

from silk_transform.ast.nodes import (
    CallExpression,
    Fragment,
    Group,
    Identifier,
    MemberExpression,
    Node,
    NumericLiteral,
    ObjectExpression,
    Program,
    Property,
    SpreadElement,
    StringLiteral,
    Token,
)
from silk_transform.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_ESCAPE_RE = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[0-7]{1,3}|.)",
    re.DOTALL,
)

_SIMPLE_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v"}

_LINE_CONTINUATIONS = {"\n", "\r", "\r\n", "\u2028", "\u2029"}

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def _unescape(match: re.Match[str]) -> str:
    esc = match.group(1)
    if esc.startswith("u{"):
        return chr(int(esc[2:-1], 16))
    if len(esc) == 5 and esc[0] == "u":
        return chr(int(esc[1:], 16))
    if len(esc) == 3 and esc[0] == "x":
        return chr(int(esc[1:], 16))
    if esc in _LINE_CONTINUATIONS:
        return ""
    if esc[0] in "01234567":
        return chr(int(esc, 8))
    return _SIMPLE_ESCAPES.get(esc, esc)


def decode_string(raw: str) -> str:
    """Return the value of a quoted string literal."""
    value = _ESCAPE_RE.sub(_unescape, raw[1:-1])
    if _SURROGATE_RE.search(value):
        # Join \uD83D\uDE00-style pairs into one code point.
        value = value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return value


def decode_number(raw: str) -> float:
    """Return the value of a numeric literal (without BigInt suffix)."""
    text = raw.replace("_", "")
    prefix = text[:2].lower()
    if prefix == "0x":
        return float(int(text[2:], 16))
    if prefix == "0o":
        return float(int(text[2:], 8))
    if prefix == "0b":
        return float(int(text[2:], 2))
    return float(text)


class _Bracket:
    """A balanced bracket pair and the raw items between them."""

    def __init__(self, open_tok: LarkToken, items: list[object], close_tok: LarkToken):
        self.open = str(open_tok)
        self.items = items
        self.span = (open_tok.start_pos, close_tok.end_pos)


class TokenTreeTransformer(Transformer):  # type: ignore[type-arg]
    """Collapse the Lark parse tree into nested ``_Bracket`` runs."""

    def _bracket(self, items: list[object]) -> _Bracket:
        return _Bracket(items[0], items[1:-1], items[-1])  # type: ignore[arg-type]

    paren = _bracket
    bracket = _bracket
    brace = _bracket

    def start(self, items: list[object]) -> list[object]:
        return items


# ---------------------------------------------------------------------------
# Assembly: token runs -> expression nodes
# ---------------------------------------------------------------------------


def _is_tok(item: object, *types: str) -> bool:
    return isinstance(item, LarkToken) and item.type in types


def _is_bracket(item: object, open_char: str) -> bool:
    return isinstance(item, _Bracket) and item.open == open_char


def _span_of(item: object) -> tuple[int, int]:
    if isinstance(item, _Bracket):
        return item.span
    tok: LarkToken = item  # type: ignore[assignment]
    return (tok.start_pos, tok.end_pos)  # type: ignore[return-value]


def _join(left: Node, right: tuple[int, int]) -> tuple[int, int] | None:
    if left.span is None:
        return None
    return (left.span[0], right[1])


def _split(items: list[object], separator: str) -> list[list[object]]:
    """Split a run at top-level tokens of type *separator*."""
    segments: list[list[object]] = [[]]
    for item in items:
        if _is_tok(item, separator):
            segments.append([])
        else:
            segments[-1].append(item)
    return segments


def _token_node(tok: LarkToken) -> Node:
    span = (tok.start_pos, tok.end_pos)
    text = str(tok)
    if tok.type == "STRING":
        return StringLiteral(value=decode_string(text), raw=text, span=span)  # type: ignore[arg-type]
    if tok.type == "NUMBER":
        if text.endswith("n"):
            return Token(kind="bigint", text=text, span=span)  # type: ignore[arg-type]
        return NumericLiteral(value=decode_number(text), raw=text, span=span)  # type: ignore[arg-type]
    if tok.type == "IDENT":
        return Identifier(name=text, span=span)  # type: ignore[arg-type]
    return Token(kind=tok.type.lower(), text=text, span=span)  # type: ignore[arg-type]


def _is_op(item: object, text: str) -> bool:
    return _is_tok(item, "OP") and str(item) == text


# Keywords after which an identifier names a function or accessor being declared.
_DECLARATION_KEYWORDS = frozenset({"function", "get", "set", "async"})

_TYPE_ARGUMENT_TOKENS = ("IDENT", "DOT", "COMMA")


def _declares_name(items: list[object], i: int) -> bool:
    prev = items[i - 1] if i > 0 else None
    if _is_op(prev, "*"):
        # function* name
        prev = items[i - 2] if i > 1 else None
    return _is_tok(prev, "IDENT") and str(prev) in _DECLARATION_KEYWORDS


def _type_arguments_end(items: list[object], i: int) -> int | None:
    """Return the index of the ``>`` closing the ``<`` at *i*, or None.

    Only identifiers, dots, commas, bracket groups and nested angle
    brackets may appear in between.
    """
    depth = 0
    for j in range(i, len(items)):
        item = items[j]
        if _is_op(item, "<"):
            depth += 1
        elif _is_op(item, ">"):
            depth -= 1
            if depth == 0:
                return j
        elif not (isinstance(item, _Bracket) or _is_tok(item, *_TYPE_ARGUMENT_TOKENS)):
            return None
    return None


def _call_arguments_at(items: list[object], i: int) -> int | None:
    """Return the index of the argument list of a call suffix starting at *i*.

    Handles ``(...)``, ``?.(...)`` and ``<T>(...)``. A parenthesized list
    followed by a ``{...}`` body is a parameter list, not a call.
    """
    if _is_tok(items[i], "OPTIONAL_DOT"):
        i += 1
    elif _is_op(items[i], "<"):
        end = _type_arguments_end(items, i)
        if end is None:
            return None
        i = end + 1
    if i >= len(items) or not _is_bracket(items[i], "("):
        return None
    if i + 1 < len(items) and _is_bracket(items[i + 1], "{"):
        return None
    return i


def _build_chain(items: list[object], i: int) -> tuple[Node, int]:
    """Build an identifier followed by ``.name``, ``?.name`` and call suffixes.

    Once a ``?.`` appears, every call built after it is marked optional.
    """
    node: Node = _token_node(items[i])  # type: ignore[arg-type]
    in_optional_chain = False
    i += 1
    while i < len(items):
        item = items[i]
        nxt = items[i + 1] if i + 1 < len(items) else None
        if _is_tok(item, "DOT", "OPTIONAL_DOT") and _is_tok(nxt, "IDENT"):
            optional = item.type == "OPTIONAL_DOT"  # type: ignore[union-attr]
            in_optional_chain = in_optional_chain or optional
            node = MemberExpression(
                object=node,
                property=_token_node(nxt),  # type: ignore[arg-type]
                optional=optional,
                span=_join(node, _span_of(nxt)),
            )
            i += 2
            continue

        paren_at = _call_arguments_at(items, i)
        if paren_at is None:
            break
        in_optional_chain = in_optional_chain or _is_tok(item, "OPTIONAL_DOT")
        paren = items[paren_at]
        node = CallExpression(
            callee=node,
            arguments=_build_arguments(paren),  # type: ignore[arg-type]
            optional=in_optional_chain,
            span=_join(node, _span_of(paren)),
        )
        i = paren_at + 1
    return node, i


def _build_items(items: list[object]) -> tuple[Node, ...]:
    """Convert a flat run of tokens and brackets into nodes."""
    nodes: list[Node] = []
    i = 0
    while i < len(items):
        item = items[i]
        if _is_tok(item, "IDENT") and _declares_name(items, i):
            nodes.append(_token_node(item))  # type: ignore[arg-type]
            i += 1
            continue
        if _is_tok(item, "IDENT"):
            node, i = _build_chain(items, i)
            nodes.append(node)
            continue
        if isinstance(item, _Bracket):
            nodes.append(Group(open=item.open, items=_build_items(item.items), span=item.span))
        else:
            nodes.append(_token_node(item))  # type: ignore[arg-type]
        i += 1
    return tuple(nodes)


def _build_expression(items: list[object]) -> Node:
    """Build one comma-free expression; a lone ``{...}`` is an object literal."""
    if len(items) == 1 and _is_bracket(items[0], "{"):
        return _build_object(items[0])  # type: ignore[arg-type]
    if _is_tok(items[0], "ELLIPSIS"):
        rest = items[1:]
        argument = _build_expression(rest) if rest else Fragment(span=_span_of(items[0]))
        return SpreadElement(argument=argument, span=(_span_of(items[0])[0], _span_of(items[-1])[1]))
    nodes = _build_items(items)
    if len(nodes) == 1:
        return nodes[0]
    return Fragment(items=nodes, span=(_span_of(items[0])[0], _span_of(items[-1])[1]))


def _build_arguments(paren: _Bracket) -> tuple[Node, ...]:
    return tuple(_build_expression(seg) for seg in _split(paren.items, "COMMA") if seg)


def _build_key(item: object) -> tuple[Node, bool]:
    """Return the key node and whether it is computed."""
    if _is_bracket(item, "["):
        return _build_expression(item.items) if item.items else Fragment(), True  # type: ignore[union-attr]
    if isinstance(item, LarkToken):
        return _token_node(item), False
    return Fragment(), False


def _build_property(segment: list[object]) -> Node:
    start, end = _span_of(segment[0])[0], _span_of(segment[-1])[1]
    if _is_tok(segment[0], "ELLIPSIS"):
        return _build_expression(segment)

    if len(segment) >= 2 and _is_tok(segment[1], "COLON"):
        key, computed = _build_key(segment[0])
        value_items = segment[2:]
        value = _build_expression(value_items) if value_items else Fragment()
        return Property(key=key, value=value, computed=computed, span=(start, end))

    if len(segment) == 1 and _is_tok(segment[0], "IDENT"):
        ident = _token_node(segment[0])  # type: ignore[arg-type]
        return Property(key=ident, value=ident, shorthand=True, span=(start, end))

    # Methods, getters/setters and anything else we do not model.
    body = _build_items(segment)
    return Property(
        key=body[0],
        value=Fragment(items=body, span=(start, end)),
        method=True,
        span=(start, end),
    )


def _build_object(brace: _Bracket) -> ObjectExpression:
    properties = tuple(_build_property(seg) for seg in _split(brace.items, "COMMA") if seg)
    return ObjectExpression(properties=properties, span=brace.span)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def _position(value: object) -> int | None:
    # Lark reports -1 (or "?") when the error is at end of input.
    if isinstance(value, int) and value > 0:
        return value
    return None


def _describe(error: UnexpectedInput) -> str:
    if isinstance(error, UnexpectedCharacters):
        return f"unexpected character {error.char!r}"
    if isinstance(error, UnexpectedToken):
        if error.token.type == "$END":
            return "unexpected end of input (unclosed bracket?)"
        return f"unexpected {str(error.token)!r}"
    return "unexpected end of input (unclosed bracket?)"


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        start="start",
    )


def parse_source(source: str) -> Program:
    """Parse JavaScript or TypeScript source into a Program of expression nodes."""
    try:
        tree = _parser().parse(source)
    except UnexpectedInput as e:
        line = _position(e.line)
        column = _position(e.column)
        raise ParseError(_describe(e), line=line, column=column) from e
    items = TokenTreeTransformer().transform(tree)
    return Program(body=_build_items(items), span=(0, len(source)))
