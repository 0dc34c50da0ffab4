"""Expression tree model: the node kinds the style transform reads and rewrites.

Only the shapes the transform needs are modelled precisely (calls, member
access, object literals, string and numeric literals). Everything else is
carried as opaque ``Token``s, bracketed ``Group``s, or multi-token
``Fragment``s so that nested calls inside them are still reachable.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# (start, end) character offsets into the source text, end exclusive.
Span = tuple[int, int]


@dataclass(frozen=True)
class Node:
    """Base class for all tree nodes."""

    span: Span | None = field(default=None, compare=False, kw_only=True)


@dataclass(frozen=True)
class Program(Node):
    """The root of one compilation unit."""

    body: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Token(Node):
    """An opaque token: operator, keyword, template literal, and the like."""

    kind: str
    text: str


@dataclass(frozen=True)
class Group(Node):
    """A bracketed region whose contents are not interpreted.

    ``open`` is one of ``(``, ``[`` or ``{``.
    """

    open: str
    items: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Fragment(Node):
    """An expression made of several tokens that is not otherwise modelled."""

    items: tuple[Node, ...] = ()


@dataclass(frozen=True)
class Identifier(Node):
    name: str


@dataclass(frozen=True)
class StringLiteral(Node):
    """A string literal; ``raw`` is the source text including quotes, if any."""

    value: str
    raw: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class NumericLiteral(Node):
    value: float
    raw: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class MemberExpression(Node):
    """``object.property`` or ``object?.property``."""

    object: Node
    property: Node
    optional: bool = False


@dataclass(frozen=True)
class CallExpression(Node):
    """``callee(arguments)``.

    ``optional`` marks a call that is part of an optional chain, such as
    ``a?.b(...)`` or ``f?.(...)``.
    """

    callee: Node
    arguments: tuple[Node, ...] = ()
    optional: bool = False


@dataclass(frozen=True)
class Property(Node):
    """One entry of an object literal.

    ``computed`` marks ``[key]: value``; ``shorthand`` marks ``{ key }``;
    ``method`` marks ``key() { ... }``.
    """

    key: Node
    value: Node
    computed: bool = False
    shorthand: bool = False
    method: bool = False


@dataclass(frozen=True)
class SpreadElement(Node):
    argument: Node


@dataclass(frozen=True)
class ObjectExpression(Node):
    properties: tuple[Node, ...] = ()
