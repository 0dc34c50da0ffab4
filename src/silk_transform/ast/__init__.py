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
    Span,
    SpreadElement,
    StringLiteral,
    Token,
)
from silk_transform.ast.visitor import children, transform, walk

__all__ = [
    "CallExpression",
    "Fragment",
    "Group",
    "Identifier",
    "MemberExpression",
    "Node",
    "NumericLiteral",
    "ObjectExpression",
    "Program",
    "Property",
    "Span",
    "SpreadElement",
    "StringLiteral",
    "Token",
    "children",
    "transform",
    "walk",
]
