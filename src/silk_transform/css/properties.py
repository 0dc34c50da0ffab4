"""Shorthand style keys and their canonical CSS property names."""

from __future__ import annotations

from types import MappingProxyType

__all__ = ["PROPERTY_MAP", "camel_to_kebab", "resolve_property"]

PROPERTY_MAP: MappingProxyType[str, str] = MappingProxyType(
    {
        # margin
        "m": "margin",
        "mt": "margin-top",
        "mr": "margin-right",
        "mb": "margin-bottom",
        "ml": "margin-left",
        "mx": "margin-inline",
        "my": "margin-block",
        # padding
        "p": "padding",
        "pt": "padding-top",
        "pr": "padding-right",
        "pb": "padding-bottom",
        "pl": "padding-left",
        "px": "padding-inline",
        "py": "padding-block",
        # sizing
        "w": "width",
        "h": "height",
        "minW": "min-width",
        "minH": "min-height",
        "maxW": "max-width",
        "maxH": "max-height",
        # background / border
        "bg": "background-color",
        "bgColor": "background-color",
        "rounded": "border-radius",
    }
)


def camel_to_kebab(name: str) -> str:
    """Replace each uppercase letter with ``-`` and its lowercase form."""
    out: list[str] = []
    for ch in name:
        if ch.isupper():
            out.append("-")
            out.append(ch.lower()[0])
        else:
            out.append(ch)
    return "".join(out)


def resolve_property(name: str) -> str:
    """Return the canonical CSS property for a style key."""
    mapped = PROPERTY_MAP.get(name)
    if mapped is not None:
        return mapped
    return camel_to_kebab(name)
