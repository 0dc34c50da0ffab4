"""Unit normalization for static style values."""

from __future__ import annotations

import math
import re
from decimal import Decimal

__all__ = ["format_number", "normalize_value", "parse_number"]

# One spacing unit is a quarter rem.
SPACING_SCALE = 0.25

UNITLESS_PROPERTIES = frozenset({"opacity", "zIndex", "fontWeight", "lineHeight", "flex"})

# Plain ASCII decimal floats only: no whitespace, underscores or hex.
_NUMBER_RE = re.compile(
    r"""
    [+-]?
    (?:
        (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
      | inf(?:inity)?
      | nan
    )
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


def parse_number(text: str) -> float | None:
    """Parse *text* as a float, or return None if it is not a number."""
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def format_number(value: float) -> str:
    """Render *value* as shortest round-trip digits without an exponent.

    Integral values carry no fractional part: ``4.0`` renders as ``"4"``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    return format(Decimal(repr(value)).normalize(), "f")


def _is_spacing(name: str) -> bool:
    return name.startswith("p") or name.startswith("m") or name == "gap"


def normalize_value(name: str, raw: str) -> str:
    """Return the CSS value text for a raw style value.

    *name* is the style key as written (before shorthand resolution).
    Non-numeric values pass through unchanged.
    """
    number = parse_number(raw)
    if number is None:
        return raw
    if _is_spacing(name):
        return f"{format_number(number * SPACING_SCALE)}rem"
    if name in UNITLESS_PROPERTIES:
        return raw
    return f"{raw}px"
