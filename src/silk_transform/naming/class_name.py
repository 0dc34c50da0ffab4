"""Class name generation for atomic style pairs.

Development mode: ``silk_bg_red_oqma`` (prefix, key, value, short hash)
Production mode: ``oqmaqr`` (hash only, never starting with a digit)
"""

from __future__ import annotations

from silk_transform.config import DEFAULT_CLASS_PREFIX, Configuration
from silk_transform.naming.hash import hash_property_value

__all__ = ["generate_class_name", "safe_value"]

PRODUCTION_HASH_LENGTH = 8
DEVELOPMENT_HASH_LENGTH = 4
SAFE_VALUE_LENGTH = 10

# A prefix of "s" is never applied in production mode.
_RESERVED_PREFIX = "s"

_SAFE_VALUE_TABLE = str.maketrans({" ": "_", ".": "_", "(": None, ")": None, "#": None})


def safe_value(value: str) -> str:
    """Make *value* usable inside a development class name."""
    return value.translate(_SAFE_VALUE_TABLE)[:SAFE_VALUE_LENGTH]


def _leading_letter(short_hash: str) -> str:
    # Map a leading digit 0-9 to g-p.
    first = short_hash[:1]
    if first.isdigit():
        return chr(ord("g") + int(first)) + short_hash[1:]
    return short_hash


def generate_class_name(name: str, value: str, config: Configuration) -> str:
    """Return the class name for one style pair.

    *name* and *value* are hashed exactly as written in source, before any
    shorthand resolution or unit normalization.
    """
    digest = hash_property_value(name, value)

    if config.production:
        short_hash = _leading_letter(digest[:PRODUCTION_HASH_LENGTH])
        prefix = config.class_prefix
        if prefix and prefix != _RESERVED_PREFIX:
            return f"{prefix}{short_hash}"
        return short_hash

    prefix = config.class_prefix or DEFAULT_CLASS_PREFIX
    return f"{prefix}_{name}_{safe_value(value)}_{digest[:DEVELOPMENT_HASH_LENGTH]}"
