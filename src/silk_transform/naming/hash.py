"""MurmurHash2-style string hash and base-36 encoding for class names.

The exact arithmetic here is shared with other toolchains that transform
files of the same project, so any change alters every generated class name.
Each step XORs the character code into the state and multiplies in the same
step, then folds the high bits down:

    h = ((h ^ c) * 0x5bd1e995) mod 2**32
    h ^= h >> 13
"""

from __future__ import annotations

__all__ = ["BASE36_DIGITS", "base36_encode", "hash_property_value", "murmur_hash2"]

_MULTIPLIER = 0x5BD1E995
_MASK32 = 0xFFFFFFFF

BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def murmur_hash2(text: str) -> int:
    """Hash *text* over its code points to an unsigned 32-bit integer."""
    h = 0
    for ch in text:
        h = ((h ^ ord(ch)) * _MULTIPLIER) & _MASK32
        h ^= h >> 13
    return h


def base36_encode(number: int) -> str:
    """Encode a non-negative integer in base 36, most significant digit first."""
    if number == 0:
        return "0"
    digits: list[str] = []
    while number > 0:
        number, rem = divmod(number, 36)
        digits.append(BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def hash_property_value(name: str, value: str, variant: str = "") -> str:
    """Return the base-36 hash of a style pair.

    The hashed content is ``name:"value":variant``; the trailing colon is
    present even when *variant* is empty.
    """
    return base36_encode(murmur_hash2(f'{name}:"{value}":{variant}'))
