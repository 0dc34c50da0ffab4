from silk_transform.css.properties import PROPERTY_MAP, camel_to_kebab, resolve_property
from silk_transform.css.rules import assemble_stylesheet, emit_rule
from silk_transform.css.values import format_number, normalize_value, parse_number

__all__ = [
    "PROPERTY_MAP",
    "assemble_stylesheet",
    "camel_to_kebab",
    "emit_rule",
    "format_number",
    "normalize_value",
    "parse_number",
    "resolve_property",
]
