"""Compile-time atomic CSS: rewrite ``css({...})`` calls into class names."""

from silk_transform.config import ConfigResult, ConfigStatus, Configuration, load_config
from silk_transform.css import assemble_stylesheet, emit_rule, normalize_value, resolve_property
from silk_transform.naming import generate_class_name, hash_property_value
from silk_transform.source import TransformResult, transform_source
from silk_transform.transforms import CssCallTransform, StylePair, extract_styles

__version__ = "0.1.0"

__all__ = [
    "ConfigResult",
    "ConfigStatus",
    "Configuration",
    "CssCallTransform",
    "StylePair",
    "TransformResult",
    "__version__",
    "assemble_stylesheet",
    "emit_rule",
    "extract_styles",
    "generate_class_name",
    "hash_property_value",
    "load_config",
    "normalize_value",
    "resolve_property",
    "transform_source",
]
