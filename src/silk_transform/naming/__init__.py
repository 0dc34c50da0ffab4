from silk_transform.naming.class_name import generate_class_name, safe_value
from silk_transform.naming.hash import base36_encode, hash_property_value, murmur_hash2

__all__ = [
    "base36_encode",
    "generate_class_name",
    "hash_property_value",
    "murmur_hash2",
    "safe_value",
]
