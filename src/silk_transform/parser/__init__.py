from silk_transform.parser.errors import ParseError
from silk_transform.parser.transformer import parse_source

__all__ = ["ParseError", "parse_source"]
