from silk_transform.transforms.base import Transform
from silk_transform.transforms.css_call import CssCallTransform, is_css_call
from silk_transform.transforms.extract import StylePair, extract_styles

__all__ = ["CssCallTransform", "StylePair", "Transform", "extract_styles", "is_css_call"]
