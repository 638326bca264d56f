"""
HTML primitives for dashcards

Package Structure:
    - tags.py: Immutable element nodes and node factories
    - css.py: CSS length validation and class string composition
    - icons.py: Font Awesome icon nodes
    - dependencies.py: Deduplicated head-style registry
"""

from .css import card_class, class_names, column_class, elevation_class, height_style, validate_css_unit
from .dependencies import StyleRegistry, get_style_registry, register_style
from .icons import icon
from .tags import Tag, tag

__all__ = [
    "Tag",
    "tag",
    "icon",
    "validate_css_unit",
    "class_names",
    "column_class",
    "elevation_class",
    "height_style",
    "card_class",
    "StyleRegistry",
    "get_style_registry",
    "register_style",
]
