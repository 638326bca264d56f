"""
Domain constants and input validation for dashcards components.
"""

from .constants import LayoutDefaults, ThemeKeywords, layout_defaults, theme_keywords
from .validation import ValidationError, check_choice, check_keyword

__all__ = [
    "ThemeKeywords",
    "LayoutDefaults",
    "theme_keywords",
    "layout_defaults",
    "ValidationError",
    "check_keyword",
    "check_choice",
]
