"""
Theme Constants

Keyword sets understood by the AdminLTE 3 / Bootstrap 4 stylesheet.
Values outside these sets still render; they are only reported (see
dashcards.domain.validation.check_keyword).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeKeywords:
    """
    Recognised theme keywords.

    Attributes:
        STATUSES: Colour names accepted for status / label / tab colouring
        GRADIENTS: Colour names that have a bg-<colour>-gradient variant
        ELEVATIONS: Drop-shadow levels (elevation-N)
        WIDTHS: Bootstrap grid column widths
        USER_CARD_TYPES: Layout variants of the user widget (widget-user-N)
        SIDES: Tab strip placement in a tabbed card

    Example:
        >>> "primary" in theme_keywords.STATUSES
        True
    """

    STATUSES: frozenset[str] = frozenset(
        {"primary", "secondary", "info", "success", "warning", "danger", "white", "light", "dark", "transparent"}
    )
    GRADIENTS: frozenset[str] = frozenset({"primary", "secondary", "info", "success", "warning", "danger", "light", "dark"})
    ELEVATIONS: frozenset[int] = frozenset(range(0, 6))
    WIDTHS: frozenset[int] = frozenset(range(1, 13))
    USER_CARD_TYPES: frozenset[int] = frozenset({2})
    SIDES: tuple[str, ...] = ("left", "right")


@dataclass(frozen=True)
class LayoutDefaults:
    """
    Fixed layout values shared by the builders.

    Attributes:
        PLACEHOLDER_TITLE: Zero-width non-joiner used when a header must render without text
        CARD_OVERFLOW_STYLE: Scroll directive for card body/footer with overflow enabled
        BOX_BODY_STYLE: Scroll directive for the simple box body
        TAB_BODY_STYLE: Scroll directive for the tabbed card body
        COMMENTS_STYLE: Scroll directive for the social card comments block
        USER_CARD_FOOTER_STYLE: Scroll directive for the user card footer
        DEFAULT_DROPDOWN_ICON: Icon of the card tool dropdown toggle
    """

    PLACEHOLDER_TITLE: str = "\u200c"
    CARD_OVERFLOW_STYLE: str = "overflow-y: auto; max-height: 500px;"
    BOX_BODY_STYLE: str = "overflow-y: auto; max-height: 800px;"
    TAB_BODY_STYLE: str = "overflow-y: auto;"
    COMMENTS_STYLE: str = "overflow-y: auto; max-height: 150px; display: block;"
    USER_CARD_FOOTER_STYLE: str = "overflow-y: auto; max-height: 500px;"
    DEFAULT_DROPDOWN_ICON: str = "wrench"


theme_keywords = ThemeKeywords()
layout_defaults = LayoutDefaults()
