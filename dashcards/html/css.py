"""
Style and Class Composition Helpers

Small pure helpers shared by the component builders: CSS length
validation and order-stable class strings built from theme keywords.
"""

import re

from dashcards.domain.constants import theme_keywords
from dashcards.domain.validation import ValidationError, check_keyword

_CSS_UNIT_PATTERN = re.compile(
    r"^(auto|inherit|fit-content|calc\(.*\)|((\.\d+)|(\d+(\.\d+)?))(%|in|cm|mm|ch|em|ex|rem|pt|pc|px|vh|vw|vmin|vmax))$"
)
_NUMBER_PATTERN = re.compile(r"^((\.\d+)|(\d+(\.\d+)?))$")


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def validate_css_unit(value: int | float | str | None) -> str | None:
    """
    Turn a sizing value into a CSS length.

    Numbers (and numeric strings) are taken as pixels; strings with a CSS
    unit, auto, inherit, fit-content and calc(...) pass through.

    Args:
        value: Sizing value, or None

    Returns:
        CSS length string, or None when value is None

    Raises:
        ValidationError: If value is not a valid CSS length

    Example:
        >>> validate_css_unit(300)
        '300px'
        >>> validate_css_unit("50%")
        '50%'
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{value!r} is not a valid CSS unit")
    if isinstance(value, (int, float)):
        return f"{_format_number(value)}px"

    text = str(value).strip()
    if _NUMBER_PATTERN.match(text):
        return f"{text}px"
    if _CSS_UNIT_PATTERN.match(text):
        return text
    raise ValidationError(f'"{value}" is not a valid CSS unit (e.g., "100%", "400px", "auto")')


def class_names(*tokens: str | None) -> str:
    """
    Join the non-empty tokens with single spaces, keeping their order.

    Example:
        >>> class_names("card", None, "collapsed-card", "")
        'card collapsed-card'
    """
    return " ".join(token for token in tokens if token)


def column_class(width: int | None) -> str | None:
    """col-sm-<width> grid class, or None for column-based layouts."""
    if width is None:
        return None
    check_keyword(width, theme_keywords.WIDTHS, "width")
    return f"col-sm-{width}"


def elevation_class(elevation: int | None) -> str | None:
    """elevation-<n> drop-shadow class, or None."""
    if elevation is None:
        return None
    check_keyword(elevation, theme_keywords.ELEVATIONS, "elevation")
    return f"elevation-{elevation}"


def background_class(status: str | None = None, gradient_color: str | None = None) -> str | None:
    """
    Background class of a box: the gradient variant wins over a flat status.
    """
    if gradient_color is not None:
        check_keyword(gradient_color, theme_keywords.GRADIENTS, "gradient_color")
        return f"bg-{gradient_color}-gradient"
    if status is not None:
        check_keyword(status, theme_keywords.STATUSES, "status")
        return f"bg-{status}"
    return None


def height_style(height: int | float | str | None, terminator: str = "") -> str | None:
    """height: <css-length> style directive, or None when no height is given."""
    length = validate_css_unit(height)
    if length is None:
        return None
    return f"height: {length}{terminator}"


def card_class(
    status: str | None = None,
    gradient_color: str | None = None,
    solid_header: bool = False,
    collapsible: bool = False,
    collapsed: bool = False,
    elevation: int | None = None,
) -> str:
    """
    Class string of a card container.

    Example:
        >>> card_class(status="primary", solid_header=True, elevation=2)
        'card card-outline card-primary elevation-2'
    """
    if gradient_color is not None:
        base = background_class(gradient_color=gradient_color)
        tokens = ["card", base]
    elif status is None:
        tokens = ["card", "card-default"]
    else:
        check_keyword(status, theme_keywords.STATUSES, "status")
        tokens = ["card", "card-outline" if solid_header else None, f"card-{status}"]

    if collapsible and collapsed:
        tokens.append("collapsed-card")
    tokens.append(elevation_class(elevation))
    return class_names(*tokens)
