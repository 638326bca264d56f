"""
Value and info box components

Compact KPI widgets: the value box (big number, subtitle, background icon,
optional "More info" link) and the info box (icon tile plus title/value).
"""

from typing import Any

from dashcards.html import tags
from dashcards.html.css import background_class, class_names, column_class, elevation_class
from dashcards.html.dependencies import register_style
from dashcards.html.icons import icon as fa_icon
from dashcards.html.tags import Tag


def value_box(
    value: Any,
    subtitle: Any,
    icon: str | None = None,
    elevation: int | None = None,
    status: str | None = None,
    width: int | None = 3,
    href: str | None = None,
) -> Tag:
    """
    Generate an AdminLTE 3 value box.

    Args:
        value: Value to display (usually a number or short text)
        subtitle: Subtitle text
        icon: Font Awesome icon name
        elevation: Drop-shadow level (0-5)
        status: Background colour
        width: Bootstrap grid width, None for column-based layouts
        href: Optional link; adds a "More info" footer

    Returns:
        <div class="col-sm-N"> wrapper around the box

    Example:
        node = value_box(150, "New orders", icon="shopping-cart", status="primary", href="#")
    """
    inner = tags.div(value, tags.p(subtitle), class_="inner")
    icon_tag = tags.div(fa_icon(icon), class_="icon")

    if href is not None:
        footer = tags.a("More info", fa_icon("arrow-circle-right"), href=href, target="_blank", class_="small-box-footer")
    else:
        footer = tags.a(tags.br(), target="_blank", class_="small-box-footer")

    box = tags.div(
        inner,
        icon_tag,
        footer,
        class_=class_names("small-box", background_class(status=status), elevation_class(elevation)),
    )
    return tags.div(box, class_=column_class(width))


def icon_color_style(icon: str, status: str | None = None, gradient_color: str | None = None) -> str:
    """
    Head style giving an info box icon a readable colour.

    Black on white backgrounds (no colour at all, or the white status),
    white on every coloured background.
    """
    dark_background = gradient_color is not None or (status is not None and status != "white")
    color = "#fff" if dark_background else "#000"
    return f".fa-{icon}{{\n  color: {color};\n}}\n"


def info_box(
    *content: Any,
    title: Any,
    value: Any = None,
    icon: str | None = None,
    icon_elevation: int | None = 3,
    status: str | None = None,
    gradient_color: str | None = None,
    width: int | None = 4,
    elevation: int | None = None,
) -> Tag:
    """
    Generate an AdminLTE 3 info box.

    Registers a one-time head style colouring the icon to contrast with the
    box background.

    Args:
        *content: Extra elements placed under the value
        title: Box title
        value: Value to display
        icon: Font Awesome icon name
        icon_elevation: Relief of the icon tile (default: 3)
        status: Background colour
        gradient_color: Gradient background; takes precedence over status
        width: Bootstrap grid width, None for column-based layouts
        elevation: Drop-shadow level of the box

    Returns:
        <div class="col-sm-N"> wrapper around the box
    """
    if icon is not None:
        register_style(icon_color_style(icon, status=status, gradient_color=gradient_color))

    icon_tag = tags.span(fa_icon(icon), class_=class_names("info-box-icon", elevation_class(icon_elevation)))
    content_tag = tags.div(
        tags.span(title, class_="info-box-text"),
        tags.span(value, class_="info-box-number"),
        *content,
        class_="info-box-content",
    )

    box = tags.div(
        icon_tag,
        content_tag,
        class_=class_names(
            "info-box",
            background_class(status=status, gradient_color=gradient_color),
            elevation_class(elevation),
        ),
    )
    return tags.div(box, class_=column_class(width))
