"""
Card components for dashboards

Provides AdminLTE 3 card builders (the full card with its tool bar, the
simple hover box) and the dropdown helpers used in a card tool bar.
"""

from typing import Any

from dashcards.domain.constants import layout_defaults, theme_keywords
from dashcards.domain.validation import check_keyword
from dashcards.html import tags
from dashcards.html.css import card_class, column_class, height_style
from dashcards.html.dependencies import register_style
from dashcards.html.icons import icon
from dashcards.html.tags import Tag

CARD_BOX_STYLE = """.card-box {
  box-shadow: 0 4px 8px 0 rgba(0,0,0,0.2);
  transition: 0.3s;
  border-radius: 5px;
}

.card-box:hover {
  box-shadow: 0 16px 32px 0 rgba(0,0,0,0.2);
}
"""


def _card_tools(
    label_text: Any = None,
    label_status: str | None = None,
    label_tooltip: str | None = None,
    dropdown_menu: Tag | None = None,
    dropdown_icon: str = layout_defaults.DEFAULT_DROPDOWN_ICON,
    collapsible: bool = True,
    collapsed: bool = False,
    closable: bool = True,
) -> Tag:
    label = None
    if label_text is not None or label_status is not None or label_tooltip is not None:
        check_keyword(label_status, theme_keywords.STATUSES, "label_status")
        label = tags.span(
            label_text,
            class_=f"badge bg-{label_status}" if label_status is not None else "badge",
            title=label_tooltip,
            data_toggle="tooltip",
        )

    dropdown = None
    if dropdown_menu is not None:
        dropdown = tags.div(
            tags.button(
                icon(dropdown_icon),
                type="button",
                class_="btn btn-tool dropdown-toggle",
                data_toggle="dropdown",
            ),
            dropdown_menu,
            class_="btn-group",
        )

    collapse_button = None
    if collapsible:
        collapse_button = tags.button(
            icon("plus" if collapsed else "minus"),
            type="button",
            class_="btn btn-tool",
            data_widget="collapse",
        )

    close_button = None
    if closable:
        close_button = tags.button(
            tags.i(class_="fa fa-times"),
            type="button",
            class_="btn btn-tool",
            data_widget="remove",
        )

    return tags.div(label, dropdown, collapse_button, close_button, class_="card-tools")


def card(
    *content: Any,
    title: Any = None,
    footer: Any = None,
    status: str | None = None,
    elevation: int | None = None,
    solid_header: bool = False,
    header_border: bool = True,
    gradient_color: str | None = None,
    width: int | None = 6,
    height: int | str | None = None,
    collapsible: bool = True,
    collapsed: bool = False,
    closable: bool = True,
    label_status: str | None = None,
    label_text: Any = None,
    label_tooltip: str | None = None,
    dropdown_menu: Tag | None = None,
    dropdown_icon: str = layout_defaults.DEFAULT_DROPDOWN_ICON,
    overflow: bool = False,
) -> Tag:
    """
    Generate an AdminLTE 3 card.

    Args:
        *content: Body content
        title: Optional title; replaced by an invisible placeholder when the
            card is collapsible or closable so the tool bar still renders
        footer: Optional footer content
        status: Header colour (primary, secondary, success, ...)
        elevation: Drop-shadow level (0-5)
        solid_header: Use the outlined header variant for the status colour
        header_border: Draw a border between header and body
        gradient_color: Gradient background; takes precedence over status
        width: Bootstrap grid width (1-12), None for column-based layouts
        height: Card height in pixels or any CSS unit
        collapsible: Show the collapse button
        collapsed: Start collapsed (only with collapsible)
        closable: Show the close button
        label_status: Colour of the header badge
        label_text: Header badge text
        label_tooltip: Header badge tooltip
        dropdown_menu: Tool bar dropdown, see dropdown_item_list()
        dropdown_icon: Icon of the dropdown toggle
        overflow: Let body and footer scroll beyond 500px

    Returns:
        <div class="col-sm-N"> wrapper around the card

    Example:
        node = card(
            "Box content",
            title="Closable card with dropdown",
            status="warning",
            label_text=1,
            label_status="danger",
            dropdown_menu=dropdown_item_list(dropdown_item(url="#", name="Item 1")),
        )
    """
    if title is None and (collapsible or closable):
        title = layout_defaults.PLACEHOLDER_TITLE

    header = None
    if title is not None:
        header = tags.div(
            tags.h3(title, class_="card-title"),
            _card_tools(
                label_text=label_text,
                label_status=label_status,
                label_tooltip=label_tooltip,
                dropdown_menu=dropdown_menu,
                dropdown_icon=dropdown_icon,
                collapsible=collapsible,
                collapsed=collapsed,
                closable=closable,
            ),
            class_="card-header" if header_border else "card-header no-border",
        )

    scroll_style = layout_defaults.CARD_OVERFLOW_STYLE if overflow else None
    body = tags.div(*content, class_="card-body", style=scroll_style)
    footer_tag = tags.div(footer, class_="card-footer", style=scroll_style) if footer is not None else None

    card_tag = tags.div(
        header,
        body,
        footer_tag,
        class_=card_class(
            status=status,
            gradient_color=gradient_color,
            solid_header=solid_header,
            collapsible=collapsible,
            collapsed=collapsed,
            elevation=elevation,
        ),
        style=height_style(height),
    )

    return tags.div(card_tag, class_=column_class(width))


def dropdown_item_list(*items: Any) -> Tag:
    """
    Container for the items of a card tool dropdown.

    Args:
        *items: dropdown_item() and dropdown_divider() nodes
    """
    return tags.div(*items, class_="dropdown-menu dropdown-menu-right", role="menu")


def dropdown_item(url: str | None = None, name: Any = None) -> Tag:
    """A dropdown link opening url in a new tab."""
    return tags.a(name, class_="dropdown-item", href=url, target="_blank")


def dropdown_divider() -> Tag:
    """Separator between two groups of dropdown items."""
    return tags.a(class_="divider")


def simple_box(*content: Any, title: Any = None, width: int | None = 6, height: int | str | None = None) -> Tag:
    """
    Generate a plain card with a hover shadow.

    The hover effect needs a small head stylesheet, registered once per process.

    Args:
        *content: Body content
        title: Header title
        width: Bootstrap grid width, None for column-based layouts
        height: Box height in pixels or any CSS unit

    Returns:
        <div class="col-sm-N"> wrapper around the box
    """
    register_style(CARD_BOX_STYLE)

    header = tags.div(
        tags.div(tags.h3(title, class_="card-title"), class_="d-flex justify-content-between"),
        class_="card-header no-border",
    )
    body = tags.div(*content, class_="card-body", style=layout_defaults.BOX_BODY_STYLE)

    box = tags.div(header, body, class_="card card-box", style=height_style(height))
    return tags.div(box, class_=column_class(width))
