"""
User, profile and social widgets

Provides the user card, the profile block with its item list, and the
social card with its comments.
"""

from typing import Any

from dashcards.domain.constants import layout_defaults, theme_keywords
from dashcards.domain.validation import check_keyword
from dashcards.html import tags
from dashcards.html.css import class_names, column_class, elevation_class, height_style
from dashcards.html.tags import Tag


def user_card(
    *content: Any,
    type: int | None = None,
    src: str | None = None,
    elevation: int | None = None,
    image_elevation: int | None = None,
    status: str = "primary",
    title: Any = None,
    subtitle: Any = None,
    width: int | None = 6,
) -> Tag:
    """
    Generate an AdminLTE 3 user widget.

    Args:
        *content: Footer content
        type: Layout variant; None for the centred layout, 2 for the
            image-left layout
        src: Profile image URL
        elevation: Drop-shadow level of the card
        image_elevation: Drop-shadow level of the image
        status: Header background colour (default: primary)
        title: User name
        subtitle: User description
        width: Bootstrap grid width, None for column-based layouts

    Returns:
        <div class="col-sm-N"> wrapper around the card

    Example:
        node = user_card(
            "Some text here!",
            src="https://adminlte.io/themes/AdminLTE/dist/img/user1-128x128.jpg",
            status="info",
            title="User card type 1",
            subtitle="a subtitle here",
            elevation=4,
        )
    """
    check_keyword(status, theme_keywords.STATUSES, "status")
    check_keyword(type, theme_keywords.USER_CARD_TYPES, "type")

    card_cl = class_names(
        "card card-widget",
        f"widget-user-{type}" if type is not None else "widget-user",
        elevation_class(elevation),
    )
    header_cl = class_names("widget-user-header", f"bg-{status}" if status is not None else None)

    image = tags.div(
        tags.img(class_=class_names("img-circle", elevation_class(image_elevation)), src=src),
        class_="widget-user-image",
    )
    username = tags.h3(title, class_="widget-user-username")
    description = tags.h5(subtitle, class_="widget-user-desc")

    if type is None:
        header = [tags.div(username, description, class_=header_cl), image]
    else:
        header = [tags.div(image, username, description, class_=header_cl)]

    footer = tags.div(*content, class_="card-footer", style=layout_defaults.USER_CARD_FOOTER_STYLE)

    card_tag = tags.div(*header, footer, class_=card_cl)
    return tags.div(card_tag, class_=column_class(width))


def card_profile(*content: Any, src: str | None = None, title: Any = None, subtitle: Any = None) -> Tag:
    """
    Profile block: centred picture, name and description, then content.

    Usually placed inside card() with card_profile_item_list() as content.
    """
    return tags.div(
        tags.div(tags.img(class_="profile-user-img img-fluid img-circle", src=src), class_="text-center"),
        tags.h3(title, class_="profile-username text-center"),
        tags.p(subtitle, class_="text-muted text-center"),
        *content,
        class_="card-body card-profile",
    )


def card_profile_item_list(*items: Any, bordered: bool = False) -> Tag:
    """List of card_profile_item() entries."""
    cl = "list-group mb-3" if bordered else "list-group list-group-unbordered mb-3"
    return tags.ul(*items, class_=cl)


def card_profile_item(title: Any = None, description: Any = None) -> Tag:
    """One profile entry: bold title, right-aligned description."""
    return tags.li(
        tags.strong(title),
        tags.a(description, class_="float-right"),
        class_="list-group-item",
    )


def social_card(
    *content: Any,
    src: str | None = None,
    title: Any = None,
    subtitle: Any = None,
    width: int | None = 6,
    height: int | str | None = None,
    collapsible: bool = True,
    closable: bool = True,
    comments: Any = None,
    footer: Any = None,
) -> Tag:
    """
    Generate an AdminLTE 3 social post card.

    Args:
        *content: Post body
        src: Author image URL
        title: Author name
        subtitle: Post description (e.g. date and visibility)
        width: Bootstrap grid width, None for column-based layouts
        height: Card height in pixels or any CSS unit
        collapsible: Show the collapse button
        closable: Show the close button
        comments: card_comment() nodes shown in a scrolling block
        footer: Footer content

    Returns:
        <div class="col-sm-N"> wrapper around the card
    """
    user_block = tags.div(
        tags.img(class_="img-circle", src=src),
        tags.span(tags.a(title, href="javascript:void(0)"), class_="username"),
        tags.span(subtitle, class_="description"),
        class_="user-block",
    )

    tools = tags.div(
        tags.button(tags.i(class_="fa fa-minus"), class_="btn btn-tool", data_widget="collapse", type="button")
        if collapsible
        else None,
        tags.button(tags.i(class_="fa fa-times"), class_="btn btn-tool", data_widget="remove", type="button")
        if closable
        else None,
        class_="card-tools",
    )

    comments_tag = None
    if comments is not None:
        comments_tag = tags.div(comments, class_="card-footer card-comments", style=layout_defaults.COMMENTS_STYLE)

    footer_tag = None
    if footer is not None:
        footer_tag = tags.div(footer, class_="card-footer", style="display: block;")

    card_tag = tags.div(
        tags.div(user_block, tools, class_="card-header"),
        tags.div(*content, class_="card-body"),
        comments_tag,
        footer_tag,
        class_="card card-widget",
        style=class_names(height_style(height, terminator=";"), "display: block;"),
    )
    return tags.div(card_tag, class_=column_class(width))


def card_comment(*content: Any, src: str | None = None, title: Any = None, date: Any = None) -> Tag:
    """
    One comment in a social card.

    Args:
        *content: Comment text
        src: Commenter image URL
        title: Commenter name
        date: Comment date, shown right-aligned
    """
    return tags.div(
        tags.img(class_="img-circle img-sm", src=src),
        tags.div(
            tags.span(title, tags.span(date, class_="text-muted float-right"), class_="username"),
            *content,
            class_="comment-text",
        ),
        class_="card-comment",
    )
