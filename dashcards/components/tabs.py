"""
Tabbed card components

A tabbed card shows one pane of content at a time, chosen through a strip
of pill links in the card header. Panels are built with tab_panel(); the
same ordered panels drive both the link strip and the pane bodies, so link
i always targets pane i.

Active-state resolution:
    Callers mark panels active when building them. At most one panel may be
    active in the output: the first active panel in argument order keeps its
    marker and every later one is demoted. When no panel is marked, none is
    forced active.
"""

import itertools
import re
import string
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from typing import Any, Iterator

from dashcards.core.logging_config import get_logger, log_with_context
from dashcards.domain.constants import layout_defaults, theme_keywords
from dashcards.domain.validation import check_choice, check_keyword
from dashcards.html import tags
from dashcards.html.css import card_class, column_class, height_style
from dashcards.html.icons import icon
from dashcards.html.tags import Tag

logger = get_logger(__name__)

ACTIVE_CLASS = "active"

_STRIP_PATTERN = re.compile(f"[{re.escape(string.punctuation)}\\s]")


def sanitize_tab_id(name: str) -> str:
    """
    Derive a pane identifier from a tab name.

    ASCII punctuation and whitespace are removed. Sanitising an already
    sanitised identifier returns it unchanged.

    Example:
        >>> sanitize_tab_id("Tab 1: Overview!")
        'Tab1Overview'
    """
    return _STRIP_PATTERN.sub("", str(name))


@dataclass(frozen=True)
class TabPanel:
    """
    A tab name paired with its pane.

    The active marker lives on the pane as the "active" class token.

    Attributes:
        name: Display name shown in the tab link
        tag: The <div class="tab-pane"> node
    """

    name: str
    tag: Tag

    @property
    def active(self) -> bool:
        return self.tag.has_class(ACTIVE_CLASS)

    @property
    def tab_id(self) -> str:
        return self.tag.get_attr("id") or sanitize_tab_id(self.name)

    def demote(self) -> "TabPanel":
        """Copy of this panel with the active marker removed."""
        return replace(self, tag=self.tag.without_class(ACTIVE_CLASS))

    def __iter__(self) -> Iterator[Any]:
        yield self.name
        yield self.tag


def tab_panel(*content: Any, tab_name: str, active: bool = False) -> TabPanel:
    """
    Build one tab of a tabbed card.

    Args:
        *content: Pane content
        tab_name: Display name, unique within its tab set
        active: Whether this tab starts selected

    Returns:
        TabPanel pairing the name with its pane
    """
    pane = tags.div(
        *content,
        class_="tab-pane active" if active else "tab-pane",
        id=sanitize_tab_id(tab_name),
    )
    return TabPanel(name=tab_name, tag=pane)


def resolve_active_panels(panels: Iterable[TabPanel]) -> list[TabPanel]:
    """
    Keep the active marker on the first active panel only.

    Args:
        panels: Panels in argument order

    Returns:
        New list with every active panel after the first demoted; zero
        active panels stay zero
    """
    found_active = False
    resolved: list[TabPanel] = []
    for panel in panels:
        if panel.active:
            if found_active:
                log_with_context(logger, "debug", f"Demoting extra active tab {panel.name!r}", tab_name=panel.name)
                panel = panel.demote()
            else:
                found_active = True
        resolved.append(panel)
    return resolved


def _warn_duplicate_ids(panels: Sequence[TabPanel]) -> None:
    names_by_id: dict[str, list[str]] = {}
    for panel in panels:
        names_by_id.setdefault(panel.tab_id, []).append(panel.name)

    for tab_id, names in names_by_id.items():
        if len(names) > 1:
            log_with_context(
                logger,
                "warning",
                f"Tab identifier {tab_id!r} is shared by {len(names)} tabs; their links are ambiguous",
                tab_id=tab_id,
                tab_names=names,
            )


def recycle_statuses(statuses: str | Sequence[str | None] | None, count: int) -> list[str | None]:
    """
    Repeat per-tab statuses cyclically to cover count tabs.

    Example:
        >>> recycle_statuses(["primary", "info"], 5)
        ['primary', 'info', 'primary', 'info', 'primary']
    """
    if isinstance(statuses, str):
        statuses = [statuses]
    if not statuses:
        return [None] * count
    return list(itertools.islice(itertools.cycle(statuses), count))


def _nav_item_class(status: str | None, tab_color: str | None) -> str:
    if tab_color is not None:
        check_keyword(tab_color, theme_keywords.STATUSES, "tab_status")
        return f"nav-item bg-{tab_color}"
    if status is not None:
        return "nav-item bg-light"
    return "nav-item"


def _tab_strip(
    resolved: Sequence[TabPanel],
    side: str,
    status: str | None = None,
    tab_status: str | Sequence[str | None] | None = None,
) -> Tag:
    colors = recycle_statuses(tab_status, len(resolved))
    items = [
        tags.li(
            tags.a(
                panel.name,
                class_="nav-link active" if panel.active else "nav-link",
                href=f"#{panel.tab_id}",
                data_toggle="tab",
            ),
            class_=_nav_item_class(status, tab_color),
        )
        for panel, tab_color in zip(resolved, colors)
    ]
    return tags.ul(*items, class_="nav nav-pills ml-auto p-2" if side == "right" else "nav nav-pills p-2")


def tab_set_panel(
    *panels: TabPanel,
    side: str = "left",
    status: str | None = None,
    tab_status: str | Sequence[str | None] | None = None,
) -> Tag:
    """
    Build the strip of tab links for a set of panels.

    Args:
        *panels: tab_panel() results, in display order
        side: "left" or "right" placement of the strip
        status: When set and a tab has no status of its own, the tab gets a light background
        tab_status: Per-tab colours, recycled to the number of tabs

    Returns:
        <ul class="nav nav-pills"> node

    Raises:
        ValidationError: If side is not "left" or "right"
    """
    check_choice(side, theme_keywords.SIDES, "side")
    resolved = resolve_active_panels(panels)
    _warn_duplicate_ids(resolved)
    return _tab_strip(resolved, side, status=status, tab_status=tab_status)


def tab_card(
    *panels: TabPanel,
    title: Any = None,
    status: str | None = None,
    elevation: int | None = None,
    solid_header: bool = False,
    header_border: bool = True,
    gradient_color: str | None = None,
    tab_status: str | Sequence[str | None] | None = None,
    width: int | None = 6,
    height: int | str | None = None,
    collapsible: bool = True,
    collapsed: bool = False,
    closable: bool = True,
    side: str = "left",
) -> Tag:
    """
    Generate an AdminLTE 3 card with tabs.

    Args:
        *panels: tab_panel() results, in display order
        title: Optional title; replaced by an invisible placeholder when the
            card is collapsible or closable
        status: Header colour
        elevation: Drop-shadow level (0-5)
        solid_header: Use the outlined header variant for the status colour
        header_border: Draw a border between header and body
        gradient_color: Gradient background; takes precedence over status
        tab_status: Per-tab colours, recycled to the number of tabs
        width: Bootstrap grid width, None for column-based layouts
        height: Card height in pixels or any CSS unit
        collapsible: Show the collapse button
        collapsed: Start collapsed (only with collapsible)
        closable: Show the close button
        side: "right" puts the title before the tab strip, "left" after it

    Returns:
        <div class="col-sm-N"> wrapper around the card

    Raises:
        ValidationError: If side is not "left" or "right"

    Example:
        node = tab_card(
            tab_panel("First", tab_name="Tab 1"),
            tab_panel("Second", tab_name="Tab 2", active=True),
            title="A card with tabs",
            tab_status=["primary", "info"],
        )
    """
    check_choice(side, theme_keywords.SIDES, "side")

    resolved = resolve_active_panels(panels)
    _warn_duplicate_ids(resolved)

    if title is None and (collapsible or closable):
        title = layout_defaults.PLACEHOLDER_TITLE

    if collapsible or closable:
        tools = tags.div(
            tags.button(
                icon("plus" if collapsed else "minus"),
                type="button",
                class_="btn btn-tool pb-0 pt-0",
                data_widget="collapse",
            )
            if collapsible
            else None,
            tags.button(
                tags.i(class_="fa fa-times"),
                type="button",
                class_="btn btn-tool pb-0 pt-0",
                data_widget="remove",
            )
            if closable
            else None,
            class_="tools pt-3 pb-3 pr-2 mr-2",
        )
    else:
        tools = tags.div()

    strip = _tab_strip(resolved, side, tab_status=tab_status)
    if side == "right":
        title_tag = tags.h3(title, class_="card-title p-3") if title is not None else None
        header_children = [title_tag, strip]
    else:
        title_tag = tags.h3(title, class_="card-title p-3 ml-auto") if title is not None else None
        header_children = [strip, title_tag]

    # Unlike card(), the header is emitted even when there is no title at all
    # (no title, not collapsible, not closable): it carries the tab strip, and
    # dropping it would leave the panes without links.
    header = tags.div(
        *header_children,
        tools if title is not None else None,
        class_="card-header d-flex p-0" if header_border else "card-header d-flex p-0 no-border",
    )

    body = tags.div(
        tags.div(*(panel.tag for panel in resolved), class_="tab-content"),
        class_="card-body",
        style=layout_defaults.TAB_BODY_STYLE,
    )

    card_tag = tags.div(
        header,
        body,
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
