"""
dashcards - AdminLTE 3 card components as immutable HTML element trees

Usage::

    from dashcards import card, render_page

    node = card("Body", title="Hello", status="primary")
    html = render_page(node, title="Demo")
"""

from .components import (
    TabPanel,
    card,
    card_comment,
    card_profile,
    card_profile_item,
    card_profile_item_list,
    dropdown_divider,
    dropdown_item,
    dropdown_item_list,
    info_box,
    recycle_statuses,
    resolve_active_panels,
    sanitize_tab_id,
    simple_box,
    social_card,
    tab_card,
    tab_panel,
    tab_set_panel,
    user_card,
    value_box,
)
from .config import ConfigurationError, get_config
from .domain.validation import ValidationError
from .html import Tag, icon, tag, validate_css_unit
from .page import render_page

__version__ = "0.1.0"

__all__ = [
    "Tag",
    "tag",
    "icon",
    "validate_css_unit",
    "card",
    "simple_box",
    "dropdown_item_list",
    "dropdown_item",
    "dropdown_divider",
    "value_box",
    "info_box",
    "TabPanel",
    "tab_panel",
    "tab_set_panel",
    "tab_card",
    "resolve_active_panels",
    "sanitize_tab_id",
    "recycle_statuses",
    "user_card",
    "card_profile",
    "card_profile_item_list",
    "card_profile_item",
    "social_card",
    "card_comment",
    "render_page",
    "get_config",
    "ConfigurationError",
    "ValidationError",
]
