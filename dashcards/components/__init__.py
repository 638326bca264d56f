"""
Dashboard Components - AdminLTE 3 card builders

This package provides functions that build element trees for the theme's
card family:
    - cards: Cards, simple boxes, card tool dropdowns
    - boxes: Value boxes, info boxes
    - tabs: Tabbed cards and their panels
    - widgets: User cards, profile blocks, social cards, comments

Usage:
    from dashcards.components import card, tab_card, tab_panel

    node = tab_card(
        tab_panel("First", tab_name="Tab 1", active=True),
        tab_panel("Second", tab_name="Tab 2"),
        title="Tabs",
    )
    html = node.render()
"""

from .boxes import info_box, value_box
from .cards import card, dropdown_divider, dropdown_item, dropdown_item_list, simple_box
from .tabs import TabPanel, recycle_statuses, resolve_active_panels, sanitize_tab_id, tab_card, tab_panel, tab_set_panel
from .widgets import card_comment, card_profile, card_profile_item, card_profile_item_list, social_card, user_card

__all__ = [
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
]
