"""
Tests for tabbed card components

Covers identifier sanitisation, active-state resolution, status recycling,
the tab link strip and the tabbed card layout.
"""

import logging

import pytest

from dashcards.components.tabs import (
    TabPanel,
    recycle_statuses,
    resolve_active_panels,
    sanitize_tab_id,
    tab_card,
    tab_panel,
    tab_set_panel,
)
from dashcards.domain.constants import layout_defaults
from dashcards.domain.validation import ValidationError


def _active_names(panels):
    return [panel.name for panel in panels if panel.active]


def _active_links(node):
    return [link.text() for link in node.find_all(name="a", class_="nav-link") if link.has_class("active")]


def _active_panes(node):
    return [pane.get_attr("id") for pane in node.find_all(class_="tab-pane") if pane.has_class("active")]


class TestSanitizeTabId:
    """Tests for pane identifier derivation"""

    def test_strips_spaces(self):
        assert sanitize_tab_id("Tab 1") == "Tab1"

    def test_strips_punctuation(self):
        assert sanitize_tab_id("Tab 1: Overview!") == "Tab1Overview"
        assert sanitize_tab_id("a-b_c.d/e") == "abcde"

    def test_strips_other_whitespace(self):
        assert sanitize_tab_id("a\tb\nc") == "abc"

    @pytest.mark.parametrize("name", ["Tab 1", "Hello, World!", "x-y z", "already"])
    def test_idempotent(self, name):
        once = sanitize_tab_id(name)
        assert sanitize_tab_id(once) == once


class TestTabPanel:
    """Tests for panel descriptors"""

    def test_inactive_panel(self):
        panel = tab_panel("content", tab_name="Tab 1")
        assert isinstance(panel, TabPanel)
        assert panel.name == "Tab 1"
        assert panel.tag.get_attr("class") == "tab-pane"
        assert panel.tag.get_attr("id") == "Tab1"
        assert panel.tab_id == "Tab1"
        assert not panel.active

    def test_active_panel(self):
        panel = tab_panel("content", tab_name="Tab 1", active=True)
        assert panel.tag.get_attr("class") == "tab-pane active"
        assert panel.active

    def test_unpacks_as_pair(self):
        name, pane = tab_panel("content", tab_name="Tab 1")
        assert name == "Tab 1"
        assert pane.children == ("content",)

    def test_demote_strips_marker_only(self):
        demoted = tab_panel("c", tab_name="T", active=True).demote()
        assert demoted.tag.get_attr("class") == "tab-pane"
        assert demoted.tag.get_attr("id") == "T"
        assert not demoted.active


class TestResolveActivePanels:
    """Tests for the single-active-panel rule"""

    def test_zero_active_stays_zero(self):
        panels = [tab_panel("x", tab_name=f"Tab {n}") for n in range(4)]
        assert _active_names(resolve_active_panels(panels)) == []

    @pytest.mark.parametrize("k", [0, 1, 3])
    def test_single_active_unchanged(self, k):
        panels = [tab_panel("x", tab_name=f"Tab {n}", active=(n == k)) for n in range(4)]
        resolved = resolve_active_panels(panels)
        assert resolved == panels
        assert _active_names(resolved) == [f"Tab {k}"]

    def test_first_active_wins(self):
        actives = {1, 2, 4}
        panels = [tab_panel("x", tab_name=f"Tab {n}", active=(n in actives)) for n in range(5)]
        assert _active_names(resolve_active_panels(panels)) == ["Tab 1"]

    def test_first_of_two_actives_wins(self, three_panels):
        resolved = resolve_active_panels(three_panels)
        assert _active_names(resolved) == ["Tab 2"]
        assert resolved[2].tag.get_attr("class") == "tab-pane"

    def test_order_preserved(self, three_panels):
        assert [p.name for p in resolve_active_panels(three_panels)] == ["Tab 1", "Tab 2", "Tab 3"]

    def test_inputs_not_mutated(self, three_panels):
        resolve_active_panels(three_panels)
        assert three_panels[2].active

    def test_empty(self):
        assert resolve_active_panels([]) == []

    def test_demotion_is_not_an_error(self, three_panels, caplog):
        with caplog.at_level(logging.DEBUG, logger="dashcards.components.tabs"):
            resolve_active_panels(three_panels)
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


class TestRecycleStatuses:
    """Tests for per-tab status recycling"""

    def test_recycles_shorter_sequence(self):
        assert recycle_statuses(["primary", "info"], 5) == ["primary", "info", "primary", "info", "primary"]

    def test_truncates_longer_sequence(self):
        assert recycle_statuses(["a", "b", "c"], 2) == ["a", "b"]

    def test_single_string(self):
        assert recycle_statuses("warning", 3) == ["warning", "warning", "warning"]

    def test_none_or_empty(self):
        assert recycle_statuses(None, 2) == [None, None]
        assert recycle_statuses([], 2) == [None, None]

    def test_zero_tabs(self):
        assert recycle_statuses(["primary"], 0) == []


class TestTabSetPanel:
    """Tests for the tab link strip"""

    def test_links_target_panes(self):
        strip = tab_set_panel(tab_panel("x", tab_name="Tab 1"), tab_panel("y", tab_name="Second tab!"))
        links = strip.find_all(name="a")
        assert [link.get_attr("href") for link in links] == ["#Tab1", "#Secondtab"]
        assert [link.get_attr("data-toggle") for link in links] == ["tab", "tab"]
        assert [link.text() for link in links] == ["Tab 1", "Second tab!"]

    def test_left_and_right_classes(self):
        panel = tab_panel("x", tab_name="T")
        assert tab_set_panel(panel).get_attr("class") == "nav nav-pills p-2"
        assert tab_set_panel(panel, side="right").get_attr("class") == "nav nav-pills ml-auto p-2"

    def test_invalid_side(self):
        with pytest.raises(ValidationError):
            tab_set_panel(tab_panel("x", tab_name="T"), side="top")

    def test_only_first_active_link(self, three_panels):
        assert _active_links(tab_set_panel(*three_panels)) == ["Tab 2"]

    def test_item_classes(self):
        panels = [tab_panel("x", tab_name=f"T{n}") for n in range(3)]
        strip = tab_set_panel(*panels, tab_status=["primary", "info"])
        assert [li.get_attr("class") for li in strip.children] == [
            "nav-item bg-primary",
            "nav-item bg-info",
            "nav-item bg-primary",
        ]

    def test_set_status_without_tab_status_is_light(self):
        strip = tab_set_panel(tab_panel("x", tab_name="T"), status="primary")
        assert strip.children[0].get_attr("class") == "nav-item bg-light"

    def test_plain_items(self):
        strip = tab_set_panel(tab_panel("x", tab_name="T"))
        assert strip.children[0].get_attr("class") == "nav-item"

    def test_duplicate_identifiers_warn(self, caplog):
        with caplog.at_level(logging.WARNING, logger="dashcards.components.tabs"):
            tab_set_panel(tab_panel("x", tab_name="Tab 1"), tab_panel("y", tab_name="Tab-1"))
        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "Tab1" in warnings[0].getMessage()
        assert warnings[0].extra_fields["tab_names"] == ["Tab 1", "Tab-1"]


class TestTabCard:
    """Tests for the tabbed card"""

    def test_two_actives_links_and_panes_agree(self, three_panels):
        node = tab_card(*three_panels, title="Tabs")
        assert _active_links(node) == ["Tab 2"]
        assert _active_panes(node) == ["Tab2"]

    def test_active_positions_match(self):
        for actives in ({0}, {2}, {1, 3}, set(), {0, 1, 2, 3}):
            panels = [tab_panel("x", tab_name=f"Tab {n}", active=(n in actives)) for n in range(4)]
            node = tab_card(*panels)
            links = [a.has_class("active") for a in node.find_all(name="a", class_="nav-link")]
            panes = [d.has_class("active") for d in node.find_all(class_="tab-pane")]
            assert links == panes
            assert sum(panes) == (1 if actives else 0)

    def test_link_i_targets_pane_i(self, three_panels):
        node = tab_card(*three_panels)
        hrefs = [a.get_attr("href") for a in node.find_all(name="a", class_="nav-link")]
        ids = [d.get_attr("id") for d in node.find_all(class_="tab-pane")]
        assert hrefs == [f"#{pane_id}" for pane_id in ids]

    def test_card_classes(self):
        node = tab_card(tab_panel("x", tab_name="T"), status="primary", solid_header=True, elevation=2, width=8)
        assert node.get_attr("class") == "col-sm-8"
        assert node.children[0].get_attr("class") == "card card-outline card-primary elevation-2"

    def test_gradient_overrides_status(self):
        container = tab_card(tab_panel("x", tab_name="T"), status="warning", gradient_color="success").children[0]
        assert container.get_attr("class") == "card bg-success-gradient"

    def test_height(self):
        container = tab_card(tab_panel("x", tab_name="T"), height="400px").children[0]
        assert container.get_attr("style") == "height: 400px"

    def test_left_side_order(self):
        header = tab_card(tab_panel("x", tab_name="T"), title="Title").find_all(class_="card-header")[0]
        assert [child.name for child in header.children] == ["ul", "h3", "div"]
        assert header.children[1].get_attr("class") == "card-title p-3 ml-auto"

    def test_right_side_order(self):
        header = tab_card(tab_panel("x", tab_name="T"), title="Title", side="right").find_all(class_="card-header")[0]
        assert [child.name for child in header.children] == ["h3", "ul", "div"]
        assert header.children[0].get_attr("class") == "card-title p-3"
        assert header.children[1].get_attr("class") == "nav nav-pills ml-auto p-2"

    def test_invalid_side(self):
        with pytest.raises(ValidationError):
            tab_card(tab_panel("x", tab_name="T"), side="middle")

    def test_header_classes(self):
        node = tab_card(tab_panel("x", tab_name="T"), header_border=False)
        assert node.find_all(class_="card-header")[0].get_attr("class") == "card-header d-flex p-0 no-border"

    def test_tools(self):
        node = tab_card(tab_panel("x", tab_name="T"), title="t", collapsed=True)
        tools = node.find_all(class_="tools")[0]
        assert tools.get_attr("class") == "tools pt-3 pb-3 pr-2 mr-2"
        assert [b.get_attr("data-widget") for b in tools.children] == ["collapse", "remove"]
        assert tools.find_all(class_="fa-plus")
        assert node.children[0].has_class("collapsed-card")

    def test_placeholder_title(self):
        node = tab_card(tab_panel("x", tab_name="T"), closable=False)
        assert node.find_all(name="h3")[0].text() == layout_defaults.PLACEHOLDER_TITLE

    def test_no_title_no_tools_keeps_strip(self):
        node = tab_card(tab_panel("x", tab_name="T"), collapsible=False, closable=False)
        header = node.find_all(class_="card-header")[0]
        assert [child.name for child in header.children] == ["ul"]

    def test_body(self, three_panels):
        body = tab_card(*three_panels).find_all(class_="card-body")[0]
        assert body.get_attr("style") == "overflow-y: auto;"
        content = body.children[0]
        assert content.get_attr("class") == "tab-content"
        assert [pane.text() for pane in content.children] == ["First", "Second", "Third"]

    def test_tab_status_recycled(self):
        panels = [tab_panel("x", tab_name=f"T{n}") for n in range(5)]
        items = tab_card(*panels, tab_status=["primary", "info"]).find_all(name="li")
        assert [li.get_attr("class") for li in items] == [
            "nav-item bg-primary",
            "nav-item bg-info",
            "nav-item bg-primary",
            "nav-item bg-info",
            "nav-item bg-primary",
        ]

    def test_card_status_does_not_colour_tabs(self):
        items = tab_card(tab_panel("x", tab_name="T"), status="primary").find_all(name="li")
        assert items[0].get_attr("class") == "nav-item"

    def test_no_panels(self):
        node = tab_card(title="Empty")
        assert node.find_all(name="ul")[0].children == ()
        assert node.find_all(class_="tab-content")[0].children == ()

    def test_renders(self, three_panels):
        html = tab_card(*three_panels, title="Tabs").render()
        assert '<a class="nav-link active" href="#Tab2" data-toggle="tab">Tab 2</a>' in html
        assert '<div class="tab-pane" id="Tab3">Third</div>' in html
