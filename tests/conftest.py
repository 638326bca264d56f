"""
Pytest configuration and shared fixtures

Provides fresh process-wide state (style registry, configuration) for every
test, plus sample panels and nodes used across the component tests.
"""

import pytest

from dashcards.config import reset_config
from dashcards.html.dependencies import get_style_registry


@pytest.fixture(autouse=True)
def clean_process_state(monkeypatch):
    """Start every test with an empty style registry and no cached configuration"""
    for name in (
        "DASHCARDS_WARN_UNKNOWN_KEYWORDS",
        "DASHCARDS_LOG_LEVEL",
        "DASHCARDS_ADMINLTE_CSS",
        "DASHCARDS_FONTAWESOME_CSS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("dashcards.config.load_dotenv", lambda *args, **kwargs: False)

    get_style_registry().clear()
    reset_config()
    yield
    get_style_registry().clear()
    reset_config()


@pytest.fixture
def three_panels():
    """Provide the Tab 1 / Tab 2 (active) / Tab 3 (active) panel set"""
    from dashcards.components.tabs import tab_panel

    return [
        tab_panel("First", tab_name="Tab 1"),
        tab_panel("Second", tab_name="Tab 2", active=True),
        tab_panel("Third", tab_name="Tab 3", active=True),
    ]


@pytest.fixture
def sample_menu():
    """Provide a card tool dropdown with a divider"""
    from dashcards.components.cards import dropdown_divider, dropdown_item, dropdown_item_list

    return dropdown_item_list(
        dropdown_item(url="https://adminlte.io", name="AdminLTE"),
        dropdown_divider(),
        dropdown_item(url="#", name="Item 2"),
    )
