#!/usr/bin/env python3
"""
Component Showcase Generator

Writes a single HTML page demonstrating every dashcards component.

Usage:
    python -m dashcards.showcase --output .tmp/showcase.html
    python -m dashcards.showcase --log-file .tmp/logs/showcase.log --json-log
"""

import argparse
from pathlib import Path

from dashcards.components import (
    card,
    card_comment,
    card_profile,
    card_profile_item,
    card_profile_item_list,
    dropdown_divider,
    dropdown_item,
    dropdown_item_list,
    info_box,
    simple_box,
    social_card,
    tab_card,
    tab_panel,
    user_card,
    value_box,
)
from dashcards.config import get_config
from dashcards.core.logging_config import get_logger, log_with_context, setup_logging
from dashcards.html import tags
from dashcards.page import render_page

logger = get_logger(__name__)

AVATAR = "https://adminlte.io/themes/AdminLTE/dist/img/user1-128x128.jpg"


def build_showcase() -> list:
    """Component trees shown on the demo page, in display order."""
    return [
        value_box(150, "New orders", icon="shopping-cart", status="primary", href="#"),
        value_box("53%", "Bounce rate", icon="cogs", status="danger"),
        info_box(title="Messages", value=1410, icon="envelope"),
        info_box(title="Comments", value=41410, icon="comments", gradient_color="danger"),
        card(
            tags.p("Box content"),
            title="Closable card with dropdown",
            status="warning",
            label_text=1,
            label_status="danger",
            label_tooltip="Hi there!",
            dropdown_menu=dropdown_item_list(
                dropdown_item(url="https://adminlte.io", name="AdminLTE"),
                dropdown_item(url="#", name="Item 2"),
                dropdown_divider(),
                dropdown_item(url="#", name="Item 3"),
            ),
        ),
        card(tags.p("Box content"), title="Card with gradient", gradient_color="success", elevation=3),
        tab_card(
            tab_panel(tags.p("First pane"), tab_name="Tab 1"),
            tab_panel(tags.p("Second pane"), tab_name="Tab 2", active=True),
            tab_panel(tags.p("Third pane"), tab_name="Tab 3"),
            title="A card with tabs",
            tab_status=["primary", "info"],
            side="right",
        ),
        simple_box(tags.p("Hover me"), title="Simple box"),
        user_card(
            "Some text here!",
            src=AVATAR,
            status="info",
            title="User card",
            subtitle="a subtitle here",
            elevation=4,
        ),
        card(
            card_profile(
                card_profile_item_list(
                    card_profile_item(title="Followers", description=1322),
                    card_profile_item(title="Following", description=543),
                ),
                src=AVATAR,
                title="Nina Mcintire",
                subtitle="Software Engineer",
            ),
            title="Profile",
            status="primary",
            solid_header=True,
        ),
        social_card(
            tags.p("Body content"),
            src=AVATAR,
            title="Social card",
            subtitle="example-01.05.2018",
            comments=[card_comment("Nice post!", src=AVATAR, title="Comment 1", date="01.05.2018")],
            footer="The footer",
        ),
    ]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a demo page of every dashcards component")
    parser.add_argument("--output", type=Path, default=Path(".tmp/dashcards/showcase.html"), help="Output HTML file")
    parser.add_argument("--title", default="dashcards showcase", help="Page title")
    parser.add_argument("--log-level", help="Log level (default: DASHCARDS_LOG_LEVEL or INFO)")
    parser.add_argument("--log-file", type=Path, help="Also write JSON log lines to this file")
    parser.add_argument("--json-log", action="store_true", help="Write console logs as JSON")
    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level or get_config().log_level,
        log_file=args.log_file,
        json_output=args.json_log,
    )

    nodes = build_showcase()
    html = render_page(*nodes, title=args.title)

    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(html, encoding="utf-8")
    except OSError as e:
        log_with_context(logger, "error", f"Could not write showcase page: {e}", output=str(args.output))
        return 1

    log_with_context(
        logger,
        "info",
        "Showcase page written",
        output=str(args.output),
        component_count=len(nodes),
        html_size=len(html),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
