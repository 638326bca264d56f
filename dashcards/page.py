"""
Page Rendering

Wraps component trees in a complete AdminLTE 3 HTML document. Head styles
registered by components (see dashcards.html.dependencies) are written into
<head> once each.

Usage:
    from dashcards.page import render_page

    html = render_page(value_box(150, "New orders", icon="shopping-cart"), title="Orders")
"""

from datetime import datetime
from typing import Any

from dashcards.config import get_config
from dashcards.core.logging_config import get_logger, log_with_context
from dashcards.html.dependencies import get_style_registry
from dashcards.template_engine import render_template

logger = get_logger(__name__)


def render_page(*content: Any, title: str = "Dashboard", include_registered_styles: bool = True) -> str:
    """
    Render component trees into a full HTML page.

    :param content: Tags (or text) placed in the page's grid row, in order
    :param title: Document title
    :param include_registered_styles: Emit the registered head styles (default: True)
    :returns: HTML document string
    :raises jinja2.TemplateNotFound: If the page template is missing

    Example:
        >>> html = render_page(card("Hello", title="Greeting"))
        >>> html.startswith("<!DOCTYPE html>")
        True
    """
    config = get_config()
    styles = get_style_registry().styles() if include_registered_styles else []

    context = {
        "title": title,
        "content": [node for node in content if node is not None],
        "styles": styles,
        "adminlte_css": config.adminlte_css,
        "fontawesome_css": config.fontawesome_css,
        "generation_date": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
    }

    log_with_context(
        logger, "debug", "Rendering page", title=title, node_count=len(context["content"]), style_count=len(styles)
    )
    return render_template("page.html", **context)
