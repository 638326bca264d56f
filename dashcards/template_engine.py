"""
Jinja2 Template Engine for Safe HTML Generation

Provides centralized template loading and rendering with automatic escaping.
Element trees and whole pages are serialised through the templates shipped
in dashcards/templates.

Usage:
    from dashcards.template_engine import render_template

    html = render_template("node.html", root=card("Body", title="Hello"))

Security Features:
    - Automatic HTML escaping of text and attribute values
    - markupsafe.Markup content is trusted and emitted verbatim
"""

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape


class TemplateEngine:
    """
    Centralized template engine with security features.
    """

    def __init__(self, template_dir: Path | str | None = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing templates (default: dashcards/templates)
        """
        if template_dir is None:
            template_dir = Path(__file__).parent / "templates"

        self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(self.template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

    def render(self, template_name: str, **context: Any) -> str:
        """
        Render a template with given context.

        Args:
            template_name: Name of template file (relative to templates dir)
            **context: Template variables

        Returns:
            Rendered HTML string
        """
        template = self.env.get_template(template_name)
        return template.render(**context)


_engine: TemplateEngine | None = None


def get_template_engine() -> TemplateEngine:
    """
    Get the global template engine instance (singleton pattern).

    Returns:
        TemplateEngine: The template engine
    """
    global _engine
    if _engine is None:
        _engine = TemplateEngine()
    return _engine


def render_template(template_name: str, **context: Any) -> str:
    """
    Convenience function to render a template.

    Args:
        template_name: Name of template file
        **context: Template variables

    Returns:
        Rendered HTML string

    Example:
        html = render_template("page.html", title="Demo", content=[], styles=[])
    """
    engine = get_template_engine()
    return engine.render(template_name, **context)
