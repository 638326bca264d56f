"""
Tests for dashcards.template_engine module
"""

import pytest
from jinja2 import TemplateNotFound
from markupsafe import Markup

from dashcards.html.tags import div
from dashcards.template_engine import TemplateEngine, get_template_engine, render_template


class TestTemplateEngine:
    """Test template loading and escaping"""

    def test_default_template_dir(self):
        engine = TemplateEngine()
        assert (engine.template_dir / "node.html").exists()
        assert (engine.template_dir / "page.html").exists()

    def test_custom_template_dir(self, tmp_path):
        (tmp_path / "greeting.html").write_text("Hello {{ name }}!", encoding="utf-8")
        assert TemplateEngine(tmp_path).render("greeting.html", name="<you>") == "Hello &lt;you&gt;!"

    def test_missing_template(self, tmp_path):
        with pytest.raises(TemplateNotFound):
            TemplateEngine(tmp_path).render("missing.html")

    def test_singleton(self):
        assert get_template_engine() is get_template_engine()


class TestNodeTemplate:
    """Test element tree serialisation"""

    def test_nested_nodes(self):
        html = render_template("node.html", root=div(div("inner", class_="b"), class_="a"))
        assert html == '<div class="a"><div class="b">inner</div></div>'

    def test_attribute_values_escaped(self):
        html = render_template("node.html", root=div(title='say "hi" & <bye>'))
        assert html == '<div title="say &#34;hi&#34; &amp; &lt;bye&gt;"></div>'

    def test_markup_child_verbatim(self):
        html = render_template("node.html", root=div(Markup("<b>bold</b>"), "<i>"))
        assert html == "<div><b>bold</b>&lt;i&gt;</div>"
