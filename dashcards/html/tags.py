"""
Element Nodes

Immutable HTML element trees returned by every dashcards builder.

A Tag has a name, ordered attributes (unique by name, last write wins) and
ordered children (text, markupsafe.Markup or further Tags). Nothing mutates a
Tag after construction; helpers such as with_attrs() return new nodes.

Usage:
    from dashcards.html.tags import div, h3

    node = div(h3("Hello", class_="card-title"), class_="card-header")
    html = node.render()
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, replace
from typing import Any, Union

from markupsafe import Markup

from dashcards.template_engine import render_template

VOID_ELEMENTS = frozenset({"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "wbr"})

Child = Union[str, "Tag"]
Attrs = tuple[tuple[str, str], ...]


def attr_name(key: str) -> str:
    """
    Map a Python keyword argument to an HTML attribute name.

    A trailing underscore is dropped and inner underscores become hyphens:
    class_ -> class, data_toggle -> data-toggle.
    """
    if key.endswith("_"):
        key = key[:-1]
    return key.replace("_", "-")


def _merge_attrs(existing: Attrs, updates: Mapping[str, Any]) -> Attrs:
    merged = dict(existing)
    for key, value in updates.items():
        if value is None or value is False:
            merged.pop(key, None)
        else:
            merged[key] = str(value)
    return tuple(merged.items())


def _flatten(children: Any) -> tuple[Child, ...]:
    flat: list[Child] = []
    for child in children:
        if child is None or isinstance(child, bool):
            continue
        if isinstance(child, (Tag, str)):
            flat.append(child)
        elif isinstance(child, (list, tuple)):
            flat.extend(_flatten(child))
        elif isinstance(child, (int, float)):
            flat.append(str(child))
        elif hasattr(child, "__html__"):
            flat.append(Markup(child.__html__()))
        else:
            raise TypeError(f"Unsupported child type: {type(child).__name__}")
    return tuple(flat)


@dataclass(frozen=True)
class Tag:
    """
    An HTML element node.

    Attributes:
        name: Element name (div, span, ...)
        attrs: Ordered (name, value) attribute pairs
        children: Ordered child nodes; str children are escaped on render,
            Markup children are emitted verbatim
    """

    name: str
    attrs: Attrs = ()
    children: tuple[Child, ...] = ()

    @property
    def is_void(self) -> bool:
        return self.name in VOID_ELEMENTS

    def get_attr(self, name: str, default: str | None = None) -> str | None:
        for key, value in self.attrs:
            if key == name:
                return value
        return default

    def class_tokens(self) -> tuple[str, ...]:
        return tuple((self.get_attr("class") or "").split())

    def has_class(self, token: str) -> bool:
        return token in self.class_tokens()

    def with_attrs(self, attrs: Mapping[str, Any] | None = None, **kwargs: Any) -> "Tag":
        """
        Return a copy with attributes set (None or False removes an attribute).

        Explicit mapping keys are used as-is; keyword names go through attr_name().
        """
        updates = dict(attrs or {})
        updates.update({attr_name(key): value for key, value in kwargs.items()})
        return replace(self, attrs=_merge_attrs(self.attrs, updates))

    def with_children(self, *children: Any) -> "Tag":
        """Return a copy with children appended."""
        return replace(self, children=self.children + _flatten(children))

    def without_class(self, token: str) -> "Tag":
        """Return a copy with every occurrence of a class token removed."""
        remaining = [t for t in self.class_tokens() if t != token]
        return self.with_attrs({"class": " ".join(remaining) or None})

    def walk(self) -> Iterator["Tag"]:
        """Yield this node and every descendant Tag, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Tag):
                yield from child.walk()

    def find_all(self, name: str | None = None, class_: str | None = None) -> list["Tag"]:
        """Descendant-or-self Tags matching an element name and/or a class token."""
        return [
            node
            for node in self.walk()
            if (name is None or node.name == name) and (class_ is None or node.has_class(class_))
        ]

    def text(self) -> str:
        """Concatenated text content (Markup children included verbatim)."""
        return "".join(child.text() if isinstance(child, Tag) else str(child) for child in self.children)

    def render(self) -> str:
        """Serialise the tree to an HTML string."""
        return render_template("node.html", root=self)

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()


def tag(name: str, *children: Any, **attrs: Any) -> Tag:
    """
    Build a Tag.

    Args:
        name: Element name
        *children: Child nodes; None is skipped, lists and tuples are flattened
        **attrs: Attributes; None/False values are omitted

    Example:
        >>> tag("a", "More info", href="#", data_toggle="tab").render()
        '<a href="#" data-toggle="tab">More info</a>'
    """
    return Tag(
        name=name,
        attrs=_merge_attrs((), {attr_name(key): value for key, value in attrs.items()}),
        children=_flatten(children),
    )


def _factory(name: str):
    def build(*children: Any, **attrs: Any) -> Tag:
        return tag(name, *children, **attrs)

    build.__name__ = name
    build.__qualname__ = name
    build.__doc__ = f"Build a <{name}> Tag."
    return build


a = _factory("a")
br = _factory("br")
button = _factory("button")
div = _factory("div")
h3 = _factory("h3")
h5 = _factory("h5")
i = _factory("i")
img = _factory("img")
li = _factory("li")
p = _factory("p")
span = _factory("span")
strong = _factory("strong")
ul = _factory("ul")
