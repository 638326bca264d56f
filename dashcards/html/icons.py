"""
Font Awesome icon nodes.
"""

from dashcards.html.tags import Tag, tag


def icon(name: str | None, class_: str | None = None) -> Tag | None:
    """
    Build a Font Awesome 4 icon.

    Args:
        name: Icon name without the fa- prefix (e.g. "wrench"); None gives no icon
        class_: Extra classes appended after the icon classes

    Returns:
        <i class="fa fa-NAME"> node, or None

    Example:
        >>> icon("minus").render()
        '<i class="fa fa-minus" role="presentation" aria-label="minus icon"></i>'
    """
    if name is None:
        return None
    classes = f"fa fa-{name}" if not class_ else f"fa fa-{name} {class_}"
    return tag("i", class_=classes, role="presentation", aria_label=f"{name} icon")
