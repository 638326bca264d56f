"""
Head Style Registry

Some components need a small stylesheet in the page head (the simple box
hover shadow, info box icon colours). They register it here; the registry
keeps each distinct style text once, in first-registration order, for the
lifetime of the process. render_page() flushes it into <head>.
"""

import threading

from markupsafe import Markup

from dashcards.core.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


class StyleRegistry:
    """
    Append-only, content-deduplicated collection of head styles.
    """

    def __init__(self) -> None:
        self._styles: list[str] = []
        self._seen: set[str] = set()
        self._lock = threading.Lock()

    def register(self, css: str) -> bool:
        """
        Add a style unless identical text is already registered.

        Args:
            css: Stylesheet text

        Returns:
            True if the style was added, False if it was already present
        """
        with self._lock:
            if css in self._seen:
                return False
            self._seen.add(css)
            self._styles.append(css)
        log_with_context(logger, "debug", "Registered head style", style_count=len(self._styles))
        return True

    def styles(self) -> list[Markup]:
        """Registered styles, in registration order, as trusted markup."""
        with self._lock:
            return [Markup(css) for css in self._styles]

    def clear(self) -> None:
        with self._lock:
            self._styles.clear()
            self._seen.clear()

    def __contains__(self, css: object) -> bool:
        return css in self._seen

    def __len__(self) -> int:
        return len(self._styles)


_registry = StyleRegistry()


def get_style_registry() -> StyleRegistry:
    """Process-wide style registry."""
    return _registry


def register_style(css: str) -> bool:
    """Register a head style on the process-wide registry."""
    return _registry.register(css)
