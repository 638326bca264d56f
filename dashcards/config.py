"""
Library Configuration

Provides centralized, validated configuration for dashcards.
Values come from environment variables (a local .env file is loaded first).

Usage:
    from dashcards.config import get_config

    config = get_config()
    if config.warn_unknown_keywords:
        ...

Environment variables:
    DASHCARDS_WARN_UNKNOWN_KEYWORDS: log unrecognised theme keywords (default: true)
    DASHCARDS_LOG_LEVEL: log level for the showcase CLI (default: INFO)
    DASHCARDS_ADMINLTE_CSS: AdminLTE stylesheet URL used by render_page()
    DASHCARDS_FONTAWESOME_CSS: Font Awesome stylesheet URL used by render_page()

Raises:
    ConfigurationError: If a configured value is invalid
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_ADMINLTE_CSS = "https://cdn.jsdelivr.net/npm/admin-lte@3.2/dist/css/adminlte.min.css"
DEFAULT_FONTAWESOME_CSS = "https://cdn.jsdelivr.net/npm/font-awesome@4.7.0/css/font-awesome.min.css"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""

    pass


@dataclass
class LibraryConfig:
    """
    Validated dashcards configuration.
    """

    warn_unknown_keywords: bool = True
    log_level: str = "INFO"
    adminlte_css: str = DEFAULT_ADMINLTE_CSS
    fontawesome_css: str = DEFAULT_FONTAWESOME_CSS

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.log_level = self.log_level.upper()
        self._validate()

    def _validate(self):
        """
        Validate configuration values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(
                f"DASHCARDS_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}: {self.log_level}"
            )

        for name, url in (("DASHCARDS_ADMINLTE_CSS", self.adminlte_css), ("DASHCARDS_FONTAWESOME_CSS", self.fontawesome_css)):
            if not url:
                raise ConfigurationError(f"{name} must not be empty")
            if not url.startswith(("https://", "http://", "/")):
                raise ConfigurationError(f"{name} must be an http(s) URL or an absolute path: {url}")


def _parse_bool(name: str, raw: str | None, default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean (true/false), got: {raw}")


def load_config() -> LibraryConfig:
    """
    Build a validated configuration from the environment.

    Returns:
        LibraryConfig: Validated configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    load_dotenv()

    return LibraryConfig(
        warn_unknown_keywords=_parse_bool(
            "DASHCARDS_WARN_UNKNOWN_KEYWORDS", os.getenv("DASHCARDS_WARN_UNKNOWN_KEYWORDS"), True
        ),
        log_level=os.getenv("DASHCARDS_LOG_LEVEL", "INFO"),
        adminlte_css=os.getenv("DASHCARDS_ADMINLTE_CSS", DEFAULT_ADMINLTE_CSS),
        fontawesome_css=os.getenv("DASHCARDS_FONTAWESOME_CSS", DEFAULT_FONTAWESOME_CSS),
    )


def keyword_warnings_enabled() -> bool:
    """
    Whether builders report unrecognised theme keywords.

    Reads DASHCARDS_WARN_UNKNOWN_KEYWORDS straight from the environment and
    never raises: only an explicit false value turns warnings off. Builders
    call this instead of get_config() so that no .env file is loaded and no
    unrelated setting is validated while building markup.
    """
    raw = os.getenv("DASHCARDS_WARN_UNKNOWN_KEYWORDS", "")
    return raw.strip().lower() not in _FALSE_VALUES


_config_instance: LibraryConfig | None = None


def get_config() -> LibraryConfig:
    """
    Get the global configuration instance (singleton pattern).

    Returns:
        LibraryConfig: The configuration
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = load_config()
    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config_instance
    _config_instance = None
