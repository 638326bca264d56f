"""
Core Infrastructure - Logging

Usage:
    from dashcards.core import get_logger

    logger = get_logger(__name__)
"""

from .logging_config import ContextFormatter, JSONFormatter, get_logger, log_with_context, setup_logging

__all__ = [
    "get_logger",
    "log_with_context",
    "setup_logging",
    "JSONFormatter",
    "ContextFormatter",
]
