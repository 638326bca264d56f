"""
Input Validation for Component Builders

Theme keywords are never rejected: an unknown status or gradient simply
produces a class the stylesheet does not style. Unless
DASHCARDS_WARN_UNKNOWN_KEYWORDS is false, such keywords are reported as
warnings. Keyword checks never raise.

Hard failures are limited to values that cannot be turned into markup at
all (CSS lengths, tab strip side), which raise ValidationError.
"""

from collections.abc import Collection
from typing import Any, TypeVar

from dashcards.config import keyword_warnings_enabled
from dashcards.core.logging_config import get_logger, log_with_context

logger = get_logger(__name__)

K = TypeVar("K")


class ValidationError(ValueError):
    """
    Raised when a builder argument cannot be rendered.
    """

    pass


def check_keyword(value: K, allowed: Collection[Any], parameter: str) -> K:
    """
    Report a theme keyword outside the recognised set and return it unchanged.

    Args:
        value: Keyword supplied by the caller (None is always accepted)
        allowed: Recognised values
        parameter: Parameter name, used in the warning

    Returns:
        The value, untouched

    Example:
        >>> check_keyword("primary", theme_keywords.STATUSES, "status")
        'primary'
    """
    if value is None or value in allowed:
        return value

    if keyword_warnings_enabled():
        log_with_context(
            logger,
            "warning",
            f"Unrecognised {parameter} keyword: {value!r}",
            parameter=parameter,
            keyword=value,
        )
    return value


def check_choice(value: str, choices: Collection[str], parameter: str) -> str:
    """
    Require value to be one of choices.

    Raises:
        ValidationError: If value is not an accepted choice
    """
    if value not in choices:
        raise ValidationError(f"{parameter} must be one of {', '.join(map(repr, choices))}, got {value!r}")
    return value
