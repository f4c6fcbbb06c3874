"""
Helper functions for rendering templates.
Ordinal numbers, GitHub user links and one-line descriptions.
"""

import logging
from typing import Any, Callable, Dict, Optional

from .exceptions import InvalidArgumentError
from .ordinal import BaseOrdinalizer, english

logger = logging.getLogger(__name__)

DESC_TRUNCATE_MAX = 80

GITHUB_URL = "https://github.com"


def _require(value: Any, expected: type, name: str, helper: str) -> None:
    """Raise InvalidArgumentError unless value is an instance of expected (bools are never ints)."""
    if isinstance(value, bool) or not isinstance(value, expected):
        logger.debug(f"{helper}: rejected {name}={value!r}")
        raise InvalidArgumentError(
            f"{helper}() expects {name} to be {expected.__name__}, got {type(value).__name__}"
        )


def ordinalize(number: int, ordinalizer: Optional[BaseOrdinalizer] = None) -> str:
    """
    Format an integer as an ordinal.

    Args:
        number: Integer to format
        ordinalizer: Ordinalizer to delegate to (defaults to English)

    Returns:
        Ordinal string (e.g., "1st", "22nd", "111th")
    """
    _require(number, int, "number", "ordinalize")
    return (english if ordinalizer is None else ordinalizer).to_ordinal(number)


def user_link(username: str) -> str:
    """
    Build a markdown link to a GitHub user.

    Args:
        username: GitHub login

    Returns:
        Markdown link (e.g., "[@octocat](https://github.com/octocat)")
    """
    _require(username, str, "username", "user_link")
    return f"[@{username}]({GITHUB_URL}/{username})"


def beautify_desc(desc: str) -> str:
    """
    Flatten a multi-line description onto one line.

    Every newline becomes ", ". The text is not truncated;
    use truncate_desc for that.

    Args:
        desc: Description text

    Returns:
        Description with newlines replaced
    """
    _require(desc, str, "desc", "beautify_desc")
    return desc.replace("\n", ", ")


def truncate_desc(desc: str, max_length: int = DESC_TRUNCATE_MAX, suffix: str = "...") -> str:
    """
    Truncate a description to max length.

    Args:
        desc: Description to truncate
        max_length: Maximum length of the result, suffix included
        suffix: Suffix to add when truncated

    Returns:
        Truncated description
    """
    _require(desc, str, "desc", "truncate_desc")
    _require(max_length, int, "max_length", "truncate_desc")
    _require(suffix, str, "suffix", "truncate_desc")
    if max_length <= 0:
        raise InvalidArgumentError(f"truncate_desc() expects a positive max_length, got {max_length}")

    if len(desc) <= max_length:
        return desc
    if max_length <= len(suffix):
        return desc[:max_length]

    return desc[:max_length - len(suffix)] + suffix


# Names exposed to templates
TEMPLATE_HELPERS: Dict[str, Callable[..., str]] = {
    "ordinalize": ordinalize,
    "user_link": user_link,
    "beautify_desc": beautify_desc,
    "truncate_desc": truncate_desc,
}
