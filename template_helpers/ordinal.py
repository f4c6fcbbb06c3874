"""
Ordinal number formatting.
Provides the ordinalizer interface and the default English implementation.
"""

from abc import ABC, abstractmethod


def ordinal_suffix(n: int) -> str:
    """
    Return the English ordinal suffix for an integer.

    Args:
        n: Integer to get the suffix for (sign is ignored)

    Returns:
        One of "st", "nd", "rd" or "th"
    """
    n = abs(n)
    if 11 <= (n % 100) <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


class BaseOrdinalizer(ABC):
    """Abstract base class for ordinal formatters."""

    @abstractmethod
    def to_ordinal(self, number: int) -> str:
        """
        Render an integer as an ordinal string.
        Must be implemented by each ordinalizer.
        """
        pass


class EnglishOrdinalizer(BaseOrdinalizer):
    """English ordinals: 1st, 2nd, 3rd, 4th, 11th, 21st, -1st."""

    def to_ordinal(self, number: int) -> str:
        return f"{number}{ordinal_suffix(number)}"


# Default ordinalizer instance
english = EnglishOrdinalizer()
