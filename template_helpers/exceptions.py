"""
Exception hierarchy for the template helpers.
"""


class TemplateHelpersError(Exception):
    """Base class for all template helper errors."""


class InvalidArgumentError(TemplateHelpersError, TypeError, ValueError):
    """Raised when a helper receives an argument of the wrong type or range."""
