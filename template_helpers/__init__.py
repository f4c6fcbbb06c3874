"""
Template Helpers
================
String formatting helpers for template rendering.
"""

from .exceptions import InvalidArgumentError, TemplateHelpersError
from .helpers import (
    DESC_TRUNCATE_MAX,
    TEMPLATE_HELPERS,
    beautify_desc,
    ordinalize,
    truncate_desc,
    user_link,
)
from .ordinal import BaseOrdinalizer, EnglishOrdinalizer, ordinal_suffix

__version__ = "0.1.0"

__all__ = [
    "DESC_TRUNCATE_MAX",
    "TEMPLATE_HELPERS",
    "ordinalize",
    "user_link",
    "beautify_desc",
    "truncate_desc",
    "BaseOrdinalizer",
    "EnglishOrdinalizer",
    "ordinal_suffix",
    "TemplateHelpersError",
    "InvalidArgumentError",
]
