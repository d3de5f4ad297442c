"""
Utils package for sprite editor
Provides validation helpers and the key=value document codec
"""

from .properties import format_properties, parse_properties
from .validation import (
    require_in_range,
    require_not_blank,
    require_not_none,
    require_positive,
)

__all__ = [
    "format_properties",
    "parse_properties",
    "require_in_range",
    "require_not_blank",
    "require_not_none",
    "require_positive",
]
