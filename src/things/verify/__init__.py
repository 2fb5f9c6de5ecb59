"""
Verify module - presence checks and either-selectors
"""

from .presence import (
    verify,
    is_present,
    is_empty,
    is_not_empty,
    require_not_none,
    resolve_argument,
)
from .selection import either, either_match, either_positive, first_present

__all__ = [
    "verify",
    "is_present",
    "is_empty",
    "is_not_empty",
    "require_not_none",
    "resolve_argument",
    "either",
    "either_match",
    "either_positive",
    "first_present",
]
