"""
Validation utilities for numeric comparisons.
"""

from .tolerance import is_more_than_or_equal, is_within_tolerance

__all__ = [
    "is_more_than_or_equal",
    "is_within_tolerance",
]
