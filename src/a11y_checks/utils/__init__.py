"""
Utility modules organized by domain.

Submodules:
- validation: Tolerance-aware numeric comparisons
- logging: Logging configuration
- ui: Rich rendering of violation reports
"""

from .validation import is_more_than_or_equal, is_within_tolerance

__all__ = [
    "is_more_than_or_equal",
    "is_within_tolerance",
]
