"""
Console rendering.
"""

from .report import console, print_violations, render_violations, summarize
from .theme import THEME

__all__ = [
    "THEME",
    "console",
    "render_violations",
    "summarize",
    "print_violations",
]
