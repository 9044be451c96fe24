"""
Logging configuration.
"""

from .logging_config import setup_logging, silence_logging

__all__ = [
    "setup_logging",
    "silence_logging",
]
