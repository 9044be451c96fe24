"""
Centralized logging configuration for the checker.
"""

import logging
import warnings

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "a11y_checks"

NOISY_LIBRARIES = [
    "urllib3",
    "pydantic",
    "dotenv",
]


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False, console: Console = None) -> None:
    """
    Configure the package logger.

    Args:
        verbose: If True, log at DEBUG through rich. If False, only warnings
                 and errors are shown and third-party noise is silenced.
        console: Console to log to (defaults to stderr)
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = []

    if verbose:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG)
        package_logger.propagate = False
        return

    warnings.filterwarnings("ignore", category=DeprecationWarning)

    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        logger.handlers = [NullHandler()]

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        show_time=False,
    )
    handler.setLevel(logging.WARNING)
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.WARNING)
    package_logger.propagate = False


def silence_logging() -> None:
    """
    Discard every package log record.
    Useful when embedding the checker in a test run with its own reporting.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers = [NullHandler()]
    package_logger.propagate = False
