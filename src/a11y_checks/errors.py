"""
Exception types raised by the checker.

Rule outcomes are never raised - they are returned as Violation objects.
These exceptions only cover caller mistakes and I/O that cannot be expressed
as a violation.
"""


class A11yCheckError(Exception):
    """Base class for all checker errors."""


class ConfigurationError(A11yCheckError, ValueError):
    """Invalid rule names, thresholds or configuration files."""


class SnapshotIOError(A11yCheckError):
    """
    Reading, encoding or writing a snapshot file failed.

    Attributes:
        operation: Short description of what was being attempted
        path: File the operation targeted, if known
    """

    def __init__(self, operation: str, path=None, cause: Exception = None):
        self.operation = operation
        self.path = path
        self.cause = cause
        detail = f"{operation}"
        if path is not None:
            detail += f" ({path})"
        if cause is not None:
            detail += f": {cause}"
        super().__init__(detail)
