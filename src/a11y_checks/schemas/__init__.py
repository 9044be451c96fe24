"""
Pydantic schemas for elements, violations and snapshots.
"""

from .element import (
    CONTROL_KINDS,
    IGNORED_KINDS,
    INTERACTIVE_KINDS,
    Element,
    ElementKind,
    Rect,
    Trait,
)
from .snapshot import (
    SNAPSHOT_VERSION,
    SnapshotRecord,
    SnapshotWrapper,
    parse_version,
)
from .violation import Severity, Violation

__all__ = [
    "Element",
    "ElementKind",
    "Rect",
    "Trait",
    "IGNORED_KINDS",
    "INTERACTIVE_KINDS",
    "CONTROL_KINDS",
    "Severity",
    "Violation",
    "SnapshotRecord",
    "SnapshotWrapper",
    "SNAPSHOT_VERSION",
    "parse_version",
]
