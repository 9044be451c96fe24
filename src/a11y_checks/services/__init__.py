"""
Services module - organized by domain.

Submodules:
- rules: Rule vocabulary and the catalogue of checks
- runner: Rule orchestration over a screen of elements
- reporting: Violation message construction
- snapshot: Snapshot serialization, storage and comparison
"""

from .reporting import describe_element, format_message, format_report, trait_names
from .runner import RuleRunner, RunContext, evaluate, evaluate_source
from .snapshot import SnapshotIdentity, SnapshotSession, SnapshotStore, snapshot

__all__ = [
    "RuleRunner",
    "RunContext",
    "evaluate",
    "evaluate_source",
    "format_message",
    "format_report",
    "describe_element",
    "trait_names",
    "SnapshotIdentity",
    "SnapshotSession",
    "SnapshotStore",
    "snapshot",
]
