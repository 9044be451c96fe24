"""
Snapshot serialization, storage and comparison.
"""

from .comparison import SNAPSHOT_RULE, compare_records, diff_snapshots
from .serializer import serialize
from .session import SnapshotIdentity, SnapshotSession, snapshot
from .store import SnapshotStore, snapshot_filename

__all__ = [
    "serialize",
    "diff_snapshots",
    "compare_records",
    "SNAPSHOT_RULE",
    "SnapshotStore",
    "snapshot_filename",
    "SnapshotIdentity",
    "SnapshotSession",
    "snapshot",
]
