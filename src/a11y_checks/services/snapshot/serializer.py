"""
Element to snapshot serialization.
"""

from typing import Iterable

from ...schemas.element import Element
from ...schemas.snapshot import SnapshotRecord, SnapshotWrapper


def serialize(elements: Iterable[Element], filename: str) -> SnapshotWrapper:
    """
    Build a snapshot document from elements.

    Ignored (structural) elements are dropped; the rest keep screen order.

    Args:
        elements: Normalized elements
        filename: Name the snapshot will be stored under

    Returns:
        SnapshotWrapper stamped with the current format version and time
    """
    records = [
        SnapshotRecord.from_element(element)
        for element in elements
        if not element.should_ignore
    ]
    return SnapshotWrapper(filename=filename, snapshot=records)
