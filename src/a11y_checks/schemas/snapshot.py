"""
Serializable snapshot records.

SnapshotRecord is the persisted projection of an Element (no identity, no
platform handle). SnapshotWrapper is the on-disk document; its version
string is "<wrapper version>.<record version>" and is bumped whenever either
shape changes, which invalidates older references.
"""

from datetime import datetime, timezone
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from .element import Element, Rect, Trait

WRAPPER_VERSION = 1
RECORD_VERSION = 1
SNAPSHOT_VERSION = f"{WRAPPER_VERSION}.{RECORD_VERSION}"


def parse_version(version: str) -> Tuple[int, ...]:
    """
    Parse a dotted version string into a comparable tuple.

    Unparsable versions sort before every real version, so they are always
    treated as stale.
    """
    try:
        return tuple(int(part) for part in str(version).split("."))
    except (TypeError, ValueError):
        return (0,)


class SnapshotRecord(BaseModel):
    """Persisted view of one element."""

    label: str = Field(default="", description="Accessible name")
    type: str = Field(description="Element kind value, e.g. 'button'")
    traits: Optional[List[str]] = Field(
        default=None, description="Trait values in display order, null if unknown"
    )
    frame: Rect = Field(default_factory=Rect, description="Bounding box")
    enabled: bool = Field(default=True, description="Enabled state")
    placeholder: Optional[str] = Field(default=None, description="Placeholder text")
    value: Optional[str] = Field(default=None, description="Current value")

    @classmethod
    def from_element(cls, element: Element) -> "SnapshotRecord":
        traits = None
        if element.traits is not None:
            traits = [trait.value for trait in Trait.ordered(element.traits)]
        return cls(
            label=element.label,
            type=element.type.value,
            traits=traits,
            frame=element.frame,
            enabled=element.enabled,
            placeholder=element.placeholder,
            value=element.value,
        )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SnapshotWrapper(BaseModel):
    """On-disk snapshot document."""

    filename: str = Field(description="File name the snapshot is stored under")
    version: str = Field(
        default=SNAPSHOT_VERSION, description="Format version of wrapper and records"
    )
    generated: datetime = Field(
        default_factory=_utc_now, description="Generation time (ISO-8601)"
    )
    snapshot: List[SnapshotRecord] = Field(
        default_factory=list, description="Serialized elements in screen order"
    )

    @property
    def is_stale(self) -> bool:
        """Older than the format this build writes."""
        return parse_version(self.version) < parse_version(SNAPSHOT_VERSION)

    def to_json(self) -> str:
        return self.model_dump_json(indent=2)

    @classmethod
    def from_json(cls, data) -> "SnapshotWrapper":
        return cls.model_validate_json(data)
