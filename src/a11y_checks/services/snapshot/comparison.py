"""
Field-by-field snapshot comparison.

Records are compared positionally. Label, type and enabled state must match
exactly, traits as an unordered set, and each frame component within the
configured tolerance. Every mismatch is its own failure so a report names
the exact field that moved.
"""

from typing import Any, List

from ...schemas.element import Element, ElementKind, Rect
from ...schemas.snapshot import SnapshotRecord, SnapshotWrapper
from ...schemas.violation import Severity, Violation
from ...utils.validation.tolerance import is_within_tolerance
from ..reporting import make_violation

SNAPSHOT_RULE = "snapshot"

_FRAME_FIELDS = ("x", "y", "width", "height")


def record_element(record: SnapshotRecord) -> Element:
    """Rebuild a display-only Element from a record, for report lines."""
    try:
        kind = ElementKind(record.type)
    except ValueError:
        kind = ElementKind.OTHER
    return Element(
        label=record.label,
        frame=record.frame,
        type=kind,
        traits=None,
        enabled=record.enabled,
        placeholder=record.placeholder,
        value=record.value,
    )


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.2f}"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ", ".join(sorted(str(v) for v in value)) or "None"
    return str(value)


def _mismatch(
    message: str,
    field: str,
    reference: Any,
    current: Any,
    element: Element,
    index: int,
    reason_field: str = "",
) -> Violation:
    ref_label = f"Reference {reason_field}".rstrip()
    snap_label = f"Snapshot {reason_field}".rstrip()
    return make_violation(
        Severity.FAILURE,
        message,
        element,
        reason=f"{ref_label}: {_format_value(reference)}. "
        f"{snap_label}: {_format_value(current)}",
        rule=SNAPSHOT_RULE,
        field=field,
        reference=reference,
        current=current,
        label=element.label,
        index=index,
    )


def compare_frames(
    reference: Rect, current: Rect, element: Element, index: int, tolerance: float
) -> List[Violation]:
    """One failure per frame component that moved by more than tolerance."""
    violations = []
    for name in _FRAME_FIELDS:
        ref_value = getattr(reference, name)
        cur_value = getattr(current, name)
        if is_within_tolerance(ref_value, cur_value, tolerance):
            continue
        violations.append(
            _mismatch(
                "Frame does not match reference snapshot",
                f"frame.{name}",
                ref_value,
                cur_value,
                element,
                index,
                reason_field=name,
            )
        )
    return violations


def compare_records(
    reference: SnapshotRecord, current: SnapshotRecord, index: int, tolerance: float
) -> List[Violation]:
    """Compare two records occupying the same position."""
    element = record_element(current)
    violations = []

    if reference.label != current.label:
        violations.append(
            _mismatch(
                "Label does not match reference snapshot",
                "label",
                reference.label,
                current.label,
                element,
                index,
            )
        )

    if reference.type != current.type:
        violations.append(
            _mismatch(
                "Type does not match reference snapshot",
                "type",
                reference.type,
                current.type,
                element,
                index,
            )
        )

    ref_traits = set(reference.traits or ())
    cur_traits = set(current.traits or ())
    if ref_traits != cur_traits:
        violations.append(
            _mismatch(
                "Traits do not match reference snapshot",
                "traits",
                sorted(ref_traits),
                sorted(cur_traits),
                element,
                index,
            )
        )

    if reference.enabled != current.enabled:
        violations.append(
            _mismatch(
                "Enabled status does not match reference snapshot",
                "enabled",
                reference.enabled,
                current.enabled,
                element,
                index,
            )
        )

    violations.extend(
        compare_frames(reference.frame, current.frame, element, index, tolerance)
    )
    return violations


def diff_snapshots(
    reference: SnapshotWrapper, current: SnapshotWrapper, tolerance: float = 0.1
) -> List[Violation]:
    """
    Compare a current snapshot against a same-version reference.

    A differing element count is reported first; records are then compared
    up to the shorter of the two lists.

    Args:
        reference: Stored reference snapshot
        current: Freshly generated snapshot
        tolerance: Allowed frame drift per component

    Returns:
        Failure violations, empty when the screens match
    """
    violations = []

    ref_count = len(reference.snapshot)
    cur_count = len(current.snapshot)
    if ref_count != cur_count:
        violations.append(
            make_violation(
                Severity.FAILURE,
                "Snapshots contain a different number of items. This screen has changed",
                reason=f"Reference: {ref_count}. Snapshot: {cur_count}",
                rule=SNAPSHOT_RULE,
                field="count",
                reference=ref_count,
                current=cur_count,
            )
        )

    for index, (ref_record, cur_record) in enumerate(
        zip(reference.snapshot, current.snapshot)
    ):
        violations.extend(compare_records(ref_record, cur_record, index, tolerance))

    return violations
