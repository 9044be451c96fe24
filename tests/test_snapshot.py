"""
Tests for snapshot serialization, storage and comparison.
"""

import json
from unittest.mock import Mock

import pytest

from a11y_checks.config.check_config import CheckConfig
from a11y_checks.errors import ConfigurationError, SnapshotIOError
from a11y_checks.schemas.element import ElementKind, Trait
from a11y_checks.schemas.snapshot import (
    SNAPSHOT_VERSION,
    SnapshotRecord,
    SnapshotWrapper,
    parse_version,
)
from a11y_checks.schemas.violation import Severity
from a11y_checks.services.snapshot import (
    SnapshotIdentity,
    SnapshotSession,
    SnapshotStore,
    diff_snapshots,
    serialize,
    snapshot,
    snapshot_filename,
)

IDENTITY = SnapshotIdentity(suite_name="LoginTests", test_name="test_submit()")
FILENAME = "LoginTests-test-submit-0.json"


@pytest.fixture
def screen(make_element, header_element):
    return [
        header_element,
        make_element(label="Save", x=1, traits=[Trait.BUTTON]),
        make_element(kind=ElementKind.WINDOW, label=""),
    ]


@pytest.fixture
def session(tmp_path, config):
    return SnapshotSession(SnapshotStore(tmp_path), config)


def record(**kwargs):
    values = {"label": "Save", "type": "button", "traits": ["button"]}
    values.update(kwargs)
    return SnapshotRecord(**values)


class TestFileNames:
    def test_sanitized_name(self):
        assert snapshot_filename("LoginTests", "test_submit()", 0) == FILENAME

    def test_identity_from_test_file(self):
        identity = SnapshotIdentity.from_test_file("/src/tests/LoginTests.py", "test_submit()")
        assert identity == IDENTITY

    def test_counter_per_test(self, session):
        other = SnapshotIdentity(suite_name="LoginTests", test_name="test_cancel")

        names = [
            session.next_filename(IDENTITY),
            session.next_filename(IDENTITY),
            session.next_filename(other),
            session.next_filename(IDENTITY),
        ]

        assert names == [
            "LoginTests-test-submit-0.json",
            "LoginTests-test-submit-1.json",
            "LoginTests-test-cancel-0.json",
            "LoginTests-test-submit-0.json",
        ]


class TestSerialize:
    def test_ignored_elements_dropped(self, screen):
        wrapper = serialize(screen, FILENAME)

        assert wrapper.version == SNAPSHOT_VERSION
        assert [r.label for r in wrapper.snapshot] == ["Settings", "Save"]
        assert wrapper.snapshot[0].traits == ["header", "staticText"]

    def test_unknown_traits_stay_null(self, make_element):
        wrapper = serialize([make_element(traits=None)], FILENAME)
        assert wrapper.snapshot[0].traits is None


class TestVersions:
    def test_parse(self):
        assert parse_version("1.1") == (1, 1)
        assert parse_version("garbage") == (0,)

    def test_staleness(self):
        assert SnapshotWrapper(filename=FILENAME, version="1.0").is_stale
        assert not SnapshotWrapper(filename=FILENAME).is_stale
        assert not SnapshotWrapper(filename=FILENAME, version="2.0").is_stale
        assert SnapshotWrapper(filename=FILENAME, version="x").is_stale


class TestDiff:
    def _wrap(self, *records):
        return SnapshotWrapper(filename=FILENAME, snapshot=list(records))

    def test_identical_snapshots(self):
        assert diff_snapshots(self._wrap(record()), self._wrap(record())) == []

    def test_frame_within_tolerance(self):
        reference = self._wrap(record(frame={"x": 1.0}))
        current = self._wrap(record(frame={"x": 1.05}))
        assert diff_snapshots(reference, current, 0.1) == []

    def test_frame_beyond_tolerance(self):
        reference = self._wrap(record(frame={"x": 1.0}))
        current = self._wrap(record(frame={"x": 3.0}))

        violations = diff_snapshots(reference, current, 0.1)

        assert len(violations) == 1
        assert violations[0].message == "Frame does not match reference snapshot"
        assert violations[0].reason == "Reference x: 1.00. Snapshot x: 3.00"
        assert violations[0].details["field"] == "frame.x"

    def test_each_field_reported(self):
        reference = self._wrap(record())
        current = self._wrap(
            record(label="Submit", type="link", traits=["link"], enabled=False)
        )

        violations = diff_snapshots(reference, current)

        assert [v.message for v in violations] == [
            "Label does not match reference snapshot",
            "Type does not match reference snapshot",
            "Traits do not match reference snapshot",
            "Enabled status does not match reference snapshot",
        ]
        assert violations[0].reason == "Reference: Save. Snapshot: Submit"
        assert all(v.severity == Severity.FAILURE for v in violations)

    def test_trait_order_does_not_matter(self):
        reference = self._wrap(record(traits=["button", "selected"]))
        current = self._wrap(record(traits=["selected", "button"]))
        assert diff_snapshots(reference, current) == []

    def test_unknown_and_empty_traits_match(self):
        assert diff_snapshots(self._wrap(record(traits=None)), self._wrap(record(traits=[]))) == []

    def test_count_mismatch_reported_first(self):
        reference = self._wrap(record(), record(label="Cancel"))
        current = self._wrap(record(label="Submit"))

        violations = diff_snapshots(reference, current)

        assert violations[0].message == (
            "Snapshots contain a different number of items. This screen has changed"
        )
        assert violations[0].reason == "Reference: 2. Snapshot: 1"
        assert [v.details["field"] for v in violations[1:]] == ["label"]


class TestSession:
    def test_first_run_writes_reference(self, session, screen, tmp_path):
        violations = session.snapshot(screen, IDENTITY)

        assert len(violations) == 1
        assert violations[0].severity == Severity.WARNING
        assert violations[0].message == "No reference snapshot. Generated new snapshot"
        data = json.loads((tmp_path / FILENAME).read_text())
        assert data["version"] == SNAPSHOT_VERSION
        assert [r["label"] for r in data["snapshot"]] == ["Settings", "Save"]

    def test_unchanged_screen_matches(self, tmp_path, screen, config):
        SnapshotSession(SnapshotStore(tmp_path), config).snapshot(screen, IDENTITY)

        violations = SnapshotSession(SnapshotStore(tmp_path), config).snapshot(screen, IDENTITY)

        assert violations == []

    def test_moved_element_detected(self, tmp_path, screen, make_element, config):
        SnapshotSession(SnapshotStore(tmp_path), config).snapshot(screen, IDENTITY)
        moved = [screen[0], make_element(label="Save", x=3, traits=[Trait.BUTTON])]

        violations = SnapshotSession(SnapshotStore(tmp_path), config).snapshot(moved, IDENTITY)

        assert [v.text for v in violations] == [
            'Accessibility Failure: Frame does not match reference snapshot: "Save" Button. '
            "Reference x: 1.00. Snapshot x: 3.00."
        ]
        assert violations[0].rule == "snapshot"

    def test_stale_reference_regenerated_without_diff(self, tmp_path, screen, session):
        stale = SnapshotWrapper(filename=FILENAME, version="1.0", snapshot=[record(label="Old")])
        (tmp_path / FILENAME).write_text(stale.to_json())

        violations = session.snapshot(screen, IDENTITY)

        assert len(violations) == 1
        assert violations[0].severity == Severity.WARNING
        assert violations[0].message.startswith("Reference snapshot is outdated")
        assert json.loads((tmp_path / FILENAME).read_text())["version"] == SNAPSHOT_VERSION

    def test_undecodable_reference_is_regenerated(self, tmp_path, screen, session):
        (tmp_path / FILENAME).write_text("{not json")

        violations = session.snapshot(screen, IDENTITY)

        assert [v.message for v in violations] == ["No reference snapshot. Generated new snapshot"]

    def test_reference_with_invalid_utf8_is_regenerated(self, tmp_path, screen, session):
        (tmp_path / FILENAME).write_bytes(b'{"filename": "\xff\xfe bad"}')

        violations = session.snapshot(screen, IDENTITY)

        assert [v.message for v in violations] == ["No reference snapshot. Generated new snapshot"]
        assert json.loads((tmp_path / FILENAME).read_text())["version"] == SNAPSHOT_VERSION

    def test_unreadable_reference_becomes_violation(self, tmp_path, screen, config):
        store = Mock(spec=SnapshotStore)
        store.load.side_effect = SnapshotIOError(
            "read reference snapshot", tmp_path / FILENAME, PermissionError("denied")
        )

        violations = SnapshotSession(store, config).snapshot(screen, IDENTITY)

        assert len(violations) == 1
        assert violations[0].severity == Severity.FAILURE
        assert violations[0].message == "Unable to read reference snapshot"
        assert violations[0].rule == "snapshot"
        assert violations[0].details["filename"] == FILENAME
        store.write.assert_not_called()

    def test_write_failure_becomes_violation(self, tmp_path, screen, config):
        store = SnapshotStore(tmp_path, output_dir=tmp_path / "missing")

        violations = SnapshotSession(store, config).snapshot(screen, IDENTITY)

        assert len(violations) == 1
        assert violations[0].severity == Severity.FAILURE
        assert violations[0].message == "No reference snapshot. Unable to create new reference"

    def test_output_dir_created_on_request(self, tmp_path, screen, config):
        store = SnapshotStore(tmp_path, output_dir=tmp_path / "new", create_dirs=True)

        SnapshotSession(store, config).snapshot(screen, IDENTITY)

        assert (tmp_path / "new" / FILENAME).is_file()

    def test_ignored_identifiers_not_serialized(self, tmp_path, screen, make_element):
        config = CheckConfig(ignored_identifiers=("spinner",))
        screen = screen + [make_element(label="Loading", identifier="spinner")]

        SnapshotSession(SnapshotStore(tmp_path), config).snapshot(screen, IDENTITY)

        data = json.loads((tmp_path / FILENAME).read_text())
        assert "Loading" not in [r["label"] for r in data["snapshot"]]


class TestStore:
    def test_missing_reference_loads_as_none(self, tmp_path):
        assert SnapshotStore(tmp_path).load(FILENAME) is None

    def test_invalid_utf8_loads_as_none(self, tmp_path):
        (tmp_path / FILENAME).write_bytes(b"\xff\xfe")
        assert SnapshotStore(tmp_path).load(FILENAME) is None

    def test_write_to_missing_directory_raises(self, tmp_path):
        store = SnapshotStore(tmp_path / "absent")
        with pytest.raises(SnapshotIOError):
            store.write(SnapshotWrapper(filename=FILENAME))


class TestSnapshotFunction:
    def test_requires_a_store(self, screen):
        with pytest.raises(ConfigurationError):
            snapshot(screen, IDENTITY, config=CheckConfig())

    def test_uses_configured_directory(self, screen, tmp_path):
        config = CheckConfig(snapshot_dir=str(tmp_path))

        violations = snapshot(screen, IDENTITY, config=config)

        assert violations[0].severity == Severity.WARNING
        assert (tmp_path / FILENAME).is_file()
