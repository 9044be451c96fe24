"""
Snapshot pipeline: normalize, serialize, then regenerate or diff.

A SnapshotSession owns the only state that outlives a single call: the
per-test call counter used to tell apart several snapshots taken in one
test. The counter restarts whenever a different (suite, test) is seen.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, List, Optional, Union

from ...config.check_config import CheckConfig, get_check_config
from ...errors import ConfigurationError, SnapshotIOError
from ...schemas.snapshot import SNAPSHOT_VERSION, SnapshotWrapper
from ...schemas.violation import Severity, Violation
from ...tools.accessibility.element_normalizer import normalize_elements
from ..reporting import make_violation
from .comparison import SNAPSHOT_RULE, diff_snapshots
from .serializer import serialize
from .store import SnapshotStore, snapshot_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapshotIdentity:
    """Names the test a snapshot belongs to."""

    suite_name: str
    test_name: str

    @classmethod
    def from_test_file(cls, test_file: Union[str, Path], test_name: str) -> "SnapshotIdentity":
        """Use the test file's stem as the suite name."""
        return cls(suite_name=Path(test_file).stem, test_name=test_name)


class SnapshotSession:
    """
    Takes snapshots and compares them against stored references.
    """

    def __init__(self, store: SnapshotStore, config: Optional[CheckConfig] = None):
        """
        Args:
            store: Where references are read and new snapshots written
            config: Supplies the frame tolerance and ignored identifiers
        """
        self.store = store
        self.config = (config or get_check_config()).validate()
        self._current: Optional[SnapshotIdentity] = None
        self._calls_in_test = 0

    def next_filename(self, identity: SnapshotIdentity) -> str:
        """
        File name for the next snapshot of `identity`.

        Repeated calls for the same test get increasing ordinals; a new test
        starts again at 0.
        """
        if identity == self._current:
            self._calls_in_test += 1
        else:
            self._current = identity
            self._calls_in_test = 0
        return snapshot_filename(identity.suite_name, identity.test_name, self._calls_in_test)

    def snapshot(
        self,
        elements: Iterable[Any],
        identity: SnapshotIdentity,
        trait_reader: Optional[Callable[[Any], Any]] = None,
    ) -> List[Violation]:
        """
        Snapshot the given screen and check it against its reference.

        Never raises for I/O problems: they come back as failure violations.

        Args:
            elements: Raw elements of the current screen
            identity: Suite and test taking the snapshot
            trait_reader: Fallback trait reader for raw elements

        Returns:
            Violations; a single warning when a new reference was generated
        """
        filename = self.next_filename(identity)
        normalized = normalize_elements(
            elements,
            trait_reader=trait_reader,
            ignored_identifiers=self.config.ignored_identifiers,
        )
        current = serialize(normalized, filename)

        try:
            reference = self.store.load(filename)
        except SnapshotIOError as e:
            logger.error("Unable to read reference snapshot: %s", e)
            return [
                make_violation(
                    Severity.FAILURE,
                    "Unable to read reference snapshot",
                    reason=str(e),
                    rule=SNAPSHOT_RULE,
                    filename=filename,
                )
            ]

        if reference is None:
            return self._regenerate(
                current,
                "No reference snapshot. Generated new snapshot",
                "No reference snapshot. Unable to create new reference",
            )

        return self.compare(reference, current)

    def compare(self, reference: SnapshotWrapper, current: SnapshotWrapper) -> List[Violation]:
        """
        Compare against a loaded reference.

        A reference written by an older format version is never diffed: a
        fresh snapshot is written and a single warning returned instead.
        """
        if reference.is_stale:
            logger.info(
                "Reference %s has version %s, current is %s",
                reference.filename,
                reference.version,
                SNAPSHOT_VERSION,
            )
            return self._regenerate(
                current,
                "Reference snapshot is outdated. Generated new snapshot. "
                "Check for regressions before replacing as reference",
                "Reference snapshot is outdated. Unable to create new reference",
                reference_version=reference.version,
            )

        violations = diff_snapshots(reference, current, self.config.tolerance)
        logger.debug(
            "Compared %s: %d difference(s)", current.filename, len(violations)
        )
        return violations

    def _regenerate(
        self,
        current: SnapshotWrapper,
        generated_message: str,
        failed_message: str,
        **details,
    ) -> List[Violation]:
        try:
            path = self.store.write(current)
        except SnapshotIOError as e:
            logger.error("Unable to write snapshot: %s", e)
            return [
                make_violation(
                    Severity.FAILURE,
                    failed_message,
                    reason=str(e),
                    rule=SNAPSHOT_RULE,
                    filename=current.filename,
                    **details,
                )
            ]

        return [
            make_violation(
                Severity.WARNING,
                generated_message,
                reason=f"Check {path}",
                rule=SNAPSHOT_RULE,
                filename=current.filename,
                path=str(path),
                **details,
            )
        ]


def snapshot(
    elements: Iterable[Any],
    identity: SnapshotIdentity,
    store: Optional[SnapshotStore] = None,
    session: Optional[SnapshotSession] = None,
    config: Optional[CheckConfig] = None,
) -> List[Violation]:
    """
    Snapshot a screen and compare it against its stored reference.

    Reuse one `session` across calls within a test so that several
    snapshots in the same test get distinct file names.

    Args:
        elements: Raw elements of the current screen
        identity: Suite and test taking the snapshot
        store: Snapshot storage (defaults to config.snapshot_dir)
        session: Existing session to reuse
        config: Thresholds and snapshot directory

    Raises:
        ConfigurationError: If neither a session, a store nor a snapshot
                            directory is available
    """
    if session is None:
        config = config or get_check_config()
        if store is None:
            if not config.snapshot_dir:
                raise ConfigurationError(
                    "No snapshot store given and no snapshot_dir configured"
                )
            store = SnapshotStore(config.snapshot_dir)
        session = SnapshotSession(store, config)
    return session.snapshot(elements, identity)
