"""
Filesystem storage for snapshot files.

References are read from `reference_dir`; newly generated snapshots are
written to `output_dir` (the reference directory unless told otherwise), so
a regenerated file can be reviewed before it replaces the reference.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from ...errors import SnapshotIOError
from ...schemas.snapshot import SnapshotWrapper

logger = logging.getLogger(__name__)

_FORBIDDEN_CHARACTERS = ("(", ")")


def snapshot_filename(suite_name: str, test_name: str, ordinal: int) -> str:
    """
    Derive the file name for the n-th snapshot taken in a test.

    Parentheses are dropped and underscores become hyphens, so
    ("LoginTests", "test_submit()", 0) -> "LoginTests-test-submit-0.json".
    """
    name = f"{suite_name}-{test_name}-{ordinal}"
    for character in _FORBIDDEN_CHARACTERS:
        name = name.replace(character, "")
    name = name.replace("_", "-")
    return f"{name}.json"


class SnapshotStore:
    """
    Reads reference snapshots and writes generated ones.
    """

    def __init__(
        self,
        reference_dir: Union[str, Path],
        output_dir: Optional[Union[str, Path]] = None,
        create_dirs: bool = False,
    ):
        """
        Args:
            reference_dir: Directory holding reference snapshots
            output_dir: Directory for generated snapshots (defaults to reference_dir)
            create_dirs: Create output_dir when missing instead of failing
        """
        self.reference_dir = Path(reference_dir)
        self.output_dir = Path(output_dir) if output_dir is not None else self.reference_dir
        self.create_dirs = create_dirs

    def reference_path(self, filename: str) -> Path:
        return self.reference_dir / filename

    def output_path(self, filename: str) -> Path:
        return self.output_dir / filename

    def load(self, filename: str) -> Optional[SnapshotWrapper]:
        """
        Load a reference snapshot.

        Returns:
            The reference, or None if it does not exist or cannot be decoded
            (bad encoding, malformed JSON or an unexpected shape)

        Raises:
            SnapshotIOError: If the file exists but cannot be read
        """
        path = self.reference_path(filename)
        if not path.is_file():
            logger.debug("No reference snapshot at %s", path)
            return None

        try:
            data = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            logger.warning("Reference snapshot %s is not valid UTF-8: %s", path, e)
            return None
        except OSError as e:
            raise SnapshotIOError("read reference snapshot", path, e) from e

        try:
            return SnapshotWrapper.from_json(data)
        except (ValidationError, ValueError) as e:
            logger.warning("Reference snapshot %s is not decodable: %s", path, e)
            return None

    def write(self, snapshot: SnapshotWrapper) -> Path:
        """
        Write a generated snapshot as pretty-printed JSON.

        Returns:
            Path written to

        Raises:
            SnapshotIOError: If encoding or writing fails
        """
        path = self.output_path(snapshot.filename)

        try:
            payload = snapshot.to_json()
        except (TypeError, ValueError) as e:
            raise SnapshotIOError("encode snapshot", path, e) from e

        if self.create_dirs:
            try:
                self.output_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise SnapshotIOError("create snapshot directory", self.output_dir, e) from e
        elif not self.output_dir.is_dir():
            raise SnapshotIOError("find snapshot directory", self.output_dir)

        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload)
        except OSError as e:
            raise SnapshotIOError("write snapshot", path, e) from e

        logger.info("Wrote snapshot %s", path)
        return path
