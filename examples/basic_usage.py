"""
Basic usage examples for a11y-checks.
"""

import tempfile

from a11y_checks import (
    SnapshotIdentity,
    SnapshotSession,
    SnapshotStore,
    check_duplicated,
    evaluate,
)
from a11y_checks.utils.ui import print_violations

SCREEN = [
    {"type": "staticText", "label": "Settings", "frame": [0, 0, 320, 30], "traits": ["header"]},
    {"type": "button", "label": "save button", "frame": [0, 40, 120, 30], "traits": ["button"]},
    {"type": "image", "label": "avatar_icon.png", "frame": [0, 80, 64, 64], "traits": []},
    {"type": "switch", "label": "Wi-Fi", "frame": [0, 150, 51, 31], "enabled": False},
]


def example_full_check():
    """
    Example: Run every rule over a screen.
    """
    print("\n" + "=" * 60)
    print("Example 1: All rules")
    print("=" * 60)

    print_violations(evaluate(["all"], SCREEN))


def example_preset():
    """
    Example: Only image rules.
    """
    print("\n" + "=" * 60)
    print("Example 2: Image preset")
    print("=" * 60)

    for violation in evaluate(["images"], SCREEN):
        print(violation)


def example_duplicates():
    print("\n" + "=" * 60)
    print("Example 3: Duplicate labels")
    print("=" * 60)

    first = {"type": "button", "label": "Next", "id": 1}
    second = {"type": "button", "label": "Next", "id": 2}
    for violation in check_duplicated(first, second):
        print(violation)


def example_snapshot():
    """
    Example: Generate a reference, then compare a changed screen against it.
    """
    print("\n" + "=" * 60)
    print("Example 4: Snapshots")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as directory:
        identity = SnapshotIdentity(suite_name="SettingsTests", test_name="test_open")

        first = SnapshotSession(SnapshotStore(directory)).snapshot(SCREEN, identity)
        print_violations(first)

        changed = [dict(SCREEN[0]), dict(SCREEN[1], frame=[0, 44, 120, 30])] + SCREEN[2:]
        second = SnapshotSession(SnapshotStore(directory)).snapshot(changed, identity)
        print_violations(second)


if __name__ == "__main__":
    example_full_check()
    example_preset()
    example_duplicates()
    example_snapshot()
