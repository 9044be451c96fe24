"""
Pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path before any a11y_checks import
SRC_PATH = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(SRC_PATH))

from a11y_checks.config.check_config import CheckConfig  # noqa: E402
from a11y_checks.schemas.element import Element, ElementKind, Rect, Trait  # noqa: E402

ENV_VARIABLES = (
    "A11Y_MIN_MEANINGFUL_LENGTH",
    "A11Y_MAX_MEANINGFUL_LENGTH",
    "A11Y_MIN_SIZE",
    "A11Y_MIN_INTERACTIVE_SIZE",
    "A11Y_TOLERANCE",
    "A11Y_ALL_INTERACTIVE_ELEMENTS",
    "A11Y_SNAPSHOT_DIR",
)


def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line("markers", "rules: rule catalogue tests")
    config.addinivalue_line("markers", "snapshot: snapshot storage and comparison tests")
    config.addinivalue_line("markers", "cli: command line tests")


def pytest_collection_modifyitems(config, items):
    """
    Modify test items to add helpful markers.
    """
    for item in items:
        nodeid = item.nodeid.lower()
        if "snapshot" in nodeid:
            item.add_marker("snapshot")
        if "rule" in nodeid or "runner" in nodeid:
            item.add_marker("rules")
        if "cli" in nodeid:
            item.add_marker("cli")


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep threshold overrides from the developer's shell out of the tests."""
    for name in ENV_VARIABLES:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def config():
    """Default thresholds."""
    return CheckConfig()


@pytest.fixture
def make_element():
    """Factory for elements with sensible defaults."""

    def _make(
        kind=ElementKind.BUTTON,
        label="Save",
        width=100.0,
        height=50.0,
        traits=(),
        **kwargs,
    ):
        if traits is not None:
            traits = frozenset(traits)
        frame = Rect(x=kwargs.pop("x", 0.0), y=kwargs.pop("y", 0.0), width=width, height=height)
        return Element(type=kind, label=label, frame=frame, traits=traits, **kwargs)

    return _make


@pytest.fixture
def header_element(make_element):
    return make_element(
        kind=ElementKind.STATIC_TEXT,
        label="Settings",
        traits=[Trait.HEADER, Trait.STATIC_TEXT],
    )
