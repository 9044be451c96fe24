"""
Accessibility checks for UI element trees.
"""

from .checks import (
    check_button_label,
    check_button_trait,
    check_conflicting_traits,
    check_disabled,
    check_duplicated,
    check_header,
    check_image_label,
    check_image_trait,
    check_label_length,
    check_label_presence,
    check_minimum_interactive_size,
    check_minimum_size,
)
from .config import CheckConfig, ItemLabel, create_custom_config, get_check_config
from .errors import A11yCheckError, ConfigurationError, SnapshotIOError
from .schemas import Element, ElementKind, Rect, Severity, Trait, Violation
from .services.rules import RuleName
from .services.runner import RuleRunner, evaluate, evaluate_source
from .services.snapshot import (
    SnapshotIdentity,
    SnapshotSession,
    SnapshotStore,
    snapshot,
)
from .tools.accessibility import ElementSource, StaticElementSource

__version__ = "0.1.0"

__all__ = [
    "evaluate",
    "evaluate_source",
    "RuleRunner",
    "RuleName",
    "snapshot",
    "SnapshotIdentity",
    "SnapshotSession",
    "SnapshotStore",
    "Element",
    "ElementKind",
    "Rect",
    "Trait",
    "Severity",
    "Violation",
    "ElementSource",
    "StaticElementSource",
    "CheckConfig",
    "ItemLabel",
    "get_check_config",
    "create_custom_config",
    "A11yCheckError",
    "ConfigurationError",
    "SnapshotIOError",
    "check_minimum_size",
    "check_minimum_interactive_size",
    "check_label_presence",
    "check_button_label",
    "check_image_label",
    "check_label_length",
    "check_image_trait",
    "check_button_trait",
    "check_conflicting_traits",
    "check_disabled",
    "check_header",
    "check_duplicated",
]
