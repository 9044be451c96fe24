"""
Rule vocabulary and the catalogue of checks.
"""

from .catalogue import (
    button_label,
    button_trait,
    conflicting_traits,
    disabled,
    duplicated,
    duplicated_pair,
    group_duplicates,
    has_header_trait,
    header,
    image_label,
    image_trait,
    is_duplicate_pair,
    label_length,
    label_presence,
    minimum_interactive_size,
    minimum_size,
    missing_header,
)
from .names import (
    ALL_RULES,
    IMAGE_RULES,
    INTERACTIVE_RULES,
    LABEL_RULES,
    PRESETS,
    RuleName,
    resolve_rule_set,
)

__all__ = [
    "RuleName",
    "ALL_RULES",
    "IMAGE_RULES",
    "INTERACTIVE_RULES",
    "LABEL_RULES",
    "PRESETS",
    "resolve_rule_set",
    "minimum_size",
    "minimum_interactive_size",
    "label_presence",
    "button_label",
    "image_label",
    "label_length",
    "image_trait",
    "button_trait",
    "conflicting_traits",
    "disabled",
    "has_header_trait",
    "missing_header",
    "header",
    "is_duplicate_pair",
    "duplicated_pair",
    "group_duplicates",
    "duplicated",
]
