"""
Single-rule convenience checks on raw elements.

Each call normalizes its input and runs one rule from the catalogue, for
callers that want to assert a specific property of one element without
building a rule set.
"""

from typing import Any, Iterable, List, Optional

from .config.check_config import CheckConfig, get_check_config
from .schemas.violation import Violation
from .services.rules import catalogue
from .tools.accessibility.element_normalizer import from_raw, normalize_elements


def _single(rule, element: Any, config: Optional[CheckConfig]) -> List[Violation]:
    config = (config or get_check_config()).validate()
    return rule(from_raw(element), config)


def check_minimum_size(element: Any, config: Optional[CheckConfig] = None) -> List[Violation]:
    return _single(catalogue.minimum_size, element, config)


def check_minimum_interactive_size(
    element: Any, config: Optional[CheckConfig] = None
) -> List[Violation]:
    return _single(catalogue.minimum_interactive_size, element, config)


def check_label_presence(element: Any, config: Optional[CheckConfig] = None) -> List[Violation]:
    return _single(catalogue.label_presence, element, config)


def check_button_label(element: Any, config: Optional[CheckConfig] = None) -> List[Violation]:
    return _single(catalogue.button_label, element, config)


def check_image_label(element: Any, config: Optional[CheckConfig] = None) -> List[Violation]:
    return _single(catalogue.image_label, element, config)


def check_label_length(element: Any, config: Optional[CheckConfig] = None) -> List[Violation]:
    return _single(catalogue.label_length, element, config)


def check_image_trait(element: Any, config: Optional[CheckConfig] = None) -> List[Violation]:
    return _single(catalogue.image_trait, element, config)


def check_button_trait(element: Any, config: Optional[CheckConfig] = None) -> List[Violation]:
    return _single(catalogue.button_trait, element, config)


def check_conflicting_traits(
    element: Any, config: Optional[CheckConfig] = None
) -> List[Violation]:
    return _single(catalogue.conflicting_traits, element, config)


def check_disabled(element: Any, config: Optional[CheckConfig] = None) -> List[Violation]:
    return _single(catalogue.disabled, element, config)


def check_header(elements: Iterable[Any]) -> List[Violation]:
    """Fail when none of the elements carries the header trait."""
    return catalogue.header(normalize_elements(elements))


def check_duplicated(first: Any, second: Any) -> List[Violation]:
    """
    Warn when two distinct controls share a non-empty label.

    Passing the same element twice never reports.
    """
    return catalogue.duplicated_pair(from_raw(first), from_raw(second))


__all__ = [
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
