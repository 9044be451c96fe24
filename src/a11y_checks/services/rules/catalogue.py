"""
Rule catalogue.

Every rule is a pure function returning a list of violations; an empty list
means the rule passed or did not apply to the element. Rules never raise for
domain conditions and never depend on each other.
"""

from typing import Dict, Iterable, List, Sequence

from ...config.check_config import DEFAULT_CONFIG, CheckConfig
from ...schemas.element import Element, ElementKind, Trait
from ...schemas.violation import Severity, Violation
from ...utils.validation.tolerance import is_more_than_or_equal
from ..reporting import make_violation, trait_names
from .names import RuleName

# Traits that signal interaction and therefore imply a button trait
INTERACTIVE_SIGNAL_TRAITS = (
    Trait.CAUSES_PAGE_TURN,
    Trait.PLAYS_SOUND,
    Trait.STARTS_MEDIA_SESSION,
)


def _size_violations(
    element: Element,
    threshold: float,
    tolerance: float,
    severity: Severity,
    prefix: str,
    rule: RuleName,
) -> List[Violation]:
    violations = []
    reason = f"Minimum size: {threshold:g}"
    if not is_more_than_or_equal(element.frame.height, threshold, tolerance):
        violations.append(
            make_violation(
                severity,
                f"{prefix} not tall enough",
                element,
                reason=reason,
                rule=rule.value,
                dimension="height",
                actual=element.frame.height,
                minimum=threshold,
            )
        )
    if not is_more_than_or_equal(element.frame.width, threshold, tolerance):
        violations.append(
            make_violation(
                severity,
                f"{prefix} not wide enough",
                element,
                reason=reason,
                rule=rule.value,
                dimension="width",
                actual=element.frame.width,
                minimum=threshold,
            )
        )
    return violations


def minimum_size(element: Element, config: CheckConfig = DEFAULT_CONFIG) -> List[Violation]:
    """
    Any visible element should be at least `min_size` tall and wide.

    Returns:
        One warning per undersized dimension
    """
    if element.should_ignore:
        return []
    return _size_violations(
        element,
        config.min_size,
        config.tolerance,
        Severity.WARNING,
        "Element",
        RuleName.MINIMUM_SIZE,
    )


def minimum_interactive_size(
    element: Element, config: CheckConfig = DEFAULT_CONFIG
) -> List[Violation]:
    """
    Controls should be at least `min_interactive_size` tall and wide.

    Only buttons and cells are checked unless `all_interactive_elements` is
    set, in which case every control is.

    Returns:
        One failure per undersized dimension
    """
    if not element.is_control:
        return []
    if not config.all_interactive_elements and not element.is_interactive:
        return []
    return _size_violations(
        element,
        config.min_interactive_size,
        config.tolerance,
        Severity.FAILURE,
        "Interactive element",
        RuleName.MINIMUM_INTERACTIVE_SIZE,
    )


def label_presence(element: Element, config: CheckConfig = DEFAULT_CONFIG) -> List[Violation]:
    """
    Elements other than cells need a meaningful label.

    A placeholder standing in for a missing label is reported as a failure
    in its own right, since the placeholder vanishes once text is entered.
    """
    if element.should_ignore or element.type == ElementKind.CELL:
        return []

    if not element.label and element.placeholder:
        return [
            make_violation(
                Severity.FAILURE,
                "Placeholder is not a label",
                element,
                reason=f"Placeholder: {element.placeholder}",
                rule=RuleName.LABEL_PRESENCE.value,
                placeholder=element.placeholder,
            )
        ]

    if len(element.label) > config.min_meaningful_length:
        return []

    return [
        make_violation(
            Severity.WARNING,
            "Label not meaningful",
            element,
            reason=f"Minimum length: {config.min_meaningful_length}",
            rule=RuleName.LABEL_PRESENCE.value,
            length=len(element.label),
        )
    ]


def button_label(element: Element, config: CheckConfig = DEFAULT_CONFIG) -> List[Violation]:
    """
    Control labels should not say "button", should not contain full stops
    and should start with a capital letter.
    """
    if not element.is_control:
        return []

    rule = RuleName.BUTTON_LABEL.value
    label = element.label
    violations = []

    # TODO: localise the "button" word check
    if "button" in label.lower():
        violations.append(
            make_violation(
                Severity.FAILURE,
                "Button should not contain the word button in the accessibility label",
                element,
                rule=rule,
            )
        )

    if label and not label[0].isupper():
        violations.append(
            make_violation(
                Severity.FAILURE,
                "Buttons should begin with a capital letter",
                element,
                rule=rule,
            )
        )

    if "." in label:
        violations.append(
            make_violation(
                Severity.FAILURE,
                "Button accessibility labels shouldn't contain punctuation",
                element,
                rule=rule,
            )
        )

    return violations


def _offending_words(label: str, words: Iterable[str]) -> List[str]:
    lowered = label.lower()
    return [word for word in words if word.lower() in lowered]


def image_label(element: Element, config: CheckConfig = DEFAULT_CONFIG) -> List[Violation]:
    """
    Image labels should describe the image, not announce that it is one and
    not leak a file name.

    Returns:
        One failure per offending word
    """
    if element.type != ElementKind.IMAGE:
        return []

    rule = RuleName.IMAGE_LABEL.value
    violations = []

    for word in _offending_words(element.label, config.image_words):
        violations.append(
            make_violation(
                Severity.FAILURE,
                "Images should not contain image words in the accessibility label",
                element,
                reason=f"Offending word: {word}",
                rule=rule,
                word=word,
            )
        )

    for token in _offending_words(element.label, config.filename_tokens):
        violations.append(
            make_violation(
                Severity.FAILURE,
                "Image file name is used as the accessibility label",
                element,
                reason=f"Offending word: {token}",
                rule=rule,
                word=token,
            )
        )

    return violations


def label_length(element: Element, config: CheckConfig = DEFAULT_CONFIG) -> List[Violation]:
    """Labels of non-text elements should be concise."""
    if element.should_ignore or element.type in (
        ElementKind.STATIC_TEXT,
        ElementKind.TEXT_VIEW,
    ):
        return []

    if len(element.label) <= config.max_meaningful_length:
        return []

    return [
        make_violation(
            Severity.WARNING,
            "Label is too long",
            element,
            reason=f"Max length: {config.max_meaningful_length}",
            rule=RuleName.LABEL_LENGTH.value,
            length=len(element.label),
        )
    ]


def image_trait(element: Element, config: CheckConfig = DEFAULT_CONFIG) -> List[Violation]:
    """Images should carry the image trait. Unknown traits are not judged."""
    if element.type != ElementKind.IMAGE or element.traits is None:
        return []
    if Trait.IMAGE in element.traits:
        return []
    return [
        make_violation(
            Severity.FAILURE,
            "Image should have Image trait",
            element,
            reason=f"Traits: {trait_names(element.traits)}",
            rule=RuleName.IMAGE_TRAIT.value,
        )
    ]


def button_trait(element: Element, config: CheckConfig = DEFAULT_CONFIG) -> List[Violation]:
    """Buttons should carry the button or link trait. Unknown traits are not judged."""
    if element.type != ElementKind.BUTTON or element.traits is None:
        return []
    if Trait.BUTTON in element.traits or Trait.LINK in element.traits:
        return []
    return [
        make_violation(
            Severity.FAILURE,
            "Button should have Button or Link trait",
            element,
            reason=f"Traits: {trait_names(element.traits)}",
            rule=RuleName.BUTTON_TRAIT.value,
        )
    ]


def conflicting_traits(
    element: Element, config: CheckConfig = DEFAULT_CONFIG
) -> List[Violation]:
    """
    Some trait combinations contradict each other.

    - button + link: failure
    - staticText + updatesFrequently: failure
    - page turn / sound / media traits without button: warning
    """
    traits = element.traits
    if traits is None or element.should_ignore:
        return []

    rule = RuleName.CONFLICTING_TRAITS.value
    violations = []

    if Trait.BUTTON in traits and Trait.LINK in traits:
        violations.append(
            make_violation(
                Severity.FAILURE,
                "Elements shouldn't have both Button and Link traits",
                element,
                rule=rule,
            )
        )

    if Trait.STATIC_TEXT in traits and Trait.UPDATES_FREQUENTLY in traits:
        violations.append(
            make_violation(
                Severity.FAILURE,
                "Elements shouldn't have both Static Text and Updates Frequently traits",
                element,
                rule=rule,
            )
        )

    signals = [trait for trait in INTERACTIVE_SIGNAL_TRAITS if trait in traits]
    if signals and Trait.BUTTON not in traits:
        violations.append(
            make_violation(
                Severity.WARNING,
                f"Elements with {trait_names(signals)} traits should also have a Button trait",
                element,
                rule=rule,
                traits=[trait.value for trait in Trait.ordered(signals)],
            )
        )

    return violations


def disabled(element: Element, config: CheckConfig = DEFAULT_CONFIG) -> List[Violation]:
    """Disabled controls are flagged for review."""
    if not element.is_control or element.enabled:
        return []
    return [
        make_violation(
            Severity.WARNING,
            "Element disabled",
            element,
            rule=RuleName.DISABLED.value,
        )
    ]


def has_header_trait(element: Element) -> bool:
    """Accumulator predicate for the header rule."""
    return element.has_trait(Trait.HEADER)


def missing_header(header_seen: bool) -> List[Violation]:
    """Finalizer for the header rule: one failure if no header was seen."""
    if header_seen:
        return []
    return [
        make_violation(
            Severity.FAILURE,
            "Screen has no element with a header trait",
            rule=RuleName.HEADER.value,
        )
    ]


def header(elements: Sequence[Element]) -> List[Violation]:
    """The screen should expose at least one header. Ignored containers do not count."""
    return missing_header(
        any(has_header_trait(e) for e in elements if not e.should_ignore)
    )


def is_duplicate_pair(first: Element, second: Element) -> bool:
    """
    Two distinct controls sharing a non-empty label.
    """
    return (
        first.is_control
        and second.is_control
        and not first.same_node(second)
        and bool(first.label)
        and first.label == second.label
    )


def duplicated_pair(first: Element, second: Element) -> List[Violation]:
    """Pairwise form of the duplicate-label rule."""
    if not is_duplicate_pair(first, second):
        return []
    return [duplicate_group_violation(first.label, [first, second])]


def duplicate_group_violation(label: str, members: Sequence[Element]) -> Violation:
    return make_violation(
        Severity.WARNING,
        "Elements have duplicated labels",
        *members,
        rule=RuleName.DUPLICATED.value,
        label=label,
        count=len(members),
    )


def group_duplicates(elements: Sequence[Element]) -> Dict[str, List[Element]]:
    """
    Group controls by shared label.

    Returns:
        label -> distinct members, for labels shared by at least two distinct
        controls, in first-seen order
    """
    groups: Dict[str, Dict] = {}
    for first in elements:
        for second in elements:
            if not is_duplicate_pair(first, second):
                continue
            members = groups.setdefault(first.label, {})
            members.setdefault(first.id, first)
            members.setdefault(second.id, second)
    return {label: list(members.values()) for label, members in groups.items()}


def duplicated(elements: Sequence[Element]) -> List[Violation]:
    """One warning per label shared by several distinct controls."""
    return [
        duplicate_group_violation(label, members)
        for label, members in group_duplicates(elements).items()
    ]


SINGLE_ELEMENT_RULES = (
    (RuleName.MINIMUM_SIZE, minimum_size),
    (RuleName.MINIMUM_INTERACTIVE_SIZE, minimum_interactive_size),
    (RuleName.LABEL_PRESENCE, label_presence),
    (RuleName.BUTTON_LABEL, button_label),
    (RuleName.IMAGE_LABEL, image_label),
    (RuleName.LABEL_LENGTH, label_length),
    (RuleName.IMAGE_TRAIT, image_trait),
    (RuleName.BUTTON_TRAIT, button_trait),
)

TRAILING_RULES = (
    (RuleName.DISABLED, disabled),
    (RuleName.CONFLICTING_TRAITS, conflicting_traits),
)
