"""
Violation message construction.

Pure string assembly: no rule logic lives here. Severity is kept as a field
on Violation; the text only mirrors it.
"""

from typing import Iterable, Optional, Sequence

from ..config.check_config import ItemLabel
from ..schemas.element import Element, Trait
from ..schemas.violation import Severity, Violation


def describe_element(element: Element, item_label: ItemLabel = ItemLabel.LABEL) -> str:
    """
    Describe an element for a report line.

    Args:
        element: Element to describe
        item_label: Prefer the label, the identifier, or show both

    Returns:
        Description like '"Save" Button'
    """
    if item_label == ItemLabel.IDENTIFIER:
        name = element.identifier or element.label or "[No identifier]"
        return f'"{name}" {element.type.human_name}'

    if item_label == ItemLabel.BOTH and element.identifier:
        name = element.label or "[No label]"
        return f'"{name}" ({element.identifier}) {element.type.human_name}'

    return element.display_name


def trait_names(traits: Optional[Iterable[Trait]]) -> str:
    """
    Render traits as a comma separated list of human names.

    Returns:
        "Unknown" for None, "None" for an empty set
    """
    if traits is None:
        return "Unknown"
    ordered = Trait.ordered(traits)
    if not ordered:
        return "None"
    return ", ".join(trait.human_name for trait in ordered)


def format_message(
    severity: Severity,
    message: str,
    elements: Sequence[Element] = (),
    reason: Optional[str] = None,
    item_label: ItemLabel = ItemLabel.LABEL,
) -> str:
    """
    Build the report line for a violation.

    Format: 'Accessibility <Severity>: <message>: <element>, <element>. <reason>.'

    Args:
        severity: Violation severity
        message: Rule message
        elements: Implicated elements (may be empty)
        reason: Optional threshold or offending value
        item_label: How to name elements

    Returns:
        Formatted single string
    """
    if elements:
        described = ", ".join(describe_element(e, item_label) for e in elements)
        element_part = f": {described}."
    else:
        element_part = "."

    reason_part = ""
    if reason:
        reason_part = f" {reason.rstrip('.')}."

    return f"Accessibility {severity.heading}: {message}{element_part}{reason_part}"


def make_violation(
    severity: Severity,
    message: str,
    *elements: Element,
    reason: Optional[str] = None,
    rule: Optional[str] = None,
    **details,
) -> Violation:
    """Shorthand used by rules to build a Violation."""
    return Violation(
        severity=severity,
        message=message,
        reason=reason,
        elements=tuple(elements),
        rule=rule,
        details=details,
    )


def format_report(
    violations: Iterable[Violation], item_label: ItemLabel = ItemLabel.LABEL
) -> str:
    """Format violations one per line, in the order given."""
    return "\n".join(
        format_message(v.severity, v.message, v.elements, v.reason, item_label)
        for v in violations
    )
