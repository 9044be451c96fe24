"""
Rule runner.

Evaluates a rule set over one screen of elements. All per-run state (header
flag, duplicate-label groups) lives in a RunContext created for each call,
so runs never leak into each other.

Evaluation order is fixed, which keeps violation order reproducible for
identical input:

    per element: minimumSize, minimumInteractiveSize, labelPresence,
                 buttonLabel, imageLabel, labelLength, imageTrait,
                 buttonTrait, header (accumulate), disabled,
                 conflictingTraits, duplicated (accumulate)
    finalize:    header, duplicated (one violation per label group)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence

from ..config.check_config import CheckConfig, get_check_config
from ..schemas.element import Element
from ..schemas.violation import Violation
from ..tools.accessibility.element_normalizer import normalize_elements
from ..tools.accessibility.protocol import ElementSource
from .rules.catalogue import (
    SINGLE_ELEMENT_RULES,
    TRAILING_RULES,
    duplicate_group_violation,
    has_header_trait,
    is_duplicate_pair,
    missing_header,
)
from .rules.names import RuleName, resolve_rule_set

logger = logging.getLogger(__name__)


@dataclass
class RunContext:
    """Accumulators for one evaluation."""

    rules: frozenset
    config: CheckConfig
    header_seen: bool = False
    duplicate_groups: Dict[str, Dict[Any, Element]] = field(default_factory=dict)
    violations: List[Violation] = field(default_factory=list)

    def record_duplicate(self, first: Element, second: Element) -> None:
        members = self.duplicate_groups.setdefault(first.label, {})
        members.setdefault(first.id, first)
        members.setdefault(second.id, second)


class RuleRunner:
    """
    Runs requested rules over normalized elements.
    """

    def __init__(self, config: Optional[CheckConfig] = None):
        """
        Args:
            config: Thresholds to use (defaults to get_check_config())
        """
        self.config = (config or get_check_config()).validate()

    def run(self, rules: Iterable, elements: Sequence[Element]) -> List[Violation]:
        """
        Evaluate rules over elements.

        Args:
            rules: Rule names, preset names or RuleName values
            elements: Normalized elements in screen order

        Returns:
            Every violation found, in evaluation order

        Raises:
            ConfigurationError: If a rule name is unknown (before any element
                                is processed)
        """
        context = RunContext(rules=resolve_rule_set(rules), config=self.config)
        elements = list(elements)
        checked = [e for e in elements if not e.should_ignore]

        logger.debug(
            "Evaluating %d rule(s) over %d element(s) (%d ignored)",
            len(context.rules),
            len(elements),
            len(elements) - len(checked),
        )

        for element in checked:
            self._check_element(context, element, elements)

        self._finalize(context)

        logger.info(
            "Accessibility run finished: %d violation(s)", len(context.violations)
        )
        return context.violations

    def _check_element(
        self, context: RunContext, element: Element, elements: Sequence[Element]
    ) -> None:
        rules = context.rules
        config = context.config

        for name, rule in SINGLE_ELEMENT_RULES:
            if name in rules:
                context.violations.extend(rule(element, config))

        if RuleName.HEADER in rules and not context.header_seen:
            context.header_seen = has_header_trait(element)

        for name, rule in TRAILING_RULES:
            if name in rules:
                context.violations.extend(rule(element, config))

        if RuleName.DUPLICATED in rules:
            for other in elements:
                if is_duplicate_pair(element, other):
                    context.record_duplicate(element, other)

    def _finalize(self, context: RunContext) -> None:
        if RuleName.HEADER in context.rules:
            context.violations.extend(missing_header(context.header_seen))

        if RuleName.DUPLICATED in context.rules:
            for label, members in context.duplicate_groups.items():
                context.violations.append(
                    duplicate_group_violation(label, list(members.values()))
                )


def evaluate(
    rules: Iterable,
    elements: Iterable[Any],
    config: Optional[CheckConfig] = None,
    trait_reader: Optional[Callable[[Any], Any]] = None,
) -> List[Violation]:
    """
    Primary entry point: normalize raw elements and evaluate rules.

    Args:
        rules: Rule names, preset names ("all", "images", "interactive",
               "labels") or RuleName values
        elements: Raw elements (mappings, platform objects or Elements)
        config: Thresholds (defaults to get_check_config())
        trait_reader: Fallback trait reader for raw elements without traits

    Returns:
        List of violations

    Raises:
        ConfigurationError: On unknown rule names or invalid configuration
    """
    runner = RuleRunner(config)
    rule_set = resolve_rule_set(rules)
    normalized = normalize_elements(
        elements,
        trait_reader=trait_reader,
        ignored_identifiers=runner.config.ignored_identifiers,
    )
    return runner.run(rule_set, normalized)


def evaluate_source(
    rules: Iterable,
    source: ElementSource,
    config: Optional[CheckConfig] = None,
) -> List[Violation]:
    """
    Evaluate rules over the current screen of an element source.

    The source's `get_traits` is used for elements that carry no traits.
    """
    return evaluate(rules, source.get_elements(), config, trait_reader=source.get_traits)
