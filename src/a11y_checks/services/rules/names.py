"""
Rule vocabulary and named presets.
"""

from enum import Enum
from typing import FrozenSet, Iterable, Union

from ...errors import ConfigurationError


class RuleName(str, Enum):
    """Stable public rule identifiers."""

    MINIMUM_SIZE = "minimumSize"
    MINIMUM_INTERACTIVE_SIZE = "minimumInteractiveSize"
    LABEL_PRESENCE = "labelPresence"
    BUTTON_LABEL = "buttonLabel"
    IMAGE_LABEL = "imageLabel"
    LABEL_LENGTH = "labelLength"
    IMAGE_TRAIT = "imageTrait"
    BUTTON_TRAIT = "buttonTrait"
    HEADER = "header"
    CONFLICTING_TRAITS = "conflictingTraits"
    DISABLED = "disabled"
    DUPLICATED = "duplicated"


ALL_RULES: FrozenSet[RuleName] = frozenset(RuleName)

IMAGE_RULES: FrozenSet[RuleName] = frozenset(
    {
        RuleName.MINIMUM_SIZE,
        RuleName.LABEL_PRESENCE,
        RuleName.IMAGE_LABEL,
        RuleName.LABEL_LENGTH,
        RuleName.IMAGE_TRAIT,
    }
)

# Valid for any interactive element. Many stock platform controls fail these.
INTERACTIVE_RULES: FrozenSet[RuleName] = frozenset(
    {
        RuleName.MINIMUM_INTERACTIVE_SIZE,
        RuleName.LABEL_PRESENCE,
        RuleName.BUTTON_LABEL,
        RuleName.LABEL_LENGTH,
        RuleName.DUPLICATED,
        RuleName.BUTTON_TRAIT,
        RuleName.DISABLED,
        RuleName.CONFLICTING_TRAITS,
    }
)

LABEL_RULES: FrozenSet[RuleName] = frozenset(
    {
        RuleName.MINIMUM_SIZE,
        RuleName.LABEL_PRESENCE,
        RuleName.CONFLICTING_TRAITS,
    }
)

PRESETS = {
    "all": ALL_RULES,
    "images": IMAGE_RULES,
    "interactive": INTERACTIVE_RULES,
    "labels": LABEL_RULES,
}

_NAME_LOOKUP = {}
for _rule in RuleName:
    _NAME_LOOKUP[_rule.value.lower()] = _rule
    _NAME_LOOKUP[_rule.name.lower()] = _rule


def resolve_rule_set(
    rules: Union[str, RuleName, Iterable[Union[str, RuleName]]],
) -> FrozenSet[RuleName]:
    """
    Resolve rule names and preset names into a rule set.

    Args:
        rules: A RuleName, a rule or preset name, or an iterable of them.
               Names match case-insensitively ("labelPresence",
               "label_presence", "interactive").

    Returns:
        Frozen set of RuleName

    Raises:
        ConfigurationError: If any name is unknown
    """
    if isinstance(rules, (str, RuleName)):
        rules = [rules]

    resolved = set()
    unknown = []
    for item in rules:
        if isinstance(item, RuleName):
            resolved.add(item)
            continue
        key = str(item).strip().lower()
        if key in PRESETS:
            resolved.update(PRESETS[key])
        elif key in _NAME_LOOKUP:
            resolved.add(_NAME_LOOKUP[key])
        else:
            unknown.append(str(item))

    if unknown:
        valid = ", ".join(sorted(r.value for r in RuleName))
        raise ConfigurationError(
            f"Unknown rule name(s): {', '.join(unknown)}. Valid rules: {valid}; "
            f"presets: {', '.join(PRESETS)}"
        )

    return frozenset(resolved)
