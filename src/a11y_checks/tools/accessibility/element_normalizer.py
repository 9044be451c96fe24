"""
Raw element normalization.

Converts whatever a host adapter hands over (dicts, platform wrapper objects,
XCUITest-style element types, macOS AX roles) into immutable Element records.

Normalization is total: a malformed raw element still yields an Element.
Trait extraction is best-effort and degrades to traits=None on any platform
error instead of aborting the run.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, FrozenSet, Iterable, List, Optional

from ...schemas.element import Element, ElementKind, Rect, Trait

logger = logging.getLogger(__name__)

_MISSING = object()

_KIND_LOOKUP = {kind.value.lower(): kind for kind in ElementKind}

_KIND_ALIASES = {
    "label": ElementKind.STATIC_TEXT,
    "text": ElementKind.STATIC_TEXT,
    "textarea": ElementKind.TEXT_VIEW,
    "edit": ElementKind.TEXT_FIELD,
    "toggle": ElementKind.SWITCH,
    "checkbox": ElementKind.SWITCH,
    "hyperlink": ElementKind.LINK,
    "pushbutton": ElementKind.BUTTON,
    "popupbutton": ElementKind.BUTTON,
    "menubutton": ElementKind.BUTTON,
    "radiobutton": ElementKind.BUTTON,
    "row": ElementKind.CELL,
    "listitem": ElementKind.CELL,
    "combobox": ElementKind.PICKER,
    "group": ElementKind.OTHER,
}

_TRAIT_LOOKUP = {}
for _trait in Trait:
    _TRAIT_LOOKUP[_trait.value.lower()] = _trait
    _TRAIT_LOOKUP[_trait.human_name.lower().replace(" ", "")] = _trait

_PLATFORM_PREFIXES = ("XCUIElementType", "AX")


def normalize_kind(role: Any) -> ElementKind:
    """
    Normalize a platform element type to an ElementKind.

    Strips "XCUIElementType" and "AX" prefixes, ignores case, spaces,
    underscores and hyphens. Unknown roles become ElementKind.OTHER.

    Args:
        role: ElementKind, kind value ("staticText") or platform role
              ("AXButton", "XCUIElementTypeStaticText", "push button")

    Returns:
        Normalized ElementKind
    """
    if isinstance(role, ElementKind):
        return role
    if role is None:
        return ElementKind.OTHER

    text = str(role).strip()
    for prefix in _PLATFORM_PREFIXES:
        if text.startswith(prefix) and len(text) > len(prefix) and text[len(prefix)].isupper():
            text = text[len(prefix):]
            break

    key = "".join(c for c in text.lower() if c not in " _-")
    if not key:
        return ElementKind.OTHER

    kind = _KIND_LOOKUP.get(key) or _KIND_ALIASES.get(key)
    if kind is None:
        logger.debug("Unknown element type %r, treating as other", role)
        return ElementKind.OTHER
    return kind


def parse_traits(value: Any) -> Optional[FrozenSet[Trait]]:
    """
    Parse traits from names, a bitmask or an existing trait collection.

    Args:
        value: None, an int bitmask, a comma-separated string, or an
               iterable of Trait / trait names ("playsSound", "Plays Sound")

    Returns:
        Frozen set of traits, or None when value is None
    """
    if value is None:
        return None
    if isinstance(value, Trait):
        return frozenset({value})
    if isinstance(value, bool):
        raise TypeError("trait value cannot be a bool")
    if isinstance(value, int):
        return Trait.from_mask(value)
    if isinstance(value, str):
        value = [part for part in value.split(",") if part.strip()]

    traits = set()
    for item in value:
        if isinstance(item, Trait):
            traits.add(item)
            continue
        key = str(item).strip().lower().replace(" ", "").replace("_", "")
        trait = _TRAIT_LOOKUP.get(key)
        if trait is None:
            logger.debug("Ignoring unknown trait %r", item)
            continue
        traits.add(trait)
    return frozenset(traits)


def _read(raw: Any, *names: str) -> Any:
    """Read the first present key or attribute. Platform errors count as absent."""
    for name in names:
        try:
            if isinstance(raw, Mapping):
                value = raw.get(name, _MISSING)
            else:
                value = getattr(raw, name, _MISSING)
        except Exception as e:
            logger.debug("Reading %r from raw element failed: %s", name, e)
            continue
        if value is not _MISSING:
            return value
    return _MISSING


def _coerce_rect(value: Any) -> Rect:
    if value is _MISSING or value is None:
        return Rect()
    if isinstance(value, Rect):
        return value
    try:
        if isinstance(value, Mapping):
            return Rect(
                x=float(value.get("x", 0.0)),
                y=float(value.get("y", 0.0)),
                width=float(value.get("width", 0.0)),
                height=float(value.get("height", 0.0)),
            )
        if hasattr(value, "width") and hasattr(value, "height"):
            return Rect(
                x=float(getattr(value, "x", 0.0)),
                y=float(getattr(value, "y", 0.0)),
                width=float(value.width),
                height=float(value.height),
            )
        x, y, w, h = value
        return Rect(x=float(x), y=float(y), width=float(w), height=float(h))
    except (TypeError, ValueError) as e:
        logger.debug("Unusable frame %r: %s", value, e)
        return Rect()


def _coerce_text(value: Any) -> Optional[str]:
    if value is _MISSING or value is None:
        return None
    return str(value)


def _coerce_enabled(value: Any) -> bool:
    if value is _MISSING or value is None:
        return True
    if callable(value):
        try:
            value = value()
        except Exception as e:
            logger.debug("Reading enabled state failed: %s", e)
            return True
    return bool(value)


def extract_traits(
    raw: Any, trait_reader: Optional[Callable[[Any], Any]] = None
) -> Optional[FrozenSet[Trait]]:
    """
    Best-effort trait extraction.

    Args:
        raw: Raw element
        trait_reader: Fallback used when the raw element carries no traits,
                      typically ElementSource.get_traits

    Returns:
        Trait set, or None if traits are unavailable or unreadable
    """
    try:
        value = _read(raw, "traits")
        if (value is _MISSING or value is None) and trait_reader is not None:
            value = trait_reader(raw)
        if value is _MISSING:
            return None
        if callable(value):
            value = value()
        return parse_traits(value)
    except Exception as e:
        logger.debug("Unable to read traits, treating as unknown: %s", e)
        return None


def from_raw(
    raw: Any, trait_reader: Optional[Callable[[Any], Any]] = None
) -> Element:
    """
    Normalize one raw element.

    Args:
        raw: Mapping or attribute object (see protocol.RawElement)
        trait_reader: Optional fallback for reading traits

    Returns:
        Immutable Element
    """
    if isinstance(raw, Element):
        return raw

    frame = _read(raw, "frame")
    if frame is _MISSING or frame is None:
        frame = _read(raw, "bounds")

    kind = _read(raw, "type", "element_type", "elementType", "role")

    values = {
        "label": _coerce_text(_read(raw, "label")) or "",
        "frame": _coerce_rect(frame),
        "type": normalize_kind(None if kind is _MISSING else kind),
        "traits": extract_traits(raw, trait_reader),
        "enabled": _coerce_enabled(_read(raw, "enabled", "is_enabled", "isEnabled")),
        "placeholder": _coerce_text(
            _read(raw, "placeholder", "placeholder_value", "placeholderValue")
        ),
        "value": _coerce_text(_read(raw, "value")),
        "identifier": _coerce_text(_read(raw, "identifier")) or "",
    }

    element_id = _read(raw, "id")
    if isinstance(element_id, (str, int)) and not isinstance(element_id, bool):
        values["id"] = element_id

    return Element(**values)


def normalize_elements(
    raws: Iterable[Any],
    trait_reader: Optional[Callable[[Any], Any]] = None,
    ignored_identifiers: Iterable[str] = (),
) -> List[Element]:
    """
    Normalize a screen's worth of raw elements, preserving order.

    Args:
        raws: Raw elements in screen order
        trait_reader: Optional fallback for reading traits
        ignored_identifiers: Identifiers of elements to leave out

    Returns:
        List of Elements
    """
    skip = set(ignored_identifiers)
    elements = []
    for raw in raws:
        element = from_raw(raw, trait_reader)
        if skip and element.identifier in skip:
            logger.debug("Skipping ignored element %s", element.display_name)
            continue
        elements.append(element)
    return elements
