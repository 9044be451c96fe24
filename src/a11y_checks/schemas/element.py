"""
Platform-neutral element model.

An Element is the normalized, immutable form of one on-screen accessibility
node. Platform adapters produce raw elements; the normalizer turns them into
these records before any rule sees them.
"""

import uuid
from enum import Enum
from typing import FrozenSet, Iterable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class ElementKind(str, Enum):
    """Closed set of element types. Unrecognized platform types map to OTHER."""

    BUTTON = "button"
    CELL = "cell"
    IMAGE = "image"
    STATIC_TEXT = "staticText"
    TEXT_FIELD = "textField"
    SWITCH = "switch"
    SLIDER = "slider"
    STEPPER = "stepper"
    SEGMENTED_CONTROL = "segmentedControl"
    LINK = "link"
    SEARCH_FIELD = "searchField"
    SECURE_TEXT_FIELD = "secureTextField"
    DATE_PICKER = "datePicker"
    PICKER = "picker"
    PICKER_WHEEL = "pickerWheel"
    TEXT_VIEW = "textView"
    PAGE_INDICATOR = "pageIndicator"
    ALERT = "alert"
    ACTIVITY_INDICATOR = "activityIndicator"
    DIALOG = "dialog"
    PROGRESS_INDICATOR = "progressIndicator"
    TOOLBAR = "toolbar"
    COLLECTION_VIEW = "collectionView"
    WEB_VIEW = "webView"
    WINDOW = "window"
    SCROLL_VIEW = "scrollView"
    SCROLL_BAR = "scrollBar"
    TABLE = "table"
    NAVIGATION_BAR = "navigationBar"
    TAB_BAR = "tabBar"
    KEY = "key"
    KEYBOARD = "keyboard"
    OTHER = "other"

    @property
    def human_name(self) -> str:
        """Name used in violation messages, e.g. "Text Field"."""
        return KIND_NAMES.get(self, "Other")


KIND_NAMES = {
    ElementKind.STATIC_TEXT: "Label",
    ElementKind.BUTTON: "Button",
    ElementKind.TEXT_FIELD: "Text Field",
    ElementKind.CELL: "Cell",
    ElementKind.SWITCH: "Switch",
    ElementKind.ALERT: "Alert",
    ElementKind.PAGE_INDICATOR: "Page Indicator",
    ElementKind.ACTIVITY_INDICATOR: "Activity Indicator",
    ElementKind.LINK: "Link",
    ElementKind.SEARCH_FIELD: "Search Field",
    ElementKind.SLIDER: "Slider",
    ElementKind.TEXT_VIEW: "Text View",
    ElementKind.SECURE_TEXT_FIELD: "Secure Text Field",
    ElementKind.DATE_PICKER: "Date Picker",
    ElementKind.STEPPER: "Stepper",
    ElementKind.DIALOG: "Dialog",
    ElementKind.PROGRESS_INDICATOR: "Progress Indicator",
    ElementKind.SEGMENTED_CONTROL: "Segmented Control",
    ElementKind.PICKER: "Picker",
    ElementKind.PICKER_WHEEL: "Picker Wheel",
    ElementKind.IMAGE: "Image",
}

IGNORED_KINDS: FrozenSet[ElementKind] = frozenset(
    {
        ElementKind.WINDOW,
        ElementKind.SCROLL_BAR,
        ElementKind.OTHER,
        ElementKind.NAVIGATION_BAR,
        ElementKind.TABLE,
        ElementKind.SCROLL_VIEW,
        ElementKind.KEY,
        ElementKind.KEYBOARD,
        ElementKind.TAB_BAR,
    }
)

# Switches, steppers, sliders, segmented controls and text fields are
# interactive too, but their stock implementations are smaller than the
# interactive minimum, so the strict size rule only covers these by default.
INTERACTIVE_KINDS: FrozenSet[ElementKind] = frozenset(
    {ElementKind.BUTTON, ElementKind.CELL}
)

CONTROL_KINDS: FrozenSet[ElementKind] = frozenset(
    {
        ElementKind.BUTTON,
        ElementKind.SLIDER,
        ElementKind.STEPPER,
        ElementKind.SEGMENTED_CONTROL,
        ElementKind.TEXT_FIELD,
        ElementKind.SWITCH,
        ElementKind.PAGE_INDICATOR,
        ElementKind.LINK,
        ElementKind.SEARCH_FIELD,
        ElementKind.SECURE_TEXT_FIELD,
        ElementKind.DATE_PICKER,
        ElementKind.PICKER,
        ElementKind.PICKER_WHEEL,
        ElementKind.CELL,
    }
)


class Trait(str, Enum):
    """Semantic accessibility traits. Declaration order is display order."""

    BUTTON = "button"
    LINK = "link"
    HEADER = "header"
    SEARCH_FIELD = "searchField"
    IMAGE = "image"
    SELECTED = "selected"
    PLAYS_SOUND = "playsSound"
    KEYBOARD_KEY = "keyboardKey"
    STATIC_TEXT = "staticText"
    SUMMARY_ELEMENT = "summaryElement"
    NOT_ENABLED = "notEnabled"
    UPDATES_FREQUENTLY = "updatesFrequently"
    STARTS_MEDIA_SESSION = "startsMediaSession"
    ADJUSTABLE = "adjustable"
    ALLOWS_DIRECT_INTERACTION = "allowsDirectInteraction"
    CAUSES_PAGE_TURN = "causesPageTurn"
    TAB_BAR = "tabBar"

    @property
    def human_name(self) -> str:
        return TRAIT_NAMES[self]

    @property
    def mask(self) -> int:
        return TRAIT_MASKS[self]

    @classmethod
    def from_mask(cls, mask: int) -> FrozenSet["Trait"]:
        """
        Decode a platform trait bitmask.

        Args:
            mask: Integer bitmask as exposed by the platform

        Returns:
            Set of traits whose bit is set. Unknown bits are ignored.
        """
        return frozenset(trait for trait in cls if mask & TRAIT_MASKS[trait])

    @classmethod
    def ordered(cls, traits: Iterable["Trait"]) -> list:
        """Sort traits into declaration order."""
        present = set(traits)
        return [trait for trait in cls if trait in present]


TRAIT_NAMES = {
    Trait.BUTTON: "Button",
    Trait.LINK: "Link",
    Trait.HEADER: "Header",
    Trait.SEARCH_FIELD: "Search Field",
    Trait.IMAGE: "Image",
    Trait.SELECTED: "Selected",
    Trait.PLAYS_SOUND: "Plays Sound",
    Trait.KEYBOARD_KEY: "Keyboard Key",
    Trait.STATIC_TEXT: "Static Text",
    Trait.SUMMARY_ELEMENT: "Summary Element",
    Trait.NOT_ENABLED: "Not Enabled",
    Trait.UPDATES_FREQUENTLY: "Updates Frequently",
    Trait.STARTS_MEDIA_SESSION: "Starts Media Session",
    Trait.ADJUSTABLE: "Adjustable",
    Trait.ALLOWS_DIRECT_INTERACTION: "Allows Direct Interaction",
    Trait.CAUSES_PAGE_TURN: "Causes Page Turn",
    Trait.TAB_BAR: "Tab Bar",
}

TRAIT_MASKS = {
    Trait.BUTTON: 1 << 0,
    Trait.LINK: 1 << 1,
    Trait.IMAGE: 1 << 2,
    Trait.SELECTED: 1 << 3,
    Trait.PLAYS_SOUND: 1 << 4,
    Trait.KEYBOARD_KEY: 1 << 5,
    Trait.STATIC_TEXT: 1 << 6,
    Trait.SUMMARY_ELEMENT: 1 << 7,
    Trait.NOT_ENABLED: 1 << 8,
    Trait.UPDATES_FREQUENTLY: 1 << 9,
    Trait.SEARCH_FIELD: 1 << 10,
    Trait.STARTS_MEDIA_SESSION: 1 << 11,
    Trait.ADJUSTABLE: 1 << 12,
    Trait.ALLOWS_DIRECT_INTERACTION: 1 << 13,
    Trait.CAUSES_PAGE_TURN: 1 << 14,
    Trait.TAB_BAR: 1 << 15,
    Trait.HEADER: 1 << 16,
}


class Rect(BaseModel):
    """Screen-space bounding box."""

    model_config = ConfigDict(frozen=True)

    x: float = Field(default=0.0, description="Left edge")
    y: float = Field(default=0.0, description="Top edge")
    width: float = Field(default=0.0, description="Width in points")
    height: float = Field(default=0.0, description="Height in points")


def _new_element_id() -> str:
    return uuid.uuid4().hex


class Element(BaseModel):
    """
    Normalized accessibility node under test.

    Elements are immutable and only identified by `id`. Two distinct
    controls may share a label - that is what the duplicate check looks for.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(default="", description="Accessible name, may be empty")
    frame: Rect = Field(default_factory=Rect, description="Bounding box")
    type: ElementKind = Field(default=ElementKind.OTHER, description="Element kind")
    traits: Optional[FrozenSet[Trait]] = Field(
        default=None, description="Traits, or None when the platform hid them"
    )
    enabled: bool = Field(default=True, description="Whether the element is enabled")
    placeholder: Optional[str] = Field(
        default=None, description="Placeholder text for input elements"
    )
    value: Optional[str] = Field(default=None, description="Current value")
    identifier: str = Field(default="", description="Accessibility identifier")
    id: Union[str, int] = Field(
        default_factory=_new_element_id,
        description="Opaque per-element identity, never persisted",
    )

    @property
    def should_ignore(self) -> bool:
        """Structural containers excluded from almost every rule."""
        return self.type in IGNORED_KINDS

    @property
    def is_interactive(self) -> bool:
        return self.type in INTERACTIVE_KINDS

    @property
    def is_control(self) -> bool:
        return self.type in CONTROL_KINDS

    @property
    def display_name(self) -> str:
        """Element description used in messages, e.g. '"Save" Button'."""
        name = self.label or self.identifier or "[No identifier]"
        return f'"{name}" {self.type.human_name}'

    def has_trait(self, trait: Trait) -> bool:
        """True only when traits are known and contain `trait`."""
        return self.traits is not None and trait in self.traits

    def same_node(self, other: "Element") -> bool:
        return self.id == other.id
