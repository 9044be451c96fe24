"""
Platform-agnostic protocol for element sources.

Host adapters (an XCUITest bridge, a desktop accessibility API wrapper, a
recorded JSON dump) implement ElementSource. The checker never walks a live
screen itself - it only consumes what a source returns.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Union

RawElement = Union[Dict[str, Any], Any]
"""
A raw element is either a mapping or an object with attributes. Recognized
keys/attributes:
    - label: Accessible name
    - frame: {x, y, width, height} mapping or [x, y, width, height]
    - bounds: [x, y, width, height] (used when frame is absent)
    - type / element_type / role: Element kind or platform role name
    - traits: Iterable of trait names, an integer bitmask, or a callable
      returning either. None when the platform cannot expose them.
    - enabled / is_enabled: Enabled state
    - placeholder / placeholder_value: Placeholder text
    - value: Current value
    - identifier: Accessibility identifier
    - id: Optional caller-supplied identity
"""


class ElementSource(ABC):
    """
    Contract for anything that can list the elements of the current screen.
    """

    @abstractmethod
    def get_elements(self) -> Sequence[RawElement]:
        """
        Get every accessibility element currently on screen, in screen order.

        Returns:
            Sequence of raw elements
        """
        ...

    def get_traits(self, raw: RawElement) -> Optional[Any]:
        """
        Read traits for one element when they are not part of the raw record.

        Default implementation returns None (traits unknown). Adapters that
        need private platform calls to read traits override this.
        """
        return None


class StaticElementSource(ElementSource):
    """Element source over a fixed list, e.g. a recorded screen dump."""

    def __init__(self, elements: Sequence[RawElement]):
        self._elements: List[RawElement] = list(elements)

    def get_elements(self) -> Sequence[RawElement]:
        return list(self._elements)
