"""
Element sources and raw element normalization.

The shared modules here are platform-agnostic. Platform adapters implement
ElementSource and hand raw elements to the normalizer.
"""

from .element_normalizer import (
    extract_traits,
    from_raw,
    normalize_elements,
    normalize_kind,
    parse_traits,
)
from .protocol import ElementSource, RawElement, StaticElementSource

__all__ = [
    "ElementSource",
    "StaticElementSource",
    "RawElement",
    "from_raw",
    "normalize_elements",
    "normalize_kind",
    "parse_traits",
    "extract_traits",
]
