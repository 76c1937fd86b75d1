"""selectorcraft: immutable CSS selector builder and small object helpers."""

from selectorcraft.builder.selector import Selector, SelectorBuilder, css_selector_builder
from selectorcraft.exceptions import (
    ConfigError,
    DuplicateUniquePartError,
    OutOfOrderError,
    SelectorCraftError,
    SelectorError,
    SerializationError,
)
from selectorcraft.models.shapes import Rectangle
from selectorcraft.types import Combinator, PartKind
from selectorcraft.utils.serialization import from_json, get_json

__all__ = [
    "Combinator",
    "ConfigError",
    "DuplicateUniquePartError",
    "OutOfOrderError",
    "PartKind",
    "Rectangle",
    "Selector",
    "SelectorBuilder",
    "SelectorCraftError",
    "SelectorError",
    "SerializationError",
    "css_selector_builder",
    "from_json",
    "get_json",
]
