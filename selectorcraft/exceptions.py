"""Exception hierarchy for selectorcraft."""


class SelectorCraftError(Exception):
    """Base exception for all selectorcraft errors."""


class SelectorError(SelectorCraftError):
    """Raised when a selector cannot be built from the requested parts."""


class DuplicateUniquePartError(SelectorError):
    """Raised when an element, id or pseudo-element is appended twice."""


class OutOfOrderError(SelectorError):
    """Raised when a selector part is appended after a higher-ranked one."""


class SerializationError(SelectorCraftError):
    """Raised when JSON encoding or decoding fails."""


class ConfigError(SelectorCraftError):
    """Raised when configuration is invalid."""
