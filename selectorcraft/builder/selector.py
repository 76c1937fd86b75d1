"""Chainable CSS selector builder."""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from selectorcraft.exceptions import DuplicateUniquePartError, OutOfOrderError
from selectorcraft.types import PartKind

logger = structlog.get_logger(__name__)

# Rank follows declaration order: element=1 ... pseudo-element=6
PART_RANK: dict[PartKind, int] = {kind: i for i, kind in enumerate(PartKind, start=1)}

PART_SYNTAX: dict[PartKind, str] = {
    PartKind.ELEMENT: "{}",
    PartKind.ID: "#{}",
    PartKind.CLASS: ".{}",
    PartKind.ATTRIBUTE: "[{}]",
    PartKind.PSEUDO_CLASS: ":{}",
    PartKind.PSEUDO_ELEMENT: "::{}",
}

UNIQUE_PARTS: frozenset[PartKind] = frozenset(
    {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}
)

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time inside the selector."
)
OUT_OF_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element."
)


@dataclass(frozen=True, slots=True)
class Selector:
    """An immutable snapshot of a selector under construction.

    Every append returns a new Selector; the receiver is never modified, so a
    value can be reused as the prefix of several chains.
    """

    text: str = ""
    last_kind: PartKind | None = None
    rank: int = 0

    def element(self, value: str) -> Selector:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> Selector:
        return self._append(PartKind.ID, value)

    def class_(self, value: str) -> Selector:
        return self._append(PartKind.CLASS, value)

    def attr(self, value: str) -> Selector:
        return self._append(PartKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._append(PartKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._append(PartKind.PSEUDO_ELEMENT, value)

    def stringify(self) -> str:
        """Return the rendered selector."""
        return self.text

    def __str__(self) -> str:
        return self.stringify()

    def _append(self, kind: PartKind, value: str) -> Selector:
        """Validate the new part against this selector and return the extended copy."""
        rank = PART_RANK[kind]

        if kind in UNIQUE_PARTS and self.last_kind == kind:
            logger.debug("selector_part_rejected", kind=str(kind), value=value, current=self.text)
            raise DuplicateUniquePartError(DUPLICATE_PART_MESSAGE)

        if self.rank > rank:
            logger.debug("selector_part_rejected", kind=str(kind), value=value, current=self.text)
            raise OutOfOrderError(OUT_OF_ORDER_MESSAGE)

        return Selector(
            text=self.text + PART_SYNTAX[kind].format(value),
            last_kind=kind,
            rank=rank,
        )


_EMPTY = Selector()


class SelectorBuilder:
    """Stateless facade that starts new selector chains and combines finished ones."""

    def element(self, value: str) -> Selector:
        return _EMPTY.element(value)

    def id(self, value: str) -> Selector:
        return _EMPTY.id(value)

    def class_(self, value: str) -> Selector:
        return _EMPTY.class_(value)

    def attr(self, value: str) -> Selector:
        return _EMPTY.attr(value)

    def pseudo_class(self, value: str) -> Selector:
        return _EMPTY.pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return _EMPTY.pseudo_element(value)

    def combine(self, first: Selector, combinator: str, second: Selector) -> Selector:
        """Join two selectors with a combinator.

        The combinator is spliced verbatim between single spaces, so the
        descendant combinator (a single space) renders as three spaces. The
        result starts a fresh ordering state.
        """
        return Selector(text=f"{first.text} {combinator} {second.text}")


css_selector_builder = SelectorBuilder()
