"""Error hierarchy for the selector builder."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from selectorkit.selector.model import Category

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector builder errors."""

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicateSelectorPartError(SelectorError):
    """An element, id or pseudo-element was added twice to one selector."""

    def __init__(self, category: Category) -> None:
        super().__init__(DUPLICATE_PART_MESSAGE, category=category)


class SelectorOrderError(SelectorError):
    """A part was appended after a part of a later category."""

    def __init__(self, category: Category) -> None:
        super().__init__(ORDER_MESSAGE, category=category)
