"""Selector model: part categories and rendered selector parts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Kinds of compound selector parts, declared in their required order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudoClass"
    PSEUDO_ELEMENT = "pseudoElement"

    @property
    def rank(self) -> int:
        """Zero-based position of this category in the fixed order."""
        return CATEGORY_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        """True if at most one part of this category may appear."""
        return self in _SINGLETONS


CATEGORY_ORDER: tuple[Category, ...] = tuple(Category)

_SINGLETONS = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

# (prefix, suffix) wrapped around the raw value of each category.
_MARKERS: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


@dataclass(frozen=True)
class SelectorPart:
    """One atomic piece of a compound selector.

    ``fragment`` is the final text for the part, marker included
    (``#main``, ``.box``, ``[href]``, ``:hover``, ``::before``).
    """

    category: Category
    fragment: str

    @classmethod
    def create(cls, category: Category, value: object) -> SelectorPart:
        """Render *value* with the marker for *category*."""
        prefix, suffix = _MARKERS[category]
        return cls(category=category, fragment=f"{prefix}{value}{suffix}")
