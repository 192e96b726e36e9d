"""Chainable builder for CSS selector strings."""

from __future__ import annotations

import logging

from selectorkit.errors import DuplicateSelectorPartError, SelectorOrderError
from selectorkit.selector.model import Category, SelectorPart

logger = logging.getLogger(__name__)


class SelectorBuilder:
    """Accumulates selector parts, or a combination of two selectors.

    Parts must follow the category order
    ``element, id, class, attribute, pseudo-class, pseudo-element``; element,
    id and pseudo-element may appear at most once. Every mutator returns the
    builder itself so calls can be chained::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    ``render()`` consumes the accumulated parts: it returns the selector text
    and clears the builder's sequences.
    """

    def __init__(self) -> None:
        self.parts: list[SelectorPart] = []
        self.combination: list[str] = []
        self._seen: set[Category] = set()

    def __repr__(self) -> str:
        pending = "".join(part.fragment for part in self.parts)
        if not pending:
            pending = "".join(self.combination)
        return f"SelectorBuilder({pending!r})"

    # ------------------------------------------------------------------
    # Compound selector parts
    # ------------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._add(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._add(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        # Pseudo-elements are appended without an order check.
        return self._add(Category.PSEUDO_ELEMENT, value, check_order=False)

    def _add(
        self, category: Category, value: str, *, check_order: bool = True
    ) -> SelectorBuilder:
        if category.is_singleton:
            if category in self._seen:
                logger.debug("Rejected duplicate %s part %r", category.value, value)
                raise DuplicateSelectorPartError(category)
            self._seen.add(category)

        self.parts.append(SelectorPart.create(category, value))
        if check_order:
            self.check_order(category)
        return self

    def check_order(self, category: Category | None = None) -> None:
        """Raise SelectorOrderError if any part follows a later-category part.

        The error names *category*, the part just appended, when given.
        The offending part is left in place.
        """
        highest = -1
        for part in self.parts:
            rank = part.category.rank
            if rank < highest:
                logger.debug(
                    "Out-of-order %s part %r", part.category.value, part.fragment
                )
                raise SelectorOrderError(category or part.category)
            highest = rank

    # ------------------------------------------------------------------
    # Combinators
    # ------------------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Join two selectors with *combinator* (``' '``, ``'+'``, ``'~'``, ``'>'``).

        Both operands are rendered immediately, which consumes them. The
        combinator is embedded verbatim with one space on each side. Repeated
        calls append to the same combination.
        """
        left_text = left.render()
        right_text = right.render()
        logger.debug("Combining %r %r %r", left_text, combinator, right_text)
        self.combination.extend([left_text, f" {combinator} ", right_text])
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str | None:
        """Return the selector text and clear the builder.

        Parts are joined in insertion order; a builder without parts renders
        its combination instead. An empty builder renders as None.
        """
        selector: str | None = None
        if self.parts:
            selector = "".join(part.fragment for part in self.parts)
        elif self.combination:
            selector = "".join(self.combination)

        self.parts = []
        self.combination = []
        logger.debug("Rendered selector %r", selector)
        return selector

    stringify = render
